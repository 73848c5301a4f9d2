import uuid
from datetime import datetime, timezone

import pytest

from crmkit.messages import (
    EmailMessage,
    InAppMessage,
    SendRequest,
    SendResponse,
    SmsMessage,
)


def test_email_fake_fields():
    email = EmailMessage.fake()
    assert email.subject == "Hello"
    assert email.body == "Hello, world!"
    assert len(email.recipients) == 1
    assert email.sender.endswith("@example.com")
    assert email.recipients[0].endswith("@example.com")
    assert str(uuid.UUID(email.message_id)) == email.message_id


def test_fake_ids_are_unique():
    assert EmailMessage.fake().message_id != EmailMessage.fake().message_id
    ids = {SmsMessage.fake().message_id for _ in range(20)}
    assert len(ids) == 20


def test_sms_fake_fields():
    sms = SmsMessage.fake()
    assert sms.body == "Hello, world!"
    assert len(sms.recipients) == 1
    assert sms.sender.startswith("+")
    assert sms.sender[1:].isdigit()
    assert sms.recipients[0][1:].isdigit()


def test_in_app_fake_fields():
    msg = InAppMessage.fake()
    assert msg.title == "Hello"
    assert msg.body == "Hello, world!"
    assert msg.device_id != msg.message_id
    assert str(uuid.UUID(msg.device_id)) == msg.device_id


@pytest.mark.parametrize("factory", [EmailMessage.fake, SmsMessage.fake, InAppMessage.fake])
def test_to_request_wraps_message(factory):
    msg = factory()
    request = msg.to_request()
    assert request.msg is msg
    assert request == SendRequest(msg=msg)


def test_send_request_default_is_empty():
    assert SendRequest().msg is None


def test_send_request_rejects_other_types():
    with pytest.raises(TypeError):
        SendRequest(msg="not a message")


def test_email_defaults_are_independent():
    first = EmailMessage()
    second = EmailMessage()
    first.recipients.append("a@example.com")
    assert second.recipients == []


def test_send_response_holds_values():
    ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
    response = SendResponse(message_id="abc", timestamp=ts)
    assert response.message_id == "abc"
    assert response.timestamp == ts
    assert SendResponse().timestamp is None