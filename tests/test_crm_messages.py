import pytest

from crmkit.crm_messages import (
    RecallRequest,
    RecallResponse,
    RemindRequest,
    RemindResponse,
    WelcomeRequest,
    WelcomeResponse,
)


def test_welcome_request_defaults():
    req = WelcomeRequest()
    assert req.id == ""
    assert req.interval == 0
    assert req.content_ids == []


def test_welcome_request_keeps_values():
    req = WelcomeRequest(id="req-1", interval=7, content_ids=(1, 2, 3))
    assert req.content_ids == [1, 2, 3]
    assert req.interval == 7
    assert req == WelcomeRequest(id="req-1", interval=7, content_ids=[1, 2, 3])


def test_welcome_request_rejects_negative_interval():
    with pytest.raises(ValueError):
        WelcomeRequest(id="x", interval=-1)


def test_welcome_request_rejects_large_content_id():
    with pytest.raises(ValueError):
        WelcomeRequest(id="x", interval=1, content_ids=[2**32])


def test_welcome_request_rejects_non_integer():
    with pytest.raises(TypeError):
        WelcomeRequest(id="x", interval="7")


def test_recall_request_values_and_validation():
    req = RecallRequest(id="r", last_visit_interval=30, content_ids=[4, 5])
    assert req.last_visit_interval == 30
    assert req.content_ids == [4, 5]
    with pytest.raises(ValueError):
        RecallRequest(id="r", last_visit_interval=2**32)
    with pytest.raises(TypeError):
        RecallRequest(id="r", last_visit_interval=1, content_ids=[True])


def test_remind_request_values_and_validation():
    assert RemindRequest(id="m", last_visit_interval=3).last_visit_interval == 3
    with pytest.raises(ValueError):
        RemindRequest(id="m", last_visit_interval=-5)


def test_default_lists_are_independent():
    first = RecallRequest()
    second = RecallRequest()
    first.content_ids.append(1)
    assert second.content_ids == []


@pytest.mark.parametrize("cls", [WelcomeResponse, RecallResponse, RemindResponse])
def test_responses_carry_request_id(cls):
    assert cls(id="abc").id == "abc"
    assert cls().id == ""
    assert cls(id="abc") == cls(id="abc")