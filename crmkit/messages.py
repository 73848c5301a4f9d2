"""Notification messages: e-mail, SMS and in-app, and the send request and response."""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union

_NAMES = (
    "alice", "bob", "carol", "david", "emma", "frank", "grace", "henry",
    "isla", "jack", "karen", "liam", "mia", "noah", "olivia", "paul",
)

FAKE_SUBJECT = "Hello"
FAKE_TITLE = "Hello"
FAKE_BODY = "Hello, world!"


def _new_id() -> str:
    return str(uuid.uuid4())


def _fake_email(rng: random.Random) -> str:
    return f"{rng.choice(_NAMES)}{rng.randrange(1000)}@example.com"


def _fake_phone(rng: random.Random) -> str:
    return "+" + "".join(str(rng.randrange(10)) for _ in range(11))


@dataclass
class EmailMessage:
    """An e-mail to be sent."""

    message_id: str = ""
    subject: str = ""
    sender: str = ""
    recipients: List[str] = field(default_factory=list)
    body: str = ""

    @classmethod
    def fake(cls) -> "EmailMessage":
        """A sample e-mail with a fresh id and made-up addresses."""
        rng = random.SystemRandom()
        return cls(
            message_id=_new_id(),
            sender=_fake_email(rng),
            recipients=[_fake_email(rng)],
            subject=FAKE_SUBJECT,
            body=FAKE_BODY,
        )

    def to_request(self) -> "SendRequest":
        """Wrap the message in a send request."""
        return SendRequest(msg=self)


@dataclass
class SmsMessage:
    """An SMS to be sent."""

    message_id: str = ""
    sender: str = ""
    recipients: List[str] = field(default_factory=list)
    body: str = ""

    @classmethod
    def fake(cls) -> "SmsMessage":
        """A sample SMS with a fresh id and made-up numbers."""
        rng = random.SystemRandom()
        return cls(
            message_id=_new_id(),
            sender=_fake_phone(rng),
            recipients=[_fake_phone(rng)],
            body=FAKE_BODY,
        )

    def to_request(self) -> "SendRequest":
        """Wrap the message in a send request."""
        return SendRequest(msg=self)


@dataclass
class InAppMessage:
    """A message shown inside the app on one device."""

    message_id: str = ""
    device_id: str = ""
    title: str = ""
    body: str = ""

    @classmethod
    def fake(cls) -> "InAppMessage":
        """A sample in-app message with fresh message and device ids."""
        return cls(
            message_id=_new_id(),
            device_id=_new_id(),
            title=FAKE_TITLE,
            body=FAKE_BODY,
        )

    def to_request(self) -> "SendRequest":
        """Wrap the message in a send request."""
        return SendRequest(msg=self)


Message = Union[EmailMessage, SmsMessage, InAppMessage]
_MESSAGE_TYPES = (EmailMessage, SmsMessage, InAppMessage)


@dataclass
class SendRequest:
    """A request to send one message; msg is None when the request carries nothing."""

    msg: Optional[Message] = None

    def __post_init__(self) -> None:
        if self.msg is not None and not isinstance(self.msg, _MESSAGE_TYPES):
            raise TypeError(f"unsupported message type: {type(self.msg).__name__}")


@dataclass
class SendResponse:
    """The answer to a send request: the message id and when it was sent."""

    message_id: str = ""
    timestamp: Optional[datetime] = None