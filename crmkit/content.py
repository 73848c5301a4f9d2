"""Content metadata messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import List, Optional

_PREFIX = "CONTENT_TYPE_"


class ContentType(IntEnum):
    UNSPECIFIED = 0
    SHORT = 1
    VLOG = 2
    MOVIE = 3
    AI_GENERATED = 4

    def as_str_name(self) -> str:
        """The name used in the message definition."""
        return _PREFIX + self.name

    @classmethod
    def from_str_name(cls, value: str) -> Optional["ContentType"]:
        """Look up a type by its definition name; None if unknown."""
        if not value.startswith(_PREFIX):
            return None
        return cls.__members__.get(value[len(_PREFIX):])


@dataclass
class Publisher:
    id: int = 0
    name: str = ""
    avatar: str = ""


@dataclass
class Content:
    id: int = 0
    name: str = ""
    description: str = ""
    publishers: List[Publisher] = field(default_factory=list)
    url: str = ""
    image: str = ""
    content_type: ContentType = ContentType.UNSPECIFIED
    created_at: Optional[datetime] = None
    views: int = 0
    likes: int = 0
    dislikes: int = 0

    def to_body(self) -> str:
        """Render the content as a message body."""
        return f"Content: {self!r}"


@dataclass(frozen=True)
class MaterializeRequest:
    """Request for the full metadata of one content id."""

    id: int