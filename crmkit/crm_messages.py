"""Requests and responses of the CRM service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

_U32_MAX = 0xFFFFFFFF


def _check_u32(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field `{name}` must be an integer")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"field `{name}` value {value} is not an unsigned 32-bit integer")


@dataclass
class WelcomeRequest:
    """Welcome users who registered `interval` days ago, showing the given contents."""

    id: str = ""
    interval: int = 0
    content_ids: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_u32("interval", self.interval)
        self.content_ids = list(self.content_ids)
        for value in self.content_ids:
            _check_u32("content_ids", value)


@dataclass
class WelcomeResponse:
    id: str = ""


@dataclass
class RecallRequest:
    """Recall users last seen within `last_visit_interval` days, with contents to watch."""

    id: str = ""
    last_visit_interval: int = 0
    content_ids: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_u32("last_visit_interval", self.last_visit_interval)
        self.content_ids = list(self.content_ids)
        for value in self.content_ids:
            _check_u32("content_ids", value)


@dataclass
class RecallResponse:
    id: str = ""


@dataclass
class RemindRequest:
    """Remind users with unfinished contents, last seen within `last_visit_interval` days."""

    id: str = ""
    last_visit_interval: int = 0

    def __post_init__(self) -> None:
        _check_u32("last_visit_interval", self.last_visit_interval)


@dataclass
class RemindResponse:
    id: str = ""