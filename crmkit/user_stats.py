"""Messages of the user statistics service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

_U32_MAX = 0xFFFFFFFF


@dataclass
class User:
    """A user returned by a statistics query."""

    email: str = ""
    name: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"email": self.email, "name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        values = {}
        for key in ("email", "name"):
            if key not in data:
                raise ValueError(f"missing field `{key}`")
            if not isinstance(data[key], str):
                raise ValueError(f"field `{key}` must be a string")
            values[key] = data[key]
        return cls(**values)


@dataclass
class TimeQuery:
    """A time range; either bound may be left open."""

    lower: Optional[datetime] = None
    upper: Optional[datetime] = None


@dataclass
class IdQuery:
    """A set of content ids that must all be present."""

    ids: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ids = list(self.ids)
        for value in self.ids:
            if not 0 <= value <= _U32_MAX:
                raise ValueError(f"id {value} is not an unsigned 32-bit integer")


@dataclass
class QueryRequest:
    """A structured query over time ranges and id sets."""

    timestamps: Dict[str, TimeQuery] = field(default_factory=dict)
    ids: Dict[str, IdQuery] = field(default_factory=dict)

    def add_timestamp(self, name: str, query: TimeQuery) -> "QueryRequest":
        """Add or replace the time range for a column; returns self."""
        self.timestamps[name] = query
        return self

    def add_id(self, name: str, query: IdQuery) -> "QueryRequest":
        """Add or replace the id set for a column; returns self."""
        self.ids[name] = query
        return self


@dataclass
class RawQueryRequest:
    """A query given as SQL text."""

    query: str = ""