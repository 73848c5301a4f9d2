"""Content metadata service: materializes content ids into full metadata."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, AsyncIterator, Iterable, Iterator, List, Sequence, Union

from crmkit.config import MetadataConfig
from crmkit.content import Content, ContentType, MaterializeRequest, Publisher

logger = logging.getLogger(__name__)

CONTENT_URL = "https://placehold.co/1600x900"
CONTENT_IMAGE = "https://placehold.co/1600x900"
PUBLISHER_AVATAR = "https://placehold.co/400x400"

_FIRST_NAMES = (
    "Alice", "Bob", "Carol", "David", "Emma", "Frank", "Grace", "Henry",
    "Isla", "Jack", "Karen", "Liam", "Mia", "Noah", "Olivia", "Paul",
    "Quinn", "Ruby", "Sam", "Tara", "Uma", "Victor", "Wendy", "Xavier",
    "Yara", "Zoe",
)
_LAST_NAMES = (
    "Adams", "Baker", "Clark", "Davis", "Evans", "Foster", "Garcia", "Harris",
    "Irwin", "Johnson", "King", "Lewis", "Miller", "Nelson", "Owens", "Parker",
    "Quincy", "Reed", "Smith", "Turner", "Underwood", "Vance", "Walker",
    "Young", "Zimmerman",
)
_LOREM = (
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing",
    "elit", "sed", "do", "eiusmod", "tempor", "incididunt", "ut", "labore",
    "et", "dolore", "magna", "aliqua", "enim", "ad", "minim", "veniam",
    "quis", "nostrud", "exercitation", "ullamco", "laboris", "nisi",
    "aliquip", "ex", "ea", "commodo", "consequat",
)

RequestSource = Union[Iterable[Any], AsyncIterator[Any]]


def _fake_name(rng: random.Random) -> str:
    return f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}"


def _fake_sentence(rng: random.Random, min_words: int = 3, max_words: int = 7) -> str:
    """A lorem sentence of min_words to max_words - 1 words."""
    words = [rng.choice(_LOREM) for _ in range(rng.randrange(min_words, max_words))]
    words[0] = words[0].capitalize()
    return " ".join(words) + "."


def _days_before(days: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=days)


def _fake_created_at(rng: random.Random) -> datetime:
    start = _days_before(365)
    end = _days_before(0)
    span = (end - start).total_seconds()
    return start + timedelta(seconds=rng.uniform(0, span))


def fake_publisher() -> Publisher:
    """A publisher with a random id and name."""
    rng = random.SystemRandom()
    return Publisher(
        id=rng.randrange(10000, 2000000),
        name=_fake_name(rng),
        avatar=PUBLISHER_AVATAR,
    )


def materialize_content(id: int) -> Content:
    """Full, randomly filled metadata for the content with the given id."""
    rng = random.SystemRandom()
    publisher_count = rng.randrange(2, 10) - 1
    return Content(
        id=id,
        name=_fake_name(rng),
        description=_fake_sentence(rng),
        publishers=[fake_publisher() for _ in range(publisher_count)],
        url=CONTENT_URL,
        image=CONTENT_IMAGE,
        content_type=rng.choice(list(ContentType)),
        created_at=_fake_created_at(rng),
        views=rng.randrange(123432, 10000000),
        likes=rng.randrange(1234, 100000),
        dislikes=rng.randrange(123, 10000),
    )


def requests_for_ids(ids: Iterable[int]) -> Iterator[MaterializeRequest]:
    """One request per distinct id, in order of first appearance."""
    return iter(dict.fromkeys(MaterializeRequest(id=value) for value in ids))


@dataclass
class Tpl:
    """A list of contents rendered into one message body."""

    contents: Sequence[Content] = field(default_factory=list)

    def to_body(self) -> str:
        return f"Tpl: {list(self.contents)!r}"


async def _iterate(source: RequestSource) -> AsyncIterator[Any]:
    if hasattr(source, "__aiter__"):
        async for item in source:  # type: ignore[union-attr]
            yield item
    else:
        for item in source:  # type: ignore[union-attr]
            yield item


class MetadataService:
    """Answers a stream of materialize requests with a stream of contents."""

    def __init__(self, config: MetadataConfig) -> None:
        self.config = config

    def __repr__(self) -> str:
        return f"{type(self).__name__}(port={self.config.server.port})"

    async def materialize(self, requests: RequestSource) -> AsyncIterator[Content]:
        """Yield one content per request; stops at the first failed request item."""
        async for request in _iterate(requests):
            if isinstance(request, BaseException):
                logger.warning("request stream failed: %r", request)
                break
            yield materialize_content(request.id)