"""SQL generation for structured user statistics queries."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from crmkit.user_stats import QueryRequest, TimeQuery

logger = logging.getLogger(__name__)

_SELECT = "SELECT email, name FROM user_stats WHERE "


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _rfc3339(value: datetime) -> str:
    """RFC 3339 text with as many fractional digits as the value needs."""
    utc = _to_utc(value)
    if utc.microsecond == 0:
        spec = "seconds"
    elif utc.microsecond % 1000 == 0:
        spec = "milliseconds"
    else:
        spec = "microseconds"
    return utc.isoformat(timespec=spec)


def ids_query(name: str, ids: Iterable[int]) -> str:
    """Condition that the array column `name` contains all of `ids`."""
    values = list(ids)
    if not values:
        return "TRUE"
    return f"array{values} <@ {name}"


def timestamp_query(
    name: str, lower: Optional[datetime], upper: Optional[datetime]
) -> str:
    """Condition that the column `name` falls within the given bounds."""
    if lower is None and upper is None:
        return "TRUE"
    if lower is None:
        return f"{name} <= '{_rfc3339(upper)}'"
    if upper is None:
        return f"{name} >= '{_rfc3339(lower)}'"
    return f"{name} BETWEEN '{_rfc3339(lower)}' AND '{_rfc3339(upper)}'"


def query_to_sql(query: QueryRequest) -> str:
    """Render a structured query as the SQL sent to the database."""
    time_conditions = " AND ".join(
        timestamp_query(name, tq.lower, tq.upper) for name, tq in query.timestamps.items()
    )
    id_conditions = " AND ".join(
        ids_query(name, iq.ids) for name, iq in query.ids.items()
    )
    sql = _SELECT + time_conditions
    if id_conditions:
        sql += " AND " + id_conditions
    logger.info("Generated SQL: %s", sql)
    return sql


def query_with_dt(name: str, lower: datetime, upper: datetime) -> QueryRequest:
    """A query on one time column between two instants, truncated to whole seconds."""
    time_query = TimeQuery(
        lower=_to_utc(lower).replace(microsecond=0),
        upper=_to_utc(upper).replace(microsecond=0),
    )
    return QueryRequest().add_timestamp(name, time_query)