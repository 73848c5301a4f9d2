from datetime import datetime, timezone

import pytest

from crmkit.user_stats import IdQuery, QueryRequest, RawQueryRequest, TimeQuery, User


def test_user_round_trip():
    user = User(email="alice@example.com", name="Alice")
    assert User.from_dict(user.to_dict()) == user
    assert user.to_dict() == {"email": "alice@example.com", "name": "Alice"}


def test_user_from_dict_missing_field():
    with pytest.raises(ValueError, match="name"):
        User.from_dict({"email": "alice@example.com"})


def test_user_from_dict_wrong_type():
    with pytest.raises(ValueError):
        User.from_dict({"email": 1, "name": "Alice"})


def test_query_request_builder_chains_and_replaces():
    d1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    d2 = datetime(2024, 1, 2, tzinfo=timezone.utc)
    first = TimeQuery(lower=d1)
    second = TimeQuery(lower=d1, upper=d2)
    query = (
        QueryRequest()
        .add_timestamp("created_at", first)
        .add_id("viewed_but_not_started", IdQuery([252790]))
        .add_timestamp("created_at", second)
    )
    assert query.timestamps == {"created_at": second}
    assert query.ids["viewed_but_not_started"].ids == [252790]


def test_query_requests_do_not_share_state():
    a = QueryRequest().add_timestamp("created_at", TimeQuery())
    b = QueryRequest()
    assert "created_at" in a.timestamps
    assert b.timestamps == {}


@pytest.mark.parametrize("bad", [-1, 2**32])
def test_id_query_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        IdQuery([1, bad])


def test_time_query_defaults_open():
    tq = TimeQuery()
    assert (tq.lower, tq.upper) == (None, None)


def test_raw_query_request_holds_text():
    sql = "SELECT * FROM user_stats WHERE created_at > '2024-01-01' LIMIT 5"
    assert RawQueryRequest(sql).query == sql
    assert RawQueryRequest().query == ""