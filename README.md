# crmkit

`crmkit` holds the building blocks of a set of customer-relationship
services: their configuration, the messages they exchange, the SQL behind
user statistics queries, and a content metadata service that fills in
content records.

## Modules

### `crmkit.config`

YAML configuration for each service: `MetadataConfig`, `SendConfig`,
`UserStatConfig` and `CrmConfig`. Each has a `server` section and an
`auth` section (`AuthConfig`, with the field `pk`).

- `ServerConfig` has a `port`.
- `UserStatServerConfig` adds `db_url`.
- `CrmServerConfig` adds `sender_email`, `metadata`, `user_stats` and
  `notification`, and an optional `tls` (`TlsConfig` with `cert` and `key`).

`from_dict(data)` builds a config from a mapping. `load()` reads the first
file it finds:

1. a local path, for example `crm/crm.yml`;
2. the same file name under `/etc/config/`;
3. the path named by an environment variable (`METADATA_CONFIG`,
   `SEND_CONFIG`, `USER_STAT_CONFIG` or `CRM_CONFIG`).

`load_config_data(local_path, system_path, env_var)` does the lookup itself
and returns the parsed mapping.

`ConfigError` is raised in these cases:

- no file is found ("Config file not found");
- the YAML is invalid or is not a mapping;
- a field is missing or has the wrong type;
- a port is outside 0–65535.

### `crmkit.user_stats` and `crmkit.user_query`

The messages are:

- `User` (`email`, `name`), with `to_dict` and `from_dict`;
- `TimeQuery`, with optional `lower` and `upper` datetimes;
- `IdQuery`, a list of unsigned 32-bit ids;
- `QueryRequest`, which maps column names to time and id queries;
- `RawQueryRequest`, which holds SQL text.

`QueryRequest.add_timestamp` and `add_id` return the request, so calls can be
chained.

`query_to_sql(query)` renders a `QueryRequest` as
`SELECT email, name FROM user_stats WHERE ...`:

- a time range becomes `BETWEEN`, `>=` or `<=` with RFC 3339 UTC timestamps,
  or `TRUE` when both bounds are open;
- an id set becomes `array[...] <@ column`, or `TRUE` when it is empty.

`timestamp_query` and `ids_query` render single conditions. `query_with_dt`
builds a request for one column between two instants, truncated to whole
seconds.

```python
from datetime import datetime, timezone

from crmkit.user_query import query_to_sql, query_with_dt

lower = datetime(2024, 1, 1, tzinfo=timezone.utc)
upper = datetime(2024, 1, 2, tzinfo=timezone.utc)
print(query_to_sql(query_with_dt("created_at", lower, upper)))
# SELECT email, name FROM user_stats WHERE created_at BETWEEN
#   '2024-01-01T00:00:00+00:00' AND '2024-01-02T00:00:00+00:00'
```

### `crmkit.content` and `crmkit.metadata`

`crmkit.content` defines the content records:

- `Content`, with `to_body()`;
- `Publisher`;
- `MaterializeRequest`;
- `ContentType`, with `as_str_name()` and `from_str_name()`. For example,
  `ContentType.MOVIE` becomes `"CONTENT_TYPE_MOVIE"`, and `from_str_name`
  returns `None` for an unknown name.

`crmkit.metadata` provides the service and its helpers:

- `materialize_content(id)` fills a `Content` with generated sample data.
- `fake_publisher()` does the same for a `Publisher`.
- `requests_for_ids(ids)` yields one `MaterializeRequest` per distinct id,
  in the order each id first appears.
- `Tpl(contents).to_body()` renders a list of contents as one message body.
- `MetadataService.materialize(requests)` is an async generator. It accepts
  a plain or an async iterable and yields one `Content` per request. It stops
  at the first item that is an exception.

```python
import asyncio

from crmkit.config import MetadataConfig
from crmkit.metadata import MetadataService, requests_for_ids


async def main():
    config = MetadataConfig.from_dict(
        {"server": {"port": 50051}, "auth": {"pk": "placeholder"}}
    )
    service = MetadataService(config)
    async for content in service.materialize(requests_for_ids([1, 2, 3])):
        print(content.id, content.name)


asyncio.run(main())
```

### `crmkit.messages`

The message types are `EmailMessage`, `SmsMessage` and `InAppMessage`.

- `to_request()` wraps a message in a `SendRequest`.
- `fake()` builds a sample message with a fresh UUID. Its addresses are at
  example.com.

A `SendRequest` whose `msg` is not one of the three message types raises
`TypeError`. `SendResponse` carries a `message_id` and a `timestamp`.

### `crmkit.crm_messages`

The campaign requests and responses are:

- `WelcomeRequest` and `WelcomeResponse`;
- `RecallRequest` and `RecallResponse`;
- `RemindRequest` and `RemindResponse`.

The interval and id fields must be unsigned 32-bit integers. A value of the
wrong type raises `TypeError`; a value out of range raises `ValueError`.

## What this package does not do

- It runs no network servers and has no clients for them.
- It does not connect to a database. User queries are only rendered as SQL.
- It does not deliver e-mail, SMS or in-app messages.
- It does not verify tokens.
- It does not run the welcome, recall or remind campaigns themselves.
- It has no command-line program.

## Installation

```
pip install crmkit
```

For running the tests:

```
pip install "crmkit[test]"
pytest
```