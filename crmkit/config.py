"""Configuration of the services, read from YAML files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional

import yaml

_NOT_FOUND = "Config file not found"


class ConfigError(Exception):
    """The configuration could not be found or is invalid."""


def _parse_yaml(stream: Any, source: str) -> dict:
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {source}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config in {source} is not a mapping")
    return data


def load_config_data(local_path: str, system_path: str, env_var: str) -> dict:
    """Read the first config found: local path, system path, then the file named by env_var."""
    for candidate in (local_path, system_path):
        try:
            stream = open(candidate, encoding="utf-8")
        except OSError:
            continue
        with stream:
            return _parse_yaml(stream, candidate)

    env_path = os.environ.get(env_var)
    if env_path is None:
        raise ConfigError(_NOT_FOUND)
    try:
        stream = open(env_path, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot open config file {env_path}: {exc}") from exc
    with stream:
        return _parse_yaml(stream, env_path)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    if key not in data:
        raise ConfigError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, Mapping):
        raise ConfigError(f"field `{key}` must be a mapping")
    return value


def _string(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ConfigError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"field `{key}` must be a string")
    return value


def _port(data: Mapping[str, Any]) -> int:
    if "port" not in data:
        raise ConfigError("missing field `port`")
    value = data["port"]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("field `port` must be an integer")
    if not 0 <= value <= 0xFFFF:
        raise ConfigError(f"port {value} out of range")
    return value


@dataclass(frozen=True)
class AuthConfig:
    pk: str

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "AuthConfig":
        return cls(pk=_string(data, "pk"))


@dataclass(frozen=True)
class TlsConfig:
    cert: str
    key: str

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "TlsConfig":
        return cls(cert=_string(data, "cert"), key=_string(data, "key"))


@dataclass(frozen=True)
class ServerConfig:
    port: int

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "ServerConfig":
        return cls(port=_port(data))


@dataclass(frozen=True)
class UserStatServerConfig:
    port: int
    db_url: str

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "UserStatServerConfig":
        return cls(port=_port(data), db_url=_string(data, "db_url"))


@dataclass(frozen=True)
class CrmServerConfig:
    port: int
    sender_email: str
    metadata: str
    user_stats: str
    notification: str
    tls: Optional[TlsConfig] = None

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "CrmServerConfig":
        tls = TlsConfig._from_dict(_section(data, "tls")) if data.get("tls") is not None else None
        return cls(
            port=_port(data),
            sender_email=_string(data, "sender_email"),
            metadata=_string(data, "metadata"),
            user_stats=_string(data, "user_stats"),
            notification=_string(data, "notification"),
            tls=tls,
        )


@dataclass(frozen=True)
class MetadataConfig:
    server: ServerConfig
    auth: AuthConfig

    LOCAL_PATH: ClassVar[str] = "crm-metadata/metadata.yml"
    SYSTEM_PATH: ClassVar[str] = "/etc/config/metadata.yml"
    ENV_VAR: ClassVar[str] = "METADATA_CONFIG"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MetadataConfig":
        return cls(
            server=ServerConfig._from_dict(_section(data, "server")),
            auth=AuthConfig._from_dict(_section(data, "auth")),
        )

    @classmethod
    def load(cls) -> "MetadataConfig":
        return cls.from_dict(load_config_data(cls.LOCAL_PATH, cls.SYSTEM_PATH, cls.ENV_VAR))


@dataclass(frozen=True)
class SendConfig:
    server: ServerConfig
    auth: AuthConfig

    LOCAL_PATH: ClassVar[str] = "crm-send/send.yml"
    SYSTEM_PATH: ClassVar[str] = "/etc/config/send.yml"
    ENV_VAR: ClassVar[str] = "SEND_CONFIG"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SendConfig":
        return cls(
            server=ServerConfig._from_dict(_section(data, "server")),
            auth=AuthConfig._from_dict(_section(data, "auth")),
        )

    @classmethod
    def load(cls) -> "SendConfig":
        return cls.from_dict(load_config_data(cls.LOCAL_PATH, cls.SYSTEM_PATH, cls.ENV_VAR))


@dataclass(frozen=True)
class UserStatConfig:
    server: UserStatServerConfig
    auth: AuthConfig

    LOCAL_PATH: ClassVar[str] = "user-stat/user_stat.yml"
    SYSTEM_PATH: ClassVar[str] = "/etc/config/user_stat.yml"
    ENV_VAR: ClassVar[str] = "USER_STAT_CONFIG"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserStatConfig":
        return cls(
            server=UserStatServerConfig._from_dict(_section(data, "server")),
            auth=AuthConfig._from_dict(_section(data, "auth")),
        )

    @classmethod
    def load(cls) -> "UserStatConfig":
        return cls.from_dict(load_config_data(cls.LOCAL_PATH, cls.SYSTEM_PATH, cls.ENV_VAR))


@dataclass(frozen=True)
class CrmConfig:
    server: CrmServerConfig
    auth: AuthConfig

    LOCAL_PATH: ClassVar[str] = "crm/crm.yml"
    SYSTEM_PATH: ClassVar[str] = "/etc/config/crm.yml"
    ENV_VAR: ClassVar[str] = "CRM_CONFIG"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CrmConfig":
        return cls(
            server=CrmServerConfig._from_dict(_section(data, "server")),
            auth=AuthConfig._from_dict(_section(data, "auth")),
        )

    @classmethod
    def load(cls) -> "CrmConfig":
        return cls.from_dict(load_config_data(cls.LOCAL_PATH, cls.SYSTEM_PATH, cls.ENV_VAR))