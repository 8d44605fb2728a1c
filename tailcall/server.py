"""The ``@server`` and ``@upstream`` configuration sections."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

from .key_values import KeyValues

DEFAULT_PORT = 8000
DEFAULT_HOSTNAME = "127.0.0.1"


def _object(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object")
    return data


def _check(value: Any, kind: type, key: str) -> Any:
    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise ValueError(f"invalid value for `{key}`: {value!r}")
    return value


def _optional(data: dict, key: str, kind: type) -> Any:
    value = data.get(key)
    return None if value is None else _check(value, kind, key)


def _pick(preferred: Any, fallback: Any) -> Any:
    return fallback if preferred is None else preferred


def _string_set(value: Any, key: str) -> set[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"`{key}` must be a list of strings")
    return set(value)


_SERVER_OPTIONS: tuple[tuple[str, str, type], ...] = (
    ("enable_apollo_tracing", "enableApolloTracing", bool),
    ("enable_cache_control_header", "enableCacheControlHeader", bool),
    ("enable_graphiql", "enableGraphiql", str),
    ("enable_introspection", "enableIntrospection", bool),
    ("enable_query_validation", "enableQueryValidation", bool),
    ("enable_response_validation", "enableResponseValidation", bool),
    ("global_response_timeout", "globalResponseTimeout", int),
    ("hostname", "hostname", str),
    ("port", "port", int),
)


@dataclass
class Server:
    """Settings of the GraphQL server; unset options use their defaults."""

    enable_apollo_tracing: bool | None = None
    enable_cache_control_header: bool | None = None
    enable_graphiql: str | None = None
    enable_introspection: bool | None = None
    enable_query_validation: bool | None = None
    enable_response_validation: bool | None = None
    global_response_timeout: int | None = None
    hostname: str | None = None
    port: int | None = None
    vars: KeyValues = field(default_factory=KeyValues)
    response_headers: KeyValues = field(default_factory=KeyValues)

    def apollo_tracing_enabled(self) -> bool:
        return _pick(self.enable_apollo_tracing, False)

    def cache_control_enabled(self) -> bool:
        return _pick(self.enable_cache_control_header, False)

    def introspection_enabled(self) -> bool:
        return _pick(self.enable_introspection, True)

    def query_validation_enabled(self) -> bool:
        return _pick(self.enable_query_validation, True)

    def http_validation_enabled(self) -> bool:
        return _pick(self.enable_response_validation, False)

    def response_timeout(self) -> int:
        return _pick(self.global_response_timeout, 0)

    def effective_port(self) -> int:
        return _pick(self.port, DEFAULT_PORT)

    def effective_hostname(self) -> str:
        return _pick(self.hostname, DEFAULT_HOSTNAME)

    def merge_right(self, other: Server) -> Server:
        """Combine with ``other``; options set in ``other`` win."""
        merged = {attr: _pick(getattr(other, attr), getattr(self, attr)) for attr, _, _ in _SERVER_OPTIONS}
        return Server(
            **merged,
            vars=KeyValues({**self.vars, **other.vars}),
            response_headers=KeyValues({**self.response_headers, **other.response_headers}),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for attr, key, _ in _SERVER_OPTIONS:
            value = getattr(self, attr)
            if attr == "hostname" and value is None:
                continue
            out[key] = value
        if self.vars:
            out["vars"] = self.vars.to_list()
        if self.response_headers:
            out["responseHeaders"] = self.response_headers.to_list()
        return out

    @classmethod
    def from_dict(cls, data: Any) -> Server:
        data = _object(data, "server")
        values = {attr: _optional(data, key, kind) for attr, key, kind in _SERVER_OPTIONS}
        port = values["port"]
        if port is not None and not 0 <= port <= 0xFFFF:
            raise ValueError(f"invalid value for `port`: {port}")
        return cls(
            **values,
            vars=KeyValues.from_list(data.get("vars", [])),
            response_headers=KeyValues.from_list(data.get("responseHeaders", [])),
        )


@dataclass
class Batch:
    """Batching settings for upstream requests."""

    max_size: int = 1000
    delay: int = 0
    headers: set[str] = field(default_factory=set)

    def to_dict(self) -> dict[str, Any]:
        return {"maxSize": self.max_size, "delay": self.delay, "headers": sorted(self.headers)}

    @classmethod
    def from_dict(cls, data: Any) -> Batch:
        data = _object(data, "batch")
        default = cls()
        max_size = _check(data.get("maxSize", default.max_size), int, "maxSize")
        delay = _check(data.get("delay", default.delay), int, "delay")
        if max_size < 0 or delay < 0:
            raise ValueError("batch sizes and delays must not be negative")
        headers = _string_set(data.get("headers", []), "headers")
        return cls(max_size=max_size, delay=delay, headers=headers)


@dataclass
class Proxy:
    url: str


def _upstream_option(key: str, kind: type) -> Any:
    return field(default=None, metadata={"key": key, "kind": kind})


@dataclass
class Upstream:
    """Settings of the HTTP client used for upstream calls."""

    pool_idle_timeout: int | None = _upstream_option("poolIdleTimeout", int)
    pool_max_idle_per_host: int | None = _upstream_option("poolMaxIdlePerHost", int)
    keep_alive_interval: int | None = _upstream_option("keepAliveInterval", int)
    keep_alive_timeout: int | None = _upstream_option("keepAliveTimeout", int)
    keep_alive_while_idle: bool | None = _upstream_option("keepAliveWhileIdle", bool)
    proxy: Proxy | None = _upstream_option("proxy", Proxy)
    connect_timeout: int | None = _upstream_option("connectTimeout", int)
    timeout: int | None = _upstream_option("timeout", int)
    tcp_keep_alive: int | None = _upstream_option("tcpKeepAlive", int)
    user_agent: str | None = _upstream_option("userAgent", str)
    allowed_headers: set[str] | None = _upstream_option("allowedHeaders", set)
    base_url: str | None = _upstream_option("baseURL", str)
    enable_http_cache: bool | None = _upstream_option("enableHttpCache", bool)
    batch: Batch | None = _upstream_option("batch", Batch)

    def merge_right(self, other: Upstream) -> Upstream:
        """Combine with ``other``; options set in ``other`` win.

        Allowed headers and batch settings are kept only when ``other`` sets them.
        """
        simple = {
            f.name: _pick(getattr(other, f.name), getattr(self, f.name))
            for f in fields(self)
            if f.name not in ("allowed_headers", "batch")
        }
        if other.allowed_headers is None:
            allowed = None
        else:
            allowed = set(self.allowed_headers or ()) | set(other.allowed_headers)
        if other.batch is None:
            batch = None
        else:
            base = self.batch or Batch()
            batch = Batch(
                max_size=other.batch.max_size,
                delay=other.batch.delay,
                headers=set(base.headers) | set(other.batch.headers),
            )
        return replace(self, **simple, allowed_headers=allowed, batch=batch)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, Proxy):
                value = {"url": value.url}
            elif isinstance(value, Batch):
                value = value.to_dict()
            elif isinstance(value, set):
                value = sorted(value)
            out[f.metadata["key"]] = value
        return out

    @classmethod
    def from_dict(cls, data: Any) -> Upstream:
        data = _object(data, "upstream")
        values: dict[str, Any] = {}
        for f in fields(cls):
            key, kind = f.metadata["key"], f.metadata["kind"]
            raw = data.get(key)
            if raw is None:
                continue
            if kind is Proxy:
                proxy = _object(raw, "proxy")
                if "url" not in proxy:
                    raise ValueError("proxy: missing field `url`")
                values[f.name] = Proxy(url=_check(proxy["url"], str, "url"))
            elif kind is Batch:
                values[f.name] = Batch.from_dict(raw)
            elif kind is set:
                values[f.name] = _string_set(raw, key)
            else:
                values[f.name] = _check(raw, kind, key)
        return cls(**values)