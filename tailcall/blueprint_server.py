"""Validated server settings derived from the ``@server`` configuration."""

from __future__ import annotations

import string
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv6Address, ip_address

from .server import Server

RESTRICTED_ROUTES = ("/", "/graphql")
_LOCALHOST = IPv4Address("127.0.0.1")
_SERVER_TRACE = ("schema", "@server")
_HEADER_NAME_CHARS = frozenset("!#$%&'*+-.^_`|~" + string.ascii_letters + string.digits)


class ServerConfigError(ValueError):
    """One or more invalid server settings, with the path where they were found."""

    def __init__(self, messages: str | Iterable[str], trace: Iterable[str] = ()) -> None:
        self.messages = [messages] if isinstance(messages, str) else list(messages)
        self.trace = list(trace)
        location = f" [at {'.'.join(self.trace)}]" if self.trace else ""
        super().__init__("; ".join(f"{message}{location}" for message in self.messages))

    @property
    def message(self) -> str:
        return self.messages[0] if self.messages else ""


IPAddress = IPv4Address | IPv6Address


def validate_hostname(hostname: str) -> IPAddress:
    """Parse ``hostname`` as an IP address; ``localhost`` means 127.0.0.1."""
    if hostname == "localhost":
        return _LOCALHOST
    try:
        if "%" in hostname:
            raise ValueError(hostname)
        return ip_address(hostname)
    except ValueError:
        raise ServerConfigError(
            "Parsing failed because of invalid IP address syntax",
            trace=(*_SERVER_TRACE, "hostname"),
        ) from None


def handle_graphiql(graphiql: str | None) -> str | None:
    """Check the GraphiQL route is not one of the reserved routes."""
    if graphiql is None:
        return None
    if graphiql.lower() in RESTRICTED_ROUTES:
        raise ServerConfigError(
            f"Cannot use restricted routes '{graphiql}' for enabling graphiql",
            trace=(*_SERVER_TRACE, "enableGraphiql"),
        )
    return graphiql


def _header_name_error(name: str) -> str | None:
    if not name or any(char not in _HEADER_NAME_CHARS for char in name):
        return "Parsing failed because of invalid HTTP header name"
    return None


def _header_value_error(value: str) -> str | None:
    if any(char != "\t" and (ord(char) < 32 or ord(char) == 127) for char in value):
        return "Parsing failed because of failed to parse header value"
    return None


def handle_response_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Validate response headers; names are returned in lower case.

    Every invalid name and value is reported together.
    """
    errors: list[str] = []
    result: dict[str, str] = {}
    for name, value in headers.items():
        problems = [p for p in (_header_name_error(name), _header_value_error(value)) if p]
        if problems:
            errors.extend(problems)
        else:
            result[name.lower()] = value
    if errors:
        raise ServerConfigError(errors, trace=(*_SERVER_TRACE, "responseHeaders"))
    return result


@dataclass
class ServerSettings:
    """Server settings with every default applied and every value checked."""

    enable_apollo_tracing: bool = False
    enable_cache_control_header: bool = False
    enable_graphiql: str | None = None
    enable_introspection: bool = True
    enable_query_validation: bool = True
    enable_response_validation: bool = False
    global_response_timeout: int = 0
    port: int = 8000
    hostname: IPAddress = _LOCALHOST
    vars: dict[str, str] = field(default_factory=dict)
    response_headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config_server: Server) -> ServerSettings:
        """Build the settings from a ``@server`` section, raising on invalid values."""
        graphiql = handle_graphiql(config_server.enable_graphiql)
        hostname = validate_hostname(config_server.effective_hostname().lower())
        headers = handle_response_headers(config_server.response_headers)
        return cls(
            enable_apollo_tracing=config_server.apollo_tracing_enabled(),
            enable_cache_control_header=config_server.cache_control_enabled(),
            enable_graphiql=graphiql,
            enable_introspection=config_server.introspection_enabled(),
            enable_query_validation=config_server.query_validation_enabled(),
            enable_response_validation=config_server.http_validation_enabled(),
            global_response_timeout=config_server.response_timeout(),
            port=config_server.effective_port(),
            hostname=hostname,
            vars=dict(config_server.vars.items()),
            response_headers=headers,
        )