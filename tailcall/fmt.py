"""Formatting helpers for command line output."""

from __future__ import annotations

from termcolor import colored

from .config import Config
from .n_plus_one import n_plus_one


def heading(text: str) -> str:
    return colored(text, attrs=["bold"])


def meta(text: str) -> str:
    return colored(text, "yellow")


def success(text: str) -> str:
    return colored(text, "green")


def display(text: str) -> None:
    print(text)


def table(labels: list[tuple[str, str]]) -> str:
    """Render ``(label, value)`` rows with the values aligned in one column."""
    width = max((len(key) for key, _ in labels), default=0) + 1
    padding = " " * width
    rows = [heading((key + ":" + padding)[:width]) + " " + value for key, value in labels]
    return "\n".join(rows) + "\n"


def _nest(field_names: list[str]) -> str:
    nested = ""
    for name in reversed(field_names):
        nested = name if not nested else f"{name} {{ {nested} }}"
    return nested


def format_n_plus_one_queries(n_plus_one_info: list[list[tuple[str, str]]]) -> str:
    """Render each N + 1 path as a nested GraphQL query, one per line."""
    queries = [
        "  query { " + _nest([field_name for _, field_name in path]) + " }" for path in n_plus_one_info
    ]
    return meta("\n".join(queries))


def n_plus_one_data(n_plus_one_queries: bool, config: Config) -> tuple[str, str]:
    """Return the ``N + 1`` table row, optionally listing the offending queries."""
    info = n_plus_one(config)
    if n_plus_one_queries:
        return "N + 1", "\n".join([str(len(info)), format_n_plus_one_queries(info)])
    return "N + 1", str(len(info))