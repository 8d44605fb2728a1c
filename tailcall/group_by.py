"""The ``@groupBy`` directive settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ID = "id"


@dataclass
class GroupBy:
    """Path used to group batched upstream responses."""

    path: list[str] = field(default_factory=lambda: [ID])

    def resolved_path(self) -> list[str]:
        """The grouping path, falling back to ``["id"]`` when empty."""
        return list(self.path) if self.path else [ID]

    def key(self) -> str:
        """The last element of the path, or ``"id"``."""
        return self.path[-1] if self.path else ID

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path)} if self.path else {}

    @classmethod
    def from_dict(cls, data: Any) -> GroupBy:
        if not isinstance(data, dict):
            raise ValueError("groupBy must be an object")
        path = data.get("path", [])
        if not isinstance(path, list) or not all(isinstance(p, str) for p in path):
            raise ValueError("groupBy.path must be a list of strings")
        return cls(path=list(path))