"""Configuration file formats, detected from the file extension."""

from __future__ import annotations

from enum import Enum


class UnsupportedFileFormat(ValueError):
    """Raised when a file name has no known configuration extension."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported file extension: {name}")
        self.name = name


class Source(Enum):
    JSON = "json"
    YML = "yml"
    GRAPHQL = "graphql"

    def ext(self) -> str:
        """The file extension without the leading dot."""
        return self.value

    @classmethod
    def detect(cls, name: str) -> Source:
        """Return the format whose extension ends ``name``."""
        for source in cls:
            if name.endswith(f".{source.ext()}"):
                return source
        raise UnsupportedFileFormat(name)