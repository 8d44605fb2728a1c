"""Errors reported to the user by the command line, with readable formatting."""

from __future__ import annotations

from collections.abc import Iterable

from termcolor import colored

_ERROR_PREFIX = "Error: "
_DEFAULT_PADDING = 2


def margin(text: str, width: int) -> str:
    """Indent every line of ``text`` by ``width`` spaces."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    indent = " " * width
    return "".join(indent + line for line in lines)


def bullet(text: str) -> str:
    """Indent ``text`` by two spaces and mark its first line with a bullet."""
    if not text:
        raise ValueError("cannot make a bullet of an empty text")
    return "• " + margin(text, 2)[2:]


class CLIError(Exception):
    """An error with an optional description, trace and nested causes."""

    def __init__(
        self,
        message: str,
        description: str | None = None,
        trace: Iterable[str] = (),
        is_root: bool = True,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.description = description
        self.trace = list(trace)
        self.is_root = is_root
        self.color = False
        self.caused_by: list[CLIError] = []

    def with_causes(self, errors: Iterable[CLIError]) -> CLIError:
        """Attach the errors that caused this one; they stop being roots."""
        self.caused_by = list(errors)
        for error in self.caused_by:
            error.is_root = False
        return self

    def with_color(self, color: bool) -> CLIError:
        """Turn coloured output on or off for this error and its direct causes."""
        self.color = color
        for error in self.caused_by:
            error.color = color
        return self

    def _colored(self, text: str, color: str) -> str:
        return colored(text, color) if self.color else text

    def _dimmed(self, text: str) -> str:
        return colored(text, attrs=["dark"]) if self.color else text

    def __str__(self) -> str:
        padding = len(_ERROR_PREFIX) if self.is_root else _DEFAULT_PADDING
        out: list[str] = []
        if self.is_root:
            out.append(self._colored(_ERROR_PREFIX, "red"))
        out.append(self.message)

        if self.description is not None:
            color = "yellow" if self.is_root else "white"
            out.append("\n")
            out.append(margin(self._colored(f"❯ {self.description}", color), padding))

        if self.trace:
            out.append(self._colored(f" [at {'.'.join(self.trace)}]", "cyan"))

        if self.caused_by:
            out.append(self._dimmed("\nCaused by:\n"))
            out.append(
                "\n".join(margin(bullet(str(error)), _DEFAULT_PADDING) for error in self.caused_by)
            )

        return "".join(out)