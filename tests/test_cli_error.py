import re

import pytest

from tailcall.cli_error import CLIError, bullet, margin


def _plain(text: str) -> str:
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def test_no_newline():
    assert margin("Hello", 4) == "    Hello"


def test_with_newline():
    assert margin("Hello\nWorld", 4) == "    Hello\n    World"


def test_empty_string():
    assert margin("", 4) == ""


def test_zero_margin():
    assert margin("Hello", 0) == "Hello"


def test_zero_margin_with_newline():
    assert margin("Hello\nWorld", 0) == "Hello\nWorld"


def test_bullet_marks_first_line():
    assert bullet("a\nb") == "• a\n  b"


def test_bullet_of_empty_text_fails():
    with pytest.raises(ValueError):
        bullet("")


def test_title():
    error = CLIError("Server could not be started")
    assert str(error) == "Error: Server could not be started"


def test_title_description():
    error = CLIError("Server could not be started", description="The port is already in use")
    expected = "Error: Server could not be started\n       ❯ The port is already in use"
    assert str(error) == expected


def test_title_description_trace():
    error = CLIError(
        "Server could not be started",
        description="The port is already in use",
        trace=["@server", "port"],
    )
    expected = (
        "Error: Server could not be started\n"
        "       ❯ The port is already in use [at @server.port]"
    )
    assert str(error) == expected


def test_title_trace_caused_by():
    error = CLIError("Configuration Error").with_causes(
        [CLIError("Base URL needs to be specified", trace=["User", "posts", "@http", "baseURL"])]
    )
    expected = (
        "Error: Configuration Error\n"
        "Caused by:\n"
        "  • Base URL needs to be specified [at User.posts." "@http.baseURL]"
    )
    assert str(error) == expected


def test_title_trace_multiple_caused_by():
    error = CLIError("Configuration Error").with_causes(
        [
            CLIError("Base URL needs to be specified", trace=["User", "posts", "@http", "baseURL"]),
            CLIError("Base URL needs to be specified", trace=["Post", "users", "@http", "baseURL"]),
            CLIError(
                "Base URL needs to be specified",
                description="Set `baseURL` in @http or @server directives",
                trace=["Query", "users", "@http", "baseURL"],
            ),
            CLIError("Base URL needs to be specified", trace=["Query", "posts", "@http", "baseURL"]),
        ]
    )
    expected = (
        "Error: Configuration Error\n"
        "Caused by:\n"
        "  • Base URL needs to be specified [at User.posts." "@http.baseURL]\n"
        "  • Base URL needs to be specified [at Post.users." "@http.baseURL]\n"
        "  • Base URL needs to be specified\n"
        "      ❯ Set `baseURL` in @http or @server directives [at Query.users." "@http.baseURL]\n"
        "  • Base URL needs to be specified [at Query.posts." "@http.baseURL]"
    )
    assert str(error) == expected


def test_causes_are_not_roots():
    cause = CLIError("inner")
    CLIError("outer").with_causes([cause])
    assert cause.is_root is False
    assert str(cause) == "inner"


def test_color_does_not_change_the_text():
    plain = CLIError("boom", description="why", trace=["a", "b"]).with_causes([CLIError("cause")])
    expected = str(plain)
    colored_error = CLIError("boom", description="why", trace=["a", "b"]).with_causes([CLIError("cause")])
    colored_error.with_color(True)
    assert colored_error.color is True
    assert colored_error.caused_by[0].color is True
    assert _plain(str(colored_error)) == expected


def test_is_an_exception():
    error = CLIError("failed")
    with pytest.raises(CLIError) as info:
        raise error
    assert info.value is error
    assert info.value.message == "failed"
    assert str(info.value) == "Error: failed"