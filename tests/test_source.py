import pytest

from tailcall.source import Source, UnsupportedFileFormat


@pytest.mark.parametrize(
    "name, expected",
    [
        ("config.json", Source.JSON),
        ("dir/config.yml", Source.YML),
        ("schema.graphql", Source.GRAPHQL),
    ],
)
def test_detect(name, expected):
    assert Source.detect(name) is expected


@pytest.mark.parametrize(
    "source, expected",
    [
        (Source.JSON, "json"),
        (Source.YML, "yml"),
        (Source.GRAPHQL, "graphql"),
    ],
)
def test_extensions(source, expected):
    assert source.ext() == expected


def test_unsupported_extension():
    with pytest.raises(UnsupportedFileFormat) as info:
        Source.detect("config.yaml")
    assert str(info.value) == "Unsupported file extension: config.yaml"
    assert info.value.name == "config.yaml"


def test_extension_requires_dot():
    with pytest.raises(UnsupportedFileFormat):
        Source.detect("json")


def test_unsupported_is_value_error():
    with pytest.raises(ValueError):
        Source.detect("file.txt")