"""The configuration model: server, upstream and GraphQL type definitions."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from .group_by import GroupBy
from .key_values import KeyValues
from .server import DEFAULT_PORT, Server, Upstream
from .source import Source

_HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "CONNECT", "TRACE")


def _object(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{what}: expected an object")
    return value


def _required(data: dict, key: str, what: str) -> Any:
    if key not in data:
        raise ValueError(f"{what}: missing field `{key}`")
    return data[key]


def _string(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{what}: expected a string")
    return value


def _optional_string(data: dict, key: str, what: str) -> str | None:
    value = data.get(key)
    return None if value is None else _string(value, f"{what}.{key}")


def _flag(data: dict, key: str, what: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{what}.{key}: expected a boolean")
    return value


def _strings(value: Any, what: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{what}: expected a list of strings")
    return list(value)


def _optional(data: dict, key: str, parse: Any) -> Any:
    value = data.get(key)
    return None if value is None else parse(value)


def _dump(value: Any) -> Any:
    return None if value is None else value.to_dict()


@dataclass
class Unsafe:
    script: str

    def to_dict(self) -> dict[str, Any]:
        return {"script": self.script}

    @classmethod
    def from_dict(cls, data: Any) -> Unsafe:
        data = _object(data, "unsafe")
        return cls(script=_string(_required(data, "script", "unsafe"), "unsafe.script"))


@dataclass
class ModifyField:
    name: str | None = None
    omit: bool = False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.omit:
            out["omit"] = True
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ModifyField:
        data = _object(data, "modify")
        return cls(name=_optional_string(data, "name", "modify"), omit=_flag(data, "omit", "modify"))


@dataclass
class InlineType:
    path: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path)}

    @classmethod
    def from_dict(cls, data: Any) -> InlineType:
        data = _object(data, "inline")
        return cls(path=_strings(_required(data, "path", "inline"), "inline.path"))


@dataclass
class ConstField:
    data: Any

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data}

    @classmethod
    def from_dict(cls, data: Any) -> ConstField:
        data = _object(data, "const")
        return cls(data=_required(data, "data", "const"))


@dataclass
class Arg:
    type_of: str
    list: bool = False
    required: bool = False
    doc: str | None = None
    modify: ModifyField | None = None
    default_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type_of": self.type_of,
            "list": self.list,
            "required": self.required,
            "doc": self.doc,
            "modify": _dump(self.modify),
            "default_value": self.default_value,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Arg:
        data = _object(data, "arg")
        return cls(
            type_of=_string(_required(data, "type_of", "arg"), "arg.type_of"),
            list=_flag(data, "list", "arg"),
            required=_flag(data, "required", "arg"),
            doc=_optional_string(data, "doc", "arg"),
            modify=_optional(data, "modify", ModifyField.from_dict),
            default_value=data.get("default_value"),
        )


@dataclass
class Http:
    path: str = ""
    method: str = "GET"
    query: KeyValues = field(default_factory=KeyValues)
    input: Any = None
    output: Any = None
    body: str | None = None
    base_url: str | None = None
    headers: KeyValues = field(default_factory=KeyValues)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"path": self.path}
        if self.method != "GET":
            out["method"] = self.method
        if self.query:
            out["query"] = self.query.to_list()
        out.update(input=self.input, output=self.output, body=self.body, baseURL=self.base_url)
        if self.headers:
            out["headers"] = self.headers.to_list()
        return out

    @classmethod
    def from_dict(cls, data: Any) -> Http:
        data = _object(data, "http")
        method = _string(data.get("method", "GET"), "http.method")
        if method not in _HTTP_METHODS:
            raise ValueError(f"http.method: unknown method {method!r}")
        return cls(
            path=_string(_required(data, "path", "http"), "http.path"),
            method=method,
            query=KeyValues.from_list(data.get("query", [])),
            input=data.get("input"),
            output=data.get("output"),
            body=_optional_string(data, "body", "http"),
            base_url=_optional_string(data, "baseURL", "http"),
            headers=KeyValues.from_list(data.get("headers", [])),
        )


@dataclass
class Field:
    type_of: str = ""
    list: bool = False
    required: bool = False
    list_type_required: bool = False
    args: dict[str, Arg] = field(default_factory=dict)
    doc: str | None = None
    modify: ModifyField | None = None
    inline: InlineType | None = None
    http: Http | None = None
    unsafe_operation: Unsafe | None = None
    group_by: GroupBy | None = None
    const_field: ConstField | None = None

    def has_resolver(self) -> bool:
        return self.http is not None or self.unsafe_operation is not None or self.const_field is not None

    def resolvable_directives(self) -> list[str]:
        """Names of the resolver directives present on this field."""
        present = (
            ("@http", self.http),
            ("@unsafe", self.unsafe_operation),
            ("@const", self.const_field),
        )
        return [name for name, value in present if value is not None]

    def has_batched_resolver(self) -> bool:
        return self.group_by is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type_of": self.type_of,
            "list": self.list,
            "required": self.required,
            "list_type_required": self.list_type_required,
            "args": {name: arg.to_dict() for name, arg in sorted(self.args.items())},
            "doc": self.doc,
            "modify": _dump(self.modify),
            "inline": _dump(self.inline),
            "http": _dump(self.http),
            "unsafe": _dump(self.unsafe_operation),
            "groupBy": _dump(self.group_by),
            "const_field": _dump(self.const_field),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Field:
        data = _object(data, "field")
        args = _object(data.get("args", {}), "field.args")
        return cls(
            type_of=_string(_required(data, "type_of", "field"), "field.type_of"),
            list=_flag(data, "list", "field"),
            required=_flag(data, "required", "field"),
            list_type_required=_flag(data, "list_type_required", "field"),
            args={name: Arg.from_dict(arg) for name, arg in sorted(args.items())},
            doc=_optional_string(data, "doc", "field"),
            modify=_optional(data, "modify", ModifyField.from_dict),
            inline=_optional(data, "inline", InlineType.from_dict),
            http=_optional(data, "http", Http.from_dict),
            unsafe_operation=_optional(data, "unsafe", Unsafe.from_dict),
            group_by=_optional(data, "groupBy", GroupBy.from_dict),
            const_field=_optional(data, "const_field", ConstField.from_dict),
        )


@dataclass
class Type:
    fields: dict[str, Field] = field(default_factory=dict)
    doc: str | None = None
    interface: bool = False
    implements: set[str] = field(default_factory=set)
    variants: set[str] | None = None
    scalar: bool = False

    def merge_right(self, other: Type) -> Type:
        """Combine with ``other``; its fields replace same-named ones."""
        fields = dict(sorted({**self.fields, **other.fields}.items()))
        if self.variants is None:
            variants = None if other.variants is None else set(other.variants)
        elif other.variants is None:
            variants = set(self.variants)
        else:
            variants = self.variants | other.variants
        return replace(self, fields=fields, implements=self.implements | other.implements, variants=variants)

    def to_dict(self) -> dict[str, Any]:
        return {
            "fields": {name: f.to_dict() for name, f in sorted(self.fields.items())},
            "doc": self.doc,
            "interface": self.interface,
            "implements": sorted(self.implements),
            "enum": None if self.variants is None else sorted(self.variants),
            "scalar": self.scalar,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Type:
        data = _object(data, "type")
        fields = _object(_required(data, "fields", "type"), "type.fields")
        variants = data.get("enum")
        return cls(
            fields={name: Field.from_dict(f) for name, f in sorted(fields.items())},
            doc=_optional_string(data, "doc", "type"),
            interface=_flag(data, "interface", "type"),
            implements=set(_strings(data.get("implements", []), "type.implements")),
            variants=None if variants is None else set(_strings(variants, "type.enum")),
            scalar=_flag(data, "scalar", "type"),
        )


@dataclass
class Union:
    types: set[str] = field(default_factory=set)
    doc: str | None = None

    def merge_right(self, other: Union) -> Union:
        return replace(self, types=self.types | other.types)

    def to_dict(self) -> dict[str, Any]:
        return {"types": sorted(self.types), "doc": self.doc}

    @classmethod
    def from_dict(cls, data: Any) -> Union:
        data = _object(data, "union")
        return cls(
            types=set(_strings(_required(data, "types", "union"), "union.types")),
            doc=_optional_string(data, "doc", "union"),
        )


@dataclass
class RootSchema:
    query: str | None = None
    mutation: str | None = None
    subscription: str | None = None

    def merge_right(self, other: RootSchema) -> RootSchema:
        return RootSchema(
            query=other.query if other.query is not None else self.query,
            mutation=other.mutation if other.mutation is not None else self.mutation,
            subscription=other.subscription if other.subscription is not None else self.subscription,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"query": self.query, "mutation": self.mutation, "subscription": self.subscription}

    @classmethod
    def from_dict(cls, data: Any) -> RootSchema:
        data = _object(data, "schema")
        return cls(
            query=_optional_string(data, "query", "schema"),
            mutation=_optional_string(data, "mutation", "schema"),
            subscription=_optional_string(data, "subscription", "schema"),
        )


@dataclass
class GraphQL:
    schema: RootSchema = field(default_factory=RootSchema)
    types: dict[str, Type] = field(default_factory=dict)
    unions: dict[str, Union] = field(default_factory=dict)

    def merge_right(self, other: GraphQL) -> GraphQL:
        types = dict(self.types)
        for name, other_type in other.types.items():
            mine = types.pop(name, None)
            types[name] = other_type if mine is None else mine.merge_right(other_type)
        unions = dict(self.unions)
        for name, other_union in other.unions.items():
            mine = unions.pop(name, None)
            unions[name] = other_union if mine is None else mine.merge_right(other_union)
        return GraphQL(
            schema=self.schema.merge_right(other.schema),
            types=dict(sorted(types.items())),
            unions=dict(sorted(unions.items())),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema.to_dict(),
            "types": {name: t.to_dict() for name, t in sorted(self.types.items())},
            "unions": {name: u.to_dict() for name, u in sorted(self.unions.items())},
        }

    @classmethod
    def from_dict(cls, data: Any) -> GraphQL:
        data = _object(data, "graphql")
        types = _object(_required(data, "types", "graphql"), "graphql.types")
        unions = _object(_required(data, "unions", "graphql"), "graphql.unions")
        return cls(
            schema=RootSchema.from_dict(_required(data, "schema", "graphql")),
            types={name: Type.from_dict(t) for name, t in sorted(types.items())},
            unions={name: Union.from_dict(u) for name, u in sorted(unions.items())},
        )


@dataclass
class Config:
    server: Server = field(default_factory=Server)
    upstream: Upstream = field(default_factory=Upstream)
    graphql: GraphQL = field(default_factory=GraphQL)

    def port(self) -> int:
        return DEFAULT_PORT if self.server.port is None else self.server.port

    def output_types(self) -> set[str]:
        """Names of the types used as outputs: root types and field types."""
        types: set[str] = set()
        schema = self.graphql.schema
        if schema.query is not None:
            types.add(schema.query)
        if schema.mutation is not None:
            types.add(schema.mutation)
        for type_of in self.graphql.types.values():
            if type_of.interface or type_of.fields:
                types.update(f.type_of for f in type_of.fields.values())
        return types

    def input_types(self) -> set[str]:
        """Names of the types used as arguments of non-interface fields."""
        return {
            arg.type_of
            for type_of in self.graphql.types.values()
            if not type_of.interface
            for f in type_of.fields.values()
            for arg in f.args.values()
        }

    def find_type(self, name: str) -> Type | None:
        return self.graphql.types.get(name)

    def find_union(self, name: str) -> Union | None:
        return self.graphql.unions.get(name)

    def contains(self, name: str) -> bool:
        return name in self.graphql.types or name in self.graphql.unions

    def merge_right(self, other: Config) -> Config:
        return Config(
            server=self.server.merge_right(other.server),
            upstream=self.upstream.merge_right(other.upstream),
            graphql=self.graphql.merge_right(other.graphql),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "server": self.server.to_dict(),
            "upstream": self.upstream.to_dict(),
            "graphql": self.graphql.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        data = _object(data, "config")
        return cls(
            server=Server.from_dict(_required(data, "server", "config")),
            upstream=Upstream.from_dict(_required(data, "upstream", "config")),
            graphql=GraphQL.from_dict(_required(data, "graphql", "config")),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False)

    @classmethod
    def from_json(cls, text: str) -> Config:
        return cls.from_dict(json.loads(text))

    @classmethod
    def from_yaml(cls, text: str) -> Config:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as error:
            raise ValueError(f"invalid YAML: {error}") from error
        return cls.from_dict(data)

    @classmethod
    def from_source(cls, source: Source, text: str) -> Config:
        if source is Source.JSON:
            return cls.from_json(text)
        if source is Source.YML:
            return cls.from_yaml(text)
        raise ValueError("GraphQL SDL configuration files cannot be read by this reader")

    @classmethod
    def from_file_paths(cls, file_paths: Iterable[str | Path]) -> Config:
        """Read every file and merge them in order, later files winning."""
        config = cls()
        for file_path in file_paths:
            source = Source.detect(str(file_path))
            text = Path(file_path).read_text(encoding="utf-8")
            config = config.merge_right(cls.from_source(source, text))
        return config