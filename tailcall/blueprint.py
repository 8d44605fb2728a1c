"""The blueprint: an intermediate description of the GraphQL API to serve."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .blueprint_server import ServerSettings
from .server import Upstream


@dataclass
class NamedType:
    name: str
    non_null: bool = False


@dataclass
class ListType:
    of_type: NamedType | ListType
    non_null: bool = False

    @property
    def name(self) -> str:
        """Name of the innermost named type."""
        return self.of_type.name


TypeRef = NamedType | ListType


@dataclass
class Directive:
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)
    index: int = 0


@dataclass
class InputFieldDefinition:
    name: str
    of_type: TypeRef
    default_value: Any = None
    description: str | None = None


@dataclass
class FieldDefinition:
    name: str
    of_type: TypeRef
    args: list[InputFieldDefinition] = field(default_factory=list)
    resolver: Any = None
    directives: list[Directive] = field(default_factory=list)
    description: str | None = None


@dataclass
class InterfaceTypeDefinition:
    name: str
    fields: list[FieldDefinition] = field(default_factory=list)
    description: str | None = None


@dataclass
class ObjectTypeDefinition:
    name: str
    fields: list[FieldDefinition] = field(default_factory=list)
    description: str | None = None
    implements: set[str] = field(default_factory=set)


@dataclass
class InputObjectTypeDefinition:
    name: str
    fields: list[InputFieldDefinition] = field(default_factory=list)
    description: str | None = None


@dataclass
class EnumValueDefinition:
    name: str
    description: str | None = None
    directives: list[Directive] = field(default_factory=list)


@dataclass
class EnumTypeDefinition:
    name: str
    enum_values: list[EnumValueDefinition] = field(default_factory=list)
    directives: list[Directive] = field(default_factory=list)
    description: str | None = None


@dataclass
class ScalarTypeDefinition:
    name: str
    directive: list[Directive] = field(default_factory=list)
    description: str | None = None


@dataclass
class UnionTypeDefinition:
    name: str
    types: set[str] = field(default_factory=set)
    directives: list[Directive] = field(default_factory=list)
    description: str | None = None


Definition = (
    InterfaceTypeDefinition
    | ObjectTypeDefinition
    | InputObjectTypeDefinition
    | ScalarTypeDefinition
    | EnumTypeDefinition
    | UnionTypeDefinition
)


@dataclass
class SchemaDefinition:
    query: str
    mutation: str | None = None
    directives: list[Directive] = field(default_factory=list)


@dataclass
class Blueprint:
    """Type definitions, root schema and settings needed to serve an API."""

    definitions: list[Definition]
    schema: SchemaDefinition
    server: ServerSettings = field(default_factory=ServerSettings)
    upstream: Upstream = field(default_factory=Upstream)

    def query(self) -> str:
        return self.schema.query

    def mutation(self) -> str | None:
        return self.schema.mutation