"""Removal of type definitions that cannot be reached from the root types."""

from __future__ import annotations

from dataclasses import replace

from .blueprint import (
    Blueprint,
    EnumTypeDefinition,
    InputObjectTypeDefinition,
    InterfaceTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    UnionTypeDefinition,
)

_ROOTS = ("Query", "Mutation", "Subscription")
_ALWAYS_KEPT = (
    *_ROOTS,
    "__Schema",
    "__Type",
    "__Field",
    "__InputValue",
    "__EnumValue",
    "__Directive",
    "__DirectiveLocation",
)


def _dependencies(definition) -> list[str]:
    if isinstance(definition, ObjectTypeDefinition):
        deps = [f.of_type.name for f in definition.fields]
        deps.extend(arg.of_type.name for f in definition.fields for arg in f.args)
        deps.extend(sorted(definition.implements))
        return deps
    if isinstance(definition, (InterfaceTypeDefinition, InputObjectTypeDefinition)):
        return [f.of_type.name for f in definition.fields]
    if isinstance(definition, EnumTypeDefinition):
        return [value.name for value in definition.enum_values]
    if isinstance(definition, UnionTypeDefinition):
        return sorted(definition.types)
    if isinstance(definition, ScalarTypeDefinition):
        return [definition.name]
    raise TypeError(f"unknown definition: {definition!r}")


def _reachable(graph: dict[str, list[str]], roots: tuple[str, ...]) -> set[str]:
    stack = list(roots)
    seen: set[str] = set()
    while stack:
        name = stack.pop()
        if name not in seen:
            seen.add(name)
            stack.extend(graph.get(name, ()))
    return seen


def compress(blueprint: Blueprint) -> Blueprint:
    """Return the blueprint keeping only definitions reachable from the roots."""
    graph = {definition.name: _dependencies(definition) for definition in blueprint.definitions}
    referenced = _reachable(graph, _ROOTS) | set(_ALWAYS_KEPT)
    kept = [definition for definition in blueprint.definitions if definition.name in referenced]
    return replace(blueprint, definitions=kept)