"""Detection of fields that trigger one upstream call per list item (N + 1)."""

from __future__ import annotations

from .config import Config

QueryPath = list[tuple[str, str]]


def _find_fan_out(config: Config, type_name: str, path: QueryPath, is_list: bool) -> list[QueryPath]:
    type_of = config.find_type(type_name)
    if type_of is None:
        return []
    found: list[QueryPath] = []
    for field_name, field in sorted(type_of.fields.items()):
        step = (type_name, field_name)
        if step in path:
            continue
        new_path = [*path, step]
        if field.has_resolver() and not field.has_batched_resolver() and is_list:
            found.append(new_path)
        else:
            found.extend(_find_fan_out(config, field.type_of, new_path, field.list or is_list))
    return found


def n_plus_one(config: Config) -> list[QueryPath]:
    """Return every query path that ends in an unbatched resolver under a list.

    Each path is a list of ``(type name, field name)`` steps starting at the
    query root type.
    """
    query = config.graphql.schema.query
    if query is None:
        return []
    return _find_fan_out(config, query, [], False)