# tailcall

Read, merge, validate and analyse the configuration of a GraphQL server that
resolves its fields through upstream HTTP calls.

The package covers:

- **Configuration model** (`tailcall.config`, `tailcall.server`,
  `tailcall.key_values`, `tailcall.group_by`): server and upstream settings,
  types, fields, arguments, unions and the directives that resolve fields
  (`http`, `unsafe`, `const`, `inline`, `modify`, `groupBy`). A configuration
  loads from JSON or YAML and can be written back with `to_json`, `to_yaml`
  and `to_dict`. Configurations merge with `merge_right`, and the right-hand
  side wins.
- **Source detection** (`tailcall.source`): `Source.detect` picks the format
  from the file extension (`.json`, `.yml`, `.graphql`).
- **N + 1 detection** (`tailcall.n_plus_one`): finds the query paths where a
  resolver that is not batched runs once for each item of a list.
- **Blueprint** (`tailcall.blueprint`, `tailcall.blueprint_server`,
  `tailcall.compress`): dataclasses for the intermediate form of a schema,
  `ServerSettings.from_config` to check a `server` section and apply its
  defaults, and `compress` to drop type definitions that cannot be reached
  from `Query`, `Mutation` or `Subscription`.
- **CLI helpers** (`tailcall.cli_error`, `tailcall.fmt`): `CLIError` messages
  with descriptions, traces and nested causes, and report tables in plain or
  coloured text.
- **Cache** (`tailcall.cache`): a small lock-guarded key/value store.

## Loading and merging configuration

A JSON or YAML document holds the three sections `server`, `upstream` and
`graphql`; the `graphql` section holds `schema`, `types` and `unions`.

```python
from tailcall.config import Config
from tailcall.server import Server

base = Config.from_yaml("""
server:
  port: 8000
upstream:
  baseURL: http://localhost:3000
graphql:
  schema:
    query: Query
  types:
    Query:
      fields:
        users:
          type_of: User
          list: true
          http:
            path: /users
    User:
      fields:
        id:
          type_of: Int
        posts:
          type_of: Post
          list: true
          http:
            path: /posts
    Post:
      fields:
        id:
          type_of: Int
  unions: {}
""")

config = base.merge_right(Config(server=Server(port=8080)))

print(config.port())            # 8080
print(config.contains("User"))  # True
```

`Config.from_file_paths` reads several `.json` or `.yml` files and merges them
in order, later files winning. A missing field or a value of the wrong kind
raises `ValueError`.

Settings that are not given fall back to defaults: port 8000, host
`127.0.0.1`, introspection and query validation on, and tracing, cache-control
headers and response validation off.

## Checking server settings

```python
from tailcall.blueprint_server import ServerConfigError, ServerSettings
from tailcall.server import Server

settings = ServerSettings.from_config(Server(hostname="localhost"))
print(settings.hostname)   # 127.0.0.1

try:
    ServerSettings.from_config(Server(enable_graphiql="/graphql"))
except ServerConfigError as error:
    print(error)
```

The hostname must be an IP address or `localhost`, the GraphiQL route may not
be `/` or `/graphql`, and response header names and values must be valid.

## Finding N + 1 queries

```python
from tailcall.n_plus_one import n_plus_one

for path in n_plus_one(config):
    print(path)   # [('Query', 'users'), ('User', 'posts')]
```

`User.posts` has an HTTP resolver and is reached through the list
`Query.users`, so it is reported. Adding a `groupBy` directive to `posts`
marks the resolver as batched and removes it from the report.
`tailcall.fmt.n_plus_one_data` turns the result into a table row for
`tailcall.fmt.table`.

## Detecting the file format

```python
from tailcall.source import Source, UnsupportedFileFormat

Source.detect("schema.graphql")   # Source.GRAPHQL
try:
    Source.detect("schema.toml")
except UnsupportedFileFormat as error:
    print(error)   # Unsupported file extension: schema.toml
```

## Reporting errors

```python
from tailcall.cli_error import CLIError

error = CLIError("Invalid Configuration").with_causes([
    CLIError("Base URL needs to be specified"),
])
print(error)
```

This prints:

```
Error: Invalid Configuration
Caused by:
  • Base URL needs to be specified
```

## What the package does not do

- It does not read GraphQL SDL configuration: `.graphql` files are
  recognised by `Source.detect`, but `Config.from_source` raises
  `ValueError` for them.
- It does not build a blueprint from a configuration, and it does not run a
  GraphQL server or call upstream services.
- It has no command-line program; the CLI helpers only format errors and
  reports.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the project
root.