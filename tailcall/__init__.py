"""Configuration model, validation and analysis for a GraphQL-over-HTTP server."""

__version__ = "0.1.0"