"""Video rental demo: OpenAPI-driven SQLite schema generation and repositories."""

__version__ = "0.1.0"
