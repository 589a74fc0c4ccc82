"""Emit Rust struct fields from a Swagger/OpenAPI definition."""

__version__ = "0.1.0"
