"""API Routes package."""

from datastream_validator.api.routes import health, validation

__all__ = ["health", "validation"]
