"""Repository implementations for infrastructure layer."""

from .key_value_repository import KeyValueRepository

__all__ = ["KeyValueRepository"]
