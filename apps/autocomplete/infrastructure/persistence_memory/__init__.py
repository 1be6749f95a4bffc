"""In-memory Screen Registry."""

from autocomplete.infrastructure.persistence_memory.screen_registry import (
    InMemoryScreenRegistry,
)

__all__ = ["InMemoryScreenRegistry"]
