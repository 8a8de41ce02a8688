"""In-memory repository implementations for testing."""

from .document import InMemoryDocumentStore

__all__ = [
    "InMemoryDocumentStore",
]
