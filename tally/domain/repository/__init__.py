"""Repository interfaces for the Tally domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tally.domain.repository.document import DocumentStore

__all__ = [
    "DocumentStore",
]
