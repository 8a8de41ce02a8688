"""Ledger document store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tally.domain.model.ledger import LedgerDocument, LedgerSnapshot
from tally.domain.value import Revision


class DocumentStore(ABC):
    """Store for the whole ledger document.

    The document is always loaded and replaced in full. Implementations live
    in the persistence layer and must raise ``StoreUnavailable`` for any
    failure, never a backend-specific error.
    """

    @abstractmethod
    async def load(self) -> LedgerSnapshot:
        """Load the current ledger document.

        Returns:
            The document and the revision it was read at. A store with no
            document yet returns an empty document.

        Raises:
            StoreUnavailable: If the document cannot be read or decoded
        """
        pass

    @abstractmethod
    async def save(
        self,
        document: LedgerDocument,
        revision: Optional[Revision],
        message: str,
    ) -> Optional[Revision]:
        """Atomically replace the ledger document.

        Args:
            document: The full document to persist
            revision: Revision the document was loaded at; stores that track
                revisions reject the write if the stored document moved on
            message: Short description of the change (commit message for
                versioned stores)

        Returns:
            The new revision, or None if the store does not track revisions

        Raises:
            StoreUnavailable: If the write fails or conflicts
        """
        pass
