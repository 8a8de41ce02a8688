"""In-memory document store for testing."""

from typing import Optional

from tally.domain.error import StoreUnavailable
from tally.domain.model.ledger import LedgerDocument, LedgerSnapshot
from tally.domain.repository.document import DocumentStore
from tally.domain.value import Revision


class InMemoryDocumentStore(DocumentStore):
    """In-memory implementation of DocumentStore for testing.

    Revisions are a counter bumped on every save. ``fail_load`` and
    ``fail_save`` make the next operations raise StoreUnavailable.
    """

    def __init__(self, document: Optional[LedgerDocument] = None) -> None:
        self.document = document or LedgerDocument()
        self.version = 0
        self.saves: list[str] = []
        self.fail_load = False
        self.fail_save = False

    @property
    def revision(self) -> Optional[Revision]:
        return Revision(str(self.version)) if self.version else None

    async def load(self) -> LedgerSnapshot:
        if self.fail_load:
            raise StoreUnavailable("load", "store offline")
        return LedgerSnapshot(document=self.document, revision=self.revision)

    async def save(
        self,
        document: LedgerDocument,
        revision: Optional[Revision],
        message: str,
    ) -> Optional[Revision]:
        if self.fail_save:
            raise StoreUnavailable("save", "store offline")
        if revision != self.revision:
            raise StoreUnavailable("save", "document changed since it was loaded")
        self.document = document
        self.version += 1
        self.saves.append(message)
        return self.revision
