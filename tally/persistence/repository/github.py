"""GitHub repository document store."""

from typing import Optional

import logfire

from tally.adapter.github import GitHubContentsClient, GitHubContentsError
from tally.domain.error import StoreUnavailable
from tally.domain.model.ledger import LedgerDocument, LedgerSnapshot
from tally.domain.repository.document import DocumentStore
from tally.domain.value import Revision
from tally.persistence.mappers import decode_document, encode_document


class GitHubDocumentStore(DocumentStore):
    """Ledger document kept as a file in a GitHub repository.

    Each save is a commit. The blob SHA is the revision; GitHub rejects a
    commit based on a stale SHA (409), which surfaces as StoreUnavailable.
    """

    def __init__(self, client: GitHubContentsClient) -> None:
        self.client = client

    async def load(self) -> LedgerSnapshot:
        """Load the document; a missing file is an empty ledger."""
        try:
            file = await self.client.get_file()
        except GitHubContentsError as e:
            raise StoreUnavailable("load", str(e)) from e

        if file is None:
            return LedgerSnapshot(document=LedgerDocument())

        try:
            document = decode_document(file.content)
        except ValueError as e:
            logfire.error("Ledger document malformed", path=self.client.path, error=str(e))
            raise StoreUnavailable("load", f"malformed document: {e}") from e

        return LedgerSnapshot(document=document, revision=Revision(file.sha))

    async def save(
        self,
        document: LedgerDocument,
        revision: Optional[Revision],
        message: str,
    ) -> Optional[Revision]:
        """Commit the document on top of ``revision``."""
        try:
            sha = await self.client.put_file(
                encode_document(document), message=message, sha=revision
            )
        except GitHubContentsError as e:
            raise StoreUnavailable("save", str(e)) from e

        logfire.info("Ledger committed", path=self.client.path, message=message, sha=sha)
        return Revision(sha)
