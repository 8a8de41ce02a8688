"""Local filesystem document store."""

import asyncio
import hashlib
import os
import tempfile
from pathlib import Path
from typing import Optional

import logfire

from tally.domain.error import StoreUnavailable
from tally.domain.model.ledger import LedgerDocument, LedgerSnapshot
from tally.domain.repository.document import DocumentStore
from tally.domain.value import Revision
from tally.persistence.mappers import decode_document, encode_document


def _digest(content: bytes) -> Revision:
    return Revision(hashlib.sha256(content).hexdigest())


class FileDocumentStore(DocumentStore):
    """Ledger document kept in a JSON file on local disk.

    The revision is the SHA-256 of the file bytes. A save based on a stale
    revision is refused, so a second process writing the same file cannot
    silently overwrite votes. Writes go to a temporary file that replaces
    the document in one rename.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    async def load(self) -> LedgerSnapshot:
        """Load the document; a missing or zero-byte file is an empty ledger."""
        try:
            raw = await asyncio.to_thread(self._read)
        except OSError as e:
            logfire.error("Ledger file read failed", path=str(self.path), error=str(e))
            raise StoreUnavailable("load", str(e)) from e

        if raw is None:
            return LedgerSnapshot(document=LedgerDocument())

        # Zero-byte file: created but never written
        if not raw.strip():
            return LedgerSnapshot(document=LedgerDocument(), revision=_digest(raw))

        try:
            document = decode_document(raw)
        except ValueError as e:
            logfire.error("Ledger file malformed", path=str(self.path), error=str(e))
            raise StoreUnavailable("load", f"malformed document: {e}") from e

        return LedgerSnapshot(document=document, revision=_digest(raw))

    async def save(
        self,
        document: LedgerDocument,
        revision: Optional[Revision],
        message: str,
    ) -> Optional[Revision]:
        """Replace the document if it is still at ``revision``."""
        content = encode_document(document).encode("utf-8")

        try:
            await asyncio.to_thread(self._replace, content, revision)
        except OSError as e:
            logfire.error("Ledger file write failed", path=str(self.path), error=str(e))
            raise StoreUnavailable("save", str(e)) from e

        logfire.debug("Ledger file written", path=str(self.path), message=message)
        return _digest(content)

    def _read(self) -> Optional[bytes]:
        if not self.path.exists():
            return None
        return self.path.read_bytes()

    def _replace(self, content: bytes, revision: Optional[Revision]) -> None:
        current = self._read()
        current_revision = _digest(current) if current is not None else None
        if current_revision != revision:
            logfire.warn(
                "Ledger file changed since load",
                path=str(self.path),
                expected=revision,
                actual=current_revision,
            )
            raise StoreUnavailable("save", "document changed since it was loaded")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
