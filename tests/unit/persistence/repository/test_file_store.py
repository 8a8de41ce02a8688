"""Unit tests for FileDocumentStore."""

import json

import pytest

from tally.domain.error import StoreUnavailable
from tally.domain.model.ledger import ItemAggregate, LedgerDocument
from tally.domain.value import ItemId
from tally.persistence.repository import FileDocumentStore


class TestFileDocumentStore:
    """Tests for the local file store."""

    @pytest.mark.asyncio
    async def test_missing_file_is_empty_ledger(self, tmp_path):
        store = FileDocumentStore(tmp_path / "votes.json")

        snapshot = await store.load()

        assert snapshot.document == LedgerDocument()
        assert snapshot.revision is None

    @pytest.mark.asyncio
    async def test_save_then_load(self, tmp_path):
        """Saved document should be readable with the returned revision."""
        path = tmp_path / "data" / "votes.json"
        store = FileDocumentStore(path)
        document = LedgerDocument(
            items={ItemId("a"): ItemAggregate(rating=1, vote_count=1)}
        )

        revision = await store.save(document, None, message="vote: a (1)")
        snapshot = await store.load()

        assert path.exists()
        assert snapshot.document == document
        assert snapshot.revision == revision
        assert json.loads(path.read_text())["items"]["a"]["votes"] == 1

    @pytest.mark.asyncio
    async def test_stale_revision_is_refused(self, tmp_path):
        """A save based on an outdated load should fail without writing."""
        path = tmp_path / "votes.json"
        store = FileDocumentStore(path)
        first = await store.load()

        await store.save(
            LedgerDocument(items={ItemId("a"): ItemAggregate(rating=1, vote_count=1)}),
            first.revision,
            message="first",
        )

        with pytest.raises(StoreUnavailable):
            await store.save(
                LedgerDocument(items={ItemId("b"): ItemAggregate(rating=1, vote_count=1)}),
                first.revision,
                message="second",
            )

        snapshot = await store.load()
        assert snapshot.document.get(ItemId("a")) is not None
        assert snapshot.document.get(ItemId("b")) is None

    @pytest.mark.asyncio
    async def test_malformed_file_raises_store_unavailable(self, tmp_path):
        path = tmp_path / "votes.json"
        path.write_text("{ not json")

        with pytest.raises(StoreUnavailable) as exc_info:
            await FileDocumentStore(path).load()

        assert exc_info.value.operation == "load"

    @pytest.mark.asyncio
    async def test_unreadable_path_raises_store_unavailable(self, tmp_path):
        """A directory in place of the file should surface as StoreUnavailable."""
        path = tmp_path / "votes.json"
        path.mkdir()

        with pytest.raises(StoreUnavailable):
            await FileDocumentStore(path).load()

    @pytest.mark.asyncio
    async def test_empty_file_is_empty_ledger(self, tmp_path):
        path = tmp_path / "votes.json"
        path.write_text("")
        store = FileDocumentStore(path)

        snapshot = await store.load()
        revision = await store.save(snapshot.document, snapshot.revision, message="x")

        assert snapshot.document == LedgerDocument()
        assert revision is not None

    @pytest.mark.asyncio
    async def test_no_temporary_files_left_behind(self, tmp_path):
        store = FileDocumentStore(tmp_path / "votes.json")

        await store.save(LedgerDocument(), None, message="init")

        assert [p.name for p in tmp_path.iterdir()] == ["votes.json"]
