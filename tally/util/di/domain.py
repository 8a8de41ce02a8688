"""Domain layer DI providers."""

import asyncio

from dishka import Scope, provide

from tally.config import LedgerSettings
from tally.domain.repository import DocumentStore
from tally.domain.service import Clock, VoteLedger
from tally.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The ledger is REQUEST-scoped; the write lock is APP-scoped so every
    request shares it and read-modify-write cycles never interleave.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_write_lock(self) -> asyncio.Lock:
        """Provide the lock serializing ledger writes within this process."""
        return asyncio.Lock()

    @provide
    def get_vote_ledger(
        self,
        document_store: DocumentStore,
        clock: Clock,
        ledger_settings: LedgerSettings,
        write_lock: asyncio.Lock,
    ) -> VoteLedger:
        """Provide vote ledger domain service."""
        return VoteLedger(
            document_store=document_store,
            clock=clock,
            cooldown_ms=ledger_settings.cooldown_ms,
            write_lock=write_lock,
        )
