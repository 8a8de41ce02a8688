"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from tally.config import LedgerSettings, Settings, StoreSettings
from tally.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_store_settings(self, settings: Settings) -> StoreSettings:
        """Provide document store settings."""
        return settings.store

    @provide(scope=Scope.APP)
    def provide_ledger_settings(self, settings: Settings) -> LedgerSettings:
        """Provide vote admission settings."""
        return settings.ledger
