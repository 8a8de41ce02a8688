"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from tally.adapter.github import GitHubContentsClient
from tally.config import StoreSettings
from tally.domain.repository import DocumentStore
from tally.persistence.repository import FileDocumentStore, GitHubDocumentStore
from tally.util.di.base import ProviderBase
from tally.util.error import ConfigurationError


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider: local file or GitHub repository."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_document_store(
        self, settings: StoreSettings
    ) -> AsyncIterator[DocumentStore]:
        """Provide the configured document store.

        The GitHub backend owns an HTTP client that is closed with the
        container.

        Raises:
            ConfigurationError: If the GitHub backend is missing credentials
        """
        if settings.backend == "file":
            logfire.info("Using file document store", path=str(settings.path))
            yield FileDocumentStore(settings.path)
            return

        github = settings.github
        missing = [
            name
            for name, value in (
                ("token", github.token),
                ("owner", github.owner),
                ("repo", github.repo),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"GitHub document store is missing settings: {', '.join(missing)}"
            )

        logfire.info(
            "Using GitHub document store",
            owner=github.owner,
            repo=github.repo,
            path=github.path,
            branch=github.branch,
        )
        async with httpx.AsyncClient(
            base_url=github.api_url, timeout=github.timeout
        ) as http_client:
            yield GitHubDocumentStore(
                GitHubContentsClient(
                    http_client=http_client,
                    owner=github.owner,
                    repo=github.repo,
                    path=github.path,
                    token=github.token,
                    branch=github.branch,
                )
            )
