"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubStoreSettings(BaseModel):
    """GitHub contents API configuration for the remote document store."""

    # Personal access token with contents read/write on the repository
    token: str | None = None
    owner: str | None = None
    repo: str | None = None

    # Path of the ledger document inside the repository
    path: str = "votes.json"

    # Branch to read and commit to (None = repository default branch)
    branch: str | None = None

    api_url: str = "https://api.github.com"
    timeout: float = 10.0


class StoreSettings(BaseModel):
    """Ledger document store configuration."""

    # "file" keeps the document on local disk, "github" in a repository file
    backend: Literal["file", "github"] = "file"

    # Local document path (file backend only)
    path: Path = Path("votes.json")

    github: GitHubStoreSettings = GitHubStoreSettings()


class LedgerSettings(BaseModel):
    """Vote admission configuration."""

    # Repeat votes from the same voter identity are rejected inside this window
    cooldown_days: int = 30

    @property
    def cooldown_ms(self) -> int:
        """Cooldown window in milliseconds."""
        return self.cooldown_days * 24 * 60 * 60 * 1000


class CORSSettings(BaseModel):
    """CORS configuration."""

    # Widgets are embedded on arbitrary sites, so all origins are allowed by default
    allow_origins: list[str] = ["*"]


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

    Local disk (default):
        STORE__BACKEND=file
        STORE__PATH=./data/votes.json

    GitHub repository file:
        STORE__BACKEND=github
        STORE__GITHUB__TOKEN=ghp_...
        STORE__GITHUB__OWNER=acme
        STORE__GITHUB__REPO=ratings
        STORE__GITHUB__PATH=votes.json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORE__BACKEND syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "0.0.0.0"
    port: int = 3000

    # Nested settings
    store: StoreSettings = StoreSettings()
    ledger: LedgerSettings = LedgerSettings()
    cors: CORSSettings = CORSSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def load_version(self) -> "Settings":
        """Load git SHA from the version file when one is baked into the image."""
        if self.git_sha == "unknown":
            self.git_sha = self._load_git_sha()
        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
