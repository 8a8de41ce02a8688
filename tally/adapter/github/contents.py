"""GitHub contents API client.

Reads and commits a single repository file. Every write is a commit; the
blob SHA returned by GitHub serves as the revision token, and GitHub
rejects a write whose SHA no longer matches the file.
"""

import base64
from typing import Optional

import httpx
import logfire
from pydantic import BaseModel

from tally.adapter.error import ProviderError


class GitHubContentsError(ProviderError):
    """GitHub contents API error."""

    pass


class GitHubFile(BaseModel):
    """Decoded repository file."""

    content: str
    sha: str


class GitHubContentsClient:
    """Client for one file of a GitHub repository."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        owner: str,
        repo: str,
        path: str,
        token: str,
        branch: Optional[str] = None,
    ) -> None:
        """Initialize GitHub contents client.

        Args:
            http_client: Client whose base_url is the GitHub API root
            owner: Repository owner
            repo: Repository name
            path: File path inside the repository
            token: Access token with contents read/write permission
            branch: Branch to use (None = default branch)
        """
        self.http_client = http_client
        self.owner = owner
        self.repo = repo
        self.path = path.lstrip("/")
        self.token = token
        self.branch = branch

    @property
    def url(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/contents/{self.path}"

    @property
    def blobs_url(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/git/blobs"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"token {self.token}",
            "Accept": "application/vnd.github+json",
        }

    async def get_file(self) -> Optional[GitHubFile]:
        """Fetch and decode the file.

        Files over 1 MB come back without inline content; those are read
        through the blob of the same SHA so content and revision always match.

        Returns:
            The file content and blob SHA, or None if the file does not exist

        Raises:
            GitHubContentsError: If the request fails or the content cannot
                be decoded
        """
        params = {"ref": self.branch} if self.branch else None
        response = await self._get(self.url, params=params)

        if response.status_code == 404:
            logfire.info("GitHub file not found", path=self.path)
            return None

        body = self._json(response)
        try:
            sha = body["sha"]
            if body.get("encoding") != "base64":
                logfire.info(
                    "GitHub file too large for inline content",
                    path=self.path,
                    size=body.get("size"),
                )
                body = self._json(await self._get(f"{self.blobs_url}/{sha}"))
                if body.get("encoding") != "base64":
                    raise ValueError(f"unsupported encoding {body.get('encoding')!r}")
            # GitHub wraps base64 content at 60 columns; b64decode drops the newlines
            content = base64.b64decode(body["content"]).decode("utf-8")
        except (KeyError, TypeError, ValueError) as e:
            raise GitHubContentsError(f"Unexpected contents payload for {self.path}: {e}")

        return GitHubFile(content=content, sha=sha)

    async def _get(
        self, url: str, params: Optional[dict[str, str]] = None
    ) -> httpx.Response:
        try:
            return await self.http_client.get(
                url, headers=self._headers(), params=params
            )
        except httpx.HTTPError as e:
            logfire.error("GitHub load HTTP error", path=self.path, error=str(e))
            raise GitHubContentsError(f"HTTP error loading {self.path}: {e}")

    def _json(self, response: httpx.Response) -> dict:
        if response.status_code != 200:
            logfire.error(
                "GitHub load error",
                status_code=response.status_code,
                error=response.text,
            )
            raise GitHubContentsError(
                f"Failed to load {self.path}: {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise GitHubContentsError(f"Unexpected contents payload for {self.path}: {e}")

    async def put_file(self, content: str, message: str, sha: Optional[str]) -> str:
        """Create or replace the file with a new commit.

        Args:
            content: New file text
            message: Commit message
            sha: Blob SHA the change is based on (None when creating the file)

        Returns:
            Blob SHA of the new file

        Raises:
            GitHubContentsError: If the request fails or the SHA is stale
        """
        payload: dict[str, str] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if sha:
            payload["sha"] = sha
        if self.branch:
            payload["branch"] = self.branch

        try:
            response = await self.http_client.put(
                self.url, headers=self._headers(), json=payload
            )
        except httpx.HTTPError as e:
            logfire.error("GitHub save HTTP error", path=self.path, error=str(e))
            raise GitHubContentsError(f"HTTP error saving {self.path}: {e}")

        if response.status_code not in (200, 201):
            logfire.error(
                "GitHub save error",
                status_code=response.status_code,
                error=response.text,
            )
            raise GitHubContentsError(
                f"Failed to save {self.path}: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()["content"]["sha"]
        except (KeyError, TypeError, ValueError) as e:
            raise GitHubContentsError(f"Unexpected commit payload for {self.path}: {e}")
