"""GitHub adapter."""

from .contents import GitHubContentsClient, GitHubContentsError, GitHubFile

__all__ = [
    "GitHubContentsClient",
    "GitHubContentsError",
    "GitHubFile",
]
