"""Document store implementations."""

from .file import FileDocumentStore
from .github import GitHubDocumentStore

__all__ = [
    "FileDocumentStore",
    "GitHubDocumentStore",
]
