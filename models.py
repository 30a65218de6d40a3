#!/usr/bin/env python3
"""Repository descriptors and migration outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from github.Repository import Repository


@dataclass(frozen=True)
class ArchivedRepository:
    """Read-only view of a repository as returned by the GitHub API."""
    name: str
    archived: bool
    html_url: str

    @classmethod
    def from_github(cls, repo: "Repository") -> "ArchivedRepository":
        if not repo.html_url:
            raise ValueError(f"repository '{repo.name}' has no html_url")
        return cls(
            name=repo.name,
            archived=bool(repo.archived),
            html_url=repo.html_url,
        )


@dataclass(frozen=True)
class MigrationResult:
    """A transfer that GitHub accepted for processing."""
    original_url: str
