#!/usr/bin/env python3
"""GitHub API wrapper for transferring repositories into the target organization."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional

import github
import requests

if TYPE_CHECKING:
    from github.Organization import Organization

from config import GitHubConfig
from github_api import (EXIT_GITHUB_ERROR, check_membership, open_client,
                        open_organization)
from logging_utils import Logger
from models import ArchivedRepository, MigrationResult

# Exit codes
EXIT_TRANSFER_ERROR = 32


class TransferError(Exception):
    """A transfer was rejected; carries the results recorded before it."""

    def __init__(
        self,
        repo_name: str,
        status_code: Optional[int],
        detail: str,
        results: List[MigrationResult],
    ) -> None:
        self.repo_name = repo_name
        self.status_code = status_code
        self.detail = detail
        self.results = results
        super().__init__(
            f"transfer of '{repo_name}' failed "
            f"(status: {status_code if status_code is not None else 'n/a'}): {detail}"
        )


class GitHubTarget:
    """Transfers repositories into the target organization."""

    def __init__(self, config: GitHubConfig, target_org: str) -> None:
        self.config = config
        self.target_org = target_org
        self.api: Optional[github.Github] = None
        self.org: Optional["Organization"] = None

    def connect(self) -> None:
        Logger.info(f"init github API (target): {self.config.api_url}")
        self.api = open_client(self.config)
        self.org = open_organization(self.api, self.target_org)
        check_membership(self.config, self.target_org)

    def transfer_repo(self, owner: str, name: str) -> bool:
        """Request transfer of ``owner/name`` into the target, keeping its name.

        Returns True for 202 Accepted, False for any other 2xx answer;
        statuses of 400 and above raise ``github.GithubException``.
        """
        if self.api is None:
            Logger.error("github API not initialized")
            sys.exit(EXIT_GITHUB_ERROR)
        repo = self.api.get_repo(f"{owner}/{name}", lazy=True)
        return repo.transfer_ownership(new_owner=self.target_org, new_name=name)

    def transfer_repos(
        self, owner: str, repos: List[ArchivedRepository]
    ) -> List[MigrationResult]:
        """Transfer ``repos`` one by one, stopping at the first rejection."""
        results: List[MigrationResult] = []
        total = len(repos)
        for idx, repo in enumerate(repos, start=1):
            try:
                accepted = self.transfer_repo(owner, repo.name)
            except github.GithubException as e:
                raise TransferError(
                    repo.name, e.status, _error_detail(e), results
                ) from e
            except requests.RequestException as e:
                raise TransferError(repo.name, None, str(e), results) from e

            state = "accepted" if accepted else "completed"
            Logger.info(
                f"[{idx}/{total}] transferred {repo.name} from org {owner} "
                f"to org {self.target_org} ({state})"
            )
            results.append(MigrationResult(original_url=repo.html_url))
        return results


def _error_detail(error: github.GithubException) -> str:
    data = error.data
    message = data.get("message") if isinstance(data, dict) else None
    return message or str(error)
