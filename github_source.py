#!/usr/bin/env python3
"""GitHub API wrapper for discovering archived repositories in an organization."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional

import github
import requests

if TYPE_CHECKING:
    from github.Organization import Organization

from config import GitHubConfig
from github_api import EXIT_GITHUB_ERROR, open_client, open_organization
from logging_utils import Logger
from models import ArchivedRepository


class GitHubSource:
    """Lists the archived repositories of the source organization."""

    def __init__(self, config: GitHubConfig) -> None:
        self.config = config
        self.api: Optional[github.Github] = None
        self.org: Optional["Organization"] = None

    def connect(self, org_name: str) -> None:
        Logger.info(f"init github API (source): {self.config.api_url}")
        self.api = open_client(self.config)
        self.org = open_organization(self.api, org_name)

    def list_archived_repos(self, org_name: str) -> List[ArchivedRepository]:
        """Return every archived repository of ``org_name``.

        ``get_repos`` walks all pages of the listing, so the result is never
        truncated. Any page failure aborts the listing.
        """
        if self.api is None or self.org is None:
            Logger.error("github API not initialized")
            sys.exit(EXIT_GITHUB_ERROR)

        Logger.info(f"discovering archived repositories under: {org_name}")
        archived: List[ArchivedRepository] = []
        seen = 0
        try:
            for repo in self.org.get_repos(type="all"):
                seen += 1
                if not repo.archived:
                    continue
                archived.append(ArchivedRepository.from_github(repo))
                Logger.debug(f"found: {org_name}/{repo.name}")
        except github.GithubException as e:
            Logger.error(f"error: listing repositories in {org_name}: {e}")
            sys.exit(EXIT_GITHUB_ERROR)
        except requests.RequestException as e:
            Logger.error(f"error: listing repositories in {org_name}: {e}")
            sys.exit(EXIT_GITHUB_ERROR)
        except ValueError as e:
            Logger.error(f"error: unexpected repository data in {org_name}: {e}")
            sys.exit(EXIT_GITHUB_ERROR)

        Logger.info(
            f"found {len(archived)} archived repositories "
            f"(out of {seen} in {org_name})"
        )
        return archived
