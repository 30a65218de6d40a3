#!/usr/bin/env python3
"""Shared GitHub API plumbing for the source and target wrappers."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Dict

import github
import requests

if TYPE_CHECKING:
    from github.Organization import Organization

from config import DEFAULT_API_URL, GitHubConfig
from logging_utils import Logger

# Exit codes
EXIT_AUTH_ERROR = 40
EXIT_GITHUB_ERROR = 31

API_VERSION = "2022-11-28"
REQUEST_TIMEOUT_S = 30
# The API caps per_page at 100
PAGE_SIZE = 100


def api_headers(token: str) -> Dict[str, str]:
    """Standard headers for raw REST calls."""
    return {
        "Accept": "application/vnd.github+json",
        "Authorization": f"Bearer {token}",
        "X-GitHub-Api-Version": API_VERSION,
    }


def open_client(config: GitHubConfig) -> github.Github:
    auth = github.Auth.Token(config.token)
    options = {"auth": auth, "per_page": PAGE_SIZE, "timeout": REQUEST_TIMEOUT_S}
    if config.api_url != DEFAULT_API_URL:
        options["base_url"] = config.api_url
    return github.Github(**options)


def open_organization(api: github.Github, org_name: str) -> "Organization":
    """Fetch an organization, exiting when the token cannot see it."""
    try:
        org = api.get_organization(org_name)
        Logger.debug(f"github org: {org.login}")
        return org
    except github.BadCredentialsException:
        Logger.error("authentication failed (github): invalid token")
        sys.exit(EXIT_AUTH_ERROR)
    except github.UnknownObjectException:
        Logger.error(
            f"not found (404): organization '{org_name}' does not exist or is "
            "not visible to this token"
        )
        sys.exit(EXIT_GITHUB_ERROR)
    except github.GithubException as e:
        Logger.error(f"github error while opening '{org_name}': {e}")
        sys.exit(EXIT_GITHUB_ERROR)
    except requests.RequestException as e:
        Logger.error(f"failed to contact github api: {e}")
        sys.exit(EXIT_GITHUB_ERROR)


def check_membership(config: GitHubConfig, org_name: str) -> None:
    """Report the token user's state and role in ``org_name``.

    Moving a repository in requires permission to create repositories in the
    target organization, which in practice means an admin role. Only an
    inactive membership is fatal; everything else is a warning.
    """
    url = f"{config.api_url}/user/memberships/orgs/{org_name}"
    try:
        response = requests.get(
            url, headers=api_headers(config.token), timeout=REQUEST_TIMEOUT_S
        )
    except requests.RequestException:
        Logger.warn("could not check org membership (request error)")
        return

    if response.status_code != 200:
        Logger.warn(
            f"could not check membership of '{org_name}' "
            f"(status {response.status_code}); transfers may be rejected"
        )
        return

    data = response.json()
    state = data.get("state")  # active, pending
    role = data.get("role")  # admin, member
    Logger.info(f"org membership in {org_name}: state={state}, role={role}")

    if state != "active":
        Logger.error(
            f"membership in '{org_name}' is not active; transfers will fail"
        )
        sys.exit(EXIT_GITHUB_ERROR)
    if role != "admin":
        Logger.warn(
            "membership role is not admin; GitHub may refuse transfers into "
            f"'{org_name}'"
        )
