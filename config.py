#!/usr/bin/env python3
"""Configuration dataclasses for gh-archive-mover."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_RESULTS_FILE = "migrated-repo-results.txt"
TOKEN_ENV_VAR = "GITHUB_AUTH"


@dataclass
class GitHubConfig:
    """GitHub API access configuration."""
    api_url: str
    token: str


@dataclass
class MigrationConfig:
    """Source/target organizations and output location."""
    source_org: str
    target_org: str
    output_path: str
    dry_run: bool = False


@dataclass
class Config:
    """Main configuration for moving archived repositories."""
    github: GitHubConfig
    migration: MigrationConfig
