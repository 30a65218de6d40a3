#!/usr/bin/env python3
"""Command line argument parsing and configuration building."""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, Tuple

from config import (DEFAULT_API_URL, DEFAULT_RESULTS_FILE, TOKEN_ENV_VAR,
                    Config, GitHubConfig, MigrationConfig)
from logging_utils import Logger
from security import SecurityValidator

# Exit codes
EXIT_AUTH_ERROR = 40
EXIT_MISSING_ARGUMENTS = 2


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gh-archive-mover",
        description=(
            "Transfer archived repositories from one GitHub organization to "
            "another and record their original URLs"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
The API token is read from the {TOKEN_ENV_VAR} environment variable.

Examples:
  %(prog)s --source-org acme --target-org acme-archive
  %(prog)s --source-org acme --target-org acme-archive --dry-run
  %(prog)s --source-org acme --target-org acme-archive \\
           --results-file /var/tmp/moved.txt
  %(prog)s --gh-api https://github.company.com/api/v3 \\
           --source-org team --target-org team-attic
        """,
    )
    return parser


def _add_organization_arguments(parser: argparse.ArgumentParser) -> None:
    """Add source/target organization arguments to parser."""
    parser.add_argument(
        "--source-org",
        dest="source_org",
        required=True,
        help="GitHub organization archived repositories are moved out of",
    )
    parser.add_argument(
        "--target-org",
        dest="target_org",
        required=True,
        help="GitHub organization archived repositories are moved into",
    )
    parser.add_argument(
        "--gh-api",
        dest="gh_api_url",
        default=DEFAULT_API_URL,
        help=f"Base URL of the GitHub API (default: {DEFAULT_API_URL})",
    )


def _add_behavior_arguments(parser: argparse.ArgumentParser) -> None:
    """Add output and behavior arguments to parser."""
    parser.add_argument(
        "--results-file",
        dest="results_file",
        default=DEFAULT_RESULTS_FILE,
        help=(
            "Path the results file will be written to "
            f"(default: {DEFAULT_RESULTS_FILE})"
        ),
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="List archived repositories without transferring them",
    )


def _validate_parsed_arguments(args) -> Tuple[str, str, str, str]:
    """Validate organization names, API URL and results path."""
    try:
        validated_api_url = SecurityValidator.validate_url(
            args.gh_api_url, ["https"]
        )
        validated_source = SecurityValidator.validate_org_name(args.source_org)
        validated_target = SecurityValidator.validate_org_name(args.target_org)
        if validated_source.lower() == validated_target.lower():
            raise ValueError("source and target organizations must differ")

        validated_results_file = SecurityValidator.validate_file_path(
            args.results_file
        )

        Logger.security_event(
            "CONFIG_VALIDATION", "successfully validated all configuration inputs"
        )
        return (
            validated_api_url,
            validated_source,
            validated_target,
            validated_results_file,
        )

    except ValueError as e:
        Logger.security_event(
            "CONFIG_VALIDATION_FAILED", f"configuration validation failed: {e}"
        )
        Logger.error(f"configuration validation error: {e}")
        sys.exit(EXIT_MISSING_ARGUMENTS)


def _get_token() -> str:
    """Read the API token from the environment, exiting if it is absent."""
    token = os.getenv(TOKEN_ENV_VAR, "").strip()
    if not token:
        Logger.security_event(
            "CREDENTIAL_MISSING", f"{TOKEN_ENV_VAR} environment variable not set"
        )
        Logger.error(f"error: {TOKEN_ENV_VAR} environment variable not set")
        sys.exit(EXIT_AUTH_ERROR)
    return token


def parse_arguments(argv: Optional[List[str]] = None) -> Config:
    """Parse command line arguments and return configuration object."""
    parser = _create_argument_parser()
    _add_organization_arguments(parser)
    _add_behavior_arguments(parser)

    args = parser.parse_args(argv)

    (
        validated_api_url,
        validated_source,
        validated_target,
        validated_results_file,
    ) = _validate_parsed_arguments(args)

    token = _get_token()

    return Config(
        github=GitHubConfig(api_url=validated_api_url, token=token),
        migration=MigrationConfig(
            source_org=validated_source,
            target_org=validated_target,
            output_path=validated_results_file,
            dry_run=args.dry_run,
        ),
    )
