#!/usr/bin/env python3
"""Writes the URLs of transferred repositories to a results file."""

from __future__ import annotations

import sys
from typing import List

from logging_utils import Logger
from models import MigrationResult

# Exit codes
EXIT_IO_ERROR = 50


def write_results(path: str, results: List[MigrationResult]) -> None:
    """Create or truncate ``path`` and write one original URL per line."""
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as results_file:
            for result in results:
                results_file.write(f"{result.original_url}\n")
    except OSError as e:
        Logger.error(f"error: writing results file {path} failed: {e}")
        sys.exit(EXIT_IO_ERROR)

    Logger.info(f"wrote {len(results)} result(s) to {path}")
