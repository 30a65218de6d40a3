#!/usr/bin/env python3
"""
gh-archive-mover - Move archived repositories from one GitHub organization
to another.

Lists every archived repository in the source organization, asks GitHub to
transfer each one (keeping its name) into the target organization, and
writes the original URL of every accepted transfer to a results file.
Transfers are processed by GitHub asynchronously; a 202 Accepted answer
means the move has started.
"""

from __future__ import annotations

import sys
from typing import NoReturn

from argument_parser import parse_arguments
from migration_orchestrator import MigrationOrchestrator


def main() -> NoReturn:
    cfg = parse_arguments()
    orchestrator = MigrationOrchestrator(cfg)
    sys.exit(orchestrator.run())


if __name__ == "__main__":
    main()
