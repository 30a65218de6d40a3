#!/usr/bin/env python3
"""Main orchestrator for moving archived repositories between organizations."""

from __future__ import annotations

from config import Config
from github_source import GitHubSource
from github_target import EXIT_TRANSFER_ERROR, GitHubTarget, TransferError
from logging_utils import Logger
from results_writer import write_results

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1


class MigrationOrchestrator:
    def __init__(self, cfg: Config) -> None:
        self.cfg = cfg
        self.source = GitHubSource(cfg.github)
        self.target = GitHubTarget(cfg.github, cfg.migration.target_org)

    def run(self) -> int:
        source_org = self.cfg.migration.source_org
        target_org = self.cfg.migration.target_org
        try:
            self.source.connect(source_org)
            self.target.connect()

            repos = self.source.list_archived_repos(source_org)

            if self.cfg.migration.dry_run:
                total = len(repos)
                for idx, repo in enumerate(repos, start=1):
                    Logger.info(
                        f"[{idx}/{total}] would transfer: {source_org}/{repo.name} "
                        f"-> {target_org}/{repo.name}"
                    )
                Logger.info("dry-run completed")
                return EXIT_SUCCESS

            try:
                results = self.target.transfer_repos(source_org, repos)
            except TransferError as e:
                Logger.error(
                    f"error: migrating repo {e.repo_name} from org {source_org} "
                    f"to org {target_org}: {e}"
                )
                Logger.warn(
                    f"stopping after {len(e.results)} accepted transfer(s); "
                    "recording them before exit"
                )
                write_results(self.cfg.migration.output_path, e.results)
                return EXIT_TRANSFER_ERROR

            write_results(self.cfg.migration.output_path, results)
            Logger.info("mission accomplished")
            return EXIT_SUCCESS
        except SystemExit as e:
            return int(e.code) if isinstance(e.code, int) else EXIT_EXECUTION_ERROR
        except Exception as e:
            Logger.error(f"unexpected error: {e}")
            return EXIT_EXECUTION_ERROR
