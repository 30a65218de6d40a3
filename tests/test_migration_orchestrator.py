"""Tests for MigrationOrchestrator run flow."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from config import Config, GitHubConfig, MigrationConfig
from github_target import TransferError
from migration_orchestrator import MigrationOrchestrator
from models import ArchivedRepository, MigrationResult


def _make_config(tmp_path: Path, dry_run: bool = False) -> Config:
    return Config(
        github=GitHubConfig(api_url='https://api.github.com', token='gh-token'),
        migration=MigrationConfig(
            source_org='old-org',
            target_org='new-org',
            output_path=str(tmp_path / 'migrated-repo-results.txt'),
            dry_run=dry_run,
        ),
    )


def _make_orchestrator(tmp_path: Path, dry_run: bool = False) -> MigrationOrchestrator:
    orchestrator = MigrationOrchestrator(_make_config(tmp_path, dry_run=dry_run))
    orchestrator.source = MagicMock()
    orchestrator.target = MagicMock()
    return orchestrator


def _archived(name: str) -> ArchivedRepository:
    return ArchivedRepository(
        name=name, archived=True, html_url=f'https://github.com/old-org/{name}'
    )


def test_run_writes_results_in_transfer_order(tmp_path: Path) -> None:
    orchestrator = _make_orchestrator(tmp_path)
    repos = [_archived('one'), _archived('two')]
    orchestrator.source.list_archived_repos.return_value = repos
    orchestrator.target.transfer_repos.return_value = [
        MigrationResult(original_url=repo.html_url) for repo in repos
    ]

    assert orchestrator.run() == 0

    orchestrator.source.list_archived_repos.assert_called_once_with('old-org')
    orchestrator.target.transfer_repos.assert_called_once_with('old-org', repos)
    lines = (tmp_path / 'migrated-repo-results.txt').read_text().splitlines()
    assert lines == [
        'https://github.com/old-org/one',
        'https://github.com/old-org/two',
    ]


def test_run_with_no_archived_repos_creates_empty_file(tmp_path: Path) -> None:
    orchestrator = _make_orchestrator(tmp_path)
    orchestrator.source.list_archived_repos.return_value = []
    orchestrator.target.transfer_repos.return_value = []

    assert orchestrator.run() == 0

    results_file = tmp_path / 'migrated-repo-results.txt'
    assert results_file.exists()
    assert results_file.read_text() == ''


def test_run_listing_failure_skips_transfers(tmp_path: Path) -> None:
    orchestrator = _make_orchestrator(tmp_path)
    orchestrator.source.list_archived_repos.side_effect = SystemExit(31)

    assert orchestrator.run() == 31

    orchestrator.target.transfer_repos.assert_not_called()
    assert not (tmp_path / 'migrated-repo-results.txt').exists()


def test_run_transfer_failure_records_accepted_transfers(tmp_path: Path) -> None:
    """Transfers accepted before a rejection are still written out."""
    orchestrator = _make_orchestrator(tmp_path)
    orchestrator.source.list_archived_repos.return_value = [
        _archived('one'),
        _archived('two'),
    ]
    orchestrator.target.transfer_repos.side_effect = TransferError(
        'two',
        403,
        'Must have admin rights to Repository.',
        [MigrationResult(original_url='https://github.com/old-org/one')],
    )

    assert orchestrator.run() == 32

    lines = (tmp_path / 'migrated-repo-results.txt').read_text().splitlines()
    assert lines == ['https://github.com/old-org/one']


def test_run_dry_run_does_not_transfer(tmp_path: Path) -> None:
    orchestrator = _make_orchestrator(tmp_path, dry_run=True)
    orchestrator.source.list_archived_repos.return_value = [_archived('one')]

    assert orchestrator.run() == 0

    orchestrator.target.transfer_repos.assert_not_called()
    assert not (tmp_path / 'migrated-repo-results.txt').exists()


def test_run_unexpected_error_returns_execution_error(tmp_path: Path) -> None:
    orchestrator = _make_orchestrator(tmp_path)
    orchestrator.source.connect.side_effect = RuntimeError('boom')

    assert orchestrator.run() == 1
