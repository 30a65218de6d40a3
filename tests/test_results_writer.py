"""Tests for the results file writer."""

from __future__ import annotations

from pathlib import Path

import pytest

from models import MigrationResult
from results_writer import write_results


def test_write_results_one_url_per_line(tmp_path: Path) -> None:
    path = tmp_path / 'results.txt'
    results = [
        MigrationResult(original_url='https://github.com/old-org/b'),
        MigrationResult(original_url='https://github.com/old-org/a'),
    ]

    write_results(str(path), results)

    assert path.read_text(encoding='utf-8') == (
        'https://github.com/old-org/b\n'
        'https://github.com/old-org/a\n'
    )


def test_write_results_truncates_existing_file(tmp_path: Path) -> None:
    path = tmp_path / 'results.txt'
    path.write_text('stale line\nanother\n', encoding='utf-8')

    write_results(str(path), [MigrationResult(original_url='https://github.com/o/r')])

    assert path.read_text(encoding='utf-8').splitlines() == ['https://github.com/o/r']


def test_write_results_empty_creates_file(tmp_path: Path) -> None:
    path = tmp_path / 'results.txt'

    write_results(str(path), [])

    assert path.exists()
    assert path.read_text(encoding='utf-8') == ''


def test_write_results_unwritable_path_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        write_results(str(tmp_path), [MigrationResult(original_url='https://x/y')])

    assert excinfo.value.code == 50
