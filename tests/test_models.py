"""Tests for repository descriptors."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from models import ArchivedRepository


def test_from_github_copies_fields() -> None:
    repo = SimpleNamespace(name='x', archived=True, html_url='https://github.com/o/x')

    assert ArchivedRepository.from_github(repo) == ArchivedRepository(
        name='x', archived=True, html_url='https://github.com/o/x'
    )


@pytest.mark.parametrize('html_url', [None, ''])
def test_from_github_requires_url(html_url) -> None:
    repo = SimpleNamespace(name='x', archived=True, html_url=html_url)

    with pytest.raises(ValueError):
        ArchivedRepository.from_github(repo)
