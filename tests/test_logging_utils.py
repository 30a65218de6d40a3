"""Tests for console logging."""

from __future__ import annotations

import pytest

from logging_utils import Logger


def test_info_goes_to_stdout_with_header(capsys: pytest.CaptureFixture) -> None:
    Logger.info('found', 3, 'archived repositories')

    captured = capsys.readouterr()
    assert '[gh-archive-mover:' in captured.out
    assert 'found 3 archived repositories' in captured.out
    assert captured.err == ''


def test_error_and_security_events_go_to_stderr(capsys: pytest.CaptureFixture) -> None:
    Logger.error('transfer failed')
    Logger.security_event('CONFIG_VALIDATION', 'ok')

    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'transfer failed' in captured.err
    assert '[SECURITY:CONFIG_VALIDATION]' in captured.err


def test_messages_are_redacted(capsys: pytest.CaptureFixture) -> None:
    Logger.warn('using ghp_abcdef1234567890')

    out = capsys.readouterr().out
    assert 'ghp_abcdef' not in out
    assert '[GITHUB_TOKEN_REDACTED]' in out
