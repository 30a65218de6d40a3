#!/usr/bin/env python3
"""Input validation and log redaction for gh-archive-mover."""

import os
import re
from typing import List, Optional


class SecurityValidator:
    """Validation of CLI inputs and sanitization of log output."""

    MAX_ORG_NAME_LENGTH = 100
    MAX_URL_LENGTH = 2048
    MAX_PATH_LENGTH = 500

    # GitHub logins: alphanumerics, '-', plus '.' and '_' seen on GHES
    SAFE_ORG_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")

    @staticmethod
    def _has_control_chars(value: str) -> bool:
        return "\x00" in value or any(ord(c) < 32 for c in value)

    @classmethod
    def validate_org_name(cls, name: str) -> str:
        """Validate a GitHub organization login."""
        if not name or not isinstance(name, str):
            raise ValueError("Organization name must be a non-empty string")

        if len(name) > cls.MAX_ORG_NAME_LENGTH:
            raise ValueError(
                f"Organization name exceeds maximum length of {cls.MAX_ORG_NAME_LENGTH}"
            )

        if cls._has_control_chars(name):
            raise ValueError(
                "Organization name contains null bytes or control characters"
            )

        if not cls.SAFE_ORG_NAME_PATTERN.match(name):
            raise ValueError(f"Organization name '{name}' contains invalid characters")

        return name

    @classmethod
    def validate_url(cls, url: str, allowed_schemes: Optional[List[str]] = None) -> str:
        """Validate an API base URL and strip any trailing slash."""
        if not url or not isinstance(url, str):
            raise ValueError("URL must be a non-empty string")

        if len(url) > cls.MAX_URL_LENGTH:
            raise ValueError(f"URL exceeds maximum length of {cls.MAX_URL_LENGTH}")

        if "\x00" in url or any(ord(c) < 32 for c in url if c not in "\t\n\r"):
            raise ValueError("URL contains null bytes or control characters")

        if "://" not in url:
            raise ValueError("URL must include a scheme")

        scheme = url.split("://", 1)[0].lower()
        if allowed_schemes and scheme not in allowed_schemes:
            raise ValueError(
                f"URL scheme '{scheme}' not in allowed schemes: {allowed_schemes}"
            )

        return url.rstrip("/")

    @classmethod
    def validate_file_path(cls, path: str) -> str:
        """Validate the results file path."""
        if not path or not isinstance(path, str):
            raise ValueError("File path must be a non-empty string")

        if len(path) > cls.MAX_PATH_LENGTH:
            raise ValueError(
                f"File path exceeds maximum length of {cls.MAX_PATH_LENGTH}"
            )

        if "\x00" in path:
            raise ValueError("File path contains null bytes")

        return os.path.normpath(path)

    @classmethod
    def sanitize_for_logging(cls, message: str) -> str:
        """Redact credentials that may appear in log messages."""
        if not message:
            return message

        patterns = [
            (r"https://[^:/@\s]+:[^@\s]+@", "https://[REDACTED]@"),  # URLs with credentials
            (r"(bearer|token)\s+[A-Za-z0-9_.-]{8,}", r"\1 [REDACTED]"),  # Auth headers
            (r"gh[pousr]_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # Classic tokens
            (r"github_pat_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # Fine-grained
        ]

        sanitized = message
        for pattern, replacement in patterns:
            sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

        return sanitized
