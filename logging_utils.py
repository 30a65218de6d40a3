#!/usr/bin/env python3
"""Colored console logging for gh-archive-mover."""

import os
import sys
import time
from typing import Dict, TextIO, Tuple

import colorama

from security import SecurityValidator

colorama.init(autoreset=True)


class Logger:
    """Console output prefixed with the process header.

    Every message is passed through ``SecurityValidator.sanitize_for_logging``
    so tokens never reach the terminal. Errors and security events go to
    stderr; everything else to stdout.
    """

    PROCESS_NAME = "gh-archive-mover"

    # level -> (color, use stderr)
    LEVELS: Dict[str, Tuple[str, bool]] = {
        "debug": (colorama.Fore.LIGHTBLACK_EX, False),
        "info": (colorama.Fore.CYAN, False),
        "warn": (colorama.Fore.YELLOW, False),
        "error": (colorama.Fore.RED, True),
        "security": (colorama.Fore.MAGENTA, True),
    }

    @classmethod
    def debug(cls, *messages: str) -> None:
        cls._emit("debug", messages)

    @classmethod
    def info(cls, *messages: str) -> None:
        cls._emit("info", messages)

    @classmethod
    def warn(cls, *messages: str) -> None:
        cls._emit("warn", messages)

    @classmethod
    def error(cls, *messages: str) -> None:
        cls._emit("error", messages)

    @classmethod
    def security_event(cls, event_type: str, details: str) -> None:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        cls._emit("security", (f"[SECURITY:{event_type}] {timestamp}: {details}",))

    @classmethod
    def _emit(cls, level: str, messages) -> None:
        color, to_stderr = cls.LEVELS[level]
        stream: TextIO = sys.stderr if to_stderr else sys.stdout
        text = " ".join(
            SecurityValidator.sanitize_for_logging(str(m)) for m in messages
        )
        header = f"[{cls.PROCESS_NAME}:{os.getpid()}]"
        stream.write(f"{color}{header}{colorama.Style.RESET_ALL} {text}\n")
