# keypad_solver/logger.py
# Lightweight logging utilities for the optimizer.
# info/debug go to stdout, warnings and errors to stderr. Errors are never muted.

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Logger:
    enabled: bool = True
    verbose: bool = False
    prefix: str = "[KEYPAD]"

    def debug(self, msg: str) -> None:
        if self.enabled and self.verbose:
            print(f"{self.prefix} DEBUG: {msg}", file=sys.stdout)

    def info(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} {msg}", file=sys.stdout)

    def warn(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} WARNING: {msg}", file=sys.stderr)

    def error(self, msg: str) -> None:
        print(f"{self.prefix} ERROR: {msg}", file=sys.stderr)


# Global default logger
LOGGER = Logger(enabled=True)


def set_enabled(flag: bool) -> None:
    LOGGER.enabled = bool(flag)


def set_verbose(flag: bool) -> None:
    LOGGER.verbose = bool(flag)


def get_logger() -> Logger:
    return LOGGER


@contextmanager
def muted() -> Iterator[Logger]:
    """Temporarily silence info/debug/warn output (errors still print)."""
    prev = LOGGER.enabled
    LOGGER.enabled = False
    try:
        yield LOGGER
    finally:
        LOGGER.enabled = prev
