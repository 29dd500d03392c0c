"""Translate library errors into CLI messages and exit codes.

Each library exception maps to a specific process exit code; the first
matching entry of the table wins, so subclasses are listed before their
bases.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import typer
from rich import print as rprint
from rich.markup import escape

from github_rest.domain.exceptions import (
    AbuseRateLimitError,
    AcceptedError,
    ConfigurationError,
    ErrorResponse,
    GitHubError,
    InvalidPathError,
    NotFoundError,
    RateLimitError,
    ResponseDecodeError,
    TransportError,
    TwoFactorAuthError,
)

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1

_EXCEPTION_EXIT: list[tuple[type[GitHubError], int]] = [
    (InvalidPathError, 2),
    (ConfigurationError, 2),
    (NotFoundError, 3),
    (TwoFactorAuthError, 4),
    (RateLimitError, 5),
    (AbuseRateLimitError, 5),
    (AcceptedError, 6),
    (TransportError, 7),
    (ResponseDecodeError, 8),
    (ErrorResponse, 9),
]


def exit_code_for(exc: GitHubError) -> int:
    for exc_type, code in _EXCEPTION_EXIT:
        if isinstance(exc, exc_type):
            return code
    return EXIT_FAILURE


def report_error(exc: GitHubError) -> int:
    """Log and print *exc*; return the exit code it maps to."""
    logger.warning("%s: %s", type(exc).__name__, exc)
    hint = ""
    if isinstance(exc, RateLimitError) and exc.rate.reset is not None:
        hint = f" (resets at {exc.rate.reset:%Y-%m-%d %H:%M:%S UTC}; set GITHUB_TOKEN to raise the limit)"
    rprint(f"[red]Error:[/red] {escape(str(exc) + hint)}")
    return exit_code_for(exc)


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn a :class:`GitHubError` raised inside the block into ``typer.Exit``."""
    try:
        yield
    except GitHubError as exc:
        raise typer.Exit(report_error(exc)) from exc
