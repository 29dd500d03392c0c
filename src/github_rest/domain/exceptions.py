"""Exception hierarchy.

Errors raised by the client fall into three groups: malformed input caught
before any I/O, transport failures, and non-2xx responses from GitHub.  The
last group is further typed from the status code and headers by
:func:`github_rest.infrastructure.api_client.check_response`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

    from github_rest.domain.models import Rate


class GitHubError(Exception):
    """Base exception for the entire library."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidPathError(GitHubError, ValueError):
    """An identifier cannot be placed safely into a request path."""


class ConfigurationError(GitHubError):
    """The client was configured with an unusable base URL or setting."""


# ── Transport / decoding ────────────────────────────────────────────────────


class TransportError(GitHubError):
    """The request never produced an HTTP response (DNS, TLS, timeout, ...)."""


class ResponseDecodeError(GitHubError):
    """A successful response body could not be decoded into the expected type."""


class AcceptedError(GitHubError):
    """GitHub answered 202: the job was scheduled and the result is not ready yet."""

    def __init__(self, raw: bytes = b"") -> None:
        super().__init__("job scheduled on GitHub side; try again later")
        self.raw = raw


# ── API errors ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ErrorDetail:
    """One entry of the ``errors`` array of an API error body.

    Validation codes documented by GitHub: ``missing``, ``missing_field``,
    ``invalid``, ``already_exists`` and ``custom`` (see ``message``).
    """

    resource: str = ""
    field: str = ""
    code: str = ""
    message: str = ""

    @classmethod
    def from_json(cls, item: Any) -> ErrorDetail:
        # Some endpoints return plain strings instead of objects.
        if isinstance(item, str):
            return cls(message=item)
        if not isinstance(item, dict):
            return cls(message=str(item))
        return cls(
            resource=str(item.get("resource") or ""),
            field=str(item.get("field") or ""),
            code=str(item.get("code") or ""),
            message=str(item.get("message") or ""),
        )

    def __str__(self) -> str:
        if self.code == "custom" or not self.code:
            return self.message
        return f"{self.code} error caused by {self.field} field on {self.resource} resource"


class ErrorResponse(GitHubError):
    """GitHub answered with a non-2xx status code."""

    def __init__(
        self,
        response: httpx.Response,
        message: str = "",
        errors: list[ErrorDetail] | None = None,
        documentation_url: str = "",
    ) -> None:
        self.response = response
        self.message = message
        self.errors = errors or []
        self.documentation_url = documentation_url
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self) -> str:
        request = self.response.request
        text = f"{request.method} {request.url}: {self.response.status_code} {self.message}"
        if self.errors:
            text += " [" + ", ".join(str(e) for e in self.errors) + "]"
        return text


class RedirectionError(ErrorResponse):
    """301 received while the transport does not follow redirects."""

    @property
    def location(self) -> str | None:
        return self.response.headers.get("Location")


class TwoFactorAuthError(ErrorResponse):
    """401 because the user must supply a two-factor OTP code."""


class NotFoundError(ErrorResponse):
    """The resource does not exist or is hidden from the caller (404)."""


class ValidationFailedError(ErrorResponse):
    """GitHub rejected the request body (422)."""


class RateLimitError(ErrorResponse):
    """The primary rate limit for this category is exhausted."""

    def __init__(self, response: httpx.Response, message: str, rate: Rate) -> None:
        self.rate = rate
        super().__init__(response, message)

    def __str__(self) -> str:
        request = self.response.request
        reset = self.rate.reset.isoformat() if self.rate.reset else "unknown"
        return (
            f"{request.method} {request.url}: {self.response.status_code} "
            f"{self.message} [rate reset at {reset}]"
        )


class AbuseRateLimitError(ErrorResponse):
    """A secondary (abuse detection) rate limit was triggered."""

    def __init__(
        self,
        response: httpx.Response,
        message: str,
        retry_after: timedelta | None = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(response, message)
