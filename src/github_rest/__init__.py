"""Async client for the GitHub REST API."""

from github_rest.client import GitHub
from github_rest.domain.entities import PageRequest, RateCategory
from github_rest.domain.exceptions import (
    AbuseRateLimitError,
    AcceptedError,
    ConfigurationError,
    ErrorDetail,
    ErrorResponse,
    GitHubError,
    InvalidPathError,
    NotFoundError,
    RateLimitError,
    RedirectionError,
    ResponseDecodeError,
    TransportError,
    TwoFactorAuthError,
    ValidationFailedError,
)
from github_rest.domain.value_objects import RepoRef
from github_rest.infrastructure.config import LIBRARY_VERSION, Settings, get_settings
from github_rest.infrastructure.pagination import scan, scan_and_collect
from github_rest.infrastructure.response import Response

__version__ = LIBRARY_VERSION

__all__ = [
    "AbuseRateLimitError",
    "AcceptedError",
    "ConfigurationError",
    "ErrorDetail",
    "ErrorResponse",
    "GitHub",
    "GitHubError",
    "InvalidPathError",
    "NotFoundError",
    "PageRequest",
    "RateCategory",
    "RateLimitError",
    "RedirectionError",
    "RepoRef",
    "Response",
    "ResponseDecodeError",
    "Settings",
    "TransportError",
    "TwoFactorAuthError",
    "ValidationFailedError",
    "get_settings",
    "scan",
    "scan_and_collect",
]
