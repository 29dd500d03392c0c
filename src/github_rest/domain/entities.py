"""Internal value records that never travel over the wire as-is."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RateCategory(str, Enum):
    """Bucket GitHub counts a request against for its primary rate limit."""

    CORE = "core"
    SEARCH = "search"
    GRAPHQL = "graphql"
    INTEGRATION_MANIFEST = "integration_manifest"
    SOURCE_IMPORT = "source_import"
    CODE_SCANNING_UPLOAD = "code_scanning_upload"
    ACTIONS_RUNNER_REGISTRATION = "actions_runner_registration"
    SCIM = "scim"
    DEPENDENCY_SNAPSHOTS = "dependency_snapshots"
    CODE_SEARCH = "code_search"
    AUDIT_LOG = "audit_log"

    @classmethod
    def for_request(cls, method: str, path: str) -> RateCategory:
        """Classify a request by HTTP method and API path (leading ``/``)."""
        method = method.upper()
        if path.startswith("/search/code") and method == "GET":
            return cls.CODE_SEARCH
        if path.startswith("/search/"):
            return cls.SEARCH
        if path.startswith("/graphql"):
            return cls.GRAPHQL
        if (
            path.startswith("/app-manifests/")
            and path.endswith("/conversions")
            and method == "POST"
        ):
            return cls.INTEGRATION_MANIFEST
        if path.startswith("/repos/") and path.endswith("/import") and method == "PUT":
            return cls.SOURCE_IMPORT
        if (
            path.startswith("/repos/")
            and path.endswith("/code-scanning/sarifs")
            and method == "POST"
        ):
            return cls.CODE_SCANNING_UPLOAD
        if path.endswith("/actions/runners/registration-token") and method == "POST":
            return cls.ACTIONS_RUNNER_REGISTRATION
        if path.startswith("/scim/"):
            return cls.SCIM
        if (
            path.startswith("/repos/")
            and path.endswith("/dependency-graph/snapshots")
            and method == "POST"
        ):
            return cls.DEPENDENCY_SNAPSHOTS
        if path.startswith(("/orgs/", "/enterprises/")) and path.endswith("/audit-log"):
            return cls.AUDIT_LOG
        return cls.CORE


@dataclass(frozen=True, slots=True)
class PageRequest:
    """Which page to fetch next.

    ``page`` is an offset page or, for the "list all" endpoints, the ``since``
    id; ``after`` and ``cursor`` are opaque cursors.
    """

    page: int | None = None
    after: str | None = None
    cursor: str | None = None
