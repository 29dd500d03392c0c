"""Optional query parameters accepted by the list / search endpoints.

Option models render to query strings through :meth:`QueryOptions.to_query`:
``None`` values are skipped, lists are comma-joined and booleans are
lowercased.  Fields declared with ``exclude=True`` steer the endpoint wrapper
(they pick a path or a header) and never reach the query string.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from github_rest.domain.entities import PageRequest


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(_render(v) for v in value)
    return str(value)


class QueryOptions(BaseModel):
    """Base class for option objects that are encoded as URL query params."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    # Field that receives PageRequest.page.
    page_field: ClassVar[str] = "page"

    def to_query(self) -> dict[str, str]:
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {key: _render(value) for key, value in data.items()}

    def with_page(self, page: PageRequest | None) -> QueryOptions:
        """Return a copy pointed at *page*.

        Raises ``ValueError`` when this model has no field for the kind of
        page requested, since ignoring it would refetch the same page.
        """
        if page is None:
            return self
        update: dict[str, Any] = {}
        for name, value in (
            (self.page_field, page.page),
            ("after", page.after),
            ("cursor", page.cursor),
        ):
            if value is None:
                continue
            if name not in type(self).model_fields:
                raise ValueError(f"{type(self).__name__} cannot paginate by {name}={value!r}")
            update[name] = value
        return self.model_copy(update=update)


class ListOptions(QueryOptions):
    """Offset pagination shared by most list endpoints."""

    page: int | None = None
    per_page: int | None = None


class ListCursorOptions(QueryOptions):
    """Cursor pagination used by the newer list endpoints."""

    per_page: int | None = None
    after: str | None = None
    before: str | None = None
    cursor: str | None = None


class SinceOptions(QueryOptions):
    """``since``-based pagination of the "list all" endpoints."""

    page_field = "since"

    since: int | None = None
    per_page: int | None = None


# ── Users / organizations ───────────────────────────────────────────────────


class UserListOptions(SinceOptions):
    pass


class OrganizationsListOptions(SinceOptions):
    pass


class ListMembersOptions(ListOptions):
    # Selects /public_members instead of /members.
    public_only: bool = Field(default=False, exclude=True)

    filter: str | None = None
    role: str | None = None


# ── Repositories ────────────────────────────────────────────────────────────


class RepositoryListByUserOptions(ListOptions):
    type: str | None = None
    sort: str | None = None
    direction: str | None = None


class RepositoryListByAuthenticatedUserOptions(ListOptions):
    visibility: str | None = None
    affiliation: str | None = None
    type: str | None = None
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None
    before: datetime | None = None


class RepositoryListByOrgOptions(ListOptions):
    type: str | None = None
    sort: str | None = None
    direction: str | None = None


class RepositoryListAllOptions(QueryOptions):
    page_field = "since"

    since: int | None = None


class RepositoryListForksOptions(ListOptions):
    sort: str | None = None


class BranchListOptions(ListOptions):
    protected: bool | None = None


# ── Issues ──────────────────────────────────────────────────────────────────


class IssueListOptions(ListOptions):
    filter: str | None = None
    state: str | None = None
    labels: list[str] | None = None
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None


class IssueListByRepoOptions(ListOptions):
    milestone: str | None = None
    state: str | None = None
    assignee: str | None = None
    creator: str | None = None
    mentioned: str | None = None
    labels: list[str] | None = None
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None


class IssueListCommentsOptions(ListOptions):
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None


# ── Gists / activity ────────────────────────────────────────────────────────


class GistListOptions(ListOptions):
    since: datetime | None = None


class ActivityListStarredOptions(ListOptions):
    sort: str | None = None
    direction: str | None = None


# ── Search ──────────────────────────────────────────────────────────────────


class SearchOptions(ListOptions):
    # Requests text-match metadata through the Accept header.
    text_match: bool = Field(default=False, exclude=True)

    sort: str | None = None
    order: str | None = None
