"""Port: single-page fetch, the unit the pagination helpers drive."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, TypeVar

from github_rest.domain.entities import PageRequest

if TYPE_CHECKING:
    from github_rest.infrastructure.response import Response

T_co = TypeVar("T_co", covariant=True)


class PageFetcher(Protocol[T_co]):
    """Fetch one page of a list endpoint.

    Called with ``None`` for the first page, then with the
    :class:`PageRequest` derived from the previous response.
    """

    async def __call__(self, page: PageRequest | None) -> tuple[Sequence[T_co], Response]:
        ...
