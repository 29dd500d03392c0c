"""Page scanning — walk a list endpoint page by page.

Usage::

    async for repo in scan(
        lambda page: gh.repositories.list_by_org("github", opts.with_page(page))
    ):
        ...

The fetcher is called with ``None`` first and then with the
:class:`PageRequest` derived from each response, following offset pages
(``next_page``, which carries ``since`` for the "list all" endpoints) or
cursors (``after`` / ``cursor``) until GitHub stops advertising one.  A
non-numeric ``next_page_token`` is not followed.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, TypeVar

from github_rest.domain.entities import PageRequest
from github_rest.domain.ports.page_fetcher import PageFetcher
from github_rest.infrastructure.response import Response

logger = logging.getLogger(__name__)

T = TypeVar("T")


def next_page_request(response: Response) -> PageRequest | None:
    """Where to continue after *response*, or ``None`` on the last page."""
    if response.next_page:
        return PageRequest(page=response.next_page)
    if response.after:
        return PageRequest(after=response.after)
    if response.cursor:
        return PageRequest(cursor=response.cursor)
    return None


async def scan(fetch: PageFetcher[T]) -> AsyncIterator[T]:
    """Yield every item of every page; errors surface where they happen."""
    page: PageRequest | None = None
    pages = 0
    while True:
        items, response = await fetch(page)
        pages += 1
        for item in items:
            yield item
        page = next_page_request(response)
        if page is None:
            logger.debug("Pagination finished after %d page(s)", pages)
            return


async def scan_and_collect(fetch: PageFetcher[T]) -> list[T]:
    """Collect the items of all pages into one list."""
    return [item async for item in scan(fetch)]
