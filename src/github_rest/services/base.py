"""Common base for the endpoint services."""

from __future__ import annotations

from github_rest.infrastructure.api_client import ApiClient


class Service:
    """Groups the endpoint wrappers of one API area around a shared client."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client
