"""Meta, emojis and codes of conduct — small endpoints describing GitHub itself."""

from __future__ import annotations

from urllib.parse import urlencode

from github_rest.domain.models import APIMeta, CodeOfConduct
from github_rest.domain.value_objects import path_segment
from github_rest.infrastructure.response import Response
from github_rest.services.base import Service


class MetaService(Service):
    async def get(self) -> tuple[APIMeta, Response]:
        """Service IP ranges, SSH key fingerprints and related metadata."""
        return await self._client.request("GET", "meta", result_type=APIMeta)

    async def octocat(self, message: str = "") -> tuple[str, Response]:
        """ASCII-art octocat saying *message* (or a random zen line)."""
        url = "octocat"
        if message:
            url += "?" + urlencode({"s": message})
        return await self._client.request("GET", url, result_type=str)

    async def zen(self) -> tuple[str, Response]:
        return await self._client.request("GET", "zen", result_type=str)

    async def list_emojis(self) -> tuple[dict[str, str], Response]:
        """Emoji name → image URL."""
        return await self._client.request("GET", "emojis", result_type=dict[str, str])

    async def list_codes_of_conduct(self) -> tuple[list[CodeOfConduct], Response]:
        return await self._client.request(
            "GET", "codes_of_conduct", result_type=list[CodeOfConduct]
        )

    async def get_code_of_conduct(self, key: str) -> tuple[CodeOfConduct, Response]:
        return await self._client.request(
            "GET", f"codes_of_conduct/{path_segment(key, 'key')}", result_type=CodeOfConduct
        )
