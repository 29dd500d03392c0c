"""Organizations API, see https://docs.github.com/rest/orgs"""

from __future__ import annotations

from github_rest.domain.models import Organization, User
from github_rest.domain.options import (
    ListMembersOptions,
    ListOptions,
    OrganizationsListOptions,
)
from github_rest.domain.value_objects import path_segment
from github_rest.infrastructure.response import Response
from github_rest.services.base import Service


class OrganizationsService(Service):
    """Endpoint wrappers for organizations and their membership."""

    async def list_for_user(
        self, user: str = "", opts: ListOptions | None = None
    ) -> tuple[list[Organization], Response]:
        """List organizations of *user*, or of the authenticated user when empty."""
        url = f"users/{path_segment(user, 'user')}/orgs" if user else "user/orgs"
        return await self._client.request("GET", url, opts=opts, result_type=list[Organization])

    async def list_all(
        self, opts: OrganizationsListOptions | None = None
    ) -> tuple[list[Organization], Response]:
        return await self._client.request(
            "GET", "organizations", opts=opts, result_type=list[Organization]
        )

    async def get(self, org: str) -> tuple[Organization, Response]:
        return await self._client.request(
            "GET", f"orgs/{path_segment(org, 'org')}", result_type=Organization
        )

    async def get_by_id(self, org_id: int) -> tuple[Organization, Response]:
        return await self._client.request(
            "GET", f"organizations/{int(org_id)}", result_type=Organization
        )

    async def edit(self, name: str, org: Organization) -> tuple[Organization, Response]:
        return await self._client.request(
            "PATCH", f"orgs/{path_segment(name, 'org')}", body=org, result_type=Organization
        )

    async def list_members(
        self, org: str, opts: ListMembersOptions | None = None
    ) -> tuple[list[User], Response]:
        """List members.

        Owners see concealed and public members, everybody else only public
        ones.  ``opts.public_only`` always restricts to public members.
        """
        kind = "public_members" if opts is not None and opts.public_only else "members"
        url = f"orgs/{path_segment(org, 'org')}/{kind}"
        return await self._client.request("GET", url, opts=opts, result_type=list[User])

    async def is_member(self, org: str, user: str) -> tuple[bool, Response]:
        url = f"orgs/{path_segment(org, 'org')}/members/{path_segment(user, 'user')}"
        return await self._client.request_bool("GET", url)

    async def is_public_member(self, org: str, user: str) -> tuple[bool, Response]:
        url = f"orgs/{path_segment(org, 'org')}/public_members/{path_segment(user, 'user')}"
        return await self._client.request_bool("GET", url)

    async def remove_member(self, org: str, user: str) -> Response:
        url = f"orgs/{path_segment(org, 'org')}/members/{path_segment(user, 'user')}"
        _, response = await self._client.request("DELETE", url)
        return response
