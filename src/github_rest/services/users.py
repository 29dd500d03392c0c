"""Users API, see https://docs.github.com/rest/users"""

from __future__ import annotations

from github_rest.domain.models import User
from github_rest.domain.options import ListOptions, UserListOptions
from github_rest.domain.value_objects import path_segment
from github_rest.infrastructure.response import Response
from github_rest.services.base import Service


class UsersService(Service):
    """Endpoint wrappers for user accounts and followers."""

    async def get(self, user: str = "") -> tuple[User, Response]:
        """Fetch a user.  An empty *user* fetches the authenticated user."""
        url = f"users/{path_segment(user, 'user')}" if user else "user"
        return await self._client.request("GET", url, result_type=User)

    async def get_by_id(self, user_id: int) -> tuple[User, Response]:
        return await self._client.request("GET", f"user/{int(user_id)}", result_type=User)

    async def edit(self, user: User) -> tuple[User, Response]:
        """Update the authenticated user; only fields set on *user* are sent."""
        return await self._client.request("PATCH", "user", body=user, result_type=User)

    async def list_all(self, opts: UserListOptions | None = None) -> tuple[list[User], Response]:
        """List all users in sign-up order; paginate with ``since``."""
        return await self._client.request("GET", "users", opts=opts, result_type=list[User])

    async def list_followers(
        self, user: str = "", opts: ListOptions | None = None
    ) -> tuple[list[User], Response]:
        url = f"users/{path_segment(user, 'user')}/followers" if user else "user/followers"
        return await self._client.request("GET", url, opts=opts, result_type=list[User])

    async def list_following(
        self, user: str = "", opts: ListOptions | None = None
    ) -> tuple[list[User], Response]:
        url = f"users/{path_segment(user, 'user')}/following" if user else "user/following"
        return await self._client.request("GET", url, opts=opts, result_type=list[User])

    async def is_following(self, user: str, target: str) -> tuple[bool, Response]:
        """Whether *user* follows *target*; an empty *user* means the caller."""
        target_seg = path_segment(target, "target")
        if user:
            url = f"users/{path_segment(user, 'user')}/following/{target_seg}"
        else:
            url = f"user/following/{target_seg}"
        return await self._client.request_bool("GET", url)

    async def follow(self, user: str) -> Response:
        _, response = await self._client.request(
            "PUT", f"user/following/{path_segment(user, 'user')}"
        )
        return response

    async def unfollow(self, user: str) -> Response:
        _, response = await self._client.request(
            "DELETE", f"user/following/{path_segment(user, 'user')}"
        )
        return response
