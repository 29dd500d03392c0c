"""Issues API, see https://docs.github.com/rest/issues"""

from __future__ import annotations

from github_rest.domain.models import Issue, IssueComment, IssueRequest, Label
from github_rest.domain.options import (
    IssueListByRepoOptions,
    IssueListCommentsOptions,
    IssueListOptions,
    ListOptions,
)
from github_rest.domain.value_objects import path_segment, repo_path
from github_rest.infrastructure.response import Response
from github_rest.services.base import Service


class IssuesService(Service):
    """Endpoint wrappers for issues, their comments and labels."""

    async def list_for_authenticated_user(
        self, all_issues: bool = False, opts: IssueListOptions | None = None
    ) -> tuple[list[Issue], Response]:
        """List issues assigned to the authenticated user.

        With *all_issues* the listing spans every visible repository,
        including owned, member and organization repositories.
        """
        url = "issues" if all_issues else "user/issues"
        return await self._client.request("GET", url, opts=opts, result_type=list[Issue])

    async def list_by_org(
        self, org: str, opts: IssueListOptions | None = None
    ) -> tuple[list[Issue], Response]:
        url = f"orgs/{path_segment(org, 'org')}/issues"
        return await self._client.request("GET", url, opts=opts, result_type=list[Issue])

    async def list_by_repo(
        self, owner: str, repo: str, opts: IssueListByRepoOptions | None = None
    ) -> tuple[list[Issue], Response]:
        return await self._client.request(
            "GET", f"{repo_path(owner, repo)}/issues", opts=opts, result_type=list[Issue]
        )

    async def get(self, owner: str, repo: str, number: int) -> tuple[Issue, Response]:
        url = f"{repo_path(owner, repo)}/issues/{int(number)}"
        return await self._client.request("GET", url, result_type=Issue)

    async def create(
        self, owner: str, repo: str, issue: IssueRequest
    ) -> tuple[Issue, Response]:
        return await self._client.request(
            "POST", f"{repo_path(owner, repo)}/issues", body=issue, result_type=Issue
        )

    async def edit(
        self, owner: str, repo: str, number: int, issue: IssueRequest
    ) -> tuple[Issue, Response]:
        url = f"{repo_path(owner, repo)}/issues/{int(number)}"
        return await self._client.request("PATCH", url, body=issue, result_type=Issue)

    async def lock(
        self, owner: str, repo: str, number: int, lock_reason: str | None = None
    ) -> Response:
        """Lock the conversation; *lock_reason* is off-topic, too heated,
        resolved or spam."""
        url = f"{repo_path(owner, repo)}/issues/{int(number)}/lock"
        body = {"lock_reason": lock_reason} if lock_reason else None
        _, response = await self._client.request("PUT", url, body=body)
        return response

    async def unlock(self, owner: str, repo: str, number: int) -> Response:
        url = f"{repo_path(owner, repo)}/issues/{int(number)}/lock"
        _, response = await self._client.request("DELETE", url)
        return response

    # ── Comments ────────────────────────────────────────────────────────

    async def list_comments(
        self,
        owner: str,
        repo: str,
        number: int = 0,
        opts: IssueListCommentsOptions | None = None,
    ) -> tuple[list[IssueComment], Response]:
        """List comments on issue *number*, or on the whole repository when 0."""
        if number:
            url = f"{repo_path(owner, repo)}/issues/{int(number)}/comments"
        else:
            url = f"{repo_path(owner, repo)}/issues/comments"
        return await self._client.request("GET", url, opts=opts, result_type=list[IssueComment])

    async def create_comment(
        self, owner: str, repo: str, number: int, comment: IssueComment
    ) -> tuple[IssueComment, Response]:
        url = f"{repo_path(owner, repo)}/issues/{int(number)}/comments"
        return await self._client.request("POST", url, body=comment, result_type=IssueComment)

    # ── Labels ──────────────────────────────────────────────────────────

    async def list_labels(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[Label], Response]:
        return await self._client.request(
            "GET", f"{repo_path(owner, repo)}/labels", opts=opts, result_type=list[Label]
        )
