"""Pydantic DTOs mirroring the JSON shapes of the GitHub REST API.

Every field is optional and defaults to ``None``: a DTO decoded from a
response only carries what GitHub sent, and a DTO built by the caller only
sends what the caller set.  Serialization for request bodies goes through
:meth:`GitHubModel.to_payload`, which drops *unset* fields but keeps fields
explicitly set to a zero value or to ``None``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class GitHubModel(BaseModel):
    """Common configuration for all resource DTOs."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for this model, omitting fields never set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


# ── Rate limits ─────────────────────────────────────────────────────────────


class Rate(BaseModel):
    """Primary rate limit state of one category."""

    model_config = ConfigDict(frozen=True)

    limit: int = 0
    remaining: int = 0
    used: int = 0
    reset: datetime | None = None
    resource: str = ""


class RateLimits(GitHubModel):
    """Per-category rate limits returned by ``GET /rate_limit``."""

    core: Rate | None = None
    search: Rate | None = None
    graphql: Rate | None = None
    integration_manifest: Rate | None = None
    source_import: Rate | None = None
    code_scanning_upload: Rate | None = None
    actions_runner_registration: Rate | None = None
    scim: Rate | None = None
    dependency_snapshots: Rate | None = None
    code_search: Rate | None = None
    audit_log: Rate | None = None


# ── Accounts ────────────────────────────────────────────────────────────────


class Plan(GitHubModel):
    name: str | None = None
    space: int | None = None
    collaborators: int | None = None
    private_repos: int | None = None


class User(GitHubModel):
    """A GitHub user account."""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    type: str | None = None
    site_admin: bool | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    twitter_username: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    plan: Plan | None = None


class Organization(GitHubModel):
    """A GitHub organization account."""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    avatar_url: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    billing_email: str | None = None
    twitter_username: str | None = None
    description: str | None = None
    type: str | None = None
    is_verified: bool | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None
    has_organization_projects: bool | None = None
    has_repository_projects: bool | None = None
    default_repository_permission: str | None = None
    members_can_create_repositories: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ── Repositories ────────────────────────────────────────────────────────────


class License(GitHubModel):
    key: str | None = None
    name: str | None = None
    spdx_id: str | None = None
    url: str | None = None


class Repository(GitHubModel):
    """A repository, also used as the request body of create / edit."""

    id: int | None = None
    node_id: str | None = None
    owner: User | None = None
    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    homepage: str | None = None
    private: bool | None = None
    visibility: str | None = None
    fork: bool | None = None
    archived: bool | None = None
    disabled: bool | None = None
    is_template: bool | None = None
    url: str | None = None
    html_url: str | None = None
    clone_url: str | None = None
    git_url: str | None = None
    ssh_url: str | None = None
    language: str | None = None
    default_branch: str | None = None
    topics: list[str] | None = None
    license: License | None = None
    size: int | None = None
    forks_count: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    open_issues_count: int | None = None
    has_issues: bool | None = None
    has_projects: bool | None = None
    has_wiki: bool | None = None
    has_pages: bool | None = None
    has_downloads: bool | None = None
    has_discussions: bool | None = None
    allow_merge_commit: bool | None = None
    allow_squash_merge: bool | None = None
    allow_rebase_merge: bool | None = None
    delete_branch_on_merge: bool | None = None
    permissions: dict[str, bool] | None = None
    organization: Organization | None = None
    parent: Repository | None = None
    source: Repository | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pushed_at: datetime | None = None

    # Only meaningful when creating a repository.
    team_id: int | None = None
    auto_init: bool | None = None
    gitignore_template: str | None = None
    license_template: str | None = None


class RepositoryCreateForkOptions(GitHubModel):
    """Body of ``POST /repos/{owner}/{repo}/forks``."""

    organization: str | None = None
    name: str | None = None
    default_branch_only: bool | None = None


class Topics(GitHubModel):
    names: list[str] | None = None


class CommitRef(GitHubModel):
    sha: str | None = None
    url: str | None = None


class Branch(GitHubModel):
    name: str | None = None
    commit: CommitRef | None = None
    protected: bool | None = None


class RepoStatus(GitHubModel):
    """A commit status; ``state`` is one of pending, success, error, failure."""

    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    state: str | None = None
    target_url: str | None = None
    description: str | None = None
    context: str | None = None
    avatar_url: str | None = None
    creator: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CombinedStatus(GitHubModel):
    state: str | None = None
    sha: str | None = None
    total_count: int | None = None
    statuses: list[RepoStatus] | None = None
    commit_url: str | None = None
    repository_url: str | None = None


class ReleaseAsset(GitHubModel):
    id: int | None = None
    url: str | None = None
    name: str | None = None
    label: str | None = None
    state: str | None = None
    content_type: str | None = None
    size: int | None = None
    download_count: int | None = None
    browser_download_url: str | None = None
    uploader: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Release(GitHubModel):
    """A release, also used as the request body of create."""

    id: int | None = None
    tag_name: str | None = None
    target_commitish: str | None = None
    name: str | None = None
    body: str | None = None
    draft: bool | None = None
    prerelease: bool | None = None
    make_latest: str | None = None
    generate_release_notes: bool | None = None
    url: str | None = None
    html_url: str | None = None
    upload_url: str | None = None
    tarball_url: str | None = None
    zipball_url: str | None = None
    author: User | None = None
    assets: list[ReleaseAsset] | None = None
    created_at: datetime | None = None
    published_at: datetime | None = None


# ── Issues ──────────────────────────────────────────────────────────────────


class Label(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    name: str | None = None
    color: str | None = None
    description: str | None = None
    default: bool | None = None


class Milestone(GitHubModel):
    id: int | None = None
    number: int | None = None
    title: str | None = None
    description: str | None = None
    state: str | None = None
    creator: User | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    due_on: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


class PullRequestLinks(GitHubModel):
    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    merged_at: datetime | None = None


class Issue(GitHubModel):
    """An issue; pull requests show up here too, with ``pull_request`` set."""

    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    state: str | None = None
    state_reason: str | None = None
    locked: bool | None = None
    active_lock_reason: str | None = None
    title: str | None = None
    body: str | None = None
    author_association: str | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    milestone: Milestone | None = None
    comments: int | None = None
    closed_by: User | None = None
    url: str | None = None
    html_url: str | None = None
    repository_url: str | None = None
    pull_request: PullRequestLinks | None = None
    repository: Repository | None = None
    closed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None


class IssueRequest(GitHubModel):
    """Body of issue create / edit.

    ``milestone`` explicitly set to ``None`` clears the milestone.
    """

    title: str | None = None
    body: str | None = None
    labels: list[str] | None = None
    assignee: str | None = None
    assignees: list[str] | None = None
    state: str | None = None
    state_reason: str | None = None
    milestone: int | None = None


class IssueComment(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    body: str | None = None
    user: User | None = None
    author_association: str | None = None
    url: str | None = None
    html_url: str | None = None
    issue_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ── Gists ───────────────────────────────────────────────────────────────────


class GistFile(GitHubModel):
    size: int | None = None
    filename: str | None = None
    language: str | None = None
    type: str | None = None
    raw_url: str | None = None
    content: str | None = None
    truncated: bool | None = None


class Gist(GitHubModel):
    """A gist.  In an edit body, mapping a filename to ``None`` deletes the file."""

    id: str | None = None
    node_id: str | None = None
    description: str | None = None
    public: bool | None = None
    owner: User | None = None
    files: dict[str, GistFile | None] | None = None
    comments: int | None = None
    url: str | None = None
    html_url: str | None = None
    git_pull_url: str | None = None
    git_push_url: str | None = None
    truncated: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ── Activity ────────────────────────────────────────────────────────────────


class StarredRepository(GitHubModel):
    starred_at: datetime | None = None
    repo: Repository | None = None


class Stargazer(GitHubModel):
    starred_at: datetime | None = None
    user: User | None = None


# ── Search ──────────────────────────────────────────────────────────────────


class Match(GitHubModel):
    text: str | None = None
    indices: list[int] | None = None


class TextMatch(GitHubModel):
    object_url: str | None = None
    object_type: str | None = None
    property: str | None = None
    fragment: str | None = None
    matches: list[Match] | None = None


class CodeResult(GitHubModel):
    name: str | None = None
    path: str | None = None
    sha: str | None = None
    url: str | None = None
    html_url: str | None = None
    repository: Repository | None = None
    text_matches: list[TextMatch] | None = None


class RepositoriesSearchResult(GitHubModel):
    total_count: int | None = None
    incomplete_results: bool | None = None
    items: list[Repository] | None = None


class IssuesSearchResult(GitHubModel):
    total_count: int | None = None
    incomplete_results: bool | None = None
    items: list[Issue] | None = None


class UsersSearchResult(GitHubModel):
    total_count: int | None = None
    incomplete_results: bool | None = None
    items: list[User] | None = None


class CodeSearchResult(GitHubModel):
    total_count: int | None = None
    incomplete_results: bool | None = None
    items: list[CodeResult] | None = None


# ── Meta ────────────────────────────────────────────────────────────────────


class APIMeta(GitHubModel):
    """IP ranges and SSH fingerprints published by ``GET /meta``."""

    verifiable_password_authentication: bool | None = None
    ssh_key_fingerprints: dict[str, str] | None = None
    ssh_keys: list[str] | None = None
    hooks: list[str] | None = None
    web: list[str] | None = None
    api: list[str] | None = None
    git: list[str] | None = None
    packages: list[str] | None = None
    pages: list[str] | None = None
    importer: list[str] | None = None
    actions: list[str] | None = None
    dependabot: list[str] | None = None


class CodeOfConduct(GitHubModel):
    key: str | None = None
    name: str | None = None
    url: str | None = None
    html_url: str | None = None
    body: str | None = None
