"""Value objects — self-validating identifiers placed into request paths."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

from github_rest.domain.exceptions import InvalidPathError

_REPO_REF_RE = re.compile(
    r"^(?:https?://github\.com/)?(?P<owner>[A-Za-z0-9\-_.]+)/(?P<repo>[A-Za-z0-9\-_.]+?)(?:\.git)?/?$"
)


def path_segment(value: str | int, name: str = "identifier") -> str:
    """Percent-encode *value* for use as a single path segment.

    Empty values and the relative segments ``.`` / ``..`` are rejected: they
    would silently address a different endpoint.
    """
    text = str(value)
    if not text:
        raise InvalidPathError(f"{name} must not be empty")
    if text in (".", ".."):
        raise InvalidPathError(f"{name} must not be a relative path segment: {text!r}")
    return quote(text, safe="")


def repo_path(owner: str, repo: str) -> str:
    """``repos/{owner}/{repo}`` relative API path."""
    return f"repos/{path_segment(owner, 'owner')}/{path_segment(repo, 'repo')}"


@dataclass(frozen=True, slots=True)
class RepoRef:
    """Validated ``owner/repo`` pair.

    Accepts either the short form ``psf/requests`` or a repository URL like
    ``https://github.com/psf/requests``.
    """

    owner: str
    repo: str

    @classmethod
    def from_string(cls, value: str) -> RepoRef:
        """Parse and validate a repository reference."""
        value = value.strip()
        match = _REPO_REF_RE.match(value)
        if not match or match["owner"] in (".", "..") or match["repo"] in (".", ".."):
            raise InvalidPathError(
                f"Invalid repository reference: '{value}'. "
                "Expected owner/repo or https://github.com/<owner>/<repo>"
            )
        return cls(owner=match["owner"], repo=match["repo"])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def path(self) -> str:
        return repo_path(self.owner, self.repo)
