"""Tests for github_rest.domain.value_objects and entities."""

from __future__ import annotations

import pytest

from github_rest.domain.entities import RateCategory
from github_rest.domain.exceptions import InvalidPathError
from github_rest.domain.value_objects import RepoRef, path_segment, repo_path


class TestPathSegment:
    def test_plain_value(self):
        assert path_segment("octocat") == "octocat"

    def test_escapes_reserved_characters(self):
        assert path_segment("feature/x y") == "feature%2Fx%20y"
        assert path_segment("a?b#c") == "a%3Fb%23c"

    def test_accepts_integers(self):
        assert path_segment(42) == "42"

    @pytest.mark.parametrize("value", ["", ".", ".."])
    def test_rejects_unsafe_values(self, value):
        with pytest.raises(InvalidPathError):
            path_segment(value, "owner")

    def test_invalid_path_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            path_segment("")

    def test_repo_path(self):
        assert repo_path("psf", "requests") == "repos/psf/requests"
        with pytest.raises(InvalidPathError):
            repo_path("psf", "..")


class TestRepoRef:
    @pytest.mark.parametrize(
        "value",
        [
            "psf/requests",
            "https://github.com/psf/requests",
            "https://github.com/psf/requests.git",
            "https://github.com/psf/requests/",
            "  psf/requests  ",
        ],
    )
    def test_parses(self, value):
        ref = RepoRef.from_string(value)
        assert ref == RepoRef(owner="psf", repo="requests")
        assert ref.full_name == "psf/requests"
        assert ref.path == "repos/psf/requests"

    @pytest.mark.parametrize("value", ["", "psf", "psf/requests/extra", "../x", "psf/..", "a b/c"])
    def test_rejects(self, value):
        with pytest.raises(InvalidPathError):
            RepoRef.from_string(value)


class TestRateCategory:
    @pytest.mark.parametrize(
        ("method", "path", "expected"),
        [
            ("GET", "/users/octocat", RateCategory.CORE),
            ("GET", "/search/repositories", RateCategory.SEARCH),
            ("GET", "/search/code", RateCategory.CODE_SEARCH),
            ("POST", "/graphql", RateCategory.GRAPHQL),
            ("POST", "/app-manifests/abc/conversions", RateCategory.INTEGRATION_MANIFEST),
            ("PUT", "/repos/o/r/import", RateCategory.SOURCE_IMPORT),
            ("GET", "/repos/o/r/import", RateCategory.CORE),
            ("POST", "/repos/o/r/code-scanning/sarifs", RateCategory.CODE_SCANNING_UPLOAD),
            ("POST", "/orgs/o/actions/runners/registration-token", RateCategory.ACTIONS_RUNNER_REGISTRATION),
            ("GET", "/scim/v2/organizations/o/Users", RateCategory.SCIM),
            ("POST", "/repos/o/r/dependency-graph/snapshots", RateCategory.DEPENDENCY_SNAPSHOTS),
            ("GET", "/orgs/o/audit-log", RateCategory.AUDIT_LOG),
            ("GET", "/enterprises/e/audit-log", RateCategory.AUDIT_LOG),
        ],
    )
    def test_for_request(self, method, path, expected):
        assert RateCategory.for_request(method, path) is expected
