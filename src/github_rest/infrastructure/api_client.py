"""GitHub REST API core — builds requests, executes them and decodes results.

Every endpoint wrapper funnels through :meth:`ApiClient.do`, which is also
where rate-limit state is remembered and where non-2xx responses are
translated into the typed errors of :mod:`github_rest.domain.exceptions`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any
from urllib.parse import parse_qsl, urlencode

import httpx
from pydantic import TypeAdapter, ValidationError

from github_rest.domain.entities import RateCategory
from github_rest.domain.exceptions import (
    AbuseRateLimitError,
    AcceptedError,
    ConfigurationError,
    ErrorDetail,
    ErrorResponse,
    InvalidPathError,
    NotFoundError,
    RateLimitError,
    RedirectionError,
    ResponseDecodeError,
    TransportError,
    TwoFactorAuthError,
    ValidationFailedError,
)
from github_rest.domain.models import GitHubModel, Rate
from github_rest.domain.options import QueryOptions
from github_rest.infrastructure.config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_UPLOAD_URL,
    DEFAULT_USER_AGENT,
)
from github_rest.infrastructure.response import (
    HEADER_OTP,
    HEADER_RATE_REMAINING,
    Response,
    parse_rate,
    parse_secondary_rate,
)

logger = logging.getLogger(__name__)

MEDIA_TYPE_V3 = "application/vnd.github+json"
MEDIA_TYPE_STAR = "application/vnd.github.star+json"
MEDIA_TYPE_TEXT_MATCH = "application/vnd.github.text-match+json"
HEADER_API_VERSION = "X-GitHub-Api-Version"

_STATUS_ERRORS: dict[int, type[ErrorResponse]] = {
    301: RedirectionError,
    404: NotFoundError,
    422: ValidationFailedError,
}


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def add_options(url: str, opts: QueryOptions | None) -> str:
    """Merge the query parameters of *opts* into *url*."""
    if opts is None:
        return url
    params = opts.to_query()
    if not params:
        return url
    path, _, existing = url.partition("?")
    merged = dict(parse_qsl(existing, keep_blank_values=True))
    merged.update(params)
    return f"{path}?{urlencode(sorted(merged.items()))}"


def _error_body(http: httpx.Response) -> tuple[str, list[ErrorDetail], str]:
    try:
        data = http.json()
    except ValueError:
        return "", [], ""
    if not isinstance(data, dict):
        return "", [], ""
    raw_errors = data.get("errors") or []
    if not isinstance(raw_errors, list):
        raw_errors = [raw_errors]
    return (
        str(data.get("message") or ""),
        [ErrorDetail.from_json(item) for item in raw_errors],
        str(data.get("documentation_url") or ""),
    )


def check_response(http: httpx.Response) -> None:
    """Raise the typed error matching *http*, or return for a 2xx response.

    202 Accepted is treated as an error too: GitHub uses it for work it has
    only scheduled, so there is no result to decode yet.
    """
    status = http.status_code
    if status == 202:
        raise AcceptedError(http.content)
    if 200 <= status <= 299:
        return

    message, errors, documentation_url = _error_body(http)
    headers = http.headers

    if status == 401 and headers.get(HEADER_OTP, "").startswith("required"):
        raise TwoFactorAuthError(http, message, errors, documentation_url)

    if status in (403, 429):
        if headers.get(HEADER_RATE_REMAINING) == "0":
            raise RateLimitError(http, message, parse_rate(headers))
        if documentation_url.endswith(("#abuse-rate-limits", "secondary-rate-limits")):
            raise AbuseRateLimitError(http, message, parse_secondary_rate(headers))

    error_cls = _STATUS_ERRORS.get(status, ErrorResponse)
    raise error_cls(http, message, errors, documentation_url)


class ApiClient:
    """Shared request / response plumbing for all endpoint services.

    Parameters
    ----------
    http_client:
        Transport to use.  When omitted the client creates (and owns) an
        ``httpx.AsyncClient`` that follows redirects.
    token:
        Personal access / installation token sent as a bearer token.
    base_url, upload_url:
        API roots; both must end with ``/``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        upload_url: str = DEFAULT_UPLOAD_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 30.0,
    ) -> None:
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout), follow_redirects=True
        )
        self._token = token
        self.base_url = base_url
        self.upload_url = upload_url
        self.user_agent = user_agent
        self.api_version = api_version

        self._rate_limits: dict[RateCategory, Rate] = {}
        self._secondary_reset: datetime | None = None

    # ── Lifecycle ───────────────────────────────────────────────────────

    async def close(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def rate_limits(self) -> dict[RateCategory, Rate]:
        """Snapshot of the most recent rate per category."""
        return dict(self._rate_limits)

    def remember_rate(self, category: RateCategory, rate: Rate) -> None:
        self._rate_limits[category] = rate

    # ── Request construction ────────────────────────────────────────────

    def _resolve(self, base: str, url: str) -> httpx.URL:
        if not base.endswith("/"):
            raise ConfigurationError(f"base URL must have a trailing slash, but {base!r} does not")
        if ".." in url.partition("?")[0].split("/"):
            raise InvalidPathError("path must not contain '..' segments")
        return httpx.URL(base).join(url)

    def _default_headers(self, accept: str | None) -> dict[str, str]:
        headers = {
            "Accept": accept or MEDIA_TYPE_V3,
            "User-Agent": self.user_agent,
            HEADER_API_VERSION: self.api_version,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def new_request(
        self,
        method: str,
        url: str,
        body: Any = None,
        *,
        accept: str | None = None,
    ) -> httpx.Request:
        """Build a request for *url*, relative to the base URL.

        A pydantic *body* is serialized without its unset fields, so only
        what the caller assigned (zero values included) goes over the wire.
        """
        full_url = self._resolve(self.base_url, url)
        headers = self._default_headers(accept)
        if body is None:
            return self._http.build_request(method, full_url, headers=headers)
        if isinstance(body, GitHubModel):
            body = body.to_payload()
        return self._http.build_request(method, full_url, headers=headers, json=body)

    def new_upload_request(
        self, url: str, content: bytes, media_type: str
    ) -> httpx.Request:
        """Build a raw-bytes POST against the upload URL."""
        full_url = self._resolve(self.upload_url, url)
        headers = self._default_headers(None)
        headers["Content-Type"] = media_type
        return self._http.build_request("POST", full_url, headers=headers, content=content)

    # ── Execution ───────────────────────────────────────────────────────

    def _api_path(self, url: httpx.URL) -> str:
        path = url.path
        for base in (self.base_url, self.upload_url):
            prefix = httpx.URL(base).path
            if path.startswith(prefix):
                return "/" + path[len(prefix):]
        return path

    def _check_rate_limit_before_do(self, request: httpx.Request, category: RateCategory) -> None:
        now = datetime.now(timezone.utc)

        rate = self._rate_limits.get(category)
        if rate is not None and rate.remaining == 0 and rate.reset is not None and now < rate.reset:
            logger.warning("Refusing %s %s: %s rate limit exhausted", request.method, request.url, category.value)
            raise RateLimitError(
                httpx.Response(403, request=request),
                f"API rate limit of {rate.limit} still exceeded until "
                f"{rate.reset.isoformat()}, not making remote request.",
                rate,
            )

        if self._secondary_reset is not None and now < self._secondary_reset:
            logger.warning("Refusing %s %s: secondary rate limit in effect", request.method, request.url)
            raise AbuseRateLimitError(
                httpx.Response(403, request=request),
                f"API secondary rate limit exceeded until "
                f"{self._secondary_reset.isoformat()}, not making remote request.",
                self._secondary_reset - now,
            )

    async def do(
        self,
        request: httpx.Request,
        result_type: Any = None,
        *,
        bypass_rate_limit_check: bool = False,
    ) -> tuple[Any, Response]:
        """Send *request* and decode the body into *result_type*.

        ``None`` discards the body, ``str`` / ``bytes`` return it raw, any
        other type is validated from JSON with a pydantic ``TypeAdapter``.
        """
        category = RateCategory.for_request(request.method, self._api_path(request.url))
        if not bypass_rate_limit_check:
            self._check_rate_limit_before_do(request, category)

        logger.debug("%s %s", request.method, request.url)
        try:
            http = await self._http.send(request)
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Network error during {request.method} {request.url}: {exc}"
            ) from exc

        response = Response.from_httpx(http)
        # Cached responses carry stale rate headers.
        if "X-From-Cache" not in http.headers:
            self._rate_limits[category] = response.rate

        try:
            check_response(http)
        except AbuseRateLimitError as exc:
            if exc.retry_after is not None:
                self._secondary_reset = datetime.now(timezone.utc) + exc.retry_after
            logger.warning("Secondary rate limit hit: %s", exc)
            raise
        except RateLimitError as exc:
            logger.warning("Primary rate limit hit: %s", exc)
            raise

        if result_type is None or http.status_code == 204:
            return None, response
        if result_type is bytes:
            return http.content, response
        if result_type is str:
            return http.text, response
        if not http.content:
            return None, response

        try:
            value = _adapter(result_type).validate_json(http.content)
        except ValidationError as exc:
            raise ResponseDecodeError(
                f"Could not decode {request.method} {request.url} response: {exc}"
            ) from exc
        return value, response

    # ── Convenience used by the services ────────────────────────────────

    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        opts: QueryOptions | None = None,
        result_type: Any = None,
        accept: str | None = None,
        bypass_rate_limit_check: bool = False,
    ) -> tuple[Any, Response]:
        req = self.new_request(method, add_options(url, opts), body, accept=accept)
        return await self.do(req, result_type, bypass_rate_limit_check=bypass_rate_limit_check)

    async def request_bool(self, method: str, url: str) -> tuple[bool, Response]:
        """Map 2xx to ``True`` and 404 to ``False``; other errors propagate."""
        try:
            _, response = await self.request(method, url)
        except NotFoundError as exc:
            return False, Response.from_httpx(exc.response)
        return True, response
