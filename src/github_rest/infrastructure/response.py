"""Response wrapper — pagination links and rate-limit headers.

GitHub reports pagination in the ``Link`` header and rate-limit state in the
``X-RateLimit-*`` headers of every response.  :class:`Response` lifts both
onto plain attributes so callers and the pagination helpers never parse
headers themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs, urlsplit

import httpx

from github_rest.domain.models import Rate

HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_USED = "X-RateLimit-Used"
HEADER_RATE_RESET = "X-RateLimit-Reset"
HEADER_RATE_RESOURCE = "X-RateLimit-Resource"
HEADER_RETRY_AFTER = "Retry-After"
HEADER_OTP = "X-GitHub-OTP"
HEADER_TOKEN_EXPIRATION = "GitHub-Authentication-Token-Expiration"

_TOKEN_EXPIRATION_FORMATS = ("%Y-%m-%d %H:%M:%S %z", "%Y-%m-%d %H:%M:%S %Z")


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_rate(headers: httpx.Headers) -> Rate:
    """Build a :class:`Rate` from the ``X-RateLimit-*`` headers present."""
    fields: dict[str, object] = {}
    for key, header in (
        ("limit", HEADER_RATE_LIMIT),
        ("remaining", HEADER_RATE_REMAINING),
        ("used", HEADER_RATE_USED),
    ):
        value = _to_int(headers.get(header))
        if value is not None:
            fields[key] = value
    reset = _to_int(headers.get(HEADER_RATE_RESET))
    if reset is not None:
        fields["reset"] = datetime.fromtimestamp(reset, tz=timezone.utc)
    if resource := headers.get(HEADER_RATE_RESOURCE):
        fields["resource"] = resource
    return Rate(**fields)


def parse_secondary_rate(headers: httpx.Headers) -> timedelta | None:
    """How long to back off after a secondary rate limit, if GitHub says."""
    retry_after = _to_int(headers.get(HEADER_RETRY_AFTER))
    if retry_after is not None:
        return timedelta(seconds=retry_after)
    reset = _to_int(headers.get(HEADER_RATE_RESET))
    if reset is not None:
        return datetime.fromtimestamp(reset, tz=timezone.utc) - datetime.now(timezone.utc)
    return None


def parse_token_expiration(headers: httpx.Headers) -> datetime | None:
    value = headers.get(HEADER_TOKEN_EXPIRATION)
    if not value:
        return None
    for fmt in _TOKEN_EXPIRATION_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            # %Z only accepts UTC / GMT / the local zone names.
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


@dataclass
class Response:
    """An API response plus the metadata GitHub carries in headers."""

    http: httpx.Response

    # Offset pagination; 0 means "no such page".
    next_page: int = 0
    prev_page: int = 0
    first_page: int = 0
    last_page: int = 0

    # Set instead of next_page when the next "page" value is not a number.
    next_page_token: str = ""

    # Cursor pagination.
    cursor: str = ""
    before: str = ""
    after: str = ""

    rate: Rate = field(default_factory=Rate)
    token_expiration: datetime | None = None

    @classmethod
    def from_httpx(cls, http: httpx.Response) -> Response:
        response = cls(
            http=http,
            rate=parse_rate(http.headers),
            token_expiration=parse_token_expiration(http.headers),
        )
        response._populate_page_values()
        return response

    @property
    def status_code(self) -> int:
        return self.http.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http.headers

    def _populate_page_values(self) -> None:
        for rel, link in self.http.links.items():
            query = parse_qs(urlsplit(link.get("url", "")).query)

            def first(key: str) -> str:
                return query.get(key, [""])[0]

            cursor = first("cursor")
            if cursor:
                if rel == "next":
                    self.cursor = cursor
                continue

            page, since = first("page"), first("since")
            before, after = first("before"), first("after")
            if not (page or since or before or after):
                continue
            if since and not page:
                page = since

            if rel == "next":
                number = _to_int(page)
                if number is None:
                    self.next_page_token = page
                else:
                    self.next_page = number
                self.after = after
            elif rel == "prev":
                self.prev_page = _to_int(page) or 0
                self.before = before
            elif rel == "first":
                self.first_page = _to_int(page) or 0
            elif rel == "last":
                self.last_page = _to_int(page) or 0
