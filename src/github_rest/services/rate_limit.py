"""Rate limit API, see https://docs.github.com/rest/rate-limit"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from github_rest.domain.entities import RateCategory
from github_rest.domain.models import RateLimits
from github_rest.infrastructure.response import Response
from github_rest.services.base import Service

logger = logging.getLogger(__name__)


class _RateLimitEnvelope(BaseModel):
    resources: RateLimits | None = None


class RateLimitService(Service):
    async def get(self) -> tuple[RateLimits, Response]:
        """Fetch the limits of every category.

        This endpoint does not count against any limit, so it is sent even
        while a category is exhausted, and its answer refreshes the client's
        remembered rates for all categories.
        """
        envelope, response = await self._client.request(
            "GET", "rate_limit", result_type=_RateLimitEnvelope, bypass_rate_limit_check=True
        )
        limits = envelope.resources or RateLimits()
        for category in RateCategory:
            rate = getattr(limits, category.value)
            if rate is not None:
                self._client.remember_rate(category, rate)
        logger.debug("Refreshed rate limits; core remaining=%s", limits.core.remaining if limits.core else "?")
        return limits, response
