"""httpx-based client for the Stack Exchange users API."""

import asyncio
from typing import Any

import httpx
from pydantic import ValidationError

from soage.config import ServiceConfig
from soage.exceptions import UpstreamError
from soage.logging import get_logger
from soage.models.raw import RawProfile


class StackExchangeClient:
    """
    Read-only access to `/users` on the Stack Exchange API.

    A fresh connection is opened per call and there is no retry: any timeout,
    network error or non-2xx status surfaces as UpstreamError.
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            config: ServiceConfig instance, uses defaults if None
            transport: Optional httpx transport (used by tests)
        """
        self.config = config or ServiceConfig()
        self._transport = transport
        self._log = get_logger("stackexchange")

    async def fetch_by_username(self, username: str) -> list[RawProfile]:
        """
        Search users whose display name contains `username`.

        Returns:
            Up to `max_candidates` raw profiles, possibly empty
        """
        payload = await self._get(
            "/users",
            {"inname": username, "pagesize": self.config.max_candidates},
            lookup="username",
        )
        return self._parse_items(payload)

    async def fetch_by_id(self, user_id: int) -> RawProfile | None:
        """
        Fetch one user by exact id.

        Returns:
            The raw profile, or None if the API returned no items
        """
        payload = await self._get(f"/users/{user_id}", {}, lookup="user_id")
        items = self._parse_items(payload)
        return items[0] if items else None

    def _params(self, extra: dict[str, Any]) -> dict[str, Any]:
        params = {
            "site": self.config.site,
            "filter": self.config.response_filter,
            **extra,
        }
        if self.config.api_key:
            params["key"] = self.config.api_key
        return params

    async def _get(self, path: str, params: dict[str, Any], lookup: str) -> dict:
        async with httpx.AsyncClient(
            base_url=self.config.api_base_url,
            timeout=self.config.request_timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                # httpx timeouts are per phase; bound the whole exchange as well
                response = await asyncio.wait_for(
                    client.get(path, params=self._params(params)),
                    self.config.request_timeout_seconds,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                details = _error_body(e.response)
                message = f"Request failed with status code {status}"
                self._log.error(
                    "upstream_error",
                    lookup=lookup,
                    status=status,
                    data=details,
                    message=message,
                )
                raise UpstreamError(message, status_code=status, details=details) from e
            except (httpx.TimeoutException, asyncio.TimeoutError) as e:
                message = f"timeout of {self.config.request_timeout_seconds:g}s exceeded"
                self._log.error("upstream_error", lookup=lookup, status=None, message=message)
                raise UpstreamError(message) from e
            except httpx.RequestError as e:
                message = str(e) or type(e).__name__
                self._log.error("upstream_error", lookup=lookup, status=None, message=message)
                raise UpstreamError(message) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(
                "Invalid JSON in Stack Exchange response",
                status_code=502,
                details=response.text,
            ) from e

        if not isinstance(payload, dict) or not isinstance(payload.get("items") or [], list):
            raise UpstreamError(
                "Unexpected Stack Exchange response shape",
                status_code=502,
                details=response.text,
            )

        self._log.debug(
            "upstream_response",
            lookup=lookup,
            items=len(payload.get("items") or []),
            quota_remaining=payload.get("quota_remaining"),
        )
        return payload

    def _parse_items(self, payload: dict) -> list[RawProfile]:
        try:
            return [RawProfile.model_validate(item) for item in payload.get("items") or []]
        except ValidationError as e:
            raise UpstreamError(
                "Unexpected user record in Stack Exchange response",
                status_code=502,
                details=str(e),
            ) from e


def _error_body(response: httpx.Response) -> Any:
    """Upstream error body, parsed as JSON when possible."""
    try:
        return response.json()
    except ValueError:
        return response.text or None
