"""Lookup pipeline - validates, fetches, normalizes."""

from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import TypeVar

from soage.config import ServiceConfig
from soage.core.client import StackExchangeClient
from soage.core.normalizer import DISAMBIGUATION_NOTE, disambiguate, normalize
from soage.core.validator import validate_user_id, validate_username
from soage.exceptions import ProfileNotFoundError, UpstreamError
from soage.logging import get_logger
from soage.models.raw import RawProfile
from soage.models.result import LookupResult

K = TypeVar("K")

# Upstream answers these for unknown or malformed users
NOT_FOUND_STATUSES = (400, 404)


class ProfileLookup:
    """
    High-level lookup interface shared by the API and the CLI.

    Example:
        lookup = ProfileLookup()
        result = await lookup.lookup_id("22656")
        print(result.profile.account_age)
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        client: StackExchangeClient | None = None,
    ):
        """
        Args:
            config: ServiceConfig instance, uses defaults if None
            client: Upstream client, built from config if None
        """
        self.config = config or ServiceConfig()
        self.client = client or StackExchangeClient(self.config)
        self._log = get_logger("lookup")

    async def lookup_username(self, username: str) -> LookupResult:
        """
        Search by display name, returning up to `max_candidates` matches.

        Raises:
            InvalidFormatError: Username fails validation
            ProfileNotFoundError: No match, or upstream rejected the lookup
            UpstreamError: Any other upstream failure
        """
        return await self._run(
            username,
            username,
            validate_username,
            self.client.fetch_by_username,
        )

    async def lookup_id(self, user_id: str) -> LookupResult:
        """
        Fetch by exact numeric id.

        Raises:
            InvalidFormatError: Id is not a positive integer
            ProfileNotFoundError: No such user, or upstream rejected the lookup
            UpstreamError: Any other upstream failure
        """
        return await self._run(
            user_id,
            f"with ID {user_id}",
            validate_user_id,
            self._fetch_one,
        )

    async def _fetch_one(self, user_id: int) -> list[RawProfile]:
        user = await self.client.fetch_by_id(user_id)
        return [user] if user else []

    async def _run(
        self,
        query: str,
        subject: str,
        validate: Callable[[str], K],
        fetch: Callable[[K], Awaitable[list[RawProfile]]],
    ) -> LookupResult:
        key = validate(query)
        self._log.info("lookup_start", query=query)

        start = datetime.now(timezone.utc)
        try:
            candidates = await fetch(key)
        except UpstreamError as e:
            if e.status_code in NOT_FOUND_STATUSES:
                self._log.info("lookup_not_found", query=query, status=e.status_code)
                raise ProfileNotFoundError(
                    f"Stack Overflow user {subject} not found or inaccessible"
                ) from e
            raise

        if not candidates:
            self._log.info("lookup_not_found", query=query, status=None)
            raise ProfileNotFoundError(f"Stack Overflow user {subject} not found")

        now = start.timestamp()
        users = disambiguate([normalize(raw, now) for raw in candidates])
        duration_ms = (datetime.now(timezone.utc) - start).total_seconds() * 1000

        self._log.info(
            "lookup_complete",
            query=query,
            matches=len(users),
            duration_ms=duration_ms,
        )

        return LookupResult(
            query=query,
            users=users,
            note=DISAMBIGUATION_NOTE if len(users) > 1 else None,
            fetched_at=start,
            duration_ms=duration_ms,
        )
