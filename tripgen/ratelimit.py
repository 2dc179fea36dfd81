"""Fixed-window rate limiting for itinerary generation.

Each client key gets ``max_requests`` calls per window. The window starts at the
key's first call and is a hard cutoff: once it expires the next call opens a
fresh window with a count of 1.
"""

import hashlib
import logging
import math
import threading
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

import redis

from tripgen.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_MAX_REQUESTS = 10
DEFAULT_WINDOW_MS = 60_000


class RateLimitExceeded(Exception):
    """Admission denied for the current window; recoverable after a wait."""

    def __init__(self, retry_after_seconds: int) -> None:
        self.retry_after_seconds = retry_after_seconds
        super().__init__(
            f"Rate limit exceeded. Please try again in {retry_after_seconds} seconds."
        )


@dataclass(frozen=True)
class RateLimitStatus:
    """Result of a single admission check."""

    allowed: bool
    remaining: int
    reset_ms: int

    @property
    def retry_after_seconds(self) -> int:
        return math.ceil(self.reset_ms / 1000)


class RateLimiter(Protocol):
    """Rate limiter interface."""

    @property
    def max_requests(self) -> int: ...

    def is_allowed(self, key: str, now: datetime | None = None) -> bool:
        """Admit or deny one call for ``key``, counting it when admitted."""
        ...

    def remaining(self, key: str, now: datetime | None = None) -> int:
        """Calls left in the live window (full quota when none is live)."""
        ...

    def reset_time(self, key: str, now: datetime | None = None) -> int:
        """Milliseconds until the window resets, 0 if none or expired."""
        ...


def make_client_key(
    user_agent: str | None, locale: str | None, timezone: str | None, length: int = 16
) -> str:
    """Derive a coarse client fingerprint from ambient request signals.

    This is an anti-abuse heuristic, not an identity: clients sharing a
    browser, locale and timezone share a quota.

    Args:
        user_agent: User-Agent string
        locale: Preferred locale (e.g. Accept-Language)
        timezone: IANA timezone reported by the client
        length: Number of hex characters kept

    Returns:
        Deterministic key of ``length`` characters
    """
    combined = f"{user_agent or ''}-{locale or ''}-{timezone or ''}"
    return hashlib.sha256(combined.encode("utf-8")).hexdigest()[:length]


class FixedWindowRateLimiter:
    """In-memory fixed-window limiter.

    Owned by whoever serves requests (the app state), never a module global.
    Check-and-increment runs under a lock so threaded servers stay exact.
    """

    def __init__(
        self, max_requests: int = DEFAULT_MAX_REQUESTS, window_ms: int = DEFAULT_WINDOW_MS
    ) -> None:
        """Initialize rate limiter.

        Args:
            max_requests: Maximum requests per window (default 10)
            window_ms: Window size in milliseconds (default 60000)
        """
        self._max_requests = max_requests
        self._window = timedelta(milliseconds=window_ms)
        # key -> (count, reset_at)
        self._windows: dict[str, tuple[int, datetime]] = {}
        self._last_sweep: datetime | None = None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        """Number of tracked windows, live or not yet swept."""
        return len(self._windows)

    @property
    def max_requests(self) -> int:
        return self._max_requests

    def is_allowed(self, key: str, now: datetime | None = None) -> bool:
        """Check quota for ``key`` and count the call if admitted."""
        if now is None:
            now = datetime.now(UTC)

        with self._lock:
            entry = self._windows.get(key)

            if entry is None or now > entry[1]:
                # First request, or the previous window expired
                self._sweep_expired(now)
                self._windows[key] = (1, now + self._window)
                return True

            count, reset_at = entry
            if count >= self._max_requests:
                # Denied calls are not counted
                return False

            self._windows[key] = (count + 1, reset_at)
            return True

    def _sweep_expired(self, now: datetime) -> None:
        # Caller holds the lock. Runs at most once per window length.
        if self._last_sweep is not None and now - self._last_sweep < self._window:
            return
        self._last_sweep = now
        expired = [key for key, (_, reset_at) in self._windows.items() if now > reset_at]
        for key in expired:
            del self._windows[key]

    def remaining(self, key: str, now: datetime | None = None) -> int:
        if now is None:
            now = datetime.now(UTC)

        entry = self._windows.get(key)
        if entry is None or now > entry[1]:
            return self._max_requests
        return max(0, self._max_requests - entry[0])

    def reset_time(self, key: str, now: datetime | None = None) -> int:
        if now is None:
            now = datetime.now(UTC)

        entry = self._windows.get(key)
        if entry is None:
            return 0
        return max(0, math.ceil((entry[1] - now).total_seconds() * 1000))

    def clear(self) -> None:
        """Drop all tracked windows."""
        with self._lock:
            self._windows.clear()


# KEYS[1] = counter key, ARGV[1] = limit, ARGV[2] = window ms.
# Returns 1 when admitted, 0 when denied. PEXPIRE is set only when a window opens.
_ADMIT_SCRIPT = """
local count = tonumber(redis.call('GET', KEYS[1]) or '0')
if count == 0 then
  redis.call('SET', KEYS[1], 1, 'PX', ARGV[2])
  return 1
end
if count >= tonumber(ARGV[1]) then
  return 0
end
redis.call('INCR', KEYS[1])
return 1
"""


class RedisFixedWindowRateLimiter:
    """Redis-backed fixed-window limiter for multi-process deployments.

    The window is the key's TTL, so expiry is handled by Redis. Admission runs
    as one Lua script, making check-and-increment atomic across workers.
    ``now`` is accepted for interface parity; Redis uses its own clock.
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window_ms: int = DEFAULT_WINDOW_MS,
    ) -> None:
        """Initialize rate limiter.

        Args:
            redis_client: Redis client
            max_requests: Maximum requests per window
            window_ms: Window size in milliseconds
        """
        self._redis = redis_client
        self._max_requests = max_requests
        self._window_ms = window_ms
        self._admit = redis_client.register_script(_ADMIT_SCRIPT)

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @staticmethod
    def _redis_key(key: str) -> str:
        return f"ratelimit:{key}"

    def is_allowed(self, key: str, now: datetime | None = None) -> bool:
        result = self._admit(
            keys=[self._redis_key(key)], args=[self._max_requests, self._window_ms]
        )
        return int(result) == 1

    def remaining(self, key: str, now: datetime | None = None) -> int:
        count = self._redis.get(self._redis_key(key))
        if count is None:
            return self._max_requests
        return max(0, self._max_requests - int(count))

    def reset_time(self, key: str, now: datetime | None = None) -> int:
        ttl_ms = self._redis.pttl(self._redis_key(key))
        # -2: no key, -1: no expiry
        return max(0, int(ttl_ms))


def check_rate_limit(
    limiter: RateLimiter, key: str, now: datetime | None = None
) -> RateLimitStatus:
    """Run one admission check and report the resulting quota state.

    Args:
        limiter: Rate limiter implementation
        key: Client key (see ``make_client_key``)
        now: Current time (for testing)

    Returns:
        RateLimitStatus with admission outcome, remaining calls and reset delay
    """
    allowed = limiter.is_allowed(key, now)
    status = RateLimitStatus(
        allowed=allowed,
        remaining=limiter.remaining(key, now),
        reset_ms=limiter.reset_time(key, now),
    )
    if not allowed:
        logger.info(
            "Rate limit denied",
            extra={"structured": {"client_key": key, "reset_ms": status.reset_ms}},
        )
    return status


def enforce_rate_limit(
    limiter: RateLimiter, key: str, now: datetime | None = None
) -> RateLimitStatus:
    """Like ``check_rate_limit`` but raises ``RateLimitExceeded`` when denied."""
    status = check_rate_limit(limiter, key, now)
    if not status.allowed:
        raise RateLimitExceeded(retry_after_seconds=max(1, status.retry_after_seconds))
    return status


def create_rate_limiter(settings: Settings) -> RateLimiter:
    """Build the limiter configured for this deployment.

    Returns:
        Redis-backed limiter if ``redis_url`` is set, in-memory otherwise
    """
    if settings.redis_url:
        logger.info("Using Redis rate limiter")
        client = redis.from_url(settings.redis_url, decode_responses=True)  # type: ignore[no-untyped-call]
        return RedisFixedWindowRateLimiter(
            client,
            max_requests=settings.rate_limit_requests,
            window_ms=settings.rate_limit_window_ms,
        )

    logger.info("Using in-memory rate limiter")
    return FixedWindowRateLimiter(
        max_requests=settings.rate_limit_requests,
        window_ms=settings.rate_limit_window_ms,
    )
