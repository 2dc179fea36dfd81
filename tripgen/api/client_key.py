"""Client key dependency for rate limiting.

The key is a fingerprint of ambient request headers, not an authenticated
identity; see ``make_client_key``.
"""

from typing import Annotated

from fastapi import Depends, Header

from tripgen.config import Settings, get_settings
from tripgen.ratelimit import make_client_key


async def get_client_key(
    settings: Annotated[Settings, Depends(get_settings)],
    user_agent: Annotated[str | None, Header()] = None,
    accept_language: Annotated[str | None, Header()] = None,
    x_timezone: Annotated[str | None, Header()] = None,
) -> str:
    """Derive the rate-limit key from User-Agent, Accept-Language and X-Timezone.

    Only the first Accept-Language tag is used, so quality weights don't split
    one browser into several keys.
    """
    locale = accept_language.split(",")[0].split(";")[0].strip() if accept_language else None
    return make_client_key(user_agent, locale, x_timezone, length=settings.rate_limit_key_length)
