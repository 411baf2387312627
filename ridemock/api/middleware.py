"""Rate limiting (slowapi), keyed by client address.

Each app gets its own ``Limiter`` so the limit comes from the settings the
app was built with.  ``SlowAPIMiddleware`` applies it to every route.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ridemock.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    return Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
