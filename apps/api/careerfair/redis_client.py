from __future__ import annotations

from redis import Redis
from redis.connection import ConnectionPool

from careerfair.core.config import settings

# Only the rate limiter talks to Redis and it fails open, so a slow server
# must cost a request at most this long.
RATE_LIMIT_SOCKET_TIMEOUT = 0.5

_pool: ConnectionPool | None = None


def get_redis() -> Redis:
    global _pool
    if _pool is None:
        _pool = ConnectionPool.from_url(
            settings.redis_url,
            decode_responses=True,
            socket_connect_timeout=RATE_LIMIT_SOCKET_TIMEOUT,
            socket_timeout=RATE_LIMIT_SOCKET_TIMEOUT,
        )
    return Redis(connection_pool=_pool)
