import json

import redis
from redis.exceptions import RedisError

from app.core.logging_config import get_logger

logger = get_logger()

KEY_PREFIX = "view:"
GENERATION_PREFIX = "view-gen:"


def connect_redis(redis_url: str | None):
    """Return a live redis client, or None when unset or unreachable."""
    if not redis_url:
        return None

    try:
        client = redis.Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
        client.ping()
        logger.info("Redis connected")
        return client
    except RedisError as e:
        logger.warning(f"Redis unavailable: {e}")
        return None


class ViewCache:
    """
    Cached customer-facing list views, keyed by route path.

    ``revalidate_path`` is the invalidation signal every mutation sends; with
    no client configured it is a no-op and reads always miss.

    Each invalidation also bumps a per-path generation counter. A list view
    read from the database is only stored if the generation it started under
    is still current, so a mutation landing mid-read is not masked by a stale
    entry.
    """

    def __init__(self, client=None, ttl: int = 60):
        self.client = client
        self.ttl = ttl

    @staticmethod
    def key(path: str, name: str = "") -> str:
        return f"{KEY_PREFIX}{path}|{name}"

    def get(self, path: str, name: str = ""):
        if not self.client:
            return None
        try:
            data = self.client.get(self.key(path, name))
            return json.loads(data) if data else None
        except RedisError as e:
            logger.warning(f"Cache read failed for {path}: {e}")
            return None

    def generation(self, path: str) -> int | None:
        if not self.client:
            return None
        try:
            return int(self.client.get(f"{GENERATION_PREFIX}{path}") or 0)
        except RedisError as e:
            logger.warning(f"Cache generation read failed for {path}: {e}")
            return None

    def set(self, path: str, value, name: str = "", generation: int | None = None):
        if not self.client:
            return
        try:
            if generation is not None and self.generation(path) != generation:
                return
            self.client.setex(self.key(path, name), self.ttl, json.dumps(value))
        except RedisError as e:
            logger.warning(f"Cache write failed for {path}: {e}")

    def revalidate_path(self, path: str):
        if not self.client:
            return
        try:
            self.client.incr(f"{GENERATION_PREFIX}{path}")
            keys = list(self.client.scan_iter(match=f"{KEY_PREFIX}{path}|*"))
            if keys:
                self.client.delete(*keys)
        except RedisError as e:
            logger.warning(f"Cache invalidation failed for {path}: {e}")

    def revalidate(self, *paths: str):
        for path in paths:
            self.revalidate_path(path)
