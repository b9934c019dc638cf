"""
Path-keyed cache of rendered dashboard data.

Views are memoized in Valkey under `view:{path}` (plus an optional variant
such as a page size). Every key written for a path is recorded in the set
`view-keys:{path}` so that revalidate_path() can drop all of them at once;
the next read recomputes from the store.
"""

import logging
from typing import Callable

from clients.valkey_client import ValkeyClient

logger = logging.getLogger(__name__)

KEY_PREFIX = "view:"
INDEX_PREFIX = "view-keys:"


class ViewCache:
    """Memoized views with explicit invalidation."""

    def __init__(self, valkey: ValkeyClient, ttl_seconds: int = 300):
        self.valkey = valkey
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def key_for(path: str, variant: str = "") -> str:
        key = f"{KEY_PREFIX}{path}"
        return f"{key}?{variant}" if variant else key

    def get_or_compute(
        self,
        path: str,
        compute: Callable[[], dict | list],
        variant: str = "",
    ) -> dict | list:
        """
        Return the memoized view for path, computing and storing it on a miss.

        compute() must return JSON-serializable data.
        """
        key = self.key_for(path, variant)
        cached = self.valkey.get_json(key)
        if cached is not None:
            logger.debug(f"View cache hit: {key}")
            return cached

        logger.debug(f"View cache miss: {key}")
        value = compute()
        self.valkey.set_json(key, value, expire_seconds=self.ttl_seconds)
        self.valkey.add_to_set(f"{INDEX_PREFIX}{path}", key)
        return value

    def revalidate_path(self, path: str) -> int:
        """
        Mark every cached view of path as stale.

        Returns:
            Number of cached views dropped
        """
        index_key = f"{INDEX_PREFIX}{path}"
        keys = self.valkey.set_members(index_key)
        keys.add(self.key_for(path))
        dropped = self.valkey.delete(*sorted(keys))
        self.valkey.delete(index_key)
        logger.info(f"Revalidated {path} ({dropped} cached views dropped)")
        return dropped
