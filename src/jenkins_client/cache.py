"""
Root Listing Cache Module

Persists the raw root /api/json listing of a Jenkins server to a flat JSON
file so that a new session can skip the first request. There is no expiry:
the file is trusted until refresh_cache() removes it.
"""

import enum
import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class RootListingState(enum.Enum):
    """Lifecycle of the root listing held by a session"""
    UNINITIALIZED = 'uninitialized'
    LOADED = 'loaded'
    FAILED = 'failed'


def cache_key(base_url: str, username: Optional[str]) -> str:
    """md5 hex digest of base URL + username"""
    return hashlib.md5(f"{base_url}{username or ''}".encode('utf-8')).hexdigest()


class RootListingCache:
    """
    Disk cache for one (server, user) pair.

    Features:
    - One file per key, named <md5>.json
    - Unreadable files are treated as a miss
    - Hit/miss statistics
    """

    def __init__(self, cache_dir: str, base_url: str, username: Optional[str] = None):
        self.cache_dir = Path(cache_dir)
        self.key = cache_key(base_url, username)

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def path(self) -> Path:
        return self.cache_dir / f"{self.key}.json"

    def load(self) -> Optional[Dict[str, Any]]:
        """
        Read the cached listing.

        Returns:
            The decoded listing, or None when absent or unreadable
        """
        if not self.path.is_file():
            self._misses += 1
            logger.debug(f"Cache miss: {self.path}")
            return None

        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            self._misses += 1
            logger.warning(f"Ignoring unreadable cache file {self.path}: {e}")
            return None

        if not isinstance(data, dict):
            self._misses += 1
            logger.warning(f"Ignoring cache file {self.path}: not a JSON object")
            return None

        self._hits += 1
        logger.debug(f"Cache hit: {self.path}")
        return data

    def save(self, data: Dict[str, Any]) -> None:
        """Write the listing, creating the cache directory if needed; failures are logged only"""
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding='utf-8')
        except OSError as e:
            logger.warning(f"Could not write cache file {self.path}: {e}")
            return
        logger.debug(f"Cached root listing: {self.path}")

    def clear(self) -> bool:
        """
        Remove the cache file.

        Returns:
            True if a file was removed
        """
        if self.path.is_file():
            self.path.unlink()
            logger.debug(f"Invalidated: {self.path}")
            return True
        return False

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics"""
        total_requests = self._hits + self._misses
        hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0

        return {
            "path": str(self.path),
            "hits": self._hits,
            "misses": self._misses,
            "total_requests": total_requests,
            "hit_rate_percent": round(hit_rate, 2)
        }
