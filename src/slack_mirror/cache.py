from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from .errors import FetchError

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"


class IdentityCache:
    """Thread-safe mapping of user and bot IDs to display names.

    Entries are never evicted. ``resolve`` never calls out to the network
    while holding the lock, so two threads resolving the same unseen ID may
    both perform a lookup; the last one to finish wins.
    """

    def __init__(self) -> None:
        self._names: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, id_: str) -> tuple[str, bool]:
        with self._lock:
            if id_ in self._names:
                return self._names[id_], True
            return "", False

    def set(self, id_: str, name: str) -> None:
        with self._lock:
            self._names[id_] = name or UNKNOWN

    def resolve(self, id_: str, fetch: Callable[[str], str]) -> str:
        """Return the cached name for ``id_``, looking it up with ``fetch`` on a miss."""
        name, found = self.get(id_)
        if found:
            return name or UNKNOWN

        logger.debug("Identity cache miss for %s", id_)
        try:
            name = fetch(id_)
        except FetchError as exc:
            logger.debug("Failed to resolve %s: %s", id_, exc)
            name = UNKNOWN
        name = name or UNKNOWN
        self.set(id_, name)
        return name

    def __contains__(self, id_: object) -> bool:
        with self._lock:
            return id_ in self._names

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)
