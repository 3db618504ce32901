"""
Path‑keyed cache for rendered dashboard views.

Listing endpoints store the data they render under the path of the
view (e.g. ``/dashboard/invoices``) together with a key describing the
request (search term, page).  Mutations call ``invalidate(path)`` once
their write has been committed, so the next request for that view is
served from fresh database reads.
"""

import logging
from typing import Any, Dict, Hashable, Optional


logger = logging.getLogger(__name__)


class ViewCache:
    """In‑process store of view payloads grouped by path."""

    def __init__(self) -> None:
        self._entries: Dict[str, Dict[Hashable, Any]] = {}

    def get(self, path: str, key: Hashable) -> Optional[Any]:
        return self._entries.get(path, {}).get(key)

    def set(self, path: str, key: Hashable, value: Any) -> None:
        self._entries.setdefault(path, {})[key] = value

    def invalidate(self, path: str) -> None:
        """Drop every entry cached under ``path``."""
        dropped = self._entries.pop(path, None)
        logger.debug("Invalidated %s (%d cached entries)", path, len(dropped or {}))

    def clear(self) -> None:
        self._entries.clear()


# Process‑wide cache used by the HTTP layer.  Services receive it by
# injection so tests can substitute a recording fake.
view_cache = ViewCache()
