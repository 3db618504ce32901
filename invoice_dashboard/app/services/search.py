"""
Reflect the search box into the page URL.

The invoice and customer tables read their search term and page from
the URL query string, so a filtered view can be reloaded or shared as
a link.  ``SearchQueryReflector`` keeps that query string in step with
the search input: after the user stops typing for the debounce window
it resets ``page`` to ``1``, sets or removes ``query`` and replaces the
current history entry.  Intermediate keystrokes are coalesced.
"""

import asyncio
import logging
from typing import Any, Callable, List, Optional, Protocol, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

from ..core.config import settings


logger = logging.getLogger(__name__)

QueryParams = List[Tuple[str, str]]


class Location(Protocol):
    """Navigable location the reflector reads from and writes to."""

    @property
    def pathname(self) -> str: ...

    def search_params(self) -> QueryParams: ...

    def replace(self, url: str) -> None: ...


class HistoryLocation:
    """In‑memory browser history.

    ``entries`` holds every URL visited; the last one is current.
    ``push`` adds an entry, ``replace`` overwrites the current one.
    """

    def __init__(self, url: str = "/") -> None:
        self.entries: List[str] = [url]

    @property
    def href(self) -> str:
        return self.entries[-1]

    @property
    def pathname(self) -> str:
        return urlsplit(self.href).path or "/"

    def search_params(self) -> QueryParams:
        return parse_qsl(urlsplit(self.href).query, keep_blank_values=True)

    def push(self, url: str) -> None:
        self.entries.append(url)

    def replace(self, url: str) -> None:
        self.entries[-1] = url


def set_param(params: QueryParams, name: str, value: str) -> QueryParams:
    """Set ``name`` to ``value`` in place of its first occurrence.

    Later occurrences are dropped; a new parameter is appended.
    """
    result: QueryParams = []
    replaced = False
    for key, current in params:
        if key != name:
            result.append((key, current))
        elif not replaced:
            result.append((name, value))
            replaced = True
    if not replaced:
        result.append((name, value))
    return result


def delete_param(params: QueryParams, name: str) -> QueryParams:
    return [(key, value) for key, value in params if key != name]


class Debouncer:
    """Delay calls to ``callback`` until ``wait`` seconds pass without a new call.

    Must be called from within a running asyncio event loop.  Only the
    arguments of the last call in a burst reach ``callback``.
    """

    def __init__(self, callback: Callable[..., Any], wait: float) -> None:
        self._callback = callback
        self.wait = wait
        self._handle: Optional[asyncio.TimerHandle] = None
        self._args: Tuple[Any, ...] = ()

    def __call__(self, *args: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._args = args
        self._handle = loop.call_later(self.wait, self._fire)

    def _fire(self) -> None:
        self._handle = None
        self._callback(*self._args)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Run a pending call immediately."""
        if self._handle is not None:
            self.cancel()
            self._callback(*self._args)


class SearchQueryReflector:
    """Keep ``location``'s ``query`` and ``page`` parameters in sync with a search box."""

    def __init__(self, location: Location, wait: Optional[float] = None) -> None:
        self.location = location
        if wait is None:
            wait = settings.search_debounce_ms / 1000
        self.on_input = Debouncer(self.handle_search, wait)

    def default_value(self) -> str:
        """Initial text of the search box, read from the current URL."""
        for key, value in self.location.search_params():
            if key == "query":
                return value
        return ""

    def handle_search(self, term: str) -> None:
        """Rewrite the URL for ``term`` without waiting for the debounce window."""
        params = set_param(self.location.search_params(), "page", "1")
        if term:
            params = set_param(params, "query", term)
        else:
            params = delete_param(params, "query")
        url = f"{self.location.pathname}?{urlencode(params)}"
        logger.debug("Searching %r -> %s", term, url)
        self.location.replace(url)
