# This module defines the platform boundary used to open deeplinks and fallback pages.
# The builder only asks whether a URL can be opened and then asks for it to be opened.
# BrowserUrlLauncher is the desktop implementation; tests inject their own fakes.

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Iterable
from typing import Protocol, runtime_checkable
from urllib.parse import urlsplit

LOGGER = logging.getLogger("deeplink")

DEFAULT_BROWSER_SCHEMES = frozenset({"http", "https"})


@runtime_checkable
class UrlLauncher(Protocol):
    def can_open(self, url: str) -> bool: ...

    def open(self, url: str) -> None: ...


class BrowserUrlLauncher:
    """Open URLs with the system web browser.

    Only schemes listed in `schemes` are considered openable, so a custom app
    scheme such as `uber://` reports False unless a handler is registered for it.
    """

    def __init__(self, *, schemes: Iterable[str] = DEFAULT_BROWSER_SCHEMES, new: int = 2) -> None:
        self.schemes = frozenset(scheme.lower() for scheme in schemes)
        self.new = new

    def can_open(self, url: str) -> bool:
        return urlsplit(url).scheme.lower() in self.schemes

    def open(self, url: str) -> None:
        opened = webbrowser.open(url, new=self.new)
        if not opened:
            LOGGER.warning("browser did not accept url=%s", url)
