"""
Shared helpers for deeplink tests.
It provides a recording launcher and a parser that turns built URIs into comparable pairs.
These helpers keep the test modules focused on behavior rather than URI plumbing.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit


class FakeLauncher:
    def __init__(self, *, openable_schemes: set[str] | None = None) -> None:
        self.openable_schemes = openable_schemes if openable_schemes is not None else {"uber", "https"}
        self.can_open_calls: list[str] = []
        self.opened: list[str] = []

    def can_open(self, url: str) -> bool:
        self.can_open_calls.append(url)
        return urlsplit(url).scheme in self.openable_schemes

    def open(self, url: str) -> None:
        self.opened.append(url)


def raw_pairs(uri: str) -> set[tuple[str, str]]:
    """Split the query into key/value pairs without decoding values."""

    query = urlsplit(uri).query
    return {tuple(item.split("=", 1)) for item in query.split("&") if item}  # type: ignore[misc]


def decoded_pairs(uri: str) -> set[tuple[str, str]]:
    return set(parse_qsl(urlsplit(uri).query, keep_blank_values=True))
