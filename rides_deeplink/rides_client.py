"""
Shared holder for the rides client identity.
It resolves the client id once from settings so every deeplink and button in the process uses the same value.
Tests and embedding applications can construct their own instance instead of using the cached one.
"""

from __future__ import annotations

from functools import lru_cache

from rides_deeplink.common.settings import Settings, get_settings


class RidesClient:
    def __init__(self, client_id: str | None = None) -> None:
        self.client_id = client_id

    @classmethod
    def from_settings(cls, settings: Settings) -> RidesClient:
        return cls(client_id=settings.RIDES_CLIENT_ID)

    def has_client_id(self) -> bool:
        """Return True when a non-blank client id is configured."""

        return self.client_id is not None and self.client_id.strip() != ""


@lru_cache(maxsize=1)
def get_rides_client() -> RidesClient:
    """Cached accessor for the process-wide rides client."""

    return RidesClient.from_settings(get_settings())
