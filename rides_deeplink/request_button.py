# This module is the caller-facing wrapper that attaches a ride request deeplink to a control.
# It owns no drawing or layout; a UI toolkit forwards taps and location updates to it.
# A missing client id is logged and turns every call into a no-op instead of failing the host app.

from __future__ import annotations

import logging

from rides_deeplink.common.settings import get_settings
from rides_deeplink.deeplink.errors import MissingClientIDError
from rides_deeplink.deeplink.request_deeplink import RequestDeeplink, SourceParameter
from rides_deeplink.deeplink.url_launcher import UrlLauncher
from rides_deeplink.rides_client import RidesClient, get_rides_client

LOGGER = logging.getLogger("deeplink")


class RequestButton:
    def __init__(
        self,
        *,
        rides_client: RidesClient | None = None,
        launcher: UrlLauncher | None = None,
    ) -> None:
        self.rides_client = rides_client or get_rides_client()
        self.deeplink: RequestDeeplink | None = None
        try:
            self._attach_deeplink(launcher)
        except MissingClientIDError:
            LOGGER.warning("No Client ID attached to the deeplink.")

    def _attach_deeplink(self, launcher: UrlLauncher | None) -> None:
        if not self.rides_client.has_client_id():
            raise MissingClientIDError("No client id configured for the rides client.")

        settings = get_settings()
        self.deeplink = RequestDeeplink(
            self.rides_client.client_id,
            SourceParameter.BUTTON,
            launcher=launcher,
            web_host=settings.RIDES_WEB_HOST,
            sdk_version=settings.RIDES_SDK_VERSION,
        )

    @property
    def enabled(self) -> bool:
        return self.deeplink is not None

    def set_pickup_location_to_current_location(self) -> None:
        if self.deeplink is not None:
            self.deeplink.set_pickup_location_to_current_location()

    def set_pickup_location(
        self,
        latitude: float,
        longitude: float,
        nickname: str | None = None,
        address: str | None = None,
    ) -> None:
        if self.deeplink is not None:
            self.deeplink.set_pickup_location(latitude, longitude, nickname=nickname, address=address)

    def set_dropoff_location(
        self,
        latitude: float,
        longitude: float,
        nickname: str | None = None,
        address: str | None = None,
    ) -> None:
        if self.deeplink is not None:
            self.deeplink.set_dropoff_location(latitude, longitude, nickname=nickname, address=address)

    def set_product_id(self, product_id: str) -> None:
        """Add a product id, as listed by the Rides API `GET /v1/products` endpoint."""

        if self.deeplink is not None:
            self.deeplink.set_product_id(product_id)

    def tap(self) -> None:
        """Build and execute the attached deeplink."""

        if self.deeplink is None:
            LOGGER.warning("request button tapped without a deeplink; ignoring")
            return
        self.deeplink.build()
        self.deeplink.execute()
