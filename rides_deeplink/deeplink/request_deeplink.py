# This module builds and executes deeplinks that open the native rides app on a ride request.
# Callers set locations and a product; build() serializes them into an `uber://` URI.
# The URI is memoized and only reassembled after the parameter store reports pending changes.
# execute() hands the deeplink, or the web sign-up fallback, to an injected URL launcher.

from __future__ import annotations

import logging
from enum import Enum
from typing import Final
from urllib.parse import quote, unquote

from rides_deeplink import __version__
from rides_deeplink.deeplink.errors import MissingClientIDError
from rides_deeplink.deeplink.query_parameters import QueryParameterName, QueryParameters
from rides_deeplink.deeplink.url_launcher import BrowserUrlLauncher, UrlLauncher

LOGGER = logging.getLogger("deeplink")

DEEPLINK_SCHEME: Final = "uber"
DEFAULT_WEB_HOST: Final = "m.uber.com"
SET_PICKUP_ACTION: Final = "setPickup"
CURRENT_LOCATION: Final = "my_location"

# Characters left unescaped when a query component is placed in the URI.
_QUERY_SAFE_CHARACTERS: Final = "!$'()*+,;:@/?"


class SourceParameter(Enum):
    """Possible sources for the deeplink."""

    BUTTON = "button"
    DEEPLINK = "deeplink"


def format_coordinate(value: float) -> str:
    """Shortest round-trip decimal text, e.g. 37.775 -> '37.775' and 37 -> '37.0'."""

    return repr(float(value))


def assemble_uri(query_items: list[tuple[str, str]]) -> str:
    """Assemble `uber://?k=v&...` and percent-decode the finished string once.

    Values arrive already escaped by the parameter store. Escaping each component
    again for the query and decoding the whole string afterwards leaves those value
    escapes in place while keys such as `pickup[latitude]` come out literal.
    """

    query = "&".join(
        f"{quote(name, safe=_QUERY_SAFE_CHARACTERS)}={quote(value, safe=_QUERY_SAFE_CHARACTERS)}"
        for name, value in query_items
    )
    return unquote(f"{DEEPLINK_SCHEME}://?{query}")


class RequestDeeplink:
    """Build and execute a deeplink to the native rides app."""

    def __init__(
        self,
        client_id: str | None,
        source: SourceParameter = SourceParameter.DEEPLINK,
        *,
        launcher: UrlLauncher | None = None,
        web_host: str = DEFAULT_WEB_HOST,
        sdk_version: str = __version__,
    ) -> None:
        if client_id is None or not client_id.strip():
            raise MissingClientIDError("A client id is required to build a ride request deeplink.")

        self._parameters = QueryParameters()
        self._client_id = client_id
        self._source = SourceParameter(source)
        self._deeplink_uri: str | None = None
        self.launcher: UrlLauncher = launcher if launcher is not None else BrowserUrlLauncher()
        self.web_host = web_host
        self.sdk_version = sdk_version

        self._parameters.set_parameter(QueryParameterName.CLIENT_ID, client_id)

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def source(self) -> SourceParameter:
        return self._source

    @property
    def parameters(self) -> QueryParameters:
        return self._parameters

    def build(self) -> str:
        """Build the deeplink URI, reusing the last one when no parameter changed."""

        if not self.pickup_location_set():
            self.set_pickup_location_to_current_location()

        if not self._parameters.pending_changes and self._deeplink_uri is not None:
            return self._deeplink_uri

        uri = assemble_uri(self._parameters.query_items())
        self._parameters.pending_changes = False
        self._deeplink_uri = uri
        LOGGER.debug("deeplink built parameters=%s", len(self._parameters))
        return uri

    def fallback_url(self) -> str:
        return f"https://{self.web_host}/sign-up?client_id={self._client_id}"

    def execute(self) -> None:
        """Open the deeplink in the rides app, or the web sign-up page when the app cannot open it."""

        deeplink_url = self._tag_source(self.build())
        fallback_url = self._tag_source(self.fallback_url())

        if self.launcher.can_open(deeplink_url):
            LOGGER.info("opening deeplink source=%s", self._source.value)
            self.launcher.open(deeplink_url)
        else:
            LOGGER.info("rides app unavailable, opening fallback url=%s", fallback_url)
            self.launcher.open(fallback_url)

    def set_pickup_location_to_current_location(self) -> None:
        """Set the user's current location as a default pickup location."""

        self._parameters.set_parameter(QueryParameterName.ACTION, SET_PICKUP_ACTION)
        self._parameters.set_parameter(QueryParameterName.PICKUP_DEFAULT, CURRENT_LOCATION)
        self._parameters.delete_parameters(
            [
                QueryParameterName.PICKUP_LATITUDE,
                QueryParameterName.PICKUP_LONGITUDE,
                QueryParameterName.PICKUP_ADDRESS,
                QueryParameterName.PICKUP_NICKNAME,
            ]
        )

    def set_pickup_location(
        self,
        latitude: float,
        longitude: float,
        nickname: str | None = None,
        address: str | None = None,
    ) -> None:
        """Set deeplink pickup location information.

        Explicit coordinates replace any current-location default.
        """

        self._parameters.delete_parameters([QueryParameterName.PICKUP_NICKNAME, QueryParameterName.PICKUP_ADDRESS])
        self._parameters.set_parameter(QueryParameterName.ACTION, SET_PICKUP_ACTION)
        self._parameters.set_parameter(QueryParameterName.PICKUP_LATITUDE, format_coordinate(latitude))
        self._parameters.set_parameter(QueryParameterName.PICKUP_LONGITUDE, format_coordinate(longitude))

        if nickname is not None:
            self._parameters.set_parameter(QueryParameterName.PICKUP_NICKNAME, nickname)
        if address is not None:
            self._parameters.set_parameter(QueryParameterName.PICKUP_ADDRESS, address)

        self._parameters.delete_parameters([QueryParameterName.PICKUP_DEFAULT])

    def set_dropoff_location(
        self,
        latitude: float,
        longitude: float,
        nickname: str | None = None,
        address: str | None = None,
    ) -> None:
        """Set deeplink dropoff location information. The `action` parameter is left alone."""

        self._parameters.delete_parameters([QueryParameterName.DROPOFF_NICKNAME, QueryParameterName.DROPOFF_ADDRESS])
        self._parameters.set_parameter(QueryParameterName.DROPOFF_LATITUDE, format_coordinate(latitude))
        self._parameters.set_parameter(QueryParameterName.DROPOFF_LONGITUDE, format_coordinate(longitude))

        if nickname is not None:
            self._parameters.set_parameter(QueryParameterName.DROPOFF_NICKNAME, nickname)
        if address is not None:
            self._parameters.set_parameter(QueryParameterName.DROPOFF_ADDRESS, address)

    def set_product_id(self, product_id: str) -> None:
        self._parameters.set_parameter(QueryParameterName.PRODUCT_ID, product_id)

    def pickup_location_set(self) -> bool:
        return (
            self._parameters.parameter_exists(QueryParameterName.PICKUP_LATITUDE)
            and self._parameters.parameter_exists(QueryParameterName.PICKUP_LONGITUDE)
        ) or self._parameters.parameter_exists(QueryParameterName.PICKUP_DEFAULT)

    def _tag_source(self, url: str) -> str:
        # The button tag carries a leading `&`; the deeplink tag does not.
        if self._source is SourceParameter.BUTTON:
            return f"{url}&user-agent=rides-button-v{self.sdk_version}"
        return f"{url}user-agent=rides-deeplink-v{self.sdk_version}"
