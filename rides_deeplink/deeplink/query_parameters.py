# This module stores the query parameters carried by a ride request deeplink.
# Parameter names form a closed set and map to fixed wire keys such as `pickup[latitude]`.
# Values are percent-encoded on write with a custom reserved set; keys are never encoded.
# The store tracks a pending flag so the builder can reuse its last URI when nothing changed.

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from types import MappingProxyType
from typing import Final

from rides_deeplink.deeplink.errors import UnrepresentableValueError


class QueryParameterName(Enum):
    ACTION = "action"
    CLIENT_ID = "client_id"
    PRODUCT_ID = "product_id"
    PICKUP_DEFAULT = "pickup_default"
    PICKUP_LATITUDE = "pickup_latitude"
    PICKUP_LONGITUDE = "pickup_longitude"
    PICKUP_NICKNAME = "pickup_nickname"
    PICKUP_ADDRESS = "pickup_address"
    DROPOFF_LATITUDE = "dropoff_latitude"
    DROPOFF_LONGITUDE = "dropoff_longitude"
    DROPOFF_NICKNAME = "dropoff_nickname"
    DROPOFF_ADDRESS = "dropoff_address"

    @property
    def wire_key(self) -> str:
        return WIRE_KEYS[self]


WIRE_KEYS: Final = MappingProxyType(
    {
        QueryParameterName.ACTION: "action",
        QueryParameterName.CLIENT_ID: "client_id",
        QueryParameterName.PRODUCT_ID: "product_id",
        QueryParameterName.PICKUP_DEFAULT: "pickup",
        QueryParameterName.PICKUP_LATITUDE: "pickup[latitude]",
        QueryParameterName.PICKUP_LONGITUDE: "pickup[longitude]",
        QueryParameterName.PICKUP_NICKNAME: "pickup[nickname]",
        QueryParameterName.PICKUP_ADDRESS: "pickup[formatted_address]",
        QueryParameterName.DROPOFF_LATITUDE: "dropoff[latitude]",
        QueryParameterName.DROPOFF_LONGITUDE: "dropoff[longitude]",
        QueryParameterName.DROPOFF_NICKNAME: "dropoff[nickname]",
        QueryParameterName.DROPOFF_ADDRESS: "dropoff[formatted_address]",
    }
)

# Brackets are escaped in values even though several wire keys contain them.
RESERVED_VALUE_CHARACTERS: Final[frozenset[str]] = frozenset(" =\"#%/<>?@\\^`{|}!$&'()*+,:;[]")


def encode_parameter_value(value: str) -> str:
    """Percent-encode reserved characters; everything else, non-ASCII included, passes through."""

    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise UnrepresentableValueError(value, exc.reason) from exc

    return "".join(f"%{ord(char):02X}" if char in RESERVED_VALUE_CHARACTERS else char for char in value)


class QueryParameters:
    """Mapping of wire keys to encoded values with a pending-changes flag."""

    def __init__(self) -> None:
        self._params: dict[str, str] = {}
        self.pending_changes = False

    def set_parameter(self, name: QueryParameterName, value: str) -> None:
        """Add a parameter, overwriting any value already stored for it."""

        self._params[name.wire_key] = encode_parameter_value(value)
        self.pending_changes = True

    def delete_parameters(self, names: Iterable[QueryParameterName]) -> None:
        """Remove every listed parameter that is present.

        The store is marked pending even when nothing was removed.
        """

        for name in names:
            self._params.pop(name.wire_key, None)
        self.pending_changes = True

    def parameter_exists(self, name: QueryParameterName) -> bool:
        return name.wire_key in self._params

    def get_parameter(self, name: QueryParameterName) -> str | None:
        return self._params.get(name.wire_key)

    def query_items(self) -> list[tuple[str, str]]:
        """Return one (wire key, encoded value) pair per stored parameter, in no guaranteed order."""

        return list(self._params.items())

    def __len__(self) -> int:
        return len(self._params)
