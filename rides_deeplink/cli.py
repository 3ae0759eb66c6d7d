# This module is the command-line entrypoint for building ride request deeplinks.
# It exists so a deeplink can be printed or opened without writing code.
# Values default to the environment settings and the output is a small JSON document.

from __future__ import annotations

import argparse
import json
import sys

from rides_deeplink.common.logging import configure_logging
from rides_deeplink.common.settings import VALID_SOURCES, get_settings
from rides_deeplink.deeplink.errors import DeeplinkError
from rides_deeplink.deeplink.request_deeplink import RequestDeeplink, SourceParameter
from rides_deeplink.deeplink.url_launcher import UrlLauncher


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a deeplink that opens the rides app on a ride request")
    parser.add_argument("--client-id", default=None, help="Client id; defaults to RIDES_CLIENT_ID")
    parser.add_argument("--source", choices=VALID_SOURCES, default=None, help="Invocation source tag")
    parser.add_argument("--pickup", nargs=2, type=float, metavar=("LAT", "LON"), default=None)
    parser.add_argument("--pickup-nickname", default=None)
    parser.add_argument("--pickup-address", default=None)
    parser.add_argument("--dropoff", nargs=2, type=float, metavar=("LAT", "LON"), default=None)
    parser.add_argument("--dropoff-nickname", default=None)
    parser.add_argument("--dropoff-address", default=None)
    parser.add_argument("--product-id", default=None)
    parser.add_argument("--execute", action="store_true", help="Open the deeplink, or the web fallback")
    return parser.parse_args(argv)


def build_deeplink(args: argparse.Namespace, *, launcher: UrlLauncher | None = None) -> RequestDeeplink:
    settings = get_settings()
    deeplink = RequestDeeplink(
        args.client_id or settings.RIDES_CLIENT_ID,
        SourceParameter(args.source or settings.RIDES_DEEPLINK_SOURCE),
        launcher=launcher,
        web_host=settings.RIDES_WEB_HOST,
        sdk_version=settings.RIDES_SDK_VERSION,
    )

    if args.pickup is not None:
        latitude, longitude = args.pickup
        deeplink.set_pickup_location(
            latitude, longitude, nickname=args.pickup_nickname, address=args.pickup_address
        )
    else:
        deeplink.set_pickup_location_to_current_location()

    if args.dropoff is not None:
        latitude, longitude = args.dropoff
        deeplink.set_dropoff_location(
            latitude, longitude, nickname=args.dropoff_nickname, address=args.dropoff_address
        )

    if args.product_id:
        deeplink.set_product_id(args.product_id)
    return deeplink


def main(argv: list[str] | None = None, *, launcher: UrlLauncher | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        deeplink = build_deeplink(args, launcher=launcher)
        deeplink_uri = deeplink.build()
    except DeeplinkError as exc:
        print(f"Unable to build deeplink: {exc}", file=sys.stderr)
        return 1

    print(json.dumps({"deeplink_uri": deeplink_uri, "fallback_url": deeplink.fallback_url()}, indent=2))

    if args.execute:
        deeplink.execute()
    return 0


if __name__ == "__main__":
    sys.exit(main())
