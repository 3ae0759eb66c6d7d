"""
Package marker for source code under `rides_deeplink.deeplink`.
It groups the parameter store and the deeplink builder with its launcher boundary.
The public names are re-exported here so callers can import them from one place.
"""

from rides_deeplink.deeplink.errors import DeeplinkError, MissingClientIDError, UnrepresentableValueError
from rides_deeplink.deeplink.query_parameters import QueryParameterName, QueryParameters
from rides_deeplink.deeplink.request_deeplink import RequestDeeplink, SourceParameter
from rides_deeplink.deeplink.url_launcher import BrowserUrlLauncher, UrlLauncher

__all__ = [
    "BrowserUrlLauncher",
    "DeeplinkError",
    "MissingClientIDError",
    "QueryParameterName",
    "QueryParameters",
    "RequestDeeplink",
    "SourceParameter",
    "UnrepresentableValueError",
    "UrlLauncher",
]
