"""
Package marker for the rides deeplink builder.
It groups the deeplink core and its caller-facing wrapper under one import path.
Most functionality lives in the sibling modules; this file intentionally stays lightweight.
"""

__version__ = "0.1.0"
