"""
Package marker for source code under `rides_deeplink.common`.
It groups settings and logging helpers shared by the deeplink modules.
Most functionality lives in the sibling modules; this file intentionally stays lightweight.
"""
