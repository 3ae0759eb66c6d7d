"""
Shared test configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from rides_deeplink import rides_client as rides_client_module  # noqa: E402
from rides_deeplink.common import settings as settings_module  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure deterministic environment values and fresh cached settings during tests."""

    defaults = {
        "LOG_LEVEL": "INFO",
        "RIDES_WEB_HOST": "m.uber.com",
        "RIDES_SDK_VERSION": "0.1.0",
        "RIDES_DEEPLINK_SOURCE": "deeplink",
    }

    for key, value in defaults.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("RIDES_CLIENT_ID", raising=False)

    settings_module.get_settings.cache_clear()
    rides_client_module.get_rides_client.cache_clear()
    yield
    settings_module.get_settings.cache_clear()
    rides_client_module.get_rides_client.cache_clear()
