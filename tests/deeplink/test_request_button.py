# This test file validates the caller-facing request button wrapper.
# It exists so a missing client id degrades to logged no-ops instead of crashing the host app.
# Settings are read from the environment seeded by the shared conftest fixture.

from __future__ import annotations

import logging

import pytest

from rides_deeplink.deeplink.request_deeplink import SourceParameter
from rides_deeplink.request_button import RequestButton
from rides_deeplink.rides_client import RidesClient, get_rides_client
from tests.deeplink.support import FakeLauncher, decoded_pairs


def test_button_without_client_id_logs_and_ignores_calls(caplog: pytest.LogCaptureFixture) -> None:
    launcher = FakeLauncher()
    with caplog.at_level(logging.WARNING, logger="deeplink"):
        button = RequestButton(rides_client=RidesClient(None), launcher=launcher)

    assert button.deeplink is None
    assert button.enabled is False
    assert "No Client ID attached to the deeplink." in caplog.text

    button.set_pickup_location(37.775, -122.417)
    button.set_dropoff_location(37.791, -122.405)
    button.set_product_id("uberx")
    button.set_pickup_location_to_current_location()
    button.tap()

    assert launcher.opened == []


def test_button_uses_button_source_and_forwards_setters() -> None:
    launcher = FakeLauncher()
    button = RequestButton(rides_client=RidesClient("abc123"), launcher=launcher)

    button.set_pickup_location(37.775, -122.417, nickname="Home")
    button.set_dropoff_location(37.791, -122.405, address="1 Telegraph Hill Blvd")
    button.set_product_id("uberx")
    button.tap()

    assert button.deeplink is not None
    assert button.deeplink.source is SourceParameter.BUTTON
    opened = launcher.opened[0]
    assert opened.endswith("&user-agent=rides-button-v0.1.0")
    pairs = decoded_pairs(button.deeplink.build())
    assert ("dropoff[formatted_address]", "1 Telegraph Hill Blvd") in pairs
    assert ("product_id", "uberx") in pairs
    assert ("pickup[nickname]", "Home") in pairs


def test_button_reads_web_host_and_version_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RIDES_WEB_HOST", "m.example.com")
    monkeypatch.setenv("RIDES_SDK_VERSION", "1.2.3")
    launcher = FakeLauncher(openable_schemes={"https"})
    button = RequestButton(rides_client=RidesClient("abc123"), launcher=launcher)

    button.tap()

    assert launcher.opened == ["https://m.example.com/sign-up?client_id=abc123&user-agent=rides-button-v1.2.3"]


def test_shared_rides_client_reads_client_id_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RIDES_CLIENT_ID", " abc123 ")

    client = get_rides_client()
    button = RequestButton(launcher=FakeLauncher())

    assert client.client_id == "abc123"
    assert client.has_client_id() is True
    assert button.deeplink is not None
    assert button.deeplink.client_id == "abc123"


def test_blank_client_id_is_not_configured() -> None:
    assert RidesClient("  ").has_client_id() is False
    assert RidesClient(None).has_client_id() is False
