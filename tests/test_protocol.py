"""Tests for protocol URL construction."""

from openrbx.models import LaunchParameters
from openrbx.protocol import build_protocol_url


def test_build_url_exact_string():
    params = LaunchParameters(place_id="1", universe_id="2", launch_mode="edit", task="EditPlace")
    assert (
        build_protocol_url(params)
        == "roblox-studio:1+launchmode:edit+task:EditPlace+placeId:1+universeId:2"
    )


def test_build_url_uses_defaults():
    params = LaunchParameters(place_id="134510530844509", universe_id="8049025471")
    assert build_protocol_url(params) == (
        "roblox-studio:1+launchmode:edit+task:EditPlace"
        "+placeId:134510530844509+universeId:8049025471"
    )


def test_build_url_is_deterministic():
    params = LaunchParameters(place_id="42", universe_id="7", launch_mode="play", task="StartGame")
    assert build_protocol_url(params) == build_protocol_url(params)


def test_build_url_field_order():
    """Fields keep their order regardless of how the parameters were given."""
    params = LaunchParameters(task="T", universe_id="U", launch_mode="M", place_id="P")
    url = build_protocol_url(params)
    segments = url.split("+")
    assert segments == ["roblox-studio:1", "launchmode:M", "task:T", "placeId:P", "universeId:U"]


def test_build_url_custom_scheme():
    params = LaunchParameters(place_id="1", universe_id="2")
    url = build_protocol_url(params, scheme="roblox-studio-test:1")
    assert url.startswith("roblox-studio-test:1+launchmode:")


def test_build_url_does_not_escape_values():
    params = LaunchParameters(place_id="1+2", universe_id="3:4")
    url = build_protocol_url(params)
    assert url.endswith("+placeId:1+2+universeId:3:4")
