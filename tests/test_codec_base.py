"""Tests for the shared property binding table."""

from __future__ import annotations

from typing import Any

import pytest

from custom_components.zwave_codecs.codec.base import (
    BaseCodec,
    MessageInfo,
    Output,
    PropertyBinding,
)


class DoublingCodec(BaseCodec):
    """Codec with one binding per direction used to probe dispatch."""

    model = "doubling"

    def __init__(self, params: dict[str, Any]) -> None:
        """Register a bidirectional and a decode-only binding."""

        super().__init__(params)
        self.seen: list[MessageInfo | None] = []
        self.add_binding("brightness", encode=self._double, decode=self._halve)
        self.add_binding("currentTemperature", decode=self._deliver_later)

    def _double(self, message, info=None, output=None):
        self.seen.append(info)
        return message * 2

    def _halve(self, message, info=None, output=None):
        self.seen.append(info)
        return message / 2

    def _deliver_later(self, message, info=None, output=None):
        output(message)
        output(message + 1)
        return None


@pytest.fixture
def codec(collaborators) -> DoublingCodec:
    """Return a codec wired to recording collaborators."""

    return DoublingCodec(collaborators.params())


def test_binding_without_functions_is_rejected() -> None:
    """A binding must convert in at least one direction."""

    with pytest.raises(ValueError):
        PropertyBinding(name="brightness")


def test_binding_as_dict_lists_only_defined_directions() -> None:
    """Only the configured directions appear in the host table."""

    def decoder(message, info=None, output=None):
        return message

    binding = PropertyBinding(name="batteryLevel", decode=decoder)

    assert binding.as_dict() == {"decode": decoder}


def test_properties_returns_a_copy(codec: DoublingCodec) -> None:
    """Mutating the returned mapping leaves the codec untouched."""

    properties = codec.properties
    properties.pop("brightness")

    assert "brightness" in codec.properties
    assert codec.binding_for("brightness") is not None
    assert codec.binding_for("hue") is None


def test_property_dispatch_uses_specific_binding(codec: DoublingCodec) -> None:
    """Registered properties use their own encoder and decoder."""

    assert codec.encode_property("brightness", 10) == 20
    assert codec.decode_property("brightness", 10) == 5
    assert codec.seen[0] == MessageInfo(property="brightness")


def test_property_dispatch_falls_back_to_identity(codec: DoublingCodec) -> None:
    """Unbound properties and missing directions pass values through."""

    assert codec.encode_property("hue", "abc") == "abc"
    assert codec.decode_property("hue", 0) == 0
    assert codec.encode_property("currentTemperature", 21) == 21


def test_info_mapping_is_normalised(codec: DoublingCodec) -> None:
    """Mapping info objects are converted into MessageInfo instances."""

    codec.encode_property("brightness", 1, {"topic": "light/set"})

    assert codec.seen[-1] == MessageInfo(topic="light/set", property="brightness")


def test_output_delivers_at_most_once(codec: DoublingCodec) -> None:
    """Late delivery forwards only the first value."""

    delivered: list[Any] = []

    result = codec.decode_property("currentTemperature", 7, output=delivered.append)

    assert result is None
    assert delivered == [7]


def test_output_wrap_ignores_non_callables() -> None:
    """Missing or unusable output handles are dropped."""

    assert Output.wrap(None) is None
    assert Output.wrap("nope") is None
    handle = Output(lambda _value: None)
    assert Output.wrap(handle) is handle
    assert handle(1) is True
    assert handle.delivered is True
    assert handle(2) is False


def test_to_table_matches_host_layout(codec: DoublingCodec) -> None:
    """The host table exposes properties plus generic fallbacks."""

    table = codec.to_table()

    assert set(table) == {"properties", "encode", "decode"}
    assert set(table["properties"]["brightness"]) == {"encode", "decode"}
    assert set(table["properties"]["currentTemperature"]) == {"decode"}
    assert table["encode"]("x") == "x"
    assert table["decode"]("x") == "x"


def test_log_handle_receives_formatted_message(collaborators) -> None:
    """Diagnostic messages are formatted before reaching the host."""

    codec = DoublingCodec(collaborators.params())

    codec._log("units now %s", "CELSIUS")

    assert collaborators.logged == ["units now CELSIUS"]
