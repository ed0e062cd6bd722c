"""Property binding tables shared by all device codecs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar

from ..config import AccessoryConfig, CodecParams

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MessageInfo:
    """Context handed to every encode/decode call."""

    topic: str | None = None
    property: str | None = None

    @classmethod
    def coerce(cls, info: Any, property_name: str | None = None) -> MessageInfo:
        """Build a ``MessageInfo`` from ``info``, defaulting the property name."""

        if isinstance(info, MessageInfo):
            return info
        if isinstance(info, Mapping):
            return cls(
                topic=info.get("topic"),
                property=info.get("property", property_name),
            )
        return cls(property=property_name)


class Output:
    """Late-delivery handle that forwards at most one value."""

    def __init__(self, callback: Callable[[Any], Any]) -> None:
        """Wrap ``callback`` so repeated deliveries are ignored."""

        self._callback = callback
        self._delivered = False

    @property
    def delivered(self) -> bool:
        """Return True once a value has been forwarded."""

        return self._delivered

    def __call__(self, value: Any) -> bool:
        """Forward ``value`` unless a value was already delivered."""

        if self._delivered:
            _LOGGER.debug("Ignoring repeated output delivery of %s", value)
            return False
        self._delivered = True
        self._callback(value)
        return True

    @classmethod
    def wrap(cls, output: Any) -> Output | None:
        """Return ``output`` as an :class:`Output`, or None when absent."""

        if output is None or isinstance(output, Output):
            return output
        if not callable(output):
            return None
        return cls(output)


Converter = Callable[[Any, MessageInfo | None, Output | None], Any]


@dataclass(frozen=True, slots=True)
class PropertyBinding:
    """Encoder and decoder registered for one host property."""

    name: str
    encode: Converter | None = None
    decode: Converter | None = None

    def __post_init__(self) -> None:
        """Reject bindings that convert in neither direction."""

        if self.encode is None and self.decode is None:
            raise ValueError(f"Property binding {self.name!r} defines no functions")

    def as_dict(self) -> dict[str, Converter]:
        """Return the defined directions keyed by ``encode``/``decode``."""

        table: dict[str, Converter] = {}
        if self.encode is not None:
            table["encode"] = self.encode
        if self.decode is not None:
            table["decode"] = self.decode
        return table


class BaseCodec:
    """Per-accessory table of property conversions.

    Subclasses register bindings in ``__init__``. Conversion functions return
    ``None`` when nothing should be published or applied.
    """

    model: ClassVar[str] = ""

    def __init__(self, params: Mapping[str, Any] | CodecParams) -> None:
        """Validate collaborator handles and configuration."""

        self._params = CodecParams.from_mapping(params)
        self._bindings: dict[str, PropertyBinding] = {}

    @property
    def config(self) -> AccessoryConfig:
        """Return the accessory configuration this codec was built with."""

        return self._params.config

    def add_binding(
        self,
        name: str,
        *,
        encode: Converter | None = None,
        decode: Converter | None = None,
    ) -> PropertyBinding:
        """Register the conversions for property ``name``."""

        binding = PropertyBinding(name=name, encode=encode, decode=decode)
        self._bindings[name] = binding
        return binding

    @property
    def properties(self) -> dict[str, PropertyBinding]:
        """Return a mapping of property name to binding."""

        return dict(MappingProxyType(self._bindings))

    def binding_for(self, property_name: str) -> PropertyBinding | None:
        """Return the binding registered for ``property_name``."""

        return self._bindings.get(property_name)

    def encode(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> Any:
        """Pass framework values through unchanged."""

        return message

    def decode(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> Any:
        """Pass device values through unchanged."""

        return message

    def encode_property(
        self,
        property_name: str,
        message: Any,
        info: MessageInfo | Mapping[str, Any] | None = None,
        output: Callable[[Any], Any] | None = None,
    ) -> Any:
        """Encode ``message`` with the property's encoder or the fallback."""

        binding = self._bindings.get(property_name)
        encoder = binding.encode if binding is not None else None
        return (encoder or self.encode)(
            message, MessageInfo.coerce(info, property_name), Output.wrap(output)
        )

    def decode_property(
        self,
        property_name: str,
        message: Any,
        info: MessageInfo | Mapping[str, Any] | None = None,
        output: Callable[[Any], Any] | None = None,
    ) -> Any:
        """Decode ``message`` with the property's decoder or the fallback."""

        binding = self._bindings.get(property_name)
        decoder = binding.decode if binding is not None else None
        return (decoder or self.decode)(
            message, MessageInfo.coerce(info, property_name), Output.wrap(output)
        )

    def to_table(self) -> dict[str, Any]:
        """Return the plain mapping layout the host framework consumes."""

        return {
            "properties": {
                name: binding.as_dict() for name, binding in self._bindings.items()
            },
            "encode": self.encode,
            "decode": self.decode,
        }

    def _publish(self, topic: str, value: Any) -> None:
        """Send ``value`` straight to ``topic`` on the bus."""

        _LOGGER.debug("%s publishing %s to %s", self.model, value, topic)
        self._params.publish(topic, value)

    def _notify(self, property_name: str, value: Any) -> None:
        """Tell the host that ``property_name`` received ``value``."""

        _LOGGER.debug("%s notifying %s of %s", self.model, property_name, value)
        self._params.notify(property_name, value)

    def _log(self, message: str, *args: Any) -> None:
        """Forward a diagnostic message to the host's log handle."""

        self._params.log(message % args if args else message)
