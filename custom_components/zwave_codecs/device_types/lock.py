"""Codec for the Yale Assure lock with Z-Wave module (YRD226)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..codec import BaseCodec, MessageInfo, Output, member_from_value, parse_int
from ..config import CodecParams
from ..const import (
    LOCK_STATE_CODES,
    PROPERTY_BATTERY_LEVEL,
    PROPERTY_LOCK_CURRENT_STATE,
    PROPERTY_LOCK_TARGET_STATE,
    PROPERTY_STATUS_LOW_BATTERY,
    LockState,
)

_LOGGER = logging.getLogger(__name__)

_STATES_BY_CODE = {code: state for state, code in LOCK_STATE_CODES.items()}


class LockCodec(BaseCodec):
    """Map lock states to the door lock's raw codes."""

    model = "yrd226"

    def __init__(self, params: Mapping[str, Any] | CodecParams) -> None:
        """Register lock bindings."""

        super().__init__(params)

        self.add_binding(
            PROPERTY_LOCK_TARGET_STATE,
            encode=self.encode_lock_state,
            decode=self.decode_lock_state,
        )
        self.add_binding(
            PROPERTY_LOCK_CURRENT_STATE, decode=self.decode_lock_current_state
        )
        self.add_binding(PROPERTY_BATTERY_LEVEL, decode=self.decode_battery_level)
        self.add_binding(
            PROPERTY_STATUS_LOW_BATTERY, decode=self.decode_status_low_battery
        )

    def encode_lock_state(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> int | None:
        """Encode ``U``/``S`` as the lock's 0/255 codes."""

        state = member_from_value(LockState, message)
        code = LOCK_STATE_CODES.get(state) if state is not None else None
        if code is None:
            _LOGGER.debug("Suppressing unsupported lock state %s", message)
        return code

    def decode_lock_state(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> LockState:
        """Decode a lock code, reporting ``?`` for anything unrecognised."""

        return _STATES_BY_CODE.get(parse_int(message), LockState.UNKNOWN)

    def decode_lock_current_state(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> LockState:
        """Decode the current state and mirror it onto the target state."""

        state = self.decode_lock_state(message, info, output)
        self._notify(PROPERTY_LOCK_TARGET_STATE, state)
        return state

    def decode_battery_level(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> Any:
        return message

    def decode_status_low_battery(
        self, message: Any, info: MessageInfo | None = None, output: Output | None = None
    ) -> Any:
        return message


def init(params: Mapping[str, Any]) -> LockCodec:
    """Build the lock codec for one accessory."""

    return LockCodec(params)
