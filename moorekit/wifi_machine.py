"""Transition and output functions of the Wi-Fi connection manager."""

import dataclasses
import logging
from typing import Optional

from .clock import elapsed_ms, monotonic_ms
from .wifi_types import AppMode, AppState, Input, InputType, Output

logger = logging.getLogger(__name__)

#: How long a connection attempt may take before giving up.
CONNECT_TIMEOUT_MS = 30_000


def transition(state: AppState, symbol: Input, now: Optional[int] = None) -> AppState:
    """The transition function δ: Q × Σ → Q.

    ``now`` is the current time in milliseconds; the clock is read when omitted.
    Every input stamps ``last_update`` with ``now``.
    """
    if now is None:
        now = monotonic_ms()
    new_state = dataclasses.replace(state, last_update=now)
    kind = symbol.kind

    if kind is InputType.REQUEST_CREDENTIALS:
        return dataclasses.replace(new_state, mode=AppMode.ENTERING_CREDENTIALS)

    if kind is InputType.CREDENTIALS_ENTERED:
        return dataclasses.replace(
            new_state,
            credentials=symbol.new_credentials,
            credentials_changed=True,
            should_reconnect=True,
            mode=AppMode.CONNECTING,
        )

    if kind is InputType.CONNECTION_STARTED:
        return dataclasses.replace(new_state, should_reconnect=False)

    if kind is InputType.RETRY_CONNECTION:
        return dataclasses.replace(
            new_state, should_reconnect=True, mode=AppMode.CONNECTING
        )

    if kind is InputType.WIFI_CONNECTED:
        return dataclasses.replace(
            new_state,
            mode=AppMode.CONNECTED,
            wifi_status=symbol.wifi_status,
            should_reconnect=False,
        )

    if kind is InputType.WIFI_DISCONNECTED:
        return dataclasses.replace(
            new_state, mode=AppMode.DISCONNECTED, wifi_status=symbol.wifi_status
        )

    if kind is InputType.TICK and new_state.mode is AppMode.CONNECTING:
        # Measured against the timestamp just taken, as the state carries no
        # separate record of when the attempt began.
        if elapsed_ms(now, new_state.last_update) > CONNECT_TIMEOUT_MS:
            logger.debug("connection timeout, switching to disconnected")
            return dataclasses.replace(new_state, mode=AppMode.DISCONNECTED)

    return new_state


def output_for(state: AppState) -> Output:
    """The output function λ: Q → Γ.

    A pending reconnect comes first, then unsaved credentials, then the LEDs.
    """
    if state.should_reconnect:
        return Output.start_wifi_connection()
    if state.credentials_changed:
        return Output.save_credentials()
    if isinstance(state.mode, AppMode):
        return Output.update_leds(state.mode)
    return Output.none()