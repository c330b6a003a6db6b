"""User-facing helpers for the Wi-Fi connection manager.

These cover the parts of the interface that do not touch the radio:
reading single-key commands, naming modes, formatting hardware addresses,
the indicator LED pattern, status messages and messages on state changes.
"""

from typing import List, Optional, Sequence

from .wifi_types import AppMode, AppState, Input

#: The indicator blinks by toggling at this period while connecting.
BLINK_HALF_PERIOD_MS = 250

MAC_LENGTH = 6

CONNECTED_MESSAGE = "✓ Successfully connected to WiFi!"
CONNECTION_LOST_MESSAGE = "✗ WiFi connection lost"
CREDENTIALS_SAVED_MESSAGE = "💾 Credentials will be saved"

_UI_MESSAGES = {
    AppMode.CONNECTED: "Send 'c' to change credentials.",
    AppMode.DISCONNECTED: (
        "Not connected. Send 'r' to retry or 'c' to change credentials."
    ),
    AppMode.CONNECTING: "Connecting...",
    AppMode.ENTERING_CREDENTIALS: None,
    AppMode.INITIALIZING: "Initializing...",
}


def parse_user_input(char: str, mode: AppMode) -> Input:
    """Turn a single key typed by the user into an input symbol.

    'r' retries, but only while disconnected; 'c' asks for new credentials
    from any mode. Anything else yields no input.
    """
    if char in ("r", "R"):
        if mode is AppMode.DISCONNECTED:
            return Input.retry_connection()
        return Input.none()
    if char in ("c", "C"):
        return Input.request_credentials()
    return Input.none()


def mode_name(mode: object) -> str:
    """Return the upper-case name of ``mode``, or ``UNKNOWN`` for anything else."""
    if isinstance(mode, AppMode):
        return mode.name
    return "UNKNOWN"


def format_mac(mac: Sequence[int]) -> str:
    """Format a 6-byte hardware address as colon-separated upper-case hex.

    The bytes are shown last first, the order in which the radio reports them.
    """
    if len(mac) != MAC_LENGTH:
        raise ValueError(f"a MAC address has {MAC_LENGTH} bytes, got {len(mac)}")
    for byte in mac:
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"MAC byte out of range: {byte}")
    return ":".join(f"{byte:02X}" for byte in reversed(mac))


def wifi_led_level(mode: AppMode, now: int) -> bool:
    """The Wi-Fi indicator level for ``mode`` at time ``now`` in milliseconds.

    Solid on when connected, blinking while connecting, off otherwise.
    """
    if mode is AppMode.CONNECTED:
        return True
    if mode is AppMode.CONNECTING:
        return (now // BLINK_HALF_PERIOD_MS) % 2 == 1
    return False


def ui_message(mode: AppMode) -> Optional[str]:
    """The status line shown for ``mode``, or None when nothing is shown."""
    return _UI_MESSAGES.get(mode)


def state_change_messages(old: AppState, new: AppState, ip: str) -> List[str]:
    """Messages announcing what changed between ``old`` and ``new``.

    ``ip`` is the local address reported once a connection is made.
    """
    messages: List[str] = []
    if old.mode is not AppMode.CONNECTED and new.mode is AppMode.CONNECTED:
        messages.append(CONNECTED_MESSAGE)
        messages.append(f"IP address: {ip}")
    if old.mode is AppMode.CONNECTED and new.mode is AppMode.DISCONNECTED:
        messages.append(CONNECTION_LOST_MESSAGE)
    if not old.credentials_changed and new.credentials_changed:
        messages.append(CREDENTIALS_SAVED_MESSAGE)
    return messages