"""Value types for the Wi-Fi connection manager machine.

The machine's state space Q is :class:`AppState`. Its input alphabet Σ is
:class:`Input` and its output alphabet Γ is :class:`Output`.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

#: Longest credential, in bytes, that fits a 64-byte buffer with its terminator.
MAX_CREDENTIAL_LENGTH = 63


class WiFiStatus(IntEnum):
    """Status codes reported by the Wi-Fi radio."""

    IDLE = 0
    NO_SSID_AVAILABLE = 1
    SCAN_COMPLETED = 2
    CONNECTED = 3
    CONNECT_FAILED = 4
    CONNECTION_LOST = 5
    DISCONNECTED = 6
    NO_MODULE = 255


class InputType(Enum):
    """The kinds of input symbol the machine accepts."""

    NONE = 0
    RETRY_CONNECTION = 1
    REQUEST_CREDENTIALS = 2
    CREDENTIALS_ENTERED = 3
    CONNECTION_STARTED = 4
    WIFI_CONNECTED = 5
    WIFI_DISCONNECTED = 6
    TICK = 7


class OutputType(Enum):
    """The kinds of effect the machine can ask for."""

    NONE = 0
    UPDATE_LEDS = 1
    SAVE_CREDENTIALS = 2
    START_WIFI_CONNECTION = 3
    RENDER_UI = 4
    LOG_CONNECTION_SUCCESS = 5
    LOG_CONNECTION_LOST = 6


class AppMode(Enum):
    """What the application is currently doing."""

    INITIALIZING = 0
    CONNECTING = 1
    CONNECTED = 2
    DISCONNECTED = 3
    ENTERING_CREDENTIALS = 4


def is_valid_credential_length(credential: str) -> bool:
    """True if the credential is 1 to 63 bytes long when UTF-8 encoded."""
    return 0 < len(credential.encode("utf-8")) <= MAX_CREDENTIAL_LENGTH


@dataclass(frozen=True)
class Credentials:
    """A network name and its passphrase."""

    ssid: str = ""
    password: str = ""

    def is_empty(self) -> bool:
        """True if no network name is set."""
        return not self.ssid

    def is_valid(self) -> bool:
        """True if both the name and the passphrase have a valid length."""
        return is_valid_credential_length(self.ssid) and is_valid_credential_length(
            self.password
        )


@dataclass(frozen=True)
class AppState:
    """The complete state q of the machine."""

    credentials: Credentials = field(default_factory=Credentials)
    mode: AppMode = AppMode.INITIALIZING
    wifi_status: int = WiFiStatus.IDLE
    last_update: int = 0
    credentials_changed: bool = False
    should_reconnect: bool = False


@dataclass(frozen=True)
class Input:
    """An input symbol σ, with the data some kinds carry."""

    kind: InputType = InputType.NONE
    new_credentials: Credentials = field(default_factory=Credentials)
    wifi_status: int = 0

    @classmethod
    def none(cls) -> "Input":
        """No input."""
        return cls(InputType.NONE)

    @classmethod
    def retry_connection(cls) -> "Input":
        """The user asked to retry the connection."""
        return cls(InputType.RETRY_CONNECTION)

    @classmethod
    def request_credentials(cls) -> "Input":
        """The user asked to enter new credentials."""
        return cls(InputType.REQUEST_CREDENTIALS)

    @classmethod
    def credentials_entered(cls, credentials: Credentials) -> "Input":
        """The user finished entering ``credentials``."""
        return cls(InputType.CREDENTIALS_ENTERED, new_credentials=credentials)

    @classmethod
    def connection_started(cls) -> "Input":
        """A connection attempt has been started."""
        return cls(InputType.CONNECTION_STARTED)

    @classmethod
    def wifi_status_changed(cls, status: int) -> "Input":
        """The radio reported ``status``: connected or, for anything else, disconnected."""
        kind = (
            InputType.WIFI_CONNECTED
            if status == WiFiStatus.CONNECTED
            else InputType.WIFI_DISCONNECTED
        )
        return cls(kind, wifi_status=status)

    @classmethod
    def tick(cls) -> "Input":
        """A periodic timer event."""
        return cls(InputType.TICK)


@dataclass(frozen=True)
class Output:
    """An output symbol γ: an effect for the main loop to carry out."""

    kind: OutputType = OutputType.NONE
    mode: AppMode = AppMode.INITIALIZING
    should_start_connection: bool = False
    credentials_need_saving: bool = False

    @classmethod
    def none(cls) -> "Output":
        """No effect."""
        return cls(OutputType.NONE)

    @classmethod
    def update_leds(cls, mode: AppMode) -> "Output":
        """Show ``mode`` on the indicator LEDs."""
        return cls(OutputType.UPDATE_LEDS, mode=mode)

    @classmethod
    def save_credentials(cls) -> "Output":
        """Persist the current credentials."""
        return cls(OutputType.SAVE_CREDENTIALS, credentials_need_saving=True)

    @classmethod
    def start_wifi_connection(cls) -> "Output":
        """Begin a connection attempt."""
        return cls(OutputType.START_WIFI_CONNECTION, should_start_connection=True)

    @classmethod
    def render_ui(cls, mode: AppMode) -> "Output":
        """Show the user interface for ``mode``."""
        return cls(OutputType.RENDER_UI, mode=mode)

    @classmethod
    def log_connection_success(cls) -> "Output":
        """Report a successful connection."""
        return cls(OutputType.LOG_CONNECTION_SUCCESS)

    @classmethod
    def log_connection_lost(cls) -> "Output":
        """Report a lost connection."""
        return cls(OutputType.LOG_CONNECTION_LOST)