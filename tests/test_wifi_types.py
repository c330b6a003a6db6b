import dataclasses

import pytest

from moorekit.wifi_types import (
    AppMode,
    AppState,
    Credentials,
    Input,
    InputType,
    Output,
    OutputType,
    WiFiStatus,
    is_valid_credential_length,
)

password = "password"


def test_default_credentials_are_empty_and_invalid():
    creds = Credentials()
    assert creds.is_empty() is True
    assert creds.is_valid() is False


def test_credentials_with_name_and_passphrase_are_valid():
    creds = Credentials("home", password=password)
    assert creds.is_empty() is False
    assert creds.is_valid() is True


def test_credentials_without_passphrase_are_invalid():
    creds = Credentials("home", "")
    assert creds.is_empty() is False
    assert creds.is_valid() is False


@pytest.mark.parametrize(
    "length, expected", [(0, False), (1, True), (63, True), (64, False)]
)
def test_credential_length_bounds(length, expected):
    assert is_valid_credential_length("a" * length) is expected


def test_overlong_ssid_makes_credentials_invalid():
    assert Credentials("n" * 64, "secret").is_valid() is False
    assert Credentials("n" * 63, "secret").is_valid() is True


def test_app_state_defaults():
    state = AppState()
    assert state.mode is AppMode.INITIALIZING
    assert state.wifi_status == WiFiStatus.IDLE
    assert state.last_update == 0
    assert state.credentials_changed is False
    assert state.should_reconnect is False
    assert state.credentials.is_empty()


def test_app_state_is_immutable():
    state = AppState()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.mode = AppMode.CONNECTED
    assert state.mode is AppMode.INITIALIZING
    assert state == AppState()


@pytest.mark.parametrize(
    "factory, kind",
    [
        (Input.none, InputType.NONE),
        (Input.retry_connection, InputType.RETRY_CONNECTION),
        (Input.request_credentials, InputType.REQUEST_CREDENTIALS),
        (Input.connection_started, InputType.CONNECTION_STARTED),
        (Input.tick, InputType.TICK),
    ],
)
def test_simple_input_factories(factory, kind):
    symbol = factory()
    assert symbol.kind is kind
    assert symbol.new_credentials == Credentials()


def test_credentials_entered_carries_credentials():
    creds = Credentials("office", "secret")
    symbol = Input.credentials_entered(creds)
    assert symbol.kind is InputType.CREDENTIALS_ENTERED
    assert symbol.new_credentials == creds


def test_wifi_status_connected():
    symbol = Input.wifi_status_changed(WiFiStatus.CONNECTED)
    assert symbol.kind is InputType.WIFI_CONNECTED
    assert symbol.wifi_status == WiFiStatus.CONNECTED


@pytest.mark.parametrize(
    "status",
    [WiFiStatus.IDLE, WiFiStatus.CONNECTION_LOST, WiFiStatus.DISCONNECTED],
)
def test_wifi_status_other_is_disconnected(status):
    symbol = Input.wifi_status_changed(status)
    assert symbol.kind is InputType.WIFI_DISCONNECTED
    assert symbol.wifi_status == status


@pytest.mark.parametrize("mode", list(AppMode))
def test_mode_carrying_outputs(mode):
    assert Output.update_leds(mode) == Output(OutputType.UPDATE_LEDS, mode=mode)
    assert Output.render_ui(mode).kind is OutputType.RENDER_UI
    assert Output.render_ui(mode).mode is mode


def test_flag_outputs():
    save = Output.save_credentials()
    assert save.kind is OutputType.SAVE_CREDENTIALS
    assert save.credentials_need_saving is True
    assert save.should_start_connection is False

    start = Output.start_wifi_connection()
    assert start.kind is OutputType.START_WIFI_CONNECTION
    assert start.should_start_connection is True
    assert start.credentials_need_saving is False


def test_log_and_none_outputs():
    assert Output.none() == Output()
    assert Output.log_connection_success().kind is OutputType.LOG_CONNECTION_SUCCESS
    assert Output.log_connection_lost().kind is OutputType.LOG_CONNECTION_LOST