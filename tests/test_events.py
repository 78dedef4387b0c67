from unittest.mock import patch

import pytest

from chipdna.events import (
    CLIENT_LIBRARY_RELEASE_NAME,
    CLIENT_LIBRARY_TYPE,
    CLIENT_LIBRARY_VERSION,
    CLIENT_OS_TAG,
    CLIENT_RELEASE_NAME_TAG,
    CLIENT_TYPE_TAG,
    CLIENT_VERSION_TAG,
    Command,
    EventDispatcher,
    EventType,
    os_name,
    register_parameters,
)
from chipdna.parameters import ParameterSet


@pytest.mark.parametrize(
    "platform, expected",
    [
        ("win32", "Windows 32-bit"),
        ("darwin", "Mac OSX"),
        ("linux", "Unix"),
        ("freebsd13", "Unix"),
        ("emscripten", "Other"),
    ],
)
def test_os_name(platform, expected):
    with patch("chipdna.events.sys.platform", platform):
        assert os_name() == expected


def test_register_parameters_carry_library_version():
    params = register_parameters("Unix")
    assert params.get_value(CLIENT_RELEASE_NAME_TAG) == "ARCTICUS"
    assert params.get_value(CLIENT_VERSION_TAG) == "3.09.1081.4581"
    assert params.get_value(CLIENT_TYPE_TAG) == "C++"
    assert params.get_value(CLIENT_OS_TAG) == "Unix"
    assert len(params) == 4


def test_register_parameters_default_os():
    params = register_parameters()
    assert params.get_value(CLIENT_OS_TAG) == os_name()


def test_register_tag_names():
    assert set(register_parameters("Other").to_dict()) == {
        "CLIENT_VERSION",
        "CLIENT_RELEASE_NAME",
        "CLIENT_OPERATING_SYSTEM",
        "CLIENT_TYPE",
    }
    assert CLIENT_LIBRARY_TYPE == register_parameters("x").get_value(CLIENT_TYPE_TAG)
    assert CLIENT_LIBRARY_VERSION in register_parameters("x").to_dict().values()
    assert CLIENT_LIBRARY_RELEASE_NAME in register_parameters("x").to_dict().values()


def test_command_values():
    assert Command.GET_STATUS.value == "GetStatus"
    assert Command("RunRequestQueue") is Command.RUN_REQUEST_QUEUE
    assert Command.REGISTER == "Register"


def test_event_type_from_string():
    assert EventType("TransactionFinished") is EventType.TRANSACTION_FINISHED
    with pytest.raises(ValueError):
        EventType("NoSuchEvent")


def test_dispatch_calls_callback_with_params():
    received = []
    dispatcher = EventDispatcher()
    dispatcher.on(EventType.CARD_DETAILS, received.append)
    assert dispatcher.dispatch("CardDetails", {"B": "2", "A": "1"}) is True
    assert received == [{"A": "1", "B": "2"}]
    assert list(received[0]) == ["A", "B"]


def test_dispatch_accepts_parameter_set():
    received = []
    dispatcher = EventDispatcher()
    dispatcher.on("TmsUpdate", received.append)
    assert dispatcher.dispatch(EventType.TMS_UPDATE, ParameterSet({"K": 5})) is True
    assert received == [{"K": "5"}]


def test_dispatch_without_callback_returns_false():
    dispatcher = EventDispatcher()
    assert dispatcher.dispatch(EventType.VOICE_REFERRAL, {"X": "1"}) is False


def test_dispatch_unknown_event_is_ignored():
    received = []
    dispatcher = EventDispatcher()
    dispatcher.on(EventType.CARD_DETAILS, received.append)
    assert dispatcher.dispatch("Mystery", {"X": "1"}) is False
    assert received == []


def test_off_removes_callback():
    received = []
    dispatcher = EventDispatcher()
    dispatcher.on(EventType.TRANSACTION_PAUSE, received.append)
    dispatcher.off("TransactionPause")
    assert dispatcher.dispatch(EventType.TRANSACTION_PAUSE, {}) is False
    assert received == []


def test_on_replaces_earlier_callback():
    first, second = [], []
    dispatcher = EventDispatcher()
    dispatcher.on(EventType.TRANSACTION_UPDATE, first.append)
    dispatcher.on(EventType.TRANSACTION_UPDATE, second.append)
    dispatcher.dispatch(EventType.TRANSACTION_UPDATE, {"A": "1"})
    assert first == []
    assert second == [{"A": "1"}]


def test_error_event_passes_text():
    messages = []
    dispatcher = EventDispatcher()
    dispatcher.on(EventType.ERROR_EVENT, messages.append)
    params = {"ERRORS": "Failure", "CODE": "7"}
    assert dispatcher.dispatch("ErrorEvent", params) is True
    assert messages == [str(ParameterSet(params))]
    assert "Failure" in messages[0]


def test_on_unknown_event_type_raises():
    dispatcher = EventDispatcher()
    with pytest.raises(ValueError):
        dispatcher.on("NotAnEvent", print)


def test_events_are_routed_separately():
    details, finished = [], []
    dispatcher = EventDispatcher()
    dispatcher.on(EventType.CARD_DETAILS, details.append)
    dispatcher.on(EventType.TRANSACTION_FINISHED, finished.append)
    dispatcher.dispatch(EventType.TRANSACTION_FINISHED, {"R": "ok"})
    assert details == []
    assert finished == [{"R": "ok"}]