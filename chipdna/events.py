"""Commands, client identification and event dispatch for the payment server."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Mapping
from enum import Enum

from .parameters import ParameterSet

__all__ = [
    "CLIENT_VERSION_TAG",
    "CLIENT_RELEASE_NAME_TAG",
    "CLIENT_OS_TAG",
    "CLIENT_TYPE_TAG",
    "CLIENT_LIBRARY_RELEASE_NAME",
    "CLIENT_LIBRARY_VERSION",
    "CLIENT_LIBRARY_TYPE",
    "Command",
    "EventType",
    "EventDispatcher",
    "os_name",
    "register_parameters",
]

CLIENT_VERSION_TAG = "CLIENT_VERSION"
CLIENT_RELEASE_NAME_TAG = "CLIENT_RELEASE_NAME"
CLIENT_OS_TAG = "CLIENT_OPERATING_SYSTEM"
CLIENT_TYPE_TAG = "CLIENT_TYPE"

CLIENT_LIBRARY_RELEASE_NAME = "ARCTICUS"
CLIENT_LIBRARY_VERSION = "3.09.1081.4581"
CLIENT_LIBRARY_TYPE = "C++"


class Command(str, Enum):
    """Names of the commands the client sends to the server."""

    REGISTER = "Register"
    GET_VERSION = "GetVersion"
    SET_IDLE_MESSAGE = "SetIdleMessage"
    GET_STATUS = "GetStatus"
    GET_MERCHANT_DATA = "GetMerchantData"
    GET_TRANSACTION_INFORMATION = "GetTransactionInformation"
    TERMINATE_TRANSACTION = "TerminateTransaction"
    CONFIRM_TRANSACTION = "ConfirmTransaction"
    VOID_TRANSACTION = "VoidTransaction"
    START_TRANSACTION = "StartTransaction"
    GET_CARD_DETAILS = "GetCardDetails"
    UPDATE_TRANSACTION_PARAMETERS = "UpdateTransactionParameters"
    CONTINUE_TRANSACTION = "ContinueTransaction"
    LINKED_REFUND_TRANSACTION = "LinkedRefundTransaction"
    CONTINUE_VOICE_REFERRAL = "ContinueVoiceReferral"
    CONTINUE_SIGNATURE_VERIFICATION = "ContinueSignatureVerification"
    CONTINUE_DEFERRED_AUTHORIZATION = "ContinueDeferredAuthorization"
    RELEASE_CARD = "ReleaseCard"
    TMS_UPDATE = "TmsUpdate"
    UPDATE_TRANSACTION_PARAMETERS_FINISHED = "UpdateTransactionParametersFinished"
    GET_CARD_STATUS = "GetCardStatus"
    OPEN_PASS_THRU_SESSION = "OpenPassThruSession"
    CLOSE_PASS_THRU_SESSION = "ClosePassThruSession"
    SEND_PASS_THRU_COMMAND = "SendPassThruCommand"
    CONNECT_AND_CONFIGURE = "ConnectAndConfigure"
    CUSTOM_COMMAND = "CustomCommand"
    RUN_REQUEST_QUEUE = "RunRequestQueue"


class EventType(str, Enum):
    """Names of the events the server sends to the client."""

    CARD_DETAILS = "CardDetails"
    CARD_NOTIFICATION = "CardNotification"
    TRANSACTION_FINISHED = "TransactionFinished"
    TRANSACTION_PAUSE = "TransactionPause"
    TRANSACTION_UPDATE = "TransactionUpdate"
    VOICE_REFERRAL = "VoiceReferral"
    DEFERRED_AUTHORIZATION = "DeferredAuthorization"
    SIGNATURE_VERIFICATION_REQUESTED = "SignatureVerificationRequested"
    PAYMENT_DEVICE_AVAILABILITY_CHANGE = "PaymentDeviceAvailabilityChange"
    TMS_UPDATE = "TmsUpdate"
    UPDATE_TRANSACTION_PARAMETERS_FINISHED = "UpdateTransactionParametersFinished"
    SEND_PASS_THRU_COMMAND_RESPONSE = "SendPassThruCommandResponse"
    OPEN_PASS_THRU_SESSION_RESPONSE = "OpenPassThruSessionResponse"
    CONNECT_AND_CONFIGURE = "ConnectAndConfigure"
    CONFIGURATION_UPDATE = "ConfigurationUpdate"
    DCC_RATE_INFORMATION = "DccRateInformation"
    REQUEST_QUEUE_RUN_COMPLETED = "RequestQueueRunCompleted"
    ERROR_EVENT = "ErrorEvent"


def os_name() -> str:
    """The operating system name reported to the server when registering."""
    platform = sys.platform
    if platform in ("win32", "cygwin"):
        return "Windows 32-bit"
    if platform == "darwin":
        return "Mac OSX"
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd", "sunos", "aix")):
        return "Unix"
    return "Other"


def register_parameters(os: str | None = None) -> ParameterSet:
    """Parameters identifying this client, sent when registering for events.

    ``os`` defaults to the name of the running operating system.
    """
    parameters = ParameterSet()
    parameters.add(CLIENT_RELEASE_NAME_TAG, CLIENT_LIBRARY_RELEASE_NAME)
    parameters.add(CLIENT_VERSION_TAG, CLIENT_LIBRARY_VERSION)
    parameters.add(CLIENT_TYPE_TAG, CLIENT_LIBRARY_TYPE)
    parameters.add(CLIENT_OS_TAG, os_name() if os is None else os)
    return parameters


Callback = Callable[..., object]


class EventDispatcher:
    """Routes server events to the callbacks registered for them.

    Each event type has at most one callback. Error events pass the event's
    parameters rendered as text; every other event passes them as a dict.
    """

    def __init__(self) -> None:
        self._callbacks: dict[EventType, Callback] = {}
        self._lock = threading.Lock()

    def on(self, event_type: EventType | str, callback: Callback) -> None:
        """Register ``callback`` for ``event_type``, replacing any earlier one.

        Raises ValueError if the event type is not known.
        """
        kind = EventType(event_type)
        with self._lock:
            self._callbacks[kind] = callback

    def off(self, event_type: EventType | str) -> None:
        """Remove the callback for ``event_type`` if one is registered."""
        kind = EventType(event_type)
        with self._lock:
            self._callbacks.pop(kind, None)

    def dispatch(
        self,
        event_type: EventType | str,
        params: Mapping[str, str] | ParameterSet | None = None,
    ) -> bool:
        """Deliver an event to its callback.

        Returns True if a callback was called; unknown event types and event
        types without a callback are ignored.
        """
        try:
            kind = EventType(event_type)
        except ValueError:
            return False
        with self._lock:
            callback = self._callbacks.get(kind)
        if callback is None:
            return False

        if isinstance(params, ParameterSet):
            parameters = params
        else:
            parameters = ParameterSet(params or {})

        if kind is EventType.ERROR_EVENT:
            callback(str(parameters))
        else:
            callback(parameters.to_dict())
        return True