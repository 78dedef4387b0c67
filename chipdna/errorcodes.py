"""Error codes reported by the payment device."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["PaymentDeviceErrorCode", "parse_error_code"]


class PaymentDeviceErrorCode(IntEnum):
    """Error codes carried by payment device failures."""

    PAYMENT_DEVICE_NOT_INITIALIZED = 0
    ERROR_PARSING_AMOUNT = 1
    TRANSACTION_PROCESSING_ERROR = 2
    VOICE_REFERRAL_RESPONSE_NOT_EXPECTED = 3
    DEFERRED_AUTHORIZATION_RESPONSE_NOT_EXPECTED = 4
    TRANSACTION_FOR_CONFIRM_VOID_NOT_FOUND = 5
    TERMINAL_PROPERTIES_MISSING = 6
    DEVICE_CONFIG_MISSING = 7
    DEVICE_CONFIG_PROTOCOL_UNSUPPORTED = 8
    DEVICE_CONFIG_PROTOCOL_VALUE_ERROR = 9
    DEVICE_CONFIG_PORT_VALUE_ERROR = 10
    DEVICE_CONFIG_TCP_IP_VALUE_ERROR = 11
    TRANSACTION_REFERENCE_MISSING = 12
    VOICE_REFERRAL_AUTH_CODE_MISSING = 13
    CANNOT_CONTINUE_TRANSACTION_NOT_PAUSED = 14
    TRANSACTION_UPDATE_NOT_ALLOWED = 15
    TRANSACTION_UPDATE_PARAMETERS_MISSING = 16
    CONFIRM_VOICE_REFERRAL_DIFFERENT_AMOUNT_NOT_ALLOWED = 17
    RELEASE_CARD_NOT_SUPPORTED = 18
    TRANSACTION_FORCE_DECLINE_NOT_ALLOWED = 19
    PIN_PAD_REFUNDS_NOT_SUPPORTED = 20
    PIN_PAD_INVALID_DATA = 21
    UNABLE_TO_INITIALIZE_PINPAD = 22
    UNABLE_TO_START_PINPAD_PROCESS = 23
    FAILED_TO_TRANSMIT_PINPAD_MESSAGE = 24
    PINPAD_CONNECTION_CLOSED = 25
    UNEXPECTED_REQUEST_FROM_PINPAD = 26
    TERMINAL_CONFIGURATION_ERROR = 27
    PIN_PAD_TRANSACTION_TERMINATED = 28
    CHIP_APPLICATION_SELECTION_FAILURE = 29
    CHIP_INITIATE_APPLICATION_PROCESSING_FAILURE = 30
    CHIP_OFFLINE_DATA_AUTHENTICATION_FAILURE = 31
    CHIP_PROCESS_RESTRICTIONS_FAILURE = 32
    CHIP_TERMINAL_RISK_MANAGEMENT_FAILURE = 33
    CHIP_CARDHOLDER_VERIFICATION_METHOD_FAILURE = 34
    CHIP_TERMINAL_ACTION_ANALYSIS_FAILURE = 35
    CHIP_CARD_ACTION_ANALYSIS_FAILURE = 36
    CHIP_COMPLETION_FAILURE = 37
    EPOS_TRANSACTION_TERMINATED = 38
    CHIP_NO_ANSWER_TO_RESET = 39
    SWIPE_READ_FAILURE = 40
    CHIP_CARD_REMOVED = 41
    PIN_PAD_USER_CANCELLED = 42
    CHIP_NO_SUPPORTED_APPLICATIONS = 43
    CHIP_CARD_BLOCKED = 44
    CHIP_READ_FAILURE = 45
    APPLICATION_NOT_SUPPORTED = 46
    ATM_CASH_ONLY_CARD = 47
    CARD_HOLDER_ACTION_TIMED_OUT = 48
    INVALID_CARD_RESPONSE_ERROR = 49
    TRANSACTION_ALREADY_IN_PROGRESS_ERROR = 50
    MISSING_DATA_IN_COMMAND_ERROR = 51
    MISSING_FILE_ERROR = 52
    PINPAD_P2_PE_DISABLED = 53
    IMPROPER_COMMAND = 54
    UNSUPPORTED_COMMAND = 55
    INVALID_COMMAND_SEQUENCE = 56
    BAD_CARD = 57
    EXPIRED_CARD = 58
    CARD_DETAILS_UNAVAILABLE = 59
    CARD_USAGE_EXCEEDED = 60
    PIN_PAD_AMOUNT_INVALID = 61
    PINPAD_AMOUNT_TOO_LARGE = 62
    CONTACTLESS_COLLISION = 63
    CONTACTLESS_AMOUNT_ZERO = 64
    CONTACTLESS_USE_ANOTHER_INTERFACE = 65
    CONTACTLESS_USE_CHIP = 66
    DCC_TRANSACTIONS_NOT_SUPPORTED = 67
    PASS_THRU_SESSION_ALREADY_OPEN = 68
    PASS_THRU_SESSION_IS_NOT_OPEN = 69
    TRANSACTION_IN_PROGRESS = 70
    PASS_THRU_SESSION_IN_PROGRESS = 71
    PASS_THRU_SESSION_ALREADY_WAITING_TO_OPEN = 72
    PASS_THRU_NOT_SUPPORTED = 73
    PAYMENT_DEVICE_COMMAND_NOT_ALLOWED = 74
    PASS_THRU_CONFIG_MISSING = 75
    ALLOWLISTED_CARD_PRESENTED = 76
    ONLINE_PIN_KEY_MISSING = 77

    @property
    def token(self) -> str:
        """The name of this error code as it appears on the wire."""
        return "".join(part.capitalize() for part in self.name.split("_"))


_BY_TOKEN = {member.token: member for member in PaymentDeviceErrorCode}


def parse_error_code(name: str) -> PaymentDeviceErrorCode:
    """Return the error code whose wire token is ``name``.

    Raises ValueError if the token is not recognised.
    """
    try:
        return _BY_TOKEN[name]
    except KeyError:
        raise ValueError(f"unknown PaymentDeviceErrorCode token: {name!r}") from None