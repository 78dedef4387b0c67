"""Enumerations of the tokens exchanged with the payment server."""

from __future__ import annotations

from enum import IntEnum
from typing import TypeVar

__all__ = [
    "CardSchemeId",
    "ChipDnaServerIssue",
    "ConfigurationUpdate",
    "CredentialOnFileReason",
    "DeferredAuthorizationReason",
    "PauseTransactionState",
    "PaymentDeviceAvailabilityError",
    "PaymentDeviceConfigurationState",
    "PaymentPlatformState",
    "parse_token",
    "card_scheme_from_code",
]


class _Token(IntEnum):
    """Integer enumeration whose members carry a CamelCase wire token."""

    @property
    def token(self) -> str:
        """The name of this member as it appears on the wire."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class CardSchemeId(_Token):
    """Card scheme identifiers."""

    OTHER = 0
    VISA = 1
    MASTER_CARD = 2
    MAESTRO = 3
    AMEX = 4
    JCB = 5
    DINERS = 6
    DISCOVER = 7
    CARTE_BLEUE = 8
    CARTE_BLANC = 9
    VOYAGER = 10
    WEX = 11
    UNION_PAY = 12
    STYLE = 100
    VALUE_LINK = 101
    INTERAC = 1241
    LASER = 3721


class ChipDnaServerIssue(_Token):
    """Issues that may limit the server's ability to process transactions."""

    UNINITIALIZED = 0
    NONE = 1
    NO_PIN_PADS_AVAILABLE = 2
    NO_PIN_PADS_CONFIGURED = 3
    ENCRYPTION_CERT_REQUIRED = 4
    ENCRYPTION_CERT_INVALID = 5
    TERMINAL_DISABLED = 6
    APPLICATION_DISABLED = 7
    TERMINAL_CONFIGURATION_NOT_FOUND = 8
    INSUFFICIENT_STORAGE_SPACE = 9
    IN_SCHEDULE_UPDATE_TIME = 10


class ConfigurationUpdate(_Token):
    """Updates reported while connecting and configuring."""

    CONNECT_AND_CONFIGURE_STARTED = 0
    REGISTERING = 1


class CredentialOnFileReason(_Token):
    """Reasons for a credential-on-file transaction."""

    UNSCHEDULED = 0
    INSTALLMENT = 1
    INCREMENTAL = 2
    RESUBMISSION = 3
    DELAYED_CHARGE = 4
    RE_AUTH = 5
    NO_SHOW = 6


class DeferredAuthorizationReason(_Token):
    """Reasons an authorization was deferred."""

    NONE = 0
    CONNECTION_FAILED = 1
    COMMUNICATION_FAILED = 2
    PROCESSING_FAILED = 3
    OFFLINE_ONLY = 4


class PauseTransactionState(_Token):
    """Points at which a transaction may pause."""

    POST_CARD_DETAILS = 0


class PaymentDeviceAvailabilityError(_Token):
    """Payment device availability error codes."""

    NONE = 0
    COMMS_LINK = 1
    DEVICE_ID_MISMATCH = 2
    INVALID_FIRMWARE_VERSION = 3
    DEVICE_NOT_CONFIGURED = 4
    DEVICE_MODEL_MISMATCH = 5
    DEVICE_MODEL_MISMATCH_AFTER_REBOOT = 6


class PaymentDeviceConfigurationState(_Token):
    """Configuration state of a payment device."""

    NOT_CONFIGURED = 0
    CONFIGURATION_IN_PROGRESS = 1
    FIRMWARE_UPDATE_IN_PROGRESS = 2
    CONFIGURED = 3


class PaymentPlatformState(_Token):
    """State of the connection to the payment platform."""

    UNAVAILABLE = 0
    AVAILABLE = 1


# Members that exist but have no string form the server is known to send.
_UNPARSEABLE = frozenset({DeferredAuthorizationReason.OFFLINE_ONLY})

E = TypeVar("E", bound=_Token)


def parse_token(enum_cls: type[E], name: str) -> E:
    """Return the member of ``enum_cls`` whose wire token is ``name``.

    Raises ValueError if the token is not recognised.
    """
    for member in enum_cls:
        if member.token == name and member not in _UNPARSEABLE:
            return member
    raise ValueError(f"unknown {enum_cls.__name__} token: {name!r}")


def card_scheme_from_code(code: int) -> CardSchemeId:
    """Return the card scheme with numeric identifier ``code``.

    Raises ValueError if no scheme has that identifier.
    """
    try:
        return CardSchemeId(int(code))
    except ValueError:
        raise ValueError(f"unknown card scheme code: {code!r}") from None