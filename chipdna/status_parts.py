"""Parts of the payment server status report."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar

from .tokens import (
    ChipDnaServerIssue,
    PaymentDeviceAvailabilityError,
    PaymentDeviceConfigurationState,
    PaymentPlatformState,
    parse_token,
)

__all__ = [
    "PaymentDeviceAvailabilityErrorInformation",
    "VersionInfo",
    "PaymentPlatformStatus",
    "RequestQueueStatus",
    "ServerStatus",
    "TmsStatus",
    "PaymentDeviceStatus",
    "VirtualTerminalStatus",
    "to_bool",
]

# Section labels used when rendering the status report.
VERSION_INFORMATION = "VERSION_INFORMATION"
PAYMENT_PLATFORM_STATUS = "PAYMENT_PLATFORM_STATUS"
REQUEST_QUEUE_STATUS = "REQUEST_QUEUE_STATUS"
CHIPDNA_STATUS = "CHIPDNA_STATUS"
PAYMENT_DEVICE_STATUS = "PAYMENT_DEVICE_STATUS"
TMS_STATUS = "TMS_STATUS"

# Version information parameter keys.
CHIPDNA_APPLICATION_NAME = "CHIPDNA_APPLICATION_NAME"
CHIPDNA_VERSION = "CHIPDNA_VERSION"
CHIPDNA_RELEASE_NAME = "CHIPDNA_RELEASE_NAME"

# Payment platform status.
MACHINE_LOCAL_DATE_TIME = "MachineLocalDateTime"
PAYMENT_PLATFORM_LOCAL_DATE_TIME = "PaymentPlatformLocalDateTime"
PAYMENT_PLATFORM_LOCAL_DATE_TIME_FORMAT = "PaymentPlatformLocalDateTimeFormat"
STATE = "State"

# Request queue status.
CREDIT_REQUEST_COUNT = "CreditRequestCount"
CREDIT_CONFIRM_REQUEST_COUNT = "CreditConfirmRequestCount"
CREDIT_VOID_REQUEST_COUNT = "CreditVoidRequestCount"
DEBIT_REQUEST_COUNT = "DebitRequestCount"
DEBIT_CONFIRM_REQUEST_COUNT = "DebitConfirmRequestCount"
DEBIT_VOID_REQUEST_COUNT = "DebitVoidRequestCount"

# Server status.
IS_PROCESSING_TRANSACTION = "IsProcessingTransaction"
CHIPDNA_SERVER_ISSUE = "ChipDnaServerIssue"

# TMS status.
DAYS_UNTIL_UPDATE_IS_REQUIRED = "DaysUntilConfigUpdateIsRequired"
LAST_CONFIG_UPDATE_DATE_TIME = "LastConfigUpdateDateTime"
REQUIRED_CONFIG_UPDATE_DATE_TIME = "RequiredConfigUpdateDateTime"

DATE_TIME_FORMAT = "yyyyMMddHHmmss"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading decimal integer, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def to_bool(text: str) -> bool:
    """Interpret ``"True"``, ``"true"`` or ``"Y"`` as true; anything else as false."""
    if len(text) > 1 and text in ("True", "true"):
        return True
    return text == "Y"


@dataclass(frozen=True)
class PaymentDeviceAvailabilityErrorInformation:
    """A named availability error and its description."""

    name: str = ""
    value: str = ""

    def __str__(self) -> str:
        return f"Name: {self.name}, Value: {self.value}"


@dataclass(frozen=True)
class VersionInfo:
    """Server application name, version and release name."""

    app_host_name: str = ""
    version: str = ""
    release_name: str = ""

    @classmethod
    def from_mapping(cls, status: Mapping[str, str]) -> VersionInfo:
        return cls(
            app_host_name=status.get(CHIPDNA_APPLICATION_NAME, ""),
            version=status.get(CHIPDNA_VERSION, ""),
            release_name=status.get(CHIPDNA_RELEASE_NAME, ""),
        )

    def __str__(self) -> str:
        if not self.app_host_name:
            return ""
        return (
            f"{VERSION_INFORMATION}: AppHostName: {self.app_host_name}, "
            f"ReleaseName: {self.release_name}, Version: {self.version}"
        )


@dataclass(frozen=True)
class PaymentPlatformStatus:
    """State of the server's connection to the payment platform."""

    state: str = ""
    machine_local_date_time: str = ""
    payment_platform_local_date_time: str = ""
    payment_platform_local_date_time_format: str = ""
    machine_local_date_time_format: str = DATE_TIME_FORMAT

    @classmethod
    def from_mapping(cls, status: Mapping[str, str]) -> PaymentPlatformStatus:
        return cls(
            state=status.get(STATE, ""),
            machine_local_date_time=status.get(MACHINE_LOCAL_DATE_TIME, ""),
            payment_platform_local_date_time=status.get(
                PAYMENT_PLATFORM_LOCAL_DATE_TIME, ""
            ),
            payment_platform_local_date_time_format=status.get(
                PAYMENT_PLATFORM_LOCAL_DATE_TIME_FORMAT, ""
            ),
        )

    def state_token(self) -> PaymentPlatformState:
        """The connection state; raises ValueError if it is not recognised."""
        return parse_token(PaymentPlatformState, self.state)

    def __str__(self) -> str:
        if not self.machine_local_date_time:
            return ""
        return (
            f"{PAYMENT_PLATFORM_STATUS}: MachineLocalDateTime: "
            f"{self.machine_local_date_time}, State: {self.state}, "
            f"PaymentPlatformLocalDateTime: {self.machine_local_date_time}"
        )


@dataclass(frozen=True)
class RequestQueueStatus:
    """Counts of requests queued for the payment platform; -1 when unknown."""

    credit_request_count: int = -1
    credit_void_request_count: int = -1
    credit_confirm_request_count: int = -1
    debit_request_count: int = -1
    debit_confirm_request_count: int = -1
    debit_void_request_count: int = -1

    @classmethod
    def from_mapping(cls, status: Mapping[str, str]) -> RequestQueueStatus:
        # The credit and credit-confirm counts are read crosswise, as the server
        # client always has.
        return cls(
            credit_request_count=_atoi(status.get(CREDIT_CONFIRM_REQUEST_COUNT, "")),
            credit_void_request_count=_atoi(status.get(CREDIT_VOID_REQUEST_COUNT, "")),
            credit_confirm_request_count=_atoi(status.get(CREDIT_REQUEST_COUNT, "")),
            debit_request_count=_atoi(status.get(DEBIT_REQUEST_COUNT, "")),
            debit_confirm_request_count=_atoi(
                status.get(DEBIT_CONFIRM_REQUEST_COUNT, "")
            ),
            debit_void_request_count=_atoi(status.get(DEBIT_VOID_REQUEST_COUNT, "")),
        )

    def total_request_count(self) -> int:
        """Sum of the credit, credit void, credit confirm, debit and debit confirm counts."""
        return (
            self.credit_request_count
            + self.credit_void_request_count
            + self.credit_confirm_request_count
            + self.debit_request_count
            + self.debit_confirm_request_count
        )

    def __str__(self) -> str:
        if self.credit_request_count == -1:
            return ""
        return (
            f"{REQUEST_QUEUE_STATUS}: TotalRequestCount: {self.total_request_count()}"
            f", CreditRequestCount: {self.credit_request_count}"
            f", CreditConfirmRequestCount: {self.credit_confirm_request_count}"
            f", CreditVoidRequestCount: {self.credit_void_request_count}"
            f", DebitRequestCount: {self.debit_request_count}"
            f", DebitConfirmRequestCount: {self.debit_confirm_request_count}"
            f", DebitVoidRequestCount: {self.debit_void_request_count}"
        )


@dataclass(frozen=True)
class ServerStatus:
    """Server status as it bears on transaction processing."""

    processing_transaction_text: str = ""
    chip_dna_server_issue: str = ""

    @property
    def is_processing_transaction(self) -> bool:
        return to_bool(self.processing_transaction_text)

    @classmethod
    def from_mapping(cls, status: Mapping[str, str]) -> ServerStatus:
        return cls(
            processing_transaction_text=status.get(IS_PROCESSING_TRANSACTION, ""),
            chip_dna_server_issue=status.get(CHIPDNA_SERVER_ISSUE, ""),
        )

    def server_issue(self) -> ChipDnaServerIssue:
        """The reported issue; raises ValueError if it is not recognised."""
        return parse_token(ChipDnaServerIssue, self.chip_dna_server_issue)

    def __str__(self) -> str:
        if not self.processing_transaction_text:
            return ""
        return (
            f"{CHIPDNA_STATUS}: IsProcessingTransaction: "
            f"{self.processing_transaction_text}, "
            f"ChipDnaServerIssue: {self.chip_dna_server_issue}"
        )


@dataclass(frozen=True)
class TmsStatus:
    """Information about terminal management configuration updates."""

    DATE_TIME_FORMAT: ClassVar[str] = DATE_TIME_FORMAT

    last_config_update_date_time: str = ""
    days_until_config_update_text: str = "-1"
    required_config_update_date_time: str = ""

    @classmethod
    def from_mapping(cls, status: Mapping[str, str]) -> TmsStatus:
        return cls(
            last_config_update_date_time=status.get(LAST_CONFIG_UPDATE_DATE_TIME, ""),
            days_until_config_update_text=status.get(DAYS_UNTIL_UPDATE_IS_REQUIRED, ""),
            required_config_update_date_time=status.get(
                REQUIRED_CONFIG_UPDATE_DATE_TIME, ""
            ),
        )

    def days_until_config_update_is_required(self) -> int:
        return _atoi(self.days_until_config_update_text)

    def __str__(self) -> str:
        if not self.days_until_config_update_text:
            return ""
        return (
            f"{TMS_STATUS}: {LAST_CONFIG_UPDATE_DATE_TIME}: "
            f"{self.last_config_update_date_time}, "
            f"{DAYS_UNTIL_UPDATE_IS_REQUIRED}: {self.days_until_config_update_text}, "
            f"{REQUIRED_CONFIG_UPDATE_DATE_TIME}: {self.required_config_update_date_time}"
        )


@dataclass(frozen=True)
class PaymentDeviceStatus:
    """Status of one configured payment device."""

    configured_device_id: str = ""
    configured_device_model: str = ""
    available_text: str = ""
    configuration_state: str = ""
    processing_transaction_text: str = ""
    availability_error: str = ""
    availability_error_information: list[PaymentDeviceAvailabilityErrorInformation] = (
        field(default_factory=list)
    )
    battery_percentage: str = ""
    battery_charging_status: str = ""
    battery_status_update_date_time: str = ""
    battery_status_update_date_time_format: str = ""

    @property
    def is_available(self) -> bool:
        return to_bool(self.available_text)

    @property
    def is_processing_transaction(self) -> bool:
        return to_bool(self.processing_transaction_text)

    def configuration_state_token(self) -> PaymentDeviceConfigurationState:
        """The configuration state; raises ValueError if it is not recognised."""
        return parse_token(PaymentDeviceConfigurationState, self.configuration_state)

    def availability_error_token(self) -> PaymentDeviceAvailabilityError:
        """The availability error; raises ValueError if it is not recognised."""
        return parse_token(PaymentDeviceAvailabilityError, self.availability_error)

    def __str__(self) -> str:
        if not self.configured_device_model:
            return ""
        errors = "".join(str(item) for item in self.availability_error_information)
        text = (
            f"{PAYMENT_DEVICE_STATUS}: ConfiguredDeviceModel: "
            f"{self.configured_device_model}"
            f", ConfiguredDeviceId: {self.configured_device_id}"
            f", IsAvailable: {self.available_text}"
            f", AvailabilityError: {self.availability_error}"
            f", AvailabilityErrorInformation: {errors}"
            f", ConfigurationState: {self.configuration_state}"
            f", ProcessingTransaction: {self.processing_transaction_text}"
        )
        if self.battery_percentage:
            text += (
                f", BatteryPercentage: {self.battery_percentage}"
                f", BatteryChargingStatus: {self.battery_charging_status}"
                f", BatteryStatusUpdateDateTime: {self.battery_status_update_date_time}"
                f", BatteryStatusUpdateDateTimeFormat: "
                f"{self.battery_status_update_date_time_format}"
            )
        return text


@dataclass(frozen=True)
class VirtualTerminalStatus:
    """A virtual terminal and whether it is enabled."""

    virtual_terminal_id: str = ""
    enabled: bool = False

    @classmethod
    def from_strings(cls, virtual_terminal_id: str, enabled: str) -> VirtualTerminalStatus:
        return cls(virtual_terminal_id=virtual_terminal_id, enabled=to_bool(enabled))

    def __str__(self) -> str:
        flag = "true" if self.enabled else "false"
        return f"VirtualTerminalId: {self.virtual_terminal_id}, VirtualTerminalEnabled: {flag}"