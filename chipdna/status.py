"""The payment server status report and the XML it is parsed from."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .status_parts import (
    CHIPDNA_SERVER_ISSUE,
    CREDIT_CONFIRM_REQUEST_COUNT,
    CREDIT_REQUEST_COUNT,
    CREDIT_VOID_REQUEST_COUNT,
    DAYS_UNTIL_UPDATE_IS_REQUIRED,
    DEBIT_CONFIRM_REQUEST_COUNT,
    DEBIT_REQUEST_COUNT,
    DEBIT_VOID_REQUEST_COUNT,
    IS_PROCESSING_TRANSACTION,
    LAST_CONFIG_UPDATE_DATE_TIME,
    MACHINE_LOCAL_DATE_TIME,
    PAYMENT_PLATFORM_LOCAL_DATE_TIME,
    PAYMENT_PLATFORM_LOCAL_DATE_TIME_FORMAT,
    REQUIRED_CONFIG_UPDATE_DATE_TIME,
    STATE,
    PaymentDeviceAvailabilityErrorInformation,
    PaymentDeviceStatus,
    PaymentPlatformStatus,
    RequestQueueStatus,
    ServerStatus,
    TmsStatus,
    VersionInfo,
    VirtualTerminalStatus,
)

__all__ = ["ChipDnaStatus", "parse_availability_error_information"]

_PARAMETER_ARRAY = "ArrayOfParameter"
_PARAMETER = "Parameter"
_KEY = "Key"
_VALUE = "Value"
_NAME = "Name"

_DEVICE_ARRAY = "ArrayOfPaymentDeviceStatus"
_DEVICE = "PaymentDeviceStatus"
_DEVICE_ID = "ConfiguredDeviceId"
_DEVICE_MODEL = "ConfiguredDeviceModel"
_DEVICE_STATE = "ConfigurationState"
_PROCESSING_TRANSACTION = "ProcessingTransaction"
_IS_AVAILABLE = "IsAvailable"
_AVAILABILITY_ERROR = "AvailabilityError"
_AVAILABILITY_ERROR_LIST = "AvailabilityErrorInformation"
_AVAILABILITY_ERROR_ITEM = "PaymentDeviceAvailabilityErrorInformation"
_AVAILABILITY_ERROR_ARRAY = "ArrayOfPaymentDeviceAvailabilityErrorInformation"
_BATTERY_PERCENTAGE = "BatteryPercentage"
_BATTERY_CHARGING_STATUS = "BatteryChargingStatus"
_BATTERY_UPDATE = "BatteryStatusUpdateDateTime"
_BATTERY_UPDATE_FORMAT = "BatteryStatusUpdateDateTimeFormat"

_PLATFORM = "PaymentPlatformStatus"
_QUEUE = "RequestQueueStatus"
_SERVER = "ServerStatus"
_TMS = "TmsStatus"

_VIRTUAL_TERMINAL_ARRAY = "ArrayOfVirtualTerminalStatus"
_VIRTUAL_TERMINAL = "VirtualTerminalStatus"
_VIRTUAL_TERMINAL_ID = "VirtualTerminalId"
_VIRTUAL_TERMINAL_ENABLED = "VirtualTerminalEnabled"


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _parse(xml: str | None) -> ET.Element | None:
    if not xml:
        return None
    try:
        return ET.fromstring(xml)
    except ET.ParseError:
        return None


def _section(root: ET.Element, tag: str) -> ET.Element | None:
    return root if _local(root.tag) == tag else None


def _children(node: ET.Element | None, tag: str) -> list[ET.Element]:
    if node is None:
        return []
    return [child for child in node if _local(child.tag) == tag]


def _child(node: ET.Element | None, tag: str) -> ET.Element | None:
    found = _children(node, tag)
    return found[0] if found else None


def _child_text(node: ET.Element | None, tag: str) -> str:
    found = _child(node, tag)
    if found is None:
        return ""
    text = found.text or ""
    return text if text.strip() else ""


def _error_information(node: ET.Element | None) -> list[PaymentDeviceAvailabilityErrorInformation]:
    return [
        PaymentDeviceAvailabilityErrorInformation(
            name=_child_text(item, _NAME), value=_child_text(item, _VALUE)
        )
        for item in _children(node, _AVAILABILITY_ERROR_ITEM)
    ]


def _device(node: ET.Element) -> PaymentDeviceStatus:
    return PaymentDeviceStatus(
        configured_device_id=_child_text(node, _DEVICE_ID),
        configured_device_model=_child_text(node, _DEVICE_MODEL),
        available_text=_child_text(node, _IS_AVAILABLE),
        configuration_state=_child_text(node, _DEVICE_STATE),
        processing_transaction_text=_child_text(node, _PROCESSING_TRANSACTION),
        availability_error=_child_text(node, _AVAILABILITY_ERROR),
        availability_error_information=_error_information(
            _child(node, _AVAILABILITY_ERROR_LIST)
        ),
        battery_percentage=_child_text(node, _BATTERY_PERCENTAGE),
        battery_charging_status=_child_text(node, _BATTERY_CHARGING_STATUS),
        battery_status_update_date_time=_child_text(node, _BATTERY_UPDATE),
        battery_status_update_date_time_format=_child_text(node, _BATTERY_UPDATE_FORMAT),
    )


@dataclass
class ChipDnaStatus:
    """The parsed status report of the payment server."""

    version_info: VersionInfo = field(default_factory=VersionInfo)
    payment_device_status: list[PaymentDeviceStatus] = field(default_factory=list)
    payment_platform_status: PaymentPlatformStatus = field(
        default_factory=PaymentPlatformStatus
    )
    server_status: ServerStatus = field(default_factory=ServerStatus)
    request_queue_status: RequestQueueStatus = field(default_factory=RequestQueueStatus)
    tms_status: TmsStatus = field(default_factory=TmsStatus)
    virtual_terminal_status: list[VirtualTerminalStatus] = field(default_factory=list)

    @classmethod
    def from_xml(
        cls,
        version_xml: str | None = None,
        device_xml: str | None = None,
        platform_xml: str | None = None,
        server_xml: str | None = None,
        tms_xml: str | None = None,
        virtual_terminal_xml: str | None = None,
        queue_xml: str | None = None,
    ) -> ChipDnaStatus:
        """Build the report from the XML of each status section.

        ``queue_xml`` of None means the report has no request queue section.
        Sections that cannot be read keep their default values.
        """
        result = cls()
        status: dict[str, str] = {}

        root = _parse(version_xml)
        if root is not None:
            for param in _children(_section(root, _PARAMETER_ARRAY), _PARAMETER):
                status[_child_text(param, _KEY)] = _child_text(param, _VALUE)
            result.version_info = VersionInfo.from_mapping(status)

        root = _parse(device_xml)
        if root is not None:
            result.payment_device_status = [
                _device(node) for node in _children(_section(root, _DEVICE_ARRAY), _DEVICE)
            ]

        root = _parse(platform_xml)
        if root is not None:
            node = _section(root, _PLATFORM)
            for key in (
                MACHINE_LOCAL_DATE_TIME,
                PAYMENT_PLATFORM_LOCAL_DATE_TIME,
                PAYMENT_PLATFORM_LOCAL_DATE_TIME_FORMAT,
                STATE,
            ):
                status[key] = _child_text(node, key)
            result.payment_platform_status = PaymentPlatformStatus.from_mapping(status)

        if queue_xml is not None:
            root = _parse(queue_xml)
            if root is not None:
                node = _section(root, _QUEUE)
                # The credit request count is read from the element's own value,
                # which is always empty for an element node.
                status[CREDIT_REQUEST_COUNT] = ""
                for key in (
                    CREDIT_CONFIRM_REQUEST_COUNT,
                    CREDIT_VOID_REQUEST_COUNT,
                    DEBIT_REQUEST_COUNT,
                    DEBIT_CONFIRM_REQUEST_COUNT,
                    DEBIT_VOID_REQUEST_COUNT,
                ):
                    status[key] = _child_text(node, key)
            result.request_queue_status = RequestQueueStatus.from_mapping(status)

        root = _parse(server_xml)
        if root is not None:
            node = _section(root, _SERVER)
            for key in (IS_PROCESSING_TRANSACTION, CHIPDNA_SERVER_ISSUE):
                status[key] = _child_text(node, key)
        result.server_status = ServerStatus.from_mapping(status)

        root = _parse(tms_xml)
        if root is not None:
            node = _section(root, _TMS)
            for key in (
                DAYS_UNTIL_UPDATE_IS_REQUIRED,
                LAST_CONFIG_UPDATE_DATE_TIME,
                REQUIRED_CONFIG_UPDATE_DATE_TIME,
            ):
                status[key] = _child_text(node, key)
        result.tms_status = TmsStatus.from_mapping(status)

        root = _parse(virtual_terminal_xml)
        if root is not None:
            result.virtual_terminal_status = [
                VirtualTerminalStatus.from_strings(
                    _child_text(node, _VIRTUAL_TERMINAL_ID),
                    _child_text(node, _VIRTUAL_TERMINAL_ENABLED),
                )
                for node in _children(
                    _section(root, _VIRTUAL_TERMINAL_ARRAY), _VIRTUAL_TERMINAL
                )
            ]

        return result

    def __str__(self) -> str:
        sections = [
            str(self.version_info),
            str(self.server_status),
            "".join(str(device) for device in self.payment_device_status),
            str(self.payment_platform_status),
            str(self.request_queue_status),
            str(self.tms_status),
        ]
        parts = ["----------\n  ChipDNA status:\n"]
        parts.extend(f"{section}\n" for section in sections if section)
        if self.virtual_terminal_status:
            parts.append(" Virtual Terminals:\n")
            parts.extend(f" \t{terminal}\n" for terminal in self.virtual_terminal_status)
        parts.append("\n----------\n")
        return "".join(parts)


def parse_availability_error_information(
    xml: str,
) -> list[PaymentDeviceAvailabilityErrorInformation]:
    """Parse an availability error information document; unreadable input gives []."""
    root = _parse(xml)
    if root is None:
        return []
    return _error_information(_section(root, _AVAILABILITY_ERROR_ARRAY))