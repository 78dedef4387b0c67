"""Card insertion status of the payment devices."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

__all__ = ["DeviceCardStatus", "CardStatus", "parse_card_status"]

_ARRAY_OF_DEVICE_CARD_STATUS = "ArrayOfDeviceCardStatus"
_DEVICE_CARD_STATUS = "DeviceCardStatus"
_PAYMENT_DEVICE_MODEL = "PaymentDeviceModel"
_PAYMENT_DEVICE_ID = "PaymentDeviceId"
_CARD_INSERTION_STATUS = "CardInsertionStatus"


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(node: ET.Element, tag: str) -> list[ET.Element]:
    return [child for child in node if _local(child.tag) == tag]


def _child_text(node: ET.Element, tag: str) -> str:
    found = _children(node, tag)
    if not found:
        return ""
    text = found[0].text or ""
    return text if text.strip() else ""


@dataclass(frozen=True)
class DeviceCardStatus:
    """Whether a card is inserted in one payment device."""

    payment_device_model: str = ""
    payment_device_id: str = ""
    card_insertion_status: str = ""


@dataclass
class CardStatus:
    """Card insertion status of every reported payment device."""

    device_card_status_list: list[DeviceCardStatus] = field(default_factory=list)

    def __str__(self) -> str:
        lines = ["DeviceCardStatusList:\n"]
        lines.extend(
            f"\tPaymentDeviceModel: {item.payment_device_model}, "
            f"PaymentDeviceId: {item.payment_device_id}, "
            f"CardInsertionStatus: {item.card_insertion_status}\n"
            for item in self.device_card_status_list
        )
        return "".join(lines)


def parse_card_status(xml: str) -> CardStatus:
    """Parse an ``ArrayOfDeviceCardStatus`` document.

    An unreadable document yields a status with no devices.
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError:
        return CardStatus()
    if _local(root.tag) != _ARRAY_OF_DEVICE_CARD_STATUS:
        return CardStatus()
    return CardStatus(
        [
            DeviceCardStatus(
                payment_device_model=_child_text(node, _PAYMENT_DEVICE_MODEL),
                payment_device_id=_child_text(node, _PAYMENT_DEVICE_ID),
                card_insertion_status=_child_text(node, _CARD_INSERTION_STATUS),
            )
            for node in _children(root, _DEVICE_CARD_STATUS)
        ]
    )