"""Card hashes reported with card details and finished transactions."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

__all__ = ["CardHash", "parse_card_hashes"]

_OUTER_TAG = "ArrayOfCardHash"
_CARD_HASH_TAG = "CardHash"
_SOURCE_TAG = "Source"
_VALUE_TAG = "Value"
_SCOPE_TAG = "Scope"


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
class CardHash:
    """A generated card hash together with where and how widely it applies."""

    scope: str
    source: str
    value: str

    def __str__(self) -> str:
        return f"Source: {self.source} Scope:{self.scope} Value: {self.value}"


def parse_card_hashes(xml: str) -> list[CardHash]:
    """Parse an ``ArrayOfCardHash`` document; return no hashes if it is unreadable."""
    try:
        root = ET.fromstring(xml)
    except ET.ParseError:
        return []
    if _local(root.tag) != _OUTER_TAG:
        return []
    return [
        CardHash(
            scope=_child_text(node, _SCOPE_TAG),
            source=_child_text(node, _SOURCE_TAG),
            value=_child_text(node, _VALUE_TAG),
        )
        for node in _children(root, _CARD_HASH_TAG)
    ]