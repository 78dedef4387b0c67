"""Key/value parameters sent to and received from the payment server."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

__all__ = ["Parameter", "ParameterSet"]


@dataclass(frozen=True)
class Parameter:
    """A single key/value pair."""

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


class ParameterSet:
    """An ordered-by-key collection of string parameters.

    Values given as integers are stored in their decimal string form.
    """

    def __init__(
        self,
        items: Mapping[str, str | int] | Iterable[tuple[str, str | int]] | None = None,
    ) -> None:
        self._values: dict[str, str] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.add(key, value)

    def add(self, key: str, value: str | int) -> None:
        """Set ``key`` to ``value``, replacing any earlier value."""
        self._values[key] = str(value)

    def remove(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._values.pop(key, None)

    def get_value(self, key: str) -> str:
        """Return the value stored for ``key``; raise KeyError if absent."""
        return self._values[key]

    def to_dict(self) -> dict[str, str]:
        """Return a copy of the parameters, sorted by key."""
        return {key: self._values[key] for key in sorted(self._values)}

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[Parameter]:
        for key in sorted(self._values):
            yield Parameter(key, self._values[key])

    def __iadd__(self, other: ParameterSet) -> ParameterSet:
        for parameter in other:
            self.add(parameter.key, parameter.value)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return self._values == other._values

    def __str__(self) -> str:
        return ", ".join(str(parameter) for parameter in self)

    def __repr__(self) -> str:
        return f"ParameterSet({self.to_dict()!r})"