"""Shared type aliases for decoded Solr payloads."""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable

type Value = None | bool | int | float | str | list[Value] | dict[str, Value]
type Record = dict[str, Value]

WireFormat = Literal["auto", "json", "phps"]
WIRE_FORMATS: tuple[WireFormat, ...] = ("auto", "json", "phps")


@runtime_checkable
class FieldSink(Protocol):
    """Anything result fields can be assigned onto by name.

    Both plain ``dict`` records and ``Document`` satisfy this.
    """

    def __setitem__(self, name: str, value: Value, /) -> None: ...
