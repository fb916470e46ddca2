"""Document: an ordered, named-field record for a single search result."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import ItemsView, Iterator

    from solr_response.types import Record, Value


class Document:
    """A single result document with fields kept in assignment order.

    Fields can be read and written either as items or as attributes:

        doc = Document()
        doc["id"] = "42"
        doc.title = "Only One"
        assert list(doc) == ["id", "title"]
        assert doc.title == doc["title"]

    Reading an unknown field as an attribute raises ``AttributeError``; use
    ``get()`` for a soft lookup.
    """

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        object.__setattr__(self, "_fields", {})

    # --- Field assignment / lookup ---

    def __setitem__(self, name: str, value: Value) -> None:
        self._fields[name] = value

    def __getitem__(self, name: str) -> Value:
        return self._fields[name]

    def __delitem__(self, name: str) -> None:
        del self._fields[name]

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__slots__:
            raise AttributeError(f"{name!r} is reserved")
        self._fields[name] = value

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, i.e. for field names.
        fields = object.__getattribute__(self, "_fields")
        try:
            return fields[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!s} has no field {name!r}"
            ) from None

    def __delattr__(self, name: str) -> None:
        try:
            del self._fields[name]
        except KeyError:
            raise AttributeError(name) from None

    def get(self, name: str, default: Value = None) -> Value:
        """Return the value of *name*, or *default* when unset."""
        return self._fields.get(name, default)

    # --- Introspection ---

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def items(self) -> ItemsView[str, Value]:
        return self._fields.items()

    @property
    def field_names(self) -> list[str]:
        return list(self._fields)

    def to_dict(self) -> Record:
        """Return a shallow copy of the fields as a plain dict."""
        return dict(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return list(self._fields.items()) == list(other._fields.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._fields.items())
        return f"{type(self).__name__}({inner})"
