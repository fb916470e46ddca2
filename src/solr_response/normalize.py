"""Result-set normalization for decoded Solr responses.

Solr's writers emit every stored field of a result document as a list, even
when the schema says the field is single-valued. After decoding, the
``response.docs`` list is rewritten so that:

- with ``collapse_single_value_arrays``, lists of zero or one element become
  their sole element (or ``None``); longer lists are kept as they are;
- with ``create_documents``, each record is copied field by field into a
  fresh document from ``document_factory``; otherwise the original record is
  updated in place.

Both switches are independent. With both off the structure is not touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from solr_response.document import Document

if TYPE_CHECKING:
    from collections.abc import Callable

    from solr_response.types import FieldSink, Record, Value


def normalize_response_docs(
    data: Record,
    *,
    create_documents: bool = True,
    collapse_single_value_arrays: bool = True,
    document_factory: Callable[[], FieldSink] = Document,
) -> Record:
    """Rewrite ``data["response"]["docs"]`` in place and return *data*.

    Structures without a ``response`` mapping holding a ``docs`` list are
    returned unchanged.
    """
    if not (create_documents or collapse_single_value_arrays):
        return data

    response = data.get("response")
    if not isinstance(response, dict):
        return data
    docs = response.get("docs")
    if not isinstance(docs, list | tuple):
        return data

    response["docs"] = [
        normalize_record(
            record,
            create_documents=create_documents,
            collapse_single_value_arrays=collapse_single_value_arrays,
            document_factory=document_factory,
        )
        if isinstance(record, dict)
        else record
        for record in docs
    ]
    return data


def normalize_record(
    record: Record,
    *,
    create_documents: bool,
    collapse_single_value_arrays: bool,
    document_factory: Callable[[], FieldSink] = Document,
) -> FieldSink:
    """Normalize a single result record.

    The returned object is either a new document or *record* itself.
    """
    target: FieldSink = document_factory() if create_documents else record
    # Snapshot: when target is record, assignment must not disturb iteration.
    for name, value in list(record.items()):
        if collapse_single_value_arrays:
            value = collapse_single_value(value)
        target[name] = value
    return target


def collapse_single_value(value: Value) -> Value:
    """``["x"]`` -> ``"x"``, ``[]`` -> ``None``; anything else unchanged."""
    if isinstance(value, list | tuple) and len(value) <= 1:
        return value[0] if value else None
    return value
