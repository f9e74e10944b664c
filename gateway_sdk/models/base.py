"""Generic construction of typed records from decoded gateway payloads.

Gateway responses are plain JSON: string-keyed mappings whose keys follow the
record attribute names (lowercase, underscore separated). Building a record is
split in two stages:

- ``construct`` maps one payload onto a record's slot table. Keys with no
  matching slot are dropped, missing or ``null`` keys take the slot default.
- ``normalize`` handles the payload's shape (envelope key, list of payloads)
  and applies an optional resource-specific ``post`` step to each record.
"""

from collections.abc import Callable, Mapping
from dataclasses import MISSING, fields
from enum import Enum
from typing import Any, TypeVar

from gateway_sdk.exceptions import MalformedPayloadError

R = TypeVar("R")

_SLOT_TABLES: dict[type, dict[str, Callable[[], Any]]] = {}


def slots(record_type: type) -> dict[str, Callable[[], Any]]:
    """Get the slot table of a record type: attribute name -> default factory.

    Parameters
    ----------
    record_type : type
        A dataclass whose fields all declare a default.

    Returns
    -------
    dict[str, Callable[[], Any]]
        One zero-argument factory per attribute, in declaration order.
    """
    table = _SLOT_TABLES.get(record_type)
    if table is None:
        table = {}
        for slot in fields(record_type):
            if slot.default_factory is not MISSING:
                table[slot.name] = slot.default_factory
            elif slot.default is not MISSING:
                table[slot.name] = _constant(slot.default)
            else:
                raise TypeError(f"{record_type.__name__}.{slot.name} has no default")
        _SLOT_TABLES[record_type] = table
    return table


def _constant(value: Any) -> Callable[[], Any]:
    return lambda: value


def field_name(key: Any) -> str | None:
    """Resolve a payload key (string or enum member) to an attribute name."""
    if isinstance(key, Enum):
        key = key.value
    return key if isinstance(key, str) else None


def construct(record_type: type[R], payload: Mapping[Any, Any] | R) -> R:
    """Build one record from a single payload mapping.

    An instance of ``record_type`` is returned as-is. Values are copied
    without coercion.
    """
    if isinstance(payload, record_type):
        return payload

    provided: dict[str, Any] = {}
    for key, value in payload.items():
        name = field_name(key)
        if name is None or value is None:
            continue
        provided[name] = value

    values = {}
    for name, default in slots(record_type).items():
        if name in provided:
            values[name] = provided[name]
        else:
            values[name] = default()
    return record_type(**values)


def normalize(
    raw: Any,
    record_type: type[R],
    *,
    envelope: str | None = None,
    post: Callable[[R], R] | None = None,
) -> R | list[R]:
    """Normalize a payload, or a list of payloads, into records.

    Parameters
    ----------
    raw : Any
        A mapping, a list or tuple of mappings, or an existing record. Either
        may be wrapped as ``{envelope: ...}``.
    record_type : type
        Record dataclass to build.
    envelope : str | None
        Wrapper key the gateway nests the resource under in some responses.
    post : Callable | None
        Resource-specific step applied to every constructed record.

    Returns
    -------
    R | list[R]
        A single record for a single payload, a list (same order and length)
        for a sequence.

    Raises
    ------
    MalformedPayloadError
        If ``raw`` (or a list element, or an envelope value) is not a
        mapping or record.
    """
    if isinstance(raw, (list, tuple)):
        return [
            _normalize_one(item, record_type, envelope=envelope, post=post)
            for item in raw
        ]
    return _normalize_one(raw, record_type, envelope=envelope, post=post)


def _normalize_one(
    raw: Any,
    record_type: type[R],
    *,
    envelope: str | None,
    post: Callable[[R], R] | None,
) -> R:
    if isinstance(raw, Mapping):
        if envelope is not None and envelope in raw:
            return _unwrap(raw[envelope], record_type, envelope=envelope, post=post)
        record = construct(record_type, raw)
    elif isinstance(raw, record_type):
        record = raw
    else:
        raise MalformedPayloadError(record_type.__name__, raw)
    return post(record) if post is not None else record


def _unwrap(
    inner: Any,
    record_type: type[R],
    *,
    envelope: str,
    post: Callable[[R], R] | None,
) -> R | list[R]:
    # The envelope may wrap one payload or the whole result list.
    if isinstance(inner, (Mapping, list, tuple, record_type)):
        return normalize(inner, record_type, envelope=envelope, post=post)
    raise MalformedPayloadError(record_type.__name__, inner)


def normalize_list(raw: Any, record_type: type[R]) -> list[R]:
    """Build a list of records from a raw list of payloads.

    ``None`` and an empty list both give ``[]``; a lone mapping is treated as
    a one-element list.
    """
    if raw is None:
        return []
    if isinstance(raw, (Mapping, record_type)):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        raise MalformedPayloadError(record_type.__name__, raw)

    records = []
    for item in raw:
        if not isinstance(item, (Mapping, record_type)):
            raise MalformedPayloadError(record_type.__name__, item)
        records.append(construct(record_type, item))
    return records
