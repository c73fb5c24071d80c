"""Linear-scan helpers shared by the resource services."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar


class _Identified(Protocol):
    id: int


RecordT = TypeVar("RecordT", bound=_Identified)


def find(records: Sequence[RecordT], record_id: int | None) -> RecordT | None:
    """Return the record with ``record_id`` or None."""
    for record in records:
        if record.id == record_id:
            return record
    return None


def find_index(records: Sequence[RecordT], record_id: int | None) -> int | None:
    """Return the position of the record with ``record_id`` or None."""
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    return None
