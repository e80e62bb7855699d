"""Project exam records into dense chart dataset rows."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .field_keys import FieldKey
from .vocabulary import TIME_AXIS_KEY

DatasetRow = dict[str, object]


class DataIntegrityError(ValueError):
    """Raised when a record cannot be placed on the time axis.

    Attributes:
        index: Position of the offending record in the input sequence.
        time_axis_key: The field that was missing.
    """

    def __init__(self, index: int, time_axis_key: str) -> None:
        self.index = index
        self.time_axis_key = time_axis_key
        super().__init__(f"Exam record #{index} is missing the {time_axis_key!r} field.")


def project_rows(
    records: Sequence[Mapping[str, object]],
    field_keys: Sequence[FieldKey],
    *,
    time_axis_key: str = TIME_AXIS_KEY,
) -> tuple[DatasetRow, ...]:
    """Project records into rows restricted to the resolved field keys.

    Rows follow the input order; callers pass records already sorted by
    sitting. A value absent from a record is carried as None so sparse
    series stay aligned with the time axis.

    Args:
        records: Exam records in chronological order.
        field_keys: Resolved field keys (dimension order).
        time_axis_key: Field holding the exam sitting identifier.

    Returns:
        One row per record, each holding the time-axis value plus every field key.

    Raises:
        DataIntegrityError: When any record lacks the time-axis field. No
            partial projection is returned.
    """

    rows: list[DatasetRow] = []
    for index, record in enumerate(records):
        sitting = record.get(time_axis_key)
        if sitting is None:
            raise DataIntegrityError(index, time_axis_key)
        row: DatasetRow = {time_axis_key: sitting}
        for field_key in field_keys:
            row[field_key.key] = _numeric_or_none(record.get(field_key.key))
        rows.append(row)
    return tuple(rows)


def _numeric_or_none(value: object) -> object:
    """Normalize blank cells to None and leave other values untouched."""

    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value
