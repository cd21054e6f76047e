"""CSV export of record models."""

import csv
import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from pydantic import BaseModel  # type: ignore

logger = logging.getLogger(__name__)


def field_names(record_type: Type[BaseModel]) -> List[str]:
    """Serialisable field names of a model class, in declaration order."""
    return [name for name, info in record_type.model_fields.items() if not info.exclude]


def render_value(value: Any) -> str:
    """Strings verbatim, anything else in its JSON text form."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def get_fields(record: BaseModel) -> List[str]:
    """Render a record as a row matching ``field_names(type(record))``."""
    data = record.model_dump(mode="json")
    return [render_value(data[name]) for name in field_names(type(record))]


def write_into_csv(csv_path: Union[str, Path],
                   records: Sequence[BaseModel],
                   record_type: Optional[Type[BaseModel]] = None) -> int:
    """
    Write a header and one row per record.

    The file is truncated for the header and the rows are appended after
    it. Nothing is rolled back if a write fails midway.

    Args:
        csv_path: Destination file
        records: Records of a single model type
        record_type: Model class, required when ``records`` is empty

    Returns:
        Number of data rows written

    Raises:
        TypeError: If the records are not all of one type
        OSError: If the file cannot be written
    """
    record_type = _resolve_type(records, record_type)
    header = field_names(record_type)
    logger.debug(f"{csv_path}: header {header}")

    _write_rows(csv_path, [header], append=False)
    return append_to_csv(csv_path, records, record_type)


def append_to_csv(csv_path: Union[str, Path],
                  records: Sequence[BaseModel],
                  record_type: Optional[Type[BaseModel]] = None) -> int:
    """Append one row per record to an existing CSV file."""
    if not records:
        return 0

    _resolve_type(records, record_type)
    rows = [get_fields(record) for record in records]
    _write_rows(csv_path, rows, append=True)
    logger.debug(f"{csv_path}: appended {len(rows)} row(s)")
    return len(rows)


def _resolve_type(records: Sequence[BaseModel], record_type: Optional[Type[BaseModel]]) -> Type[BaseModel]:
    if record_type is None:
        if not records:
            raise TypeError("record_type is required when there are no records")
        record_type = type(records[0])

    for record in records:
        if type(record) is not record_type:
            raise TypeError(f"Expected {record_type.__name__} records, got {type(record).__name__}")
    return record_type


def _write_rows(csv_path: Union[str, Path], rows: List[List[str]], append: bool) -> None:
    mode = "a" if append else "w"
    with open(csv_path, mode, newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerows(rows)
