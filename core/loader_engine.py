"""
FILE: core/loader_engine.py
----------------------------
Turns the semicolon-delimited student dataset into StudentRecord values.

  1. Read the raw text with pandas (every cell kept as a string)
  2. Clean each field: strip whitespace and surrounding quote characters
  3. Coerce integers with per-field fallback defaults, yes/no to bool
  4. Validate the row against StudentRecord. A failing row is dropped
     with a warning, never a fatal error

Only file-level problems (missing file, empty file, missing columns)
raise DatasetLoadError.
"""

import io
import logging
import re
from pathlib import Path
from typing import Iterable, Mapping

import pandas as pd
from pydantic import ValidationError

from Schemas.student import StudentRecord
from constants.loader import (
    BOOLEAN_FIELDS,
    CATEGORICAL_FIELDS,
    DEFAULT_DATA_PATH,
    DEFAULT_INT,
    DELIMITER,
    FIELD_DEFAULTS,
    INTEGER_FIELDS,
    QUOTE_CHAR,
    REQUIRED_COLUMNS,
    YES_TOKEN,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^[+-]?\d+")


class DatasetLoadError(RuntimeError):
    """The dataset file could not be read or is not a student dataset."""


# ─────────────────────────────────────────────
# FIELD HELPERS
# ─────────────────────────────────────────────

def _clean(value: object) -> str:
    """Strips whitespace and one leading and one trailing quote character."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    text = str(value).strip()
    if text.startswith(QUOTE_CHAR):
        text = text[1:]
    if text.endswith(QUOTE_CHAR):
        text = text[:-1]
    return text


def _parse_int(value: str, default: int) -> int:
    """
    Reads the leading integer of a token ("7", "+3", "3.0" → 3).
    Returns the default when no integer can be read or the integer is 0,
    so a zero on a 1-based scale becomes that field's default.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return default
    return int(match.group()) or default


def _parse_bool(value: str) -> bool:
    return value == YES_TOKEN


# ─────────────────────────────────────────────
# ROW PARSING
# ─────────────────────────────────────────────

def parse_student_row(raw: Mapping[str, object], index: int) -> StudentRecord | None:
    """
    Parses one raw row (column name → cell text) into a StudentRecord.
    `index` is the 0-based row position; the record id is index + 1.
    Returns None and logs a warning if the row cannot be parsed.
    """
    try:
        fields: dict[str, object] = {"id": index + 1}
        for name in CATEGORICAL_FIELDS:
            fields[name] = _clean(raw.get(name))
        for name in INTEGER_FIELDS:
            fields[name] = _parse_int(_clean(raw.get(name)), FIELD_DEFAULTS.get(name, DEFAULT_INT))
        for name in BOOLEAN_FIELDS:
            fields[name] = _parse_bool(_clean(raw.get(name)))
        return StudentRecord(**fields)
    except (ValidationError, ValueError, TypeError) as e:
        logger.warning("Failed to parse student at index %d: %s", index, e)
        return None


def parse_rows(rows: Iterable[Mapping[str, object]]) -> list[StudentRecord]:
    """Parses already-split rows, keeping input order and dropping failures."""
    students: list[StudentRecord] = []
    for index, row in enumerate(rows):
        student = parse_student_row(row, index)
        if student is not None:
            students.append(student)
    return students


# ─────────────────────────────────────────────
# TEXT / FILE LOADING
# ─────────────────────────────────────────────

def _report_bad_line(line: list[str]) -> None:
    # Returning None tells pandas to skip the line
    logger.warning("Skipping malformed line with %d field(s): %s", len(line), DELIMITER.join(line))
    return None


def _read_frame(text: str) -> pd.DataFrame:
    try:
        df = pd.read_csv(
            io.StringIO(text),
            sep=DELIMITER,
            quotechar=QUOTE_CHAR,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=_report_bad_line,
        )
    except pd.errors.EmptyDataError as e:
        raise DatasetLoadError("The dataset has no data.") from e
    except pd.errors.ParserError as e:
        raise DatasetLoadError(f"The dataset could not be parsed: {e}") from e

    df.columns = [_clean(col) for col in df.columns]
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise DatasetLoadError(
            f"The dataset header is missing required column(s): {missing}."
        )
    return df


def parse_students(text: str) -> list[StudentRecord]:
    """
    Parses semicolon-delimited text with a header row.
    Output preserves row order; unparseable rows are dropped.
    """
    df = _read_frame(text)
    students = parse_rows(df.to_dict(orient="records"))

    dropped = len(df) - len(students)
    if dropped:
        logger.warning("Dropped %d of %d row(s) that failed to parse.", dropped, len(df))
    return students


def load_students(path: str | Path = DEFAULT_DATA_PATH) -> list[StudentRecord]:
    """
    Reads and parses the dataset file once.
    Raises DatasetLoadError if the file is missing, unreadable or not a
    student dataset. No retry is attempted.
    """
    path = Path(path)
    if not path.exists():
        raise DatasetLoadError(f"Dataset not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetLoadError(f"Could not read dataset at '{path}': {e}") from e

    students = parse_students(text)
    logger.info("Loaded %d student record(s) from %s", len(students), path)
    return students


def records_to_frame(students: Iterable[StudentRecord]) -> pd.DataFrame:
    """Tabular copy of the records, one column per field."""
    columns = ["id", *REQUIRED_COLUMNS]
    rows = [student.model_dump() for student in students]
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows)[columns]
