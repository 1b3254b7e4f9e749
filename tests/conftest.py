from typing import Callable

import pytest

from Schemas.student import StudentRecord
from constants.loader import REQUIRED_COLUMNS


BASE_ROW: dict[str, str] = {
    "school": "GP", "sex": "F", "age": "17", "address": "U", "famsize": "GT3", "Pstatus": "T",
    "Medu": "2", "Fedu": "2", "Mjob": "other", "Fjob": "services", "reason": "course",
    "guardian": "mother", "traveltime": "1", "studytime": "2", "failures": "0",
    "schoolsup": "no", "famsup": "yes", "paid": "no", "activities": "yes", "nursery": "yes",
    "higher": "yes", "internet": "yes", "romantic": "no",
    "famrel": "4", "freetime": "3", "goout": "3", "Dalc": "1", "Walc": "1", "health": "3",
    "absences": "4", "G1": "10", "G2": "10", "G3": "10",
}


def _to_text(rows: list[dict[str, str]], quoted: bool = False) -> str:
    wrap = (lambda v: f'"{v}"') if quoted else (lambda v: v)
    lines = [";".join(wrap(col) for col in REQUIRED_COLUMNS)]
    for row in rows:
        lines.append(";".join(wrap(str(row[col])) for col in REQUIRED_COLUMNS))
    return "\n".join(lines) + "\n"


@pytest.fixture
def raw_row() -> Callable[..., dict[str, str]]:
    """Raw CSV row (all strings) with per-test overrides."""
    def _make(**overrides) -> dict[str, str]:
        row = dict(BASE_ROW)
        row.update({k: str(v) for k, v in overrides.items()})
        return row
    return _make


@pytest.fixture
def csv_text() -> Callable[..., str]:
    """Builds semicolon-delimited dataset text from raw rows."""
    return _to_text


@pytest.fixture
def make_student() -> Callable[..., StudentRecord]:
    """StudentRecord with sensible defaults; keyword overrides use parsed types."""
    def _make(id: int = 1, **overrides) -> StudentRecord:
        fields: dict[str, object] = {
            "id": id,
            "school": "GP", "sex": "F", "age": 17, "address": "U", "famsize": "GT3",
            "Pstatus": "T", "Medu": 2, "Fedu": 2, "Mjob": "other", "Fjob": "services",
            "reason": "course", "guardian": "mother", "traveltime": 1, "studytime": 2,
            "failures": 0, "schoolsup": False, "famsup": True, "paid": False,
            "activities": True, "nursery": True, "higher": True, "internet": True,
            "romantic": False, "famrel": 4, "freetime": 3, "goout": 3, "Dalc": 1,
            "Walc": 1, "health": 3, "absences": 4, "G1": 10, "G2": 10, "G3": 10,
        }
        fields.update(overrides)
        return StudentRecord(**fields)
    return _make


@pytest.fixture
def mixed_students(make_student) -> list[StudentRecord]:
    """Twelve students covering every filterable combination at least once."""
    combos = [
        ("F", "GP", "U", True), ("M", "GP", "U", True), ("F", "MS", "R", False),
        ("M", "MS", "R", True), ("F", "GP", "R", False), ("M", "GP", "R", True),
        ("F", "MS", "U", True), ("M", "MS", "U", False), ("F", "GP", "U", False),
        ("M", "GP", "U", True), ("F", "MS", "R", True), ("M", "MS", "U", True),
    ]
    return [
        make_student(id=i + 1, sex=sex, school=school, address=address, higher=higher, G3=5 + i)
        for i, (sex, school, address, higher) in enumerate(combos)
    ]
