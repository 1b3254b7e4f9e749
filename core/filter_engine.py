"""
FILE: core/filter_engine.py
----------------------------
Pure selection and grouping over student records.
Nothing here mutates the input sequence or the records in it.
"""

from typing import Any, Sequence

from Schemas.filters import FilterCriteria
from Schemas.student import StudentRecord


def _matches(student: StudentRecord, constraints: dict[str, Any]) -> bool:
    return all(getattr(student, name) == value for name, value in constraints.items())


def filter_students(
    students: Sequence[StudentRecord],
    criteria: FilterCriteria,
) -> list[StudentRecord]:
    """
    Keeps each student that matches every constrained field exactly.
    Unconstrained fields impose no condition; order is preserved.
    """
    constraints = criteria.constrained_fields()
    if not constraints:
        return list(students)
    return [s for s in students if _matches(s, constraints)]


def _check_field(field: str) -> None:
    if field not in StudentRecord.model_fields:
        raise ValueError(
            f"Unknown student field '{field}'. "
            f"Available fields are: {list(StudentRecord.model_fields)}."
        )


def group_by(
    students: Sequence[StudentRecord],
    field: str,
) -> dict[Any, list[StudentRecord]]:
    """Groups students by a field value, groups in first-appearance order."""
    _check_field(field)
    groups: dict[Any, list[StudentRecord]] = {}
    for student in students:
        groups.setdefault(getattr(student, field), []).append(student)
    return groups


def extract(students: Sequence[StudentRecord], field: str) -> list[float]:
    """One numeric column across the students, in input order."""
    _check_field(field)
    return [float(getattr(student, field)) for student in students]
