"""
FILE: Schemas/filters.py
-------------------------
Filter criteria applied to the loaded students.
Every field is independently optional: None means "no constraint".
Criteria are immutable: changing one field produces a new object.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


# Token the presentation layer uses for "no constraint"
ALL = "all"


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    sex:     Literal["F", "M"]   | None = None
    school:  Literal["GP", "MS"] | None = None
    address: Literal["U", "R"]   | None = None
    higher:  bool                | None = None   # higher-education aspiration

    @property
    def is_unconstrained(self) -> bool:
        return all(value is None for value in self.model_dump().values())

    def constrained_fields(self) -> dict[str, Any]:
        """Only the fields that impose a condition."""
        return {name: value for name, value in self.model_dump().items() if value is not None}

    def with_value(self, field: str, value: Any) -> "FilterCriteria":
        """
        Returns a copy with one field replaced.
        "all" or None clears the field; "yes"/"no" are accepted for `higher`.
        Raises ValueError for an unknown field or an out-of-domain value.
        """
        if field not in type(self).model_fields:
            raise ValueError(
                f"Unknown filter field '{field}'. "
                f"Available fields are: {list(type(self).model_fields)}."
            )
        if value == ALL:
            value = None
        elif field == "higher" and isinstance(value, str):
            value = {"yes": True, "no": False}.get(value, value)

        data = self.model_dump()
        data[field] = value
        return type(self).model_validate(data)
