"""
FILE: Tools/data_store.py
--------------------------
Session store shared by the presentation layer: the loaded students
plus the current filter. Consumers receive a StudyDataStore instance
explicitly; there is no module-level singleton.

The dataset is loaded once and never mutated. The filtered subset is
recomputed on every access, so it always reflects the current filter.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Sequence

from Schemas.filters import FilterCriteria
from Schemas.student import StudentRecord
from constants.loader import DEFAULT_DATA_PATH
from core.filter_engine import filter_students
from core.loader_engine import load_students

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load student data. Please refresh the page."


class StudyDataStore:
    """Loaded dataset + current filter, with explicit update functions."""

    def __init__(
        self,
        path: str | Path = DEFAULT_DATA_PATH,
        loader: Callable[[str | Path], Sequence[StudentRecord]] = load_students,
    ) -> None:
        self.path = path
        self._loader = loader
        self._students: tuple[StudentRecord, ...] = ()
        self._filters = FilterCriteria()
        self.is_loading = False
        self.is_loaded  = False
        self.error: str | None = None

    # ── Loading ──
    def load(self) -> tuple[StudentRecord, ...]:
        """
        Loads the dataset. On failure the user-facing message is kept in
        `error` and the original exception is re-raised to the caller.
        """
        self.is_loading = True
        try:
            students = tuple(self._loader(self.path))
        except Exception as e:
            logger.error("Failed to load student data: %s", e)
            self.error = LOAD_ERROR_MESSAGE
            raise
        finally:
            self.is_loading = False

        self._students = students
        self.is_loaded = True
        self.error = None
        return students

    def reload(self) -> tuple[StudentRecord, ...]:
        """Manual retry after a failed load."""
        return self.load()

    # ── Data access ──
    @property
    def students(self) -> tuple[StudentRecord, ...]:
        return self._students

    @property
    def filters(self) -> FilterCriteria:
        return self._filters

    @property
    def filtered_students(self) -> list[StudentRecord]:
        return filter_students(self._students, self._filters)

    @property
    def is_empty_result(self) -> bool:
        """Loaded fine but the current filter matches nobody."""
        return self.is_loaded and self.error is None and not self.filtered_students

    # ── Filter updates ──
    def update_filter(self, field: str, value: Any) -> FilterCriteria:
        self._filters = self._filters.with_value(field, value)
        logger.info("Filter '%s' set to %r", field, value)
        return self._filters

    def set_filters(self, criteria: FilterCriteria) -> FilterCriteria:
        self._filters = criteria
        return self._filters

    def reset_filters(self) -> FilterCriteria:
        self._filters = FilterCriteria()
        logger.info("Filters reset")
        return self._filters
