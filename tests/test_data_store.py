import logging

import pytest

from Schemas.filters import FilterCriteria
from Tools.data_store import LOAD_ERROR_MESSAGE, StudyDataStore
from core.loader_engine import DatasetLoadError


@pytest.fixture
def store(mixed_students):
    calls = []

    def loader(path):
        calls.append(path)
        return mixed_students

    data_store = StudyDataStore(path="memory.csv", loader=loader)
    data_store.calls = calls
    return data_store


def test_load_populates_students(store, mixed_students):
    students = store.load()

    assert students == tuple(mixed_students)
    assert store.is_loaded and not store.is_loading
    assert store.error is None
    assert store.calls == ["memory.csv"]


def test_failed_load_keeps_message_and_reraises(caplog):
    def loader(path):
        raise DatasetLoadError(f"Dataset not found: {path}")

    data_store = StudyDataStore(path="missing.csv", loader=loader)
    with caplog.at_level(logging.ERROR), pytest.raises(DatasetLoadError):
        data_store.load()

    assert data_store.error == LOAD_ERROR_MESSAGE
    assert not data_store.is_loaded
    assert not data_store.is_loading
    assert data_store.students == ()
    assert "Failed to load student data" in caplog.text


def test_reload_retries_and_clears_error(mixed_students):
    attempts = iter([DatasetLoadError("flaky"), mixed_students])

    def loader(path):
        outcome = next(attempts)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    data_store = StudyDataStore(loader=loader)
    with pytest.raises(DatasetLoadError):
        data_store.load()
    data_store.reload()

    assert data_store.error is None
    assert len(data_store.students) == len(mixed_students)


def test_filtered_students_follow_filter_updates(store):
    store.load()
    assert len(store.filtered_students) == 12

    store.update_filter("sex", "M")
    assert all(s.sex == "M" for s in store.filtered_students)

    store.update_filter("higher", "no")
    assert all(s.sex == "M" and not s.higher for s in store.filtered_students)

    store.update_filter("sex", "all")
    assert store.filters.sex is None
    assert len(store.students) == 12


def test_reset_and_set_filters(store):
    store.load()
    store.set_filters(FilterCriteria(school="MS", address="R"))
    assert all(s.school == "MS" and s.address == "R" for s in store.filtered_students)

    assert store.reset_filters() == FilterCriteria()
    assert store.filtered_students == list(store.students)


def test_empty_result_state(store):
    assert not store.is_empty_result

    store.load()
    store.set_filters(FilterCriteria(sex="F", school="MS", address="U", higher=False))
    assert store.filtered_students == []
    assert store.is_empty_result


def test_invalid_filter_value_leaves_filters_unchanged(store):
    store.load()
    with pytest.raises(ValueError):
        store.update_filter("school", "XX")
    assert store.filters == FilterCriteria()


def test_loads_from_file(tmp_path, raw_row, csv_text):
    path = tmp_path / "student-mat.csv"
    path.write_text(csv_text([raw_row(), raw_row(sex="M")]), encoding="utf-8")

    data_store = StudyDataStore(path=path)
    data_store.load()
    data_store.update_filter("sex", "M")

    assert [s.id for s in data_store.filtered_students] == [2]


def test_any_loader_failure_is_reported(caplog):
    def loader(path):
        raise OSError("disk unavailable")

    data_store = StudyDataStore(loader=loader)
    with caplog.at_level(logging.ERROR), pytest.raises(OSError):
        data_store.load()

    assert data_store.error == LOAD_ERROR_MESSAGE
    assert not data_store.is_loaded
    assert not data_store.is_empty_result
