"""Test the student record store against SQLite."""

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import DuplicateEmailError, NotFoundError, StoreError
from app.schemas.student import StudentCreate, StudentRead, StudentUpdate
from app.services.student.student import StudentStore


def test_insert_then_select_by_id(empty_store: StudentStore, ann: dict) -> None:
    # Act
    student_id = empty_store.insert(StudentCreate(**ann))
    student = empty_store.select_by_id(student_id)
    # Assert
    assert isinstance(student, StudentRead)
    assert student.id == student_id
    assert (student.name, student.email, student.age, student.gender) == (
        "Ann", "a@b.com", 20, "F"
    )


def test_ids_are_assigned_by_the_store(empty_store: StudentStore, ann: dict) -> None:
    first = empty_store.insert(StudentCreate(**ann))
    second = empty_store.insert(StudentCreate(**{**ann, "email": "c@d.com"}))
    assert second > first


def test_duplicate_email(empty_store: StudentStore, ann: dict) -> None:
    # Arrange
    first_id = empty_store.insert(StudentCreate(**ann))
    # Act
    with pytest.raises(DuplicateEmailError) as exc_info:
        empty_store.insert(StudentCreate(**{**ann, "name": "Annie"}))
    # Assert
    assert exc_info.value.status_code == 400
    students = empty_store.select_all()
    assert [student.id for student in students] == [first_id]
    assert students[0].name == "Ann"


def test_select_all_in_insertion_order(empty_store: StudentStore, ann: dict) -> None:
    assert empty_store.select_all() == []
    emails = ["z@b.com", "a@b.com", "m@b.com"]
    for email in emails:
        empty_store.insert(StudentCreate(**{**ann, "email": email}))
    assert [student.email for student in empty_store.select_all()] == emails
    assert empty_store.count() == 3


def test_select_missing_id(empty_store: StudentStore) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        empty_store.select_by_id(42)
    assert exc_info.value.status_code == 404


def test_update_replaces_all_fields(empty_store: StudentStore, ann: dict) -> None:
    # Arrange
    student_id = empty_store.insert(StudentCreate(**ann))
    update = StudentUpdate(name="Bob", email="bob@b.com", age="33", gender="m")
    # Act
    updated = empty_store.update(student_id, update)
    # Assert
    assert updated == empty_store.select_by_id(student_id)
    assert (updated.name, updated.email, updated.age, updated.gender) == (
        "Bob", "bob@b.com", 33, "M"
    )


def test_update_missing_id_leaves_table_unchanged(
    empty_store: StudentStore, ann: dict
) -> None:
    # Arrange
    empty_store.insert(StudentCreate(**ann))
    before = empty_store.select_all()
    # Act
    with pytest.raises(NotFoundError):
        empty_store.update(999, StudentUpdate(**{**ann, "name": "Other"}))
    # Assert
    assert empty_store.select_all() == before


def test_update_to_taken_email(empty_store: StudentStore, ann: dict) -> None:
    empty_store.insert(StudentCreate(**ann))
    other_id = empty_store.insert(StudentCreate(**{**ann, "email": "c@d.com"}))
    with pytest.raises(DuplicateEmailError):
        empty_store.update(other_id, StudentUpdate(**ann))
    assert empty_store.select_by_id(other_id).email == "c@d.com"


def test_update_keeping_own_email(empty_store: StudentStore, ann: dict) -> None:
    student_id = empty_store.insert(StudentCreate(**ann))
    updated = empty_store.update(student_id, StudentUpdate(**{**ann, "age": 21}))
    assert updated.age == 21


def test_delete(empty_store: StudentStore, ann: dict) -> None:
    # Arrange
    student_id = empty_store.insert(StudentCreate(**ann))
    # Act
    empty_store.delete(student_id)
    # Assert
    assert empty_store.select_all() == []
    with pytest.raises(NotFoundError):
        empty_store.delete(student_id)


def test_delete_missing_id_on_empty_table(empty_store: StudentStore) -> None:
    with pytest.raises(NotFoundError):
        empty_store.delete(999)


def test_database_failures_become_store_errors(empty_store: StudentStore, monkeypatch) -> None:
    def broken_session():
        raise OperationalError("SELECT", {}, Exception("unable to open database file"))

    monkeypatch.setattr(empty_store, "_session_factory", broken_session)
    with pytest.raises(StoreError) as exc_info:
        empty_store.select_all()
    assert exc_info.value.status_code == 500
    assert isinstance(exc_info.value.__cause__, OperationalError)


def test_missing_table_is_a_store_error(settings, ann: dict) -> None:
    """Operations before the bootstrap fail cleanly instead of crashing."""
    store = StudentStore.from_settings(settings)
    with pytest.raises(StoreError):
        store.insert(StudentCreate(**ann))
