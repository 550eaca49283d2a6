import logging
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.database import create_db_engine, ensure_table, make_session_factory
from app.core.exceptions import DuplicateEmailError, NotFoundError, StoreError
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentRead, StudentUpdate

logger = logging.getLogger(__name__)

# Unique-violation markers across SQLite, PostgreSQL/MySQL and DB2 (SQLCODE -803)
_UNIQUE_MARKERS = ("unique", "duplicate", "23505", "-803")


def is_unique_violation(error: IntegrityError) -> bool:
    """True when the integrity error comes from a uniqueness constraint."""
    text = str(error.orig).lower()
    return any(marker in text for marker in _UNIQUE_MARKERS)


class StudentStore:
    """
    Persistence boundary for student records.

    Each operation opens its own session on the injected engine and closes
    it before returning, on success and on error alike.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = make_session_factory(engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "StudentStore":
        return cls(create_db_engine(settings))

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError:
            db.rollback()
            raise
        finally:
            db.close()

    def ensure_table(self) -> bool:
        """Create STUDENT_DETAILS if it is missing."""
        return ensure_table(self.engine, Student.__table__)

    def insert(self, student: StudentCreate) -> int:
        """Store a new student and return the id the database assigned."""
        try:
            with self._session() as db:
                db_student = Student(**student.model_dump())
                db.add(db_student)
                db.commit()
                return db_student.id
        except IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateEmailError(student.email) from e
            raise self._store_error("inserting student", e) from e
        except SQLAlchemyError as e:
            raise self._store_error("inserting student", e) from e

    def select_all(self) -> List[StudentRead]:
        """All students, oldest first."""
        try:
            with self._session() as db:
                rows = db.scalars(select(Student).order_by(Student.id)).all()
                return [StudentRead.model_validate(row) for row in rows]
        except SQLAlchemyError as e:
            raise self._store_error("fetching students", e) from e

    def select_by_id(self, student_id: int) -> StudentRead:
        try:
            with self._session() as db:
                row = db.get(Student, student_id)
                if row is None:
                    raise NotFoundError(student_id)
                return StudentRead.model_validate(row)
        except SQLAlchemyError as e:
            raise self._store_error("fetching student", e) from e

    def update(self, student_id: int, student: StudentUpdate) -> StudentRead:
        """Replace all four fields of an existing student."""
        try:
            with self._session() as db:
                row = db.get(Student, student_id)
                if row is None:
                    raise NotFoundError(student_id)
                for field, value in student.model_dump().items():
                    setattr(row, field, value)
                db.commit()
                return StudentRead.model_validate(row)
        except IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateEmailError(student.email) from e
            raise self._store_error("updating student", e) from e
        except SQLAlchemyError as e:
            raise self._store_error("updating student", e) from e

    def delete(self, student_id: int) -> None:
        try:
            with self._session() as db:
                row = db.get(Student, student_id)
                if row is None:
                    raise NotFoundError(student_id)
                db.delete(row)
                db.commit()
        except SQLAlchemyError as e:
            raise self._store_error("deleting student", e) from e

    def count(self) -> int:
        try:
            with self._session() as db:
                return db.scalar(select(func.count()).select_from(Student))
        except SQLAlchemyError as e:
            raise self._store_error("counting students", e) from e

    @staticmethod
    def _store_error(action: str, error: SQLAlchemyError) -> StoreError:
        logger.error(f"Error {action}: {error}")
        return StoreError(f"Failed {action}")
