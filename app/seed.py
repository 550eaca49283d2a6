import logging
from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import BaseAppException
from app.core.logging import setup_logging
from app.schemas.student import StudentCreate
from app.services.student.student import StudentStore

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {"name": "Ann Lee", "email": "ann.lee@example.com", "age": 20, "gender": "F"},
    {"name": "Ravi Kumar", "email": "ravi.kumar@example.com", "age": 21, "gender": "M"},
    {"name": "Sam Ortiz", "email": "sam.ortiz@example.com", "age": 22, "gender": "O"},
]


def seed_data(store: StudentStore) -> int:
    """
    Insert the sample students into an empty table.

    Returns the number of rows inserted (0 when data already exists).
    """
    store.ensure_table()

    # Check if data already exists to avoid duplication
    if store.count():
        logger.info("Database already contains data. Skipping seed.")
        return 0

    logger.info("Seeding data...")
    for data in SAMPLE_STUDENTS:
        store.insert(StudentCreate(**data))

    logger.info(f"Seeded {len(SAMPLE_STUDENTS)} students")
    return len(SAMPLE_STUDENTS)


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)
    try:
        seed_data(StudentStore.from_settings(settings))
    except BaseAppException as e:
        logger.error(f"Error seeding data: {e.message}")
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
