# app/core/logging.py
import logging
import sys

LOGGER_NAME = "student_records"


# Configure standard Python logging
def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout) # Print logs to console
        ]
    )
    return logging.getLogger(LOGGER_NAME)


logger = logging.getLogger(LOGGER_NAME)
