from sqlalchemy import Table, create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import NullPool
from .config import Settings
from .exceptions import StoreError
import logging

logger = logging.getLogger(__name__)

STUDENT_TABLE = "STUDENT_DETAILS"

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def create_db_engine(settings: Settings) -> Engine:
    """
    Create the database engine for the given settings.

    Every operation opens its own connection and closes it when done, so
    pooling is disabled (NullPool) and nothing is reused across requests.
    """
    connect_args = {}
    if settings.is_sqlite:
        # SQLite connections are created in FastAPI's worker threads
        connect_args["check_same_thread"] = False

    engine = create_engine(
        settings.DATABASE_URL,
        poolclass=NullPool,
        echo=settings.DB_ECHO_SQL,  # Print all SQL queries to console
        connect_args=connect_args,
    )

    if settings.DEBUG:
        @event.listens_for(engine, "connect")
        def receive_connect(dbapi_conn, connection_record):
            logger.debug("New database connection established")

    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,  # Don't auto-commit transactions
        autoflush=False,   # Don't auto-flush before queries
        bind=engine,
        expire_on_commit=False  # Keep loaded attributes usable after commit
    )


# =============================================================================
# SCHEMA BOOTSTRAP
# =============================================================================

def table_exists(engine: Engine, name: str = STUDENT_TABLE) -> bool:
    """
    Check the database catalog for a table in the current schema.

    The inspector binds the name as a parameter, it is never spliced into SQL.
    """
    with engine.connect() as connection:
        return inspect(connection).has_table(name)


def ensure_table(engine: Engine, table: Table) -> bool:
    """
    Create the table if it does not exist yet.

    Returns True when this call created the table. A failed CREATE is
    treated as success when the table exists afterwards (another process
    created it in between); any other failure is raised as StoreError.
    """
    try:
        if table_exists(engine, table.name):
            logger.info("Table %s already exists, proceeding with operations", table.name)
            return False
        with engine.begin() as connection:
            table.create(connection, checkfirst=False)
    except SQLAlchemyError as e:
        if _exists_after_failure(engine, table.name):
            logger.info("Table %s already exists, proceeding with operations", table.name)
            return False
        logger.error(f"Error creating table {table.name}: {e}")
        raise StoreError(f"Could not create table {table.name}") from e

    logger.info("Table %s created successfully", table.name)
    return True


def _exists_after_failure(engine: Engine, name: str) -> bool:
    try:
        return table_exists(engine, name)
    except SQLAlchemyError:
        return False
