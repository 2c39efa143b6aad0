from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from hospital.config.settings import Settings, get_settings
from hospital.core.domain.exceptions import DomainException
from hospital.core.shared.logger import get_logger

logger = get_logger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores FOREIGN KEY clauses unless enabled per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_async_database_engine(settings: Settings | None = None, url: str | None = None) -> AsyncEngine:
    """Create the async engine for the configured database."""
    settings = settings or get_settings()
    database_url = url or settings.async_database_url

    base_config = {
        "echo": settings.DB_ECHO,
        "future": True,
    }

    if database_url.startswith("sqlite"):
        if ":memory:" in database_url or database_url.rstrip("/").endswith("sqlite+aiosqlite:"):
            # One shared connection, otherwise every session sees an empty database
            logger.info("Creating async database engine for in-memory SQLite (StaticPool)")
            engine_config = {**base_config, "poolclass": StaticPool}
        else:
            logger.info("Creating async database engine for SQLite (NullPool)")
            engine_config = {**base_config, "poolclass": NullPool}
    elif settings.DEBUG:
        logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
        engine_config = {**base_config, "pool_pre_ping": True, "poolclass": NullPool}
    else:
        logger.info("Creating async database engine for PRODUCTION (pooled)")
        engine_config = {
            **base_config,
            "pool_pre_ping": True,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
        }

    try:
        engine = create_async_engine(database_url, **engine_config)
    except Exception as e:
        logger.error(f"Failed to create async database engine: {e}")
        raise

    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session maker bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def get_async_engine() -> AsyncEngine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = create_async_database_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the process-wide session maker, creating it on first use."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_async_engine())
    return _session_factory


async def dispose_engine() -> None:
    """Close every pooled connection and forget the singletons."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


@asynccontextmanager
async def transactional_session(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager wrapping one unit of work.

    Commits when the block exits normally. Any exception rolls back every
    write made through the session and is re-raised unchanged.

    Example:
        ```python
        async with transactional_session() as session:
            await container.create_schedule_appointment_use_case(session).execute(request)
        ```
    """
    factory = session_factory or get_session_factory()
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except DomainException as e:
            # Messages may embed identifiers; only the masked details are logged
            logger.warning(f"Transaction rolled back: {e.code}", error_code=e.code, details=e.details)
            await session.rollback()
            raise
        except Exception as e:
            logger.error(
                f"Transaction rolled back after database error: {type(e).__name__}",
                error_type=type(e).__name__,
            )
            await session.rollback()
            raise
