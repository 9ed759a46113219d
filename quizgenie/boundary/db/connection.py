"""
Engine and session factory construction.

The intake side shares one pooled engine. Each Celery task runs in a fresh
event loop, so workers build a NullPool engine per task and dispose it when
the task ends; pooled asyncpg connections cannot cross event loops.

Dependencies: sqlalchemy, asyncpg, quizgenie.configs
System role: Database connection lifecycle management
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from quizgenie.configs import get_settings


def get_async_engine(pooled: bool = True) -> AsyncEngine:
    """
    Create an asyncpg engine from the database settings.

    Args:
        pooled: Keep a connection pool (False for one-shot worker loops)

    Returns:
        AsyncEngine: Engine bound to the configured database
    """
    db_config = get_settings().database

    if not pooled:
        return create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
            poolclass=NullPool,
        )

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory(
    engine: AsyncEngine | None = None,
) -> async_sessionmaker[AsyncSession]:
    """
    Create a session factory for short units of work.

    Objects stay usable after commit and nothing is flushed implicitly;
    pipelines open one session per step and commit explicitly.

    Args:
        engine: Engine to bind (a pooled engine is created if None)

    Returns:
        async_sessionmaker: Factory producing AsyncSession instances
    """
    return async_sessionmaker(
        bind=engine or get_async_engine(),
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )
