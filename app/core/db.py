"""
This module contains functions to interact with the database, including
connection management, session creation and the transaction boundary
used by the service layer.
"""
import contextlib
from functools import wraps
import os
from typing import AsyncIterator, Any, Awaitable, Callable
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine
)

from app.core.config import settings, logger
from app.db_objects.db_models import Base


class DatabaseSessionManager:
    """This class manages the database connections and sessions."""

    def __init__(self, host: str, engine_kwargs: dict[str, Any] = None):
        """
        Create a new instance of the DatabaseSessionManager.

        :param host: The URL of the database to connect to.
        :param engine_kwargs: Optional keyword arguments to pass to the
            `create_async_engine` function.
        """
        if engine_kwargs is None:
            engine_kwargs = {}
        self.engine = create_async_engine(host, **engine_kwargs)
        self._sessionmaker = async_sessionmaker(
            expire_on_commit=False,
            bind=self.engine
        )

    async def init(self):
        """
        Initialize the database by creating all tables.

        This function is idempotent. If the tables already exist, it will not
        raise an error. For SQLite databases, the folder of the database file is
        created beforehand.
        """
        url = self.engine.url
        if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self):
        """
        Close the database connection and free up all resources.

        This function should be called when the application is shutting down.
        After calling this function, the `DatabaseSessionManager` is no longer
        usable.

        :raises HTTPException: If the database is not initialized.
        """
        if self.engine is None:
            logger.error("DatabaseSessionManager is not initialized")
            raise HTTPException(
                status_code=500,
                detail="DatabaseSessionManager is not initialized"
            )
        await self.engine.dispose()

        self.engine = None
        self._sessionmaker = None

    @contextlib.asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Establish an asynchronous session to the database.

        The session is rolled back if an exception escapes the context and is
        always closed on exit.

        Yields
        ------
        AsyncSession
            The asynchronous session object to perform database operations.

        Raises
        ------
        HTTPException
            If the `DatabaseSessionManager` is not initialized.
        """
        if self._sessionmaker is None:
            logger.error("DatabaseSessionManager is not initialized")
            raise HTTPException(
                status_code=500,
                detail="DatabaseSessionManager is not initialized"
            )

        session = self._sessionmaker()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


sessionmanager = DatabaseSessionManager(
    settings.SQLALCHEMY_DATABASE_URI, {"echo": False})


async def get_async_db():
    """
    Get an asynchronous database session.

    Yields
    ------
    AsyncSession
        The asynchronous session object to perform database operations.
    """
    async with sessionmanager.session() as session:
        yield session


def transactional(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
    """
    Run a service function as one transaction.

    The decorated coroutine must take the `AsyncSession` as its first argument.
    The session is committed when the coroutine returns and rolled back when
    it raises, the exception being propagated to the caller.
    """
    @wraps(func)
    async def wrapper(db: AsyncSession, *args, **kwargs):
        try:
            result = await func(db, *args, **kwargs)
            await db.commit()
        except Exception:
            logger.debug(f"Rolling back the transaction of {func.__name__}")
            await db.rollback()
            raise
        return result
    return wrapper
