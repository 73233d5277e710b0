from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
    @declared_attr
    def __tablename__(cls):
        """Generate tablename."""
        return cls.__name__.upper()


class DatabaseManager():
    """Manages DB side query execution."""
    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._database_url = self.async_database_url(database_url)
        try:
            self.engine = create_async_engine(
                str(self._database_url),
                echo=echo,
            )
            self.async_session = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        except SQLAlchemyError as _:
            raise

    @staticmethod
    def async_database_url(url) -> str:
        """Adds a matching async driver to a database url."""
        url = str(url)
        match url.split("://"):
            case ["postgresql", _]:
                url = url.replace(
                    "postgresql://", "postgresql+asyncpg://"
                )
            case ["sqlite", _]:
                url = url.replace(
                    "sqlite://", "sqlite+aiosqlite://"
                )
            case _:
                raise ValueError(f"Unsupported database url: {url}")
        return url

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Opens and yields a new AsyncSession, always closed on exit."""
        session = self.async_session()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def init_db(self, reset: bool = False) -> None:
        """Create all tables, dropping them first when reset is set."""
        async with self.engine.begin() as conn:
            if reset:
                await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
