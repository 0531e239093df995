from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class Database:
    """
    Persistence handle for one logical database.

    Owns the async engine (and therefore the connection pool) plus the
    session factory.  Built once per process by the application lifespan
    and stored on ``app.state.db``; handlers reach it through ``get_db``.
    """

    def __init__(self, url: str, *, echo: bool = False, ssl: bool = False) -> None:
        connect_args = {}
        if ssl and url.startswith("postgresql+asyncpg"):
            connect_args["ssl"] = "require"

        self.url = url
        self.connect_args = connect_args
        self.engine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
        self.sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def dispose(self) -> None:
        """Close every pooled connection.  Called once at shutdown."""
        await self.engine.dispose()


async def get_db(request: Request):
    db: Database = request.app.state.db
    async with db.sessionmaker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
