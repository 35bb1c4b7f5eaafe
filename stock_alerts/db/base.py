from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.ext.asyncio.session import AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker
from stock_alerts.core.config import settings

Base = declarative_base()


def build_engine(db_url: str, echo: bool = False) -> AsyncEngine:
    return create_async_engine(db_url, future=True, echo=echo)


def build_sessionmaker(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(bind: AsyncEngine) -> None:
    # Only used for local databases and tests; production schema is owned elsewhere.
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@lru_cache(maxsize=None)
def get_session_factory() -> sessionmaker:
    """Session factory bound to ``settings.DB_URL``, built on first use."""
    return build_sessionmaker(build_engine(settings.DB_URL, echo=settings.DB_ECHO))


async def get_db():
    async with get_session_factory()() as session:
        yield session
