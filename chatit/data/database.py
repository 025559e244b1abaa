from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from ..app.config import Config

# Create a base class for our models
Base = declarative_base()


def make_engine(url: str = None, echo: bool = None, **kwargs) -> AsyncEngine:
    """Create an async engine; in-memory SQLite shares one connection across sessions."""
    url = url or Config.DATABASE_URL
    kwargs.setdefault("echo", Config.DATABASE_ECHO if echo is None else echo)
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        if url.endswith(":memory:") or url.endswith("://"):
            kwargs.setdefault("poolclass", StaticPool)
    return create_async_engine(url, **kwargs)


def make_sessionmaker(bind: AsyncEngine) -> async_sessionmaker:
    # Rows are handed back to callers after the session closes
    return async_sessionmaker(bind=bind, expire_on_commit=False, autoflush=False)


# Create the SQLAlchemy engine and a configured "Session" class
engine = make_engine()
SessionLocal = make_sessionmaker(engine)


async def create_tables(bind: AsyncEngine = None):
    """Create all tables in the database."""
    # Import all models here before calling create_all
    # This ensures they are registered with the Base metadata
    from .models import Chatbot, Document, Conversation, Message, SentimentRecord  # noqa: F401
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


if __name__ == "__main__":
    import asyncio

    asyncio.run(create_tables())
    print("Database tables created successfully.")
