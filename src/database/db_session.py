from typing import Iterator, Optional

from fastapi import Request
from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import DATABASE_URL

Base = declarative_base()


class Database:
    """ Process-wide handle on the database: one engine, one session factory."""

    def __init__(self, url: Optional[str] = None, **engine_kwargs):
        self.url = url or DATABASE_URL
        try:
            self.engine = create_engine(
                self.url,
                echo=False,
                pool_pre_ping=True,
                **engine_kwargs,
            )
        except Exception as e:
            logger.error(f"Error while creating the database engine: {e}")
            raise

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def get_session(self) -> Session:
        """ This function returns a new session bound to the engine."""
        return self.SessionLocal()

    def ping(self) -> None:
        """Issue a trivial query so startup fails fast when the store is unreachable."""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")


def get_db(request: Request) -> Iterator[Session]:
    """Yield a request-scoped session from the handle created at startup."""
    session = request.app.state.database.get_session()
    try:
        yield session
    finally:
        session.close()
