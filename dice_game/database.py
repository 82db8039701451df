import logging
from typing import Annotated
from fastapi import Depends
from sqlmodel import Session, SQLModel, create_engine
from .config import DEV, SQLITE_URL, POSTGRES_URL, SQL_ECHO

log = logging.getLogger(__name__)

if DEV:
    # SQLite for development
    engine = create_engine(
        SQLITE_URL,
        echo=SQL_ECHO,
        connect_args={"check_same_thread": False}
    )
    log.info("Using SQLite database for development")
else:
    # PostgreSQL for production
    if not POSTGRES_URL:
        raise ValueError("POSTGRES_URL environment variable is required in production")

    engine = create_engine(POSTGRES_URL, echo=SQL_ECHO)
    log.info("Using PostgreSQL database for production")


def create_db_and_tables():
    # table classes must be registered on the metadata first
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    log.info("Database tables created")


def get_session():
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]
