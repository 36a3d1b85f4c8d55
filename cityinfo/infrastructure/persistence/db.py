"""Database setup helpers (SQLAlchemy engine/session)."""
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from cityinfo.config import settings

# Load environment variables from the project .env
project_dir = Path(__file__).parent.parent.parent.parent
env_file = project_dir / ".env"
load_dotenv(env_file)

Base = declarative_base()


def create_db_engine(database_url: str = settings.DATABASE_URL):
    """Create an engine; SQLite connections get foreign keys enforced."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    engine = create_engine(database_url, future=True, pool_pre_ping=True, connect_args=connect_args)

    if database_url.startswith("sqlite"):
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = create_db_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


def get_db():
    """FastAPI-style dependency to provide a DB session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
