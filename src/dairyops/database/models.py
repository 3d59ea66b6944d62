"""SQLAlchemy models for the record store."""

from datetime import datetime, UTC
from sqlalchemy import Column, Integer, DateTime, JSON, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class RecordRow(Base):
    """One record of a store; values are kept as their draft strings."""

    __tablename__ = "records"
    # AUTOINCREMENT keeps SQLite from reusing the IDs of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    payload = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str = "sqlite://") -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory.

    The default URL is a private in-memory SQLite database; StaticPool keeps
    its single connection alive for as long as the engine exists.
    """
    engine = create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)
