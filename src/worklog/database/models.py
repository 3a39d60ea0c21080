"""SQLAlchemy models for worklog database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    ForeignKey,
    DateTime,
    Boolean,
    JSON,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class User(Base):
    """Identity that owns day logs and shares."""

    __tablename__ = "users"

    user_id = Column(String, primary_key=True)
    display_name = Column(String, nullable=False)
    avatar_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    day_logs = relationship("DayLog", back_populates="user", cascade="all, delete-orphan")


class ActiveSession(Base):
    """The single signed-in session (at most one row)."""

    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, ForeignKey("users.user_id"), nullable=False)
    signed_in_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    user = relationship("User")


class Project(Base):
    """Shared project list."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class DayLog(Base):
    """One day of logged work for one user."""

    __tablename__ = "day_logs"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, ForeignKey("users.user_id"), nullable=False)
    date = Column(String(10), nullable=False)
    projects = Column(JSON, nullable=False, default=list)
    description = Column(Text, nullable=False, default="")
    files = Column(Text, nullable=False, default="")
    file_project_map = Column(JSON, nullable=True)
    file_category_map = Column(JSON, nullable=False, default=dict)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    # One entry per user per date
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_user_date"),)

    # Relationships
    user = relationship("User", back_populates="day_logs")


class Share(Base):
    """Frozen public snapshot of a month."""

    __tablename__ = "shares"

    share_id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.user_id"), nullable=False)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    month_name = Column(String, nullable=False)
    user_name = Column(String, nullable=False)
    logs = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
