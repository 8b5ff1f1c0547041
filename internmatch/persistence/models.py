"""SQLAlchemy models for the Internmatch skill catalog."""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import DeclarativeBase, relationship


def utcnow() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Skill(Base):
    """Canonical skill catalog entry."""

    __tablename__ = "skills"

    id = Column(String, primary_key=True)
    slug = Column(String, unique=True, nullable=False, index=True)
    label = Column(String, nullable=True)  # Display name, e.g. "React"
    created_at = Column(DateTime, default=utcnow)

    aliases = relationship(
        "SkillAlias", back_populates="skill", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Skill {self.slug} ({self.id})>"


class SkillAlias(Base):
    """Free-text spelling known to refer to a canonical skill."""

    __tablename__ = "skill_aliases"

    alias = Column(String, primary_key=True)  # One row per alias
    skill_id = Column(String, ForeignKey("skills.id"), nullable=False, index=True)

    skill = relationship("Skill", back_populates="aliases")

    def __repr__(self) -> str:
        return f"<SkillAlias {self.alias} -> {self.skill_id}>"
