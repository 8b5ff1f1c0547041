"""Database connection and session management."""
import logging
from contextlib import contextmanager
from typing import Any, Generator, Iterable, Mapping

from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session, sessionmaker

from config.settings import settings
from internmatch.canonical import canonical_list, slugify
from internmatch.persistence.models import Base, Skill, SkillAlias

logger = logging.getLogger(__name__)


def build_engine(url: str | None = None):
    """Create SQLAlchemy engine with appropriate settings for the database backend."""
    url = url or settings.database_url

    if url.startswith("sqlite"):
        # Catalog lookups run in worker threads
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    # PostgreSQL (or other server-based databases)
    return create_engine(
        url,
        echo=False,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,  # Verify connections before use
    )


# Create engine and session factory
engine = build_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """Initialize the database, creating all tables."""
    Base.metadata.create_all(bind=bind or engine)


@contextmanager
def get_session(factory: sessionmaker | None = None) -> Generator[Session, None, None]:
    """Get a database session with automatic cleanup."""
    session = (factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def seed_skill_catalog(session: Session, entries: Iterable[Mapping[str, Any]]) -> dict:
    """Insert or update catalog rows.

    Each entry looks like ``{"id": "skill-1", "slug": "react",
    "label": "React", "aliases": ["reactjs", "react.js"]}``. A missing
    slug is derived from the label. Aliases are stored lowercased and
    re-pointed when they already exist for another skill.

    Returns:
        Dictionary with counts of skills and aliases written
    """
    skills_written = 0
    aliases_written = 0

    for entry in entries:
        skill_id = str(entry["id"]).strip()
        label = entry.get("label")
        slug = entry.get("slug") or slugify(label or "")
        if not skill_id or not slug:
            logger.warning("Skipping catalog entry without id/slug: %r", entry)
            continue

        skill = session.get(Skill, skill_id)
        if skill is None:
            skill = Skill(id=skill_id, slug=slug, label=label)
            session.add(skill)
        else:
            skill.slug = slug
            skill.label = label
        skills_written += 1

        for alias in canonical_list(entry.get("aliases"), lowercase=True):
            row = session.execute(
                select(SkillAlias).where(SkillAlias.alias == alias)
            ).scalar_one_or_none()
            if row is None:
                session.add(SkillAlias(alias=alias, skill_id=skill_id))
            else:
                row.skill_id = skill_id
            aliases_written += 1

        session.flush()

    logger.info("Seeded %d skills and %d aliases", skills_written, aliases_written)
    return {"skills": skills_written, "aliases": aliases_written}
