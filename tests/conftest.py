"""Pytest fixtures for Internmatch tests."""
import sys
from pathlib import Path

import pytest
import yaml
from sqlalchemy.orm import sessionmaker

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from internmatch.exceptions import SkillLookupError
from internmatch.persistence.database import build_engine, get_session, init_db, seed_skill_catalog
from internmatch.skills import StaticSkillCatalog


# =============================================================================
# SKILL CATALOG FIXTURES
# =============================================================================


@pytest.fixture
def catalog_entries():
    """Small catalog in the seed-file shape."""
    return [
        {"id": "skill-1", "slug": "react", "label": "React", "aliases": ["reactjs"]},
        {"id": "skill-2", "slug": "python", "label": "Python", "aliases": ["python3"]},
        {"id": "skill-3", "slug": "c-sharp", "label": "C#", "aliases": ["c#", "csharp"]},
    ]


@pytest.fixture
def static_catalog(catalog_entries):
    """In-memory catalog built from catalog_entries."""
    return StaticSkillCatalog.from_entries(catalog_entries)


@pytest.fixture
def catalog_session_factory(tmp_path, catalog_entries):
    """Session factory for a seeded SQLite catalog on disk.

    A file database (not :memory:) so worker-thread lookups see the same data.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    init_db(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False)
    with get_session(factory) as session:
        seed_skill_catalog(session, catalog_entries)
    yield factory
    engine.dispose()


class RecordingCatalog:
    """Catalog double that records every lookup it receives."""

    def __init__(self, inner):
        self.inner = inner
        self.alias_calls: list[list[str]] = []
        self.slug_calls: list[list[str]] = []

    async def lookup_aliases(self, candidates):
        self.alias_calls.append(list(candidates))
        return await self.inner.lookup_aliases(candidates)

    async def lookup_slugs(self, slugs):
        self.slug_calls.append(list(slugs))
        return await self.inner.lookup_slugs(slugs)


class FailingCatalog:
    """Catalog double whose alias table is unreachable."""

    async def lookup_aliases(self, candidates):
        raise SkillLookupError("skill_aliases", "connection refused")

    async def lookup_slugs(self, slugs):
        return {}


@pytest.fixture
def recording_catalog(static_catalog):
    return RecordingCatalog(static_catalog)


@pytest.fixture
def failing_catalog():
    return FailingCatalog()


# =============================================================================
# MATCHING FIXTURES
# =============================================================================


@pytest.fixture(scope="session")
def matching_fixtures():
    """Students and listings from config/matching_fixtures.yaml."""
    with open(project_root / "config" / "matching_fixtures.yaml") as f:
        return yaml.safe_load(f)


@pytest.fixture
def listing_records(matching_fixtures):
    """Listing records keyed by id."""
    return {record["id"]: record for record in matching_fixtures["listings"]}


@pytest.fixture
def student_profiles(matching_fixtures):
    """Profile records keyed by student id."""
    return {student["id"]: student["profile"] for student in matching_fixtures["students"]}
