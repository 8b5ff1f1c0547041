"""Skill catalog backends for the resolver."""
import asyncio
import logging
from pathlib import Path
from typing import Mapping, Protocol, Sequence, runtime_checkable

import yaml
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from internmatch.canonical import canonical_list, slugify
from internmatch.exceptions import SkillLookupError
from internmatch.persistence.models import Skill, SkillAlias

logger = logging.getLogger(__name__)


@runtime_checkable
class SkillCatalog(Protocol):
    """Batched lookups over the canonical skill catalog.

    Each call receives every distinct key of one resolution request and
    returns only the keys that exist.
    """

    async def lookup_aliases(self, candidates: Sequence[str]) -> dict[str, str]:
        """Map alias text -> skill id for the candidates that are known aliases."""
        ...

    async def lookup_slugs(self, slugs: Sequence[str]) -> dict[str, str]:
        """Map slug -> skill id for the slugs present in the catalog."""
        ...


class SqlSkillCatalog:
    """Catalog backed by the ``skills`` and ``skill_aliases`` tables.

    Every lookup opens its own session and runs in a worker thread, so
    the alias and slug queries of one request can proceed concurrently.
    """

    def __init__(self, session_factory: sessionmaker):
        """
        Initialize SQL catalog.

        Args:
            session_factory: SQLAlchemy sessionmaker bound to the catalog database
        """
        self.session_factory = session_factory

    async def lookup_aliases(self, candidates: Sequence[str]) -> dict[str, str]:
        if not candidates:
            return {}
        stmt = select(SkillAlias.alias, SkillAlias.skill_id).where(
            SkillAlias.alias.in_(list(candidates))
        )
        return await asyncio.to_thread(self._fetch_pairs, "skill_aliases", stmt)

    async def lookup_slugs(self, slugs: Sequence[str]) -> dict[str, str]:
        if not slugs:
            return {}
        stmt = select(Skill.slug, Skill.id).where(Skill.slug.in_(list(slugs)))
        return await asyncio.to_thread(self._fetch_pairs, "skills", stmt)

    def _fetch_pairs(self, table: str, stmt) -> dict[str, str]:
        """Execute a two-column select and return it as a dict."""
        try:
            with self.session_factory() as session:
                rows = session.execute(stmt).all()
        except SQLAlchemyError as e:
            logger.warning("Lookup against %s failed: %s", table, e)
            raise SkillLookupError(table, str(e)) from e

        return {
            key: value
            for key, value in rows
            if isinstance(key, str) and isinstance(value, str)
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class StaticSkillCatalog:
    """In-memory catalog, e.g. loaded from a YAML seed file."""

    def __init__(
        self,
        skills: Mapping[str, str],
        aliases: Mapping[str, str] | None = None,
    ):
        """
        Args:
            skills: skill id -> slug
            aliases: alias text -> skill id
        """
        self._slug_to_id = {slug: skill_id for skill_id, slug in skills.items()}
        self._alias_to_id = dict(aliases or {})

    @classmethod
    def from_entries(cls, entries: Sequence[Mapping]) -> "StaticSkillCatalog":
        """Build from seed entries (``id``, ``slug``/``label``, ``aliases``)."""
        skills: dict[str, str] = {}
        aliases: dict[str, str] = {}
        for entry in entries:
            skill_id = str(entry["id"])
            skills[skill_id] = entry.get("slug") or slugify(entry.get("label") or "")
            for alias in canonical_list(entry.get("aliases"), lowercase=True):
                aliases[alias] = skill_id
        return cls(skills, aliases)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "StaticSkillCatalog":
        """Load the ``skills:`` list of a YAML catalog file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.from_entries(data.get("skills", []))

    async def lookup_aliases(self, candidates: Sequence[str]) -> dict[str, str]:
        return {c: self._alias_to_id[c] for c in candidates if c in self._alias_to_id}

    async def lookup_slugs(self, slugs: Sequence[str]) -> dict[str, str]:
        return {s: self._slug_to_id[s] for s in slugs if s in self._slug_to_id}

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} skills={len(self._slug_to_id)}>"
