"""Free-text skill label resolution against the canonical catalog."""
import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable

from internmatch.canonical import compact, normalize_label, slugify
from internmatch.skills.catalog import SkillCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillResolution:
    """Result of resolving a batch of skill labels."""

    skill_ids: tuple[str, ...] = ()
    unknown: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Response payload shape used by the HTTP endpoint."""
        return {"skillIds": list(self.skill_ids), "unknown": list(self.unknown)}


@dataclass(frozen=True)
class _LabelCandidates:
    original: str
    slug: str
    candidates: tuple[str, ...] = ()


def build_candidates(label: str) -> _LabelCandidates:
    """Lookup candidates for one cleaned label: slug, compact, raw lowercase."""
    slug = slugify(label)
    raw = label.lower()
    candidates: list[str] = []
    for candidate in (slug, compact(raw), raw):
        if candidate and candidate not in candidates:
            candidates.append(candidate)
    return _LabelCandidates(original=label, slug=slug, candidates=tuple(candidates))


class SkillResolver:
    """Resolve free-text skill labels to canonical skill ids.

    Resolution per label:
      1. Any lookup candidate found in the alias table (first hit wins)
      2. Otherwise the slug candidate found in the skills table
      3. Otherwise the cleaned label goes to the unknown bucket

    All candidates of a request are fetched in two batched lookups that
    run concurrently.
    """

    def __init__(self, catalog: SkillCatalog):
        """
        Initialize skill resolver.

        Args:
            catalog: Catalog backend (SQL or in-memory)
        """
        self.catalog = catalog

    async def resolve(self, labels: Iterable[str]) -> SkillResolution:
        """
        Resolve skill labels.

        Args:
            labels: Free-text labels; non-strings and blanks are dropped

        Returns:
            SkillResolution with deduplicated ids and unknown labels

        Raises:
            SkillLookupError: If the catalog could not be queried
        """
        cleaned = [
            normalize_label(label)
            for label in labels or []
            if isinstance(label, str)
        ]
        items = [build_candidates(label) for label in cleaned if label]
        if not items:
            return SkillResolution()

        alias_candidates = list(dict.fromkeys(c for item in items for c in item.candidates))
        slug_candidates = list(dict.fromkeys(item.slug for item in items if item.slug))

        alias_to_id, slug_to_id = await asyncio.gather(
            self.catalog.lookup_aliases(alias_candidates),
            self.catalog.lookup_slugs(slug_candidates),
        )

        skill_ids: list[str] = []
        unknown: list[str] = []
        seen_ids: set[str] = set()
        seen_unknown: set[str] = set()

        for item in items:
            skill_id = next(
                (alias_to_id[c] for c in item.candidates if alias_to_id.get(c)),
                None,
            )
            if skill_id is None and item.slug:
                skill_id = slug_to_id.get(item.slug) or None

            if skill_id is not None:
                if skill_id not in seen_ids:
                    seen_ids.add(skill_id)
                    skill_ids.append(skill_id)
                continue

            key = item.original.lower()
            if key not in seen_unknown:
                seen_unknown.add(key)
                unknown.append(item.original)

        logger.debug(
            "Resolved %d labels: %d skill ids, %d unknown",
            len(items), len(skill_ids), len(unknown),
        )
        return SkillResolution(skill_ids=tuple(skill_ids), unknown=tuple(unknown))

    def resolve_sync(self, labels: Iterable[str]) -> SkillResolution:
        """Blocking wrapper for scripts and batch jobs (no running event loop)."""
        return asyncio.run(self.resolve(labels))
