"""Canonical listing and profile features built from raw records."""
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from internmatch.canonical import (
    Season,
    WorkMode,
    canonical_list,
    normalize_label,
    normalize_season,
    normalize_seasons,
    normalize_text,
    normalize_work_mode,
    normalize_work_modes,
    parse_bool,
    parse_number,
    season_from_month,
    strip_location_mode,
    work_mode_from_location,
)

# "Key: value" lines employers put into free-text descriptions
_REQUIRED_SKILLS_LINE = re.compile(r"^required skills?:\s*(.+)$", re.IGNORECASE | re.MULTILINE)
_PREFERRED_SKILLS_LINE = re.compile(r"^preferred skills?:\s*(.+)$", re.IGNORECASE | re.MULTILINE)
_SEASON_LINE = re.compile(r"^season:\s*(.+)$", re.IGNORECASE | re.MULTILINE)
_CATEGORY_LINE = re.compile(r"^category:\s*(.+)$", re.IGNORECASE | re.MULTILINE)


@dataclass(frozen=True)
class ListingFeatures:
    """Canonical snapshot of a listing taken at scoring time."""

    id: str
    majors: frozenset[str] = frozenset()
    required_skills: frozenset[str] = frozenset()
    preferred_skills: frozenset[str] = frozenset()
    hours_per_week: Optional[float] = None
    location: str = ""
    work_mode: Optional[WorkMode] = None
    term: str = ""
    description: str = ""
    category: str = ""

    def __post_init__(self):
        # Required and preferred skill sets are disjoint
        object.__setattr__(
            self, "preferred_skills", self.preferred_skills - self.required_skills
        )

    @property
    def season(self) -> Optional[Season]:
        return normalize_season(self.term)

    @property
    def is_in_person(self) -> bool:
        return self.work_mode in (WorkMode.ON_SITE, WorkMode.HYBRID)


@dataclass(frozen=True)
class ProfileFeatures:
    """Canonical snapshot of a candidate profile."""

    majors: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    coursework: tuple[str, ...] = ()
    availability_start_month: str = ""
    availability_hours_per_week: Optional[float] = None
    preferred_seasons: tuple[Season, ...] = ()
    preferred_locations: tuple[str, ...] = ()
    preferred_work_modes: frozenset[WorkMode] = frozenset()
    remote_only: bool = False

    @property
    def skill_set(self) -> frozenset[str]:
        """Everything that can satisfy a listing skill: skills and coursework."""
        return frozenset(self.skills) | frozenset(self.coursework)


def _description_line(pattern: re.Pattern, description: str) -> str:
    match = pattern.search(description)
    return match.group(1).strip() if match else ""


def _listing_skills(record: Mapping[str, Any], kind: str, description: str) -> frozenset[str]:
    """Canonical skill ids when present, otherwise text skills plus description lines."""
    ids = canonical_list(record.get(f"{kind}_skill_ids"), lowercase=True)
    if ids:
        return frozenset(ids)

    pattern = _REQUIRED_SKILLS_LINE if kind == "required" else _PREFERRED_SKILLS_LINE
    text = canonical_list(record.get(f"{kind}_skills"), lowercase=True)
    from_description = canonical_list(_description_line(pattern, description), lowercase=True)
    return frozenset(text) | frozenset(from_description)


def build_listing_features(record: Optional[Mapping[str, Any]]) -> ListingFeatures:
    """
    Canonicalize a raw listing record.

    Args:
        record: Listing row as fetched by the caller (may be None)

    Returns:
        ListingFeatures (empty features for a None record)
    """
    if not record:
        return ListingFeatures(id="")

    description = str(record.get("description") or "")
    raw_location = str(record.get("location") or "")
    majors = canonical_list(record.get("majors"), lowercase=True)

    work_mode = normalize_work_mode(record.get("work_mode")) or work_mode_from_location(raw_location)

    term = normalize_text(record.get("term")) or normalize_text(
        _description_line(_SEASON_LINE, description)
    )

    category = (
        normalize_text(record.get("category"))
        or normalize_text(record.get("role_category"))
        or normalize_text(_description_line(_CATEGORY_LINE, description))
        or (majors[0] if majors else "")
    )

    return ListingFeatures(
        id=str(record.get("id") or ""),
        majors=frozenset(majors),
        required_skills=_listing_skills(record, "required", description),
        preferred_skills=_listing_skills(record, "preferred", description),
        hours_per_week=parse_number(record.get("hours_per_week")),
        location=normalize_text(strip_location_mode(raw_location)),
        work_mode=work_mode,
        term=term,
        description=description,
        category=category,
    )


def build_profile_features(record: Optional[Mapping[str, Any]]) -> ProfileFeatures:
    """
    Canonicalize a raw profile record.

    Preferred seasons come from explicit preferred terms; without them the
    season of the availability start month is used.

    Args:
        record: Profile row as fetched by the caller (may be None)

    Returns:
        ProfileFeatures (empty features for a None record)
    """
    if not record:
        return ProfileFeatures()

    start_month = normalize_label(str(record.get("availability_start_month") or ""))

    preferred_seasons = normalize_seasons(record.get("preferred_terms"))
    if not preferred_seasons:
        fallback = season_from_month(start_month)
        preferred_seasons = (fallback,) if fallback else ()

    skills = canonical_list(
        list(canonical_list(record.get("skill_ids"), lowercase=True))
        + list(canonical_list(record.get("skills"), lowercase=True))
    )

    return ProfileFeatures(
        majors=canonical_list(record.get("majors"), lowercase=True),
        skills=skills,
        coursework=canonical_list(record.get("coursework"), lowercase=True),
        availability_start_month=start_month,
        availability_hours_per_week=parse_number(record.get("availability_hours_per_week")),
        preferred_seasons=preferred_seasons,
        preferred_locations=canonical_list(record.get("preferred_locations"), lowercase=True),
        preferred_work_modes=frozenset(normalize_work_modes(record.get("preferred_work_modes"))),
        remote_only=parse_bool(record.get("remote_only")),
    )
