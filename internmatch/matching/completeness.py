"""Profile completeness and matching-input coverage checks."""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from internmatch.canonical import canonical_list, parse_number
from internmatch.matching.features import ListingFeatures, ProfileFeatures

MINIMUM_PROFILE_FIELDS: tuple[str, ...] = (
    "school",
    "major",
    "availability_start_month",
    "availability_hours_per_week",
)

MINIMUM_PROFILE_LABELS = {
    "school": "School",
    "major": "Major",
    "availability_start_month": "Availability start month",
    "availability_hours_per_week": "Availability hours per week",
}


@dataclass(frozen=True)
class ProfileCompleteness:
    ok: bool
    missing: tuple[str, ...]


@dataclass(frozen=True)
class MatchingCoverage:
    """Which scoring inputs are present on a listing or profile."""

    total_dimensions: int
    present_dimensions: int
    missing_dimensions: tuple[str, ...]


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def minimum_profile_completeness(record: Optional[Mapping[str, Any]]) -> ProfileCompleteness:
    """Check the fields a profile needs before it can be matched."""
    if not record:
        return ProfileCompleteness(ok=False, missing=MINIMUM_PROFILE_FIELDS)

    hours = parse_number(record.get("availability_hours_per_week"))
    checks = {
        "school": _has_text(record.get("school")),
        "major": _has_text(record.get("major_id")) or bool(canonical_list(record.get("majors"))),
        "availability_start_month": _has_text(record.get("availability_start_month")),
        "availability_hours_per_week": hours is not None and hours > 0,
    }
    missing = tuple(name for name in MINIMUM_PROFILE_FIELDS if not checks[name])
    return ProfileCompleteness(ok=not missing, missing=missing)


def _coverage(checks: list[tuple[str, bool]]) -> MatchingCoverage:
    return MatchingCoverage(
        total_dimensions=len(checks),
        present_dimensions=sum(1 for _, ok in checks if ok),
        missing_dimensions=tuple(label for label, ok in checks if not ok),
    )


def listing_coverage(listing: ListingFeatures) -> MatchingCoverage:
    return _coverage([
        ("majors", bool(listing.majors or listing.category)),
        ("skills", bool(listing.required_skills or listing.preferred_skills)),
        ("term", listing.season is not None),
        ("hours", listing.hours_per_week is not None),
        ("work mode", listing.work_mode is not None),
        ("location", bool(listing.location)),
    ])


def profile_coverage(profile: ProfileFeatures) -> MatchingCoverage:
    return _coverage([
        ("majors", bool(profile.majors)),
        ("skills", bool(profile.skills)),
        ("coursework", bool(profile.coursework)),
        ("term", bool(profile.preferred_seasons)),
        ("hours", bool(profile.availability_hours_per_week)),
        ("location/work mode", bool(profile.preferred_locations or profile.preferred_work_modes)),
    ])
