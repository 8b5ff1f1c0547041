"""Enum-like field normalization via static synonym tables."""
import re
from enum import Enum
from typing import Any, Optional

from internmatch.canonical.text import canonical_list, normalize_text


class WorkMode(str, Enum):
    """Canonical work arrangement of a listing."""

    REMOTE = "remote"
    HYBRID = "hybrid"
    ON_SITE = "on-site"


class Season(str, Enum):
    """Canonical internship season."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class VerificationTier(str, Enum):
    """Employer verification tier."""

    FREE = "free"
    STARTER = "starter"
    PRO = "pro"


PAID_TIERS = frozenset({VerificationTier.STARTER, VerificationTier.PRO})

WORK_MODE_SYNONYMS: dict[str, WorkMode] = {
    "remote": WorkMode.REMOTE,
    "fully remote": WorkMode.REMOTE,
    "remote only": WorkMode.REMOTE,
    "remote-only": WorkMode.REMOTE,
    "virtual": WorkMode.REMOTE,
    "hybrid": WorkMode.HYBRID,
    "on-site": WorkMode.ON_SITE,
    "onsite": WorkMode.ON_SITE,
    "on site": WorkMode.ON_SITE,
    "on_site": WorkMode.ON_SITE,
    "in person": WorkMode.ON_SITE,
    "in-person": WorkMode.ON_SITE,
    "in_person": WorkMode.ON_SITE,
    "in office": WorkMode.ON_SITE,
    "in-office": WorkMode.ON_SITE,
}

SEASON_SYNONYMS: dict[str, Season] = {
    "spring": Season.SPRING,
    "summer": Season.SUMMER,
    "fall": Season.FALL,
    "autumn": Season.FALL,
    "winter": Season.WINTER,
}

# Keyed by the first three letters of the month name
MONTH_SEASONS: dict[str, Season] = {
    "jun": Season.SUMMER,
    "jul": Season.SUMMER,
    "aug": Season.SUMMER,
    "sep": Season.FALL,
    "oct": Season.FALL,
    "nov": Season.FALL,
    "dec": Season.WINTER,
    "jan": Season.WINTER,
    "feb": Season.WINTER,
    "mar": Season.SPRING,
    "apr": Season.SPRING,
    "may": Season.SPRING,
}

_MONTH_NAMES = {
    "january", "february", "march", "april", "may", "june", "july",
    "august", "september", "october", "november", "december",
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept",
    "oct", "nov", "dec",
}

STATE_CODES: dict[str, str] = {
    "alabama": "AL", "alaska": "AK", "arizona": "AZ", "arkansas": "AR",
    "california": "CA", "colorado": "CO", "connecticut": "CT",
    "delaware": "DE", "district of columbia": "DC", "florida": "FL",
    "georgia": "GA", "hawaii": "HI", "idaho": "ID", "illinois": "IL",
    "indiana": "IN", "iowa": "IA", "kansas": "KS", "kentucky": "KY",
    "louisiana": "LA", "maine": "ME", "maryland": "MD",
    "massachusetts": "MA", "michigan": "MI", "minnesota": "MN",
    "mississippi": "MS", "missouri": "MO", "montana": "MT",
    "nebraska": "NE", "nevada": "NV", "new hampshire": "NH",
    "new jersey": "NJ", "new mexico": "NM", "new york": "NY",
    "north carolina": "NC", "north dakota": "ND", "ohio": "OH",
    "oklahoma": "OK", "oregon": "OR", "pennsylvania": "PA",
    "rhode island": "RI", "south carolina": "SC", "south dakota": "SD",
    "tennessee": "TN", "texas": "TX", "utah": "UT", "vermont": "VT",
    "virginia": "VA", "washington": "WA", "west virginia": "WV",
    "wisconsin": "WI", "wyoming": "WY",
}
_VALID_STATE_CODES = frozenset(STATE_CODES.values())

_WORD = re.compile(r"[a-z]+")
_LOCATION_MODE_SUFFIX = re.compile(r"\(([^)]+)\)\s*$")


def normalize_work_mode(value: Optional[str]) -> Optional[WorkMode]:
    """Map a work-mode spelling to its canonical tag, or None if unknown."""
    return WORK_MODE_SYNONYMS.get(normalize_text(value))


def normalize_work_modes(value: Any) -> tuple[WorkMode, ...]:
    """Canonicalize a list-or-delimited work-mode field, dropping unknowns."""
    modes: list[WorkMode] = []
    for item in canonical_list(value):
        mode = normalize_work_mode(item)
        if mode is not None and mode not in modes:
            modes.append(mode)
    return tuple(modes)


def work_mode_from_location(location: Optional[str]) -> Optional[WorkMode]:
    """Read a trailing "(Hybrid)" style suffix from a location string."""
    match = _LOCATION_MODE_SUFFIX.search(location or "")
    if not match:
        return None
    return normalize_work_mode(match.group(1))


def strip_location_mode(location: Optional[str]) -> str:
    """Location name without any trailing parenthesized suffix."""
    return _LOCATION_MODE_SUFFIX.sub("", location or "").strip()


def season_from_month(value: Optional[str]) -> Optional[Season]:
    """Derive the season from a month name or abbreviation."""
    normalized = normalize_text(value)
    if normalized not in _MONTH_NAMES:
        return None
    return MONTH_SEASONS.get(normalized[:3])


def normalize_season(value: Optional[str]) -> Optional[Season]:
    """Derive a season from a term label.

    A season word anywhere in the label wins ("Summer 2026"); otherwise
    the first month name found decides ("June 2026 - August 2026").
    """
    words = _WORD.findall(normalize_text(value))
    for word in words:
        if word in SEASON_SYNONYMS:
            return SEASON_SYNONYMS[word]
    for word in words:
        season = season_from_month(word)
        if season is not None:
            return season
    return None


def normalize_seasons(value: Any) -> tuple[Season, ...]:
    """Canonicalize a list-or-delimited term field into distinct seasons."""
    seasons: list[Season] = []
    for item in canonical_list(value):
        season = normalize_season(item)
        if season is not None and season not in seasons:
            seasons.append(season)
    return tuple(seasons)


def normalize_state_code(value: Optional[str]) -> Optional[str]:
    """US state name or postal code to the two-letter code."""
    normalized = normalize_text(value).replace(".", "")
    if not normalized:
        return None
    if normalized.upper() in _VALID_STATE_CODES:
        return normalized.upper()
    return STATE_CODES.get(normalized)


def normalize_verification_tier(value: Optional[str]) -> Optional[VerificationTier]:
    """Map a tier string to the canonical tier, or None if unknown."""
    normalized = normalize_text(value)
    try:
        return VerificationTier(normalized)
    except ValueError:
        return None
