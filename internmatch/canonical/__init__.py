"""Canonicalization of heterogeneous raw fields."""
from .enums import (
    PAID_TIERS,
    Season,
    VerificationTier,
    WorkMode,
    normalize_season,
    normalize_seasons,
    normalize_state_code,
    normalize_verification_tier,
    normalize_work_mode,
    normalize_work_modes,
    season_from_month,
    strip_location_mode,
    work_mode_from_location,
)
from .hosts import email_domain, is_same_or_subdomain, normalize_host
from .text import (
    canonical_list,
    compact,
    normalize_label,
    normalize_text,
    parse_bool,
    parse_number,
    slugify,
)

__all__ = [
    "PAID_TIERS",
    "Season",
    "VerificationTier",
    "WorkMode",
    "canonical_list",
    "compact",
    "email_domain",
    "is_same_or_subdomain",
    "normalize_host",
    "normalize_label",
    "normalize_season",
    "normalize_seasons",
    "normalize_state_code",
    "normalize_text",
    "normalize_verification_tier",
    "normalize_work_mode",
    "normalize_work_modes",
    "parse_bool",
    "parse_number",
    "season_from_month",
    "slugify",
    "strip_location_mode",
    "work_mode_from_location",
]
