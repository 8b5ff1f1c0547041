"""Listing trust score and integrity flags from employer signals."""
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from internmatch.canonical import (
    PAID_TIERS,
    email_domain,
    is_same_or_subdomain,
    normalize_host,
    normalize_verification_tier,
    parse_bool,
    parse_number,
)

logger = logging.getLogger(__name__)

# Point deltas
WEBSITE_POINTS = 15
OVERVIEW_POINTS = 12
LOGO_POINTS = 8
PAID_TIER_POINTS = 20
EMAIL_DOMAIN_MATCH_POINTS = 10
PAY_POINTS = 12
HOURS_POINTS = 8
LOCATION_POINTS = 8
HIGH_VOLUME_PENALTY = 10
DUPLICATE_CONTENT_PENALTY = 10
DOMAIN_MISMATCH_PENALTY = 20

# Thresholds (strictly greater than)
HIGH_VOLUME_THRESHOLD = 10
DUPLICATE_DESCRIPTION_THRESHOLD = 2

FLAG_HIGH_VOLUME = "High posting volume in short window"
FLAG_DUPLICATE_CONTENT = "Potential duplicate listing content"
FLAG_DOMAIN_MISMATCH = "External apply URL domain does not match employer website"


@dataclass(frozen=True)
class QualitySignalInput:
    """Employer and listing signals for one listing."""

    employer_website: Optional[str] = None
    employer_overview: Optional[str] = None
    employer_logo_url: Optional[str] = None
    verification_tier: Optional[str] = None
    employer_contact_email: Optional[str] = None
    pay_present: bool = False
    hours_present: bool = False
    location_present: bool = False
    external_apply_url: Optional[str] = None
    employer_post_count: int = 0
    duplicate_description_count: int = 0

    # camelCase keys used by the web application
    _CAMEL_KEYS = {
        "employer_website": "employerWebsite",
        "employer_overview": "employerOverview",
        "employer_logo_url": "employerLogoUrl",
        "verification_tier": "verificationTier",
        "employer_contact_email": "employerContactEmail",
        "pay_present": "payPresent",
        "hours_present": "hoursPresent",
        "location_present": "locationPresent",
        "external_apply_url": "externalApplyUrl",
        "employer_post_count": "employerPostCount",
        "duplicate_description_count": "duplicateDescriptionCount",
    }

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> "QualitySignalInput":
        """Build from a snake_case or camelCase mapping; unknown keys are ignored."""
        if not record:
            return cls()

        def pick(name: str) -> Any:
            if name in record:
                return record[name]
            return record.get(cls._CAMEL_KEYS[name])

        def text(name: str) -> Optional[str]:
            value = pick(name)
            return value if isinstance(value, str) else None

        def count(name: str) -> int:
            value = parse_number(pick(name))
            return int(value) if value is not None else 0

        return cls(
            employer_website=text("employer_website"),
            employer_overview=text("employer_overview"),
            employer_logo_url=text("employer_logo_url"),
            verification_tier=text("verification_tier"),
            employer_contact_email=text("employer_contact_email"),
            pay_present=parse_bool(pick("pay_present")),
            hours_present=parse_bool(pick("hours_present")),
            location_present=parse_bool(pick("location_present")),
            external_apply_url=text("external_apply_url"),
            employer_post_count=count("employer_post_count"),
            duplicate_description_count=count("duplicate_description_count"),
        )


@dataclass(frozen=True)
class QualityResult:
    """Trust score, flags in evaluation order, and the domain-mismatch bit."""

    score: int  # 0-100
    flags: tuple[str, ...]
    external_domain_mismatch: bool

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "flags": list(self.flags),
            "externalDomainMismatch": self.external_domain_mismatch,
        }


def _present(value: Optional[str]) -> bool:
    return bool((value or "").strip())


def compute_listing_quality(signals: Optional[QualitySignalInput]) -> QualityResult:
    """
    Compute the listing quality score.

    Starts from 0 and applies fixed deltas per signal; the result is
    clamped to [0, 100].

    Args:
        signals: Employer/listing signal bundle (None scores as empty)

    Returns:
        QualityResult with score, flags and domain-mismatch indicator
    """
    signals = signals or QualitySignalInput()
    score = 0
    flags: list[str] = []

    tier = normalize_verification_tier(signals.verification_tier)
    paid_tier = tier in PAID_TIERS

    if _present(signals.employer_website):
        score += WEBSITE_POINTS
    if _present(signals.employer_overview):
        score += OVERVIEW_POINTS
    if _present(signals.employer_logo_url):
        score += LOGO_POINTS
    if paid_tier:
        score += PAID_TIER_POINTS

    website_host = normalize_host(signals.employer_website)
    apply_host = normalize_host(signals.external_apply_url)
    mail_domain = email_domain(signals.employer_contact_email)

    if is_same_or_subdomain(mail_domain, website_host):
        score += EMAIL_DOMAIN_MATCH_POINTS

    if signals.pay_present:
        score += PAY_POINTS
    if signals.hours_present:
        score += HOURS_POINTS
    if signals.location_present:
        score += LOCATION_POINTS

    if signals.employer_post_count > HIGH_VOLUME_THRESHOLD:
        flags.append(FLAG_HIGH_VOLUME)
        score -= HIGH_VOLUME_PENALTY
    if signals.duplicate_description_count > DUPLICATE_DESCRIPTION_THRESHOLD:
        flags.append(FLAG_DUPLICATE_CONTENT)
        score -= DUPLICATE_CONTENT_PENALTY

    external_domain_mismatch = bool(
        apply_host and website_host and not is_same_or_subdomain(apply_host, website_host)
    )
    if external_domain_mismatch:
        flags.append(FLAG_DOMAIN_MISMATCH)
        score -= DOMAIN_MISMATCH_PENALTY

    # Informational flag, no score delta
    if paid_tier and not signals.pay_present:
        flags.append(f"{tier.value.capitalize()}-tier listing missing pay range")

    score = max(0, min(100, score))
    logger.debug("Listing quality %d with %d flags", score, len(flags))

    return QualityResult(
        score=score,
        flags=tuple(flags),
        external_domain_mismatch=external_domain_mismatch,
    )
