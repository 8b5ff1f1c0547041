"""Listing/profile match scoring with reasons and gaps."""
import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from internmatch.matching.features import ListingFeatures, ProfileFeatures
from internmatch.matching.weights import (
    DEFAULT_WEIGHTS,
    NEUTRAL_SHARE,
    MatchWeights,
    matching_version_for,
)

logger = logging.getLogger(__name__)

REMOTE_ONLY_GAP = "Requires in-person work but your profile is remote-only"

STATUS_MET = "met"
STATUS_PARTIAL = "partial"
STATUS_UNMET = "unmet"
STATUS_UNKNOWN = "unknown"


@dataclass(frozen=True)
class SignalContribution:
    """Points one factor contributed to the total."""

    signal_key: str
    max_points: float
    points_awarded: float
    status: str


@dataclass(frozen=True)
class MatchBreakdown:
    """Per-factor explanation of a match score."""

    contributions: tuple[SignalContribution, ...] = ()

    @property
    def raw_total(self) -> float:
        return sum(c.points_awarded for c in self.contributions)


@dataclass(frozen=True)
class MatchResult:
    """Result of scoring one listing against one profile."""

    listing_id: str
    score: int  # 0-100
    reasons: tuple[str, ...]
    gaps: tuple[str, ...]
    matching_version: str
    eligible: bool = True
    breakdown: MatchBreakdown = field(default_factory=MatchBreakdown)


@dataclass
class _Evaluation:
    key: str
    max_points: float
    points: float
    status: str
    reason: Optional[str] = None
    gap: Optional[str] = None


def describe_reason(label: str, points: float, details: str) -> str:
    return f"{label}: {details} (+{points:.1f})"


def _format_hours(value: float) -> str:
    return f"{value:g}"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class MatchScorer:
    """Score listings against candidate profiles.

    Stateless apart from the immutable weight table, so one instance can
    be shared by any number of concurrent callers.
    """

    def __init__(self, weights: MatchWeights = DEFAULT_WEIGHTS):
        """
        Initialize match scorer.

        Args:
            weights: Maximum points per factor
        """
        self.weights = weights
        self.version = matching_version_for(weights)

    def score(
        self,
        listing: Optional[ListingFeatures],
        profile: Optional[ProfileFeatures],
    ) -> MatchResult:
        """
        Score a listing against a profile.

        Missing listing or profile data never raises; the affected
        factors fall back to neutral credit.

        Args:
            listing: Canonical listing features
            profile: Canonical profile features

        Returns:
            MatchResult with score, ordered reasons/gaps and version
        """
        listing = listing or ListingFeatures(id="")
        profile = profile or ProfileFeatures()

        # Hard gap: no partial credit can offset it
        if profile.remote_only and listing.is_in_person:
            logger.debug("Listing %s excluded: remote-only profile", listing.id)
            return MatchResult(
                listing_id=listing.id,
                score=0,
                reasons=(),
                gaps=(REMOTE_ONLY_GAP,),
                matching_version=self.version,
                eligible=False,
            )

        evaluations = [
            self._skills(
                "skills_required",
                "Required skills",
                "Missing required skills",
                listing.required_skills,
                profile.skill_set,
            ),
            self._skills(
                "skills_preferred",
                "Preferred skills",
                "Missing preferred skills",
                listing.preferred_skills,
                profile.skill_set,
            ),
            self._major_alignment(listing, profile),
            self._availability(listing, profile),
            self._location_mode(listing, profile),
            self._term(listing, profile),
        ]

        breakdown = MatchBreakdown(
            contributions=tuple(
                SignalContribution(
                    signal_key=e.key,
                    max_points=e.max_points,
                    points_awarded=e.points,
                    status=e.status,
                )
                for e in evaluations
            )
        )

        # Stable sorts: ties keep factor order
        ranked_reasons = sorted(
            (e for e in evaluations if e.reason), key=lambda e: -e.points
        )
        ranked_gaps = sorted(
            (e for e in evaluations if e.gap), key=lambda e: -(e.max_points - e.points)
        )

        score = round_half_up(min(100.0, max(0.0, breakdown.raw_total)))
        logger.debug("Listing %s scored %d (%s)", listing.id, score, self.version)

        return MatchResult(
            listing_id=listing.id,
            score=score,
            reasons=tuple(e.reason for e in ranked_reasons),
            gaps=tuple(e.gap for e in ranked_gaps),
            matching_version=self.version,
            eligible=True,
            breakdown=breakdown,
        )

    def _unknown(self, key: str) -> _Evaluation:
        max_points = getattr(self.weights, key)
        return _Evaluation(key, max_points, max_points * NEUTRAL_SHARE, STATUS_UNKNOWN)

    @staticmethod
    def _status(points: float, max_points: float) -> str:
        if points >= max_points:
            return STATUS_MET
        return STATUS_PARTIAL if points > 0 else STATUS_UNMET

    def _skills(
        self,
        key: str,
        label: str,
        gap_label: str,
        wanted: frozenset[str],
        have: frozenset[str],
    ) -> _Evaluation:
        if not wanted:
            return self._unknown(key)

        max_points = getattr(self.weights, key)
        matched = wanted & have
        points = max_points * len(matched) / len(wanted)
        missing = sorted(wanted - have)

        return _Evaluation(
            key,
            max_points,
            points,
            self._status(points, max_points),
            reason=(
                describe_reason(label, points, f"{len(matched)}/{len(wanted)} matched")
                if matched else None
            ),
            gap=f"{gap_label}: {', '.join(missing)}" if missing else None,
        )

    def _major_alignment(self, listing: ListingFeatures, profile: ProfileFeatures) -> _Evaluation:
        key = "major_alignment"
        profile_majors = set(profile.majors)
        if not profile_majors or (not listing.majors and not listing.category):
            return self._unknown(key)

        max_points = self.weights.major_alignment
        hits = listing.majors & profile_majors
        if hits:
            return _Evaluation(
                key, max_points, max_points, STATUS_MET,
                reason=describe_reason(
                    "Major/category alignment", max_points, f"{len(hits)} major overlap"
                ),
            )

        if listing.category and any(major in listing.category for major in profile.majors):
            points = max_points * 0.5
            return _Evaluation(
                key, max_points, points, STATUS_PARTIAL,
                reason=describe_reason(
                    "Major/category alignment", points, f"category match ({listing.category})"
                ),
            )

        return _Evaluation(key, max_points, 0.0, STATUS_UNMET, gap="No major/category alignment")

    def _availability(self, listing: ListingFeatures, profile: ProfileFeatures) -> _Evaluation:
        key = "availability"
        listing_hours = listing.hours_per_week
        profile_hours = profile.availability_hours_per_week
        if listing_hours is None or profile_hours is None:
            return self._unknown(key)

        max_points = self.weights.availability
        if profile_hours >= listing_hours:
            return _Evaluation(
                key, max_points, max_points, STATUS_MET,
                reason=describe_reason(
                    "Availability fit", max_points, f"{_format_hours(listing_hours)} hrs/week"
                ),
            )

        points = max_points * profile_hours / listing_hours
        return _Evaluation(
            key, max_points, points, self._status(points, max_points),
            gap=(
                f"Hours exceed availability ({_format_hours(listing_hours)} > "
                f"{_format_hours(profile_hours)} hrs/week)"
            ),
        )

    def _location_mode(self, listing: ListingFeatures, profile: ProfileFeatures) -> _Evaluation:
        key = "location_mode"
        mode = listing.work_mode
        if mode is None:
            return self._unknown(key)

        max_points = self.weights.location_mode
        if profile.preferred_work_modes and mode not in profile.preferred_work_modes:
            return _Evaluation(
                key, max_points, 0.0, STATUS_UNMET, gap=f"Work mode mismatch ({mode.value})"
            )

        if listing.is_in_person and listing.location and profile.preferred_locations:
            location_hit = any(
                preferred in listing.location or listing.location in preferred
                for preferred in profile.preferred_locations
            )
            if not location_hit:
                return _Evaluation(
                    key, max_points, max_points * 0.5, STATUS_PARTIAL,
                    gap=f"In-person location mismatch ({listing.location})",
                )

        return _Evaluation(
            key, max_points, max_points, STATUS_MET,
            reason=describe_reason("Work mode fit", max_points, mode.value),
        )

    def _term(self, listing: ListingFeatures, profile: ProfileFeatures) -> _Evaluation:
        key = "term"
        season = listing.season
        if season is None or not profile.preferred_seasons:
            return self._unknown(key)

        max_points = self.weights.term
        if season in profile.preferred_seasons:
            return _Evaluation(
                key, max_points, max_points, STATUS_MET,
                reason=describe_reason("Term fit", max_points, season.value),
            )

        return _Evaluation(key, max_points, 0.0, STATUS_UNMET, gap=f"Term mismatch ({listing.term})")


_default_scorer = MatchScorer()


def score_match(
    listing: Optional[ListingFeatures],
    profile: Optional[ProfileFeatures],
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> MatchResult:
    """Score a listing against a profile with the given weight table."""
    scorer = _default_scorer if weights == DEFAULT_WEIGHTS else MatchScorer(weights)
    return scorer.score(listing, profile)
