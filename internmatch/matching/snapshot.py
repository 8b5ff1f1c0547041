"""Match snapshot in the shape callers persist next to an application."""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from internmatch.matching.features import build_listing_features, build_profile_features
from internmatch.matching.matcher import MatchResult, MatchScorer, score_match


@dataclass(frozen=True)
class MatchSnapshot:
    """Persisted match: score, reasons, gaps and the algorithm version."""

    match_score: int
    match_reasons: tuple[str, ...]
    match_gaps: tuple[str, ...]
    matching_version: str

    @classmethod
    def from_result(cls, result: MatchResult) -> "MatchSnapshot":
        return cls(
            match_score=result.score,
            match_reasons=result.reasons,
            match_gaps=result.gaps,
            matching_version=result.matching_version,
        )

    def to_dict(self) -> dict:
        return {
            "match_score": self.match_score,
            "match_reasons": list(self.match_reasons),
            "match_gaps": list(self.match_gaps),
            "matching_version": self.matching_version,
        }


def build_application_match_snapshot(
    listing_record: Optional[Mapping[str, Any]],
    profile_record: Optional[Mapping[str, Any]],
    scorer: Optional[MatchScorer] = None,
) -> MatchSnapshot:
    """Canonicalize raw listing/profile rows and compute the snapshot to store."""
    listing = build_listing_features(listing_record)
    profile = build_profile_features(profile_record)
    result = scorer.score(listing, profile) if scorer else score_match(listing, profile)
    return MatchSnapshot.from_result(result)
