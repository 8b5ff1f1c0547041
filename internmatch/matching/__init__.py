"""Listing/profile matching and scoring."""
from .completeness import (
    MatchingCoverage,
    ProfileCompleteness,
    listing_coverage,
    minimum_profile_completeness,
    profile_coverage,
)
from .features import (
    ListingFeatures,
    ProfileFeatures,
    build_listing_features,
    build_profile_features,
)
from .matcher import MatchBreakdown, MatchResult, MatchScorer, SignalContribution, score_match
from .scorer import ListingRanker, RankedListing, rank_listings
from .scorer_protocol import Scorer
from .snapshot import MatchSnapshot, build_application_match_snapshot
from .weights import (
    DEFAULT_WEIGHTS,
    MATCHING_VERSION,
    SIGNAL_KEYS,
    MatchWeights,
    is_stale,
    matching_version_for,
)

__all__ = [
    "DEFAULT_WEIGHTS",
    "MATCHING_VERSION",
    "SIGNAL_KEYS",
    "ListingFeatures",
    "ListingRanker",
    "MatchBreakdown",
    "MatchResult",
    "MatchScorer",
    "MatchSnapshot",
    "MatchWeights",
    "MatchingCoverage",
    "ProfileCompleteness",
    "ProfileFeatures",
    "RankedListing",
    "Scorer",
    "SignalContribution",
    "build_application_match_snapshot",
    "build_listing_features",
    "build_profile_features",
    "is_stale",
    "listing_coverage",
    "matching_version_for",
    "minimum_profile_completeness",
    "profile_coverage",
    "rank_listings",
    "score_match",
]
