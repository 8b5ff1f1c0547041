"""Scorer protocol for pluggable match scoring engines.

MatchScorer is the weighted-factor implementation; anything that
satisfies this protocol can be handed to ListingRanker instead.
"""
from typing import Protocol, runtime_checkable

from internmatch.matching.features import ListingFeatures, ProfileFeatures
from internmatch.matching.matcher import MatchResult


@runtime_checkable
class Scorer(Protocol):
    """Protocol for listing/profile match scoring engines."""

    def score(self, listing: ListingFeatures, profile: ProfileFeatures) -> MatchResult:
        """Score a single listing against a profile and return a MatchResult."""
        ...
