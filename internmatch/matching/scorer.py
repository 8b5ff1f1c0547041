"""Ranking of small listing batches for one profile."""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from internmatch.matching.features import ListingFeatures, ProfileFeatures
from internmatch.matching.matcher import MatchResult, MatchScorer
from internmatch.matching.scorer_protocol import Scorer
from internmatch.matching.weights import DEFAULT_WEIGHTS, MatchWeights

logger = logging.getLogger(__name__)


@dataclass
class RankedListing:
    """A listing with its match result."""

    listing: ListingFeatures
    match: MatchResult

    @property
    def score(self) -> int:
        return self.match.score


class ListingRanker:
    """Score and rank listings for a profile."""

    def __init__(self, scorer: Optional[Scorer] = None, min_score: float = 0):
        """
        Initialize listing ranker.

        Args:
            scorer: Scoring engine (defaults to MatchScorer with the pinned weights)
            min_score: Minimum score to include (0-100)
        """
        self.scorer = scorer or MatchScorer()
        self.min_score = min_score

    def score_listings(
        self,
        listings: Iterable[ListingFeatures],
        profile: ProfileFeatures,
    ) -> list[RankedListing]:
        """Score every listing, keeping input order."""
        return [
            RankedListing(listing=listing, match=self.scorer.score(listing, profile))
            for listing in listings
        ]

    def rank(
        self,
        listings: Iterable[ListingFeatures],
        profile: ProfileFeatures,
    ) -> list[RankedListing]:
        """
        Rank listings for a profile.

        Ineligible listings (hard gaps) and listings below min_score are
        dropped. Ties keep input order.

        Args:
            listings: Canonical listings to rank
            profile: Canonical profile

        Returns:
            List of RankedListing objects, sorted by score descending
        """
        ranked = [
            item
            for item in self.score_listings(listings, profile)
            if item.match.eligible and item.score >= self.min_score
        ]
        ranked.sort(key=lambda x: x.score, reverse=True)
        return ranked

    def excluded(
        self,
        listings: Iterable[ListingFeatures],
        profile: ProfileFeatures,
    ) -> list[RankedListing]:
        """Listings removed by hard gaps, in input order."""
        return [
            item
            for item in self.score_listings(listings, profile)
            if not item.match.eligible
        ]

    def filter_by_score(
        self,
        ranked: list[RankedListing],
        min_score: Optional[float] = None,
    ) -> list[RankedListing]:
        """Filter ranked listings by minimum score."""
        threshold = min_score if min_score is not None else self.min_score
        return [item for item in ranked if item.score >= threshold]

    def get_top(self, ranked: list[RankedListing], n: int = 10) -> list[RankedListing]:
        """Get top N listings by score."""
        return ranked[:n]


def rank_listings(
    listings: Iterable[ListingFeatures],
    profile: ProfileFeatures,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> list[RankedListing]:
    """Rank a small batch of listings with the given weight table."""
    return ListingRanker(MatchScorer(weights)).rank(listings, profile)
