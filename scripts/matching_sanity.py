#!/usr/bin/env python3
"""Matching sanity check over the fixture students and listings.

Ranks every fixture listing for every fixture student and logs scores,
top reasons, gaps and hard-filter exclusions.

Usage:
    python -m scripts.matching_sanity [path/to/fixtures.yaml]
"""
import argparse
import logging
import sys

from scripts.bootstrap import load_yaml, settings, start_script
from internmatch.matching import (
    DEFAULT_WEIGHTS,
    MATCHING_VERSION,
    ListingRanker,
    build_listing_features,
    build_profile_features,
)

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Matching sanity check")
    parser.add_argument(
        "fixtures",
        nargs="?",
        default=str(settings.matching_fixtures_file),
        help="YAML file with 'students' and 'listings'",
    )
    args = parser.parse_args()

    start_script(__name__)

    data = load_yaml(args.fixtures)

    listings = [build_listing_features(record) for record in data.get("listings", [])]
    ranker = ListingRanker()

    logger.info("=== Matching %s sanity check ===", MATCHING_VERSION)
    logger.info("Weights: %s", DEFAULT_WEIGHTS.as_dict())

    for student in data.get("students", []):
        profile = build_profile_features(student.get("profile"))
        logger.info("")
        logger.info("=== %s ===", student.get("name") or student.get("id"))

        for index, item in enumerate(ranker.rank(listings, profile), start=1):
            logger.info("%d. %s  score=%d", index, item.listing.id, item.score)
            if item.match.reasons:
                logger.info("   reasons: %s", " | ".join(item.match.reasons[:2]))
            if item.match.gaps:
                logger.info("   gaps: %s", " | ".join(item.match.gaps))

        excluded = ranker.excluded(listings, profile)
        if excluded:
            logger.info("   excluded by hard filters:")
            for item in excluded:
                logger.info("   - %s: %s", item.listing.id, "; ".join(item.match.gaps))

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        logger.error("Error: %s", e)
        sys.exit(1)
