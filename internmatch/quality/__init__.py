"""Listing quality scoring."""
from .scorer import (
    FLAG_DOMAIN_MISMATCH,
    FLAG_DUPLICATE_CONTENT,
    FLAG_HIGH_VOLUME,
    QualityResult,
    QualitySignalInput,
    compute_listing_quality,
)

__all__ = [
    "FLAG_DOMAIN_MISMATCH",
    "FLAG_DUPLICATE_CONTENT",
    "FLAG_HIGH_VOLUME",
    "QualityResult",
    "QualitySignalInput",
    "compute_listing_quality",
]
