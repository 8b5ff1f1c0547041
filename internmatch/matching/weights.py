"""Pinned weight table and matching version.

Any change to the weight values or to the factor rules in matcher.py
must bump MATCHING_VERSION so stored scores are recomputed before they
are compared with fresh ones.
"""
import hashlib
import json
from dataclasses import asdict, dataclass, fields

MATCHING_VERSION = "v2.0"

# Share of a factor's points awarded when its inputs are missing
NEUTRAL_SHARE = 0.5


@dataclass(frozen=True)
class MatchWeights:
    """Maximum points per factor. The default table totals 100."""

    skills_required: float = 30.0
    skills_preferred: float = 10.0
    major_alignment: float = 20.0
    availability: float = 15.0
    location_mode: float = 15.0
    term: float = 10.0

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"Weight {f.name} must be non-negative")

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    @property
    def total(self) -> float:
        return sum(self.as_dict().values())


DEFAULT_WEIGHTS = MatchWeights()

# Factor evaluation order, also the order of breakdown contributions
SIGNAL_KEYS: tuple[str, ...] = tuple(f.name for f in fields(MatchWeights))


def matching_version_for(weights: MatchWeights = DEFAULT_WEIGHTS) -> str:
    """Version tag for results computed with the given weight table.

    Non-default tables get a content hash suffix, e.g. "v2.0+w1a2b3c4d".
    """
    if weights == DEFAULT_WEIGHTS:
        return MATCHING_VERSION
    payload = json.dumps(weights.as_dict(), sort_keys=True).encode("utf-8")
    digest = hashlib.sha1(payload).hexdigest()[:8]
    return f"{MATCHING_VERSION}+w{digest}"


def is_stale(stored_version: str | None, weights: MatchWeights = DEFAULT_WEIGHTS) -> bool:
    """True when a stored result must be recomputed before comparison."""
    return stored_version != matching_version_for(weights)
