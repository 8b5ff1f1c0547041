"""Engine exceptions for Internmatch."""


class EngineError(Exception):
    """Base exception for scoring engine failures."""

    pass


class SkillLookupError(EngineError):
    """Raised when the skill catalog cannot be queried.

    Callers must treat this as "failed to compute", never as
    "every label is unknown".
    """

    def __init__(self, table: str, reason: str):
        self.table = table
        self.reason = reason
        super().__init__(f"Skill catalog lookup failed ({table}): {reason}")
