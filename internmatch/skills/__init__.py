"""Skill label resolution."""
from .catalog import SkillCatalog, SqlSkillCatalog, StaticSkillCatalog
from .resolver import SkillResolution, SkillResolver

__all__ = [
    "SkillCatalog",
    "SqlSkillCatalog",
    "StaticSkillCatalog",
    "SkillResolution",
    "SkillResolver",
]
