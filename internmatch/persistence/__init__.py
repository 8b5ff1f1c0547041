"""Skill catalog persistence layer."""
from .database import get_session, init_db, seed_skill_catalog
from .models import Base, Skill, SkillAlias

__all__ = [
    "Base",
    "Skill",
    "SkillAlias",
    "init_db",
    "get_session",
    "seed_skill_catalog",
]
