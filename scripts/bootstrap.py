"""Shared setup for Internmatch scripts.

Usage:
    from scripts.bootstrap import start_script, load_yaml, settings
"""
import logging
import sys
from pathlib import Path

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import yaml

from config.settings import settings
from internmatch.logging_config import setup_logging
from internmatch.persistence import get_session, init_db, seed_skill_catalog

__all__ = [
    "settings",
    "get_session",
    "init_db",
    "seed_skill_catalog",
    "load_yaml",
    "start_script",
]


def start_script(name: str) -> logging.Logger:
    """Configure logging from settings and return the script's logger."""
    setup_logging()
    logger = logging.getLogger(name)
    logger.debug("Project root: %s, database: %s", _project_root, settings.database_url)
    return logger


def load_yaml(path: str | Path) -> dict:
    """Read a YAML mapping; an empty file yields {}."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data
