"""Text and list canonicalization shared by every scorer."""
import math
import re
from enum import Enum
from typing import Any, Optional

_WHITESPACE = re.compile(r"\s+")
_APOSTROPHES = re.compile(r"['’]")
_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")
_LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d+)?)")


def normalize_label(value: Any) -> str:
    """Trim and collapse internal whitespace, keeping the original casing.

    Non-string values normalize to "".
    """
    if not isinstance(value, str):
        return ""
    return _WHITESPACE.sub(" ", value).strip()


def normalize_text(value: Any) -> str:
    """Lowercased, whitespace-collapsed form used for comparisons."""
    return normalize_label(value).lower()


def _item_text(item: Any) -> str:
    if isinstance(item, Enum):
        return str(item.value)
    return str(item)


def canonical_list(value: Any, lowercase: bool = False) -> tuple[str, ...]:
    """Canonicalize a list-or-delimited-string field.

    Accepts a list/tuple/set of values, a comma-delimited string, or None.
    Enum members contribute their value. Entries are trimmed, blanks
    dropped, and duplicates removed keeping the first occurrence; sets
    are read in sorted order.

    Args:
        value: Raw field value
        lowercase: Lowercase entries before deduplication

    Returns:
        Tuple of canonical strings in first-seen order
    """
    if value is None:
        return ()

    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [_item_text(item) for item in value if item is not None]
    elif isinstance(value, (set, frozenset)):
        items = sorted(_item_text(item) for item in value if item is not None)
    else:
        return ()

    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        cleaned = normalize_label(item)
        if lowercase:
            cleaned = cleaned.lower()
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        result.append(cleaned)
    return tuple(result)


def slugify(value: str) -> str:
    """Lowercase slug: apostrophes removed, non-alphanumeric runs become '-'."""
    slug = _APOSTROPHES.sub("", value.strip().lower())
    slug = _NON_ALNUM_RUN.sub("-", slug)
    return slug.strip("-")


def compact(value: str) -> str:
    """Alphanumeric-only lowercase form ("React.js" -> "reactjs")."""
    return _NON_ALNUM.sub("", value.lower())


def parse_number(value: Any) -> Optional[float]:
    """Parse an int, float, or numeric-ish string ("20", "20 hrs").

    Returns None for bools, non-finite or overflowing numbers, and
    anything that does not start with a non-negative number.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        raw = value
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if not match:
            return None
        raw = match.group(1)
    else:
        return None

    try:
        number = float(raw)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


_TRUE_STRINGS = frozenset({"true", "yes", "y", "1", "on"})


def parse_bool(value: Any) -> bool:
    """Loose boolean: real bools, non-zero numbers, or "true"/"yes"/"1"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return normalize_text(value) in _TRUE_STRINGS
    return False
