"""Hostname and email-domain normalization for cross-field checks."""
import re
from typing import Optional
from urllib.parse import urlsplit

_VALID_HOST = re.compile(r"^[a-z0-9-]+(\.[a-z0-9-]+)*$")


def _strip_www(host: str) -> str:
    return host[4:] if host.startswith("www.") else host


def normalize_host(url: Optional[str]) -> str:
    """Hostname of a URL or bare domain, lowercased, without "www.".

    Malformed input normalizes to "" instead of raising.
    """
    value = (url or "").strip()
    if not value:
        return ""
    if not value.lower().startswith(("http://", "https://")):
        value = f"https://{value}"

    try:
        host = urlsplit(value).hostname or ""
    except ValueError:
        return ""

    host = host.lower()
    if not _VALID_HOST.match(host):
        return ""
    return _strip_www(host)


def email_domain(email: Optional[str]) -> str:
    """Domain part of an email address, lowercased, without "www."."""
    value = (email or "").strip().lower()
    at = value.rfind("@")
    if at < 0:
        return ""
    return _strip_www(value[at + 1:])


def is_same_or_subdomain(host: str, parent: str) -> bool:
    """True when host equals parent or is a subdomain of it."""
    if not host or not parent:
        return False
    return host == parent or host.endswith(f".{parent}")
