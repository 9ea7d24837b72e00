"""
Utility functions for text processing and URL handling.
"""
import json
import re
from typing import Dict, Any
from urllib.parse import unquote

from .models import LINKEDIN_DOMAINS, SHORT_LINK_DOMAINS

PROFILE_SLUG_RE = re.compile(r"linkedin\.com/in/([^/?#]+)", re.IGNORECASE)


def append_log(log_handle, payload: Dict[str, Any]) -> None:
    """Append JSON payload to log file handle."""
    if not log_handle:
        return
    try:
        log_handle.write(json.dumps(payload, ensure_ascii=False))
        log_handle.write("\n")
    except (OSError, TypeError, ValueError):
        # Logging must not break main flow
        pass


def norm(s: str) -> str:
    """Normalize string by stripping whitespace."""
    return (s or "").strip()


def truncate_text(text: str, limit: int = 400) -> str:
    """Truncate text to specified limit with ellipsis."""
    text = text or ""
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 3)] + "..."


def canonicalize_linkedin_url(url: str) -> str:
    """Canonicalize LinkedIn URL format."""
    url = (url or "").strip()
    if not url:
        return url
    url = re.sub(r"\s", "", url)
    if not url.lower().startswith("http"):
        url = "https://" + url.lstrip("/")
    if url.startswith("http://"):
        url = "https://" + url[len("http://"):]
    url = url.split("?", 1)[0].split("#", 1)[0]
    if url.endswith("/"):
        url = url[:-1]
    return url


def is_linkedin_payload(data: str) -> bool:
    """Check whether scanned QR text points at LinkedIn at all."""
    return "linkedin.com" in (data or "").lower()


def is_linkedin_profile(url: str) -> bool:
    """Check if URL is a LinkedIn profile."""
    u = (url or "").lower()
    return any(dom in u for dom in LINKEDIN_DOMAINS)


def is_short_link(url: str) -> bool:
    """Check if URL is a LinkedIn short link that needs a redirect lookup."""
    u = canonicalize_linkedin_url(url).lower()
    return any(u.startswith(f"https://{dom}/") or u.startswith(f"https://www.{dom}/") for dom in SHORT_LINK_DOMAINS)


def extract_linkedin_slug(url: str) -> str:
    """Return the percent-decoded path segment after ``linkedin.com/in/``, or ''."""
    m = PROFILE_SLUG_RE.search(norm(url))
    if not m:
        return ""
    return unquote(m.group(1)).strip()
