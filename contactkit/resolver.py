"""
Short-link resolution for LinkedIn QR payloads.

Some QR codes and shared cards carry an ``lnkd.in`` link instead of the
profile URL; the slug only appears after following the redirect.
"""
import requests

from .utils import canonicalize_linkedin_url, is_short_link, norm


class ShortLinkResolver:
    """Follows LinkedIn short links to the URL they redirect to."""

    USER_AGENT = "contactkit/1.0"

    def __init__(self, session=None, timeout: float = 30):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.USER_AGENT})

    def resolve(self, url: str) -> str:
        """Return the final URL for a short link; other URLs pass through untouched."""
        url = norm(url)
        if not is_short_link(url):
            return url
        url = canonicalize_linkedin_url(url)
        resp = self.session.head(url, allow_redirects=True, timeout=self.timeout)
        if resp.status_code == 405:
            # Some edges refuse HEAD
            resp = self.session.get(url, allow_redirects=True, timeout=self.timeout)
        resp.raise_for_status()
        return resp.url or url
