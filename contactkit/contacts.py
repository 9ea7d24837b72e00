"""
Contact record helpers: QR capture, follow-up drafting and history lookup.
"""
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .models import ContactData, GeneratedMessage
from .names import reconstruct_name
from .utils import extract_linkedin_slug, is_linkedin_payload, norm

CONTEXT_PREVIEW_CHARS = 50


def contact_from_qr(qr_data: str) -> ContactData:
    """Build a contact from a scanned LinkedIn QR payload.

    Raises ValueError when the payload is not a LinkedIn code. A LinkedIn
    payload without a profile slug still yields a record carrying the URL,
    with the name left for the user to fill in.
    """
    data = norm(qr_data)
    if not is_linkedin_payload(data):
        raise ValueError("Not a LinkedIn QR code")

    slug = extract_linkedin_slug(data)
    if not slug:
        return ContactData(name="", linkedin_url=data)
    return ContactData(name=reconstruct_name(slug), linkedin_url=data)


def compose_follow_up(contact: ContactData, now: Optional[datetime] = None) -> GeneratedMessage:
    """Draft the follow-up note for a contact."""
    name = norm(contact.name)
    if not name:
        raise ValueError("Name is required")

    company = norm(contact.company)
    context = norm(contact.conversation_context)

    at_company = f" at {company}" if company else ""
    opener = f"It was great meeting you{at_company}!"
    if context:
        opener += f" I enjoyed our conversation about {context[:CONTEXT_PREVIEW_CHARS]}..."

    message = f"Hi {name},\n\n{opener}\n\nLet's stay in touch!\n\nBest regards"
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    return GeneratedMessage(message=message, timestamp=stamp)


def search_contacts(contacts: Iterable[ContactData], query: str) -> List[ContactData]:
    """Filter contacts by a case-insensitive match on name, title, company or email."""
    needle = norm(query).lower()
    if not needle:
        return list(contacts)
    matches: List[ContactData] = []
    for contact in contacts:
        haystack = " ".join([contact.name, contact.title, contact.company, contact.email]).lower()
        if needle in haystack:
            matches.append(contact)
    return matches


def parse_timestamp(timestamp: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z'."""
    value = norm(timestamp)
    if not value:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def format_contact_date(timestamp: Optional[str]) -> str:
    """Format as 'YYYY-MM-DD HH:MM' in the timestamp's own offset (no local-time conversion)."""
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        return ""
    return parsed.strftime("%Y-%m-%d %H:%M")
