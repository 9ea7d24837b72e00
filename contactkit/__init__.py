"""
LinkedIn contact capture helpers.

This package turns scanned LinkedIn profile links into contact records,
reconstructing a readable display name from the profile slug, and drafts
follow-up notes for captured contacts.
"""

__version__ = "1.0.0"

# Main exports
from .models import ContactData, GeneratedMessage, FALLBACK_NAME
from .names import reconstruct_name, split_compound
from .contacts import contact_from_qr, compose_follow_up, search_contacts, format_contact_date
from .resolver import ShortLinkResolver
from .utils import (
    norm, truncate_text, canonicalize_linkedin_url,
    is_linkedin_profile, extract_linkedin_slug,
)

__all__ = [
    # Models
    'ContactData', 'GeneratedMessage', 'FALLBACK_NAME',
    # Names
    'reconstruct_name', 'split_compound',
    # Contacts
    'contact_from_qr', 'compose_follow_up', 'search_contacts', 'format_contact_date',
    # Resolver
    'ShortLinkResolver',
    # Utils
    'norm', 'truncate_text', 'canonicalize_linkedin_url',
    'is_linkedin_profile', 'extract_linkedin_slug',
]
