"""
Display-name reconstruction from LinkedIn profile slugs.

A slug such as ``stefaniemarrone-cpa-123`` carries the person's name mixed
with numeric ids, credential suffixes and filler words. ``reconstruct_name``
strips the noise, splits concatenated names where it can and returns a
best-effort, always non-empty display name meant to pre-fill an editable
form field.
"""
import re
from typing import Callable, List, Optional, Sequence

from .models import (
    COMPOUND_TOKEN_MIN_LENGTH,
    FALLBACK_NAME,
    FIRST_NAME_PARTS,
    LAST_NAME_PARTS,
    LONG_NAME_WORDS,
    MAX_NAME_LENGTH,
    MAX_NAME_WORDS,
    MIDPOINT_SPLIT_MAX_LENGTH,
    MIDPOINT_SPLIT_MIN_LENGTH,
    MIN_NAME_PART_LENGTH,
    PROFESSIONAL_SUFFIXES,
    STOPWORDS,
)
from .utils import norm

# Applied once each, in this order
SUFFIX_PATTERNS = (
    re.compile(r"-\d+$"),
    re.compile(r"-[0-9a-f]{8,}$", re.IGNORECASE),
    re.compile(r"-(?:%s)$" % "|".join(PROFESSIONAL_SUFFIXES), re.IGNORECASE),
)

SEPARATOR_RE = re.compile(r"[\s_.'-]")
CASE_BOUNDARY_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")

MC_RE = re.compile(r"\bMc([a-z])")
O_APOSTROPHE_RE = re.compile(r"\bO'([a-z])")
PARTICLE_RE = re.compile(r"(?<!\S)(Van|De)(?= [A-Z])")

SplitStrategy = Callable[[str], Optional[List[str]]]


def strip_suffixes(slug: str) -> str:
    """Drop a trailing numeric id, hex hash and professional suffix (once each)."""
    for pattern in SUFFIX_PATTERNS:
        slug = pattern.sub("", slug, count=1)
    return slug


def capitalize(word: str) -> str:
    """Uppercase the first letter, leave the rest as written."""
    return word[:1].upper() + word[1:]


def _dictionary_split(token: str, names: Sequence[str]) -> Optional[List[str]]:
    lowered = token.lower()
    for name in names:
        idx = lowered.find(name)
        if idx < 0:
            continue
        matched = token[idx:idx + len(name)]
        remainder = token[:idx] + token[idx + len(name):]
        if len(remainder) < MIN_NAME_PART_LENGTH:
            # First hit decides; a too-short leftover ends this pass
            return None
        if idx == 0:
            return [matched, remainder]
        return [remainder, matched]
    return None


def split_on_first_names(token: str) -> Optional[List[str]]:
    """Split around the first known first name found in the token."""
    return _dictionary_split(token, FIRST_NAME_PARTS)


def split_on_last_names(token: str) -> Optional[List[str]]:
    """Split around the first known last name found in the token."""
    return _dictionary_split(token, LAST_NAME_PARTS)


def split_on_case(token: str) -> Optional[List[str]]:
    """Split ``AnnaGreen``-style tokens at lower-to-upper transitions."""
    parts = [p for p in CASE_BOUNDARY_RE.split(token) if p]
    if len(parts) < 2:
        return None
    if any(len(p) < MIN_NAME_PART_LENGTH for p in parts):
        return None
    return parts


def split_at_midpoint(token: str) -> Optional[List[str]]:
    """Halve medium-length tokens; longer ones are left whole."""
    if not MIDPOINT_SPLIT_MIN_LENGTH < len(token) <= MIDPOINT_SPLIT_MAX_LENGTH:
        return None
    mid = len(token) // 2
    head, tail = token[:mid], token[mid:]
    if len(head) < MIN_NAME_PART_LENGTH or len(tail) < MIN_NAME_PART_LENGTH:
        return None
    return [head, tail]


COMPOUND_STRATEGIES: Sequence[SplitStrategy] = (
    split_on_first_names,
    split_on_last_names,
    split_on_case,
    split_at_midpoint,
)


def split_compound(token: str) -> List[str]:
    """Split a token assumed to be concatenated names.

    Strategies run in order and the first one that returns parts wins.
    When none applies the token comes back as a single-element list.
    """
    for strategy in COMPOUND_STRATEGIES:
        parts = strategy(token)
        if parts:
            return parts
    return [token]


def is_noise_token(token: str) -> bool:
    """True for initials, filler words, numbers and opaque ids."""
    if len(token) <= 1:
        return True
    if token.lower() in STOPWORDS:
        return True
    if token.isdigit():
        return True
    has_digit = any(ch.isdigit() for ch in token)
    has_alpha = any(ch.isalpha() for ch in token)
    if has_digit and has_alpha and len(token) > 3:
        return True
    return False


def token_to_words(token: str) -> List[str]:
    """Turn one slug token into zero or more capitalized words."""
    if is_noise_token(token):
        return []
    if len(token) > COMPOUND_TOKEN_MIN_LENGTH and not SEPARATOR_RE.search(token):
        parts = split_compound(token)
        if len(parts) >= 2:
            return [capitalize(p) for p in parts]
    return [capitalize(token)]


def polish_name(name: str) -> str:
    """Fix casing around Mc, O' and the van/de particles."""
    name = MC_RE.sub(lambda m: "Mc" + m.group(1).upper(), name)
    name = O_APOSTROPHE_RE.sub(lambda m: "O'" + m.group(1).upper(), name)
    name = PARTICLE_RE.sub(lambda m: m.group(1).lower(), name)
    return name


def limit_length(name: str) -> str:
    """Keep the name within MAX_NAME_LENGTH characters."""
    if len(name) <= MAX_NAME_LENGTH:
        return name
    words = name.split()[:LONG_NAME_WORDS]
    while len(words) > 1 and len(" ".join(words)) > MAX_NAME_LENGTH:
        words.pop()
    return " ".join(words)[:MAX_NAME_LENGTH].rstrip()


def reconstruct_name(slug: str) -> str:
    """Best-effort display name for a LinkedIn slug; never empty."""
    cleaned = strip_suffixes(norm(slug))
    words: List[str] = []
    for token in cleaned.split("-"):
        words.extend(token_to_words(token))

    name = " ".join(" ".join(words).split()[:MAX_NAME_WORDS])
    name = limit_length(polish_name(name))
    return name or FALLBACK_NAME
