"""
Ticket identifier extraction.

Stands in for OCR: the identifier is pulled out of free text with an ordered
list of patterns. Real image-to-text extraction would feed its output here.
"""

import re
from typing import Optional, Pattern, Tuple

# Colon, dash or any Unicode space (no-break and ideographic spaces show up in
# OCR output and pasted text). Spelled out because re.ASCII narrows \s.
_SEPARATOR = (
    r"[:\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff-]*"
)

# Ordered by priority; the first pattern that matches wins.
TICKET_ID_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"TICKET" + _SEPARATOR + r"([A-Z0-9]{6,12})", re.IGNORECASE | re.ASCII),
    re.compile(r"ID" + _SEPARATOR + r"([A-Z0-9]{6,12})", re.IGNORECASE | re.ASCII),
    re.compile(r"\b([A-Z0-9]{8,12})\b", re.ASCII),
)

_NON_ALPHANUMERIC = re.compile(r"[^A-Z0-9]")


def normalize_identifier(value: Optional[str]) -> str:
    """Upper-case and drop everything that is not A-Z or 0-9."""
    if not value:
        return ""
    return _NON_ALPHANUMERIC.sub("", value.upper())


def extract_identifier(text: Optional[str]) -> str:
    """
    Return the most likely ticket identifier found in ``text``.

    Falls back to the normalized full text when no pattern matches, so the
    result can be empty but is never None.
    """
    if not text:
        return ""

    for pattern in TICKET_ID_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1):
            return match.group(1).upper()

    return normalize_identifier(text)
