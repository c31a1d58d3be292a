"""Normalization functions for sign-word sheet ingestion.

Scalar helpers accept str | None and return the appropriate type or None.
"""

from __future__ import annotations

import re
import unicodedata
from enum import Enum


class VideoKind(str, Enum):
    WORD = "word"
    SENTENCE = "sentence"


_TAG_SPLIT_RE = re.compile(r"[,;]")


# ---------------------------------------------------------------------------
# Rule 1: trim
# ---------------------------------------------------------------------------

def trim(value: str | None) -> str | None:
    """Strip leading/trailing whitespace; treat empty string as None."""
    if value is None:
        return None
    v = value.strip()
    return v if v else None


# ---------------------------------------------------------------------------
# Rule 2: blank_to_empty
# ---------------------------------------------------------------------------

def blank_to_empty(value: str | None) -> str:
    """Like trim, but blank comes back as '' instead of None."""
    return trim(value) or ""


# ---------------------------------------------------------------------------
# Rule 3: split_tags
# ---------------------------------------------------------------------------

def split_tags(value: str | None) -> list[str]:
    """Split a tag cell on ',' or ';'.

    Pieces are trimmed and empty pieces dropped; order is preserved and
    duplicates are kept.
    """
    if not value:
        return []
    return [t.strip() for t in _TAG_SPLIT_RE.split(value) if t.strip()]


# ---------------------------------------------------------------------------
# Rule 4: normalize_video_kind
# ---------------------------------------------------------------------------

def normalize_video_kind(value: str | None) -> VideoKind:
    """'sentence' in any casing → SENTENCE; everything else → WORD."""
    if value is not None and value.lower() == VideoKind.SENTENCE.value:
        return VideoKind.SENTENCE
    return VideoKind.WORD


# ---------------------------------------------------------------------------
# Rule 5: collation_key  (catalog ordering)
# ---------------------------------------------------------------------------

def collation_key(value: str) -> tuple[str, str]:
    """Sort key for display words.

    Decompose unicode, drop combining marks and casefold so that accented
    and cased variants sort next to their base form.  Hangul syllables
    decompose to conjoining jamo, which keeps dictionary (가나다) order.
    The raw value breaks ties so the ordering is total.
    """
    v = unicodedata.normalize("NFKD", value)
    v = "".join(c for c in v if not unicodedata.combining(c))
    return (v.casefold(), value)
