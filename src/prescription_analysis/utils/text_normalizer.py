# ============================================================================
# src/prescription_analysis/utils/text_normalizer.py
# ============================================================================
"""
Text Normalization Utilities

Cleans up OCR text before keyword matching:
- Lowercases
- Replaces punctuation with spaces
- Collapses whitespace
"""

import re
from functools import lru_cache
from typing import Pattern

_PUNCTUATION = re.compile(r'[^\w\s]')
_WHITESPACE = re.compile(r'\s+')


def normalize_text(text: str) -> str:
    """
    Normalize text for whole-word matching.

    "Pt. has HTN/DM-2" -> "pt has htn dm 2"
    """
    if not text:
        return ""
    text = _PUNCTUATION.sub(' ', text.lower())
    return _WHITESPACE.sub(' ', text).strip()


def normalize_line_endings(text: str) -> str:
    """Convert CRLF / CR line endings to LF."""
    return text.replace('\r\n', '\n').replace('\r', '\n')


@lru_cache(maxsize=1024)
def whole_word_pattern(term: str) -> Pattern:
    """
    Compiled case-insensitive whole-word pattern for a literal term.

    Cached: dictionary terms are matched against every document.
    """
    return re.compile(rf'\b{re.escape(term)}\b', re.IGNORECASE)


def unique_preserving_order(items) -> list:
    """De-duplicate while keeping first occurrence order."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
