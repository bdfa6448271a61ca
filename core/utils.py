"""Utility functions for vocadrill application."""

import re
import unicodedata

COMBINING_MARKS = re.compile('[\u0300-\u036f]')
APOSTROPHE_PATTERN = "['’]?"
WHITESPACE_PATTERN = r'\s*'


def normalize_string(text: str) -> str:
    """Lowercase, decompose (NFD) and strip diacritical marks."""
    return COMBINING_MARKS.sub('', unicodedata.normalize('NFD', text.lower()))


def build_answer_pattern(expected: str) -> re.Pattern:
    """Build an anchored matcher for a single expected answer.

    Apostrophes become optional (straight or curly), spaces match any
    amount of whitespace, everything else must match literally.
    """
    parts = []
    for ch in normalize_string(expected.strip()):
        if ch in "'’":
            parts.append(APOSTROPHE_PATTERN)
        elif ch == ' ':
            parts.append(WHITESPACE_PATTERN)
        else:
            parts.append(re.escape(ch))
    return re.compile('^' + ''.join(parts) + '$', re.IGNORECASE)


def split_alternatives(expected: str) -> list[str]:
    """Split a comma-separated answer ('autumn,fall') into alternatives."""
    return [alt.strip() for alt in expected.split(',') if alt.strip()]


def answers_match(user_input: str, expected: str) -> bool:
    """Check a typed answer against the expected translation."""
    normalized_input = normalize_string(user_input.strip())
    for alternative in split_alternatives(expected):
        if build_answer_pattern(alternative).match(normalized_input):
            return True
    return False


def check_answer(user_input: str, expected: str) -> dict:
    """Pure answer check. Returns {'correct': bool}."""
    return {'correct': answers_match(user_input, expected)}
