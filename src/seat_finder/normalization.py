"""Name normalization helpers."""

from __future__ import annotations

import re
from typing import FrozenSet

import ftfy
from unidecode import unidecode


_MULTI_SPACE_PATTERN = re.compile(r"\s+")


def normalize(text: object) -> str:
    """Return a case- and accent-folded representation of `text` for matching."""

    if not isinstance(text, str) or not text:
        return ""

    # HTML unescaping would make a second pass change "&amp;amp;" again.
    fixed = ftfy.fix_text(text, unescape_html=False)
    ascii_friendly = unidecode(fixed).lower()
    collapsed = _MULTI_SPACE_PATTERN.sub(" ", ascii_friendly)
    return collapsed.strip()


def tokenize(text: object) -> FrozenSet[str]:
    """Return the set of normalized words in `text`."""

    return frozenset(token for token in normalize(text).split(" ") if token)
