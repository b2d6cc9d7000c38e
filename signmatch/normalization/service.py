"""Text normalization for utterance and phrase comparison.

This module implements the canonical comparison form used everywhere in the
matcher:
1. Missing input becomes the empty string
2. Lower-case and trim
3. Each run of Unicode punctuation/symbol characters becomes one space
4. Each run of whitespace becomes one space (and the ends are trimmed again)

``prepare`` chains normalization with variant canonicalization; it is applied
to live utterances and catalog phrases alike so both sides of a comparison go
through the same pipeline.
"""

import re
import unicodedata
from typing import Optional, Sequence

from .variants import VariantRule, canonicalize

_WHITESPACE_RE = re.compile(r"\s+")


def _is_punctuation_or_symbol(char: str) -> bool:
    """Return True for Unicode categories P* (punctuation) and S* (symbols)."""
    return unicodedata.category(char)[0] in ("P", "S")


def _replace_punctuation_runs(text: str) -> str:
    """Replace each maximal run of punctuation/symbol characters with one space."""
    parts = []
    in_run = False
    for char in text:
        if _is_punctuation_or_symbol(char):
            if not in_run:
                parts.append(" ")
                in_run = True
        else:
            parts.append(char)
            in_run = False
    return "".join(parts)


def normalize(text: Optional[str]) -> str:
    """Canonicalize text into its comparison form.

    Total over all strings, including empty and non-ASCII input, and
    idempotent: ``normalize(normalize(x)) == normalize(x)``.

    Args:
        text: Raw text (None is treated as empty)

    Returns:
        Lower-cased text without punctuation/symbols, single-spaced, trimmed

    Example:
        >>> normalize("  How ARE you?!  ")
        'how are you'
    """
    if not text:
        return ""

    normalized = text.lower().strip()
    normalized = _replace_punctuation_runs(normalized)
    normalized = _WHITESPACE_RE.sub(" ", normalized)

    # Punctuation at either end leaves a space behind after replacement.
    return normalized.strip()


def prepare(text: Optional[str], rules: Sequence[VariantRule] = ()) -> str:
    """Normalize text and then apply variant rules to the normalized form.

    Args:
        text: Raw utterance or catalog phrase
        rules: Ordered variant rules

    Returns:
        Normalized, variant-corrected text ready for scoring
    """
    return canonicalize(normalize(text), rules)
