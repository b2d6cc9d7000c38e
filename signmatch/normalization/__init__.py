"""Text normalization layer for utterance matching.

This module provides:
- normalize: Canonical comparison form (case, punctuation, whitespace)
- VariantRule / canonicalize: Ordered alternate-phrasing corrections
- prepare: normalize followed by canonicalize, shared by input and catalog
"""

from .service import normalize, prepare
from .variants import DEFAULT_VARIANT_RULES, VariantRule, canonicalize

__all__ = [
    "normalize",
    "prepare",
    "canonicalize",
    "VariantRule",
    "DEFAULT_VARIANT_RULES",
]
