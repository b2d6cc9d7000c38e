"""Variant rules that rewrite alternate phrasings to one canonical spelling.

Rules are plain value objects (pattern text + replacement). Compiled regular
expressions are derived on demand and cached, so canonicalization stays a pure
function that can be applied repeatedly to live input and catalog entries.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Pattern, Sequence, Tuple


@dataclass(frozen=True)
class VariantRule:
    """A single pattern -> canonical replacement correction.

    Attributes:
        pattern: Literal text to look for (matched case-insensitively)
        replacement: Canonical text substituted for every occurrence
        whole_word: Only match at word boundaries when True; any substring otherwise
    """

    pattern: str
    replacement: str
    whole_word: bool = True

    def apply(self, text: str) -> str:
        """Return text with every occurrence of the pattern replaced."""
        if not self.pattern:
            return text
        compiled = _compile(self.pattern, self.whole_word)
        return compiled.sub(lambda _match: self.replacement, text)


@lru_cache(maxsize=256)
def _compile(pattern: str, whole_word: bool) -> Pattern[str]:
    escaped = re.escape(pattern)
    if whole_word:
        escaped = rf"\b{escaped}\b"
    return re.compile(escaped, re.IGNORECASE)


def canonicalize(text: str, rules: Sequence[VariantRule]) -> str:
    """Apply rules in order, each one to the previous rule's output.

    A rule that never matches is a no-op.

    Example:
        >>> canonicalize("what are doing", DEFAULT_VARIANT_RULES)
        'what are you doing'
    """
    for rule in rules:
        text = rule.apply(text)
    return text


# Rules are expressed in normalized form: apostrophes have already been
# turned into spaces by the time they run.
DEFAULT_VARIANT_RULES: Tuple[VariantRule, ...] = (
    VariantRule("what are doing", "what are you doing"),
    VariantRule("dont", "don t"),
)
