"""Best-of-N candidate selection over an ordered phrase catalog."""

from typing import Any, Callable, Optional, Sequence, Tuple

from signmatch.normalization import VariantRule, prepare

from .distance import similarity

NO_MATCH_SCORE = -1.0

TextKey = Callable[[Any], str]


def candidate_text(candidate: Any) -> str:
    """Return the comparable text of a catalog entry.

    Plain strings are their own text; any other entry must expose ``text``.
    """
    if isinstance(candidate, str):
        return candidate
    return getattr(candidate, "text", None) or ""


def select_best(
    normalized_input: str,
    catalog: Sequence[Any],
    rules: Sequence[VariantRule] = (),
    key: Optional[TextKey] = None,
) -> Tuple[Optional[Any], float]:
    """Return the catalog entry most similar to normalized_input and its score.

    Each entry is prepared through the same normalize/variant pipeline as the
    input before scoring. The running best is replaced only on a strict
    improvement, so among equally similar entries the earliest one wins:
    catalog order is priority order.

    Args:
        normalized_input: Input already normalized and variant-corrected
        catalog: Ordered phrases (strings or objects with a ``text`` field)
        rules: Variant rules applied to each entry
        key: Optional text accessor overriding candidate_text

    Returns:
        (best entry, score); (None, -1.0) for an empty catalog
    """
    text_of = key or candidate_text
    best_candidate = None
    best_score = NO_MATCH_SCORE

    for candidate in catalog:
        score = similarity(normalized_input, prepare(text_of(candidate), rules))
        if score > best_score:
            best_score = score
            best_candidate = candidate

    return best_candidate, best_score
