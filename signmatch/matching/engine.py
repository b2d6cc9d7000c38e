"""Utterance-to-phrase matching engine.

This module implements the matching pipeline that:
1. Normalizes the raw utterance and applies variant rules
2. Scores every catalog entry through the same pipeline
3. Accepts the best entry when its similarity reaches the threshold
"""

import logging
from typing import Any, Optional, Sequence

from signmatch.logging import get_logger
from signmatch.normalization import DEFAULT_VARIANT_RULES, VariantRule, prepare

from .models import MatchResult
from .selector import select_best

logger = get_logger(__name__, component="matching")

DEFAULT_THRESHOLD = 0.8


class MatchEngine:
    """Matches finalized utterances against an ordered phrase catalog.

    The engine holds only read-only configuration (catalog, variant rules,
    threshold) and can be shared freely. It works with any ordered catalog of
    strings or objects exposing a ``text`` field, which is how the same engine
    also picks fallback audio samples.
    """

    def __init__(
        self,
        catalog: Sequence[Any] = (),
        rules: Sequence[VariantRule] = DEFAULT_VARIANT_RULES,
        threshold: float = DEFAULT_THRESHOLD,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize MatchEngine.

        Args:
            catalog: Default ordered catalog used when match() is not given one
            rules: Ordered variant rules applied to input and catalog entries
            threshold: Inclusive acceptance threshold in [0, 1]
            logger_instance: Optional logger (defaults to module logger)
        """
        self.catalog = tuple(catalog)
        self.rules = tuple(rules)
        self.threshold = threshold
        self.logger = logger_instance or logger

    def match(
        self,
        raw_text: Optional[str],
        catalog: Optional[Sequence[Any]] = None,
        threshold: Optional[float] = None,
    ) -> MatchResult:
        """Match one utterance.

        Never raises for string input, including empty, all-punctuation and
        non-ASCII text. "No acceptable match" is reported through
        ``accepted=False``.

        Args:
            raw_text: Finalized utterance
            catalog: Catalog to search (defaults to the engine's catalog)
            threshold: Acceptance threshold (defaults to the engine's threshold)

        Returns:
            MatchResult for this utterance
        """
        candidates = self.catalog if catalog is None else catalog
        cutoff = self.threshold if threshold is None else threshold

        normalized_input = prepare(raw_text, self.rules)
        best_candidate, score = select_best(normalized_input, candidates, self.rules)
        accepted = best_candidate is not None and score >= cutoff

        result = MatchResult(
            raw_input=raw_text or "",
            normalized_input=normalized_input,
            best_candidate=best_candidate,
            score=score,
            accepted=accepted,
        )

        self.logger.debug(
            "Utterance scored",
            extra={
                "event": "matching.utterance.scored",
                "threshold": cutoff,
                "catalog_size": len(candidates),
                **result.to_log_dict(),
            },
        )

        return result
