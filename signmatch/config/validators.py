"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

LOW_THRESHOLD = 0.5


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    # Low thresholds accept loosely related utterances
    matching = config_dict.get("matching", {})
    if isinstance(matching, dict):
        for key in ("threshold", "fallback_threshold"):
            value = matching.get(key)
            if isinstance(value, (int, float)) and value < LOW_THRESHOLD:
                warning_messages.append(
                    f"Low matching.{key} ({value}) may accept unrelated utterances"
                )

    phrases = config_dict.get("phrases", [])
    if isinstance(phrases, list):
        for phrase in phrases:
            if isinstance(phrase, dict) and not phrase.get("asset") and not phrase.get("video"):
                text = phrase.get("text", "Unknown")
                warning_messages.append(
                    f"Phrase '{text}' has no asset or video and will only show text"
                )

    rules = config_dict.get("variant_rules", [])
    if isinstance(rules, list):
        patterns = [
            rule["pattern"].strip().lower()
            for rule in rules
            if isinstance(rule, dict) and isinstance(rule.get("pattern"), str)
        ]
        duplicates = sorted({p for p in patterns if patterns.count(p) > 1})
        if duplicates:
            warning_messages.append(
                f"Duplicate variant rule patterns; later rules only see earlier output: "
                f"{', '.join(duplicates)}"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages using Python's warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
