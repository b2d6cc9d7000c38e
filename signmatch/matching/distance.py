"""Edit-distance scoring between normalized strings."""


def levenshtein(a: str, b: str) -> int:
    """Unit-cost insertion/deletion/substitution distance between a and b.

    Sweeps the cost table one row at a time, keeping only the row for the
    shorter string live.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,         # deletion
                    current[j - 1] + 1,      # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current

    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Similarity in [0, 1] derived from edit distance.

    ``1 - distance / max(len(a), len(b), 1)``; two empty strings score 1.0.
    """
    longest = max(len(a), len(b), 1)
    return 1.0 - levenshtein(a, b) / longest
