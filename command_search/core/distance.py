"""Edit distance between a query token and a word."""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """
    Classic Levenshtein distance between two strings.

    Counts the single-character insertions, deletions and substitutions
    needed to turn ``a`` into ``b``. All operations weigh 1 and no score
    cutoff is passed, so the full distance is always computed.

    Args:
        a: Source string
        b: Target string

    Returns:
        Non-negative edit distance
    """
    return Levenshtein.distance(a, b)

