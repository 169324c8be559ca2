"""Extraction of literal match spans for highlighting."""

from typing import List

from ..models.response import MatchSpan


def find_highlights(query: str, text: str) -> List[MatchSpan]:
    """
    Find every non-overlapping literal occurrence of the query in text.

    Only exact and substring matches produce spans; text that matched the
    query through the subsequence or word strategies gets none.

    Args:
        query: Lower-cased query
        text: Lower-cased field text

    Returns:
        Spans in ascending order; empty when the query is empty or absent
    """
    if not query or not text:
        return []

    spans = []
    search_from = 0
    while True:
        index = text.find(query, search_from)
        if index == -1:
            break
        spans.append(MatchSpan(start=index, end=index + len(query)))
        search_from = index + len(query)

    return spans
