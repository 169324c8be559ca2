"""Main search engine implementation."""

import time
from typing import List, Optional, Sequence

import structlog
from rapidfuzz import fuzz, process

from ..models.record import Record
from ..models.response import RankedResult
from .ranker import DEFAULT_SCORE_THRESHOLD, DEFAULT_WEIGHTS, AggregateRanker, FieldWeights
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Fuzzy search over a snapshot of command records.

    The engine keeps no record state between calls: every search runs a
    full pass over the records it is given and returns a new list.
    """

    def __init__(
        self,
        weights: FieldWeights = DEFAULT_WEIGHTS,
        score_threshold: float = DEFAULT_SCORE_THRESHOLD,
        suggestion_threshold: float = 0.6
    ) -> None:
        """
        Initialize the search engine.

        Args:
            weights: Weight of each field in the aggregate score
            score_threshold: Aggregate score a record must exceed to be returned
            suggestion_threshold: Minimum similarity (0-1) for name suggestions
        """
        self.ranker = AggregateRanker(weights=weights, score_threshold=score_threshold)
        self.suggestion_threshold = suggestion_threshold
        self.normalizer = TextNormalizer()

    def search(self, records: Sequence[Record], query: str) -> List[RankedResult]:
        """
        Search records for a free-text query.

        A blank query does not filter: every record is returned in input
        order without scores or highlights.

        Args:
            records: Records to search
            query: Raw query as typed by the user

        Returns:
            Ranked results, best first
        """
        start_time = time.time()
        normalized_query = self.normalizer.normalize_query(query)

        if not normalized_query:
            return [RankedResult(record=record) for record in records]

        results = self.ranker.rank(records, normalized_query)

        logger.debug(
            "Search completed",
            query=normalized_query,
            total_records=len(records),
            total_results=len(results),
            execution_time_ms=round((time.time() - start_time) * 1000, 3)
        )
        return results

    def suggest(
        self,
        records: Sequence[Record],
        query: str,
        max_suggestions: int = 5,
        threshold: Optional[float] = None
    ) -> List[str]:
        """
        Suggest record names close to a query.

        Useful when a query ranks nothing, e.g. a badly misspelled name.

        Args:
            records: Records whose names are candidates
            query: Raw query
            max_suggestions: Maximum number of suggestions
            threshold: Custom similarity threshold (0-1)

        Returns:
            Record names, most similar first, without duplicates
        """
        normalized_query = self.normalizer.normalize_query(query)
        if not normalized_query or not records:
            return []

        threshold = threshold if threshold is not None else self.suggestion_threshold
        names = [self.normalizer.normalize(record.name) for record in records]

        matches = process.extract(
            normalized_query,
            names,
            scorer=fuzz.ratio,
            limit=None,
            score_cutoff=threshold * 100
        )

        suggestions: List[str] = []
        for _, _, index in matches:
            name = records[index].name
            if name not in suggestions:
                suggestions.append(name)
            if len(suggestions) >= max_suggestions:
                break

        return suggestions
