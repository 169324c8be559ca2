"""Weighted aggregation of field scores into a ranked result list."""

from typing import List, NamedTuple, Optional, Sequence

from ..models.record import Record
from ..models.response import FieldHighlights, FieldScores, RankedResult
from .field_scorer import FieldScorer
from .highlight import find_highlights
from .normalizer import TextNormalizer


class FieldWeights(NamedTuple):
    """Weights of each field in the aggregate score."""

    name: float = 3.0
    value: float = 2.0
    description: float = 1.0
    tags: float = 2.5


DEFAULT_WEIGHTS = FieldWeights()
DEFAULT_SCORE_THRESHOLD = 0.1


class AggregateRanker:
    """Scores every record against a query and orders them by relevance."""

    def __init__(
        self,
        weights: FieldWeights = DEFAULT_WEIGHTS,
        score_threshold: float = DEFAULT_SCORE_THRESHOLD,
        scorer: Optional[FieldScorer] = None
    ) -> None:
        """
        Initialize the ranker.

        Args:
            weights: Weight of each field in the aggregate score
            score_threshold: Records scoring at or below this are dropped
            scorer: Field scorer to use (a new one if None)
        """
        self.weights = weights
        self.score_threshold = score_threshold
        self.scorer = scorer or FieldScorer()
        self.normalizer = TextNormalizer()

    def rank(self, records: Sequence[Record], query: str) -> List[RankedResult]:
        """
        Rank records against a normalized query.

        Args:
            records: Records to rank
            query: Trimmed, lower-cased, non-empty query

        Returns:
            Results scoring above the threshold, best first; records with
            equal scores keep their input order
        """
        results = []
        for record in records:
            result = self.score_record(record, query)
            if result.score > self.score_threshold:
                results.append(result)

        # sorted() is stable, including with reverse=True
        return sorted(results, key=lambda result: result.score, reverse=True)

    def score_record(self, record: Record, query: str) -> RankedResult:
        """
        Score a single record, regardless of the threshold.

        Args:
            record: Record to score
            query: Trimmed, lower-cased, non-empty query

        Returns:
            RankedResult with aggregate score, field scores and highlights
        """
        name = self.normalizer.normalize(record.name)
        value = self.normalizer.normalize(record.value)
        description = self.normalizer.normalize(record.description)
        tags = [self.normalizer.normalize(tag) for tag in record.tags]

        field_scores = FieldScores(
            name=self.scorer.score(query, name),
            value=self.scorer.score(query, value),
            description=self.scorer.score(query, description),
            tags=max((self.scorer.score(query, tag) for tag in tags), default=0.0),
        )
        highlights = FieldHighlights(
            name=find_highlights(query, name),
            value=find_highlights(query, value),
            description=find_highlights(query, description),
            tags=[find_highlights(query, tag) for tag in tags],
        )

        total = self.aggregate(field_scores)
        return RankedResult(
            record=record,
            score=total,
            relevance_percent=round(total * 100),
            field_scores=field_scores,
            highlights=highlights,
        )

    def aggregate(self, field_scores: FieldScores) -> float:
        """Weighted sum of the per-field scores."""
        return (
            field_scores.name * self.weights.name
            + field_scores.value * self.weights.value
            + field_scores.description * self.weights.description
            + field_scores.tags * self.weights.tags
        )
