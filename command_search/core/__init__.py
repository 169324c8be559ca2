"""Core search engine functionality."""

from .distance import levenshtein_distance
from .engine import SearchEngine
from .field_scorer import FieldMatch, FieldScorer, MatchStrategy
from .highlight import find_highlights
from .library import RecordLibrary
from .normalizer import TextNormalizer
from .ranker import AggregateRanker, FieldWeights

__all__ = [
    "levenshtein_distance",
    "SearchEngine",
    "FieldMatch",
    "FieldScorer",
    "MatchStrategy",
    "find_highlights",
    "RecordLibrary",
    "TextNormalizer",
    "AggregateRanker",
    "FieldWeights",
]
