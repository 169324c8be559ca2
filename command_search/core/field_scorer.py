"""Scoring of a single field's text against a query."""

from enum import Enum
from typing import Callable, NamedTuple, Optional, Tuple

from .distance import levenshtein_distance
from .normalizer import TextNormalizer

# Substring containment
SUBSTRING_WEIGHT = 0.8
POSITION_PENALTY = 0.5

# Subsequence fuzzy matching
SUBSEQUENCE_WEIGHT = 0.6
CONSECUTIVE_BONUS = 0.5
LENGTH_PENALTY = 0.2

# Word-boundary matching
PREFIX_WEIGHT = 0.7
INFIX_WEIGHT = 0.5
TYPO_WEIGHT = 0.4
MAX_TYPO_DISTANCE = 2
MIN_TYPO_SIMILARITY = 0.6


class MatchStrategy(str, Enum):
    """Which strategy produced a field score."""

    EXACT = "exact"
    SUBSTRING = "substring"
    SUBSEQUENCE = "subsequence"
    WORD = "word"
    NONE = "none"


class FieldMatch(NamedTuple):
    """Score of one field together with the strategy that produced it."""

    score: float
    strategy: MatchStrategy


NO_MATCH = FieldMatch(0.0, MatchStrategy.NONE)


class FieldScorer:
    """Scores field text against a query using an ordered list of strategies.

    Strategies are tried from strongest to weakest and the first one that
    applies decides the score; weaker strategies are never consulted once
    a stronger one matched. Both the query and the text are expected to be
    lower-cased already.
    """

    def __init__(self) -> None:
        """Initialize the scorer."""
        self.normalizer = TextNormalizer()
        self.strategies: Tuple[Callable[[str, str], Optional[FieldMatch]], ...] = (
            self._exact_match,
            self._substring_match,
            self._subsequence_match,
            self._word_match,
        )

    def score(self, query: str, text: str) -> float:
        """
        Score text against a query.

        Args:
            query: Lower-cased query
            text: Lower-cased field text

        Returns:
            Score between 0 and 1
        """
        return self.match(query, text).score

    def match(self, query: str, text: str) -> FieldMatch:
        """
        Score text against a query and report which strategy applied.

        Args:
            query: Lower-cased query
            text: Lower-cased field text

        Returns:
            FieldMatch of the first applicable strategy, or NO_MATCH
        """
        if not query or not text:
            return NO_MATCH

        for strategy in self.strategies:
            result = strategy(query, text)
            if result is not None:
                return result

        return NO_MATCH

    def subsequence_score(self, query: str, text: str) -> float:
        """
        Raw score for query characters appearing in order within text.

        Dense runs of consecutive matches score higher than scattered ones,
        and text much longer than the query is penalized.

        Args:
            query: Lower-cased query
            text: Lower-cased field text

        Returns:
            Raw score (not yet weighted); 0.0 when no character matched
        """
        if not query or not text:
            return 0.0

        query_index = 0
        matches = 0
        consecutive = 0
        max_consecutive = 0

        for char in text:
            if query_index >= len(query):
                break
            if char == query[query_index]:
                matches += 1
                consecutive += 1
                max_consecutive = max(max_consecutive, consecutive)
                query_index += 1
            else:
                consecutive = 0

        if matches == 0:
            return 0.0

        completion_ratio = matches / len(query)
        consecutive_bonus = max_consecutive / len(query) * CONSECUTIVE_BONUS
        length_penalty = max(
            0.0, 1 - (len(text) - len(query)) / len(text) * LENGTH_PENALTY
        )

        return (completion_ratio + consecutive_bonus) * length_penalty

    def word_match_score(self, query: str, text: str) -> float:
        """
        Best score of the query against individual words of the text.

        A word scores as a prefix match, an infix match, or, failing both,
        as a typo of the query when it is within two edits and similar
        enough.

        Args:
            query: Lower-cased query
            text: Lower-cased field text

        Returns:
            Best word score; 0.0 when no word qualifies
        """
        if not query or not text:
            return 0.0

        best_score = 0.0
        for word in self.normalizer.split_words(text):
            if word.startswith(query):
                candidate = PREFIX_WEIGHT * (len(query) / len(word))
            elif query in word:
                candidate = INFIX_WEIGHT * (len(query) / len(word))
            else:
                edit_distance = levenshtein_distance(query, word)
                word_similarity = 1 - (edit_distance / max(len(query), len(word)))
                if edit_distance > MAX_TYPO_DISTANCE or word_similarity <= MIN_TYPO_SIMILARITY:
                    continue
                candidate = TYPO_WEIGHT * word_similarity
            best_score = max(best_score, candidate)

        return best_score

    def _exact_match(self, query: str, text: str) -> Optional[FieldMatch]:
        if text == query:
            return FieldMatch(1.0, MatchStrategy.EXACT)
        return None

    def _substring_match(self, query: str, text: str) -> Optional[FieldMatch]:
        position = text.find(query)
        if position == -1:
            return None

        length_ratio = len(query) / len(text)
        position_bonus = 1 - (position / len(text) * POSITION_PENALTY)
        return FieldMatch(SUBSTRING_WEIGHT * length_ratio * position_bonus, MatchStrategy.SUBSTRING)

    def _subsequence_match(self, query: str, text: str) -> Optional[FieldMatch]:
        raw_score = self.subsequence_score(query, text)
        if raw_score > 0:
            return FieldMatch(raw_score * SUBSEQUENCE_WEIGHT, MatchStrategy.SUBSEQUENCE)
        return None

    def _word_match(self, query: str, text: str) -> Optional[FieldMatch]:
        word_score = self.word_match_score(query, text)
        if word_score > 0:
            return FieldMatch(word_score, MatchStrategy.WORD)
        return None
