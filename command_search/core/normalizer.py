"""Text normalization utilities for consistent query and field matching."""

import re
from typing import List


class TextNormalizer:
    """Handles case folding and word splitting for queries and field text."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        self.whitespace_regex = re.compile(r'\s+')

    def normalize_query(self, query: str) -> str:
        """
        Normalize a raw query for matching.

        Args:
            query: Raw query as typed by the user

        Returns:
            Trimmed, lower-cased query; empty when the query is blank
        """
        if not query:
            return ""

        return query.strip().lower()

    def normalize(self, text: str) -> str:
        """
        Normalize field text for matching.

        Field text keeps its whitespace so that match spans line up with
        the original characters.

        Args:
            text: Field text

        Returns:
            Lower-cased text
        """
        if not text:
            return ""

        return text.lower()

    def split_words(self, text: str) -> List[str]:
        """
        Split text into whitespace-delimited words.

        Args:
            text: Input text

        Returns:
            List of non-empty words
        """
        if not text:
            return []

        return [word for word in self.whitespace_regex.split(text) if word]
