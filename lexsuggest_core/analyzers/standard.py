"""LexSuggest Standard Analyzers - Pre-configured Analyzers.

The same analyzer is used to index documents, to tokenize runtime
queries, and to normalize text for intent detection, so every stage
agrees on what a token is.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re

from lexsuggest_core.analyzers.base import (
    Analyzer,
    LowercaseCharacterFilter,
    PatternReplaceCharacterFilter,
)
from lexsuggest_core.analyzers.filters import (
    LengthFilter,
    LowercaseFilter,
    UniqueFilter,
)
from lexsuggest_core.analyzers.tokenizers import WhitespaceTokenizer

# Any run of characters that is not a letter or digit
NON_ALNUM_PATTERN = r"[\W_]+"


class StandardAnalyzer(Analyzer):
    """Standard analyzer for titles, descriptions, and queries.

    Lowercases, collapses non-alphanumeric runs to spaces, and splits
    on whitespace. Lowercasing comes first because it can emit
    combining marks ("\u0130" becomes "i\u0307"). No stop words and no
    stemming.
    """

    def __init__(self, max_token_length: int = 255):
        super().__init__(
            tokenizer=WhitespaceTokenizer(),
            char_filters=[
                LowercaseCharacterFilter(),
                PatternReplaceCharacterFilter(NON_ALNUM_PATTERN, " ", re.UNICODE),
            ],
            token_filters=[
                LowercaseFilter(),
                LengthFilter(max_length=max_token_length),
            ],
        )


class QueryTermAnalyzer(StandardAnalyzer):
    """Standard analysis followed by first-seen deduplication."""

    def __init__(self, max_token_length: int = 255):
        super().__init__(max_token_length=max_token_length)
        self._token_filters.append(UniqueFilter())


_STANDARD = StandardAnalyzer()


def normalize_text(text: str) -> str:
    """Lowercase, collapse non-letter/non-digit runs to one space, trim."""
    return _STANDARD.filter_chars(text or "").strip()


__all__ = [
    "NON_ALNUM_PATTERN",
    "QueryTermAnalyzer",
    "StandardAnalyzer",
    "normalize_text",
]
