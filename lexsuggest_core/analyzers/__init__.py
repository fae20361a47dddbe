"""LexSuggest Analyzers - Text Analysis Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsuggest_core.analyzers.base import (
    Analyzer,
    CharacterFilter,
    LowercaseCharacterFilter,
    PatternReplaceCharacterFilter,
    Token,
    TokenFilter,
    TokenStream,
    Tokenizer,
)
from lexsuggest_core.analyzers.standard import (
    QueryTermAnalyzer,
    StandardAnalyzer,
    normalize_text,
)
from lexsuggest_core.analyzers.filters import (
    LengthFilter,
    LowercaseFilter,
    UniqueFilter,
)
from lexsuggest_core.analyzers.tokenizers import WhitespaceTokenizer

__all__ = [
    "Analyzer",
    "CharacterFilter",
    "LowercaseCharacterFilter",
    "PatternReplaceCharacterFilter",
    "Token",
    "TokenFilter",
    "TokenStream",
    "Tokenizer",
    "QueryTermAnalyzer",
    "StandardAnalyzer",
    "normalize_text",
    "LengthFilter",
    "LowercaseFilter",
    "UniqueFilter",
    "WhitespaceTokenizer",
]
