"""LexSuggest Token Filters - Token Transformation Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Set

from lexsuggest_core.analyzers.base import (
    TokenFilter,
    TokenStream,
)


class LowercaseFilter(TokenFilter):
    """Converts tokens to lowercase."""

    def filter(self, stream: TokenStream) -> TokenStream:
        """Convert all tokens to lowercase."""
        tokens = []
        for token in stream:
            new_token = token.clone()
            new_token.text = token.text.lower()
            tokens.append(new_token)
        return TokenStream(tokens)


class UniqueFilter(TokenFilter):
    """Drops repeated tokens, keeping the first occurrence."""

    def filter(self, stream: TokenStream) -> TokenStream:
        seen: Set[str] = set()
        tokens = []
        for token in stream:
            if token.text in seen:
                continue
            seen.add(token.text)
            tokens.append(token)
        return TokenStream(tokens)


class LengthFilter(TokenFilter):
    """Removes tokens outside a length range."""

    def __init__(self, min_length: int = 1, max_length: int = 255):
        self.min_length = min_length
        self.max_length = max_length

    def filter(self, stream: TokenStream) -> TokenStream:
        return stream.filter(
            lambda t: self.min_length <= len(t.text) <= self.max_length
        )


__all__ = ["LowercaseFilter", "UniqueFilter", "LengthFilter"]
