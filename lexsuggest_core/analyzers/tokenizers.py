"""LexSuggest Tokenizers - Text Tokenization Strategies.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from lexsuggest_core.analyzers.base import (
    Tokenizer,
    Token,
    TokenStream,
    TokenType,
)


class WhitespaceTokenizer(Tokenizer):
    """Simple whitespace tokenizer.

    Splits text on whitespace only, preserving everything else.
    """

    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text on whitespace."""
        tokens = []
        position = 0
        start = 0
        in_token = False

        for i, char in enumerate(text):
            if char.isspace():
                if in_token:
                    tokens.append(self._make_token(text[start:i], position, start, i))
                    position += 1
                    in_token = False
            elif not in_token:
                start = i
                in_token = True

        # Last token
        if in_token:
            tokens.append(self._make_token(text[start:], position, start, len(text)))

        return TokenStream(tokens)

    def _make_token(self, text: str, position: int, start: int, end: int) -> Token:
        if text.isdigit():
            token_type = TokenType.NUMBER
        elif text.isalpha():
            token_type = TokenType.WORD
        else:
            token_type = TokenType.ALPHANUM
        return Token(
            text=text,
            position=position,
            start_offset=start,
            end_offset=end,
            token_type=token_type,
        )


__all__ = ["WhitespaceTokenizer"]
