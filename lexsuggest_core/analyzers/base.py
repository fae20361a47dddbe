"""LexSuggest Analyzer Base - Core Text Analysis Components.

Provides base classes for the text analysis pipeline including
character filters, tokenizers, token filters, and analyzers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterator, List, Optional

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token type classification."""

    WORD = auto()
    NUMBER = auto()
    ALPHANUM = auto()


@dataclass
class Token:
    """A token in the analysis stream.

    Attributes:
        text: Token text
        position: Position in original text
        start_offset: Start character offset
        end_offset: End character offset
        token_type: Type classification
    """

    text: str
    position: int = 0
    start_offset: int = 0
    end_offset: int = 0
    token_type: TokenType = TokenType.WORD

    def __repr__(self) -> str:
        return f"Token({self.text!r}, pos={self.position}, type={self.token_type.name})"

    def clone(self) -> "Token":
        """Create a copy of this token."""
        return Token(
            text=self.text,
            position=self.position,
            start_offset=self.start_offset,
            end_offset=self.end_offset,
            token_type=self.token_type,
        )


class TokenStream:
    """A stream of tokens."""

    def __init__(self, tokens: Optional[List[Token]] = None):
        self._tokens: List[Token] = tokens or []

    def add(self, token: Token) -> None:
        """Add token to stream."""
        self._tokens.append(token)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    def get_texts(self) -> List[str]:
        """Get list of token texts."""
        return [t.text for t in self._tokens]

    def filter(self, predicate: Callable[[Token], bool]) -> "TokenStream":
        """Filter tokens by predicate.

        Args:
            predicate: Function that returns True to keep token

        Returns:
            New filtered TokenStream
        """
        return TokenStream([t for t in self._tokens if predicate(t)])


class CharacterFilter(ABC):
    """Filters characters before tokenization."""

    @abstractmethod
    def filter(self, text: str) -> str:
        """Filter input text.

        Args:
            text: Input text

        Returns:
            Filtered text
        """
        pass


class LowercaseCharacterFilter(CharacterFilter):
    """Lowercases the whole text before other character filters run."""

    def filter(self, text: str) -> str:
        return text.lower()


class PatternReplaceCharacterFilter(CharacterFilter):
    """Replaces patterns using regex."""

    def __init__(self, pattern: str, replacement: str, flags: int = 0):
        """Initialize filter.

        Args:
            pattern: Regex pattern
            replacement: Replacement string
            flags: Regex flags
        """
        self.pattern = re.compile(pattern, flags)
        self.replacement = replacement

    def filter(self, text: str) -> str:
        """Apply pattern replacement."""
        return self.pattern.sub(self.replacement, text)


class Tokenizer(ABC):
    """Base class for tokenizers."""

    @abstractmethod
    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Token stream
        """
        pass


class TokenFilter(ABC):
    """Base class for token filters.

    Token filters transform, remove, or add tokens in the stream.
    """

    @abstractmethod
    def filter(self, stream: TokenStream) -> TokenStream:
        """Filter token stream.

        Args:
            stream: Input token stream

        Returns:
            Filtered token stream
        """
        pass


class Analyzer:
    """Combines character filters, a tokenizer, and token filters
    into a complete text analysis pipeline.
    """

    def __init__(
        self,
        tokenizer: Tokenizer,
        char_filters: Optional[List[CharacterFilter]] = None,
        token_filters: Optional[List[TokenFilter]] = None,
    ):
        """Initialize analyzer.

        Args:
            tokenizer: Tokenizer to use
            char_filters: Character filters to apply
            token_filters: Token filters to apply
        """
        self._tokenizer = tokenizer
        self._char_filters = char_filters or []
        self._token_filters = token_filters or []

    def filter_chars(self, text: str) -> str:
        """Run only the character filters over text."""
        for char_filter in self._char_filters:
            text = char_filter.filter(text)
        return text

    def analyze(self, text: str) -> TokenStream:
        """Analyze text into tokens.

        Args:
            text: Input text

        Returns:
            Token stream
        """
        stream = self._tokenizer.tokenize(self.filter_chars(text or ""))
        for token_filter in self._token_filters:
            stream = token_filter.filter(stream)
        return stream

    def get_terms(self, text: str) -> List[str]:
        """Get analyzed terms from text."""
        return self.analyze(text).get_texts()


__all__ = [
    "Analyzer",
    "CharacterFilter",
    "LowercaseCharacterFilter",
    "PatternReplaceCharacterFilter",
    "Token",
    "TokenFilter",
    "TokenStream",
    "TokenType",
    "Tokenizer",
]
