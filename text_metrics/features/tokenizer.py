"""
Word Tokenizer

Splits raw text into normalized word tokens shared by every scorer.

Rules:
1. Fields are separated by runs of ASCII whitespace
2. Each field keeps only ASCII letters and digits, lower-cased
   ("can't" -> "cant", "well-known" -> "wellknown")
3. Fields shorter than MIN_TOKEN_LENGTH after cleaning are dropped

Usage:
    from text_metrics.features.tokenizer import tokenize

    tokens = tokenize("Hello, World!!")   # ['hello', 'world']
"""

import re
import logging
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3
"""Cleaned fields must be at least this long to become tokens."""

_RE_WHITESPACE = re.compile(r'[ \t\n\v\f\r]+')
_RE_NON_ALNUM = re.compile(r'[^A-Za-z0-9]')


def clean_word(word: str) -> str:
    """Drop every non-ASCII-alphanumeric character, then lower-case."""
    return _RE_NON_ALNUM.sub('', word).lower()


def iter_tokens(text: Optional[str], min_length: int = MIN_TOKEN_LENGTH) -> Iterator[str]:
    """
    Yield normalized tokens from text.

    Each call walks the text from the start, so iterating twice gives the
    same sequence.

    Args:
        text: Raw input text (None is treated as empty)
        min_length: Minimum cleaned length for a field to be kept

    Yields:
        Normalized tokens in text order
    """
    if not text:
        return
    for field in _RE_WHITESPACE.split(text):
        cleaned = clean_word(field)
        if len(cleaned) >= min_length:
            yield cleaned


def tokenize(text: Optional[str], min_length: int = MIN_TOKEN_LENGTH) -> List[str]:
    """
    Tokenize text into normalized words.

    Args:
        text: Raw input text (None is treated as empty)
        min_length: Minimum cleaned length for a field to be kept

    Returns:
        List of tokens (empty for None or empty text)
    """
    return list(iter_tokens(text, min_length))


class Tokenizer:
    """
    Reusable tokenizer bound to a minimum token length.

    Usage:
        tokenizer = Tokenizer()
        tokens = tokenizer.tokenize(text)
    """

    def __init__(self, min_length: int = MIN_TOKEN_LENGTH):
        if min_length < 1:
            raise ValueError(f"min_length must be >= 1, got {min_length}")
        self.min_length = min_length

    def tokenize(self, text: Optional[str]) -> List[str]:
        """Tokenize text with this tokenizer's minimum length."""
        tokens = tokenize(text, self.min_length)
        logger.debug(f"Tokenized {len(text or '')} chars into {len(tokens)} tokens")
        return tokens

    def __call__(self, text: Optional[str]) -> List[str]:
        return self.tokenize(text)

    def __repr__(self) -> str:
        return f"<Tokenizer (min_length={self.min_length})>"
