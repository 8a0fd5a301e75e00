"""
Keyword Extraction Feature Extractor

Ranks the most frequent content words of a text.

The extractor:
1. Tokenizes text into normalized words
2. Counts tokens longer than 3 characters that are not stop words
3. Ranks by frequency, then by length, then alphabetically
4. Returns the top N as a KeywordFeatures dataclass

Usage:
    from text_metrics.features import KeywordExtractor

    extractor = KeywordExtractor()
    keywords = extractor.extract("testing testing coding coding coding", max_keywords=2)
    # ['coding', 'testing']
"""

from collections import Counter
from dataclasses import dataclass, asdict, field
from typing import Dict, List, Optional, Sequence, Tuple
import logging

from text_metrics.config import settings
from text_metrics.features.dictionaries import STOP_WORDS
from text_metrics.features.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass
class KeywordFeatures:
    """Ranked keywords plus the frequency table they were drawn from."""
    keywords: List[str] = field(default_factory=list)
    frequencies: Dict[str, int] = field(default_factory=dict)
    vocabulary_size: int = 0
    max_keywords: int = 0

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)

    def to_csv_string(self) -> str:
        """Comma-join the keywords ('' when there are none)."""
        return ",".join(self.keywords)

    def get_top_frequencies(self) -> List[Tuple[str, int]]:
        """Get (keyword, count) pairs in rank order."""
        return [(word, self.frequencies[word]) for word in self.keywords]


def rank_key(item: Tuple[str, int]) -> Tuple[int, int, str]:
    """Sort key: frequency desc, length desc, then alphabetical."""
    word, count = item
    return (-count, -len(word), word)


class KeywordExtractor:
    """
    Frequency-based keyword extractor.

    Usage:
        extractor = KeywordExtractor()
        features = extractor.extract_features(text)
        print(features.to_csv_string())
    """

    def __init__(
        self,
        config: Optional[object] = None,
        stop_words: Optional[frozenset[str]] = None
    ):
        """
        Initialize keyword extractor.

        Args:
            config: Optional KeywordsConfig object. If None, loads from settings.
            stop_words: Optional stop-word set. Defaults to STOP_WORDS.
        """
        self.config = config or settings.keywords
        self.stop_words = stop_words if stop_words is not None else STOP_WORDS

        logger.info(
            f"Initialized KeywordExtractor with {len(self.stop_words)} stop words, "
            f"min keyword length {self.config.min_keyword_length}"
        )

    def count_frequencies(self, tokens: Sequence[str]) -> Counter:
        """
        Build the frequency table of keyword candidates.

        Args:
            tokens: Normalized tokens

        Returns:
            Counter of candidate token -> occurrences
        """
        min_length = self.config.min_keyword_length
        remove_stopwords = self.config.remove_stopwords
        return Counter(
            token for token in tokens
            if len(token) >= min_length
            and not (remove_stopwords and token in self.stop_words)
        )

    def rank(self, frequencies: Counter, max_keywords: int) -> List[str]:
        """Return the top max_keywords entries of a frequency table."""
        if max_keywords <= 0:
            return []
        ranked = sorted(frequencies.items(), key=rank_key)
        return [word for word, _ in ranked[:max_keywords]]

    def extract_features_from_tokens(
        self,
        tokens: Sequence[str],
        max_keywords: Optional[int] = None
    ) -> KeywordFeatures:
        """
        Extract keyword features from pre-tokenized text.

        Args:
            tokens: Normalized tokens
            max_keywords: Result size limit. Defaults to settings value.

        Returns:
            KeywordFeatures dataclass
        """
        if max_keywords is None:
            max_keywords = self.config.max_keywords

        frequencies = self.count_frequencies(tokens)
        keywords = self.rank(frequencies, max_keywords)

        logger.debug(
            f"Ranked {len(frequencies)} candidate keywords, kept {len(keywords)}"
        )

        return KeywordFeatures(
            keywords=keywords,
            frequencies=dict(frequencies),
            vocabulary_size=len(frequencies),
            max_keywords=max_keywords,
        )

    def extract_features(
        self,
        text: Optional[str],
        max_keywords: Optional[int] = None
    ) -> KeywordFeatures:
        """
        Extract keyword features from text.

        Args:
            text: Input text to analyze
            max_keywords: Result size limit. Defaults to settings value.

        Returns:
            KeywordFeatures dataclass
        """
        return self.extract_features_from_tokens(tokenize(text), max_keywords)

    def extract(self, text: Optional[str], max_keywords: Optional[int] = None) -> List[str]:
        """
        Extract ranked keywords from text.

        Args:
            text: Input text
            max_keywords: Result size limit. Defaults to settings value (10).

        Returns:
            Ordered keyword list, at most max_keywords long
        """
        return self.extract_features(text, max_keywords).keywords

    def extract_features_batch(
        self,
        texts: List[Optional[str]],
        max_keywords: Optional[int] = None
    ) -> List[KeywordFeatures]:
        """
        Extract features from multiple texts.

        Args:
            texts: List of text strings
            max_keywords: Result size limit applied to every text

        Returns:
            List of KeywordFeatures objects
        """
        return [self.extract_features(text, max_keywords) for text in texts]
