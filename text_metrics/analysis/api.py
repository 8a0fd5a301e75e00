"""
Public entry points.

Plain functions over a shared, lazily built TextAnalyzer. Every function
accepts None and answers with a zero/neutral value instead of raising.

Usage:
    from text_metrics import analyze_text, extract_keywords

    result = analyze_text("Reading books makes people happy.")
    keywords = extract_keywords("testing testing coding coding coding", 2)
    # 'coding,testing'
"""

from functools import lru_cache
from typing import List, Optional

from text_metrics.features.tokenizer import tokenize

from .analyzer import TextAnalyzer
from .schemas import AnalysisResult

DEFAULT_MAX_KEYWORDS = 10


@lru_cache(maxsize=1)
def get_analyzer() -> TextAnalyzer:
    """Shared TextAnalyzer built from the global settings."""
    return TextAnalyzer()


def get_word_count(text: Optional[str]) -> int:
    """Number of tokens in text (0 for None)."""
    return len(tokenize(text))


def get_sentiment_score(text: Optional[str]) -> float:
    """Sentiment in [-1.0, 1.0] (0.0 for None)."""
    return get_analyzer().sentiment_analyzer.score(tokenize(text))


def extract_keyword_list(text: Optional[str], max_keywords: int = DEFAULT_MAX_KEYWORDS) -> List[str]:
    """Ranked keywords, at most max_keywords long."""
    return get_analyzer().keyword_extractor.extract(text, max_keywords)


def extract_keywords(text: Optional[str], max_keywords: int = DEFAULT_MAX_KEYWORDS) -> str:
    """Ranked keywords joined with commas ('' when there are none)."""
    return ",".join(extract_keyword_list(text, max_keywords))


def get_complexity(text: Optional[str]) -> float:
    """Complexity in [0.0, 1.0] (0.0 for None)."""
    return get_analyzer().readability_analyzer.score(text)


def get_reading_time(text: Optional[str]) -> int:
    """Minutes to read text: 0 for None/empty input, otherwise at least 1."""
    analyzer = get_analyzer()
    return analyzer.reading_time(text, get_word_count(text))


def analyze_text(text: Optional[str]) -> AnalysisResult:
    """All metrics for text in one record."""
    return get_analyzer().analyze(text)
