"""
Text analysis facade and public functions.

Usage:
    from text_metrics.analysis import TextAnalyzer, analyze_text

    result = analyze_text(text)
    results = TextAnalyzer().analyze_batch(texts)
"""

from .schemas import AnalysisResult
from .analyzer import TextAnalyzer
from .api import (
    DEFAULT_MAX_KEYWORDS,
    analyze_text,
    extract_keyword_list,
    extract_keywords,
    get_analyzer,
    get_complexity,
    get_reading_time,
    get_sentiment_score,
    get_word_count,
)

__all__ = [
    "AnalysisResult",
    "TextAnalyzer",
    "DEFAULT_MAX_KEYWORDS",
    "analyze_text",
    "extract_keyword_list",
    "extract_keywords",
    "get_analyzer",
    "get_complexity",
    "get_reading_time",
    "get_sentiment_score",
    "get_word_count",
]
