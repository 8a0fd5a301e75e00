"""
Text Metrics

Word count, lexicon sentiment, keywords, readability complexity and reading
time for raw text.

Usage:
    import text_metrics

    text_metrics.get_word_count("Hello, World!!")           # 2
    text_metrics.extract_keywords("coding coding testing")  # 'coding,testing'
    result = text_metrics.analyze_text("What a wonderful day.")
"""

from text_metrics.analysis import (
    AnalysisResult,
    TextAnalyzer,
    analyze_text,
    extract_keyword_list,
    extract_keywords,
    get_complexity,
    get_reading_time,
    get_sentiment_score,
    get_word_count,
)

__version__ = "1.0.0"

__all__ = [
    "AnalysisResult",
    "TextAnalyzer",
    "analyze_text",
    "extract_keyword_list",
    "extract_keywords",
    "get_complexity",
    "get_reading_time",
    "get_sentiment_score",
    "get_word_count",
    "__version__",
]
