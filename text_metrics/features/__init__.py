"""
Feature Extraction Module

This package contains the scorers that make up the text-metrics pipeline.

Available features:
- Tokenization shared by every scorer
- Lexicon sentiment with intensifiers
- Frequency keyword ranking with stop-word filtering
- Flesch-style readability / complexity
- Reading-time estimate

Usage:
    from text_metrics.features import SentimentAnalyzer, KeywordExtractor, ReadabilityAnalyzer

    sentiment = SentimentAnalyzer().extract_features(text)
    keywords = KeywordExtractor().extract(text, max_keywords=5)
    readability = ReadabilityAnalyzer().extract_features(text)
"""

# Lazy imports; explicit form: from text_metrics.features.sentiment import SentimentAnalyzer

__all__ = [
    # Tokenizer
    "tokenize",
    "Tokenizer",
    # Sentiment
    "SentimentAnalyzer",
    "SentimentFeatures",
    # Keywords
    "KeywordExtractor",
    "KeywordFeatures",
    # Readability
    "ReadabilityAnalyzer",
    "ReadabilityFeatures",
    "ReadabilityAnalysisResult",
    # Reading time
    "ReadingTimeEstimator",
]


def __getattr__(name):
    """Lazy import of feature classes."""
    # Tokenizer
    if name == "tokenize":
        from .tokenizer import tokenize
        return tokenize
    elif name == "Tokenizer":
        from .tokenizer import Tokenizer
        return Tokenizer
    # Sentiment
    elif name == "SentimentAnalyzer":
        from .sentiment import SentimentAnalyzer
        return SentimentAnalyzer
    elif name == "SentimentFeatures":
        from .sentiment import SentimentFeatures
        return SentimentFeatures
    # Keywords
    elif name == "KeywordExtractor":
        from .keywords import KeywordExtractor
        return KeywordExtractor
    elif name == "KeywordFeatures":
        from .keywords import KeywordFeatures
        return KeywordFeatures
    # Readability
    elif name == "ReadabilityAnalyzer":
        from .readability import ReadabilityAnalyzer
        return ReadabilityAnalyzer
    elif name == "ReadabilityFeatures":
        from .readability import ReadabilityFeatures
        return ReadabilityFeatures
    elif name == "ReadabilityAnalysisResult":
        from .readability import ReadabilityAnalysisResult
        return ReadabilityAnalysisResult
    # Reading time
    elif name == "ReadingTimeEstimator":
        from .reading_time import ReadingTimeEstimator
        return ReadingTimeEstimator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
