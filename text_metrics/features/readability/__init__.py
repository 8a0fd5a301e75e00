"""
Readability and Text Complexity Analysis Module

Measures how hard a text is to read with a Flesch Reading Ease style formula,
inverted into a complexity score between 0 (easy) and 1 (hard).

Key Components:
- ReadabilityAnalyzer: Main feature extractor
- ReadabilityFeatures: Pydantic model for features
- ReadabilityAnalysisResult: Features + metadata
- count_syllables / count_sentences: The counting heuristics

Usage:
    from text_metrics.features.readability import ReadabilityAnalyzer

    analyzer = ReadabilityAnalyzer()
    features = analyzer.extract_features(text)
    print(f"Flesch: {features.flesch_reading_ease}")
    print(f"Complexity: {features.complexity}")
"""

from .analyzer import ReadabilityAnalyzer, count_syllables, count_sentences
from .schemas import (
    ReadabilityFeatures,
    ReadabilityAnalysisMetadata,
    ReadabilityAnalysisResult,
    complexity_level,
)
from .constants import (
    READABILITY_MODULE_VERSION,
    COMPLEXITY_THRESHOLDS,
)

__all__ = [
    # Main classes
    "ReadabilityAnalyzer",
    "ReadabilityFeatures",
    "ReadabilityAnalysisMetadata",
    "ReadabilityAnalysisResult",
    # Heuristics
    "count_syllables",
    "count_sentences",
    "complexity_level",
    # Constants
    "READABILITY_MODULE_VERSION",
    "COMPLEXITY_THRESHOLDS",
]

__version__ = READABILITY_MODULE_VERSION
