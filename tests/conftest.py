"""
Shared pytest fixtures for the text metrics test suite.

This module provides common fixtures used across test modules:
- Sample texts with known metric values
- Fresh analyzer instances
- Lexicon manager reset

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import pytest
from pathlib import Path
import sys

# Ensure text_metrics is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


# ===========================
# Sample Content Fixtures
# ===========================

@pytest.fixture(scope="session")
def golden_sentence() -> str:
    """
    Sentence with two intensified sentiment words and one plain one.

    Tokens (16): the service was absolutely terrible but the staff were
    really nice and the food was good
    """
    return (
        "The service was absolutely terrible, but the staff were really nice "
        "and the food was good."
    )


@pytest.fixture(scope="session")
def golden_sentence_expected() -> dict:
    """
    Expected sentiment values for golden_sentence.

    raw = -3.0*1.8 + 1.5*1.3 + 1.5 = -1.95
    normalized = -1.95 / (16 / 10) = -1.21875
    score = -1.21875 / 5 = -0.24375
    """
    return {
        'word_count': 16,
        'raw_score': -1.95,
        'normalized_score': -1.21875,
        'score': -0.24375,
        'label': 'NEGATIVE',
        'positive_count': 2,
        'negative_count': 1,
        'intensified_count': 2,
    }


@pytest.fixture(scope="session")
def sample_review_text() -> str:
    """Short multi-sentence product review."""
    return (
        "The new keyboard is excellent. Typing feels wonderful and the keyboard "
        "layout is very good! Battery life could be better, but the keyboard "
        "still earns a great rating. Would buy again?"
    )


@pytest.fixture(scope="session")
def readability_sentence() -> str:
    """
    One sentence with hand-checked syllable counts.

    reading(2) books(1) makes(2) people(2) happy(1) -> 8 syllables, 5 words
    flesch = 206.835 - 1.015*5 - 84.6*1.6 = 66.4 -> complexity 0.336
    """
    return "Reading books makes people happy."


# ===========================
# Analyzer Fixtures
# ===========================

@pytest.fixture
def sentiment_analyzer():
    """Fresh SentimentAnalyzer with default settings."""
    from text_metrics.features.sentiment import SentimentAnalyzer
    return SentimentAnalyzer()


@pytest.fixture
def keyword_extractor():
    """Fresh KeywordExtractor with default settings."""
    from text_metrics.features.keywords import KeywordExtractor
    return KeywordExtractor()


@pytest.fixture
def readability_analyzer():
    """Fresh ReadabilityAnalyzer with default settings."""
    from text_metrics.features.readability import ReadabilityAnalyzer
    return ReadabilityAnalyzer()


@pytest.fixture
def text_analyzer():
    """Fresh TextAnalyzer with default settings."""
    from text_metrics.analysis import TextAnalyzer
    return TextAnalyzer()


@pytest.fixture
def fresh_lexicon_manager():
    """Reset the lexicon singleton before and after a test."""
    from text_metrics.features.dictionaries import LexiconManager
    LexiconManager.reset_instance()
    yield LexiconManager.get_instance()
    LexiconManager.reset_instance()


# ===========================
# Marker Registration
# ===========================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
