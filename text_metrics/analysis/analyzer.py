"""
Analysis facade.

Tokenizes a text once and feeds the tokens to every scorer, assembling a
single AnalysisResult.

Usage:
    from text_metrics.analysis import TextAnalyzer

    analyzer = TextAnalyzer()
    result = analyzer.analyze("This is an absolutely amazing product")
    print(result.get_summary())
"""

import logging
from typing import List, Optional

from text_metrics.config import settings
from text_metrics.features.keywords import KeywordExtractor
from text_metrics.features.readability import ReadabilityAnalyzer
from text_metrics.features.reading_time import ReadingTimeEstimator
from text_metrics.features.sentiment import SentimentAnalyzer
from text_metrics.features.tokenizer import tokenize

from .schemas import AnalysisResult

logger = logging.getLogger(__name__)


class TextAnalyzer:
    """
    Runs all scorers over one tokenization pass.

    The scorers hold only configuration, so one TextAnalyzer can serve any
    number of calls.
    """

    def __init__(
        self,
        sentiment_analyzer: Optional[SentimentAnalyzer] = None,
        keyword_extractor: Optional[KeywordExtractor] = None,
        readability_analyzer: Optional[ReadabilityAnalyzer] = None,
        reading_time_estimator: Optional[ReadingTimeEstimator] = None,
        config: Optional[object] = None,
    ):
        """
        Initialize the facade.

        Args:
            sentiment_analyzer: Defaults to SentimentAnalyzer()
            keyword_extractor: Defaults to KeywordExtractor()
            readability_analyzer: Defaults to ReadabilityAnalyzer()
            reading_time_estimator: Defaults to ReadingTimeEstimator()
            config: Optional Settings object. If None, uses the global settings.
        """
        self.config = config or settings
        self.sentiment_analyzer = sentiment_analyzer or SentimentAnalyzer(self.config.sentiment)
        self.keyword_extractor = keyword_extractor or KeywordExtractor(self.config.keywords)
        self.readability_analyzer = readability_analyzer or ReadabilityAnalyzer(self.config.readability)
        self.reading_time_estimator = reading_time_estimator or ReadingTimeEstimator(self.config.reading_time)

    def reading_time(self, text: Optional[str], word_count: int) -> int:
        """
        Reading time for a text whose token count is already known.

        None/empty text reports 0 when reading_time.zero_for_empty_input is
        set; everything else goes through the estimator and its floor.
        """
        if not text and self.config.reading_time.zero_for_empty_input:
            return 0
        return self.reading_time_estimator.estimate(word_count)

    def analyze(self, text: Optional[str], max_keywords: Optional[int] = None) -> AnalysisResult:
        """
        Analyze one text.

        Args:
            text: Raw input text; None or '' yields a zero-valued result
            max_keywords: Keyword limit. Defaults to settings value.

        Returns:
            AnalysisResult
        """
        if not text:
            logger.debug("Empty input, returning zero-valued result")
            result = AnalysisResult.empty()
            if not self.config.reading_time.zero_for_empty_input:
                result.reading_time = self.reading_time_estimator.estimate(0)
            return result

        tokens = tokenize(text)

        sentiment = self.sentiment_analyzer.extract_features_from_tokens(tokens)
        keywords = self.keyword_extractor.extract_features_from_tokens(tokens, max_keywords)
        readability = self.readability_analyzer.extract_features_from_tokens(tokens, text)

        result = AnalysisResult(
            word_count=len(tokens),
            sentiment=sentiment.score,
            reading_time=self.reading_time(text, len(tokens)),
            complexity=readability.complexity,
            sentiment_label=sentiment.label,
            complexity_level=readability.interpret_complexity(),
            keywords=keywords.keywords,
        )

        logger.debug(
            f"Analyzed {len(text)} chars: {result.word_count} words, "
            f"sentiment={result.sentiment:.3f}, complexity={result.complexity:.3f}"
        )
        return result

    def analyze_batch(
        self,
        texts: List[Optional[str]],
        max_keywords: Optional[int] = None
    ) -> List[AnalysisResult]:
        """
        Analyze multiple texts.

        Args:
            texts: List of text strings
            max_keywords: Keyword limit applied to every text

        Returns:
            List of AnalysisResult objects, in input order
        """
        return [self.analyze(text, max_keywords) for text in texts]
