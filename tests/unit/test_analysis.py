"""
Unit tests for the analysis facade and public entry points.
"""

import pytest

from text_metrics import (
    AnalysisResult,
    analyze_text,
    extract_keyword_list,
    extract_keywords,
    get_complexity,
    get_reading_time,
    get_sentiment_score,
    get_word_count,
)


class TestEntryPoints:
    """Single-metric functions."""

    def test_word_count(self):
        assert get_word_count("Hello, World!!") == 2
        assert get_word_count("a an if") == 0
        assert get_word_count(None) == 0

    def test_sentiment_score(self):
        assert get_sentiment_score("This is an absolutely amazing product") == 1.0
        assert get_sentiment_score(None) == 0.0

    def test_extract_keywords_joined(self):
        assert extract_keywords("testing testing coding coding coding", 2) == "coding,testing"
        assert extract_keywords(None) == ""

    def test_complexity(self, readability_sentence):
        assert get_complexity(readability_sentence) == pytest.approx(0.336)
        assert get_complexity(None) == 0.0


class TestAnalyzeText:
    """Combined record."""

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_input_zero_record(self, text):
        result = analyze_text(text)

        assert result == AnalysisResult(
            word_count=0, sentiment=0.0, reading_time=0, complexity=0.0,
            sentiment_label="NEUTRAL", complexity_level="Low", keywords=[],
        )

    def test_whitespace_only_input(self):
        """Non-empty text without tokens still reports one minute."""
        result = analyze_text("   ")

        assert result.word_count == 0
        assert result.sentiment == 0.0
        assert result.complexity == 0.0
        assert result.reading_time == 1

    def test_matches_single_metric_functions(self, sample_review_text):
        result = analyze_text(sample_review_text)

        assert result.word_count == get_word_count(sample_review_text)
        assert result.sentiment == get_sentiment_score(sample_review_text)
        assert result.complexity == get_complexity(sample_review_text)
        assert result.reading_time == get_reading_time(sample_review_text)
        assert result.keywords == extract_keyword_list(sample_review_text)

    def test_repeatable(self, sample_review_text):
        assert analyze_text(sample_review_text) == analyze_text(sample_review_text)

    def test_review_keywords(self, sample_review_text):
        result = analyze_text(sample_review_text)

        assert result.keywords[0] == "keyboard"
        assert result.sentiment_label == "POSITIVE"

    @pytest.mark.parametrize("text,expected", [
        ("The cat sat on the mat.", "Low"),
        ("Incomprehensibility characterizes institutionalization", "High"),
    ])
    def test_complexity_level(self, text, expected):
        result = analyze_text(text)

        assert result.complexity_level == expected
        assert f"({expected})" in result.get_summary()

    @pytest.mark.parametrize("text", [
        "!!!",
        "a" * 10000,
        "terrible " * 500,
        "amazing " * 500,
        "café naïve résumé",
        "\t\n\r",
        "Supercalifragilisticexpialidocious.",
    ])
    def test_fields_within_ranges(self, text):
        result = analyze_text(text)

        assert result.word_count >= 0
        assert -1.0 <= result.sentiment <= 1.0
        assert 0.0 <= result.complexity <= 1.0
        assert result.reading_time >= 1


class TestTextAnalyzer:
    """TextAnalyzer construction and batch use."""

    def test_zero_for_empty_input_disabled(self):
        from text_metrics.analysis import TextAnalyzer
        from text_metrics.config import Settings
        from text_metrics.config.features import ReadingTimeConfig

        config = Settings(reading_time=ReadingTimeConfig(zero_for_empty_input=False))
        analyzer = TextAnalyzer(config=config)

        assert analyzer.analyze(None).reading_time == 1
        assert analyzer.analyze("").reading_time == 1

    def test_max_keywords_forwarded(self, text_analyzer):
        result = text_analyzer.analyze("testing testing coding coding coding", max_keywords=1)
        assert result.keywords == ["coding"]

    def test_batch_preserves_order(self, text_analyzer):
        results = text_analyzer.analyze_batch(["good", None, "terrible"])

        assert [r.sentiment_label for r in results] == ["POSITIVE", "NEUTRAL", "NEGATIVE"]
        assert results[1].reading_time == 0


class TestAnalysisResult:
    """AnalysisResult schema helpers."""

    def test_out_of_range_rejected(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            AnalysisResult(sentiment=1.5)
        with pytest.raises(ValidationError):
            AnalysisResult(word_count=-1)

    def test_report_rounding(self):
        result = AnalysisResult(word_count=5, sentiment=0.123456, reading_time=1,
                                complexity=0.336000001, keywords=["people"])
        report = result.to_report(precision=2, include_keywords=False)

        assert report["sentiment"] == 0.12
        assert report["complexity"] == 0.34
        assert "keywords" not in report

    def test_json_round_trip(self, sample_review_text, tmp_path):
        result = analyze_text(sample_review_text)
        output_path = tmp_path / "out" / "result.json"
        result.save_to_json(output_path)

        assert AnalysisResult.load_from_json(output_path) == result

    def test_summary(self):
        summary = analyze_text("This is an absolutely amazing product").get_summary()

        assert "POSITIVE" in summary
        assert "Words: 4" in summary
