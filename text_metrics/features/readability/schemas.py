"""
Data structures for readability and text complexity analysis.

This module defines Pydantic v2 models for readability features.
"""

from pydantic import BaseModel, Field
from typing import Dict
from datetime import datetime
from pathlib import Path
import json

from .constants import (
    COMPLEXITY_THRESHOLDS,
    READABILITY_MODULE_VERSION,
)


def complexity_level(complexity: float) -> str:
    """Map a complexity score to Low, Medium or High (bounds are exclusive)."""
    if complexity > COMPLEXITY_THRESHOLDS["medium"]:
        return "High"
    if complexity > COMPLEXITY_THRESHOLDS["low"]:
        return "Medium"
    return "Low"


class ReadabilityFeatures(BaseModel):
    """
    Text statistics and the complexity score derived from them.

    complexity is the value reported to callers; the other fields are the
    intermediate statistics of the Flesch-style formula.
    """

    # ===========================
    # Basic Text Statistics
    # ===========================
    word_count: int = Field(..., ge=0, description="Token count")
    sentence_count: int = Field(..., ge=0, description="Count of '.', '!' and '?' (min 1 for non-empty text)")
    syllable_count: int = Field(..., ge=0, description="Estimated syllables, at least 1 per word")

    # ===========================
    # Structural Complexity
    # ===========================
    avg_word_length: float = Field(
        ...,
        ge=0.0,
        description="Average characters per token. Reported only; not part of the formula."
    )
    avg_sentence_length: float = Field(..., ge=0.0, description="Average tokens per sentence")
    avg_syllables_per_word: float = Field(..., ge=0.0, description="Average syllables per token")

    # ===========================
    # Scores
    # ===========================
    flesch_reading_ease: float = Field(
        ...,
        description="Flesch Reading Ease. Higher = easier. Unbounded; can be negative or above 100."
    )
    complexity: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="(100 - Flesch) / 100 clamped to [0, 1]. Higher = harder to read."
    )

    def model_dump_to_json_file(self, output_path: Path) -> None:
        """
        Save features to JSON file.

        Args:
            output_path: Path to output JSON file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.model_dump(), f, indent=2)

    @classmethod
    def model_load_from_json_file(cls, input_path: Path) -> 'ReadabilityFeatures':
        """
        Load features from JSON file.

        Args:
            input_path: Path to input JSON file

        Returns:
            ReadabilityFeatures object
        """
        with open(input_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls(**data)

    def get_basic_stats(self) -> Dict[str, int]:
        """Get dictionary of basic text statistics."""
        return {
            "word_count": self.word_count,
            "sentence_count": self.sentence_count,
            "syllable_count": self.syllable_count,
        }

    def interpret_complexity(self) -> str:
        """
        Get the Low / Medium / High level of the complexity score.

        Returns:
            "Low", "Medium" or "High"
        """
        return complexity_level(self.complexity)

    def get_summary(self) -> str:
        """Return human-readable summary of readability features."""
        return (
            f"Readability Analysis Summary\n"
            f"{'='*50}\n"
            f"Words: {self.word_count:,} | Sentences: {self.sentence_count} | "
            f"Syllables: {self.syllable_count:,}\n"
            f"  Avg Sentence Length: {self.avg_sentence_length:.1f} words\n"
            f"  Avg Syllables/Word: {self.avg_syllables_per_word:.2f}\n"
            f"  Flesch Reading Ease: {self.flesch_reading_ease:.1f}\n"
            f"  Complexity: {self.complexity:.3f} ({self.interpret_complexity()})"
        )


class ReadabilityAnalysisMetadata(BaseModel):
    """
    Metadata about a readability analysis run.

    Tracks configuration and warnings for auditability.
    """
    version: str = Field(default=READABILITY_MODULE_VERSION)
    analyzed_at: datetime = Field(default_factory=datetime.now)
    text_length: int = Field(..., ge=0)
    word_count: int = Field(..., ge=0)
    sentence_count: int = Field(..., ge=0)
    warnings: list[str] = Field(
        default_factory=list,
        description="Analysis warnings (e.g., text too short)"
    )
    config_used: Dict = Field(
        default_factory=dict,
        description="Configuration settings used for this analysis"
    )

    def get_summary(self) -> str:
        """Return human-readable summary of metadata."""
        warnings_str = "\n    ".join(self.warnings) if self.warnings else "None"
        return (
            f"Analysis Metadata\n"
            f"{'='*50}\n"
            f"Version: {self.version}\n"
            f"Analyzed: {self.analyzed_at.strftime('%Y-%m-%d %H:%M:%S')}\n"
            f"Text: {self.word_count:,} words, {self.sentence_count} sentences\n"
            f"Warnings:\n    {warnings_str}"
        )


class ReadabilityAnalysisResult(BaseModel):
    """
    Complete readability analysis result with features and metadata.
    """
    features: ReadabilityFeatures = Field(
        ...,
        description="Extracted readability features"
    )
    metadata: ReadabilityAnalysisMetadata = Field(
        ...,
        description="Analysis metadata and configuration"
    )

    def model_dump_to_json_file(self, output_path: Path) -> None:
        """
        Save complete result to JSON file.

        Args:
            output_path: Path to output JSON file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.model_dump_json(indent=2))

    @classmethod
    def model_load_from_json_file(cls, input_path: Path) -> 'ReadabilityAnalysisResult':
        """
        Load complete result from JSON file.

        Args:
            input_path: Path to input JSON file

        Returns:
            ReadabilityAnalysisResult object
        """
        with open(input_path, 'r', encoding='utf-8') as f:
            return cls.model_validate_json(f.read())

    def get_summary(self) -> str:
        """Return human-readable summary of complete result."""
        return (
            f"{self.metadata.get_summary()}\n\n"
            f"{self.features.get_summary()}"
        )
