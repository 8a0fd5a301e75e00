"""
Result record returned by the analysis facade.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Literal
import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class AnalysisResult(BaseModel):
    """
    Combined text metrics for one input.

    The four core fields are always present. sentiment_label, complexity_level
    and keywords are derived from the same tokenization pass.
    """
    word_count: int = Field(default=0, ge=0, description="Token count")
    sentiment: float = Field(default=0.0, ge=-1.0, le=1.0, description="Bounded lexicon score")
    reading_time: int = Field(default=0, ge=0, description="Estimated minutes to read")
    complexity: float = Field(default=0.0, ge=0.0, le=1.0, description="Inverted readability")

    sentiment_label: Literal["POSITIVE", "NEGATIVE", "NEUTRAL"] = Field(default="NEUTRAL")
    complexity_level: Literal["Low", "Medium", "High"] = Field(default="Low")
    keywords: List[str] = Field(default_factory=list, description="Ranked keywords")

    @classmethod
    def empty(cls) -> 'AnalysisResult':
        """Zero-valued result used for None/empty input."""
        return cls()

    def to_report(self, precision: int = 3, include_keywords: bool = True) -> Dict[str, Any]:
        """
        Serializable dictionary with floats rounded for display.

        Args:
            precision: Decimal places for sentiment and complexity
            include_keywords: Whether to include the keyword list
        """
        report = self.model_dump()
        report["sentiment"] = round(self.sentiment, precision)
        report["complexity"] = round(self.complexity, precision)
        if not include_keywords:
            report.pop("keywords")
        return report

    def save_to_json(self, output_path: Path) -> None:
        """
        Save result to JSON file.

        Args:
            output_path: Path to output JSON file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.model_dump(), f, indent=2)
        logger.info(f"Saved analysis result to {output_path}")

    @classmethod
    def load_from_json(cls, input_path: Path) -> 'AnalysisResult':
        """
        Load result from JSON file.

        Args:
            input_path: Path to input JSON file

        Returns:
            AnalysisResult object
        """
        with open(input_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls(**data)

    def get_summary(self) -> str:
        """Return human-readable summary."""
        keywords = ", ".join(self.keywords) if self.keywords else "None"
        return (
            f"Text Analysis Summary\n"
            f"{'='*50}\n"
            f"Words: {self.word_count:,}\n"
            f"Sentiment: {self.sentiment:+.3f} ({self.sentiment_label})\n"
            f"Complexity: {self.complexity:.3f} ({self.complexity_level})\n"
            f"Reading time: {self.reading_time} min\n"
            f"Keywords: {keywords}"
        )
