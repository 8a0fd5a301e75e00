"""
Data structures for the sentiment lexicons.

This module defines the shape of lexicon data using Pydantic models.
Entries and the assembled lexicon are frozen once built.
"""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import LEXICON_KINDS, LEXICON_VERSION

LexiconKind = Literal["positive", "negative", "intensifier"]


class LexiconEntry(BaseModel):
    """
    Single word entry in one of the lexicons.

    Positive entries must carry a weight > 0, negative entries a weight < 0.
    Intensifier weights are multipliers and must be > 0.
    """
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., description="Normalized (lower-case, alphanumeric) word")
    weight: float = Field(..., description="Signed weight or multiplier")
    kind: LexiconKind

    @field_validator('word')
    @classmethod
    def word_must_not_be_empty(cls, v: str) -> str:
        """Ensure word is not empty and normalize to lowercase."""
        if not v.strip():
            raise ValueError('Word cannot be empty')
        return v.strip().lower()

    @model_validator(mode='after')
    def weight_matches_kind(self) -> 'LexiconEntry':
        """Reject weights whose sign contradicts the entry kind."""
        if self.kind == "negative" and self.weight >= 0:
            raise ValueError(f"Negative entry '{self.word}' must have weight < 0")
        if self.kind in ("positive", "intensifier") and self.weight <= 0:
            raise ValueError(f"{self.kind.capitalize()} entry '{self.word}' must have weight > 0")
        return self


class SentimentLexicon(BaseModel):
    """
    The three lexicons combined with version metadata.

    Lookups are on already-normalized tokens; no case folding happens here.
    """
    model_config = ConfigDict(frozen=True)

    version: str = Field(default=LEXICON_VERSION)
    positive: Dict[str, float] = Field(..., description="Positive word weights")
    negative: Dict[str, float] = Field(..., description="Negative word weights")
    intensifiers: Dict[str, float] = Field(..., description="Intensifier multipliers")

    @model_validator(mode='after')
    def validate_tables(self) -> 'SentimentLexicon':
        """Validate every table entry and reject words listed as both positive and negative."""
        for kind, table in (
            ("positive", self.positive),
            ("negative", self.negative),
            ("intensifier", self.intensifiers),
        ):
            for word, weight in table.items():
                LexiconEntry(word=word, weight=weight, kind=kind)

        overlap = set(self.positive) & set(self.negative)
        if overlap:
            raise ValueError(f"Words in both positive and negative lexicons: {sorted(overlap)}")
        return self

    def intensifier_weight(self, token: str) -> Optional[float]:
        """Return the multiplier for an intensifier token, or None."""
        return self.intensifiers.get(token)

    def sentiment_weight(self, token: str) -> Optional[float]:
        """Return the signed weight for a positive or negative token, or None."""
        weight = self.positive.get(token)
        if weight is None:
            weight = self.negative.get(token)
        return weight

    def get_entry(self, token: str) -> Optional[LexiconEntry]:
        """
        Look up a token across all lexicons.

        Intensifiers are checked first, matching the scoring order.

        Args:
            token: Normalized token

        Returns:
            LexiconEntry, or None if the token is sentiment-neutral
        """
        if token in self.intensifiers:
            return LexiconEntry(word=token, weight=self.intensifiers[token], kind="intensifier")
        if token in self.positive:
            return LexiconEntry(word=token, weight=self.positive[token], kind="positive")
        if token in self.negative:
            return LexiconEntry(word=token, weight=self.negative[token], kind="negative")
        return None

    def get_kind_words(self, kind: str) -> Dict[str, float]:
        """
        Get all words of one lexicon kind.

        Args:
            kind: One of LEXICON_KINDS

        Returns:
            Copy of the word -> weight table
        """
        if kind not in LEXICON_KINDS:
            raise ValueError(f"Invalid kind: {kind}. Must be one of {LEXICON_KINDS}")
        table = {
            "positive": self.positive,
            "negative": self.negative,
            "intensifier": self.intensifiers,
        }[kind]
        return dict(table)

    def __len__(self) -> int:
        """Return number of words across all lexicons."""
        return len(self.positive) + len(self.negative) + len(self.intensifiers)
