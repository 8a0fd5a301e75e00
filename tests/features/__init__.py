"""
Feature scorer tests for text metrics.

This package contains golden-value tests for:
- Sentiment scoring (lexicon weights, intensifiers, damping, clamping)
- Keyword ranking (frequency, length, alphabetical tie-break)
- Readability (syllables, sentences, Flesch-style complexity)
"""
