from .lexicon import CATEGORIES, DEFAULT_LEXICON, Lexicon
from .scorer import BANDS, TITLES, Band, ScoreResult, analyze, band_for, classify, score_text, tokenize
from .journal import EmptyMoodError, Entry, Journal

__all__ = [
    "CATEGORIES", "DEFAULT_LEXICON", "Lexicon",
    "BANDS", "TITLES", "Band", "ScoreResult", "analyze", "band_for", "classify", "score_text", "tokenize",
    "EmptyMoodError", "Entry", "Journal",
]
