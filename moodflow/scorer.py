# moodflow/scorer.py
import re
from dataclasses import dataclass

from .lexicon import DEFAULT_LEXICON

# ECMAScript \s: unlike Python's \s it includes U+FEFF and excludes U+001C-U+001F and U+0085
_WHITESPACE = re.compile("[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")


@dataclass(frozen=True)
class ScoreResult:
    title: str
    score: int
    color: str
    emoji: str
    insight: str


@dataclass(frozen=True)
class Band:
    title: str
    color: str
    emoji: str
    insight: str


BANDS = {
    "Extremely Positive": Band("Extremely Positive", "#F9D423", "🌟", "Incredible energy! You're absolutely glowing!"),
    "Positive": Band("Positive", "#FEF7C3", "😊", "Good vibes! Keep it up!"),
    "Neutral": Band("Neutral", "#8E8E93", "😐", "An average day. What could make it better?"),
    "Very Negative": Band("Very Negative", "#FF9500", "😔", "Remember: tough times don't last, tough people do."),
    "Extremely Negative": Band("Extremely Negative", "#FF3B30", "💀", "You're going through a lot. Please reach out to someone."),
}

TITLES = tuple(BANDS)


def tokenize(text):
    # exact tokens only; "happy!" stays "happy!"
    return _WHITESPACE.split(text.lower())


def score_text(text, lexicon=DEFAULT_LEXICON):
    score = 0
    for token in tokenize(text):
        weight = lexicon.weight_of(token)
        if weight is not None:
            score += weight
    return score


def band_for(score):
    if score >= 10:
        title = "Extremely Positive"
    elif score >= 3:
        title = "Positive"
    elif score > -3:
        title = "Neutral"
    elif score > -10:
        title = "Very Negative"
    else:
        title = "Extremely Negative"
    return BANDS[title]


def classify(score):
    band = band_for(score)
    return ScoreResult(band.title, score, band.color, band.emoji, band.insight)


def analyze(text, lexicon=DEFAULT_LEXICON):
    """Score ``text`` against the lexicon and classify it into a mood band."""
    return classify(score_text(text, lexicon))
