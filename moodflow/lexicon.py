# moodflow/lexicon.py
"""Weighted keyword lexicon.

Categories are kept as separate read-only mappings and consulted in a fixed
order, so a word listed under two categories always resolves to the earlier one.
"""
from types import MappingProxyType

CATEGORIES = ("veryPositive", "positive", "negative", "veryNegative")


class Lexicon:
    def __init__(self, table):
        unknown = set(table) - set(CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown lexicon categories: {sorted(unknown)}")
        ordered = []
        for category in CATEGORIES:
            words = dict(table.get(category) or {})
            for word, weight in words.items():
                if not isinstance(word, str) or not word or word != word.lower() or any(c.isspace() for c in word):
                    raise ValueError(f"Lexicon words must be lowercase with no whitespace: {word!r}")
                if isinstance(weight, bool) or not isinstance(weight, int):
                    raise ValueError(f"Weight for {word!r} must be an integer, got {weight!r}")
            ordered.append((category, MappingProxyType(words)))
        self._categories = tuple(ordered)

    @property
    def categories(self):
        return self._categories

    def __iter__(self):
        return iter(self._categories)

    def __contains__(self, word):
        return self.category_of(word) is not None

    def category_of(self, word):
        for category, words in self._categories:
            if word in words:
                return category
        return None

    def weight_of(self, word):
        """Weight from the first category containing ``word``, or None."""
        for _, words in self._categories:
            if word in words:
                return words[word]
        return None

    def __repr__(self):
        sizes = ", ".join(f"{c}={len(w)}" for c, w in self._categories)
        return f"Lexicon({sizes})"


DEFAULT_LEXICON = Lexicon({
    "veryPositive": {"extraordinary": 5, "wonderful": 5, "fantastic": 5, "amazing": 5,
                     "terrific": 4, "glowing": 5, "incredible": 5},
    "positive": {"happy": 3, "great": 3, "good": 2, "pleased": 2, "glad": 2, "nice": 2,
                 "grateful": 4, "blessed": 4},
    "negative": {"bad": -2, "sad": -3, "angry": -3, "upset": -2, "worried": -2, "anxious": -3,
                 "frustrated": -3, "terrible": -4, "horrible": -4, "miserable": -4},
    "veryNegative": {"awful": -5, "dreadful": -5, "devastating": -5, "stressed": -5,
                     "depressed": -5, "lonely": -5},
})
