#!/usr/bin/env python3
"""Count sentences, words, characters and syllables in plain text.

The counts feed the readability formulas in ``readability_estimator.scorer``. All
patterns are ASCII-only, so accented letters are never treated as vowels and
non-ASCII spaces are never treated as separators.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

__all__ = [
    "TextStatistics",
    "count_characters",
    "count_sentences",
    "count_syllables",
    "count_words",
    "split_words",
]

SENTENCE_END_RE = re.compile(r"[.!?]\s", re.ASCII)
WORD_SEPARATOR_RE = re.compile(r"\W*\s", re.ASCII)
WHITESPACE_RE = re.compile(r"\s", re.ASCII)

VOWELS = frozenset("aeiouyAEIOUY")
POLYSYLLABLE_MIN = 3


def _split(pattern: re.Pattern[str], text: str) -> list[str]:
    """
    Split text on a separator pattern, dropping trailing empty segments.

    A text the pattern never matches comes back as a single segment, even when
    it is empty. Leading empty segments are kept.
    """
    segments = pattern.split(text)
    if len(segments) == 1:
        return segments

    while segments and segments[-1] == "":
        segments.pop()
    return segments


def count_sentences(text: str) -> int:
    segments = _split(SENTENCE_END_RE, text)
    if segments == [""]:
        return 0
    return len(segments)


def split_words(text: str) -> list[str]:
    """
    Split text into words on whitespace and any punctuation right before it.

    ``"Hello, world!"`` gives ``["Hello", "world!"]``: the comma is part of the
    separator, the final ``!`` has no whitespace after it and stays.
    """
    words = _split(WORD_SEPARATOR_RE, text)
    if words == [""]:
        return []
    return words


def count_words(text: str) -> int:
    return len(split_words(text))


def count_characters(text: str) -> int:
    """Count every character except whitespace. Punctuation is included."""
    return len(WHITESPACE_RE.sub("", text))


def count_syllables(word: str) -> int:
    """
    Estimate syllables as the number of vowel runs in the word.

    A trailing lowercase ``e`` is treated as silent. Every word counts at least
    one syllable, the empty string included.
    """
    syllables = 0
    index = 0
    length = len(word)

    while index < length:
        if word[index] in VOWELS:
            syllables += 1
            while index < length and word[index] in VOWELS:
                index += 1
        else:
            index += 1

    if word and word[-1] == "e":
        syllables -= 1

    return syllables if syllables > 0 else 1


def _syllables_per_word(words: Iterable[str]) -> tuple[int, ...]:
    return tuple(count_syllables(word) for word in words)


@dataclass(frozen=True)
class TextStatistics:
    """Counts extracted from one text, consumed by the readability formulas."""

    sentence_count: int
    word_count: int
    char_count: int
    syllable_count: int
    polysyllable_count: int
    syllables_per_word: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        counts = {
            "sentence_count": self.sentence_count,
            "word_count": self.word_count,
            "char_count": self.char_count,
            "syllable_count": self.syllable_count,
            "polysyllable_count": self.polysyllable_count,
        }
        for name, value in counts.items():
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

        # Accept any sequence but store a tuple so the value stays immutable.
        object.__setattr__(self, "syllables_per_word", tuple(self.syllables_per_word))

        if len(self.syllables_per_word) != self.word_count:
            raise ValueError(
                f"syllables_per_word has {len(self.syllables_per_word)} entries "
                f"but word_count is {self.word_count}"
            )
        if sum(self.syllables_per_word) != self.syllable_count:
            raise ValueError(
                f"syllable_count {self.syllable_count} does not match "
                f"sum of syllables_per_word ({sum(self.syllables_per_word)})"
            )
        polysyllables = sum(1 for s in self.syllables_per_word if s >= POLYSYLLABLE_MIN)
        if polysyllables != self.polysyllable_count:
            raise ValueError(
                f"polysyllable_count {self.polysyllable_count} does not match "
                f"syllables_per_word ({polysyllables})"
            )

    @classmethod
    def from_text(cls, text: str) -> "TextStatistics":
        words = split_words(text)
        per_word = _syllables_per_word(words)
        return cls(
            sentence_count=count_sentences(text),
            word_count=len(words),
            char_count=count_characters(text),
            syllable_count=sum(per_word),
            polysyllable_count=sum(1 for s in per_word if s >= POLYSYLLABLE_MIN),
            syllables_per_word=per_word,
        )

    def as_dict(self) -> dict[str, int]:
        return {
            "words": self.word_count,
            "sentences": self.sentence_count,
            "characters": self.char_count,
            "syllables": self.syllable_count,
            "polysyllables": self.polysyllable_count,
        }
