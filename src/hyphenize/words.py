"""Decomposition of a single word into sub-words and surrounding punctuation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from hyphenize.consts import PUNCTUATION_CUTSET, WORD_SEPARATORS


@dataclass(frozen=True)
class SubWord:
    """A segment of a word together with the separator that followed it.

    Attributes:
        word: The segment text, possibly empty.
        sep: The separator character after the segment, empty for the last one.
    """

    word: str
    sep: str = ""


@dataclass(frozen=True)
class TrimResult:
    """Result of cutting punctuation off both ends of a string.

    Attributes:
        core: The remaining text.
        leading: Characters cut from the start.
        trailing: Characters cut from the end.
    """

    core: str
    leading: str = ""
    trailing: str = ""

    def join(self, core: str | None = None) -> str:
        """Reattach the cut punctuation around ``core`` (the original core by default)."""
        return self.leading + (self.core if core is None else core) + self.trailing


def split_sub_words(word: str, separators: str = WORD_SEPARATORS) -> List[SubWord]:
    """Split a word on hyphen-like separator characters.

    Compound words such as "part-time" are hyphenated as independent shorter
    words, so every side is measured on its own against the length rules.

    Args:
        word: A single whitespace-free token.
        separators: Characters that separate sub-words.

    Returns:
        Sub-words in order. Concatenating ``word + sep`` of every entry gives
        back the input. The last entry always has an empty separator.
    """
    sub_words: list[SubWord] = []
    start = 0
    for pos, char in enumerate(word):
        if char in separators:
            sub_words.append(SubWord(word=word[start:pos], sep=char))
            start = pos + 1
    sub_words.append(SubWord(word=word[start:]))
    return sub_words


def trim_punctuation(text: str, cutset: str = PUNCTUATION_CUTSET) -> TrimResult:
    """Cut grammar characters from both ends of a string.

    Args:
        text: The sub-word to trim.
        cutset: Characters to remove.

    Returns:
        The trimmed core with the exact leading and trailing strings removed.
    """
    core = text.lstrip(cutset)
    leading = text[: len(text) - len(core)]
    stripped = core.rstrip(cutset)
    trailing = core[len(stripped) :]
    return TrimResult(core=stripped, leading=leading, trailing=trailing)
