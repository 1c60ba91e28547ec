"""Whitespace splitting and lossless reassembly of text.

Text is decomposed into an alternating sequence of whitespace runs and
non-whitespace words. Unicode whitespace such as tabs, newlines, non-breaking
and ideographic spaces separates words and is kept exactly as it was.
The ASCII information separators U+001C to U+001F are not whitespace here,
although ``str.isspace()`` reports them as such.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from hyphenize.consts import NON_SPACE_CONTROLS
from hyphenize.errors import WordCountMismatchError


@dataclass(frozen=True)
class Fields:
    """Text split into words and the whitespace runs between them.

    Interleaving ``words`` and ``seps``, starting with a whitespace run when
    ``prefixed`` is true and with a word otherwise, reconstructs the original
    text exactly.

    Attributes:
        prefixed: True if the original text started with whitespace.
        seps: Whitespace runs in order of appearance.
        words: Non-whitespace runs in order of appearance.
    """

    prefixed: bool = False
    seps: tuple[str, ...] = ()
    words: tuple[str, ...] = ()

    def join(self) -> str:
        """Return the original text."""
        return self.replace_words(self.words)

    def replace_words(self, new_words: Sequence[str]) -> str:
        """Rebuild the text with every word exchanged for its replacement.

        Whitespace runs are reinserted unchanged between the new words.

        Args:
            new_words: One replacement per word in ``self.words``, in order.

        Returns:
            The reconstructed text.

        Raises:
            WordCountMismatchError: If ``new_words`` does not hold exactly one
                entry per original word.
        """
        if len(new_words) != len(self.words):
            raise WordCountMismatchError(len(new_words), len(self.words))

        first, second = (self.seps, new_words) if self.prefixed else (new_words, self.seps)
        combined: list[str] = []
        for i in range(len(self.seps) + len(new_words)):
            source = first if i % 2 == 0 else second
            combined.append(source[i // 2])
        return "".join(combined)


def is_space(char: str) -> bool:
    """Return True if a single character is Unicode whitespace."""
    return char.isspace() and char not in NON_SPACE_CONTROLS


def split_fields(text: str) -> Fields:
    """Split text into maximal whitespace and non-whitespace runs.

    Args:
        text: Arbitrary input text.

    Returns:
        The field decomposition of ``text``. Empty input gives an empty,
        non-prefixed decomposition.
    """
    if not text:
        return Fields()

    prefixed = is_space(text[0])
    seps: list[str] = []
    words: list[str] = []

    in_word = not prefixed
    start = 0
    for pos, char in enumerate(text):
        if is_space(char) == in_word:
            (words if in_word else seps).append(text[start:pos])
            in_word = not in_word
            start = pos
    (words if in_word else seps).append(text[start:])

    return Fields(prefixed=prefixed, seps=tuple(seps), words=tuple(words))


def trim_space(text: str) -> tuple[str, str, str]:
    """Cut leading and trailing whitespace off text.

    Args:
        text: Arbitrary input text.

    Returns:
        A tuple of (core, leading whitespace, trailing whitespace). Leading,
        core and trailing concatenated give back ``text``.
    """
    begin = 0
    while begin < len(text) and is_space(text[begin]):
        begin += 1
    finish = len(text)
    while finish > begin and is_space(text[finish - 1]):
        finish -= 1
    return text[begin:finish], text[:begin], text[finish:]
