"""Hyphenation of arbitrary text using language patterns and word overrides.

This module provides the Hyphenator class that inserts hyphen markers (by
default soft hyphens) into the words of a text while keeping every other
character in place. Removing the markers gives back the input, up to the
normalisation of whitespace between words described in
:meth:`Hyphenator.hyphenate_text`.

Uses pyphen as the pattern engine. On top of the patterns the following
rules apply:

- Words of 5 characters or less are never hyphenated.
- No break leaves a single character on either side.
- Compound words are hyphenated per part, e.g. "part-time" is two 4-letter words.
- Grammar (.,;:?!()#) around a word does not count towards its length.
- Custom overrides for a word take precedence over the patterns.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from hyphenize.consts import DEFAULT_CONFIG, HYPHEN, SOFT_HYPHEN, HyphenationConfig
from hyphenize.engine import PatternEngine, PatternSource, load_pattern_engine
from hyphenize.fields import split_fields, trim_space
from hyphenize.overrides import CustomOverrides
from hyphenize.placement import place_hyphens
from hyphenize.words import split_sub_words, trim_punctuation

logger = logging.getLogger(__name__)


class Hyphenator:
    """Immutable hyphenation setup for one language.

    Example:
        >>> hyphenator = Hyphenator.from_source("en_US", "-", {"hello": ["h", "ello"]})
        >>> hyphenator.hyphenate_text("Hello")
        'H-ello'
        >>> hyphenator.hyphenate_text("a b")
        'a b'
    """

    __slots__ = ("_engine", "_hyphen", "_custom", "_config")

    def __init__(
        self,
        engine: PatternEngine,
        hyphen: str = SOFT_HYPHEN,
        custom: Optional[Mapping[str, Sequence[str]]] = None,
        config: Optional[HyphenationConfig] = None,
    ) -> None:
        """Initialize the hyphenator.

        Args:
            engine: Pattern engine proposing breakpoints for plain words.
            hyphen: String inserted at every chosen breakpoint.
            custom: Lowercase word -> fragments overriding the patterns for
                that word, e.g. ``{"hello": ["h", "ello"]}``. Capitalisation
                of the hyphenated text is preserved.
            config: Character sets and length limits, defaults to DEFAULT_CONFIG.

        Raises:
            InvalidOverrideError: If a custom entry's fragments do not add up to its word.
        """
        self._engine = engine
        self._hyphen = hyphen
        self._custom = custom if isinstance(custom, CustomOverrides) else CustomOverrides(custom)
        self._config = config or DEFAULT_CONFIG

    @classmethod
    def from_source(
        cls,
        source: PatternSource,
        hyphen: str = SOFT_HYPHEN,
        custom: Optional[Mapping[str, Sequence[str]]] = None,
        config: Optional[HyphenationConfig] = None,
    ) -> Hyphenator:
        """Create a hyphenator from a pattern dictionary file or a language code.

        Args:
            source: Path to a ``hyph_*.dic`` file or a pyphen language code.
            hyphen: String inserted at every chosen breakpoint.
            custom: Word overrides, see :meth:`__init__`.
            config: Character sets and length limits.

        Returns:
            A ready to use Hyphenator.

        Raises:
            PatternLoadError: If the patterns cannot be loaded.
            InvalidOverrideError: If a custom entry is inconsistent.
        """
        return cls(load_pattern_engine(source), hyphen=hyphen, custom=custom, config=config)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._engine!r}, hyphen={self._hyphen!r}, custom={len(self._custom)} words)"

    @property
    def engine(self) -> PatternEngine:
        """The pattern engine."""
        return self._engine

    @property
    def hyphen(self) -> str:
        """The inserted hyphen string."""
        return self._hyphen

    @property
    def custom(self) -> CustomOverrides:
        """The word overrides."""
        return self._custom

    @property
    def config(self) -> HyphenationConfig:
        """The character sets and length limits."""
        return self._config

    def hyphenate_word(self, word: str) -> str:
        """Hyphenate a single whitespace-free token.

        The token is split into sub-words at separators (hyphens, dashes,
        soft hyphens, slashes). Every sub-word is stripped of punctuation,
        hyphenated on its own and put back together with its punctuation and
        separator.

        Args:
            word: The token to hyphenate.

        Returns:
            The token with hyphen markers inserted.
        """
        result: list[str] = []
        for sub in split_sub_words(word, self._config.word_separators):
            trimmed = trim_punctuation(sub.word, self._config.punctuation)
            result.append(trimmed.join(self._hyphenate_core(trimmed.core)))
            result.append(sub.sep)
        return "".join(result)

    def _hyphenate_core(self, core: str) -> str:
        if not core:
            return core

        replaced = self._custom.lookup(core, self._hyphen)
        if replaced is not None:
            logger.debug("Custom override used for '%s'", core)
            return replaced

        return place_hyphens(core, self._engine.breakpoints(core), self._hyphen, self._config)

    def hyphenate_text(self, text: str) -> str:
        """Hyphenate every word of a text.

        Whitespace before the first and after the last word is kept exactly.
        Words are delimited by runs of whitespace; each run between two words
        is written back as a single space.

        Args:
            text: Arbitrary input text.

        Returns:
            The hyphenated text.
        """
        core, start, end = trim_space(text)
        words = [self.hyphenate_word(word) for word in split_fields(core).words]
        return start + " ".join(words) + end

    def hyphenate_text_preserving_whitespace(self, text: str) -> str:
        """Hyphenate every word of a text keeping all whitespace unchanged.

        Args:
            text: Arbitrary input text.

        Returns:
            The hyphenated text; removing the hyphen markers gives back ``text``
            when the marker does not occur in it.
        """
        fields = split_fields(text)
        return fields.replace_words([self.hyphenate_word(word) for word in fields.words])


def main() -> None:
    """Print a hyphenated sample text using the bundled en_US patterns."""
    sample = (
        "Marie Curie (born Maria Sklodowska) was a pioneering physicist and chemist whose research on\n"
        "radioactivity profoundly shaped modern science. She was the first woman to receive a Nobel Prize,\n"
        "the first person to win Nobel Prizes in two different scientific fields, and one of the most\n"
        "influential scientists of the twentieth century; her self-directed, life-long work laid the\n"
        "foundation for advances in nuclear physics, medical diagnostics, and cancer therapy."
    )
    hyphenator = Hyphenator.from_source("en_US", HYPHEN, {"curie": ["cu", "rie"]})

    print("Whitespace normalised:")
    print("-" * 50)
    print(hyphenator.hyphenate_text(sample))
    print("-" * 50)
    print()
    print("Whitespace preserved:")
    print("-" * 50)
    print(hyphenator.hyphenate_text_preserving_whitespace(sample))
    print("-" * 50)


if __name__ == "__main__":
    main()
