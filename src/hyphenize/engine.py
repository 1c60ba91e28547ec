"""Pattern engines proposing breakpoints for single words.

The hyphenation core only depends on :class:`PatternEngine`. The production
implementation wraps pyphen, which reads hunspell/LibreOffice hyphenation
dictionaries (``hyph_*.dic``) built from TeX patterns.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import List, Union

import pyphen

from hyphenize.errors import PatternLoadError

logger = logging.getLogger(__name__)

PatternSource = Union[str, PathLike]


class PatternEngine(ABC):
    """Abstract source of linguistically permissible breakpoints."""

    @abstractmethod
    def breakpoints(self, word: str) -> List[int]:
        """Return the break offsets for a word.

        Args:
            word: A plain word without whitespace or punctuation.

        Returns:
            Strictly increasing character offsets into ``word``; a hyphen may
            be inserted before the character at each offset.
        """


class PyphenEngine(PatternEngine):
    """Pattern engine backed by a pyphen dictionary."""

    def __init__(self, dictionary: pyphen.Pyphen, name: str = "") -> None:
        self._dictionary = dictionary
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def breakpoints(self, word: str) -> List[int]:
        if not word:
            return []
        return [int(position) for position in self._dictionary.positions(word)]


def list_supported_languages() -> list[str]:
    """Return a sorted list of language codes bundled with pyphen."""
    return sorted(pyphen.LANGUAGES.keys())


def _looks_like_path(source: str) -> bool:
    return source.endswith(".dic") or "/" in source or "\\" in source or source.startswith("~")


def load_pattern_engine(source: PatternSource) -> PyphenEngine:
    """Load hyphenation patterns from a dictionary file or a language code.

    Args:
        source: Path to a ``hyph_*.dic`` file, or a language code known to
            pyphen such as 'en_US' or 'de_DE'.

    Returns:
        A pattern engine reporting every break the patterns allow.

    Raises:
        PatternLoadError: If the path cannot be resolved or opened, the
            language is unknown, or the patterns cannot be parsed.
    """
    raw = str(source)
    path = Path(raw).expanduser()

    if isinstance(source, PathLike) or path.is_file() or _looks_like_path(raw):
        try:
            path = path.resolve(strict=True)
        except OSError as exc:
            raise PatternLoadError(f"Cannot resolve pattern file '{raw}': {exc}") from exc
        load_args = {"filename": str(path)}
        name = str(path)
    else:
        language = pyphen.language_fallback(raw)
        if language is None:
            supported = ", ".join(list_supported_languages()[:10])
            raise PatternLoadError(
                f"Language '{raw}' is not supported by pyphen. Supported languages include: {supported}..."
            )
        load_args = {"lang": language}
        name = language

    try:
        # left/right = 1: the length rules are applied later by the placement step
        dictionary = pyphen.Pyphen(left=1, right=1, **load_args)
    except (OSError, ValueError, LookupError, UnicodeError) as exc:
        raise PatternLoadError(f"Cannot load hyphenation patterns from '{raw}': {exc}") from exc

    logger.info("Loaded hyphenation patterns from %s", name)
    return PyphenEngine(dictionary, name=name)
