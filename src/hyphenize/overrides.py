"""Word-specific hyphenation overrides that bypass the pattern engine."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence

from hyphenize.errors import InvalidOverrideError

logger = logging.getLogger(__name__)


class CustomOverrides:
    """Read-only mapping of lowercase words to their fragments.

    Only the lengths of the fragments are used: a word found in the mapping is
    cut into pieces of those lengths, taken from the word as written, so the
    caller's capitalisation survives.

    Example:
        >>> overrides = CustomOverrides({"hello": ["h", "ello"]})
        >>> overrides.lookup("Hello", "-")
        'H-ello'
        >>> overrides.lookup("world", "-") is None
        True
    """

    def __init__(self, mapping: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        """Copy and validate the override mapping.

        Args:
            mapping: Lowercase word -> ordered fragments. The fragment lengths
                must add up to the length of the word.

        Raises:
            InvalidOverrideError: If an entry's fragments do not add up to its word.
        """
        entries: dict[str, tuple[int, ...]] = {}
        for word, fragments in (mapping or {}).items():
            if isinstance(fragments, str):
                raise InvalidOverrideError(f"Override for '{word}' must be a sequence of fragments, not a string")
            lengths = tuple(len(fragment) for fragment in fragments)
            if sum(lengths) != len(word):
                raise InvalidOverrideError(
                    f"Override fragments {list(fragments)!r} cover {sum(lengths)} characters, "
                    f"but '{word}' has {len(word)}"
                )
            if word != word.lower():
                logger.warning("Override key '%s' is not lowercase and will never match", word)
            entries[word] = lengths
        self._entries: Mapping[str, tuple[int, ...]] = MappingProxyType(entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def lookup(self, word: str, hyphen: str) -> Optional[str]:
        """Return ``word`` hyphenated according to its override.

        Args:
            word: The trimmed sub-word in its original case.
            hyphen: The string inserted between fragments.

        Returns:
            The fragments of ``word`` joined by ``hyphen``, or None if there is
            no override for the word.
        """
        lengths = self._entries.get(word.lower())
        if lengths is None:
            return None

        # Case mapping may change the length (e.g. "İ".lower() has two characters)
        if sum(lengths) != len(word):
            logger.debug("Skipping override for '%s': lowercase form differs in length", word)
            return None

        parts: list[str] = []
        pos = 0
        for length in lengths:
            parts.append(word[pos : pos + length])
            pos += length
        return hyphen.join(parts)
