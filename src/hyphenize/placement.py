"""Hyphen placement: turn raw pattern breakpoints into hyphen markers.

The pattern engine proposes every linguistically possible break. Only a subset
is used: short words are left alone, a break never strands a single character
on either side, and no marker is added next to an existing hyphen.
All lengths are counted in characters (code points), never in bytes.
"""

from __future__ import annotations

from typing import Iterable, List

from hyphenize.consts import DEFAULT_CONFIG, HyphenationConfig


def char_len(text: str) -> int:
    """Return the number of characters (code points) in text."""
    return len(text)


def split_at_breakpoints(core: str, breakpoints: Iterable[int]) -> List[str]:
    """Slice a word into parts at the given offsets.

    Offsets outside the word, or not greater than the previous offset, are
    ignored. An empty final part is dropped.

    Args:
        core: The word to slice.
        breakpoints: Increasing character offsets into ``core``.

    Returns:
        The parts in order; their concatenation is ``core``.
    """
    parts: list[str] = []
    pos = 0
    for offset in breakpoints:
        if offset <= pos or offset > len(core):
            continue
        parts.append(core[pos:offset])
        pos = offset
    if core[pos:]:
        parts.append(core[pos:])
    return parts


def should_hyphenate(part_len: int, total_len: int, config: HyphenationConfig = DEFAULT_CONFIG) -> bool:
    """Decide whether a hyphen may follow the first ``part_len`` characters of a word.

    Args:
        part_len: Characters before the candidate break.
        total_len: Characters in the whole word.
        config: Length limits to apply.

    Returns:
        True if the word is long enough and both sides of the break keep the
        minimum fragment length.
    """
    if total_len < config.min_word_length:
        return False
    if part_len < config.min_fragment_length:
        return False
    if total_len - part_len < config.min_fragment_length:
        return False
    return True


def place_hyphens(
    core: str,
    breakpoints: Iterable[int],
    hyphen: str,
    config: HyphenationConfig = DEFAULT_CONFIG,
) -> str:
    """Insert hyphen markers into a word at the admissible breakpoints.

    Walks the parts left to right keeping a running character count. After
    each part a marker is added when :func:`should_hyphenate` allows it,
    except:

    - a part ending in a hyphen character never gets another marker;
    - a part starting with a hyphen character is measured on its own
      (minus the hyphen) instead of by the running count, so a lone letter
      after an existing hyphen does not become a fragment.

    Args:
        core: The punctuation-free sub-word.
        breakpoints: Offsets proposed by the pattern engine for ``core``.
        hyphen: The marker string to insert.
        config: Hyphen characters and length limits.

    Returns:
        ``core`` with markers inserted; removing the markers gives ``core``.
    """
    total = char_len(core)
    word: list[str] = []
    seen = 0

    for part in split_at_breakpoints(core, breakpoints):
        word.append(part)
        seen += char_len(part)

        if part.endswith(config.hyphen_chars):
            continue

        part_len = seen
        if part.startswith(config.hyphen_chars):
            part_len = char_len(part) - 1

        if should_hyphenate(part_len, total, config):
            word.append(hyphen)

    return "".join(word)
