"""Central module containing constants and definitions for word decomposition and hyphen placement."""

from __future__ import annotations

from dataclasses import dataclass

###############################################################################
# Characters
###############################################################################


HYPHEN: str = "-"  # U+002D hyphen-minus
EN_DASH: str = "\u2013"  # en dash
EM_DASH: str = "\u2014"  # em dash
SOFT_HYPHEN: str = "\u00ad"  # only rendered when a line actually breaks there
SLASH: str = "/"

# Characters that already act as a visible or invisible hyphen inside a word
HYPHEN_CHARS: tuple[str, ...] = (HYPHEN, EN_DASH, EM_DASH, SOFT_HYPHEN)

# Characters splitting a word into independently hyphenated sub-words
WORD_SEPARATORS: str = SLASH + "".join(HYPHEN_CHARS)

# Grammar stripped from both ends of a sub-word before hyphenation
PUNCTUATION_CUTSET: str = ",.;:?!()#"

# Information separators (file, group, record, unit) that str.isspace() accepts
# but Unicode does not list as White_Space
NON_SPACE_CONTROLS: str = "\x1c\x1d\x1e\x1f"


###############################################################################
# Length rules
###############################################################################


MIN_WORD_LENGTH: int = 6  # words of 5 characters or less are never hyphenated
MIN_FRAGMENT_LENGTH: int = 2  # no break may leave a single character on either side


###############################################################################
# HyphenationConfig
###############################################################################


@dataclass(frozen=True)
class HyphenationConfig:
    """Character sets and length limits shared by all hyphenation components.

    Attributes:
        word_separators: Characters on which a word is split into sub-words.
        hyphen_chars: Hyphen-like characters; a part starting or ending with one
            of them is never followed by an extra hyphen.
        punctuation: Characters trimmed from both ends of a sub-word.
        min_word_length: Minimum number of characters a word needs to be hyphenated.
        min_fragment_length: Minimum number of characters on each side of a hyphen.
    """

    word_separators: str = WORD_SEPARATORS
    hyphen_chars: tuple[str, ...] = HYPHEN_CHARS
    punctuation: str = PUNCTUATION_CUTSET
    min_word_length: int = MIN_WORD_LENGTH
    min_fragment_length: int = MIN_FRAGMENT_LENGTH

    def __post_init__(self) -> None:
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be positive, got {self.min_word_length}")
        if self.min_fragment_length < 1:
            raise ValueError(f"min_fragment_length must be positive, got {self.min_fragment_length}")


DEFAULT_CONFIG = HyphenationConfig()
