"""Exceptions raised by the hyphenize package."""


class HyphenationError(Exception):
    """Base exception for hyphenation-related errors."""


class PatternLoadError(HyphenationError):
    """Raised when hyphenation patterns cannot be resolved, opened or parsed."""


class WordCountMismatchError(HyphenationError, ValueError):
    """Raised when a replacement word list does not match the original word count."""

    def __init__(self, got: int, wanted: int) -> None:
        super().__init__(f"mismatch in number of words supplied to Fields.replace_words: got {got}, wanted {wanted}")
        self.got = got
        self.wanted = wanted


class InvalidOverrideError(HyphenationError, ValueError):
    """Raised when a custom override's fragments do not add up to its word."""
