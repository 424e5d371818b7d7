"""Custom exception hierarchy for puzzle generation and play."""


class CrosswordError(Exception):
    """Base exception for puzzle failures."""


class InvalidConfigurationError(CrosswordError):
    """Raised when the word list or grid size cannot produce any puzzle."""


class MalformedWordError(CrosswordError):
    """Raised when an answer is empty or contains characters outside A-Z."""


class ValidationError(CrosswordError):
    """Raised when the grid integrity checks fail."""


class WordSourceError(CrosswordError):
    """Raised when no word provider could supply a usable word list."""


class SessionError(CrosswordError):
    """Raised when a player action is not allowed in the current puzzle state."""
