"""Custom exception hierarchy for the word finder."""


class WordFinderError(Exception):
    """Base exception for word finder failures."""


class ShapeError(WordFinderError):
    """Raised when a grid does not match the configured square dimensions."""


class InputFileError(WordFinderError):
    """Raised when a grid or word list file cannot be read."""
