"""Exception types raised when loading greekreader resources."""

__all__ = ["GreekReaderError", "MappingTableError", "DictionaryError"]


class GreekReaderError(Exception):
    """Base class for greekreader resource errors."""


class MappingTableError(GreekReaderError):
    """The beta-code mapping resource was missing or malformed."""


class DictionaryError(GreekReaderError):
    """The dictionary resource was missing, malformed, or empty."""
