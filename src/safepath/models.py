"""Core data types for safepath."""

from enum import Enum


class ErrorKind(Enum):
    """Why a path or path segment was rejected."""

    # Segment failures
    RESERVED_SEGMENT_NAME = "reserved_segment_name"
    INVALID_ENCODING = "invalid_encoding"
    DISALLOWED_BYTE = "disallowed_byte"
    NON_ASCII_BYTE = "non_ascii_byte"
    LEADING_CHARACTER = "leading_character"
    TRAILING_CHARACTER = "trailing_character"
    RESERVED_WINDOWS_NAME = "reserved_windows_name"

    # Path failures
    EMPTY_PATH = "empty_path"
    ABSOLUTE_PATH = "absolute_path"
    TRAILING_SEPARATOR = "trailing_separator"
    DOUBLE_SEPARATOR = "double_separator"

    @property
    def is_segment_kind(self) -> bool:
        """True for failures that describe a single segment."""
        return self not in _PATH_KINDS


_PATH_KINDS = frozenset(
    {
        ErrorKind.EMPTY_PATH,
        ErrorKind.ABSOLUTE_PATH,
        ErrorKind.TRAILING_SEPARATOR,
        ErrorKind.DOUBLE_SEPARATOR,
    }
)
