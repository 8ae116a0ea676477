"""Human-readable messages for rejected paths."""

from typing import TYPE_CHECKING

from safepath.models import ErrorKind

if TYPE_CHECKING:
    from safepath.exceptions import UnsafePathError


_PATH_DETAILS = {
    ErrorKind.EMPTY_PATH: "path is empty",
    ErrorKind.ABSOLUTE_PATH: "path is absolute",
    ErrorKind.TRAILING_SEPARATOR: "path has trailing slash",
    ErrorKind.DOUBLE_SEPARATOR: "path has double slash",
}


def format_error(err: "UnsafePathError") -> str:
    """
    Render a rejection as a message, using only its structured fields.

    Segment failures read ``invalid path segment 'x': <detail>``; failures
    found while checking a whole path are prefixed with ``invalid path 'p'``.
    """
    if err.kind in _PATH_DETAILS:
        msg = _PATH_DETAILS[err.kind]
    else:
        msg = _segment_detail(err)
        prefix = f"invalid path segment {err.name!r}"
        msg = f"{prefix}: {msg}" if msg else prefix
    if err.path is not None:
        msg = f"invalid path {err.path!r}: {msg}"
    return msg


def _segment_detail(err: "UnsafePathError") -> str:
    kind = err.kind
    if kind is ErrorKind.RESERVED_SEGMENT_NAME:
        return ""
    if kind is ErrorKind.LEADING_CHARACTER:
        return f"starts with disallowed character {err.char!r}"
    if kind is ErrorKind.TRAILING_CHARACTER:
        return f"ends with disallowed character {err.char!r}"
    if kind is ErrorKind.INVALID_ENCODING:
        return "not valid UTF-8 text"
    if kind is ErrorKind.DISALLOWED_BYTE:
        if err.char is not None:
            return f"contains disallowed character {err.char!r}"
        return f"contains disallowed byte {_hex(err.byte)}"
    if kind is ErrorKind.NON_ASCII_BYTE:
        if err.char is not None:
            return f"contains non-ASCII character {err.char!r} U+{ord(err.char):04X}"
        return f"contains non-ASCII byte {_hex(err.byte)}"
    if kind is ErrorKind.RESERVED_WINDOWS_NAME:
        return f"uses reserved Windows filename {err.base!r}"
    raise ValueError(f"Unknown error kind: {kind}")


def _hex(byte: int | None) -> str:
    return f"0x{byte or 0:02x}"
