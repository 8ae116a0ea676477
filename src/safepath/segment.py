"""Safety checks for a single path segment."""

import logging

from safepath.exceptions import UnsafePathError
from safepath.models import ErrorKind
from safepath.rules import Rules
from safepath.table import ALWAYS, CLASSIFICATION_TABLE, WINDOWS_RESERVED_NAMES

logger = logging.getLogger(__name__)

_STRICT = int(Rules.STRICT)
_ASCII_ONLY = int(Rules.ASCII_ONLY)
_VALID_ENCODING = int(Rules.VALID_ENCODING)
_SHELL_SAFE = int(Rules.SHELL_SAFE)
_ARGUMENT_SAFE = int(Rules.ARGUMENT_SAFE)
_WINDOWS_SAFE = int(Rules.WINDOWS_SAFE)
_NOT_HIDDEN = int(Rules.NOT_HIDDEN)

_RESERVED_SEGMENTS = (b"", b".", b"..")

_DOT = ord(".")
_SPACE = ord(" ")
_TILDE = ord("~")
_DASH = ord("-")


def _to_bytes(name: str | bytes) -> bytes:
    """
    Get the bytes that make up a path or segment.

    Strings are encoded as UTF-8. Raw bytes smuggled in by ``os.fsdecode``
    (surrogate escapes) come back out unchanged; any other lone surrogate is
    kept as an invalid UTF-8 sequence.
    """
    if isinstance(name, bytes):
        return name
    if not isinstance(name, str):
        raise TypeError(f"Expected str or bytes, got {type(name).__name__}")
    try:
        return name.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return name.encode("utf-8", "surrogatepass")


def check_segment(rules: Rules | int, name: str | bytes) -> UnsafePathError | None:
    """
    Check whether ``name`` is a safe path segment under ``rules``.

    The empty name, ".", and ".." are always unsafe, as are "/" and the null
    byte, whatever the rules.

    Args:
        rules: Rules the segment has to satisfy
        name: A single path segment

    Returns:
        None if the segment is safe, otherwise the reason it is not
    """
    data = _to_bytes(name)
    effective = (int(rules) & _STRICT) | ALWAYS

    if data in _RESERVED_SEGMENTS:
        return _reject(effective, ErrorKind.RESERVED_SEGMENT_NAME, name)

    # ASCII_ONLY implies valid UTF-8, and the byte scan below enforces it.
    if effective & (_ASCII_ONLY | _VALID_ENCODING) == _VALID_ENCODING:
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as e:
            return _reject(
                effective,
                ErrorKind.INVALID_ENCODING,
                name,
                byte=data[e.start],
                position=e.start,
            )

    for position, byte in enumerate(data):
        if CLASSIFICATION_TABLE[byte] & effective != effective:
            kind = ErrorKind.DISALLOWED_BYTE
            if effective & _ASCII_ONLY and byte >= 0x80:
                kind = ErrorKind.NON_ASCII_BYTE
            return _reject(
                effective,
                kind,
                name,
                byte=byte,
                char=_char_at(data, position),
                position=position,
            )

    first = data[0]
    last = data[-1]
    if effective & _SHELL_SAFE and first == _TILDE:
        return _reject(effective, ErrorKind.LEADING_CHARACTER, name, char="~")
    if effective & _ARGUMENT_SAFE and first == _DASH:
        return _reject(effective, ErrorKind.LEADING_CHARACTER, name, char="-")
    if effective & _WINDOWS_SAFE:
        if last in (_DOT, _SPACE):
            return _reject(effective, ErrorKind.TRAILING_CHARACTER, name, char=chr(last))
        # Names with two or more dots, like "nul.txt.foo", are allowed.
        if data.count(b".") <= 1:
            base = data.partition(b".")[0]
            if len(base) in (3, 4):
                folded = base.lower().decode("latin-1")
                if folded in WINDOWS_RESERVED_NAMES:
                    return _reject(
                        effective, ErrorKind.RESERVED_WINDOWS_NAME, name, base=folded
                    )
    if effective & _NOT_HIDDEN and first == _DOT:
        return _reject(effective, ErrorKind.LEADING_CHARACTER, name, char=".")
    return None


def validate_segment(rules: Rules | int, name: str | bytes) -> None:
    """
    Raise if ``name`` is not a safe path segment under ``rules``.

    Raises:
        UnsafePathError: If the segment is unsafe
    """
    err = check_segment(rules, name)
    if err is not None:
        raise err


def is_safe_segment(rules: Rules | int, name: str | bytes) -> bool:
    """True if ``name`` is a safe path segment under ``rules``."""
    return check_segment(rules, name) is None


def _char_at(data: bytes, position: int) -> str | None:
    """Decode the UTF-8 character starting at ``position``, if well-formed."""
    lead = data[position]
    if lead < 0x80:
        return chr(lead)
    if 0xC2 <= lead <= 0xDF:
        size = 2
    elif 0xE0 <= lead <= 0xEF:
        size = 3
    elif 0xF0 <= lead <= 0xF4:
        size = 4
    else:
        return None
    try:
        return data[position : position + size].decode("utf-8")
    except UnicodeDecodeError:
        return None


def _reject(
    effective: int,
    kind: ErrorKind,
    name: str | bytes,
    *,
    byte: int | None = None,
    char: str | None = None,
    base: str | None = None,
    position: int | None = None,
) -> UnsafePathError:
    err = UnsafePathError(kind, name, byte=byte, char=char, base=base, position=position)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Rejected segment %r under %s: %s",
            name,
            Rules(effective & _STRICT).describe(),
            kind.value,
        )
    return err
