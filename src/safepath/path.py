"""Safety checks for slash-separated relative paths."""

import logging

from safepath.exceptions import UnsafePathError
from safepath.models import ErrorKind
from safepath.rules import Rules
from safepath.segment import check_segment

logger = logging.getLogger(__name__)


def check_path(rules: Rules | int, path: str | bytes) -> UnsafePathError | None:
    """
    Check whether ``path`` is a safe relative path under ``rules``.

    A safe path is a non-empty list of safe segments separated by single
    slashes. Paths are not normalized: "." and ".." segments are rejected,
    as are absolute paths, double slashes and a trailing slash. Backslashes
    are ordinary characters, not separators.

    Args:
        rules: Rules every segment has to satisfy
        path: The path to check

    Returns:
        None if the path is safe, otherwise the first reason it is not
    """
    if not isinstance(path, (str, bytes)):
        raise TypeError(f"Expected str or bytes, got {type(path).__name__}")
    sep = b"/" if isinstance(path, bytes) else "/"

    if not path:
        return _reject(ErrorKind.EMPTY_PATH, path)
    if path[:1] == sep:
        return _reject(ErrorKind.ABSOLUTE_PATH, path)

    start = 0
    while start < len(path):
        end = path.find(sep, start)  # type: ignore[arg-type]
        if end == start:
            return _reject(ErrorKind.DOUBLE_SEPARATOR, path)
        if end == -1:
            segment = path[start:]
            start = len(path)
        else:
            segment = path[start:end]
            start = end + 1
            if start == len(path):
                return _reject(ErrorKind.TRAILING_SEPARATOR, path)

        err = check_segment(rules, segment)
        if err is not None:
            logger.debug("Rejected path %r at segment %r", path, segment)
            return err.in_path(path)
    return None


def validate_path(rules: Rules | int, path: str | bytes) -> None:
    """
    Raise if ``path`` is not a safe relative path under ``rules``.

    Raises:
        UnsafePathError: If the path is unsafe
    """
    err = check_path(rules, path)
    if err is not None:
        raise err


def is_safe_path(rules: Rules | int, path: str | bytes) -> bool:
    """True if ``path`` is a safe relative path under ``rules``."""
    return check_path(rules, path) is None


def _reject(kind: ErrorKind, path: str | bytes) -> UnsafePathError:
    logger.debug("Rejected path %r: %s", path, kind.value)
    return UnsafePathError(kind, path=path)
