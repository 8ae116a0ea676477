"""safepath exceptions."""

from safepath.messages import format_error
from safepath.models import ErrorKind


class SafePathError(Exception):
    """Base exception for all safepath errors."""


class UnsafePathError(SafePathError, ValueError):
    """A path or path segment that is not safe under the chosen rules.

    This is returned by the ``check_*`` functions and raised by the
    ``validate_*`` functions. All details are kept as fields; the message is
    rendered from them on demand by ``str()``.

    Attributes:
        kind: Why the input was rejected
        name: The offending segment (None for path-level failures)
        path: The full path, when the failure is path-scoped
        byte: The offending byte value, for encoding and byte failures
        char: The decoded offending character, when one is available
        base: The reserved Windows base name, for RESERVED_WINDOWS_NAME
        position: Byte offset of the failure within the segment
    """

    def __init__(
        self,
        kind: ErrorKind,
        name: str | bytes | None = None,
        *,
        path: str | bytes | None = None,
        byte: int | None = None,
        char: str | None = None,
        base: str | None = None,
        position: int | None = None,
    ) -> None:
        self.kind = kind
        self.name = name
        self.path = path
        self.byte = byte
        self.char = char
        self.base = base
        self.position = position
        super().__init__(kind, name)

    def __str__(self) -> str:
        return format_error(self)

    def __reduce__(self) -> tuple[type["UnsafePathError"], tuple[object, ...], dict[str, object]]:
        return (UnsafePathError, (self.kind, self.name), self.__dict__)

    @property
    def is_path(self) -> bool:
        """True if the failure was found while checking a whole path."""
        return self.path is not None

    def in_path(self, path: str | bytes) -> "UnsafePathError":
        """Return a copy of this segment failure scoped to ``path``."""
        return UnsafePathError(
            self.kind,
            self.name,
            path=path,
            byte=self.byte,
            char=self.char,
            base=self.base,
            position=self.position,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnsafePathError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"UnsafePathError({self.kind.name}, {self})"

    def _key(self) -> tuple[object, ...]:
        return (self.kind, self.name, self.path, self.byte, self.char, self.base, self.position)


class RuleParseError(SafePathError, ValueError):
    """Raised when a rule name is not recognized."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown rule '{name}'")


class ConfigError(SafePathError):
    """Raised when configuration cannot be loaded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid safepath configuration in {source}: {reason}")
