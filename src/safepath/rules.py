"""Rule sets for path safety checks."""

import re
from collections.abc import Iterable
from enum import IntFlag

from safepath.exceptions import RuleParseError


class Rules(IntFlag):
    """A set of restrictions for path segments.

    Rules are bit flags, and combining more flags applies stricter checks.
    For example, ``Rules.URL_UNESCAPED | Rules.NOT_HIDDEN`` rejects any path
    that either needs escaping in a URL or has a segment starting with ".".
    """

    # Allows anything a lax filesystem like Linux accepts. Only empty, "."
    # and ".." segments, "/" and the null byte are rejected.
    ANY = 0

    # Rejects non-ASCII bytes.
    ASCII_ONLY = 1 << 0
    # Rejects byte strings that are not valid UTF-8.
    VALID_ENCODING = 1 << 1
    # Rejects anything that needs percent-escaping in a URL path. Colons are
    # rejected everywhere since they are unsafe in the first segment of a
    # relative reference.
    URL_UNESCAPED = 1 << 2
    # Rejects POSIX shell metacharacters, spaces and a leading "~".
    SHELL_SAFE = 1 << 3
    # Rejects a leading "-", which programs may read as an option.
    ARGUMENT_SAFE = 1 << 4
    # Rejects characters, trailing dots/spaces and device names that Windows
    # filesystems do not allow.
    WINDOWS_SAFE = 1 << 5
    # Rejects a leading ".".
    NOT_HIDDEN = 1 << 6

    # Every rule above. New rules will be added here as well.
    STRICT = (
        ASCII_ONLY
        | VALID_ENCODING
        | URL_UNESCAPED
        | SHELL_SAFE
        | ARGUMENT_SAFE
        | WINDOWS_SAFE
        | NOT_HIDDEN
    )

    # Alias kept for callers who think in terms of the encoding name.
    VALID_UTF8 = VALID_ENCODING

    def minus(self, other: "Rules | int") -> "Rules":
        """Return these rules without the ones in ``other``."""
        return Rules(int(self) & ~int(other) & int(Rules.STRICT))

    def issubset(self, other: "Rules | int") -> bool:
        """True if every rule here is also in ``other``."""
        return int(self) & ~int(other) == 0

    def describe(self) -> str:
        """Render as named rules joined by "|", e.g. "ShellSafe|NotHidden"."""
        value = int(self)
        names = [name for rule, name in _DISPLAY_NAMES if value & rule]
        rest = value & ~int(Rules.STRICT)
        if rest:
            names.append(f"0x{rest:02x}")
        return "|".join(names) or "Any"

    @classmethod
    def parse(cls, text: str) -> "Rules":
        """Parse a rule list like "shell_safe|WindowsSafe" or "strict".

        Names may be separated by "|", "," or whitespace and are matched
        case-insensitively, ignoring "_" and "-".

        Raises:
            RuleParseError: If a name is not a known rule
        """
        return cls.from_names(part for part in _SPLIT_RE.split(text) if part)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "Rules":
        """Combine rules given by name.

        Raises:
            RuleParseError: If a name is not a known rule
        """
        result = cls.ANY
        for name in names:
            key = name.replace("_", "").replace("-", "").strip().lower()
            if key not in _LOOKUP:
                raise RuleParseError(name)
            result |= _LOOKUP[key]
        return result


_DISPLAY_NAMES: tuple[tuple[Rules, str], ...] = (
    (Rules.ASCII_ONLY, "ASCIIOnly"),
    (Rules.VALID_ENCODING, "ValidEncoding"),
    (Rules.URL_UNESCAPED, "URLUnescaped"),
    (Rules.SHELL_SAFE, "ShellSafe"),
    (Rules.ARGUMENT_SAFE, "ArgumentSafe"),
    (Rules.WINDOWS_SAFE, "WindowsSafe"),
    (Rules.NOT_HIDDEN, "NotHidden"),
)

_LOOKUP: dict[str, Rules] = {
    **{name.lower(): rule for rule, name in _DISPLAY_NAMES},
    "validutf8": Rules.VALID_ENCODING,
    "strict": Rules.STRICT,
    "any": Rules.ANY,
}

_SPLIT_RE = re.compile(r"[|,\s]+")
