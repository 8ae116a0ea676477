"""Per-byte classification table and reserved Windows names.

Both are built once, while this module is imported, and never change
afterwards.
"""

from safepath.rules import Rules

SEPARATOR = 0x2F  # "/"

# Applies under every rule set, including Rules.ANY. Not a Rules member, so
# callers cannot remove it. Bytes without this bit are rejected everywhere.
ALWAYS = 1 << 7

_ALL = int(Rules.STRICT) | ALWAYS
_ASCII_ONLY = int(Rules.ASCII_ONLY)
_VALID_ENCODING = int(Rules.VALID_ENCODING)

# RFC 3986 section 3.3:
#   pchar      = unreserved / pct-encoded / sub-delims / ":" / "@"
#   unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
#   sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
# Colon is not allowed in the first segment of a relative path, so it is
# disallowed everywhere.
URL_RESERVED_CHARS = ' "#%/:<>?[\\]^`{|}'

# IEEE Std 1003.1-2017, C.2 Shell Command Language: characters that need
# quoting, plus space.
SHELL_SPECIAL_CHARS = " |&;<>()$`\\\"'"

# Naming Files, Paths, and Namespaces (Windows): reserved characters.
WINDOWS_RESERVED_CHARS = '<>:"/\\|?*'

_BLACKLISTS: tuple[tuple[Rules, str], ...] = (
    (Rules.URL_UNESCAPED, URL_RESERVED_CHARS),
    (Rules.SHELL_SAFE, SHELL_SPECIAL_CHARS),
    (Rules.WINDOWS_SAFE, WINDOWS_RESERVED_CHARS),
)


def _build_table() -> tuple[int, ...]:
    table = [0] * 256

    # Printable ASCII passes every rule.
    for byte in range(0x20, 0x7F):
        table[byte] = _ALL

    # Control characters only pass the encoding rules.
    for byte in (*range(0x00, 0x20), 0x7F):
        table[byte] = ALWAYS | _ASCII_ONLY | _VALID_ENCODING

    # Encoding validity is checked separately, so high bytes only fail ASCII_ONLY.
    for byte in range(0x80, 0x100):
        table[byte] = _ALL & ~_ASCII_ONLY

    # Plain ints: inverting a Rules value would also clear ALWAYS.
    for rule, chars in _BLACKLISTS:
        for char in chars:
            table[ord(char)] &= ~int(rule)

    table[SEPARATOR] = 0
    table[0x00] = 0
    return tuple(table)


def _build_reserved_names() -> frozenset[str]:
    names = {"con", "prn", "aux", "nul"}
    for prefix in ("com", "lpt"):
        names.update(f"{prefix}{i}" for i in range(1, 10))
    return frozenset(names)


CLASSIFICATION_TABLE: tuple[int, ...] = _build_table()

WINDOWS_RESERVED_NAMES: frozenset[str] = _build_reserved_names()


def allowed_rules(byte: int) -> Rules:
    """Rules that accept ``byte`` on its own, wherever it appears."""
    return Rules(CLASSIFICATION_TABLE[byte] & int(Rules.STRICT))


def is_always_rejected(byte: int) -> bool:
    """True for bytes that no rule set accepts (the separator and NUL)."""
    return not CLASSIFICATION_TABLE[byte] & ALWAYS
