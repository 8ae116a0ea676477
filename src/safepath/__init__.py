"""safepath: check whether paths are safe to use without escaping.

Safe paths can be passed to shell scripts, used in URLs, or stored as files
on Windows without any special handling.
"""

from safepath.config import SafePathConfig
from safepath.exceptions import ConfigError, RuleParseError, SafePathError, UnsafePathError
from safepath.messages import format_error
from safepath.models import ErrorKind
from safepath.path import check_path, is_safe_path, validate_path
from safepath.rules import Rules
from safepath.segment import check_segment, is_safe_segment, validate_segment
from safepath.table import WINDOWS_RESERVED_NAMES, allowed_rules, is_always_rejected

try:
    from safepath._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"  # Fallback before package is built

__all__ = [
    "__version__",
    # Rules
    "Rules",
    "allowed_rules",
    "is_always_rejected",
    "WINDOWS_RESERVED_NAMES",
    # Checks
    "check_segment",
    "validate_segment",
    "is_safe_segment",
    "check_path",
    "validate_path",
    "is_safe_path",
    # Results
    "ErrorKind",
    "format_error",
    # Configuration
    "SafePathConfig",
    # Exceptions
    "SafePathError",
    "UnsafePathError",
    "RuleParseError",
    "ConfigError",
]
