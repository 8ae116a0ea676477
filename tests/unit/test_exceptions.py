"""Tests for exception classes."""

import copy
import pickle

from safepath.exceptions import ConfigError, RuleParseError, SafePathError, UnsafePathError
from safepath.models import ErrorKind
from safepath.path import check_path
from safepath.rules import Rules


class TestUnsafePathError:
    """Tests for UnsafePathError."""

    def test_is_subclass_of_safepath_error(self) -> None:
        """UnsafePathError is a SafePathError and a ValueError."""
        assert issubclass(UnsafePathError, SafePathError)
        assert issubclass(UnsafePathError, ValueError)

    def test_fields(self) -> None:
        """Structured details are kept as attributes."""
        err = UnsafePathError(
            ErrorKind.DISALLOWED_BYTE, "a:b", byte=0x3A, char=":", position=1
        )
        assert err.kind is ErrorKind.DISALLOWED_BYTE
        assert err.name == "a:b"
        assert err.byte == 0x3A
        assert err.char == ":"
        assert err.position == 1
        assert err.base is None
        assert err.path is None
        assert not err.is_path

    def test_in_path_returns_copy(self) -> None:
        """in_path() scopes a copy and leaves the original alone."""
        err = UnsafePathError(ErrorKind.RESERVED_WINDOWS_NAME, "aux", base="aux")
        scoped = err.in_path("x/aux")
        assert scoped is not err
        assert scoped.is_path
        assert scoped.path == "x/aux"
        assert scoped.base == "aux"
        assert scoped.name == "aux"
        assert err.path is None
        assert "x/aux" in str(scoped)
        assert "x/aux" not in str(err)

    def test_equality(self) -> None:
        """Errors with the same details compare equal."""
        a = UnsafePathError(ErrorKind.EMPTY_PATH, path="")
        b = UnsafePathError(ErrorKind.EMPTY_PATH, path="")
        c = UnsafePathError(ErrorKind.ABSOLUTE_PATH, path="/")
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_repr_mentions_kind(self) -> None:
        """repr() includes the kind name."""
        err = UnsafePathError(ErrorKind.DOUBLE_SEPARATOR, path="a//b")
        assert "DOUBLE_SEPARATOR" in repr(err)

    def test_args_hold_structured_data(self) -> None:
        """The exception args are the kind and name, not a rendered message."""
        err = UnsafePathError(ErrorKind.LEADING_CHARACTER, "~x", char="~")
        assert err.args == (ErrorKind.LEADING_CHARACTER, "~x")
        assert str(err) == "invalid path segment '~x': starts with disallowed character '~'"

    def test_copy(self) -> None:
        """Copies keep every field and still render."""
        for err in (check_path(Rules.STRICT, "a//b"), check_path(Rules.STRICT, "x/con")):
            assert err is not None
            copied = copy.copy(err)
            assert copied == err
            assert copied.kind is err.kind
            assert str(copied) == str(err)
            assert copy.deepcopy(err) == err

    def test_pickle(self) -> None:
        """Errors survive a pickle round trip with all fields."""
        err = check_path(Rules.STRICT, "x/con")
        assert err is not None
        restored = pickle.loads(pickle.dumps(err))
        assert restored == err
        assert restored.base == "con"
        assert restored.path == "x/con"
        assert restored.is_path
        assert str(restored) == str(err)


class TestRuleParseError:
    """Tests for RuleParseError."""

    def test_message(self) -> None:
        """RuleParseError names the unknown rule."""
        err = RuleParseError("bogus")
        assert err.name == "bogus"
        assert "bogus" in str(err)
        assert isinstance(err, ValueError)


class TestConfigError:
    """Tests for ConfigError."""

    def test_message(self) -> None:
        """ConfigError includes source and reason."""
        err = ConfigError("safepath.yaml", "bad rules")
        assert err.source == "safepath.yaml"
        assert err.reason == "bad rules"
        assert "safepath.yaml" in str(err)
        assert "bad rules" in str(err)
        assert issubclass(ConfigError, SafePathError)
