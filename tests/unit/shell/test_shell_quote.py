import pytest

from git_status_vars.enums import ReferenceKind, RepositoryState
from git_status_vars.exceptions import RefNotFoundError
from git_status_vars.shell import debug_format, display, shell_quote, shell_quote_debug


class TestDisplay:
    def test_none_is_empty(self) -> None:
        assert display(None) == ""

    @pytest.mark.parametrize(("value", "expected"), [(True, "true"), (False, "false")])
    def test_booleans_are_lowercase(self, value: bool, expected: str) -> None:
        assert display(value) == expected

    def test_numbers_use_str(self) -> None:
        assert display(0) == "0"
        assert display(42) == "42"

    def test_enum_uses_value(self) -> None:
        assert display(ReferenceKind.SYMBOLIC) == "symbolic"
        assert display(ReferenceKind.NONE) == ""


class TestDebugFormat:
    def test_state_renders_as_name(self) -> None:
        assert debug_format(RepositoryState.CHERRY_PICK) == "CherryPick"

    def test_error_renders_as_repr(self) -> None:
        error = RefNotFoundError("refs/heads/main")

        assert debug_format(error) == (
            "RefNotFoundError(\"reference 'refs/heads/main' not found\")"
        )

    def test_string_renders_quoted(self) -> None:
        assert debug_format("Timed out") == "'Timed out'"


class TestShellQuote:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", "''"),
            (None, "''"),
            ("main", "main"),
            ("refs/heads/main", "refs/heads/main"),
            ("/tmp/repo/", "/tmp/repo/"),
            ("two words", "'two words'"),
            ("it's", "'it'\\''s'"),
            ("'", "''\\'''"),
            ("line\none", "'line\none'"),
            ("$HOME", "'$HOME'"),
            ("a;b", "'a;b'"),
            (True, "true"),
            (3, "3"),
        ],
    )
    def test_quotes_only_when_needed(self, value: object, expected: str) -> None:
        assert shell_quote(value) == expected

    def test_debug_quotes_repr(self) -> None:
        error = RefNotFoundError("refs/heads/main")

        assert shell_quote_debug(error) == (
            "'RefNotFoundError(\"reference '\\''refs/heads/main'\\'' not found\")'"
        )

    def test_debug_leaves_state_bare(self) -> None:
        assert shell_quote_debug(RepositoryState.CLEAN) == "Clean"
