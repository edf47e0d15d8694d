"""Unit tests for the Reference and Head models."""

import io
from dataclasses import FrozenInstanceError

import pytest

from git_status_vars.enums import ReferenceKind
from git_status_vars.exceptions import RefNotFoundError
from git_status_vars.reference import Head, Reference
from git_status_vars.shell import ShellWriter


def render(head: Head) -> str:
    buffer = io.StringIO()
    head.write_to_shell(ShellWriter(buffer).group("head"))
    return buffer.getvalue()


class TestReference:
    @pytest.mark.parametrize(
        ("name", "short"),
        [
            ("refs/heads/main", "main"),
            ("refs/heads/feature/x", "feature/x"),
            ("refs/tags/v1.0", "v1.0"),
            ("refs/remotes/origin/main", "refs/remotes/origin/main"),
            ("HEAD", "HEAD"),
        ],
    )
    def test_short(self, name: str, short: str) -> None:
        assert Reference(name).short() == short

    def test_constructors_set_kind(self) -> None:
        assert Reference.direct("HEAD").kind is ReferenceKind.DIRECT
        assert Reference.symbolic("HEAD").kind is ReferenceKind.SYMBOLIC
        assert Reference.unknown("HEAD").kind is ReferenceKind.UNKNOWN

    def test_failed_has_no_kind_and_debug_error(self) -> None:
        reference = Reference.failed("refs/heads/main", RefNotFoundError("refs/heads/main"))

        assert reference.kind is ReferenceKind.NONE
        assert reference.error == (
            "RefNotFoundError(\"reference 'refs/heads/main' not found\")"
        )

    def test_is_frozen(self) -> None:
        reference = Reference.direct("HEAD")

        with pytest.raises(FrozenInstanceError):
            reference.name = "other"  # pyright: ignore[reportAttributeAccessIssue]

    def test_write_to_shell(self) -> None:
        buffer = io.StringIO()

        Reference.symbolic("refs/heads/sym").write_to_shell(ShellWriter(buffer))

        assert buffer.getvalue() == (
            "name=refs/heads/sym\nshort=sym\nkind=symbolic\nerror=''\n"
        )


class TestHead:
    def test_ref_length_excludes_head(self) -> None:
        head = Head(trail=(Reference.symbolic("HEAD"), Reference.direct("refs/heads/main")))

        assert head.ref_length == 1

    def test_ref_length_of_empty_trail_is_zero(self) -> None:
        assert Head(trail=()).ref_length == 0

    def test_detached_head_writes_no_refs(self) -> None:
        head = Head(trail=(Reference.direct("HEAD"),), hash="0" * 40)

        assert render(head) == (
            "head_ref_length=0\n"
            f"head_hash={'0' * 40}\n"
            "head_ahead=''\n"
            "head_behind=''\n"
            "head_upstream_error=''\n"
        )

    def test_writes_numbered_refs_and_counts(self) -> None:
        head = Head(
            trail=(
                Reference.symbolic("HEAD"),
                Reference.symbolic("refs/heads/sym"),
                Reference.direct("refs/heads/main"),
            ),
            hash="abc",
            ahead_of_upstream=0,
            behind_upstream=2,
        )

        assert render(head) == (
            "head_ref_length=2\n"
            "head_ref1_name=refs/heads/sym\n"
            "head_ref1_short=sym\n"
            "head_ref1_kind=symbolic\n"
            "head_ref1_error=''\n"
            "head_ref2_name=refs/heads/main\n"
            "head_ref2_short=main\n"
            "head_ref2_kind=direct\n"
            "head_ref2_error=''\n"
            "head_hash=abc\n"
            "head_ahead=0\n"
            "head_behind=2\n"
            "head_upstream_error=''\n"
        )
