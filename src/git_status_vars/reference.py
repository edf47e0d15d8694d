"""Reference trail model.

A ``Head`` records every hop taken while resolving ``HEAD``: symbolic
references are followed until a direct reference, an unrecognized reference,
or a failure ends the walk.
"""

from dataclasses import dataclass

from git_status_vars.enums import ReferenceKind
from git_status_vars.shell import ShellWriter, debug_format

_SHORT_PREFIXES: tuple[str, ...] = ("refs/heads/", "refs/tags/")


@dataclass(frozen=True, slots=True)
class Reference:
    """One hop in a reference trail.

    Attributes:
        name: Full reference name, e.g. ``refs/heads/main``. For a failed
            hop, the name that was looked up.
        kind: How the reference stores its target.
        error: Debug rendering of the lookup failure, or ``""``.
    """

    name: str
    kind: ReferenceKind = ReferenceKind.NONE
    error: str = ""

    @classmethod
    def direct(cls, name: str) -> "Reference":
        """Create a hop for a reference that stores an object id."""
        return cls(name, ReferenceKind.DIRECT)

    @classmethod
    def symbolic(cls, name: str) -> "Reference":
        """Create a hop for a reference that names another reference."""
        return cls(name, ReferenceKind.SYMBOLIC)

    @classmethod
    def unknown(cls, name: str) -> "Reference":
        """Create a hop for a reference whose contents were not recognized."""
        return cls(name, ReferenceKind.UNKNOWN)

    @classmethod
    def failed(cls, name: str, error: BaseException) -> "Reference":
        """Create a hop for a lookup that failed.

        Args:
            name: The name that was looked up.
            error: The failure, stored in its debug rendering.

        Returns:
            A reference with an empty kind and a populated error.
        """
        return cls(name, ReferenceKind.NONE, debug_format(error))

    def short(self) -> str:
        """Get the short name for a branch or tag, otherwise the full name.

        Branches and tags with the same short name are not disambiguated.
        """
        for prefix in _SHORT_PREFIXES:
            if self.name.startswith(prefix):
                return self.name[len(prefix) :]
        return self.name

    def write_to_shell(self, out: ShellWriter) -> None:
        out.write_var("name", self.name)
        out.write_var("short", self.short())
        out.write_var("kind", self.kind)
        out.write_var("error", self.error)


@dataclass(frozen=True, slots=True)
class Head:
    """Resolution of ``HEAD`` and its divergence from upstream.

    The first entry of ``trail`` is always the lookup of ``HEAD`` itself. It
    is never written out; the remaining hops are numbered from 1.

    Attributes:
        trail: Every hop taken, starting with ``HEAD``. Never empty.
        hash: Object id the trail ended at, or ``""``.
        ahead_of_upstream: Commits on HEAD not on upstream, or None when
            there is nothing to compare with.
        behind_upstream: Commits on upstream not on HEAD, or None when there
            is nothing to compare with.
        upstream_error: Debug rendering of an upstream failure, or ``""``.
    """

    trail: tuple[Reference, ...]
    hash: str = ""
    ahead_of_upstream: int | None = None
    behind_upstream: int | None = None
    upstream_error: str = ""

    @property
    def ref_length(self) -> int:
        """Number of hops written out (the trail without ``HEAD`` itself)."""
        return max(len(self.trail) - 1, 0)

    def write_to_shell(self, out: ShellWriter) -> None:
        out.write_var("ref_length", self.ref_length)
        for i, reference in enumerate(self.trail[1:], start=1):
            out.group_n("ref", i).write_vars(reference)
        out.write_var("hash", self.hash)
        out.write_var("ahead", self.ahead_of_upstream)
        out.write_var("behind", self.behind_upstream)
        out.write_var("upstream_error", self.upstream_error)
