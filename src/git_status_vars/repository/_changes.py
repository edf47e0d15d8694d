"""Working tree and index status, classified into change counters."""

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dulwich import porcelain
from dulwich.index import ConflictedIndexEntry, Index
from dulwich.repo import Repo

from git_status_vars.enums import StatusFlag
from git_status_vars.utils import tree_path

if TYPE_CHECKING:
    from git_status_vars.shell import ShellWriter

UNTRACKED_FLAGS = StatusFlag.WT_NEW
UNSTAGED_FLAGS = (
    StatusFlag.WT_MODIFIED
    | StatusFlag.WT_DELETED
    | StatusFlag.WT_TYPECHANGE
    | StatusFlag.WT_RENAMED
)
STAGED_FLAGS = (
    StatusFlag.INDEX_NEW
    | StatusFlag.INDEX_MODIFIED
    | StatusFlag.INDEX_DELETED
    | StatusFlag.INDEX_RENAMED
    | StatusFlag.INDEX_TYPECHANGE
)
CONFLICTED_FLAGS = StatusFlag.CONFLICTED

_BUCKETS: tuple[StatusFlag, ...] = (
    UNTRACKED_FLAGS,
    UNSTAGED_FLAGS,
    STAGED_FLAGS,
    CONFLICTED_FLAGS,
)


@dataclass(frozen=True, slots=True)
class ChangeCounters:
    """Counts of changed files, by kind of change.

    A file may be counted in more than one bucket, e.g. a file that was
    staged and then modified again counts as both staged and unstaged.

    Attributes:
        untracked: Files new in the working tree.
        unstaged: Files changed in the working tree relative to the index.
        staged: Files changed in the index relative to HEAD.
        conflicted: Files with an unresolved merge conflict.
    """

    untracked: int = 0
    unstaged: int = 0
    staged: int = 0
    conflicted: int = 0

    @classmethod
    def from_array(cls, counts: Iterable[int]) -> "ChangeCounters":
        """Build counters from ``[untracked, unstaged, staged, conflicted]``.

        Raises:
            ValueError: If ``counts`` does not hold exactly four values.
        """
        values = tuple(counts)
        if len(values) != len(_BUCKETS):
            msg = f"expected {len(_BUCKETS)} counts, got {len(values)}"
            raise ValueError(msg)
        untracked, unstaged, staged, conflicted = values
        return cls(
            untracked=untracked,
            unstaged=unstaged,
            staged=staged,
            conflicted=conflicted,
        )

    @classmethod
    def from_statuses(cls, statuses: Iterable[StatusFlag]) -> "ChangeCounters":
        """Classify status flag sets into buckets.

        Args:
            statuses: One flag set per path.

        Returns:
            The counters.
        """
        counts = [0] * len(_BUCKETS)
        for flags in statuses:
            for i, bucket in enumerate(_BUCKETS):
                if flags & bucket:
                    counts[i] += 1
        return cls.from_array(counts)

    def write_to_shell(self, out: "ShellWriter") -> None:
        """Write the four ``*_count`` variables."""
        out.write_var("untracked_count", self.untracked)
        out.write_var("unstaged_count", self.unstaged)
        out.write_var("staged_count", self.staged)
        out.write_var("conflicted_count", self.conflicted)


_STAGED_CHANGE_FLAGS: dict[str, StatusFlag] = {
    "add": StatusFlag.INDEX_NEW,
    "delete": StatusFlag.INDEX_DELETED,
    "modify": StatusFlag.INDEX_MODIFIED,
}


def _conflicted_paths(index: Index) -> frozenset[bytes]:
    """Get the tree paths of unmerged index entries."""
    if not index.has_conflicts():
        return frozenset()
    return frozenset(
        path
        for path, entry in index.items()
        if isinstance(entry, ConflictedIndexEntry)
    )


def _merge(statuses: dict[bytes, StatusFlag], path: bytes, flags: StatusFlag) -> None:
    statuses[path] = statuses.get(path, StatusFlag.CURRENT) | flags


def collect_statuses(repo: Repo) -> Mapping[bytes, StatusFlag]:
    """Compute the status of every changed path in a non-bare repository.

    The comparison itself is ``porcelain.status``: index against HEAD gives
    the ``INDEX_*`` flags, working tree against index gives ``WT_MODIFIED``
    (or ``WT_DELETED`` when the file is gone), and untracked paths that are
    not ignored give ``WT_NEW``. A directory holding only untracked files
    is reported once, as ``dir/``. Unmerged entries are reported as
    ``CONFLICTED`` only. Renames are not detected.

    Args:
        repo: A non-bare repository.

    Returns:
        Flags for each path with at least one change, keyed by tree path.
    """
    conflicted = _conflicted_paths(repo.open_index())
    status = porcelain.status(repo, untracked_files="normal")
    statuses: dict[bytes, StatusFlag] = dict.fromkeys(
        conflicted, StatusFlag.CONFLICTED
    )

    for change, paths in status.staged.items():
        for fs_path in paths:
            path = tree_path(os.fsdecode(fs_path))
            if path not in conflicted:
                _merge(statuses, path, _STAGED_CHANGE_FLAGS[change])

    root = os.fsencode(repo.path)
    for fs_path in status.unstaged:
        path = tree_path(os.fsdecode(fs_path))
        if path in conflicted:
            continue
        exists = os.path.lexists(os.path.join(root, fs_path))
        _merge(
            statuses,
            path,
            StatusFlag.WT_MODIFIED if exists else StatusFlag.WT_DELETED,
        )

    for fs_path in status.untracked:
        _merge(statuses, tree_path(os.fsdecode(fs_path)), StatusFlag.WT_NEW)

    return statuses


def count_changes(repo: Repo) -> ChangeCounters:
    """Count untracked, unstaged, staged and conflicted files.

    Args:
        repo: The repository.

    Returns:
        The counters; all zero for a bare repository.
    """
    if repo.bare:
        return ChangeCounters()
    return ChangeCounters.from_statuses(collect_statuses(repo).values())
