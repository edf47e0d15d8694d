"""Enumerations shared across git-status-vars."""

from enum import IntFlag, StrEnum


class ReferenceKind(StrEnum):
    """How a reference stores its target.

    ``NONE`` is only used for hops that failed to resolve.
    """

    DIRECT = "direct"
    SYMBOLIC = "symbolic"
    UNKNOWN = "unknown"
    NONE = ""


class RepositoryState(StrEnum):
    """In-progress operation a repository is in the middle of.

    Values match the names ``git`` tooling (libgit2) uses for the same states,
    and are what ``repo_state`` reports.
    """

    CLEAN = "Clean"
    MERGE = "Merge"
    REVERT = "Revert"
    REVERT_SEQUENCE = "RevertSequence"
    CHERRY_PICK = "CherryPick"
    CHERRY_PICK_SEQUENCE = "CherryPickSequence"
    BISECT = "Bisect"
    REBASE = "Rebase"
    REBASE_INTERACTIVE = "RebaseInteractive"
    REBASE_MERGE = "RebaseMerge"
    APPLY_MAILBOX = "ApplyMailbox"
    APPLY_MAILBOX_OR_REBASE = "ApplyMailboxOrRebase"


class StatusFlag(IntFlag):
    """Status of a single path, with the same bit layout as libgit2.

    Flags prefixed ``INDEX_`` compare the index with HEAD; flags prefixed
    ``WT_`` compare the working tree with the index.
    """

    CURRENT = 0

    INDEX_NEW = 1 << 0
    INDEX_MODIFIED = 1 << 1
    INDEX_DELETED = 1 << 2
    INDEX_RENAMED = 1 << 3
    INDEX_TYPECHANGE = 1 << 4

    WT_NEW = 1 << 7
    WT_MODIFIED = 1 << 8
    WT_DELETED = 1 << 9
    WT_TYPECHANGE = 1 << 10
    WT_RENAMED = 1 << 11
    WT_UNREADABLE = 1 << 12

    IGNORED = 1 << 14
    CONFLICTED = 1 << 15
