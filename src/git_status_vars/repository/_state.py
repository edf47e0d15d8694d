"""Repository-level facts: operation state, emptiness, working tree, stashes."""

import os
from pathlib import Path

from dulwich.refs import HEADREF, SymrefLoop
from dulwich.repo import Repo
from dulwich.stash import Stash

from git_status_vars.enums import RepositoryState

# Checked in order; the first marker present in the control directory wins.
# Each entry is (marker, state, sequence state when sequencer/todo exists).
_STATE_MARKERS: tuple[tuple[str, RepositoryState, RepositoryState | None], ...] = (
    ("rebase-merge/interactive", RepositoryState.REBASE_INTERACTIVE, None),
    ("rebase-merge", RepositoryState.REBASE_MERGE, None),
    ("rebase-apply/rebasing", RepositoryState.REBASE, None),
    ("rebase-apply/applying", RepositoryState.APPLY_MAILBOX, None),
    ("rebase-apply", RepositoryState.APPLY_MAILBOX_OR_REBASE, None),
    ("MERGE_HEAD", RepositoryState.MERGE, None),
    ("REVERT_HEAD", RepositoryState.REVERT, RepositoryState.REVERT_SEQUENCE),
    (
        "CHERRY_PICK_HEAD",
        RepositoryState.CHERRY_PICK,
        RepositoryState.CHERRY_PICK_SEQUENCE,
    ),
    ("BISECT_LOG", RepositoryState.BISECT, None),
)

_SEQUENCER_TODO = "sequencer/todo"


def repository_state(repo: Repo) -> RepositoryState:
    """Determine which operation, if any, the repository is in the middle of.

    Args:
        repo: The repository.

    Returns:
        The repository state, ``CLEAN`` when nothing is in progress.
    """
    control_dir = Path(repo.controldir())
    for marker, state, sequence_state in _STATE_MARKERS:
        if (control_dir / marker).exists():
            if sequence_state is not None and (control_dir / _SEQUENCER_TODO).exists():
                return sequence_state
            return state
    return RepositoryState.CLEAN


def is_empty(repo: Repo) -> bool:
    """Check whether a repository has no commits and no references.

    Args:
        repo: The repository.

    Returns:
        True if HEAD does not resolve and no reference besides HEAD exists.
    """
    try:
        _ = repo.refs[HEADREF]
    except (KeyError, SymrefLoop):
        return all(name == HEADREF for name in repo.refs.allkeys())
    return False


def workdir_path(repo: Repo) -> str | None:
    """Get the absolute working tree path with a trailing separator.

    Args:
        repo: The repository.

    Returns:
        The working tree path, or None for a bare repository.
    """
    if repo.bare:
        return None
    return os.path.join(os.path.abspath(repo.path), "")


def count_stashes(repo: Repo) -> int:
    """Count the entries in the stash.

    Args:
        repo: The repository.

    Returns:
        The number of stash entries (0 when nothing was ever stashed).
    """
    return len(Stash.from_repo(repo))
