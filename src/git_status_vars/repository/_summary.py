"""Summarizing a repository as shell variables."""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from dulwich.repo import Repo

from git_status_vars.enums import RepositoryState
from git_status_vars.exceptions import RepositoryNotFoundError
from git_status_vars.reference import Head
from git_status_vars.repository._changes import ChangeCounters, count_changes
from git_status_vars.repository._head import head_info
from git_status_vars.repository._open import open_repository
from git_status_vars.repository._state import (
    count_stashes,
    is_empty,
    repository_state,
    workdir_path,
)

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from git_status_vars.shell import ShellWriter

NOT_FOUND_STATE = "NotFound"
ERROR_STATE = "Error"


@dataclass(frozen=True, slots=True)
class RepositorySummary:
    """Everything reported about one repository.

    Attributes:
        state: Operation in progress (merge, rebase, ...) or clean.
        workdir: Working tree path with a trailing separator, None if bare.
        empty: True if the repository has no commits and no references.
        bare: True if the repository has no working tree.
        head: The resolved HEAD and its upstream comparison.
        changes: Counts of changed files.
        stash_count: Number of stash entries.
    """

    state: RepositoryState
    workdir: str | None
    empty: bool
    bare: bool
    head: Head
    changes: ChangeCounters
    stash_count: int = 0

    def write_to_shell(self, out: "ShellWriter") -> None:
        """Write the summary variables in their fixed order."""
        out.write_var_debug("repo_state", self.state)
        out.write_var("repo_workdir", self.workdir)
        out.write_var("repo_empty", self.empty)
        out.write_var("repo_bare", self.bare)
        self.head.write_to_shell(out.group("head"))
        self.changes.write_to_shell(out)
        out.write_var("stash_count", self.stash_count)


def gather_summary(repo: Repo) -> RepositorySummary:
    """Collect every fact about an open repository.

    Nothing is written; a failure in any step propagates before output.

    Args:
        repo: The repository.

    Returns:
        The complete summary.
    """
    return RepositorySummary(
        state=repository_state(repo),
        workdir=workdir_path(repo),
        empty=is_empty(repo),
        bare=repo.bare,
        head=head_info(repo),
        changes=count_changes(repo),
        stash_count=count_stashes(repo),
    )


def write_failure(out: "ShellWriter", error: BaseException) -> None:
    """Report a repository that could not be summarized.

    ``RepositoryNotFoundError`` is reported as ``repo_state=NotFound``; any
    other error as ``repo_state=Error`` with its debug rendering.

    Args:
        out: Destination writer.
        error: The failure.
    """
    if isinstance(error, RepositoryNotFoundError):
        out.write_var("repo_state", NOT_FOUND_STATE)
        return
    out.write_var("repo_state", ERROR_STATE)
    out.write_var_debug("repo_error", error)


def summarize(
    out: "ShellWriter",
    open_result: Repo | BaseException,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> None:
    """Write the summary of a repository, or of the failure to open it.

    Args:
        out: Destination writer.
        open_result: An open repository, or the error raised opening it.
        logger: Optional logger for gather failures.
    """
    if isinstance(open_result, BaseException):
        write_failure(out, open_result)
        return

    try:
        summary = gather_summary(open_result)
    except Exception as e:  # noqa: BLE001
        if logger is not None:
            logger.debug("repository_gather_failed", error=repr(e))
        write_failure(out, e)
        return
    summary.write_to_shell(out)


def summarize_repository(
    out: "ShellWriter",
    path: Path | str | None = None,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> None:
    """Open a repository, summarize it, and close it again.

    Args:
        out: Destination writer.
        path: Repository location, or None to use ``$GIT_DIR`` or discovery
            from the current directory.
        logger: Optional logger for timing events.
    """
    started = time.perf_counter()
    try:
        repo = open_repository(path)
    except Exception as e:  # noqa: BLE001
        summarize(out, e, logger=logger)
        return

    try:
        if logger is not None:
            logger.debug("repository_opened", path=repo.path, bare=repo.bare)
        summarize(out, repo, logger=logger)
    finally:
        repo.close()

    if logger is not None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            "repository_summarized",
            path=str(path) if path is not None else None,
            elapsed_ms=round(elapsed_ms, 3),
        )
