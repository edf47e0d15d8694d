"""Opening repositories and reading references.

These functions adapt dulwich to the handful of primitives the summary needs:
open a repository (distinguishing "not a repository" from other failures)
and look up one reference without following it.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dulwich.errors import NotGitRepository
from dulwich.objects import valid_hexsha
from dulwich.refs import HEADREF, SYMREF, check_ref_format
from dulwich.repo import CONTROLDIR, Repo

from git_status_vars.enums import ReferenceKind
from git_status_vars.exceptions import RefNotFoundError, RepositoryNotFoundError
from git_status_vars.utils import decode_bytes, encode_str

GIT_DIR_ENV_VAR = "GIT_DIR"


def open_repository(path: Path | str | None = None) -> Repo:
    """Open a repository.

    An explicit path must itself be a repository (a working tree root, a
    ``.git`` directory or a bare repository); parents are not searched.
    Without a path, ``$GIT_DIR`` is used when set, otherwise the repository
    is discovered from the current directory upward.

    Args:
        path: Repository location, or None to use the environment.

    Returns:
        The opened repository. The caller owns it and should close it.

    Raises:
        RepositoryNotFoundError: If the location is not a git repository.
        OSError: If the repository exists but cannot be read.
    """
    git_dir = os.environ.get(GIT_DIR_ENV_VAR)
    try:
        if path is not None:
            repo = Repo(str(path))
        elif git_dir:
            repo = Repo(git_dir)
        else:
            return Repo.discover()
    except NotGitRepository as e:
        location = str(path) if path is not None else os.getcwd()
        raise RepositoryNotFoundError(location) from e

    if repo.bare:
        return _reopen_with_working_tree(repo)
    return repo


def _declares_bare(repo: Repo) -> bool:
    """Read ``core.bare``, guessing from the directory name when unset."""
    configured = repo.get_config().get_boolean((b"core",), b"bare")
    if configured is not None:
        return configured
    return os.path.basename(os.path.abspath(repo.controldir())) != CONTROLDIR


def _working_tree_candidate(repo: Repo) -> str | None:
    """Locate the working tree a non-bare control directory belongs to."""
    control_dir = os.path.abspath(repo.controldir())
    if _declares_bare(repo):
        return None
    try:
        worktree = repo.get_config().get((b"core",), b"worktree")
    except KeyError:
        return os.path.dirname(control_dir)
    return os.path.join(control_dir, os.fsdecode(worktree))


def _reopen_with_working_tree(repo: Repo) -> Repo:
    """Reopen a control directory through the working tree it belongs to.

    dulwich opens a directory it is pointed at directly as bare, including a
    ``.git`` directory given by path or ``$GIT_DIR``. When the control
    directory is not bare and its working tree leads back to it, the working
    tree is opened instead; otherwise ``repo`` is returned unchanged.
    """
    candidate = _working_tree_candidate(repo)
    if candidate is None:
        return repo
    try:
        reopened = Repo(candidate)
    except (NotGitRepository, OSError):
        return repo
    if reopened.bare or not os.path.samefile(
        reopened.controldir(), repo.controldir()
    ):
        reopened.close()
        return repo
    repo.close()
    return reopened


@dataclass(frozen=True, slots=True)
class RefLookup:
    """A single reference, read without following it.

    Attributes:
        name: Full name of the reference.
        kind: How the reference stores its target.
        target: Object id (direct) or reference name (symbolic); for an
            unknown reference, the raw contents.
    """

    name: str
    kind: ReferenceKind
    target: str


def is_valid_reference_name(name: str) -> bool:
    """Check whether ``name`` is a well-formed full reference name.

    ``HEAD`` is accepted; everything else must live under ``refs/`` and pass
    ``git check-ref-format``.

    Args:
        name: Candidate reference name.

    Returns:
        True if the name is well formed.
    """
    raw = encode_str(name)
    if raw == HEADREF:
        return True
    return raw.startswith(b"refs/") and check_ref_format(raw[len(b"refs/") :])


def find_reference(repo: Repo, name: str) -> RefLookup:
    """Look up one reference without following symbolic references.

    Loose references take precedence over packed references.

    Args:
        repo: The repository.
        name: Full reference name, e.g. ``HEAD`` or ``refs/heads/main``.

    Returns:
        The reference and its classification.

    Raises:
        RefNotFoundError: If no reference by that name exists.
    """
    contents = repo.refs.read_ref(encode_str(name))
    if not contents:
        raise RefNotFoundError(name)

    if contents.startswith(SYMREF):
        target = contents[len(SYMREF) :].strip()
        return RefLookup(name, ReferenceKind.SYMBOLIC, decode_bytes(target))
    if valid_hexsha(contents):
        return RefLookup(name, ReferenceKind.DIRECT, decode_bytes(contents))
    return RefLookup(name, ReferenceKind.UNKNOWN, decode_bytes(contents))
