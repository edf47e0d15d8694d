"""Divergence between the current branch and its upstream."""

from dulwich.config import Config
from dulwich.objects import valid_hexsha
from dulwich.refs import HEADREF, LOCAL_BRANCH_PREFIX, SymrefLoop
from dulwich.repo import Repo

from git_status_vars.exceptions import (
    ConfigValueNotFoundError,
    CyclicReferenceError,
    NotALocalBranchError,
    RefNotFoundError,
    UpstreamError,
)
from git_status_vars.utils import decode_bytes, encode_str

LOCAL_REMOTE = "."


def _resolve_local_branch(repo: Repo) -> tuple[str, bytes]:
    """Fully dereference ``HEAD`` to a local branch and its object id.

    Raises:
        RefNotFoundError: If HEAD, or the branch it names, does not exist.
        CyclicReferenceError: If HEAD is part of a symbolic reference cycle.
        NotALocalBranchError: If HEAD does not resolve through refs/heads/.
    """
    try:
        names, object_id = repo.refs.follow(HEADREF)
    except SymrefLoop as e:
        raise CyclicReferenceError(decode_bytes(e.ref)) from e

    name = decode_bytes(names[-1]) if names else "HEAD"
    if object_id is None:
        raise RefNotFoundError(name)
    if not names[-1].startswith(LOCAL_BRANCH_PREFIX):
        raise NotALocalBranchError(name)
    if not valid_hexsha(object_id):
        msg = f"reference '{name}' does not point at an object"
        raise UpstreamError(msg)
    return name, object_id


def _get_config_value(config: Config, section: tuple[str, ...], key: str) -> str:
    try:
        value = config.get(tuple(encode_str(s) for s in section), encode_str(key))
    except KeyError as e:
        dotted = ".".join((*section, key))
        raise ConfigValueNotFoundError(dotted) from e
    return decode_bytes(value)


def map_refspec(refspec: str, ref: str) -> str | None:
    """Map a reference through a fetch refspec.

    Args:
        refspec: A fetch refspec, e.g. ``+refs/heads/*:refs/remotes/origin/*``.
        ref: A reference on the remote, e.g. ``refs/heads/main``.

    Returns:
        The local reference ``ref`` is fetched into, or None if the refspec
        does not cover ``ref``.

    Examples:
        >>> map_refspec("+refs/heads/*:refs/remotes/origin/*", "refs/heads/main")
        'refs/remotes/origin/main'
    """
    spec = refspec.removeprefix("+")
    if spec.startswith("^") or ":" not in spec:
        return None
    source, destination = spec.split(":", 1)
    if not destination:
        return None

    if "*" not in source:
        return destination if source == ref else None

    prefix, suffix = source.split("*", 1)
    if len(ref) < len(prefix) + len(suffix):
        return None
    if not (ref.startswith(prefix) and ref.endswith(suffix)):
        return None
    matched = ref[len(prefix) : len(ref) - len(suffix)]
    return destination.replace("*", matched, 1)


def upstream_reference_name(repo: Repo, branch_ref: str) -> str:
    """Find the local name of the upstream of a branch.

    Reads ``branch.<name>.remote`` and ``branch.<name>.merge``, then maps the
    merge reference through the remote's fetch refspecs. A remote of ``.``
    means the upstream is another local branch.

    Args:
        repo: The repository.
        branch_ref: Full name of a local branch, e.g. ``refs/heads/main``.

    Returns:
        Full name of the remote-tracking (or local) upstream reference.

    Raises:
        ConfigValueNotFoundError: If the branch has no upstream configured.
        UpstreamError: If no fetch refspec of the remote covers the branch.
    """
    branch = branch_ref.removeprefix(decode_bytes(LOCAL_BRANCH_PREFIX))
    config = repo.get_config_stack()
    remote = _get_config_value(config, ("branch", branch), "remote")
    merge = _get_config_value(config, ("branch", branch), "merge")
    if remote == LOCAL_REMOTE:
        return merge

    for refspec in config.get_multivar((b"remote", encode_str(remote)), b"fetch"):
        mapped = map_refspec(decode_bytes(refspec), merge)
        if mapped is not None:
            return mapped

    msg = (
        f"could not determine remote-tracking branch for '{merge}' "
        f"on remote '{remote}'"
    )
    raise UpstreamError(msg)


def graph_ahead_behind(repo: Repo, local: bytes, upstream: bytes) -> tuple[int, int]:
    """Count commits reachable from one commit but not the other.

    Args:
        repo: The repository.
        local: Object id of the local commit.
        upstream: Object id of the upstream commit.

    Returns:
        ``(ahead, behind)``: commits only on ``local``, commits only on
        ``upstream``.
    """
    if local == upstream:
        return 0, 0
    ahead = sum(1 for _ in repo.get_walker(include=[local], exclude=[upstream]))
    behind = sum(1 for _ in repo.get_walker(include=[upstream], exclude=[local]))
    return ahead, behind


def upstream_difference(repo: Repo) -> tuple[int, int] | None:
    """Get the ``(ahead, behind)`` counts of HEAD versus its upstream.

    Args:
        repo: The repository.

    Returns:
        The counts, or None when the configured upstream reference does not
        exist (nothing has been fetched for it yet).

    Raises:
        RefNotFoundError: If HEAD is unborn.
        NotALocalBranchError: If HEAD is detached.
        ConfigValueNotFoundError: If the branch has no upstream configured.
        CyclicReferenceError: If a symbolic reference cycle is involved.
        UpstreamError: For other failures finding the upstream.
    """
    branch_ref, local_id = _resolve_local_branch(repo)
    upstream_ref = upstream_reference_name(repo, branch_ref)
    try:
        upstream_id = repo.refs[encode_str(upstream_ref)]
    except KeyError:
        return None
    except SymrefLoop as e:
        raise CyclicReferenceError(decode_bytes(e.ref)) from e
    return graph_ahead_behind(repo, local_id, upstream_id)
