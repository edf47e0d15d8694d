"""Resolution of the ``HEAD`` reference trail."""

from dataclasses import replace

from dulwich.repo import Repo

from git_status_vars.enums import ReferenceKind
from git_status_vars.exceptions import (
    CyclicReferenceError,
    GitStatusVarsError,
    InvalidReferenceNameError,
)
from git_status_vars.reference import Head, Reference
from git_status_vars.repository._open import find_reference, is_valid_reference_name
from git_status_vars.repository._upstream import upstream_difference
from git_status_vars.shell import debug_format

HEAD = "HEAD"


def resolve_head_trail(repo: Repo) -> Head:
    """Follow ``HEAD`` until it reaches an object id or cannot go further.

    Every reference visited is recorded. The walk ends at a direct reference
    (whose target becomes ``hash``), at a reference of unrecognized kind, or
    at a failed lookup, which is recorded as a hop carrying the error. A
    reference seen twice ends the walk with a ``CyclicReferenceError`` hop.

    Args:
        repo: The repository.

    Returns:
        A ``Head`` with the trail and hash filled in. Upstream fields are
        left at their defaults.

    Raises:
        InvalidReferenceNameError: If a symbolic reference targets something
            that is not a well-formed reference name.
    """
    current = HEAD
    trail: list[Reference] = []
    visited: set[str] = set()
    hash_ = ""

    while True:
        if current in visited:
            trail.append(Reference.failed(current, CyclicReferenceError(current)))
            break
        visited.add(current)

        try:
            found = find_reference(repo, current)
        except GitStatusVarsError as e:
            trail.append(Reference.failed(current, e))
            break

        if found.kind is ReferenceKind.DIRECT:
            trail.append(Reference.direct(found.name))
            hash_ = found.target
            break
        if found.kind is ReferenceKind.SYMBOLIC:
            trail.append(Reference.symbolic(found.name))
            if not is_valid_reference_name(found.target):
                raise InvalidReferenceNameError(found.target)
            current = found.target
            continue

        trail.append(Reference.unknown(found.name))
        break

    return Head(trail=tuple(trail), hash=hash_)


def head_info(repo: Repo) -> Head:
    """Resolve ``HEAD`` and compare it with its upstream.

    Upstream failures do not abort: they are recorded in ``upstream_error``.

    Args:
        repo: The repository.

    Returns:
        The complete ``Head``.

    Raises:
        InvalidReferenceNameError: See ``resolve_head_trail``.
    """
    head = resolve_head_trail(repo)
    try:
        difference = upstream_difference(repo)
    except (GitStatusVarsError, KeyError, ValueError, OSError) as e:
        return replace(head, upstream_error=debug_format(e))

    if difference is None:
        return head
    ahead, behind = difference
    return replace(head, ahead_of_upstream=ahead, behind_upstream=behind)
