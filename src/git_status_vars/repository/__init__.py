"""Reading repositories: references, state, changes and summaries."""

from git_status_vars.repository._changes import (
    ChangeCounters,
    collect_statuses,
    count_changes,
)
from git_status_vars.repository._head import head_info, resolve_head_trail
from git_status_vars.repository._open import (
    RefLookup,
    find_reference,
    is_valid_reference_name,
    open_repository,
)
from git_status_vars.repository._state import (
    count_stashes,
    is_empty,
    repository_state,
    workdir_path,
)
from git_status_vars.repository._summary import (
    RepositorySummary,
    gather_summary,
    summarize,
    summarize_repository,
    write_failure,
)
from git_status_vars.repository._upstream import (
    graph_ahead_behind,
    map_refspec,
    upstream_difference,
    upstream_reference_name,
)

__all__ = [
    "ChangeCounters",
    "RefLookup",
    "RepositorySummary",
    "collect_statuses",
    "count_changes",
    "count_stashes",
    "find_reference",
    "gather_summary",
    "graph_ahead_behind",
    "head_info",
    "is_empty",
    "is_valid_reference_name",
    "map_refspec",
    "open_repository",
    "repository_state",
    "resolve_head_trail",
    "summarize",
    "summarize_repository",
    "upstream_difference",
    "upstream_reference_name",
    "workdir_path",
    "write_failure",
]
