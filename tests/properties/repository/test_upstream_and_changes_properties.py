from hypothesis import given, strategies as st

from git_status_vars.enums import StatusFlag
from git_status_vars.repository import ChangeCounters, map_refspec

ref_component = st.from_regex(r"[a-z][a-z0-9-]{0,10}", fullmatch=True)
branch_name = st.lists(ref_component, min_size=1, max_size=3).map("/".join)
remote_name = ref_component


@given(branch=branch_name, remote=remote_name)
def test_default_refspec_maps_every_branch(branch: str, remote: str) -> None:
    refspec = f"+refs/heads/*:refs/remotes/{remote}/*"

    assert map_refspec(refspec, f"refs/heads/{branch}") == f"refs/remotes/{remote}/{branch}"


@given(tag=branch_name, remote=remote_name)
def test_branch_refspec_ignores_tags(tag: str, remote: str) -> None:
    refspec = f"+refs/heads/*:refs/remotes/{remote}/*"

    assert map_refspec(refspec, f"refs/tags/{tag}") is None


@given(statuses=st.lists(st.sampled_from(list(StatusFlag)), max_size=50))
def test_each_bucket_counts_at_most_once_per_path(statuses: list[StatusFlag]) -> None:
    counters = ChangeCounters.from_statuses(statuses)

    for count in (
        counters.untracked,
        counters.unstaged,
        counters.staged,
        counters.conflicted,
    ):
        assert 0 <= count <= len(statuses)
