import os
import re
import shutil
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[2] / "src"
HASH_PATTERN = re.compile(r"_hash=[0-9a-f]{40}")

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not found")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            item.add_marker(requires_git)


def git(root: Path, repo: str, *args: str, check: bool = True) -> None:
    """Run ``git`` in ``root / repo``.

    Args:
        root: Test root directory.
        repo: Repository directory relative to ``root`` (``"."`` for root).
        *args: Arguments to git.
        check: Fail the test if git exits non-zero.
    """
    result = subprocess.run(  # noqa: S603 - Safe: fixed git invocation
        ["git", *args],  # noqa: S607
        cwd=str(root / repo),
        capture_output=True,
        text=True,
        check=False,
    )
    if check and result.returncode != 0:
        pytest.fail(f"git {' '.join(args)} failed:\n{result.stdout}{result.stderr}")


def git_fails(root: Path, repo: str, *args: str) -> None:
    """Run ``git`` and require it to fail, e.g. a conflicting merge."""
    result = subprocess.run(  # noqa: S603 - Safe: fixed git invocation
        ["git", *args],  # noqa: S607
        cwd=str(root / repo),
        capture_output=True,
        check=False,
    )
    assert result.returncode != 0, f"git {' '.join(args)} unexpectedly succeeded"


def git_init(root: Path, name: str) -> None:
    git(root, ".", "init", name)


def make_commit(root: Path, repo: str, n: int) -> None:
    """Commit files ``a`` and ``b`` with contents ``{n}a`` and ``{n}b``."""
    _ = (root / repo / "a").write_text(f"{n}a")
    _ = (root / repo / "b").write_text(f"{n}b")
    git(root, repo, "add", "a", "b")
    git(root, repo, "commit", "-m", f"commit {n}")


def run_tool(root: Path, *args: str) -> subprocess.CompletedProcess[str]:
    """Run ``git-status-vars`` as a separate process in ``root``."""
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(SRC_DIR), env.get("PYTHONPATH")])
    )
    return subprocess.run(  # noqa: S603 - Safe: running our own CLI tool
        [sys.executable, "-m", "git_status_vars", *args],
        cwd=str(root),
        capture_output=True,
        text=True,
        env=env,
        check=False,
    )


def assert_status(root: Path, repo: str, expected: str) -> None:
    """Check the summary of ``repo`` against ``expected``.

    ``expected`` is dedented; ``@REPO@`` stands for the repository path and
    every 40-digit ``*_hash`` value is replaced by ``@HASH@`` before comparing.
    """
    result = run_tool(root, repo)
    assert result.returncode == 0, result.stderr
    output = HASH_PATTERN.sub("_hash=@HASH@", result.stdout)
    wanted = textwrap.dedent(expected).lstrip("\n").replace("@REPO@", str(root / repo))
    assert output == wanted


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Directory repositories are created in and the tool is run from."""
    return tmp_path
