"""Shared test fixtures for git-status-vars tests."""

import os
from collections.abc import Iterator, Mapping
from pathlib import Path

import pytest
from dulwich import porcelain
from dulwich.repo import Repo
from rich.console import Console

IDENTITY = b"Name <name@example.com>"


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Keep user and system git config, and git-status-vars settings, out of tests.

    The process timeout is disabled so that a slow test machine cannot
    trigger it in the middle of a test run.
    """
    home = tmp_path_factory.mktemp("home")
    (home / ".gitconfig").write_text(
        "[user]\n"
        "\tname = Name\n"
        "\temail = name@example.com\n"
        "[init]\n"
        "\tdefaultBranch = main\n"
        "[advice]\n"
        "\tdetachedHead = false\n"
        "\tskippedCherryPicks = false\n"
    )
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(home / ".gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_SYSTEM", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in list(os.environ):
        if name.startswith(("GIT_STATUS_VARS_", "GIT_DIR", "GIT_WORK_TREE")):
            monkeypatch.delenv(name)
    monkeypatch.setenv("GIT_STATUS_VARS_TIMEOUT", "none")
    return home


def write_files(root: Path, files: Mapping[str, str]) -> None:
    """Write text files below ``root``, creating directories as needed."""
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


def commit_files(repo: Repo, files: Mapping[str, str], message: str) -> bytes:
    """Write, stage and commit files in a dulwich repository.

    Returns:
        The id of the new commit.
    """
    root = Path(repo.path)
    write_files(root, files)
    porcelain.add(repo, paths=[str(root / name) for name in files])
    return porcelain.commit(
        repo,
        message=message.encode(),
        author=IDENTITY,
        committer=IDENTITY,
    )


@pytest.fixture
def repo(tmp_path: Path) -> Iterator[Repo]:
    """An empty non-bare repository whose HEAD points at ``refs/heads/main``."""
    path = tmp_path / "repo"
    path.mkdir()
    repository = Repo.init(str(path), default_branch=b"main")
    yield repository
    repository.close()


@pytest.fixture
def committed_repo(repo: Repo) -> Repo:
    """A repository with one commit on ``main`` containing files ``a`` and ``b``."""
    _ = commit_files(repo, {"a": "1a", "b": "1b"}, "commit 1")
    return repo


def configure_upstream(
    repo: Repo,
    *,
    branch: str = "main",
    remote: str = "origin",
    merge: str | None = None,
) -> None:
    """Point ``branch`` at ``merge`` on ``remote`` with a standard fetch refspec."""
    config = repo.get_config()
    section = (b"branch", branch.encode())
    config.set(section, b"remote", remote.encode())
    config.set(section, b"merge", (merge or f"refs/heads/{branch}").encode())
    if remote != ".":
        config.set(
            (b"remote", remote.encode()),
            b"fetch",
            f"+refs/heads/*:refs/remotes/{remote}/*".encode(),
        )
    config.write_to_path()


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
