import io
from collections.abc import Callable

import pytest
from rich.console import Console

from git_status_vars.cli import create_app, run

CliRunner = Callable[..., tuple[int, str]]


@pytest.fixture
def run_cli(console: Console) -> CliRunner:
    """Run the application in-process.

    Returns a callable taking command line arguments and returning the exit
    code and everything written as shell variables. Help, version and error
    text goes to ``console`` (and so to ``capsys``).
    """

    def _run(*args: str) -> tuple[int, str]:
        stdout = io.StringIO()
        app = create_app(console=console, error_console=console, stdout=stdout)
        try:
            run(app, list(args))
        except SystemExit as e:
            code = e.code if isinstance(e.code, int) else 1
        else:
            code = 0
        return code, stdout.getvalue()

    return _run
