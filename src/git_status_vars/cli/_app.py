"""The command-line interface for git-status-vars."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

import os
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, TextIO

from cyclopts import App, CycloptsError, Parameter
from rich.console import Console
from rich.markup import escape

from git_status_vars.cli._exit_codes import ExitCode
from git_status_vars.cli._timeout import cancel_timeout, install_timeout
from git_status_vars.config import load_config
from git_status_vars.exceptions import ConfigError, ConfigValidationError
from git_status_vars.repository import summarize_repository
from git_status_vars.shell import ShellWriter
from git_status_vars.utils import create_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from structlog.typing import FilteringBoundLogger

APP_NAME = "git-status-vars"
HELP = "Summarize git repositories as shell variables."


def _version() -> str:
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def _describe_config_error(error: ConfigError) -> str:
    if isinstance(error, ConfigValidationError):
        return f"{error}: {error.expected}"
    return str(error)


def summarize_all(
    out: ShellWriter,
    repositories: "Sequence[Path]",
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> None:
    """Summarize zero, one or several repositories.

    With no paths the repository is found from the environment. With one
    path its summary is written directly. With several, ``repo_count`` is
    written first, then for each repository a blank line, its
    ``repo<i>_path`` and its summary under the ``repo<i>_`` prefix.

    Args:
        out: Root writer.
        repositories: Repository paths given on the command line.
        logger: Optional logger for diagnostic events.
    """
    if not repositories:
        summarize_repository(out, None, logger=logger)
        return
    if len(repositories) == 1:
        summarize_repository(out, repositories[0], logger=logger)
        return

    out.write_var("repo_count", len(repositories))
    for i, repository in enumerate(repositories, start=1):
        out.write_separator()
        repo_out = out.group_n("repo", i)
        repo_out.write_var("path", repository)
        summarize_repository(repo_out, repository, logger=logger)


def _silence_stdout() -> None:
    """Point stdout at the null device so the exit-time flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
    stdout: TextIO | None = None,
) -> App:
    """Create the ``git-status-vars`` application.

    Args:
        console: Console for help and version output.
        error_console: Console for diagnostics.
        exit_on_error: Exit on usage errors instead of raising them.
        stdout: Stream the shell variables are written to. Defaults to the
            ``sys.stdout`` current when the command runs.

    Returns:
        The configured cyclopts application.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name=APP_NAME,
        help=HELP,
        version=_version,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *repositories: Annotated[Path, Parameter(help="Repositories to summarize")],
        prefix: Annotated[
            str | None,
            Parameter(
                name=["--prefix", "-p"],
                help="Text to put before every output line",
                allow_leading_hyphen=True,
            ),
        ] = None,
        verbose: Annotated[
            bool,
            Parameter(name=["--verbose", "-v"], help="Log timing information"),
        ] = False,
        timeout: Annotated[
            str | None,
            Parameter(
                name=["--timeout", "-t"],
                help='Give up after this long, e.g. "200ms" ("none" disables)',
                allow_leading_hyphen=True,
            ),
        ] = None,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> int:
        """Summarize git repositories as shell variables.

        Output is one ``key=value`` line per variable, quoted so it can be
        passed to ``eval`` in a POSIX shell.

        Args:
            repositories: Repository paths. Without any, the repository
                containing the current directory (or ``$GIT_DIR``) is used.
            prefix: Text to put before every output line.
            verbose: Log timing and diagnostic events to stderr.
            timeout: Maximum run time.
            config: Explicit path to config file.
        """
        cli_overrides: dict[str, object] = {}
        if prefix is not None:
            cli_overrides["prefix"] = prefix
        if timeout is not None:
            cli_overrides["timeout"] = timeout
        if verbose:
            cli_overrides["logging"] = {"level": "debug"}

        try:
            loaded_config, sources = load_config(
                config_path=config,
                cli_overrides=cli_overrides,
            )
        except ConfigError as e:
            message = escape(_describe_config_error(e))
            error_console.print(f"[red]Error:[/red] {message}")
            return ExitCode.USAGE_ERROR

        logger = create_logger(
            level=loaded_config.logging.level.value,
            log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
            verbose=verbose,
        )
        logger.debug(
            "config_loaded",
            sources=[source.name.value for source in sources],
            prefix=loaded_config.prefix,
            timeout=loaded_config.timeout,
        )

        sink = stdout if stdout is not None else sys.stdout
        _ = install_timeout(loaded_config.timeout_seconds, logger=logger)
        try:
            summarize_all(
                ShellWriter(sink, loaded_config.prefix),
                repositories,
                logger=logger,
            )
            sink.flush()
        except BrokenPipeError:
            if sink is sys.stdout:
                _silence_stdout()
            return ExitCode.USAGE_ERROR
        finally:
            cancel_timeout()

        return ExitCode.SUCCESS

    return app


def run(app: App, tokens: "Sequence[str] | None" = None) -> None:
    """Run ``app``, exiting with ``ExitCode.USAGE_ERROR`` on a parse error.

    cyclopts prints the parse error itself; only the exit status is mapped.

    Args:
        app: Application from :func:`create_app`.
        tokens: Command line arguments. Defaults to ``sys.argv[1:]``.
    """
    try:
        app(tokens, exit_on_error=False)
    except CycloptsError:
        sys.exit(ExitCode.USAGE_ERROR)


def main() -> None:
    """Default entrypoint for the ``git-status-vars`` command."""
    run(create_app())
