"""Writer for ``key=value`` shell variable lines."""

import sys
from typing import Protocol, runtime_checkable

from git_status_vars.shell._quote import shell_quote, shell_quote_debug


@runtime_checkable
class TextSink(Protocol):
    """Anything text can be written to: ``sys.stdout``, ``io.StringIO``, ..."""

    def write(self, s: str, /) -> object:
        """Write text to the sink."""
        ...


@runtime_checkable
class ShellVars(Protocol):
    """An object that knows how to write itself as shell variables."""

    def write_to_shell(self, out: "ShellWriter") -> None:
        """Write this object's variables through ``out``.

        Args:
            out: Writer carrying the prefix the variables should be under.
        """
        ...


class ShellWriter:
    """Write shell variable assignments to a shared sink.

    Writers derived with ``group()`` hold the same sink as their parent, so
    lines from every writer in a family land in one stream in call order.
    Nothing is buffered or flushed here; write errors such as
    ``BrokenPipeError`` propagate to the caller.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> out = ShellWriter(buffer)
        >>> out.group_n("repo", 1).write_var("path", "my repo")
        >>> buffer.getvalue()
        "repo1_path='my repo'\\n"
    """

    __slots__: tuple[str, ...] = ("_prefix", "_sink")

    def __init__(self, sink: TextSink | None = None, prefix: str = "") -> None:
        """Initialize the writer.

        Args:
            sink: Where lines are written. Defaults to ``sys.stdout``.
            prefix: Text placed before every variable name.
        """
        self._sink: TextSink = sink if sink is not None else sys.stdout
        self._prefix: str = prefix

    @property
    def prefix(self) -> str:
        """Text placed before every variable name."""
        return self._prefix

    @property
    def sink(self) -> TextSink:
        """The shared sink lines are written to."""
        return self._sink

    def __repr__(self) -> str:
        return f"ShellWriter(sink={self._sink!r}, prefix={self._prefix!r})"

    def _write_raw(self, name: str, raw: str) -> None:
        self._sink.write(f"{self._prefix}{name}={raw}\n")

    def write_var(self, name: str, value: object) -> None:
        """Write ``value`` in its natural form.

        Args:
            name: Variable name, appended to the prefix.
            value: Value to display and quote.
        """
        self._write_raw(name, shell_quote(value))

    def write_var_debug(self, name: str, value: object) -> None:
        """Write ``value`` in its diagnostic form (used for errors and states).

        Args:
            name: Variable name, appended to the prefix.
            value: Value to debug-format and quote.
        """
        self._write_raw(name, shell_quote_debug(value))

    def write_vars(self, vars: ShellVars) -> None:  # noqa: A002
        """Let an object write its own variables through this writer."""
        vars.write_to_shell(self)

    def write_separator(self) -> None:
        """Write an empty line, used between repositories."""
        self._sink.write("\n")

    def group(self, label: str) -> "ShellWriter":
        """Derive a writer whose prefix is extended with ``{label}_``.

        Args:
            label: Group label.

        Returns:
            A writer sharing this writer's sink.
        """
        return ShellWriter(self._sink, f"{self._prefix}{label}_")

    def group_n(self, label: str, n: int) -> "ShellWriter":
        """Derive a numbered group writer, e.g. ``ref1_``.

        Args:
            label: Group label.
            n: Number appended to the label.

        Returns:
            A writer sharing this writer's sink.
        """
        return self.group(f"{label}{n}")
