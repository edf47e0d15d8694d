"""git-status-vars exceptions.

Reference and upstream failures are recorded into the summary as their
``repr()``, so their messages mirror what ``git`` itself would say.
"""

from pathlib import Path
from typing import Any


class GitStatusVarsError(Exception):
    """Base exception for git-status-vars errors."""


# =============================================================================
# Repository Exceptions
# =============================================================================


class RepositoryError(GitStatusVarsError):
    """Base exception for failures opening or reading a repository."""


class RepositoryNotFoundError(RepositoryError):
    """The requested location is not a git repository."""

    def __init__(self, path: str) -> None:
        """Initialize with the path that was searched."""
        super().__init__(f"could not find repository at '{path}'")
        self.path: str = path


# =============================================================================
# Reference Exceptions
# =============================================================================


class RefNotFoundError(GitStatusVarsError, KeyError):
    """A named reference does not exist."""

    def __init__(self, name: str) -> None:
        """Initialize with the reference name that was looked up."""
        super().__init__(f"reference '{name}' not found")
        self.name: str = name

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes.
        return str(self.args[0])


class CyclicReferenceError(GitStatusVarsError):
    """A chain of symbolic references leads back to itself."""

    def __init__(self, name: str) -> None:
        """Initialize with the first reference seen twice."""
        super().__init__(f"reference '{name}' is part of a symbolic reference cycle")
        self.name: str = name


class InvalidReferenceNameError(GitStatusVarsError, ValueError):
    """A symbolic reference points at something that is not a reference name."""

    def __init__(self, name: str) -> None:
        """Initialize with the malformed target."""
        super().__init__(f"symbolic target '{name}' is not a valid reference name")
        self.name: str = name


# =============================================================================
# Upstream Exceptions
# =============================================================================


class UpstreamError(GitStatusVarsError):
    """Base exception for failures comparing HEAD with its upstream."""


class NotALocalBranchError(UpstreamError):
    """HEAD does not resolve through a branch under refs/heads/."""

    def __init__(self, name: str) -> None:
        """Initialize with the name of the reference HEAD resolved to."""
        super().__init__(f"reference '{name}' is not a local branch")
        self.name: str = name


class ConfigValueNotFoundError(UpstreamError, KeyError):
    """A git config value needed to find the upstream is missing."""

    def __init__(self, key: str) -> None:
        """Initialize with the dotted config key, e.g. ``branch.main.remote``."""
        super().__init__(f"config value '{key}' was not found")
        self.key: str = key

    def __str__(self) -> str:
        return str(self.args[0])


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(GitStatusVarsError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
