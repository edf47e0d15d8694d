"""Allow running git-status-vars with ``python -m git_status_vars``."""

from git_status_vars.cli import main

if __name__ == "__main__":
    main()
