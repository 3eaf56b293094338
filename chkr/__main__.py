"""Allow running as ``python -m chkr``."""

from chkr.cli.commands import app

if __name__ == "__main__":
    app()
