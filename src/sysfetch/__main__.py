"""Allow ``python -m sysfetch``."""

from sysfetch.cli.main import cli

if __name__ == "__main__":
    cli()
