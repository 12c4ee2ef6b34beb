"""Allow running as ``python -m folderlockdecrypt``."""

from .cli.main import cli

if __name__ == "__main__":
    cli()
