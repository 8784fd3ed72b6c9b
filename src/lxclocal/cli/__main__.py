"""CLI entry point."""

from lxclocal.cli.main import main


if __name__ == "__main__":
    main()
