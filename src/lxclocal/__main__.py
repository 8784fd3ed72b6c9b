"""Entry point for ``python -m lxclocal``."""

from lxclocal.cli.main import main


if __name__ == "__main__":
    main()
