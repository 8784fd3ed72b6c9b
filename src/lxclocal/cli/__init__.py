"""Command-line interface for lxc-local."""
