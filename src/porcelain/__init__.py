"""porcelain — structured snapshots of git working-tree status."""

__version__ = "0.1.0"
