"""Version information for git-tree-status."""

try:
    from git_tree_status._version import __version__
except ImportError:
    # Fallback for development without tags or when running from source
    __version__ = "0.0.0+unknown"
