"""
git-tree-status - Show the git status of every repository under a directory as a tree
"""

from .__version__ import __version__
from .core.tree_walker import TreeWalker
from .cli.main import main

__all__ = ["TreeWalker", "main", "__version__"]
