"""Command-line argument parsing for git-tree-status."""

import argparse
from typing import List, Optional

from git_tree_status.__version__ import __version__


def non_negative_int(value: str) -> int:
    """Argparse type for a depth of zero or more."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"depth must not be negative, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Show whether git repositories under a directory are clean and pushed",
        epilog="Per-repository errors are reported inline; the exit code is only non-zero "
        "when the directory tree itself cannot be read.",
    )
    parser.add_argument(
        "path", nargs="?", default=None, help="Root path to scan for git repos (default: current directory)"
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=non_negative_int,
        default=0,
        metavar="DEPTH",
        help="Folder depth to find git repos at within root path (default: 0)",
    )
    parser.add_argument(
        "--flat",
        action="store_true",
        help="List one line per repository instead of drawing a tree",
    )
    parser.add_argument(
        "--branches-as-tree",
        action="store_true",
        help="Show each branch as a child node of its repository",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-tree-status {__version__}")

    return parser.parse_args(argv)
