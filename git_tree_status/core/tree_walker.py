"""Tree walking and rendering for git-tree-status"""

import errno
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

from rich.console import Console
from rich.text import Text

from git_tree_status.exceptions import ScanError
from git_tree_status.formatters import (
    format_branch_status,
    format_path_name,
    format_report_label,
    format_report_summary,
    get_repo_style,
)
from git_tree_status.logging_config import get_logger
from git_tree_status.models.report import RepoReport, RepoState
from git_tree_status.models.tree import Marker, PrefixStack
from git_tree_status.services.scanner import DirectoryScanner
from git_tree_status.services.status_service import StatusAggregator

logger = get_logger(__name__)


@dataclass(frozen=True)
class _Frame:
    """One pending node of the depth-first walk."""
    path: Path
    depth: int
    prefix: PrefixStack
    is_root: bool = False


def sibling_marker(index: int, count: int) -> Marker:
    """Get the marker for the child at ``index`` among ``count`` siblings."""
    return Marker.TERMINAL if index == count - 1 else Marker.OPEN


class TreeWalker:
    """Walks a directory tree and renders repository status as a box-drawn tree."""

    def __init__(
        self,
        scanner: Optional[DirectoryScanner] = None,
        aggregator: Optional[StatusAggregator] = None,
        branches_as_tree: bool = False,
    ):
        """Initialize the walker.

        Args:
            scanner: Directory scanner (defaults to DirectoryScanner)
            aggregator: Status aggregator (defaults to a GitPython backed one)
            branches_as_tree: Draw a repository's branches as child nodes
                instead of an inline list
        """
        self.scanner = scanner or DirectoryScanner()
        self.aggregator = aggregator or StatusAggregator()
        self.branches_as_tree = branches_as_tree

    def lines(self, root: Union[str, Path], depth: int) -> Iterator[Text]:
        """Yield one line per visited node, depth-first in listing order.

        The root is shown first without a prefix. Nodes ``depth`` levels below
        it are reported on instead of being descended into.

        Raises:
            ScanError: If the root or any directory on the way cannot be listed
            PathEncodingError: If a name cannot be displayed
        """
        root = Path(root)
        _check_root(root)
        logger.info(f"Walking {root} to depth {depth}")

        # Explicit stack instead of recursion; depth is user controlled
        pending: List[_Frame] = [_Frame(root, depth, PrefixStack(), is_root=True)]
        while pending:
            frame = pending.pop()
            name = format_path_name(frame.path, full=frame.is_root)
            line = Text(frame.prefix.render())

            if frame.depth == 0:
                yield from self._report_lines(frame, name, line)
                continue

            line.append(name)
            yield line

            children = self.scanner.children(frame.path)
            count = len(children)
            # Pushed in reverse so the first child is popped first
            for index in range(count - 1, -1, -1):
                marker = sibling_marker(index, count)
                pending.append(
                    _Frame(children[index], frame.depth - 1, frame.prefix.extend(marker))
                )

    def _report_lines(self, frame: _Frame, name: str, line: Text) -> Iterator[Text]:
        report = self.aggregator.report(frame.path)
        line.append(format_report_label(report, name, with_branches=not self.branches_as_tree))
        yield line

        if self.branches_as_tree and report.repo_status.state in (RepoState.CLEAN, RepoState.DIRTY):
            yield from self._branch_lines(report, frame.prefix)

    def _branch_lines(self, report: RepoReport, prefix: PrefixStack) -> Iterator[Text]:
        names = sorted(report.branch_status)
        for index, branch_name in enumerate(names):
            line = Text(prefix.extend(sibling_marker(index, len(names))).render())
            line.append(format_branch_status(branch_name, report.branch_status[branch_name]))
            yield line

    def flat(self, root: Union[str, Path], depth: int) -> Iterator[Text]:
        """Yield one "path: summary" line per node ``depth`` levels below root.

        Uses the same depth convention as ``lines``: depth 0 reports on the
        root itself.
        """
        root = Path(root)
        _check_root(root)

        paths = [root] if depth == 0 else self.scanner.scan(root, depth - 1)
        for path in paths:
            report = self.aggregator.report(path)
            line = Text(f"{format_path_name(path, full=True)}: ")
            line.append(format_report_summary(report), style=get_repo_style(report.repo_status))
            yield line

    def report(
        self, root: Union[str, Path], depth: int, console: Console, flat: bool = False
    ) -> int:
        """Print the tree (or flat listing) for ``root`` to ``console``.

        Returns:
            Number of lines printed
        """
        lines = self.flat(root, depth) if flat else self.lines(root, depth)
        printed = 0
        for line in lines:
            console.print(line, soft_wrap=True)
            printed += 1
        return printed


def _check_root(root: Path) -> None:
    """Raise ScanError unless ``root`` is an existing directory."""
    if root.is_dir():
        return
    if not root.exists():
        cause = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(root))
    else:
        cause = NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(root))
    raise ScanError(root, cause)
