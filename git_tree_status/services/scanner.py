"""Directory scanning service"""

import os
from pathlib import Path
from typing import List, Union

from git_tree_status.exceptions import ScanError
from git_tree_status.logging_config import get_logger

logger = get_logger(__name__)


class DirectoryScanner:
    """Lists directories in filesystem order, without sorting."""

    def children(self, path: Union[str, Path]) -> List[Path]:
        """Get the immediate subdirectories of ``path``.

        Args:
            path: Directory to list

        Returns:
            Subdirectory paths in the order the filesystem returns them

        Raises:
            ScanError: If the directory cannot be listed
        """
        path = Path(path)
        try:
            with os.scandir(path) as entries:
                children = [Path(entry.path) for entry in entries if entry.is_dir()]
        except OSError as e:
            raise ScanError(path, e) from e

        logger.debug(f"Listed {len(children)} directories in {path}")
        return children

    def scan(self, root: Union[str, Path], max_depth: int) -> List[Path]:
        """Collect the directories found ``max_depth`` levels below ``root``.

        At depth 0 the subdirectories of ``root`` are returned as-is; deeper
        scans descend into each of them in listing order.
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")

        found: List[Path] = []
        for child in self.children(root):
            if max_depth == 0:
                found.append(child)
            else:
                found.extend(self.scan(child, max_depth - 1))
        return found
