"""Version control query backend built on GitPython"""

from pathlib import Path
from typing import Any, List, Optional, Protocol, Tuple, Union

import git

from git_tree_status.exceptions import NotARepositoryError, VcsBackendError
from git_tree_status.logging_config import get_logger
from git_tree_status.models.report import StatusFlag

logger = get_logger(__name__)


# Porcelain status letters, index column (X) and worktree column (Y)
INDEX_FLAGS = {
    "A": StatusFlag.INDEX_NEW,
    "C": StatusFlag.INDEX_NEW,
    "M": StatusFlag.INDEX_MODIFIED,
    "D": StatusFlag.INDEX_DELETED,
    "R": StatusFlag.INDEX_RENAMED,
    "T": StatusFlag.INDEX_TYPECHANGE,
}

WORKTREE_FLAGS = {
    "A": StatusFlag.WT_NEW,
    "M": StatusFlag.WT_MODIFIED,
    "D": StatusFlag.WT_DELETED,
    "R": StatusFlag.WT_RENAMED,
    "T": StatusFlag.WT_TYPECHANGE,
}

UNMERGED_CODES = {"DD", "AU", "UD", "UA", "DU", "AA", "UU"}

# Keep status from refreshing and rewriting the index
READ_ONLY_ENV = {"GIT_OPTIONAL_LOCKS": "0"}


class VcsBackend(Protocol):
    """Read-only queries the status aggregator needs from a VCS."""

    def open(self, path: Path) -> Any: ...

    def working_tree_status(self, repo: Any) -> List[StatusFlag]: ...

    def local_branches(self, repo: Any) -> List[Any]: ...

    def branch_name(self, branch: Any) -> str: ...

    def upstream_of(self, branch: Any) -> Optional[Any]: ...

    def ahead_behind(self, repo: Any, local: Any, upstream: Any) -> Tuple[int, int]: ...

    def close(self, repo: Any) -> None: ...


def parse_status_code(code: str) -> StatusFlag:
    """Map a two-letter porcelain status code to change flags.

    Args:
        code: The XY code from ``git status --porcelain``

    Returns:
        StatusFlag combination for the entry
    """
    if code == "??":
        return StatusFlag.WT_NEW
    if code == "!!":
        return StatusFlag.IGNORED
    if code in UNMERGED_CODES:
        return StatusFlag.CONFLICTED

    flags = StatusFlag.CURRENT
    index_status, worktree_status = code[0], code[1]
    flags |= INDEX_FLAGS.get(index_status, StatusFlag.CURRENT)
    flags |= WORKTREE_FLAGS.get(worktree_status, StatusFlag.CURRENT)
    return flags


def parse_porcelain_z(output: str) -> List[StatusFlag]:
    """Parse NUL separated ``git status --porcelain -z`` output.

    Renames and copies are followed by an extra entry holding the original
    path, which is skipped.
    """
    entries = output.split("\0")
    statuses = []
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if len(entry) < 3:
            continue

        code = entry[:2]
        statuses.append(parse_status_code(code))

        if "R" in code or "C" in code:
            i += 1

    return statuses


class GitBackend:
    """VCS backend answering queries with GitPython."""

    def open(self, path: Union[str, Path]) -> git.Repo:
        """Open ``path`` as a repository without searching parent directories."""
        try:
            return git.Repo(path)
        except git.InvalidGitRepositoryError:
            raise NotARepositoryError(path)
        except (git.GitError, OSError) as e:
            raise VcsBackendError("open", path, str(e) or type(e).__name__)

    def working_tree_status(self, repo: git.Repo) -> List[StatusFlag]:
        """Get change flags for every entry of the working tree status."""
        try:
            output = repo.git.status("--porcelain", "-z", env=READ_ONLY_ENV)
        except git.GitCommandError as e:
            raise VcsBackendError("status", repo.working_dir, _command_message(e))
        return parse_porcelain_z(output)

    def local_branches(self, repo: git.Repo) -> List[git.Head]:
        try:
            return list(repo.heads)
        except (git.GitError, OSError, ValueError) as e:
            raise VcsBackendError("list_branches", repo.working_dir, str(e))

    def branch_name(self, branch: git.Head) -> str:
        return branch.name

    def upstream_of(self, branch: git.Head) -> Optional[git.Reference]:
        """Get the upstream of a branch, or None if unset or missing.

        A branch tracking another local branch (remote ``.``) gets that
        local head as its upstream.
        """
        try:
            upstream = self._local_upstream(branch)
            if upstream is None:
                upstream = branch.tracking_branch()
        except (git.GitError, ValueError) as e:
            raise VcsBackendError("upstream", branch.name, str(e))

        if upstream is None or not upstream.is_valid():
            logger.debug(f"Branch {branch.name} has no usable upstream")
            return None
        return upstream

    def _local_upstream(self, branch: git.Head) -> Optional[git.Head]:
        reader = branch.config_reader()
        if not (reader.has_option("remote") and reader.has_option("merge")):
            return None
        if reader.get_value("remote") != ".":
            return None
        return git.Head(branch.repo, git.Head.to_full_path(str(reader.get_value("merge"))))

    def ahead_behind(
        self, repo: git.Repo, local: git.Head, upstream: git.Reference
    ) -> Tuple[int, int]:
        """Count commits on ``local`` not on ``upstream`` and the reverse."""
        try:
            output = repo.git.rev_list(
                "--left-right", "--count", f"{local.path}...{upstream.path}"
            )
            ahead, behind = output.split()
            return int(ahead), int(behind)
        except git.GitCommandError as e:
            raise VcsBackendError("ahead_behind", local.name, _command_message(e))
        except ValueError as e:
            raise VcsBackendError("ahead_behind", local.name, f"unexpected output: {e}")

    def close(self, repo: git.Repo) -> None:
        repo.close()


def _command_message(error: git.GitCommandError) -> str:
    """Extract the most useful text from a failed git command."""
    stderr = (error.stderr or "").strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    return stderr or str(error)
