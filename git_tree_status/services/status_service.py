"""Service for aggregating repository and branch status into a report"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from git_tree_status.exceptions import NotARepositoryError, VcsBackendError
from git_tree_status.logging_config import get_logger
from git_tree_status.models.report import (
    CHANGED_MASK,
    BranchState,
    BranchStatus,
    RepoReport,
    RepoStatus,
    StatusFlag,
)
from git_tree_status.services.git_backend import GitBackend, VcsBackend

logger = get_logger(__name__)


def is_changed(flags: StatusFlag) -> bool:
    """Check if a status entry counts as a change to the working tree."""
    return bool(flags & CHANGED_MASK)


def working_tree_verdict(statuses: Iterable[StatusFlag]) -> RepoStatus:
    """Reduce per-file status flags to CLEAN or DIRTY."""
    if any(is_changed(flags) for flags in statuses):
        return RepoStatus.dirty()
    return RepoStatus.clean()


class StatusAggregator:
    """Turns backend answers into a RepoReport for one path."""

    def __init__(self, backend: Optional[VcsBackend] = None):
        """Initialize the aggregator.

        Args:
            backend: VCS backend to query (defaults to GitBackend)
        """
        self.backend = backend if backend is not None else GitBackend()

    def report(self, path: Union[str, Path]) -> RepoReport:
        """Build the report for ``path``.

        Failures are captured as ERROR statuses in the report, never raised.
        """
        path = Path(path)

        try:
            repo = self.backend.open(path)
        except NotARepositoryError:
            logger.debug(f"{path} is not a repository")
            return RepoReport(path=path, repo_status=RepoStatus.not_a_repo())
        except VcsBackendError as e:
            logger.debug(f"Failed to open {path}: {e}")
            return RepoReport(path=path, repo_status=RepoStatus.error(_message(e)))

        try:
            repo_status = self._get_repo_status(repo)
            try:
                branches = self._get_branch_statuses(repo)
            except VcsBackendError as e:
                logger.debug(f"Failed to list branches in {path}: {e}")
                return RepoReport(
                    path=path,
                    repo_status=RepoStatus.error(f"failed to get branch statuses: {_message(e)}"),
                )
        finally:
            self.backend.close(repo)

        # Branch divergence counts against an otherwise clean working tree
        if repo_status == RepoStatus.clean() and any(
            status.state is not BranchState.CURRENT for status in branches.values()
        ):
            repo_status = RepoStatus.dirty()

        logger.debug(f"Report for {path}: {repo_status}, {len(branches)} branches")
        return RepoReport(path=path, repo_status=repo_status, branch_status=branches)

    def _get_repo_status(self, repo: Any) -> RepoStatus:
        try:
            statuses = self.backend.working_tree_status(repo)
        except VcsBackendError as e:
            return RepoStatus.error(_message(e))
        return working_tree_verdict(statuses)

    def _get_branch_statuses(self, repo: Any) -> Dict[str, BranchStatus]:
        branch_changes: Dict[str, BranchStatus] = {}

        for branch in self.backend.local_branches(repo):
            name = self.backend.branch_name(branch)
            try:
                branch_changes[name] = self.get_branch_status(repo, branch)
            except VcsBackendError as e:
                logger.debug(f"Error checking branch {name}: {e}")
                branch_changes[name] = BranchStatus.error(_message(e))

        return branch_changes

    def get_branch_status(self, repo: Any, branch: Any) -> BranchStatus:
        """Get the status of one branch relative to its upstream.

        A branch that is only behind its upstream is CURRENT; only local
        commits missing from the upstream make it AHEAD.
        """
        upstream = self.backend.upstream_of(branch)
        if upstream is None:
            return BranchStatus.no_upstream()

        ahead, behind = self.backend.ahead_behind(repo, branch, upstream)
        logger.debug(f"Branch {self.backend.branch_name(branch)}: ahead {ahead}, behind {behind}")
        if ahead > 0:
            return BranchStatus.ahead()
        return BranchStatus.current()


def _message(error: VcsBackendError) -> str:
    return error.message or str(error)
