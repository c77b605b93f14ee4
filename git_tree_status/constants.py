"""Shared constants for git-tree-status."""

from git_tree_status.models.report import BranchState, RepoState


# CLI colors (Rich color names)
CLI_COLORS = {
    RepoState.CLEAN: "green",
    RepoState.DIRTY: "red",
    RepoState.ERROR: "red",
    RepoState.NOT_A_REPO: None,  # Default color
}

BRANCH_COLORS = {
    BranchState.CURRENT: "green",
    BranchState.AHEAD: "yellow",
    BranchState.NO_UPSTREAM: "yellow",
    BranchState.ERROR: "red",
}


# Separators used in report labels
BRANCH_SEPARATOR = ", "
SUMMARY_SEPARATOR = " | "
