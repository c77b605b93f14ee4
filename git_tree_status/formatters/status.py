"""Status styling utilities."""

from rich.text import Text

from git_tree_status.constants import BRANCH_COLORS, CLI_COLORS
from git_tree_status.models.report import BranchStatus, RepoStatus


def format_message(message) -> str:
    """Collapse a possibly multi-line message onto one line."""
    return " ".join(str(message).split())


def get_repo_style(status: RepoStatus) -> str:
    """
    Get the Rich style for a repository status.

    Args:
        status: Repository status

    Returns:
        Rich style name, or an empty string for the default style
    """
    return CLI_COLORS.get(status.state) or ""


def get_branch_style(status: BranchStatus) -> str:
    """Get the Rich style for a branch status."""
    return BRANCH_COLORS.get(status.state) or ""


def format_repo_status(status: RepoStatus) -> Text:
    """
    Format repository status as a styled token.

    Args:
        status: Repository status

    Returns:
        Text such as "Clean" in green or "Dirty" in red
    """
    return Text(status.state.value, style=get_repo_style(status))


def format_branch_status(name: str, status: BranchStatus) -> Text:
    """
    Format one branch as "name:Status" with the status styled.

    Example:
        "main:Current", "feature/x:NoUpstream", "wip:Error(bad ref)"
    """
    text = Text(f"{name}:")
    text.append(format_message(status), style=get_branch_style(status))
    return text
