"""Report label formatting utilities."""

from pathlib import Path
from typing import Dict, Union

from rich.text import Text

from git_tree_status.constants import BRANCH_SEPARATOR, SUMMARY_SEPARATOR
from git_tree_status.exceptions import PathEncodingError
from git_tree_status.formatters.status import (
    format_branch_status,
    format_message,
    format_repo_status,
    get_repo_style,
)
from git_tree_status.models.report import BranchStatus, RepoReport, RepoState


def format_path_name(path: Union[str, Path], full: bool = False) -> str:
    """
    Get the display name of a path.

    Args:
        path: Filesystem path
        full: Use the whole path instead of its last component

    Returns:
        The name as text

    Raises:
        PathEncodingError: If the name is not valid text
    """
    path = Path(path)
    name = str(path) if full or not path.name else path.name
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathEncodingError(path) from e
    return name


def format_branch_list(branch_status: Dict[str, BranchStatus]) -> Text:
    """
    Format branches as a bracketed, comma-joined list sorted by name.

    Example:
        "[feature:Ahead, main:Current]"
    """
    text = Text("[")
    text.append(
        Text(BRANCH_SEPARATOR).join(
            format_branch_status(name, branch_status[name]) for name in sorted(branch_status)
        )
    )
    text.append("]")
    return text


def format_report_label(report: RepoReport, name: str, with_branches: bool = True) -> Text:
    """
    Format the label of a leaf node in the tree.

    Args:
        report: Report for the node
        name: Display name of the node
        with_branches: Append the branch list for clean/dirty repositories

    Returns:
        Text with the styled status token, the name and either the branch
        list (clean/dirty repositories) or the error message. Directories
        that are not repositories are shown by name only.
    """
    status = report.repo_status
    if status.state is RepoState.NOT_A_REPO:
        return Text(name)

    text = format_repo_status(status)
    text.append(" ")
    if status.state is RepoState.ERROR:
        text.append(
            f"{name} (ERR: {format_message(status.message)})", style=get_repo_style(status)
        )
        return text

    text.append(name)
    if with_branches:
        text.append(" ")
        text.append(format_branch_list(report.branch_status))
    return text


def format_report_summary(report: RepoReport) -> str:
    """
    Format a report as a single plain line for flat listings.

    Example:
        "Clean | main:Current", "Dirty | dev:NoUpstream, main:Current", "NotARepo"
    """
    summary = format_message(report.repo_status)
    if not report.branch_status:
        return summary

    branches = BRANCH_SEPARATOR.join(
        f"{name}:{format_message(report.branch_status[name])}"
        for name in sorted(report.branch_status)
    )
    return f"{summary}{SUMMARY_SEPARATOR}{branches}"
