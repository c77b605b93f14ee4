"""Formatting utilities for git-tree-status.

This package maps statuses and reports to display text, organized into
logical modules:
- status: Status to style mapping
- report: Report labels and summaries
"""

# Status formatters
from .status import (
    get_repo_style,
    get_branch_style,
    format_repo_status,
    format_branch_status,
    format_message,
)

# Report formatters
from .report import (
    format_path_name,
    format_branch_list,
    format_report_label,
    format_report_summary,
)

__all__ = [
    # Status
    "get_repo_style",
    "get_branch_style",
    "format_repo_status",
    "format_branch_status",
    "format_message",
    # Report
    "format_path_name",
    "format_branch_list",
    "format_report_label",
    "format_report_summary",
]
