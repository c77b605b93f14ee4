"""Repository report model and related enums"""
from enum import Enum, Flag
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


class RepoState(Enum):
    """Repository-level verdict."""
    CLEAN = "Clean"
    DIRTY = "Dirty"
    NOT_A_REPO = "NotARepo"
    ERROR = "Error"


class BranchState(Enum):
    """Branch verdict relative to its upstream."""
    CURRENT = "Current"
    NO_UPSTREAM = "NoUpstream"
    AHEAD = "Ahead"
    ERROR = "Error"


class StatusFlag(Flag):
    """Per-file change bits reported by a working tree status query."""
    CURRENT = 0
    INDEX_NEW = 1 << 0
    INDEX_MODIFIED = 1 << 1
    INDEX_DELETED = 1 << 2
    INDEX_RENAMED = 1 << 3
    INDEX_TYPECHANGE = 1 << 4
    WT_NEW = 1 << 7
    WT_MODIFIED = 1 << 8
    WT_DELETED = 1 << 9
    WT_TYPECHANGE = 1 << 10
    WT_RENAMED = 1 << 11
    IGNORED = 1 << 14
    CONFLICTED = 1 << 15


CHANGED_MASK = (
    StatusFlag.INDEX_NEW
    | StatusFlag.INDEX_MODIFIED
    | StatusFlag.INDEX_DELETED
    | StatusFlag.INDEX_RENAMED
    | StatusFlag.INDEX_TYPECHANGE
    | StatusFlag.WT_NEW
    | StatusFlag.WT_MODIFIED
    | StatusFlag.WT_DELETED
    | StatusFlag.WT_RENAMED
    | StatusFlag.WT_TYPECHANGE
)


@dataclass(frozen=True)
class RepoStatus:
    """Status of a repository, with a message when the state is ERROR."""
    state: RepoState
    message: Optional[str] = None

    @classmethod
    def clean(cls) -> "RepoStatus":
        return cls(RepoState.CLEAN)

    @classmethod
    def dirty(cls) -> "RepoStatus":
        return cls(RepoState.DIRTY)

    @classmethod
    def not_a_repo(cls) -> "RepoStatus":
        return cls(RepoState.NOT_A_REPO)

    @classmethod
    def error(cls, message: str) -> "RepoStatus":
        return cls(RepoState.ERROR, message)

    def __str__(self) -> str:
        if self.state is RepoState.ERROR:
            return f"Error: {self.message}"
        return self.state.value


@dataclass(frozen=True)
class BranchStatus:
    """Status of a local branch, with a message when the state is ERROR."""
    state: BranchState
    message: Optional[str] = None

    @classmethod
    def current(cls) -> "BranchStatus":
        return cls(BranchState.CURRENT)

    @classmethod
    def no_upstream(cls) -> "BranchStatus":
        return cls(BranchState.NO_UPSTREAM)

    @classmethod
    def ahead(cls) -> "BranchStatus":
        return cls(BranchState.AHEAD)

    @classmethod
    def error(cls, message: str) -> "BranchStatus":
        return cls(BranchState.ERROR, message)

    def __str__(self) -> str:
        if self.state is BranchState.ERROR:
            return f"Error({self.message})"
        return self.state.value


@dataclass(frozen=True)
class RepoReport:
    """Aggregated status of one scanned path."""
    path: Path
    repo_status: RepoStatus
    branch_status: Dict[str, BranchStatus] = field(default_factory=dict)
