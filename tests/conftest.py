"""Pytest fixtures for git-tree-status tests"""
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
import pytest
import git

from git_tree_status.exceptions import NotARepositoryError, VcsBackendError
from git_tree_status.models.report import StatusFlag


@dataclass
class FakeBranch:
    """Branch handle understood by FakeBackend."""
    name: str
    upstream: Optional[str] = None
    ahead: int = 0
    behind: int = 0
    error: Optional[str] = None


@dataclass
class FakeRepo:
    """Repository handle understood by FakeBackend."""
    statuses: List[StatusFlag] = field(default_factory=list)
    branches: List[FakeBranch] = field(default_factory=list)
    status_error: Optional[str] = None
    branch_error: Optional[str] = None
    closed: bool = False


class FakeBackend:
    """In-memory VCS backend keyed by path string."""

    def __init__(self, repos: Optional[Dict[str, FakeRepo]] = None, open_errors: Optional[Dict[str, str]] = None):
        self.repos = repos or {}
        self.open_errors = open_errors or {}
        self.opened: List[str] = []

    def open(self, path):
        key = str(path)
        self.opened.append(key)
        if key in self.open_errors:
            raise VcsBackendError("open", path, self.open_errors[key])
        if key not in self.repos:
            raise NotARepositoryError(path)
        return self.repos[key]

    def working_tree_status(self, repo):
        if repo.status_error:
            raise VcsBackendError("status", message=repo.status_error)
        return list(repo.statuses)

    def local_branches(self, repo):
        if repo.branch_error:
            raise VcsBackendError("list_branches", message=repo.branch_error)
        return list(repo.branches)

    def branch_name(self, branch):
        return branch.name

    def upstream_of(self, branch):
        return branch.upstream

    def ahead_behind(self, repo, local, upstream):
        if local.error:
            raise VcsBackendError("ahead_behind", local.name, local.error)
        return local.ahead, local.behind

    def close(self, repo):
        repo.closed = True


class FakeScanner:
    """Scanner returning children from a dict, in the given order."""

    def __init__(self, tree: Dict[Path, List[Path]]):
        self.tree = tree
        self.listed: List[Path] = []

    def children(self, path):
        self.listed.append(Path(path))
        return list(self.tree.get(Path(path), []))

    def scan(self, root, max_depth):
        found = []
        for child in self.children(root):
            if max_depth == 0:
                found.append(child)
            else:
                found.extend(self.scan(child, max_depth - 1))
        return found


def _configure_user(repo: git.Repo) -> None:
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()


def commit_file(repo: git.Repo, name: str, content: str, message: str) -> None:
    """Write a file in the working tree and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    repo.index.commit(message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary."""
    return {
        'depth': 0,
        'flat': False,
        'branches_as_tree': False,
        'color': False,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main and no remote."""
    repo_path = temp_dir / "origin_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def cloned_repo(git_repo, temp_dir):
    """Clone git_repo so that main tracks origin/main."""
    clone = git.Repo.clone_from(git_repo.working_dir, temp_dir / "clone")
    _configure_user(clone)

    yield clone

    clone.close()


@pytest.fixture
def fake_backend():
    """Create an empty fake backend; tests add repos to it."""
    return FakeBackend()
