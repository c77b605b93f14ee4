"""Configuration handling for git-tree-status"""

import os
from dataclasses import dataclass, field


@dataclass
class Config:
    """Configuration for git-tree-status with validation."""

    # Scan target
    root_path: str = field(default_factory=os.getcwd)
    depth: int = 0

    # Output modes
    flat: bool = False  # List reports without tree drawing
    branches_as_tree: bool = False  # Draw branches as child nodes of a repository
    color: bool = True

    # Logging
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_root_path()
        self._validate_depth()
        self._validate_output_mode()

    def _validate_root_path(self):
        """Validate root_path is not empty."""
        if not self.root_path or not str(self.root_path).strip():
            raise ValueError("root_path cannot be empty")
        self.root_path = str(self.root_path)

    def _validate_depth(self):
        """Validate depth is a non-negative integer."""
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise ValueError(f"depth must be an integer, got {self.depth!r}")
        if self.depth < 0:
            raise ValueError(f"depth must not be negative, got {self.depth}")

    def _validate_output_mode(self):
        """Validate that only one alternative output mode is requested."""
        if self.flat and self.branches_as_tree:
            raise ValueError("flat and branches_as_tree cannot be combined")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "root_path": self.root_path,
            "depth": self.depth,
            "flat": self.flat,
            "branches_as_tree": self.branches_as_tree,
            "color": self.color,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "root_path",
            "depth",
            "flat",
            "branches_as_tree",
            "color",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
