"""Tree drawing state: one marker per ancestor level."""
from enum import Enum
from dataclasses import dataclass
from typing import Tuple


class Marker(Enum):
    """One column of the tree's left margin; the value is the glyph drawn."""
    OPEN = "├── "
    CONTINUE = "│   "
    TERMINAL = "└── "
    EMPTY = "    "


# Column state once a deeper level has been started below it
_FOLDED = {
    Marker.OPEN: Marker.CONTINUE,
    Marker.CONTINUE: Marker.CONTINUE,
    Marker.TERMINAL: Marker.EMPTY,
    Marker.EMPTY: Marker.EMPTY,
}


@dataclass(frozen=True)
class PrefixStack:
    """Immutable stack of markers describing a node's position in the tree.

    A parent stack is reused to seed every child of a directory, so ``extend``
    always returns a new stack and never touches the receiver.
    """
    markers: Tuple[Marker, ...] = ()

    def extend(self, marker: Marker) -> "PrefixStack":
        """Fold existing columns and append ``marker`` as the deepest one."""
        return PrefixStack(tuple(_FOLDED[m] for m in self.markers) + (marker,))

    def render(self) -> str:
        """Return the left margin for the line at this position."""
        return "".join(m.value for m in self.markers)

    def __len__(self) -> int:
        return len(self.markers)
