"""
Reading submodule.

Re-exports the work model and the persisted reading position.
"""

from greekreader.reading._position import (
    Book,
    Position,
    PositionStore,
    ReadingPosition,
    Work,
)

__all__ = ["Book", "Position", "PositionStore", "ReadingPosition", "Work"]
