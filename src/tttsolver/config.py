"""
Configuration for text notation and command-line runs.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NotationConfig:
    """Characters used for marks in position text."""

    x_mark: str = "X"
    o_mark: str = "O"
    empty_mark: str = "_"

    def __post_init__(self):
        marks = (self.x_mark, self.o_mark, self.empty_mark)
        for m in marks:
            if len(m) != 1 or m.isspace():
                raise ValueError(f"Marks must be single non-whitespace characters, got {m!r}")
        if len(set(marks)) != 3:
            raise ValueError(f"Marks must be distinct, got {marks}")


@dataclass
class SolveConfig:
    """Options for a CLI run."""

    notation: NotationConfig = field(default_factory=NotationConfig)

    # Progress bars for per-move analysis
    show_progress: bool = True

    # Tie-breaking among optimal moves in play mode
    seed: Optional[int] = None
