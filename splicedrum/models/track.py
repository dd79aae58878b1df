"""
Track data model for splice patterns.
"""

from dataclasses import dataclass, field
from typing import Sequence, Tuple

from splicedrum.utils.validation import validate_byte, validate_steps

# One measure of 4/4 in sixteenth notes
STEP_COUNT = 16
STEPS_PER_BEAT = 4


def format_steps(steps: Sequence[bool], on: str = "x", off: str = "-") -> str:
    """
    Render step flags as a grid grouped by beat.

    Args:
        steps: Step flags
        on: Glyph for an active step
        off: Glyph for an inactive step

    Returns:
        String like "|x---|-x--|----|----|"
    """
    parts = []
    for i, step in enumerate(steps):
        if i % STEPS_PER_BEAT == 0:
            parts.append("|")
        parts.append(on if step else off)
    parts.append("|")
    return "".join(parts)


@dataclass(frozen=True)
class Track:
    """
    A single instrument lane within a pattern.

    Attributes:
        id: Track id from the file (0-255)
        name: Instrument name, e.g. "kick"
        steps: Exactly 16 step flags, index 0 is the first sixteenth
    """

    id: int
    name: str = ""
    steps: Tuple[bool, ...] = field(default=(False,) * STEP_COUNT)

    def __post_init__(self):
        validate_byte(self.id, "Track id")
        validate_steps(self.steps, STEP_COUNT)
        object.__setattr__(self, "steps", tuple(bool(s) for s in self.steps))

    @classmethod
    def from_raw(cls, track_id: int, name: str, raw_steps: bytes) -> "Track":
        """Build a track from raw step bytes (0 = off, anything else = on)."""
        return cls(id=track_id, name=name, steps=tuple(b != 0 for b in raw_steps))

    @property
    def active_steps(self) -> int:
        """Number of steps switched on."""
        return sum(self.steps)

    @property
    def is_silent(self) -> bool:
        return not any(self.steps)

    def step_grid(self) -> str:
        return format_steps(self.steps)

    def __str__(self) -> str:
        return f"({self.id}) {self.name}\t{self.step_grid()}\n"
