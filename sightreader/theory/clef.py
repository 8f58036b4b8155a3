from __future__ import annotations

"""Clef configurations: which staff pitches exist and how they are keyed.

A clef maps a diatonic pitch (see ``note_utils``) to a stable item key such
as ``"treble-30"`` and tells the renderer whether the note sits on the first
or second staff. ``extra_bars`` is the number of ledger lines allowed above
and below the staff; each one adds two diatonic steps per side.
"""

from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Protocol

from .note_utils import MIDDLE_C

Staff = Literal["treble", "bass"]
Position = Literal["first", "second"]

# Bottom line of each staff, and the span from bottom to top line.
TREBLE_BOTTOM = 30  # E4
BASS_BOTTOM = 18  # G2
STAFF_SPAN = 8


class Clef(Protocol):
    id: str

    @property
    def first_staff(self) -> Staff: ...

    @property
    def second_staff(self) -> Optional[Staff]: ...

    def encode_note(self, note: int) -> str: ...

    def min_note(self, extra_bars: int) -> int: ...

    def max_note(self, extra_bars: int) -> int: ...

    def note_position(self, note: int) -> Position: ...

    def staff_for(self, note: int) -> Staff: ...

    def notes(self, extra_bars: int) -> List[int]: ...


@dataclass(frozen=True)
class SingleStaffClef:
    """One staff; every note sits on it."""

    id: str
    staff: Staff
    bottom: int

    @property
    def first_staff(self) -> Staff:
        return self.staff

    @property
    def second_staff(self) -> Optional[Staff]:
        return None

    def encode_note(self, note: int) -> str:
        return f"{self.staff}-{note}"

    def min_note(self, extra_bars: int) -> int:
        return self.bottom - 2 * extra_bars

    def max_note(self, extra_bars: int) -> int:
        return self.bottom + STAFF_SPAN + 2 * extra_bars

    def note_position(self, note: int) -> Position:
        return "first"

    def staff_for(self, note: int) -> Staff:
        return self.staff

    def notes(self, extra_bars: int) -> List[int]:
        """Every addressable pitch, lowest first."""
        return list(range(self.min_note(extra_bars), self.max_note(extra_bars) + 1))


@dataclass(frozen=True)
class GrandStaffClef:
    """``upper`` over ``lower``. Notes below ``crossover`` go on the lower staff."""

    id: str
    upper: SingleStaffClef
    lower: SingleStaffClef
    crossover: int = MIDDLE_C

    @property
    def first_staff(self) -> Staff:
        return self.upper.staff

    @property
    def second_staff(self) -> Optional[Staff]:
        return self.lower.staff

    def encode_note(self, note: int) -> str:
        return f"{self.staff_for(note)}-{note}"

    def min_note(self, extra_bars: int) -> int:
        return self.lower.min_note(extra_bars)

    def max_note(self, extra_bars: int) -> int:
        return self.upper.max_note(extra_bars)

    def note_position(self, note: int) -> Position:
        return "second" if note < self.crossover else "first"

    def staff_for(self, note: int) -> Staff:
        return self.lower.staff if self.note_position(note) == "second" else self.upper.staff

    def notes(self, extra_bars: int) -> List[int]:
        return list(range(self.min_note(extra_bars), self.max_note(extra_bars) + 1))


TREBLE = SingleStaffClef(id="treble", staff="treble", bottom=TREBLE_BOTTOM)
BASS = SingleStaffClef(id="bass", staff="bass", bottom=BASS_BOTTOM)
BOTH = GrandStaffClef(id="both", upper=TREBLE, lower=BASS)

CLEFS: Dict[str, Clef] = {c.id: c for c in (TREBLE, BASS, BOTH)}


def get_clef(clef_id: str) -> Clef:
    try:
        return CLEFS[clef_id]
    except KeyError:
        raise KeyError(f"Unknown clef id: {clef_id}") from None
