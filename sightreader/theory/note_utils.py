# sightreader/theory/note_utils.py
from __future__ import annotations
from typing import Dict

# Staff pitches are diatonic steps counted from C0, so C4 (middle C) -> 28.
STEP_NAMES = ["C", "D", "E", "F", "G", "A", "B"]
NAME_TO_STEP: Dict[str, int] = {name: i for i, name in enumerate(STEP_NAMES)}

MIDDLE_C = 28


def note_name(pitch: int) -> str:
    """Diatonic step -> scientific pitch name, e.g. 30 -> "E4"."""
    octave, step = divmod(int(pitch), 7)
    return f"{STEP_NAMES[step]}{octave}"


def parse_note_name(name: str) -> int:
    """Parse a name like 'E4' or 'g2' into a diatonic step."""
    if not name or len(name) < 2:
        raise ValueError(f"Invalid note name: {name}")
    letter = name[0].upper()
    if letter not in NAME_TO_STEP:
        raise ValueError(f"Unsupported note letter in: {name}")
    try:
        octave = int(name[1:])
    except ValueError as e:
        raise ValueError(f"Invalid octave in note name: {name}") from e
    return 7 * octave + NAME_TO_STEP[letter]
