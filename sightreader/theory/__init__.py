"""Staff theory layer: clefs and diatonic note names."""

from .clef import BASS, BOTH, CLEFS, TREBLE, Clef, get_clef  # noqa: F401
from .note_utils import note_name, parse_note_name  # noqa: F401
