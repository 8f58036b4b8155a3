from __future__ import annotations

"""Settings loading and validation for sightreader.

Settings come from YAML, are merged over the packaged ``defaults.yml`` and
validated with Pydantic. Loading never fails: a missing or unreadable file,
a YAML error, or an invalid field prints a warning and falls back to the
default for whatever could not be used.
"""

from pathlib import Path
from typing import Any, Dict, Literal, Optional

import sys

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..app.explain import trace as xtrace

DEFAULTS_PATH = Path(__file__).with_name("defaults.yml")


class Settings(BaseModel):
    """Validated practice settings.

    - extra_bars: ledger lines allowed past each side of the staff
    - clef: staff configuration id
    - optimize_for: scoring policy id
    - bad_guess_time: seconds charged for a miss under the speed policy
    - take_stats_over: attempts kept per note
    - min_sample_size: attempts needed before a note is scored
    - bad_abundance / good_scarcity: note-selection hints, passed through
    """

    extra_bars: int = Field(1, ge=0)
    clef: Literal["treble", "bass", "both"] = "treble"
    optimize_for: Literal["accuracy", "speed"] = "speed"
    bad_guess_time: float = Field(10.0, gt=0)
    take_stats_over: int = Field(10, ge=0)
    min_sample_size: int = Field(3, ge=1)
    bad_abundance: float = Field(3.0, ge=0)
    good_scarcity: float = Field(3.0, ge=0)


def _warn(msg: str) -> None:
    print(f"WARNING: {msg}", file=sys.stderr)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        _warn(f"Settings file not found: {path}; using defaults.")
        return {}
    except (OSError, yaml.YAMLError) as e:
        _warn(f"Failed to read settings from {path} ({e}); using defaults.")
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        _warn(f"Settings in {path} are not a mapping; using defaults.")
        return {}
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load raw settings: package defaults overlaid with ``path`` if given."""
    cfg = _load_yaml(DEFAULTS_PATH)
    if path:
        cfg.update(_load_yaml(Path(path)))
    return cfg


def validate_config(cfg: Dict[str, Any]) -> Settings:
    """Build Settings, dropping fields that fail validation.

    Unknown keys (e.g. ``lang``) are ignored.
    """
    known = {k: v for k, v in cfg.items() if k in Settings.model_fields}
    try:
        return Settings(**known)
    except ValidationError as exc:
        bad = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
        for name in sorted(bad):
            _warn(f"Invalid setting {name}={known.get(name)!r}, using default.")
            known.pop(name, None)
    return Settings(**known)


def load_settings(path: Optional[str] = None) -> Settings:
    settings = validate_config(load_config(path))
    xtrace("settings_loaded", settings.model_dump())
    return settings
