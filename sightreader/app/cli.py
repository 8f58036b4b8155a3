from __future__ import annotations

"""CLI for sightreader: inspect the note space and score attempt logs."""

import argparse
from typing import Any, Dict

import pandas as pd

from ..config.config import Settings, load_settings, validate_config
from ..policy.scoring import POLICY_IDS
from ..stats.io import export_report, load_attempts, replay_attempts
from ..theory.clef import CLEFS, get_clef
from ..theory.note_utils import note_name, parse_note_name
from .session import PracticeSession


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides: Dict[str, Any] = {}
    if getattr(args, "clef", None) is not None:
        overrides["clef"] = args.clef
    if getattr(args, "extra_bars", None) is not None:
        overrides["extra_bars"] = args.extra_bars
    if getattr(args, "optimize_for", None) is not None:
        overrides["optimize_for"] = args.optimize_for
    if not overrides:
        return settings
    return validate_config({**settings.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="sightreader")
    sub = p.add_subparsers(dest="cmd", required=True)

    np_ = sub.add_parser("notes", help="List every practice note for a clef")
    np_.add_argument("--config", default=None)
    np_.add_argument("--clef", choices=sorted(CLEFS), default=None)
    np_.add_argument("--extra-bars", dest="extra_bars", type=int, default=None)

    sp = sub.add_parser("show-settings")
    sp.add_argument("--config", default=None)

    rp = sub.add_parser("report", help="Replay an attempt log and print per-note difficulty")
    rp.add_argument("--attempts", required=True, help="NDJSON file of {note, failed, duration}")
    rp.add_argument("--config", default=None)
    rp.add_argument("--clef", choices=sorted(CLEFS), default=None)
    rp.add_argument("--extra-bars", dest="extra_bars", type=int, default=None)
    rp.add_argument("--optimize-for", dest="optimize_for", choices=POLICY_IDS, default=None)
    rp.add_argument("--note", action="append", default=None, help="Only show this note, e.g. E4 (repeatable)")
    rp.add_argument("--out", default=None, help="Also write the report as NDJSON")
    rp.add_argument("--explain", action="store_true")

    args = p.parse_args(argv)

    if getattr(args, "explain", False):
        from .explain import enable as explain_enable
        explain_enable(True)

    settings = _apply_overrides(load_settings(args.config), args)

    if args.cmd == "show-settings":
        for name, value in settings.model_dump().items():
            print(f"{name}: {value}")
        return 0

    if args.cmd == "notes":
        clef = get_clef(settings.clef)
        for note in clef.notes(settings.extra_bars):
            print(f"{note:>3} {note_name(note):<3} {clef.encode_note(note):<10} {clef.staff_for(note)}")
        return 0

    if args.cmd == "report":
        try:
            df = load_attempts(args.attempts)
        except (OSError, ValueError) as e:
            print(f"ERROR: Could not read attempts from {args.attempts}: {e}")
            return 2
        session = PracticeSession(settings)
        n = replay_attempts(df, session)
        report = session.report()
        if args.note:
            try:
                wanted = [parse_note_name(name) for name in args.note]
            except ValueError as e:
                print(f"ERROR: {e}")
                return 2
            report = report[report["note"].isin(wanted)].reset_index(drop=True)
        print(f"Replayed {n} attempts ({session.policy.id}, clef {settings.clef}).")
        with pd.option_context("display.max_rows", None, "display.width", 120):
            print(report.to_string(index=False))
        if args.out:
            export_report(report, args.out)
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
