# apps/cli/solve.py
"""
Mastermind advisor: enter the guesses you played and the pins you got back,
get the remaining candidates and the next minimax guess.

Examples:
    python -m apps.cli.solve --step 1122:1,0 --step 1344:0,2
    python -m apps.cli.solve --history game.json --interactive
    python -m apps.cli.solve --history game.json --show eliminated

Interactive commands:
    <guess> <black,white>   add a step, e.g. "1122 1,0" (or "1122 10")
    undo | reset | list | eliminated | quit
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from mastermind.engine import ALL_CODES, format_code, parse_code, parse_feedback
from mastermind.harness.io import read_history, write_history
from mastermind.harness.session import Session

# Print the full candidate list only when it is this short
REMAINING_LIST_LIMIT = 20


def _parse_step_arg(text: str):
    """Parse "1122:1,0" or "1122 1,0" into (code, feedback); raises ValueError."""
    guess_txt, sep, fb_txt = text.partition(":")
    if not sep:
        guess_txt, _, fb_txt = text.strip().partition(" ")
    guess = parse_code(guess_txt)
    fb = parse_feedback(fb_txt)
    if guess is None:
        raise ValueError(f"Invalid code: {guess_txt.strip()!r} (expected 4 digits in 1-6)")
    if fb is None:
        raise ValueError(
            f"Invalid feedback: {fb_txt.strip()!r} (black plus white must be 4 or less)")
    return guess, fb


def _report(session: Session, out=None) -> None:
    remaining = session.remaining()
    for i, (g, fb) in enumerate(session.steps, start=1):
        print(f"  {i}. {format_code(g)}  black {fb.black}, white {fb.white}", file=out)

    print(f"Remaining solutions: {len(remaining)}", file=out)
    if not remaining:
        print("No code matches this history; check the feedback you entered.", file=out)
        return
    if 0 < len(remaining) <= REMAINING_LIST_LIMIT:
        print("Remaining list: " + ", ".join(format_code(c) for c in remaining), file=out)
    if len(remaining) == 1:
        print(f"Solved: {format_code(remaining[0])}", file=out)
    else:
        print(f"Recommended guess: {format_code(session.recommendation())}", file=out)


def _show_remaining(session: Session, out=None) -> None:
    for c in session.remaining():
        print(format_code(c), file=out)


def _show_eliminated(session: Session, out=None) -> None:
    elim = session.eliminated_at()
    out_count = sum(1 for v in elim.values() if v is not None)
    print(f"Total {len(ALL_CODES)} | Remaining {len(ALL_CODES) - out_count} "
          f"| Eliminated {out_count}", file=out)
    for c in ALL_CODES:
        step = elim[c]
        print(f"{format_code(c)}  {'In' if step is None else f'Out {step}'}", file=out)


def _interactive(session: Session, history_path: str | None) -> None:
    _report(session)
    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            print()
            break

        cmd = line.lower()
        if not cmd:
            continue
        if cmd in ("q", "quit", "exit"):
            break
        if cmd == "undo":
            if session.undo() is None:
                print("Nothing to undo.")
        elif cmd == "reset":
            session.reset()
        elif cmd == "list":
            _show_remaining(session)
            continue
        elif cmd == "eliminated":
            _show_eliminated(session)
            continue
        else:
            try:
                session.add(*_parse_step_arg(line))
            except ValueError as e:
                print(e)
                continue

        if history_path:
            try:
                write_history(session, history_path)
            except ValueError as e:
                print(f"warning: {e}")
        _report(session)


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="mastermind: next-guess advisor")
    ap.add_argument("--step", action="append", default=[],
                    help='observed step "GUESS:BLACK,WHITE", e.g. 1122:1,0 (repeatable)')
    ap.add_argument("--history", help="JSON session file to load and update")
    ap.add_argument("--show", choices=["summary", "remaining", "eliminated"],
                    default="summary", help="what to print")
    ap.add_argument("--interactive", action="store_true",
                    help="prompt for steps until 'quit'")
    args = ap.parse_args(argv)

    try:
        session = read_history(args.history) if args.history else Session()
        for text in args.step:
            session.add(*_parse_step_arg(text))
        if args.history and args.step:
            write_history(session, args.history)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.interactive:
        _interactive(session, args.history)
        return 0

    if args.show == "remaining":
        _show_remaining(session)
    elif args.show == "eliminated":
        _show_eliminated(session)
    else:
        _report(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
