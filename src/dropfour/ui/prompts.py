from __future__ import annotations
from typing import Optional

from dropfour.types import Move


def parse_move(raw: str, cols: int) -> Optional[Move]:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)


def ask_int(prompt: str, default: int, lo: int, hi: int) -> int:
    """Re-prompt until a value in [lo, hi] (or blank for the default) is entered."""
    while True:
        raw = input(f"{prompt} [{lo}-{hi}, default {default}]: ").strip()
        if not raw:
            return default
        if raw.isdigit() and lo <= int(raw) <= hi:
            return int(raw)
        print(f"Please enter a number between {lo} and {hi}.")


def ask_choice(prompt: str, choices: tuple[str, ...], default: str) -> str:
    while True:
        raw = input(f"{prompt} ({'/'.join(choices)}, default {default}): ").strip().lower()
        if not raw:
            return default
        if raw in choices:
            return raw
        print(f"Please choose one of: {', '.join(choices)}.")


def ask_yes_no(prompt: str, default: bool = True) -> bool:
    raw = input(f"{prompt} ({'Y/n' if default else 'y/N'}): ").strip().lower()
    if not raw:
        return default
    return raw in {"y", "yes"}
