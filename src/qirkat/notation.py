"""Parsing and formatting of move text such as ``c2-c3`` or ``a1-c1-c3``."""
from __future__ import annotations

import re
from typing import List

from .squares import parse_square
from .types import Move

_MOVE_PATTERN = re.compile(r"^[a-e][1-5](?:-[a-e][1-5])+$")


class MoveSyntaxError(ValueError):
    """Raised when move text cannot be parsed."""


def parse_move(raw: str) -> Move:
    """Parse dash-joined squares into a :class:`Move`.

    Accepted examples (case-insensitive, surrounding whitespace ignored):
    - ``"c2-c3"``          # slide
    - ``"a3-c1"``          # single jump
    - ``"b2-b4-d2-d4"``    # jump chain, listing every landing square

    Raises:
        MoveSyntaxError: if the text is malformed or does not describe a
            slide or a straight-line jump chain.
    """

    text = raw.strip().lower()
    if not text:
        raise MoveSyntaxError("Move text is empty")
    if not _MOVE_PATTERN.match(text):
        raise MoveSyntaxError(f"Could not parse move '{raw.strip()}'; use formats like 'c2-c3' or 'a1-c1-c3'")

    path: List[int] = []
    for name in text.split("-"):
        k = parse_square(name)
        if k is None:  # pragma: no cover - the pattern only admits board squares
            raise MoveSyntaxError(f"Invalid square '{name}'")
        path.append(k)
    try:
        return Move(tuple(path))
    except ValueError as exc:
        raise MoveSyntaxError(str(exc)) from exc


def format_move(move: Move) -> str:
    return str(move)
