"""Numbered movetext for lines, e.g. ``1. e4 e5 2. Nf3 Nc6``."""

from __future__ import annotations

import re

RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})
_MOVE_NUMBER_RE = re.compile(r"^\d+\.(?:\.\.)?$")
_GLUED_NUMBER_RE = re.compile(r"^\d+\.(?:\.\.)?(?=\S)")


def movetext_from_names(names: list[str] | tuple[str, ...], first_ply: int = 0) -> str:
    """Build numbered movetext; *first_ply* is the half-move index of ``names[0]``."""
    parts: list[str] = []
    for offset, name in enumerate(names):
        ply = first_ply + offset
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        elif offset == 0:
            parts.append(f"{(ply // 2) + 1}...")
        parts.append(name)
    return " ".join(parts)


def names_from_movetext(text: str) -> list[str]:
    """Extract move names from movetext.

    Move numbers, ``{comments}``, ``;`` comments, ``(variations)``, NAGs and
    a trailing result token are dropped.
    """
    movetext = re.sub(r"\{[^}]*\}", " ", text)
    movetext = re.sub(r";[^\n\r]*", " ", movetext)
    previous = None
    while previous != movetext:
        previous = movetext
        movetext = re.sub(r"\([^()]*\)", " ", movetext)

    names: list[str] = []
    for raw in movetext.split():
        token = _GLUED_NUMBER_RE.sub("", raw)
        if not token or _MOVE_NUMBER_RE.match(raw):
            continue
        if token in RESULT_TOKENS or token.startswith("$"):
            continue
        names.append(token.rstrip("!?"))
    return names
