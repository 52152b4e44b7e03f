from __future__ import annotations
from typing import List

from .events import ActionRecord, EncounterResult, MatchResult
from .mechanics import SUPER_EFFECTIVE, NOT_VERY_EFFECTIVE
from ..core.types import format_element

_EFFECTIVENESS_TEXT = {
    SUPER_EFFECTIVE: "It's super effective!",
    NOT_VERY_EFFECTIVE: "It's not very effective...",
}

def describe(record: ActionRecord) -> List[str]:
    """Commentary lines for one action, in the order they happened."""
    lines = [f"{record.actor} uses {record.move}!"]
    if not record.hit:
        lines.append("But it missed!")
        return lines
    lines.append(f"{record.target} takes {record.damage} damage!")
    eff = _EFFECTIVENESS_TEXT.get(record.effectiveness or "")
    if eff:
        lines.append(eff)
    if record.fainted:
        lines.append(f"{record.target} fainted!")
    return lines

def describe_start(a, b) -> str:
    return (f"Battle starts between {a.name} [{format_element(a.element)}] "
            f"and {b.name} [{format_element(b.element)}]!")

def describe_result(result: EncounterResult) -> str:
    return f"{result.winner_name} wins the battle!"

def describe_match_start(a, b) -> str:
    return f"Trainer Battle: {a.name} VS {b.name}"

def describe_match(result: MatchResult) -> str:
    return f"{result.winner_name} wins the trainer battle!"

__all__ = ["describe", "describe_start", "describe_result", "describe_match_start", "describe_match"]
