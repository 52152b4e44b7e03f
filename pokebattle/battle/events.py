"""Structured records produced by the battle engine.

Records carry names rather than object references so a trace from one run
compares equal to the trace of a replay with the same seed.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Creature
    from .roster import Roster


class MatchState(str, Enum):
    AWAITING_PAIR = "awaiting_pair"
    IN_ENCOUNTER = "in_encounter"
    MATCH_COMPLETE = "match_complete"


@dataclass(frozen=True)
class ActionRecord:
    actor: str
    target: str
    move: str
    hit: bool
    damage: int = 0
    multiplier: float = 1.0
    effectiveness: Optional[str] = None  # super_effective | not_very_effective | None
    target_health: int = 0
    fainted: bool = False


@dataclass(frozen=True)
class EncounterResult:
    winner: "Creature"
    loser: "Creature"
    rounds: int
    actions: Tuple[ActionRecord, ...]

    @property
    def winner_name(self) -> str:
        return self.winner.name

    @property
    def loser_name(self) -> str:
        return self.loser.name


@dataclass(frozen=True)
class MatchResult:
    winner: "Roster"
    loser: "Roster"
    encounters: Tuple[EncounterResult, ...]

    @property
    def winner_name(self) -> str:
        return self.winner.name


__all__ = ["MatchState", "ActionRecord", "EncounterResult", "MatchResult"]
