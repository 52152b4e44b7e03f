"""Battle resolution: single encounters and trainer-vs-trainer matches.

An encounter alternates actions between two creatures until one faints; the
creature passed first always acts first in a round. A match chains encounters
between the first living creature of each roster until one roster runs out.

All randomness comes from the engine's own ``random.Random`` so a seeded engine
replays a battle exactly.
"""
from __future__ import annotations
import random
from typing import Callable, List, Optional

from .models import Creature
from .roster import Roster, Available
from .events import ActionRecord, EncounterResult, MatchResult, MatchState
from .mechanics import (
    ACCURACY_MODES, ACCURACY_MOVE, accuracy_check, calculate_damage, effectiveness_tag,
)
from .ai import MovePolicy, random_move
from .render import (
    describe, describe_start, describe_result, describe_match_start, describe_match,
)
from ..core.errors import (
    EncounterStalledError, InvalidEncounterError, NoAvailableCombatantsError,
)
from ..core.logging import logger


class BattleEngine:
    def __init__(self, rng: Optional[random.Random] = None, *,
                 move_policy: Optional[MovePolicy] = None,
                 accuracy_mode: str = ACCURACY_MOVE,
                 max_rounds: Optional[int] = None,
                 message_cb: Optional[Callable[[str], None]] = None):
        if accuracy_mode not in ACCURACY_MODES:
            raise ValueError(f"accuracy_mode must be one of {ACCURACY_MODES}, got {accuracy_mode!r}")
        self.rng = rng or random.Random()
        self.move_policy = move_policy or random_move
        self.accuracy_mode = accuracy_mode
        self.max_rounds = max_rounds
        self.message_cb = message_cb
        self.state: Optional[MatchState] = None
        self.state_log: List[MatchState] = []

    def _msg(self, text: str):
        if self.message_cb: self.message_cb(text)
        else: logger.debug(text)

    def _set_state(self, state: MatchState):
        self.state = state
        self.state_log.append(state)

    # ------------------------------------------------------------------
    # Single action
    # ------------------------------------------------------------------
    def execute_action(self, attacker: Creature, defender: Creature) -> ActionRecord:
        move = self.move_policy(attacker, defender, self.rng)
        if not accuracy_check(move, self.rng, self.accuracy_mode):
            record = ActionRecord(
                actor=attacker.name, target=defender.name, move=move.name, hit=False,
                target_health=defender.current_health,
            )
        else:
            dmg, meta = calculate_damage(move, defender, self.rng)
            defender.take_damage(dmg)
            record = ActionRecord(
                actor=attacker.name, target=defender.name, move=move.name, hit=True,
                damage=dmg, multiplier=meta["type"], effectiveness=effectiveness_tag(meta["type"]),
                target_health=defender.current_health, fainted=not defender.is_alive(),
            )
        for line in describe(record):
            self._msg(line)
        return record

    # ------------------------------------------------------------------
    # Encounter
    # ------------------------------------------------------------------
    def _validate_pair(self, a: Optional[Creature], b: Optional[Creature]):
        if a is None or b is None:
            raise InvalidEncounterError("Creatures cannot be None")
        if a is b:
            raise InvalidEncounterError(f"{a.name} cannot battle itself")
        if not a.is_alive() or not b.is_alive():
            raise InvalidEncounterError("Both creatures must be alive to battle")

    def resolve_encounter(self, a: Creature, b: Creature) -> EncounterResult:
        self._validate_pair(a, b)
        logger.info("EncounterStart", first=a.name, second=b.name)
        self._msg(describe_start(a, b))
        actions: List[ActionRecord] = []
        rounds = 0
        while a.is_alive() and b.is_alive():
            if self.max_rounds is not None and rounds >= self.max_rounds:
                raise EncounterStalledError(a.name, b.name, rounds)
            rounds += 1
            actions.append(self.execute_action(a, b))
            if b.is_alive():
                actions.append(self.execute_action(b, a))
        winner, loser = (a, b) if a.is_alive() else (b, a)
        result = EncounterResult(winner=winner, loser=loser, rounds=rounds, actions=tuple(actions))
        self._msg(describe_result(result))
        logger.info("EncounterEnd", winner=winner.name, loser=loser.name, rounds=rounds)
        return result

    # ------------------------------------------------------------------
    # Match
    # ------------------------------------------------------------------
    def resolve_match(self, roster_a: Roster, roster_b: Roster) -> MatchResult:
        for r in (roster_a, roster_b):
            if r is None:
                raise NoAvailableCombatantsError("<missing>", "roster cannot be None")
        if roster_a is roster_b:
            raise InvalidEncounterError(f"Roster '{roster_a.name}' cannot battle itself")
        for r in (roster_a, roster_b):
            if not r.has_available():
                raise NoAvailableCombatantsError(r.name)

        logger.info("MatchStart", first=roster_a.name, second=roster_b.name)
        self._msg(describe_match_start(roster_a, roster_b))
        self.state_log = []
        encounters: List[EncounterResult] = []
        while True:
            self._set_state(MatchState.AWAITING_PAIR)
            match (roster_a.first_available(), roster_b.first_available()):
                case (Available(creature=first), Available(creature=second)):
                    self._set_state(MatchState.IN_ENCOUNTER)
                    encounters.append(self.resolve_encounter(first, second))
                case _:
                    break

        winner, loser = (roster_a, roster_b) if roster_a.has_available() else (roster_b, roster_a)
        winner.record_win()
        loser.record_loss()
        self._set_state(MatchState.MATCH_COMPLETE)
        result = MatchResult(winner=winner, loser=loser, encounters=tuple(encounters))
        self._msg(describe_match(result))
        logger.info("MatchEnd", winner=winner.name, loser=loser.name, encounters=len(encounters))
        return result


__all__ = ["BattleEngine"]
