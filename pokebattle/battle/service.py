"""Battle service: builds engines from settings and runs batches of matches.

Each simulated match gets its own ``random.Random(seed)`` and its own freshly
built rosters, so results are reproducible per seed and independent of one
another.
"""
from __future__ import annotations
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from pokebattle.core.logging import logger
from pokebattle.system.settings import Settings
from .core import BattleEngine
from .ai import MovePolicy
from .events import EncounterResult, MatchResult
from .models import Creature
from .roster import Roster

RosterPair = Tuple[Roster, Roster]

@dataclass
class SimulationSummary:
    matches: int = 0
    encounters: int = 0
    wins: Dict[str, int] = field(default_factory=dict)
    results: List[MatchResult] = field(default_factory=list)

    def win_rate(self, name: str) -> float:
        if not self.matches:
            return 0.0
        return self.wins.get(name, 0) / self.matches

class BattleService:
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings.load()
            self._settings.apply()
        return self._settings

    def engine(self, rng: Optional[random.Random] = None, *, move_policy: Optional[MovePolicy] = None) -> BattleEngine:
        data = self.settings.data
        if rng is None:
            rng = random.Random(data.seed)
        return BattleEngine(
            rng,
            move_policy=move_policy,
            accuracy_mode=data.accuracy_mode,
            max_rounds=data.max_rounds,
            message_cb=print if data.debug else None,
        )

    def encounter(self, a: Creature, b: Creature) -> EncounterResult:
        return self.engine().resolve_encounter(a, b)

    def match(self, a: Roster, b: Roster) -> MatchResult:
        return self.engine().resolve_match(a, b)

    def simulate(self, build: Callable[[], RosterPair], seeds: Iterable[int], *,
                 move_policy: Optional[MovePolicy] = None) -> SimulationSummary:
        """Run one match per seed; ``build`` must return new rosters every call."""
        summary = SimulationSummary()
        wins: Counter[str] = Counter()
        for seed in seeds:
            roster_a, roster_b = build()
            result = self.engine(random.Random(seed), move_policy=move_policy).resolve_match(roster_a, roster_b)
            wins[result.winner.name] += 1
            summary.matches += 1
            summary.encounters += len(result.encounters)
            summary.results.append(result)
        summary.wins = dict(wins)
        logger.info("SimulationDone", matches=summary.matches, wins=summary.wins)
        return summary

battle_service = BattleService()
