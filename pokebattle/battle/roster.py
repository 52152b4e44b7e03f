"""Trainer rosters: an ordered team plus win/loss bookkeeping.

The engine only touches a roster through ``first_available``, ``has_available``,
``record_win`` and ``record_loss``.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from .models import Creature
from ..core.errors import ValidationError

MAX_TEAM_SIZE = 6


@dataclass(frozen=True)
class Available:
    creature: Creature


@dataclass(frozen=True)
class Absent:
    pass


Lookup = Union[Available, Absent]


class Roster:
    def __init__(self, name: str, members: Iterable[Creature] = ()):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Trainer name cannot be empty")
        team: List[Creature] = list(members)
        if len(team) > MAX_TEAM_SIZE:
            raise ValidationError(f"Team cannot exceed {MAX_TEAM_SIZE} creatures")
        for m in team:
            self._check_member(m)
        self.name = name
        self._members = team
        self.badges = 0
        self.wins = 0
        self.losses = 0

    @staticmethod
    def _check_member(member) -> None:
        if not isinstance(member, Creature):
            raise ValidationError(f"Roster members must be creatures, got {type(member).__name__}")

    @property
    def members(self) -> Tuple[Creature, ...]:
        return tuple(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def is_full(self) -> bool:
        return len(self._members) >= MAX_TEAM_SIZE

    def add_member(self, creature: Creature) -> bool:
        """Append ``creature``; returns False (team unchanged) when already full."""
        self._check_member(creature)
        if self.is_full():
            return False
        self._members.append(creature)
        return True

    def first_available(self) -> Lookup:
        for m in self._members:
            if m.is_alive():
                return Available(m)
        return Absent()

    def has_available(self) -> bool:
        return any(m.is_alive() for m in self._members)

    def record_win(self) -> None:
        self.wins += 1
        self.badges += 1

    def record_loss(self) -> None:
        self.losses += 1

    def __str__(self) -> str:
        return f"Trainer {self.name} (Badges: {self.badges}, Record: {self.wins}-{self.losses})"

    def __repr__(self) -> str:
        return f"Roster({self.name!r}, members={[m.name for m in self._members]})"


__all__ = ["Roster", "Available", "Absent", "Lookup", "MAX_TEAM_SIZE"]
