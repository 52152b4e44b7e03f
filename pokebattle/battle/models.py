"""Moves and creatures: the data the battle engine consumes and mutates."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence
import random

from ..core.errors import ValidationError, InvalidDamageError

MIN_POWER = 0
MAX_POWER = 100
MIN_ACCURACY = 1
MAX_ACCURACY = 100
EVOLUTION_HEALTH_BOOST = 50


class MoveCategory(str, Enum):
    # Informational only; damage does not depend on it.
    PHYSICAL = "physical"
    SPECIAL = "special"


def _require_text(value, what: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{what} cannot be empty")


@dataclass(frozen=True)
class Move:
    name: str
    element: str
    power: int
    accuracy: int = 100
    category: MoveCategory = MoveCategory.PHYSICAL

    def __post_init__(self):
        _require_text(self.name, "Move name")
        _require_text(self.element, "Move element")
        if isinstance(self.power, bool) or not isinstance(self.power, int) or not MIN_POWER <= self.power <= MAX_POWER:
            raise ValidationError(f"Power must be between {MIN_POWER} and {MAX_POWER}")
        if isinstance(self.accuracy, bool) or not isinstance(self.accuracy, int) or not MIN_ACCURACY <= self.accuracy <= MAX_ACCURACY:
            raise ValidationError(f"Accuracy must be between {MIN_ACCURACY} and {MAX_ACCURACY}")
        try:
            category = MoveCategory(self.category)
        except ValueError:
            raise ValidationError(f"Unknown move category: {self.category!r}") from None
        object.__setattr__(self, "category", category)

    @property
    def is_special(self) -> bool:
        return self.category is MoveCategory.SPECIAL

    def does_hit(self, rng: random.Random) -> bool:
        return rng.random() * 100 < self.accuracy

    def __str__(self) -> str:
        return (f"{self.name} ({self.element}) - Power: {self.power}, "
                f"Accuracy: {self.accuracy}%, {self.category.value.title()}")


@dataclass(eq=False)
class Creature:
    """A combatant. Identity and move set are fixed; health is not.

    ``current_health`` stays within ``0..max_health``. A fainted creature keeps
    existing with zero health.
    """
    name: str
    element: str
    max_health: int
    moves: Sequence[Move]
    current_health: int = field(init=False)
    evolved: bool = field(default=False, init=False)

    def __post_init__(self):
        _require_text(self.name, "Creature name")
        _require_text(self.element, "Creature element")
        if isinstance(self.max_health, bool) or not isinstance(self.max_health, int):
            raise ValidationError("Health must be an integer")
        if self.max_health < 0:
            raise ValidationError("Health cannot be negative")
        # Own copy so callers can't reshape the move set afterwards
        self.moves = tuple(self.moves or ())
        if not self.moves:
            raise ValidationError("Creature must have at least one move")
        if not all(isinstance(m, Move) for m in self.moves):
            raise ValidationError("Creature moves must all be Move instances")
        self.current_health = self.max_health

    def is_alive(self) -> bool:
        return self.current_health > 0

    def take_damage(self, amount: int) -> int:
        """Subtract ``amount`` from current health, flooring at zero.

        Returns the health actually removed. Overkill is clamped, never an error.
        """
        if amount < 0:
            raise InvalidDamageError(f"Damage cannot be negative (got {amount} for {self.name})")
        old = self.current_health
        self.current_health = max(0, old - int(amount))
        return old - self.current_health

    def evolve(self) -> bool:
        if self.evolved:
            return False
        self.evolved = True
        self.max_health += EVOLUTION_HEALTH_BOOST
        self.current_health += EVOLUTION_HEALTH_BOOST
        return True

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "element": self.element,
            "hp": self.current_health,
            "max_hp": self.max_health,
            "evolved": self.evolved,
            "moves": [m.name for m in self.moves],
        }

    def __repr__(self) -> str:
        return f"Creature({self.name!r}, {self.element!r}, hp={self.current_health}/{self.max_health})"


__all__ = [
    "Move", "MoveCategory", "Creature",
    "MIN_POWER", "MAX_POWER", "MIN_ACCURACY", "MAX_ACCURACY", "EVOLUTION_HEALTH_BOOST",
]
