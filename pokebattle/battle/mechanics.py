from __future__ import annotations
import math
import random
from typing import Dict, Optional, Tuple

from .models import Creature, Move

BASE_ACCURACY = 90
TYPE_ADVANTAGE_MULTIPLIER = 1.5
TYPE_DISADVANTAGE_MULTIPLIER = 0.5
NEUTRAL_MULTIPLIER = 1.0
DAMAGE_ROLL = (0.85, 1.0)

ACCURACY_MOVE = "move"
ACCURACY_FIXED = "fixed"
ACCURACY_MODES = (ACCURACY_MOVE, ACCURACY_FIXED)

SUPER_EFFECTIVE = "super_effective"
NOT_VERY_EFFECTIVE = "not_very_effective"

# Exact (attack, defend) tag pairs; tags are case-sensitive.
_ADVANTAGES = {
    ("Water", "Fire"),
    ("Fire", "Grass"),
    ("Grass", "Water"),
}
_DISADVANTAGES = {
    ("Fire", "Water"),
    ("Water", "Grass"),
    ("Grass", "Fire"),
}
# Attack element -> substring the defender's tag only has to contain ("Fire/Flying").
_CONTAINS_ADVANTAGES: Dict[str, str] = {
    "Electric": "Flying",
}

def _has_advantage(attack: str, defend: str) -> bool:
    if (attack, defend) in _ADVANTAGES:
        return True
    needle = _CONTAINS_ADVANTAGES.get(attack)
    return needle is not None and needle in defend

def type_effectiveness(attack_element: str, defend_element: str) -> float:
    if _has_advantage(attack_element, defend_element):
        return TYPE_ADVANTAGE_MULTIPLIER
    if (attack_element, defend_element) in _DISADVANTAGES:
        return TYPE_DISADVANTAGE_MULTIPLIER
    return NEUTRAL_MULTIPLIER

def effectiveness_tag(multiplier: float) -> Optional[str]:
    if multiplier > NEUTRAL_MULTIPLIER:
        return SUPER_EFFECTIVE
    if multiplier < NEUTRAL_MULTIPLIER:
        return NOT_VERY_EFFECTIVE
    return None

def accuracy_check(move: Move, rng: random.Random, mode: str = ACCURACY_MOVE) -> bool:
    """Draw once from [0, 100) and hit when strictly below the threshold.

    ``mode`` picks the threshold: the move's own accuracy, or the flat
    ``BASE_ACCURACY`` shared by every move.
    """
    if mode == ACCURACY_FIXED:
        return rng.random() * 100 < BASE_ACCURACY
    if mode == ACCURACY_MOVE:
        return move.does_hit(rng)
    raise ValueError(f"Unknown accuracy mode: {mode!r}")

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def calculate_damage(move: Move, defender: Creature, rng: random.Random) -> Tuple[int, dict]:
    mult = type_effectiveness(move.element, defender.element)
    roll = rng.uniform(*DAMAGE_ROLL)
    dmg = _round_half_up(move.power * mult * roll)
    return max(0, dmg), {"type": mult, "roll": roll}

__all__ = [
    "type_effectiveness", "effectiveness_tag", "accuracy_check", "calculate_damage",
    "BASE_ACCURACY", "ACCURACY_MOVE", "ACCURACY_FIXED", "ACCURACY_MODES",
    "SUPER_EFFECTIVE", "NOT_VERY_EFFECTIVE",
]
