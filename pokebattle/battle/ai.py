from __future__ import annotations
import random
from typing import Callable

from .models import Creature, Move
from .mechanics import type_effectiveness

MovePolicy = Callable[[Creature, Creature, random.Random], Move]

def random_move(user: Creature, foe: Creature, rng: random.Random) -> Move:
    return user.moves[rng.randrange(len(user.moves))]

def strongest_move(user: Creature, foe: Creature, rng: random.Random) -> Move:
    """Highest power x effectiveness against ``foe``; ties keep move-set order."""
    best = None
    best_score = -1.0
    for m in user.moves:
        score = m.power * type_effectiveness(m.element, foe.element)
        if score > best_score:
            best_score = score
            best = m
    return best or user.moves[0]

__all__ = ["MovePolicy", "random_move", "strongest_move"]
