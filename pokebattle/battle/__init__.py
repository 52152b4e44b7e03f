"""
Battle package.
- models.py (Move, Creature)
- mechanics.py (type effectiveness, accuracy, damage)
- ai.py (move selection policies)
- core.py (BattleEngine: encounters and matches)
- roster.py (trainer teams and win/loss records)
- service.py (settings-driven engines, batch simulation; import it directly)
"""
from .core import BattleEngine
from .models import Move, MoveCategory, Creature
from .roster import Roster
__all__ = ["BattleEngine", "Move", "MoveCategory", "Creature", "Roster"]
