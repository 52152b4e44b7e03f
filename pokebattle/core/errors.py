"""
Error classes for the battle engine and its collaborators.
"""
from __future__ import annotations

class PokeBattleError(Exception):
    pass

class ValidationError(PokeBattleError):
    """Malformed construction input (moves, creatures, rosters)."""

class InvalidEncounterError(PokeBattleError):
    """An encounter was requested with a missing or fainted combatant."""

class InvalidDamageError(PokeBattleError):
    """Negative damage reached a creature; always a programming error."""

class EncounterStalledError(PokeBattleError):
    def __init__(self, first: str, second: str, rounds: int):
        super().__init__(f"Encounter {first} vs {second} undecided after {rounds} rounds")
        self.first = first
        self.second = second
        self.rounds = rounds

class NoAvailableCombatantsError(PokeBattleError):
    def __init__(self, roster: str, detail: str = "no creature able to battle"):
        super().__init__(f"Roster '{roster}': {detail}")
        self.roster = roster
        self.detail = detail

class DataLoadError(PokeBattleError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = path
        self.detail = detail
