"""Roster files: moves, creatures and trainers described in JSON.

Documents are checked against ``schema/roster.schema.json`` before any object is
built. Every call builds fresh ``Creature`` objects, so battles run on loaded
rosters never leak health changes into the next load.
"""
from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema

from pokebattle.core.paths import ROSTER_SCHEMA, DEMO_ROSTERS
from pokebattle.core.errors import DataLoadError, ValidationError
from pokebattle.core.logging import logger
from pokebattle.battle.models import Move, Creature
from pokebattle.battle.roster import Roster

@lru_cache(maxsize=None)
def _schema() -> Dict[str, Any]:
    return json.loads(ROSTER_SCHEMA.read_text(encoding="utf-8"))

def _validate(data: Any, source: str):
    try:
        jsonschema.validate(data, _schema())
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise DataLoadError(source, f"schema: {where}: {e.message}") from e

def parse_rosters(data: Dict[str, Any], source: str = "<memory>") -> Dict[str, Roster]:
    _validate(data, source)
    try:
        moves = {key: Move(**spec) for key, spec in data["moves"].items()}

        def build(key: str) -> Creature:
            spec = data["creatures"].get(key)
            if spec is None:
                raise DataLoadError(source, f"unknown creature '{key}'")
            try:
                move_set = [moves[m] for m in spec["moves"]]
            except KeyError as e:
                raise DataLoadError(source, f"creature '{key}' references unknown move {e.args[0]!r}") from None
            c = Creature(spec["name"], spec["element"], spec["health"], move_set)
            if spec.get("evolved"):
                c.evolve()
            return c

        rosters: Dict[str, Roster] = {}
        for t in data["trainers"]:
            if t["name"] in rosters:
                raise DataLoadError(source, f"duplicate trainer '{t['name']}'")
            rosters[t["name"]] = Roster(t["name"], [build(k) for k in t["team"]])
    except ValidationError as e:
        raise DataLoadError(source, str(e)) from e
    return rosters

def load_roster_file(path: Path) -> Dict[str, Roster]:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise DataLoadError(str(path), str(e)) from e
    rosters = parse_rosters(raw, str(path))
    logger.debug("RosterFileLoaded", path=str(path), trainers=len(rosters))
    return rosters

def load_demo() -> Dict[str, Roster]:
    return load_roster_file(DEMO_ROSTERS)

__all__ = ["parse_rosters", "load_roster_file", "load_demo"]
