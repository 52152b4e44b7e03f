from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional
from pokebattle.core.logging import logger
from pokebattle.battle.mechanics import ACCURACY_MODES, ACCURACY_MOVE

SETTINGS_FILENAME = ".pokebattle_settings.json"
DEFAULT_MAX_ROUNDS = 500

@dataclass
class SettingsData:
    log_level: str = "INFO"              # DEBUG / INFO / WARN / ERROR
    debug: bool = False                  # Print battle commentary
    accuracy_mode: str = ACCURACY_MOVE   # move: per-move accuracy, fixed: flat 90%
    seed: Optional[int] = None           # Seed for the engine's random stream
    max_rounds: int = DEFAULT_MAX_ROUNDS # Stall guard for simulated encounters

    def normalize(self):
        if self.log_level not in {"DEBUG","INFO","WARN","ERROR"}:
            self.log_level = "INFO"
        if self.accuracy_mode not in ACCURACY_MODES:
            self.accuracy_mode = ACCURACY_MOVE
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            self.seed = None
        if isinstance(self.max_rounds, bool) or not isinstance(self.max_rounds, int) or self.max_rounds < 1:
            self.max_rounds = DEFAULT_MAX_ROUNDS
        self.debug = bool(self.debug)

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = Path(path) if path is not None else cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(raw, dict):
                    raise ValueError("settings file must hold a JSON object")
                # Unknown keys are ignored, missing ones fall back to defaults
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def apply(self):
        logger.set_level(self.data.log_level)
