from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from pbcl.core.logging import logger

SETTINGS_FILENAME = ".pbcl_settings.json"
SETTINGS_ENV = "PBCL_SETTINGS"

@dataclass
class SettingsData:
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR
    speed_tie_winner: str = "A"    # side acting first when speeds are equal
    enforce_move_uses: bool = True # battles spend move uses
    debug: bool = False            # print the full battle log in the tutorial

    def normalize(self):
        if self.log_level not in {"DEBUG","INFO","WARN","ERROR"}:
            self.log_level = "INFO"
        if self.speed_tie_winner not in {"A","B"}:
            self.speed_tie_winner = "A"
        self.enforce_move_uses = bool(self.enforce_move_uses)
        self.debug = bool(self.debug)

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        override = os.environ.get(SETTINGS_ENV)
        if override:
            return Path(override)
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
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
        """Push settings that affect global state (log level)."""
        self.data.normalize()
        logger.set_level(self.data.log_level)  # type: ignore[arg-type]

    def battle_options(self) -> dict:
        return {
            "speed_tie_winner": self.data.speed_tie_winner,
            "enforce_uses": self.data.enforce_move_uses,
        }

    def update(self, **changes):
        for k, v in changes.items():
            if not hasattr(self.data, k):
                raise AttributeError(f"Unknown setting: {k}")
            setattr(self.data, k, v)
        self.apply()
        self._notify()

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)
