from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_CONFIG_PATH = DATA_DIR / "config.yaml"
DEFAULT_DICTIONARY_URL = "https://raw.githubusercontent.com/fserb/pt-br/master/palavras"


@dataclass(frozen=True)
class GameConfig:
    """Tunable game parameters. Difficulty grows with the level: one extra word
    and one extra attempt per level."""

    word_length: int = 5
    base_attempts: int = 6
    hint_base_cost: int = 5
    hint_cost_step: int = 5
    toast_ms: int = 2500
    shake_ms: int = 500
    dictionary_url: str = DEFAULT_DICTIONARY_URL
    dictionary_timeout: float = 10.0

    def num_words(self, level: int) -> int:
        return level + 1

    def max_challenges(self, level: int) -> int:
        return self.base_attempts + level


def load_config(path: Optional[Path] = None) -> GameConfig:
    """Load a GameConfig from YAML. Missing keys keep their defaults."""
    if path is None:
        env_path = os.environ.get("TERMO_CONFIG")
        path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a YAML mapping")

    known = {f.name: f for f in fields(GameConfig)}
    unknown = set(raw) - set(known)
    if unknown:
        raise ValueError(f"{path.name}: unknown keys {sorted(unknown)}")

    values = {}
    for key, value in raw.items():
        default = getattr(GameConfig, key)
        if isinstance(default, bool) or isinstance(value, bool):
            raise ValueError(f"{path.name}: invalid value for '{key}': {value!r}")
        if isinstance(default, int) and not isinstance(value, int):
            raise ValueError(f"{path.name}: '{key}' must be an integer")
        if isinstance(default, float) and not isinstance(value, (int, float)):
            raise ValueError(f"{path.name}: '{key}' must be a number")
        if isinstance(default, str) and not isinstance(value, str):
            raise ValueError(f"{path.name}: '{key}' must be a string")
        values[key] = float(value) if isinstance(default, float) else value

    config = GameConfig(**values)
    if config.word_length < 1:
        raise ValueError(f"{path.name}: 'word_length' must be positive")
    if config.base_attempts < 1:
        raise ValueError(f"{path.name}: 'base_attempts' must be positive")
    logger.debug("Loaded config from %s: %s", path, config)
    return config
