# config_manager.py - JSON config manager

import json
import logging
import os
from typing import Any, Dict, Optional

from typing_extensions import TypedDict

from ..core.model import BuildConfig
from ..core.tokenizer import SplitStrategy

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "markov_textgen.json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigData(TypedDict):
    strategy: str
    width: int
    length: int
    model_path: str
    output_path: str
    seed: Optional[int]
    log_level: str


DEFAULTS: ConfigData = {
    "strategy": SplitStrategy.SPACES.value,
    "width": 3,  # chunk size for the "characters" strategy
    "length": 100,  # tokens appended after the start token
    "model_path": os.path.join("data", "markov_model.bin"),
    "output_path": os.path.join("data", "generated.txt"),
    "seed": None,
    "log_level": "INFO",
}


def parse_log_level(val: Any) -> str:
    level = str(val).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level {val!r} (choose from {', '.join(LOG_LEVELS)})")
    return level


class Config:
    def __init__(self, path: str = DEFAULT_CONFIG_PATH):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: top level is not an object", self.path)
            return
        for k, v in loaded.items():
            if k not in self.data:
                logger.warning("unknown config key %r in %s", k, self.path)
                continue
            try:
                self.data[k] = self._coerce(k, v)
            except (TypeError, ValueError) as e:
                logger.warning("bad value for %r in %s: %s", k, self.path, e)

    def save(self):
        parent = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any) -> None:
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        self.data[key] = self._coerce(key, val)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.data)

    def build_config(self) -> BuildConfig:
        strategy = SplitStrategy.parse(self.data["strategy"])
        width = self.data["width"] if strategy is SplitStrategy.CHARACTERS else None
        return BuildConfig(strategy=strategy, width=width)

    @staticmethod
    def _coerce(key: str, val: Any) -> Any:
        default = DEFAULTS[key]
        if default is None:
            # nullable int (seed)
            if val is None or (isinstance(val, str) and val.lower() in ("", "none", "null")):
                return None
            return int(val)
        if key == "strategy":
            return SplitStrategy.parse(val).value
        if key == "log_level":
            return parse_log_level(val)
        if isinstance(val, type(default)):
            return val
        return type(default)(val)
