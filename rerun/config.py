# rerun/config.py
#
# Optional JSON config: <home>/config.json
#
#   {
#     "save_history":   true,
#     "history_length": 1000,
#     "prompt":         "> {command} ",
#     "log_level":      "WARNING"
#   }
#
# <home> is $INTERACTIVE_HOME, else ~/.interactive. A broken file never stops
# the shell: each bad value is logged and its default kept.

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

HOME_ENV = "INTERACTIVE_HOME"
HOME_DIRNAME = ".interactive"
CONFIG_FILENAME = "config.json"

DEFAULT_PROMPT = "> {command} "
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ShellConfig:
    home: Optional[Path] = None
    save_history: bool = True
    history_length: int = 1000
    prompt: str = DEFAULT_PROMPT
    log_level: str = "WARNING"


def default_home() -> Optional[Path]:
    env = os.environ.get(HOME_ENV, "").strip()
    if env:
        return Path(env).expanduser()
    try:
        return Path.home() / HOME_DIRNAME
    except RuntimeError:
        # no resolvable user home: run without history
        return None


def _read_raw(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("ignoring config %s: %s", path, e)
        return {}
    if not isinstance(raw, dict):
        logger.warning("ignoring config %s: expected a JSON object", path)
        return {}
    return raw


def load_config(home: Optional[Path] = None) -> ShellConfig:
    cfg = ShellConfig(home=home)
    if home is None:
        return cfg

    path = home / CONFIG_FILENAME
    raw = _read_raw(path)

    if "save_history" in raw:
        if isinstance(raw["save_history"], bool):
            cfg = replace(cfg, save_history=raw["save_history"])
        else:
            logger.warning("config %s: save_history must be true/false", path)

    if "history_length" in raw:
        n = raw["history_length"]
        # bool is an int subclass; floats (incl. Infinity) are rejected too
        if isinstance(n, int) and not isinstance(n, bool):
            cfg = replace(cfg, history_length=max(n, 0))
        else:
            logger.warning("config %s: history_length must be an integer", path)

    if "prompt" in raw:
        prompt = raw["prompt"]
        try:
            prompt.format(command="")
        except (AttributeError, KeyError, IndexError, ValueError):
            logger.warning("config %s: prompt must be a string using only {command}", path)
        else:
            cfg = replace(cfg, prompt=prompt)

    if "log_level" in raw:
        level = str(raw["log_level"]).strip().upper()
        if level in LOG_LEVELS:
            cfg = replace(cfg, log_level=level)
        else:
            logger.warning("config %s: unknown log_level %r", path, raw["log_level"])

    return cfg
