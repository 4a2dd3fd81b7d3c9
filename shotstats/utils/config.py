"""
Engine configuration for shotstats.

Settings are plain defaults, optionally overridden by a JSON file and by
SHOTSTATS_* environment variables. The host process builds one Config at
startup with Config.load() and passes values into the engine explicitly.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from shotstats.utils.constants import (
    DEFAULT_SHOTS_PER_SERIES,
    DEFAULT_TREND_WINDOW,
    REPORT_DECIMALS,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "SHOTSTATS_"


def setup_logging(verbose: bool = False):
    """Configure logging for the host application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


class Config:
    """Engine settings with optional JSON file and environment overrides."""

    _defaults = {
        "trend_window": DEFAULT_TREND_WINDOW,          # sessions per trend window
        "default_shots_per_series": DEFAULT_SHOTS_PER_SERIES,
        "report_decimals": REPORT_DECIMALS,            # places for avg/trend/percent
    }

    def __init__(self, settings: Optional[dict] = None):
        self._settings = {**self._defaults, **(settings or {})}
        self._validate()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Build a Config from defaults, an optional JSON file and env vars.

        A missing or malformed file is logged and ignored; invalid values
        raise ValueError.
        """
        saved = {}
        if path is not None:
            path = Path(path)
            if path.exists():
                try:
                    with open(path) as f:
                        saved = json.load(f)
                except (json.JSONDecodeError, IOError) as e:
                    logger.warning(f"Ignoring config file {path}: {e}")
                    saved = {}
                if not isinstance(saved, dict):
                    logger.warning(f"Ignoring config file {path}: not a JSON object")
                    saved = {}
            else:
                logger.warning(f"Config file {path} not found, using defaults")

        # Merge: defaults first, then file, then environment
        settings = {**cls._defaults, **saved}
        settings.update(cls._from_env())
        return cls(settings)

    @classmethod
    def _from_env(cls) -> dict:
        overrides = {}
        for key in cls._defaults:
            raw = os.environ.get(ENV_PREFIX + key.upper())
            if raw is None or raw == "":
                continue
            try:
                overrides[key] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX + key.upper()} must be an integer, got {raw!r}"
                )
        return overrides

    def _validate(self):
        for key in self._defaults:
            value = self._settings[key]
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{key} must be an integer, got {value!r}")
        if self._settings["trend_window"] <= 0:
            raise ValueError("trend_window must be positive")
        if self._settings["default_shots_per_series"] <= 0:
            raise ValueError("default_shots_per_series must be positive")
        if self._settings["report_decimals"] < 0:
            raise ValueError("report_decimals must not be negative")

    def get(self, key: str, default=None):
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value):
        """Set a setting value, rejecting invalid ones."""
        previous = self._settings.get(key)
        self._settings[key] = value
        try:
            self._validate()
        except ValueError:
            self._settings[key] = previous
            raise

    @property
    def trend_window(self) -> int:
        return self._settings["trend_window"]

    @property
    def default_shots_per_series(self) -> int:
        return self._settings["default_shots_per_series"]

    @property
    def report_decimals(self) -> int:
        return self._settings["report_decimals"]
