from __future__ import annotations

"""Configuration loading and access helpers.

Loads the YAML files packaged with *syndication_toolkit* and merges them with
optional user overrides.  The override directory is taken from
``SYNDICATION_CONFIG_DIR`` when set, otherwise:

On Windows: ``%LOCALAPPDATA%\\SyndicationToolkit\\config\\*.yml``
On Unix: ``~/.syndication_toolkit/*.yml``

User files are read only; nothing is written to the user directory.
"""

import importlib.resources as pkg_resources
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

__all__ = ["ConfigManager"]


def _get_user_config_dir() -> Path:
    """Get the directory holding user configuration overrides."""
    override = os.environ.get("SYNDICATION_CONFIG_DIR")
    if override:
        return Path(override)
    if os.name == 'nt':  # Windows
        local_appdata = os.environ.get('LOCALAPPDATA')
        if local_appdata:
            return Path(local_appdata) / "SyndicationToolkit" / "config"
        return Path.home() / "AppData" / "Local" / "SyndicationToolkit" / "config"
    return Path.home() / ".syndication_toolkit"


class _Singleton(type):
    _instance: "ConfigManager" | None = None

    def __call__(cls, *args, **kwargs):  # type: ignore[no-self-use]
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


class ConfigManager(metaclass=_Singleton):
    """Lazy-loads and exposes configuration sections as dictionaries."""

    _DEFAULT_FILENAMES = {
        "logging": "logging.yml",
        "pipeline": "pipeline.yml",
    }

    def __init__(self) -> None:
        self._data: Dict[str, Dict[str, Any]] = {}
        self._ensure_loaded()

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def get_logging_config(self) -> Dict[str, Any]:
        return self._data.get("logging", {})

    def get_pipeline_config(self) -> Dict[str, Any]:
        return self._data.get("pipeline", {})

    def get_load_defaults(self) -> Dict[str, Any]:
        """Return the ``load`` section used to build ``LoadSettings``."""
        return dict(self.get_pipeline_config().get("load") or {})

    def get_save_defaults(self) -> Dict[str, Any]:
        return dict(self.get_pipeline_config().get("save") or {})

    def get_network_defaults(self) -> Dict[str, Any]:
        return dict(self.get_pipeline_config().get("network") or {})

    def reload(self) -> None:
        """Discard cached sections and read every file again."""
        self._data = {}
        self._ensure_loaded()

    # ------------------------------------------------------------------
    # Internal loading logic
    # ------------------------------------------------------------------
    def _ensure_loaded(self) -> None:
        if self._data:
            return  # already loaded

        startup_summary = []
        user_config_dir = _get_user_config_dir()

        for key, filename in self._DEFAULT_FILENAMES.items():
            merged_cfg: Dict[str, Any] = {}
            status = "missing"

            # 1. load packaged default
            try:
                resource = pkg_resources.files(__package__).joinpath(filename)
                with resource.open("r", encoding="utf-8") as fh:
                    packaged_data = yaml.safe_load(fh) or {}
                merged_cfg.update(packaged_data)
                status = "loaded"
            except (FileNotFoundError, OSError):
                logger.error("Missing packaged config for %s (%s)", key, filename)
                status = "missing"
            except yaml.YAMLError as exc:
                logger.error("Invalid packaged config for %s (%s): %s", key, filename, exc)
                status = "invalid"

            # 2. load user overrides
            user_path = user_config_dir / filename
            if user_path.exists():
                try:
                    user_data = yaml.safe_load(user_path.read_text(encoding="utf-8")) or {}
                    merged_cfg.update(user_data)
                    if status == "loaded":
                        status = "loaded+overrides"
                except (OSError, yaml.YAMLError) as exc:
                    logger.error("Could not parse user config %s: %s", user_path, exc)

            self._data[key] = merged_cfg
            startup_summary.append(f"{key}: {status}")

        logger.debug("Config startup: %s", " | ".join(startup_summary))
