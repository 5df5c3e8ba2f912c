from __future__ import annotations

"""Central logging configuration for the syndication toolkit.

Library code only creates module loggers; applications that want the
packaged configuration call :func:`setup_logging` once at start-up.
"""

import copy
import logging
import logging.config
import os

from syndication_toolkit.config import ConfigManager

__all__ = ["setup_logging"]

_PACKAGE_LOGGER = "syndication_toolkit"


def setup_logging() -> None:
    """Configure logging from the packaged ``logging.yml`` (user overridable)."""
    log_dir = os.environ.get("SYNDICATION_LOG_DIR", "logs")
    log_file = os.path.join(log_dir, "syndication.log")

    try:
        logging_config = copy.deepcopy(ConfigManager().get_logging_config())

        if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
            handlers = logging_config.get("handlers") or {}
            if "file" in handlers:
                os.makedirs(log_dir, exist_ok=True)
                handlers["file"]["filename"] = log_file

            logging.config.dictConfig(logging_config)
            logging.getLogger(_PACKAGE_LOGGER).info("Logging initialised from config files")
        else:
            _setup_minimal_logging()
    except (ValueError, TypeError, AttributeError, ImportError, OSError) as exc:
        logging.getLogger(_PACKAGE_LOGGER).warning("Error loading logging config: %s", exc)
        _setup_minimal_logging()

    _apply_debug_overrides()


def _setup_minimal_logging() -> None:
    """Set up console-only logging when the configuration is unusable."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'INFO',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }

    logging.config.dictConfig(minimal_config)
    logging.getLogger(_PACKAGE_LOGGER).warning("Logging initialised with minimal fallback")


def _apply_debug_overrides() -> None:
    """Switch loggers named in ``SYNDICATION_DEBUG_MODULES`` to DEBUG.

    ``SYNDICATION_DEBUG_MODULES=syndication_toolkit.core.extensions,...``
    """
    extra_modules = os.environ.get('SYNDICATION_DEBUG_MODULES', '').strip()
    targets = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            handler = logging.StreamHandler()
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(
                logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            )
            logger.addHandler(handler)
        logger.info("Debug override active for logger '%s'", name)
