from __future__ import annotations

"""Load and save settings for the document pipeline.

Both settings objects are plain dataclasses.  ``from_config`` builds an
instance from the ``pipeline.yml`` configuration, resolving extension
namespace URIs through the default extension registry.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Type

from syndication_toolkit.config import ConfigManager

from .exceptions import ArgumentEmptyError
from .extensions.base import SyndicationExtension
from .extensions.registry import get_default_registry
from .utils import parse_bool

logger = logging.getLogger(__name__)

__all__ = ["LoadSettings", "SaveSettings"]


def _resolve_extensions(namespaces: Iterable[str]) -> List[Type[SyndicationExtension]]:
    registry = get_default_registry()
    resolved = []
    for namespace in namespaces or ():
        extension_type = registry.get(namespace)
        if extension_type is None:
            logger.warning("Configured extension namespace %s is not registered", namespace)
            continue
        resolved.append(extension_type)
    return resolved


def _to_bool(value: Any) -> bool:
    # YAML may hand over a real bool, an int or a quoted string
    parsed = parse_bool(str(value))
    if parsed is None:
        raise ValueError(f"not a boolean: {value!r}")
    return parsed


def _coerce(values: Dict[str, Any], key: str, caster, default):
    if key not in values or values[key] is None:
        return default
    try:
        return caster(values[key])
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid configuration value %s=%r", key, values[key])
        return default


@dataclass
class LoadSettings:
    """Options controlling how a document is read.

    Attributes
    ----------
    character_encoding
        Encoding used to decode text streams.
    retrieval_limit
        Maximum number of top-level content entities read; ``0`` is unlimited.
    timeout
        Seconds allowed for remote fetches.
    supported_extensions
        Extension types always considered.
    auto_detect_extensions
        Also consult the extension registry for namespaces found in the source.
    preserve_unknown_extensions
        Keep content of unclaimed namespaces as opaque extensions.
    """

    character_encoding: str = "utf-8"
    retrieval_limit: int = 0
    timeout: float = 15.0
    supported_extensions: List[Type[SyndicationExtension]] = field(default_factory=list)
    auto_detect_extensions: bool = True
    preserve_unknown_extensions: bool = False

    def __post_init__(self) -> None:
        if not self.character_encoding or not self.character_encoding.strip():
            raise ArgumentEmptyError("character_encoding", "LoadSettings")
        if self.retrieval_limit < 0:
            raise ValueError("retrieval_limit must be zero (unlimited) or positive")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_config(cls) -> "LoadSettings":
        values = ConfigManager().get_load_defaults()
        return cls(
            character_encoding=_coerce(values, "character_encoding", str, "utf-8"),
            retrieval_limit=_coerce(values, "retrieval_limit", int, 0),
            timeout=_coerce(values, "timeout", float, 15.0),
            supported_extensions=_resolve_extensions(values.get("supported_extensions") or []),
            auto_detect_extensions=_coerce(values, "auto_detect_extensions", _to_bool, True),
            preserve_unknown_extensions=_coerce(values, "preserve_unknown_extensions", _to_bool, False),
        )

    def within_limit(self, count: int) -> bool:
        """Return True if another entity may be read after *count* were read."""
        return self.retrieval_limit == 0 or count < self.retrieval_limit


@dataclass
class SaveSettings:
    """Options controlling how a document is written."""

    character_encoding: str = "utf-8"
    minimize_output_size: bool = False
    supported_extensions: List[Type[SyndicationExtension]] = field(default_factory=list)
    auto_detect_extensions: bool = True
    xml_declaration: bool = True

    def __post_init__(self) -> None:
        if not self.character_encoding or not self.character_encoding.strip():
            raise ArgumentEmptyError("character_encoding", "SaveSettings")

    @classmethod
    def from_config(cls) -> "SaveSettings":
        values = ConfigManager().get_save_defaults()
        return cls(
            character_encoding=_coerce(values, "character_encoding", str, "utf-8"),
            minimize_output_size=_coerce(values, "minimize_output_size", _to_bool, False),
            supported_extensions=_resolve_extensions(values.get("supported_extensions") or []),
            auto_detect_extensions=_coerce(values, "auto_detect_extensions", _to_bool, True),
            xml_declaration=_coerce(values, "xml_declaration", _to_bool, True),
        )
