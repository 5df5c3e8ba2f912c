"""Top-level package of the syndication toolkit.

Front-ends should depend on the public API exposed here rather than
importing internal modules directly.
"""

from .core import (
    BlogMLDocument,
    LoadSettings,
    OpmlDocument,
    RsdDocument,
    SaveSettings,
    SyndicationError,
)
from .core.services import SyndicationResourceService

__version__ = "1.0.0"

__all__: list[str] = [
    "OpmlDocument",
    "RsdDocument",
    "BlogMLDocument",
    "LoadSettings",
    "SaveSettings",
    "SyndicationError",
    "SyndicationResourceService",
]
