"""Really Simple Discovery (RSD 1.0) object model."""

from .interface import RsdApplicationInterface, RSD_NAMESPACE
from .document import RsdDocument

__all__ = ["RsdDocument", "RsdApplicationInterface", "RSD_NAMESPACE"]
