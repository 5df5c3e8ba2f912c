from __future__ import annotations

"""Exception classes for the syndication toolkit.

Every error raised on purpose by the toolkit derives from
:class:`SyndicationError`.  Argument contract violations additionally derive
from :class:`ValueError` and comparison mismatches from :class:`TypeError` so
callers can keep catching the built-in categories.

Malformed XML is deliberately absent from this hierarchy: parse failures
raised by lxml propagate unchanged.
"""

from typing import Any, Optional

__all__ = [
    "SyndicationError",
    "ArgumentNullError",
    "ArgumentEmptyError",
    "ReservedAttributeError",
    "ComparisonTypeError",
    "ExtensionRegistrationError",
    "DocumentLoadError",
    "FormatDetectionError",
    "LoadInProgressError",
]


class SyndicationError(Exception):
    """Base exception for all toolkit errors.

    Args:
        message: Human readable description
        entity: Optional name of the entity type the error relates to
        cause: Optional underlying exception
    """

    def __init__(self, message: str, entity: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.entity = entity
        self.cause = cause

    def __str__(self) -> str:
        if self.entity:
            return f"[Entity: {self.entity}] {super().__str__()}"
        return super().__str__()


class ArgumentNullError(SyndicationError, ValueError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str, entity: Optional[str] = None) -> None:
        super().__init__(f"Argument '{argument}' must not be None", entity)
        self.argument = argument


class ArgumentEmptyError(SyndicationError, ValueError):
    """Raised when a string argument that must carry text is empty."""

    def __init__(self, argument: str, entity: Optional[str] = None) -> None:
        super().__init__(f"Argument '{argument}' must not be empty", entity)
        self.argument = argument


class ReservedAttributeError(SyndicationError, ValueError):
    """Raised when a pass-through attribute name shadows a dedicated field."""

    def __init__(self, key: str, entity: Optional[str] = None) -> None:
        super().__init__(f"Attribute '{key}' is reserved; set the dedicated field instead", entity)
        self.key = key


class ComparisonTypeError(SyndicationError, TypeError):
    """Raised when ``compare_to`` receives an object of an incompatible type.

    The message names both the expected and the actual type.
    """

    def __init__(self, expected: type, actual: Any) -> None:
        self.expected_type = expected
        self.actual_type = type(actual)
        super().__init__(
            f"Object must be of type {expected.__name__}, "
            f"got {type(actual).__name__}",
            entity=expected.__name__,
        )


class ExtensionRegistrationError(SyndicationError):
    """Raised when an extension type cannot be registered.

    This covers invalid extension types and namespace conflicts with an
    already registered extension.
    """

    def __init__(self, message: str, namespace: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, cause=cause)
        self.namespace = namespace

    def __str__(self) -> str:
        if self.namespace:
            return f"[Namespace: {self.namespace}] {super().__str__()}"
        return super().__str__()


class DocumentLoadError(SyndicationError):
    """Raised when a source cannot be turned into an XML tree.

    Used for unsupported source objects, unreadable files and failed remote
    fetches.  Not used for XML syntax errors.
    """

    def __init__(self, message: str, source: Any = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, cause=cause)
        self.source = source


class FormatDetectionError(SyndicationError):
    """Raised when a root element matches none of the supported formats."""

    def __init__(self, root_tag: str, supported: Optional[list[str]] = None) -> None:
        self.root_tag = root_tag
        self.supported = supported or []
        formats = ", ".join(self.supported) or "none"
        super().__init__(
            f"Unrecognized root element '{root_tag}'. Supported formats: {formats}"
        )


class LoadInProgressError(SyndicationError):
    """Raised when a document already has an asynchronous load in flight."""
    pass
