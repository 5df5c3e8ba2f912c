from __future__ import annotations

"""Enumerations of the web-log export format."""

from enum import Enum
from typing import Optional

__all__ = ["BlogMLApprovalStatus", "BlogMLContentType", "BlogMLPostType"]


class _TokenEnum(Enum):
    """Enum whose members map to an XML token; NONE has no token."""

    @property
    def token(self) -> Optional[str]:
        return self.value or None

    @classmethod
    def from_token(cls, token: Optional[str]):
        """Return the member for *token* (any case), or NONE."""
        if token:
            wanted = token.strip().lower()
            for member in cls:
                if member.value and member.value == wanted:
                    return member
        return cls.NONE


class BlogMLApprovalStatus(_TokenEnum):
    NONE = ""
    APPROVED = "true"
    NOT_APPROVED = "false"


class BlogMLContentType(_TokenEnum):
    NONE = ""
    HTML = "html"
    TEXT = "text"
    XHTML = "xhtml"
    BASE64 = "base64"


class BlogMLPostType(_TokenEnum):
    NONE = ""
    ARTICLE = "article"
    NORMAL = "normal"
