"""BlogML 2.0 web-log export object model."""

from .enums import BlogMLApprovalStatus, BlogMLContentType, BlogMLPostType
from .text_construct import BlogMLTextConstruct, BLOGML_NAMESPACE
from .common import BlogMLCommonObject
from .author import BlogMLAuthor
from .category import BlogMLCategory
from .comment import BlogMLComment
from .trackback import BlogMLTrackback
from .attachment import BlogMLAttachment
from .post import BlogMLPost
from .document import BlogMLDocument

__all__ = [
    "BLOGML_NAMESPACE",
    "BlogMLApprovalStatus",
    "BlogMLContentType",
    "BlogMLPostType",
    "BlogMLTextConstruct",
    "BlogMLCommonObject",
    "BlogMLAuthor",
    "BlogMLCategory",
    "BlogMLComment",
    "BlogMLTrackback",
    "BlogMLAttachment",
    "BlogMLPost",
    "BlogMLDocument",
]
