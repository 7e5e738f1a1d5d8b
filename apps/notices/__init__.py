"""Conditional admin notices with namespaced rendering."""

from .exceptions import InvalidArgument
from .notice import AdminNotice
from .registry import NoticeRegistry, get_registry
from .rendering import RenderAdminNotice
from .value_objects import NoticeLocation, NoticeUrgency, ScreenCondition, UserCapability

__all__ = [
    "AdminNotice",
    "InvalidArgument",
    "NoticeLocation",
    "NoticeRegistry",
    "NoticeUrgency",
    "RenderAdminNotice",
    "ScreenCondition",
    "UserCapability",
    "get_registry",
]
