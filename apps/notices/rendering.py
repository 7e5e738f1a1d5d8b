from __future__ import annotations

import re

from django.utils.html import format_html
from django.utils.safestring import mark_safe

from .exceptions import InvalidArgument
from .notice import AdminNotice

NAMESPACE_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")
ATTRIBUTE_PREFIX = "data-stellarwp"


def validate_namespace(namespace: str) -> str:
    """Return *namespace* when it is safe to embed in HTML attribute names."""

    if not isinstance(namespace, str) or not NAMESPACE_PATTERN.match(namespace):
        raise InvalidArgument(
            f"Invalid notice namespace {namespace!r}; use lowercase letters, digits, '-' or '_'."
        )
    return namespace


def notice_id_attribute(namespace: str) -> str:
    return f"{ATTRIBUTE_PREFIX}-{namespace}-notice-id"


def location_attribute(namespace: str) -> str:
    return f"{ATTRIBUTE_PREFIX}-{namespace}-location"


class RenderAdminNotice:
    """Render an :class:`AdminNotice` into the admin notice markup.

    The namespace keeps the data attributes of this installation apart from
    other copies of the library rendering notices on the same page.
    """

    def __init__(self, namespace: str):
        self.namespace = validate_namespace(namespace)

    def __call__(self, notice: AdminNotice) -> str:
        if not notice.uses_wrapper():
            return notice.get_rendered_content()

        attributes = []
        classes = self.get_wrapper_classes(notice)
        if classes:
            attributes.append(format_html('class="{}"', classes))
        attributes.append(
            format_html(
                '{}="{}"', mark_safe(notice_id_attribute(self.namespace)), notice.get_id()
            )
        )
        location = notice.get_location()
        if not location.is_standard():
            attributes.append(
                format_html(
                    '{}="{}"', mark_safe(location_attribute(self.namespace)), location.value
                )
            )

        return format_html(
            "<div {}>{}</div>",
            mark_safe(" ".join(attributes)),
            mark_safe(notice.get_rendered_content()),
        )

    render = __call__

    def get_wrapper_classes(self, notice: AdminNotice) -> str:
        """Return the CSS classes of the standard notice wrapper."""

        classes = []
        if not notice.is_custom():
            classes += ["notice", f"notice-{notice.get_urgency()}"]

        if notice.is_dismissible():
            classes.append("is-dismissible")

        if notice.is_inline():
            classes.append("inline")

        if notice.uses_alternate_styles():
            classes.append("notice-alt")

        return " ".join(classes)
