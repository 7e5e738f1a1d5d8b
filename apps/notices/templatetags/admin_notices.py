from __future__ import annotations

from django import template
from django.utils.safestring import mark_safe

from apps.notices.registry import get_registry

register = template.Library()


@register.simple_tag(takes_context=True)
def admin_notices(context) -> str:
    """Render the registered notices visible on the current admin screen."""

    request = context.get("request")
    if request is None:
        return ""

    dismissed = context.get("admin_notice_dismissals") or {}
    return mark_safe(get_registry().render_for(request, dismissed=dismissed))
