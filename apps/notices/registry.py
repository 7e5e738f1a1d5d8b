from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from functools import lru_cache
from typing import Callable

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .conditions import NoticeShouldRender
from .exceptions import InvalidArgument
from .notice import AdminNotice
from .rendering import RenderAdminNotice, validate_namespace

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "admin-notices"


class NoticeRegistry:
    """Notices registered under a single namespace."""

    def __init__(self, namespace: str):
        self.namespace = validate_namespace(namespace)
        self.renderer = RenderAdminNotice(self.namespace)
        self._notices: dict[str, AdminNotice] = {}

    def __contains__(self, notice_id: object) -> bool:
        return notice_id in self._notices

    def __len__(self) -> int:
        return len(self._notices)

    def show(self, notice_id: str, render: str | Callable[[], str]) -> AdminNotice:
        """Register a notice and return it for further configuration."""

        notice = AdminNotice(notice_id, render)
        if notice_id in self._notices:
            logger.debug("Replacing admin notice %s in %s", notice_id, self.namespace)
        self._notices[notice_id] = notice
        return notice

    def remove(self, notice_id: str) -> bool:
        return self._notices.pop(notice_id, None) is not None

    def get(self, notice_id: str) -> AdminNotice | None:
        return self._notices.get(notice_id)

    def all(self) -> list[AdminNotice]:
        return list(self._notices.values())

    def clear(self) -> None:
        self._notices.clear()

    def render(self, notice: AdminNotice) -> str:
        return self.renderer(notice)

    def visible_for(
        self,
        request,
        now: datetime | None = None,
        dismissed: Mapping[str, int] | None = None,
    ) -> list[AdminNotice]:
        should_render = NoticeShouldRender(now=now, dismissed=dismissed)
        return [notice for notice in self._notices.values() if should_render(notice, request)]

    def render_for(
        self,
        request,
        now: datetime | None = None,
        dismissed: Mapping[str, int] | None = None,
    ) -> str:
        """Return the markup of every notice visible for *request*."""

        return "".join(
            self.render(notice)
            for notice in self.visible_for(request, now=now, dismissed=dismissed)
        )

    def close_notice_class(self, hide: bool = False) -> str:
        """CSS class for links inside custom markup that dismiss the notice.

        With ``hide`` the notice is also hidden right away in the browser.
        """

        base = f"js-stellarwp-{self.namespace}-close-notice"
        if hide:
            return f"{base} {base}--hide"
        return base


@lru_cache(maxsize=1)
def get_registry() -> NoticeRegistry:
    """Return the registry for ``settings.ADMIN_NOTICES_NAMESPACE``."""

    namespace = getattr(settings, "ADMIN_NOTICES_NAMESPACE", DEFAULT_NAMESPACE)
    try:
        return NoticeRegistry(namespace)
    except InvalidArgument as exc:
        raise ImproperlyConfigured(f"ADMIN_NOTICES_NAMESPACE: {exc}") from exc
