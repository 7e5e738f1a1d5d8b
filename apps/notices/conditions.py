"""Decide whether a registered notice should be displayed for a request."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime

from django.utils import timezone

from .notice import AdminNotice

logger = logging.getLogger(__name__)


def get_screen_ids(request) -> tuple[str, ...]:
    """Return the identifiers screen conditions are matched against."""

    screens: list[str] = []
    match = getattr(request, "resolver_match", None)
    view_name = getattr(match, "view_name", None)
    if view_name:
        screens.append(view_name)
    path = getattr(request, "path", None)
    if path:
        screens.append(path)
    return tuple(screens)


class NoticeShouldRender:
    """Evaluate the conditions accumulated on an :class:`AdminNotice`.

    ``dismissed`` maps notice ids to the UNIX timestamp at which the current
    user dismissed them, as stored by the host preference store.
    """

    def __init__(
        self,
        now: datetime | None = None,
        dismissed: Mapping[str, int] | None = None,
    ) -> None:
        self.now = now
        self.dismissed = dismissed or {}

    def __call__(self, notice: AdminNotice, request) -> bool:
        now = self._current_time()

        if notice.is_dismissible() and notice.get_id() in self.dismissed:
            return self._reject(notice, "dismissed")

        if not self._within_dates(notice, now):
            return self._reject(notice, "outside date window")

        conditions = notice.get_on_conditions()
        if conditions:
            screens = get_screen_ids(request)
            if not any(condition.matches(*screens) for condition in conditions):
                return self._reject(notice, "screen mismatch")

        capabilities = notice.get_user_capabilities()
        if capabilities:
            user = getattr(request, "user", None)
            if not any(capability.is_satisfied_by(user) for capability in capabilities):
                return self._reject(notice, "missing capability")

        callback = notice.get_when_callback()
        if callback is not None and not callback():
            return self._reject(notice, "when condition failed")

        return True

    def _current_time(self) -> datetime:
        now = self.now or timezone.now()
        if timezone.is_naive(now):
            now = timezone.make_aware(now)
        return now

    @staticmethod
    def _within_dates(notice: AdminNotice, now: datetime) -> bool:
        # Dates are compared on the day written by the caller, today on the
        # day of the current time zone.
        today = timezone.localdate(now)
        after = notice.get_after_date()
        if after is not None and today < after.date():
            return False
        until = notice.get_until_date()
        if until is not None and today > until.date():
            return False
        return True

    @staticmethod
    def _reject(notice: AdminNotice, reason: str) -> bool:
        logger.debug("Hiding admin notice %s: %s", notice.get_id(), reason)
        return False
