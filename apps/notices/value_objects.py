"""Immutable descriptors used to configure an :class:`~apps.notices.notice.AdminNotice`."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserCapability:
    """Permission the current user must hold, optionally checked against arguments."""

    name: str
    arguments: tuple[Any, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgument("A capability name must be a non-empty string.")
        if not isinstance(self.arguments, tuple):
            object.__setattr__(self, "arguments", tuple(self.arguments))

    def is_satisfied_by(self, user) -> bool:
        """Return ``True`` when *user* holds this capability.

        Django permission backends accept a single object for object-level
        checks, so only the first argument is forwarded and the rest are
        logged.
        """

        if user is None:
            return False
        if len(self.arguments) > 1:
            logger.debug(
                "Ignoring extra arguments %r for capability %s",
                self.arguments[1:],
                self.name,
            )
        obj = self.arguments[0] if self.arguments else None
        return bool(user.has_perm(self.name, obj))


@dataclass(frozen=True)
class NoticeUrgency:
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"

    CHOICES = (INFO, WARNING, ERROR, SUCCESS)

    value: str = INFO

    def __post_init__(self) -> None:
        if self.value not in self.CHOICES:
            raise InvalidArgument(
                f"Invalid urgency {self.value!r}; expected one of {', '.join(self.CHOICES)}."
            )

    @classmethod
    def info(cls) -> NoticeUrgency:
        return cls(cls.INFO)

    @classmethod
    def warning(cls) -> NoticeUrgency:
        return cls(cls.WARNING)

    @classmethod
    def error(cls) -> NoticeUrgency:
        return cls(cls.ERROR)

    @classmethod
    def success(cls) -> NoticeUrgency:
        return cls(cls.SUCCESS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ScreenCondition:
    """Matcher for the admin screen a notice should appear on.

    A plain condition is compared for equality with the screen identifiers
    of the current request. A condition starting with ``~`` is treated as a
    regular expression searched within those identifiers, e.g.
    ``~^admin:auth_`` matches every screen of the auth app.
    """

    condition: str

    def __post_init__(self) -> None:
        if not isinstance(self.condition, str) or not self.condition:
            raise InvalidArgument("A screen condition must be a non-empty string.")
        if self.is_regex:
            try:
                re.compile(self.condition[1:])
            except re.error as exc:
                raise InvalidArgument(
                    f"Invalid screen pattern {self.condition!r}: {exc}"
                ) from exc

    @property
    def is_regex(self) -> bool:
        return self.condition.startswith("~")

    def matches(self, *candidates: str | None) -> bool:
        screens = [candidate for candidate in candidates if candidate]
        if self.is_regex:
            pattern = re.compile(self.condition[1:])
            return any(pattern.search(screen) for screen in screens)
        return self.condition in screens

    def __str__(self) -> str:
        return self.condition


@dataclass(frozen=True)
class NoticeLocation:
    STANDARD = "standard"
    ABOVE_HEADER = "above_header"
    BELOW_HEADER = "below_header"
    INLINE = "inline"

    CHOICES = (STANDARD, ABOVE_HEADER, BELOW_HEADER, INLINE)

    value: str = STANDARD

    def __post_init__(self) -> None:
        if self.value not in self.CHOICES:
            raise InvalidArgument(
                f"Invalid location {self.value!r}; expected one of {', '.join(self.CHOICES)}."
            )

    @classmethod
    def standard(cls) -> NoticeLocation:
        return cls(cls.STANDARD)

    @classmethod
    def above_header(cls) -> NoticeLocation:
        return cls(cls.ABOVE_HEADER)

    @classmethod
    def below_header(cls) -> NoticeLocation:
        return cls(cls.BELOW_HEADER)

    @classmethod
    def inline(cls) -> NoticeLocation:
        return cls(cls.INLINE)

    def is_standard(self) -> bool:
        return self.value == self.STANDARD

    def is_above_header(self) -> bool:
        return self.value == self.ABOVE_HEADER

    def is_below_header(self) -> bool:
        return self.value == self.BELOW_HEADER

    def is_inline(self) -> bool:
        return self.value == self.INLINE

    def __str__(self) -> str:
        return self.value


def coerce_capabilities(capabilities: Iterable[Any]) -> list[UserCapability]:
    """Build :class:`UserCapability` objects from strings or ``[name, *args]`` lists."""

    parsed: list[UserCapability] = []
    for capability in capabilities:
        if isinstance(capability, str):
            parsed.append(UserCapability(capability))
            continue
        if (
            isinstance(capability, (list, tuple))
            and capability
            and isinstance(capability[0], str)
        ):
            parsed.append(UserCapability(capability[0], tuple(capability[1:])))
            continue
        raise InvalidArgument(
            "A capability must be a string or a list starting with the capability name, "
            f"got {capability!r}."
        )
    return parsed
