from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone as dt_timezone
from typing import Any, Callable, Union

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from django.utils.html import linebreaks

from .exceptions import InvalidArgument
from .value_objects import (
    NoticeLocation,
    NoticeUrgency,
    ScreenCondition,
    UserCapability,
    coerce_capabilities,
)

DateInput = Union[str, int, date, datetime]


@dataclass(frozen=True)
class LiteralSource:
    text: str

    def render(self, auto_paragraph: bool = False) -> str:
        if auto_paragraph:
            return linebreaks(self.text)
        return self.text


@dataclass(frozen=True)
class CallbackSource:
    callback: Callable[[], str]

    def render(self, auto_paragraph: bool = False) -> str:
        # Callbacks own their markup, paragraphs are never added.
        return self.callback()


RenderSource = Union[LiteralSource, CallbackSource]


def parse_notice_date(value: DateInput) -> datetime:
    """Normalize *value* to a timezone-aware :class:`datetime`.

    Accepts ISO 8601 strings (``2021-01-01`` or ``2021-01-01T10:00:00+02:00``),
    UNIX timestamps and ``date``/``datetime`` objects. Aware values keep their
    own offset so the calendar day the caller wrote is preserved. Naive values
    are read in the current Django time zone and timestamps in UTC.
    """

    if isinstance(value, bool):
        raise InvalidArgument(f"Cannot use {value!r} as a notice date.")

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, int):
        try:
            return datetime.fromtimestamp(value, tz=dt_timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidArgument(f"Invalid timestamp {value!r}.") from exc
    elif isinstance(value, str):
        try:
            parsed = parse_datetime(value.strip())
            if parsed is None:
                day = parse_date(value.strip())
                parsed = datetime(day.year, day.month, day.day) if day else None
        except ValueError as exc:
            raise InvalidArgument(f"Invalid date {value!r}.") from exc
        if parsed is None:
            raise InvalidArgument(f"Unable to parse date {value!r}.")
    else:
        raise InvalidArgument(
            f"A notice date must be a string, timestamp or date, got {type(value).__name__}."
        )

    if timezone.is_naive(parsed):
        return timezone.make_aware(parsed)
    return parsed


class AdminNotice:
    """Fluent definition of a notice shown in the admin.

    Every configuration method returns the notice itself so calls can be
    chained::

        AdminNotice("upgrade-policies", "Review the new upgrade policies.")
            .urgency("warning")
            .if_user_can("nodes.change_node")
            .between("2024-01-01", "2024-02-01")
            .dismissible()
    """

    def __init__(self, notice_id: str, render_text_or_callback: str | Callable[[], str]):
        if not isinstance(notice_id, str) or not notice_id:
            raise InvalidArgument("A notice id must be a non-empty string.")

        if isinstance(render_text_or_callback, str):
            self._source: RenderSource = LiteralSource(render_text_or_callback)
        elif callable(render_text_or_callback):
            self._source = CallbackSource(render_text_or_callback)
        else:
            raise InvalidArgument("The notice content must be a string or a callable.")

        self._id = notice_id
        self._render_text_or_callback = render_text_or_callback
        self._urgency = NoticeUrgency.info()
        self._dismissible = False
        self._inline = False
        self._with_wrapper = True
        self._auto_paragraph = False
        self._alternate_styles = False
        self._custom = False
        self._location = NoticeLocation.standard()
        self._after_date: datetime | None = None
        self._until_date: datetime | None = None
        self._when_callback: Callable[[], Any] | None = None
        self._on_conditions: list[ScreenCondition] = []
        self._user_capabilities: list[UserCapability] = []

    def __repr__(self) -> str:
        return f"<AdminNotice {self._id!r} {self._urgency}>"

    @property
    def id(self) -> str:
        return self._id

    # Conditions ------------------------------------------------------
    def if_user_can(self, *capabilities: str | list | tuple) -> AdminNotice:
        """Show the notice only to users holding one of *capabilities*."""

        self._user_capabilities.extend(coerce_capabilities(capabilities))
        return self

    def after(self, value: DateInput) -> AdminNotice:
        self._after_date = parse_notice_date(value)
        return self

    def until(self, value: DateInput) -> AdminNotice:
        self._until_date = parse_notice_date(value)
        return self

    def between(self, start: DateInput, end: DateInput) -> AdminNotice:
        return self.after(start).until(end)

    def when(self, predicate: Callable[[], Any]) -> AdminNotice:
        if not callable(predicate):
            raise InvalidArgument("The when condition must be callable.")
        self._when_callback = predicate
        return self

    def on(self, *conditions: str | ScreenCondition) -> AdminNotice:
        """Limit the notice to screens matching any of *conditions*."""

        parsed = []
        for condition in conditions:
            if isinstance(condition, ScreenCondition):
                parsed.append(condition)
            elif isinstance(condition, str):
                parsed.append(ScreenCondition(condition))
            else:
                raise InvalidArgument(
                    f"A screen condition must be a string or ScreenCondition, got {condition!r}."
                )
        self._on_conditions.extend(parsed)
        return self

    # Presentation ----------------------------------------------------
    def auto_paragraph(self, flag: bool = True) -> AdminNotice:
        self._auto_paragraph = flag
        return self

    def without_auto_paragraph(self) -> AdminNotice:
        return self.auto_paragraph(False)

    def urgency(self, value: str | NoticeUrgency) -> AdminNotice:
        self._urgency = value if isinstance(value, NoticeUrgency) else NoticeUrgency(value)
        return self

    def dismissible(self, flag: bool = True) -> AdminNotice:
        self._dismissible = flag
        return self

    def not_dismissible(self) -> AdminNotice:
        return self.dismissible(False)

    def inline(self, flag: bool = True) -> AdminNotice:
        self._inline = flag
        return self

    def not_inline(self) -> AdminNotice:
        return self.inline(False)

    def with_wrapper(self, flag: bool = True) -> AdminNotice:
        self._with_wrapper = flag
        return self

    def without_wrapper(self) -> AdminNotice:
        return self.with_wrapper(False)

    def alternate_styles(self, flag: bool = True) -> AdminNotice:
        self._alternate_styles = flag
        return self

    def standard_styles(self) -> AdminNotice:
        return self.alternate_styles(False)

    def custom(self, flag: bool = True) -> AdminNotice:
        self._custom = flag
        return self

    def location(self, value: str | NoticeLocation) -> AdminNotice:
        self._location = value if isinstance(value, NoticeLocation) else NoticeLocation(value)
        return self

    # Getters ---------------------------------------------------------
    def get_id(self) -> str:
        return self._id

    def get_render_text_or_callback(self) -> str | Callable[[], str]:
        return self._render_text_or_callback

    def get_render_source(self) -> RenderSource:
        return self._source

    def get_rendered_content(self) -> str:
        return self._source.render(auto_paragraph=self._auto_paragraph)

    def get_urgency(self) -> str:
        return self._urgency.value

    def is_dismissible(self) -> bool:
        return self._dismissible

    def is_inline(self) -> bool:
        return self._inline

    def uses_wrapper(self) -> bool:
        return self._with_wrapper

    def should_auto_paragraph(self) -> bool:
        return self._auto_paragraph

    def uses_alternate_styles(self) -> bool:
        return self._alternate_styles

    def is_custom(self) -> bool:
        return self._custom

    def get_location(self) -> NoticeLocation:
        return self._location

    def get_after_date(self) -> datetime | None:
        return self._after_date

    def get_until_date(self) -> datetime | None:
        return self._until_date

    def get_when_callback(self) -> Callable[[], Any] | None:
        return self._when_callback

    def get_on_conditions(self) -> list[ScreenCondition]:
        return list(self._on_conditions)

    def get_user_capabilities(self) -> list[UserCapability]:
        return list(self._user_capabilities)
