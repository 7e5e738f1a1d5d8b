from datetime import date, datetime, timedelta, timezone as dt_timezone

import pytest

from apps.notices import AdminNotice, InvalidArgument
from apps.notices.notice import CallbackSource, LiteralSource
from apps.notices.value_objects import (
    NoticeLocation,
    NoticeUrgency,
    ScreenCondition,
    UserCapability,
)


def test_rejects_content_that_is_not_text_or_callable():
    with pytest.raises(InvalidArgument):
        AdminNotice("test", 1)


def test_rejects_empty_id():
    with pytest.raises(InvalidArgument):
        AdminNotice("", "test")


def test_id_is_read_only():
    notice = AdminNotice("test_id", "test")

    assert notice.get_id() == "test_id"
    assert notice.id == "test_id"
    with pytest.raises(AttributeError):
        notice.id = "other"


def test_if_user_can_appends_one_capability_per_argument():
    notice = AdminNotice("test_id", "test")
    result = notice.if_user_can("test", ["test", 1], ("test", 2, 3))

    assert result is notice
    assert notice.get_user_capabilities() == [
        UserCapability("test"),
        UserCapability("test", (1,)),
        UserCapability("test", (2, 3)),
    ]


@pytest.mark.parametrize("capability", [1, [], [1, "test"], None, True])
def test_if_user_can_rejects_misshaped_capabilities(capability):
    notice = AdminNotice("test_id", "test")

    with pytest.raises(InvalidArgument):
        notice.if_user_can(capability)


def test_if_user_can_leaves_notice_untouched_when_an_argument_fails():
    notice = AdminNotice("test_id", "test")

    with pytest.raises(InvalidArgument):
        notice.if_user_can("valid", 5)

    assert notice.get_user_capabilities() == []


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2021-01-01", date(2021, 1, 1)),
        (1612137600, date(2021, 2, 1)),
        (date(2021, 1, 1), date(2021, 1, 1)),
        (datetime(2021, 1, 1, 8, 30), date(2021, 1, 1)),
        ("2021-01-01T10:00:00+00:00", date(2021, 1, 1)),
    ],
)
def test_after_and_until_accept_strings_timestamps_and_dates(value, expected):
    notice = AdminNotice("test_id", "test")

    assert notice.after(value) is notice
    assert notice.until(value) is notice

    assert notice.get_after_date().date() == expected
    assert notice.get_until_date().date() == expected
    assert notice.get_after_date().tzinfo is not None


def test_dates_for_the_same_day_normalize_to_equal_values():
    from_string = AdminNotice("a", "test").after("2021-02-01").get_after_date()
    from_timestamp = AdminNotice("b", "test").after(1612137600).get_after_date()
    from_date = AdminNotice("c", "test").after(date(2021, 2, 1)).get_after_date()

    assert from_string == from_timestamp == from_date
    assert from_string == datetime(2021, 2, 1, tzinfo=dt_timezone.utc)


@pytest.mark.parametrize(
    "value",
    [
        datetime(2021, 1, 1, 0, 0, tzinfo=dt_timezone(timedelta(hours=2))),
        "2021-01-01T00:30:00+02:00",
        datetime(2021, 1, 1, 23, 30, tzinfo=dt_timezone(timedelta(hours=-5))),
    ],
)
def test_aware_dates_keep_the_calendar_day_of_their_offset(value):
    notice = AdminNotice("test_id", "test").between(value, value)

    assert notice.get_after_date().date() == date(2021, 1, 1)
    assert notice.get_until_date().date() == date(2021, 1, 1)


def test_naive_dates_use_the_current_time_zone(settings):
    settings.TIME_ZONE = "America/New_York"

    after = AdminNotice("test_id", "test").after("2024-03-15").get_after_date()

    assert after.date() == date(2024, 3, 15)
    assert after.utcoffset() == timedelta(hours=-4)


@pytest.mark.parametrize("value", ["not a date", "2021-13-45", True, 1.5, None])
def test_invalid_dates_are_rejected(value):
    with pytest.raises(InvalidArgument):
        AdminNotice("test_id", "test").after(value)


def test_between_sets_both_dates():
    notice = AdminNotice("test_id", "test")
    result = notice.between("2021-01-01", "2021-02-01")

    expected = AdminNotice("test_id", "test").after("2021-01-01").until("2021-02-01")

    assert result is notice
    assert notice.get_after_date() == expected.get_after_date()
    assert notice.get_until_date() == expected.get_until_date()
    assert notice.get_until_date().date() == date(2021, 2, 1)


def test_when_stores_the_predicate():
    notice = AdminNotice("test_id", "test")
    assert notice.get_when_callback() is None

    callback = lambda: True  # noqa: E731
    assert notice.when(callback) is notice
    assert notice.get_when_callback() is callback
    assert notice.get_when_callback()() is True


def test_when_requires_a_callable():
    with pytest.raises(InvalidArgument):
        AdminNotice("test_id", "test").when("yes")


def test_on_wraps_strings_and_keeps_order_and_duplicates():
    notice = AdminNotice("test_id", "test")
    result = notice.on("test", ScreenCondition("test2"), "test")

    assert result is notice
    assert notice.get_on_conditions() == [
        ScreenCondition("test"),
        ScreenCondition("test2"),
        ScreenCondition("test"),
    ]


def test_auto_paragraph_toggles():
    notice = AdminNotice("test_id", "test")
    assert notice.should_auto_paragraph() is False

    assert notice.auto_paragraph() is notice
    assert notice.should_auto_paragraph() is True

    notice.auto_paragraph(False)
    assert notice.should_auto_paragraph() is False

    notice.auto_paragraph(True)
    assert notice.without_auto_paragraph() is notice
    assert notice.should_auto_paragraph() is False


def test_urgency_accepts_strings_and_value_objects():
    notice = AdminNotice("test_id", "test")
    assert notice.get_urgency() == "info"

    assert notice.urgency("error") is notice
    assert notice.get_urgency() == "error"

    notice.urgency(NoticeUrgency("warning"))
    assert notice.get_urgency() == "warning"


def test_urgency_rejects_unknown_values():
    with pytest.raises(InvalidArgument):
        AdminNotice("test_id", "test").urgency("critical")


def test_dismissible_toggles():
    notice = AdminNotice("test_id", "test")
    assert notice.is_dismissible() is False

    assert notice.dismissible() is notice
    assert notice.is_dismissible() is True

    notice.dismissible(False)
    assert notice.is_dismissible() is False

    notice.dismissible(True)
    assert notice.not_dismissible() is notice
    assert notice.is_dismissible() is False


def test_alternate_styles_toggles():
    notice = AdminNotice("test_id", "test")
    assert notice.uses_alternate_styles() is False

    assert notice.alternate_styles() is notice
    assert notice.uses_alternate_styles() is True

    notice.alternate_styles(False)
    assert notice.uses_alternate_styles() is False

    notice.alternate_styles(True)
    assert notice.standard_styles() is notice
    assert notice.uses_alternate_styles() is False


def test_custom_toggles():
    notice = AdminNotice("test_id", "test")
    assert notice.is_custom() is False

    assert notice.custom() is notice
    assert notice.is_custom() is True

    notice.custom(False)
    assert notice.is_custom() is False


def test_inline_and_wrapper_toggles():
    notice = AdminNotice("test_id", "test")
    assert notice.is_inline() is False
    assert notice.uses_wrapper() is True

    assert notice.inline() is notice
    assert notice.is_inline() is True
    assert notice.not_inline().is_inline() is False

    assert notice.without_wrapper() is notice
    assert notice.uses_wrapper() is False
    assert notice.with_wrapper().uses_wrapper() is True


def test_location_defaults_to_standard():
    notice = AdminNotice("test_id", "test")
    assert notice.get_location().is_standard()

    assert notice.location(NoticeLocation.inline()) is notice
    assert notice.get_location().is_inline()
    assert not notice.get_location().is_standard()

    notice.location("below_header")
    assert notice.get_location() == NoticeLocation.below_header()


def test_get_render_text_or_callback_returns_the_configured_value():
    assert AdminNotice("test_id", "test").get_render_text_or_callback() == "test"

    callback = lambda: "rendered"  # noqa: E731
    notice = AdminNotice("test_id", callback)
    assert notice.get_render_text_or_callback() is callback
    assert notice.get_render_source() == CallbackSource(callback)


def test_rendered_content():
    assert AdminNotice("test_id", "test").get_rendered_content() == "test"

    notice = AdminNotice("test_id", "test").auto_paragraph()
    assert notice.get_render_source() == LiteralSource("test")
    assert notice.get_rendered_content() == "<p>test</p>"

    notice = AdminNotice("test_id", lambda: "test-callback")
    assert notice.get_rendered_content() == "test-callback"


def test_callback_output_skips_auto_paragraph():
    notice = AdminNotice("test_id", lambda: "line one\n\nline two").auto_paragraph()

    assert notice.get_rendered_content() == "line one\n\nline two"


def test_list_getters_return_copies():
    notice = AdminNotice("test_id", "test").on("screen").if_user_can("cap")

    notice.get_on_conditions().clear()
    notice.get_user_capabilities().clear()

    assert len(notice.get_on_conditions()) == 1
    assert len(notice.get_user_capabilities()) == 1
