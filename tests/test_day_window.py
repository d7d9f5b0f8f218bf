# SPDX-License-Identifier: MIT

from conftest import TARGET_DATE, TZ, at

from daybound.model.day_window import make_day_window
from daybound.service.day_window import (
    SLEEP_TITLE,
    WAKE_UP_TITLE,
    build_day,
    is_reserved_title,
    select_day_events,
)

WINDOW = make_day_window(at(9), at(23, 30))


def titles(events):
    return [e["summary"] for e in events]


def test_markers_bracket_the_day(event):
    events = select_day_events(TARGET_DATE, WINDOW, [event("Standup", at(10))])

    assert titles(events) == [WAKE_UP_TITLE, "Standup", SLEEP_TITLE]
    wake_up, sleep = events[0], events[-1]
    assert wake_up["boundary_marker"] and sleep["boundary_marker"]
    assert wake_up["start"] == wake_up["end"] == WINDOW["start"]
    assert sleep["start"] == sleep["end"] == WINDOW["end"]
    assert not events[1]["boundary_marker"]


def test_empty_day_still_has_markers():
    events = select_day_events(TARGET_DATE, WINDOW, [])

    assert titles(events) == [WAKE_UP_TITLE, SLEEP_TITLE]


def test_events_are_ordered_by_start(event):
    raw = [
        event("Dinner", at(19)),
        event("Lunch", at(12)),
        event("Gym", at(7), at(9, 30)),
    ]

    events = select_day_events(TARGET_DATE, WINDOW, raw)

    assert titles(events) == [WAKE_UP_TITLE, "Gym", "Lunch", "Dinner", SLEEP_TITLE]


def test_equal_starts_keep_source_order(event):
    raw = [event("B", at(12)), event("A", at(12))]

    assert titles(select_day_events(TARGET_DATE, WINDOW, raw))[1:3] == ["B", "A"]


def test_all_day_events_are_dropped(event):
    raw = [event("Holiday", at(0), at(0, days=1), all_day=True), event("Call", at(15))]

    assert titles(select_day_events(TARGET_DATE, WINDOW, raw)) == [
        WAKE_UP_TITLE,
        "Call",
        SLEEP_TITLE,
    ]


def test_events_outside_window_are_dropped(event):
    raw = [
        event("Too early", at(6), at(8)),
        event("Touching start", at(8), at(9)),
        event("Touching end", at(23, 30), at(23, 45)),
        event("Tomorrow", at(10, days=1)),
        event("Overnight shift", at(20, days=-1), at(2, days=1)),
    ]

    assert titles(select_day_events(TARGET_DATE, WINDOW, raw)) == [
        WAKE_UP_TITLE,
        "Overnight shift",
        SLEEP_TITLE,
    ]


def test_raw_sleep_and_reserved_titles_are_dropped(event):
    raw = [
        event("Sleep", at(13), at(14)),
        event("power sleep", at(16), at(16, 20)),
        event("wake up", at(9), at(9, 10)),
        event("Wake Up call with Sam", at(11)),
    ]

    assert titles(select_day_events(TARGET_DATE, WINDOW, raw)) == [
        WAKE_UP_TITLE,
        "Wake Up call with Sam",
        SLEEP_TITLE,
    ]


def test_untitled_events_are_dropped(event):
    raw = [event("", at(12)), event("   ", at(13)), event("Real", at(14))]

    assert titles(select_day_events(TARGET_DATE, WINDOW, raw)) == [
        WAKE_UP_TITLE,
        "Real",
        SLEEP_TITLE,
    ]


def test_input_events_are_not_modified(event):
    raw = [event("Lunch", at(12))]
    before = dict(raw[0])

    select_day_events(TARGET_DATE, WINDOW, raw)

    assert raw[0] == before


def test_reserved_titles():
    assert is_reserved_title("Wake Up")
    assert is_reserved_title(" sleep ")
    assert not is_reserved_title("Sleepover")


def test_build_day_resolves_and_selects(event):
    raw = [
        event("Sleep", at(0, 30), at(8)),
        event("Breakfast", at(8, 15)),
        event("Sleep", at(23), at(7, days=1)),
        event("Late call", at(23, 15)),
    ]

    window, events = build_day(TARGET_DATE, raw, TZ)

    assert window["start"] == at(8)
    assert window["end"] == at(23)
    assert titles(events) == [WAKE_UP_TITLE, "Breakfast", SLEEP_TITLE]
