# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import pendulum
import pytest

from daybound import configuration
from daybound.model.event import CalendarEvent
from daybound.repository.configuration import CONFIGURATION_REPO
from daybound.template.event import make_calendar_event
from daybound.view import state as view_state

TZ = "UTC"
TARGET_DATE = pendulum.date(2024, 10, 22)

EventFactory = Callable[..., CalendarEvent]


def at(hour: int, minute: int = 0, days: int = 0, tz: str = TZ) -> pendulum.DateTime:
    """An instant relative to TARGET_DATE."""
    day = TARGET_DATE.add(days=days)
    return pendulum.datetime(day.year, day.month, day.day, hour, minute, tz=tz)


@pytest.fixture
def event() -> EventFactory:
    def _event(
        summary: str,
        start: pendulum.DateTime,
        end: Optional[pendulum.DateTime] = None,
        color: Optional[str] = None,
        all_day: bool = False,
    ) -> CalendarEvent:
        return make_calendar_event(
            summary, start, end if end is not None else start.add(hours=1), color, all_day
        )

    return _event


@pytest.fixture(autouse=True)
def isolated_configuration(tmp_path, monkeypatch):
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(
        configuration, "DEFAULT_DEBUG_LOG_PATH", tmp_path / "logs" / "debug.log"
    )
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    view_state.set_show_header(True)
    yield
