# SPDX-License-Identifier: MIT

import pytest
from typer.testing import CliRunner

from daybound.color import BOUNDARY_MARKER_COLOR, CalendarColor
from daybound.repository.configuration import CONFIGURATION_REPO
from daybound.service.render import color_swatch, recognize_event_line
from daybound.terminal.app import app

runner = CliRunner()

EVENTS_YAML = """
- summary: Sleep
  start: {dateTime: "2024-10-21T23:00:00Z"}
  end: {dateTime: "2024-10-22T07:00:00Z"}
- summary: Standup
  start: {dateTime: "2024-10-22T09:00:00Z"}
  end: {dateTime: "2024-10-22T09:15:00Z"}
  colorId: "7"
- summary: Holiday
  start: {date: "2024-10-22"}
  end: {date: "2024-10-23"}
- summary: Sleep
  start: {dateTime: "2024-10-22T23:00:00Z"}
  end: {dateTime: "2024-10-23T07:00:00Z"}
"""

OLD_LINE = f"08:00 AM - {color_swatch('#828bc2')} **Old event**"


@pytest.fixture
def events_file(tmp_path):
    path = tmp_path / "events.yaml"
    path.write_text(EVENTS_YAML, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def utc_configuration():
    CONFIGURATION_REPO.update_config(timezone="UTC")


def titles(text: str) -> list[str]:
    recognized = [recognize_event_line(line) for line in text.split("\n")]
    return [event_line["title"] for event_line in recognized if event_line is not None]


def test_sync_updates_note_in_place(tmp_path, events_file):
    note = tmp_path / "2024-10-22.md"
    note.write_text(
        f"# 2024-10-22\n\n{OLD_LINE}\n{OLD_LINE}\n{OLD_LINE}\n{OLD_LINE}\n\n## Notes\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        ["day", "sync", "2024-10-22", "--file", str(note), "--events-file", str(events_file)],
    )

    assert result.exit_code == 0, result.output
    assert "SUCCESS:3 updated, 1 deleted, 0 added" in result.output
    text = note.read_text(encoding="utf-8")
    assert titles(text) == ["Wake Up", "Standup", "Sleep"]
    assert text.startswith("# 2024-10-22\n07:00 AM - ")
    assert text.endswith("\n\n## Notes\n")
    assert CalendarColor.PEACOCK.dark in text
    assert BOUNDARY_MARKER_COLOR in text


def test_sync_twice_changes_nothing(tmp_path, events_file):
    note = tmp_path / "note.md"
    note.write_text(f"# Day\n\n{OLD_LINE}\n", encoding="utf-8")
    args = ["day", "sync", "2024-10-22", "--file", str(note), "--events-file", str(events_file)]

    runner.invoke(app, args)
    first = note.read_text(encoding="utf-8")
    result = runner.invoke(app, args)

    assert result.exit_code == 0, result.output
    assert "SUCCESS:3 updated, 0 deleted, 0 added" in result.output
    assert note.read_text(encoding="utf-8") == first


def test_sync_without_event_lines_leaves_note_alone(tmp_path, events_file):
    note = tmp_path / "note.md"
    note.write_text("# Day\n\nNothing planned\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["day", "sync", "2024-10-22", "--file", str(note), "--events-file", str(events_file)],
    )

    assert result.exit_code == 0, result.output
    assert "NO_EXISTING_EVENTS" in result.output
    assert note.read_text(encoding="utf-8") == "# Day\n\nNothing planned\n"


def test_sync_append(tmp_path, events_file):
    note = tmp_path / "note.md"
    note.write_text("# Day\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "day",
            "sync",
            "2024-10-22",
            "--file",
            str(note),
            "--events-file",
            str(events_file),
            "--append",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "APPENDED:3 added" in result.output
    text = note.read_text(encoding="utf-8")
    assert text.startswith("# Day\n\n07:00 AM - ")
    assert titles(text) == ["Wake Up", "Standup", "Sleep"]


def test_sync_append_from_configuration(tmp_path, events_file):
    CONFIGURATION_REPO.update_config(append_when_missing=True)
    note = tmp_path / "note.md"
    note.write_text("", encoding="utf-8")

    result = runner.invoke(
        app,
        ["day", "sync", "2024-10-22", "--file", str(note), "--events-file", str(events_file)],
    )

    assert result.exit_code == 0, result.output
    assert "APPENDED:3 added" in result.output


def test_sync_invalid_date_is_a_usage_error(tmp_path, events_file):
    note = tmp_path / "note.md"
    note.write_text("", encoding="utf-8")

    result = runner.invoke(
        app,
        ["day", "sync", "2024-13-45", "--file", str(note), "--events-file", str(events_file)],
    )

    assert result.exit_code == 2


def test_sync_missing_note_fails(tmp_path, events_file):
    result = runner.invoke(
        app,
        [
            "day",
            "sync",
            "2024-10-22",
            "--file",
            str(tmp_path / "missing.md"),
            "--events-file",
            str(events_file),
        ],
    )

    assert result.exit_code == 1


def test_malformed_event_fails_when_configured(tmp_path):
    CONFIGURATION_REPO.update_config(malformed_events="fail")
    events = tmp_path / "events.yaml"
    events.write_text("- summary: Broken\n  start: {}\n  end: {}\n", encoding="utf-8")

    result = runner.invoke(app, ["day", "print", "2024-10-22", "--events-file", str(events)])

    assert result.exit_code == 1


def test_no_event_source_is_a_usage_error():
    result = runner.invoke(app, ["day", "print", "2024-10-22"])

    assert result.exit_code == 2


def test_print_plain_lines(events_file):
    result = runner.invoke(app, ["day", "print", "2024-10-22", "--events-file", str(events_file)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "07:00 AM - BOUNDARY:Wake Up - COLOR:1",
        "09:00 AM - Standup - COLOR:7",
        "11:00 PM - BOUNDARY:Sleep - COLOR:1",
    ]


def test_alias_commands(events_file):
    result = runner.invoke(app, ["d", "p", "2024-10-22", "-f", str(events_file)])

    assert result.exit_code == 0, result.output
    assert "09:00 AM - Standup - COLOR:7" in result.output


def test_render_markdown_lines(events_file):
    result = runner.invoke(app, ["day", "render", "2024-10-22", "--events-file", str(events_file)])

    assert result.exit_code == 0, result.output
    assert titles(result.output) == ["Wake Up", "Standup", "Sleep"]


def test_show_table(events_file):
    result = runner.invoke(
        app,
        ["--no-header", "day", "show", "2024-10-22", "--events-file", str(events_file), "-nc"],
    )

    assert result.exit_code == 0, result.output
    assert "Standup" in result.output
    assert "Wake Up" in result.output
    assert "Holiday" not in result.output


def test_recolor_markers(tmp_path):
    note = tmp_path / "note.md"
    wake_up = f"07:00 AM - {color_swatch('#828bc2')} **Wake Up**"
    note.write_text(f"{wake_up}\n{OLD_LINE}\n", encoding="utf-8")

    result = runner.invoke(app, ["recolor", str(note), "--markers"])

    assert result.exit_code == 0, result.output
    lines = note.read_text(encoding="utf-8").split("\n")
    assert recognize_event_line(lines[0])["color"] == BOUNDARY_MARKER_COLOR
    assert lines[1] == OLD_LINE


def test_recolor_theme(tmp_path):
    note = tmp_path / "note.md"
    note.write_text(OLD_LINE.replace("#828bc2", CalendarColor.SAGE.light) + "\n", encoding="utf-8")

    result = runner.invoke(
        app, ["rc", str(note), "--from-theme", "light", "--to-theme", "dark"]
    )

    assert result.exit_code == 0, result.output
    assert CalendarColor.SAGE.dark in note.read_text(encoding="utf-8")


def test_recolor_needs_something_to_do(tmp_path):
    note = tmp_path / "note.md"
    note.write_text("", encoding="utf-8")

    result = runner.invoke(app, ["recolor", str(note)])

    assert result.exit_code == 2


def test_config_set_and_view():
    result = runner.invoke(
        app,
        [
            "config",
            "set",
            "--evening-cutoff-hour",
            "20",
            "--malformed-events",
            "fail",
            "--theme",
            "light",
        ],
    )

    assert result.exit_code == 0, result.output
    config = CONFIGURATION_REPO.get_config()
    assert config["evening_cutoff_hour"] == 20
    assert config["malformed_events"] == "fail"
    assert config["theme"] == "light"

    result = runner.invoke(app, ["config", "view"])
    assert result.exit_code == 0, result.output
    assert "evening_cutoff_hour" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["--evening-cutoff-hour", "24"],
        ["--malformed-events", "ignore"],
        ["--nap-threshold-hours", "-1"],
    ],
)
def test_config_set_rejects_bad_values(args):
    result = runner.invoke(app, ["config", "set", *args])

    assert result.exit_code == 2


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "daybound" in result.output
