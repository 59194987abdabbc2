from datetime import date, timedelta
from pathlib import Path

import pytest
from typer.testing import CliRunner

from countdown import __version__
from countdown.domain.models.event import Event, format_date
from countdown.infrastructure.storage.yaml_store import YamlEventStore
from countdown.main import app

# These fixtures are defined in tests/conftest.py:
# runner: CliRunner
# countdown_home: Path (COUNTDOWN_HOME for the invocation)


@pytest.fixture
def events_file(countdown_home: Path) -> Path:
    return countdown_home / "events.yaml"


@pytest.fixture
def seeded_store(events_file: Path) -> YamlEventStore:
    """Stores a past event, one due today and three upcoming ones."""
    today = date.today()
    store = YamlEventStore(events_file)
    for name, offset in [("Soon", 3), ("Past", -5), ("Far", 400), ("Today", 0), ("Middle", 30)]:
        store.append(Event(name=name, date=today + timedelta(days=offset)))
    return store


def lines(result):
    return result.output.splitlines()


def test_list_with_no_events_prints_nothing(runner: CliRunner, events_file: Path):
    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    assert result.output == ""
    assert not events_file.exists()


def test_list_defaults_to_soonest_first(runner: CliRunner, seeded_store):
    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    assert lines(result) == [
        "0 days until Today",
        "3 days until Soon",
        "30 days until Middle",
        "400 days until Far",
    ]


def test_list_time_desc_with_limit(runner: CliRunner, seeded_store):
    result = runner.invoke(app, ["-o", "time-desc", "-n", "2"])
    assert result.exit_code == 0, result.output
    assert lines(result) == ["400 days until Far", "30 days until Middle"]


def test_list_long_option_names(runner: CliRunner, seeded_store):
    result = runner.invoke(app, ["--order", "time-asc", "--n", "1"])
    assert result.exit_code == 0, result.output
    assert lines(result) == ["0 days until Today"]


def test_list_shuffle_shows_every_upcoming_event(runner: CliRunner, seeded_store):
    result = runner.invoke(app, ["--order", "shuffle"])
    assert result.exit_code == 0, result.output
    assert sorted(lines(result)) == sorted([
        "0 days until Today",
        "3 days until Soon",
        "30 days until Middle",
        "400 days until Far",
    ])


def test_add_event_then_list(runner: CliRunner, events_file: Path):
    result = runner.invoke(app, ["add-event", "-e", "Birthday", "-d", "21-3-2133"])
    assert result.exit_code == 0, result.output
    assert "Added 'Birthday' on 21-03-2133" in result.output

    assert YamlEventStore(events_file).load() == [Event(name="Birthday", date=date(2133, 3, 21))]

    result = runner.invoke(app, ["-o", "time-asc"])
    expected_days = (date(2133, 3, 21) - date.today()).days
    assert result.exit_code == 0, result.output
    assert lines(result) == [f"{expected_days} days until Birthday"]


def test_add_event_long_options(runner: CliRunner, events_file: Path):
    tomorrow = date.today() + timedelta(days=1)
    result = runner.invoke(app, ["add-event", "--event", "Dentist", "--date", format_date(tomorrow)])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, [])
    assert lines(result) == ["1 days until Dentist"]


def test_add_event_allows_duplicates(runner: CliRunner, events_file: Path):
    for _ in range(2):
        result = runner.invoke(app, ["add-event", "-e", "Launch", "-d", "10-06-2130"])
        assert result.exit_code == 0, result.output
    assert len(YamlEventStore(events_file).load()) == 2


def test_add_event_rejects_invalid_calendar_date(runner: CliRunner, events_file: Path):
    result = runner.invoke(app, ["add-event", "-e", "X", "-d", "31-02-2025"])
    assert result.exit_code == 1
    assert "31-02-2025" in result.output
    assert not events_file.exists()


def test_add_event_rejects_malformed_date(runner: CliRunner, seeded_store):
    before = seeded_store.path.read_bytes()
    result = runner.invoke(app, ["add-event", "-e", "X", "-d", "2025-02-01"])
    assert result.exit_code == 1
    assert seeded_store.path.read_bytes() == before


def test_add_event_rejects_blank_name(runner: CliRunner, events_file: Path):
    result = runner.invoke(app, ["add-event", "-e", "  ", "-d", "01-01-2130"])
    assert result.exit_code == 1
    assert "must not be empty" in result.output
    assert not events_file.exists()


@pytest.mark.parametrize("args", [
    ["add-event", "-e", "X"],
    ["add-event", "-d", "01-01-2130"],
    ["add-event", "-e", "X", "-d", "01-01-2130", "--bogus"],
])
def test_add_event_usage_errors(runner: CliRunner, events_file: Path, args):
    result = runner.invoke(app, args)
    assert result.exit_code == 2
    assert not events_file.exists()


@pytest.mark.parametrize("limit", ["0", "-3"])
def test_non_positive_limit_fails(runner: CliRunner, seeded_store, limit):
    result = runner.invoke(app, ["-n", limit])
    assert result.exit_code == 1
    assert "positive integer" in result.output


@pytest.mark.parametrize("args", [
    ["-n", "three"],
    ["-o", "newest"],
    ["--unknown"],
    ["-n"],
])
def test_list_usage_errors(runner: CliRunner, countdown_home: Path, args):
    result = runner.invoke(app, args)
    assert result.exit_code == 2


def test_corrupt_event_file_fails(runner: CliRunner, events_file: Path):
    events_file.write_text("events:\n  - name: Launch\n", encoding="utf-8")
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "date" in result.output


@pytest.mark.parametrize("flag", ["-V", "--version"])
def test_version(runner: CliRunner, countdown_home: Path, flag):
    result = runner.invoke(app, [flag])
    assert result.exit_code == 0
    assert result.output.strip() == f"countdown {__version__}"


def test_version_takes_precedence(runner: CliRunner, countdown_home: Path):
    result = runner.invoke(app, ["-n", "0", "-V"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(runner: CliRunner, countdown_home: Path, flag):
    result = runner.invoke(app, [flag])
    assert result.exit_code == 0
    assert "add-event" in result.output
    assert "--order" in result.output


def test_add_event_help(runner: CliRunner, countdown_home: Path):
    result = runner.invoke(app, ["add-event", "-h"])
    assert result.exit_code == 0
    assert "--event" in result.output
    assert "--date" in result.output


def test_events_file_from_environment(runner: CliRunner, countdown_home: Path, tmp_path: Path, monkeypatch):
    custom = tmp_path / "custom" / "mine.yaml"
    monkeypatch.setenv("COUNTDOWN_EVENTS_FILE", str(custom))

    result = runner.invoke(app, ["add-event", "-e", "Launch", "-d", "10-06-2130"])

    assert result.exit_code == 0, result.output
    assert custom.is_file()
    assert not (countdown_home / "events.yaml").exists()


@pytest.mark.parametrize("args", [[], ["add-event", "-e", "Launch", "-d", "10-06-2130"]])
def test_undecodable_event_file_fails_cleanly(runner: CliRunner, events_file: Path, args):
    events_file.write_bytes(b"\xff\xfe garbage")
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "decode" in result.output
    assert events_file.read_bytes() == b"\xff\xfe garbage"


def test_errors_are_reported_once_without_log_lines(runner: CliRunner, seeded_store):
    result = runner.invoke(app, ["-n", "0"])
    assert result.exit_code == 1
    assert "positive integer" in result.output
    assert " - ERROR - " not in result.output
    assert "command_handler" not in result.output


@pytest.mark.parametrize("options", [["-n", "2"], ["-o", "shuffle"], ["-n", "0", "-o", "time-desc"]])
def test_list_options_conflict_with_add_event(runner: CliRunner, events_file: Path, options):
    result = runner.invoke(app, options + ["add-event", "-e", "X", "-d", "01-01-2130"])
    assert result.exit_code == 2
    assert "add-event" in result.output
    assert not events_file.exists()
