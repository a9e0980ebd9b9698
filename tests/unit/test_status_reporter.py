from __future__ import annotations

from encoder_captions.status import StatusReporter
from encoder_captions.state import StatusReport, ConnectionStatus


def _reporter(clock: list[float], seen: list[StatusReport]) -> StatusReporter:
    return StatusReporter(
        seen.append,
        initial=StatusReport(ConnectionStatus.CONNECTING, "Initialising"),
        debounce_s=1.0,
        now_fn=lambda: clock[0],
    )


def test_initial_status_is_published() -> None:
    seen: list[StatusReport] = []
    reporter = _reporter([0.0], seen)
    assert seen == [StatusReport(ConnectionStatus.CONNECTING, "Initialising")]
    assert reporter.current.status is ConnectionStatus.CONNECTING


def test_identical_reports_within_window_are_coalesced() -> None:
    clock = [0.0]
    seen: list[StatusReport] = []
    reporter = _reporter(clock, seen)

    assert reporter.update_status(ConnectionStatus.OK, "Connected")
    clock[0] = 0.5
    assert not reporter.update_status(ConnectionStatus.OK, "Connected")
    assert [r.status for r in seen] == [ConnectionStatus.CONNECTING, ConnectionStatus.OK]


def test_identical_report_after_window_is_published_again() -> None:
    clock = [0.0]
    seen: list[StatusReport] = []
    reporter = _reporter(clock, seen)

    reporter.update_status(ConnectionStatus.UNKNOWN_ERROR, "Error received")
    clock[0] = 1.5
    assert reporter.update_status(ConnectionStatus.UNKNOWN_ERROR, "Error received")
    assert len(seen) == 3


def test_message_change_is_not_coalesced() -> None:
    clock = [0.0]
    seen: list[StatusReport] = []
    reporter = _reporter(clock, seen)

    reporter.update_status(ConnectionStatus.CONNECTING, "Connecting to a:1")
    assert reporter.update_status(ConnectionStatus.CONNECTING, "Connecting to b:1")
    assert reporter.current.message == "Connecting to b:1"


def test_destroy_releases_reporter() -> None:
    seen: list[StatusReport] = []
    reporter = _reporter([0.0], seen)
    reporter.destroy()
    assert not reporter.update_status(ConnectionStatus.OK, "Connected")
    assert len(seen) == 1
