"""Tests for output sinks and outfile preparation."""

import io
from pathlib import Path

import pytest

from tap_reporter.config import ReporterConfig
from tap_reporter.reporters.sinks import FileSink, StreamSink, make_sink
from tap_reporter.reporters.tap import TapReporter
from tap_reporter.utils.artifacts import prepare_outfile


def test_stream_sink_writes_to_stream() -> None:
    """Writes messages verbatim to the given stream."""
    stream = io.StringIO()
    sink = StreamSink(stream)

    sink.write("TAP version 13\n")
    sink.write("1..0\n")

    assert stream.getvalue() == "TAP version 13\n1..0\n"


def test_stream_sink_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Writes to stdout when no stream is given."""
    StreamSink().write("ok 1 x :: y :: z\n")

    assert capsys.readouterr().out == "ok 1 x :: y :: z\n"


class EmptyStream(io.StringIO):
    """Stream that is falsy while it holds nothing."""

    def __bool__(self) -> bool:
        return bool(self.getvalue())


def test_stream_sink_keeps_falsy_stream(capsys: pytest.CaptureFixture[str]) -> None:
    """A falsy stream is still the target, not stdout."""
    stream = EmptyStream()

    StreamSink(stream).write("TAP version 13\n")

    assert stream.getvalue() == "TAP version 13\n"
    assert capsys.readouterr().out == ""


def test_make_sink_without_outfile() -> None:
    """Falls back to stdout without an outfile."""
    assert isinstance(make_sink(), StreamSink)
    assert isinstance(make_sink(ReporterConfig()), StreamSink)


def test_make_sink_with_outfile(tmp_path: Path) -> None:
    """Builds a file sink for a configured outfile."""
    sink = make_sink(ReporterConfig(outfile=str(tmp_path / "out.tap")))

    assert isinstance(sink, FileSink)
    assert sink.path == tmp_path / "out.tap"


def test_file_sink_appends(tmp_path: Path) -> None:
    """Every write is appended to the file."""
    path = tmp_path / "out.tap"
    sink = FileSink(str(path))

    sink.write("TAP version 13\n")
    sink.write("1..0\n")

    assert path.read_text(encoding="utf-8") == "TAP version 13\n1..0\n"


def test_file_sink_removes_previous_output(tmp_path: Path) -> None:
    """Starts from an empty file even when one exists."""
    path = tmp_path / "out.tap"
    path.write_text("stale\n")

    FileSink(str(path))

    assert not path.exists()


def test_prepare_outfile_creates_parents(tmp_path: Path) -> None:
    """Creates missing parent directories recursively."""
    path = tmp_path / "reports" / "browsers" / "out.tap"

    assert prepare_outfile(str(path)) == path
    assert path.parent.is_dir()


def test_prepare_outfile_missing_file_is_fine(tmp_path: Path) -> None:
    """A missing file and existing directory are not errors."""
    path = tmp_path / "out.tap"

    prepare_outfile(str(path))
    prepare_outfile(str(path))

    assert not path.exists()


def test_prepare_outfile_directory_in_the_way(tmp_path: Path) -> None:
    """Fails when the outfile path cannot be removed."""
    path = tmp_path / "out.tap"
    path.mkdir()

    with pytest.raises(OSError):
        prepare_outfile(str(path))


def test_prepare_outfile_parent_is_a_file(tmp_path: Path) -> None:
    """Fails when a parent directory cannot be created."""
    (tmp_path / "reports").write_text("not a directory")

    with pytest.raises(OSError):
        prepare_outfile(str(tmp_path / "reports" / "out.tap"))


def test_reporter_setup_error_propagates(tmp_path: Path) -> None:
    """Reporter construction fails with the setup error."""
    path = tmp_path / "out.tap"
    path.mkdir()

    with pytest.raises(OSError):
        TapReporter(config=ReporterConfig(outfile=str(path)))


def _run_once(path: Path, description: str) -> None:
    from types import SimpleNamespace

    reporter = TapReporter(config=ReporterConfig(outfile=str(path)))
    browser = SimpleNamespace(id="b1", full_name="Chrome 90")
    reporter.on_run_start()
    reporter.on_browser_start(browser)
    reporter.spec_success(browser, SimpleNamespace(description=description, suite=["Math"]))
    reporter.on_browser_complete(browser)
    reporter.on_run_complete()


def test_second_run_replaces_first(tmp_path: Path) -> None:
    """Re-running with the same outfile keeps only the second run."""
    path = tmp_path / "out" / "results.tap"

    _run_once(path, "first run")
    _run_once(path, "second run")

    text = path.read_text(encoding="utf-8")
    assert text.count("TAP version 13") == 1
    assert "first run" not in text
    assert "ok 1 Chrome 90 :: Math :: second run" in text
