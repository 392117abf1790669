from types import SimpleNamespace

import pytest

from tap_reporter.reporters.tap import TapReporter


class ListSink:
    """Collects writes in memory."""

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def write(self, msg: str) -> None:
        self.chunks.append(msg)

    @property
    def text(self) -> str:
        return "".join(self.chunks)

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()


@pytest.fixture
def sink() -> ListSink:
    return ListSink()


@pytest.fixture
def reporter(sink: ListSink) -> TapReporter:
    return TapReporter(sink=sink)


@pytest.fixture
def make_browser():
    def _make(id: str = "b1", full_name: str = "Chrome 90"):
        return SimpleNamespace(id=id, full_name=full_name)

    return _make


@pytest.fixture
def make_spec():
    def _make(description: str, suite=("Math",), log=()):
        return SimpleNamespace(description=description, suite=list(suite), log=list(log))

    return _make
