"""TAP version 13 reporter for browser test runs.

The host drives the hooks in order: ``on_run_start``, then for every browser
``on_browser_start``, any number of ``spec_*`` callbacks and
``on_browser_complete``, and finally ``on_run_complete``. Results are buffered
per browser and written when that browser completes.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Optional

from ..config import ReporterConfig
from ..formatters import dump_failures, format_error as default_format_error, format_ua as default_format_ua
from ..runners.runner import NOT_OK, OK, BrowserSuite, RunState, SpecResult
from .sinks import Sink, make_sink

log = logging.getLogger(__name__)

LINE = "{status} {index} {browser} :: {suites} :: {description}"

class TapReporter:
    def __init__(
        self,
        sink: Optional[Sink] = None,
        format_error: Callable[[Any, str], str] = default_format_error,
        format_ua: Callable[[str], str] = default_format_ua,
        config: Optional[ReporterConfig] = None,
    ):
        self.sink = sink if sink is not None else make_sink(config)
        self.format_error = format_error
        self.format_ua = format_ua
        self.state = RunState()

    def write(self, msg: str) -> None:
        self.sink.write(msg)

    def writeln(self, line: str) -> None:
        self.write(line + "\n")

    def on_run_start(self) -> None:
        self.state = RunState()
        log.debug("Run started")
        self.writeln("TAP version 13")

    def on_browser_start(self, browser) -> None:
        full_name = getattr(browser, "full_name", None) or getattr(browser, "fullName", "")
        self.state.suites[browser.id] = BrowserSuite(name=self.format_ua(full_name))

    def on_browser_complete(self, browser) -> None:
        suite = self.state.suites.get(browser.id)
        if suite is None:
            # browser timed out before it started reporting
            log.warning("Browser %s completed without starting, skipped", browser.id)
            return

        self.writeln(f"# {suite.name}")
        for spec in suite.specs:
            line = LINE.format(
                status=spec.result,
                index=self.state.next_index(),
                browser=suite.name,
                suites=" ".join(spec.suite),
                description=spec.description,
            )
            self.writeln(line + " # SKIP" if spec.skipped else line)
            if spec.failures:
                self.writeln("  ---")
                self.writeln(dump_failures(spec.failures, indent=4))
                self.writeln("  ...")

        suite.complete = True
        self.state.total += len(suite.specs)
        log.debug("Browser %s complete: %d specs", suite.name, len(suite.specs))

    def spec_success(self, browser, result) -> None:
        suite = self.state.suites[browser.id]
        suite.specs.append(SpecResult(description=result.description, suite=list(result.suite), result=OK))

    def spec_failure(self, browser, result) -> None:
        suite = self.state.suites[browser.id]
        spec = SpecResult(description=result.description, suite=list(result.suite), result=NOT_OK)
        for err in result.log:
            spec.failures.append(self.format_error(err, ""))
        suite.specs.append(spec)
        self.state.failures += 1

    def spec_skipped(self, browser, result) -> None:
        suite = self.state.suites[browser.id]
        suite.specs.append(SpecResult(description=result.description, suite=list(result.suite), result=OK, skipped=True))
        self.state.skips += 1

    def on_run_complete(self) -> None:
        st = self.state
        for suite in st.discard_incomplete():
            log.warning("Browser %s never completed, its %d specs are not reported", suite.name, len(suite.specs))
        self.writeln(f"\n1..{st.total}")
        self.writeln(f"# tests {st.total}")
        self.writeln(f"# pass {st.passed}")
        if st.skips:
            self.writeln(f"# skip {st.skips}")
        self.writeln(f"# fail {st.failures}")
        if not st.failures:
            self.writeln("# ok")
        log.debug("Run complete: %d tests, %d failures, %d skipped", st.total, st.failures, st.skips)

    # hook names as the browser test host dispatches them
    onRunStart = on_run_start
    onBrowserStart = on_browser_start
    onBrowserComplete = on_browser_complete
    specSuccess = spec_success
    specFailure = spec_failure
    specSkipped = spec_skipped
    onRunComplete = on_run_complete
