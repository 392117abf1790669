"""Recorded browser test runs, replayed through a reporter's lifecycle hooks."""
from __future__ import annotations
import logging
import pathlib
from typing import Any, List, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .runner import RunState

log = logging.getLogger(__name__)

class RecordedSpec(BaseModel):
    description: str
    suite: List[str] = Field(default_factory=list)
    status: Literal["success", "failure", "skipped"] = "success"
    log: List[Any] = Field(default_factory=list, description="Raw errors, failure only")

class RecordedBrowser(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    full_name: str = Field(..., alias="fullName")
    complete: bool = Field(True, description="False when the browser timed out before completing")
    specs: List[RecordedSpec] = Field(default_factory=list)

class Recording(BaseModel):
    browsers: List[RecordedBrowser] = Field(default_factory=list)

def load_recording(path: str) -> Recording:
    # JSON is a subset of YAML, so both formats load here
    data = yaml.safe_load(pathlib.Path(path).read_text(encoding="utf-8")) or {}
    return Recording.model_validate(data)

def replay(recording: Recording, reporter) -> RunState:
    """Drive ``reporter`` through one run in host hook order."""
    reporter.on_run_start()
    for browser in recording.browsers:
        reporter.on_browser_start(browser)
        for spec in browser.specs:
            if spec.status == "failure":
                reporter.spec_failure(browser, spec)
            elif spec.status == "skipped":
                reporter.spec_skipped(browser, spec)
            else:
                reporter.spec_success(browser, spec)
        if browser.complete:
            reporter.on_browser_complete(browser)
        else:
            log.info("Browser %s did not complete, results dropped", browser.id)
    reporter.on_run_complete()
    return reporter.state
