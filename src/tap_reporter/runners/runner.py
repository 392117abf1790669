from dataclasses import dataclass, field
from typing import List, Dict

OK = "ok"
NOT_OK = "not ok"

@dataclass
class SpecResult:
    description: str
    suite: List[str]
    result: str = OK
    skipped: bool = False
    failures: List[str] = field(default_factory=list)

@dataclass
class BrowserSuite:
    name: str
    specs: List[SpecResult] = field(default_factory=list)
    complete: bool = False

    @property
    def failed(self) -> int: return sum(1 for s in self.specs if s.result == NOT_OK)
    @property
    def skipped(self) -> int: return sum(1 for s in self.specs if s.skipped)

@dataclass
class RunState:
    """Accumulator for one test run; thrown away when the next run starts."""
    suites: Dict[str, BrowserSuite] = field(default_factory=dict)
    total: int = 0
    failures: int = 0
    skips: int = 0
    idx: int = 1

    @property
    def passed(self) -> int: return self.total - self.failures

    def next_index(self) -> int:
        idx = self.idx
        self.idx += 1
        return idx

    def discard_incomplete(self) -> List[BrowserSuite]:
        """Drop suites that never completed, taking back their failure and skip counts."""
        dropped = [s for s in self.suites.values() if not s.complete]
        for suite in dropped:
            self.failures -= suite.failed
            self.skips -= suite.skipped
        self.suites = {k: s for k, s in self.suites.items() if s.complete}
        return dropped
