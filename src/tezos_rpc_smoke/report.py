from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum


class ResultStatus(str, Enum):
    PASS = "PASSED"
    FAIL = "FAILED"


class Timer:
    def __init__(self) -> None:
        self._start = time.perf_counter()

    def elapsed_ms(self) -> int:
        return int((time.perf_counter() - self._start) * 1000)


@dataclass(frozen=True)
class CheckResult:
    name: str
    path: str
    status: ResultStatus
    message: str
    duration_ms: int | None = None

    @property
    def passed(self) -> bool:
        return self.status == ResultStatus.PASS


@dataclass
class RunSummary:
    """Aggregate counters only; individual results are not retained."""

    succeeded: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.succeeded + self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def record(self, result: CheckResult) -> None:
        if result.passed:
            self.succeeded += 1
        else:
            self.failed += 1

    def failure_message(self) -> str | None:
        if self.ok:
            return None
        return f"{self.failed} out of {self.total} tests failed"
