from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Sequence

from .config import SmokeConfig
from .endpoints import CHECKS, CheckDefinition
from .http import HttpClient
from .probe import ProbeResult, Prober
from .report import CheckResult, ResultStatus, RunSummary, Timer
from .validators import Validator

logger = logging.getLogger(__name__)

_MAX_BODY_CHARS = 200


class RunnerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


def _clip(text: str) -> str:
    text = text.strip()
    if len(text) > _MAX_BODY_CHARS:
        return text[:_MAX_BODY_CHARS] + "..."
    return text


def _failure_detail(result: ProbeResult, validators: Iterable[Validator]) -> str | None:
    if result.error is not None and result.error.kind == "transport":
        return str(result.error)
    if result.error is not None:
        return f"{result.status_code} {result.error} body: {_clip(result.raw)!r}"
    if result.status_code != 200 or result.is_empty():
        return f"{result.status_code} {_clip(result.raw)}"
    for validator in validators:
        detail = validator(result.status_code, result.payload)
        if detail is not None:
            return detail
    return None


def evaluate_outcome(
    *,
    name: str,
    path: str,
    result: ProbeResult,
    validators: Sequence[Validator] = (),
    timer: Timer | None = None,
) -> CheckResult:
    """
    Turn one probe result into exactly one PASSED or FAILED outcome.

    Predicates are applied in priority order: transport error, decode error,
    non-200 status or empty payload, then each endpoint validator in turn.
    """

    detail = _failure_detail(result, validators)
    if detail is None:
        status = ResultStatus.PASS
        message = f"{status.value}: {path} {result.status_code}"
    else:
        status = ResultStatus.FAIL
        message = f"{status.value}: {path} {detail}"
    return CheckResult(
        name=name,
        path=path,
        status=status,
        message=message,
        duration_ms=None if timer is None else timer.elapsed_ms(),
    )


class CheckRunner:
    def __init__(
        self,
        config: SmokeConfig,
        *,
        checks: Sequence[CheckDefinition] = CHECKS,
        prober: Prober | None = None,
    ) -> None:
        self._config = config
        self._checks = tuple(checks)
        self._prober = prober or Prober(
            HttpClient(base_url=config.base_url, auth_token=config.auth_token, timeout=config.timeout_s)
        )
        self._summary = RunSummary()
        self.state = RunnerState.IDLE

    def run(self) -> RunSummary:
        if self.state != RunnerState.IDLE:
            raise RuntimeError(f"CheckRunner already {self.state.value}; create a new runner per run")

        self.state = RunnerState.RUNNING
        logger.debug("Running %d checks against %s (chain %s)", len(self._checks), self._config.base_url, self._config.chain)
        for check in self._checks:
            result = self._run_one(check)
            logger.info(result.message)
            logger.debug("%s %s took %d ms", result.name, result.path, result.duration_ms)
            self._summary.record(result)
        self.state = RunnerState.COMPLETED
        return self._summary

    def _run_one(self, check: CheckDefinition) -> CheckResult:
        timer = Timer()
        path = check.path_template
        try:
            path = check.path(self._config.chain)
            result = self._prober.probe(path, check.shape)
            return evaluate_outcome(
                name=check.name,
                path=path,
                result=result,
                validators=check.validators,
                timer=timer,
            )
        except Exception as exc:
            logger.exception("Check %s raised", check.name)
            return CheckResult(
                name=check.name,
                path=path,
                status=ResultStatus.FAIL,
                message=f"{ResultStatus.FAIL.value}: {path} {exc.__class__.__name__}: {exc}",
                duration_ms=timer.elapsed_ms(),
            )
