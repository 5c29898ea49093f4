from __future__ import annotations

import math
import re
from typing import Any, Callable

from .payload import BandwidthStats, CheckpointInfo, DdbState, WorkerState, view

# A validator returns None when the payload is acceptable, otherwise the failure detail.
Validator = Callable[[int, Any], str | None]

RUNNING_PHASE = "running"

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _invalid(status_code: int, problem: str) -> str:
    return f"{status_code} invalid payload: {problem}"


def _parse_counter(raw: str) -> float:
    # Unparsable counters count as zero. No whitespace or digit separators.
    if not _DECIMAL_RE.fullmatch(raw):
        return 0.0
    value = float(raw)
    return value if math.isfinite(value) else 0.0


def checkpoint_level_positive(status_code: int, payload: Any) -> str | None:
    checkpoint, problem = view(CheckpointInfo, payload)
    if checkpoint is None:
        return _invalid(status_code, problem)
    if checkpoint.block.level <= 0:
        return f"{status_code} expected level greater than 0 got {int(checkpoint.block.level)}"
    return None


def bandwidth_nonzero(status_code: int, payload: Any) -> str | None:
    stats, problem = view(BandwidthStats, payload)
    if stats is None:
        return _invalid(status_code, problem)
    sent = _parse_counter(stats.total_sent)
    recv = _parse_counter(stats.total_recv)
    if sent == 0 or recv == 0:
        return f"{status_code} total data sent {int(sent)} total data received {int(recv)}"
    return None


def _phase_detail(phase: str) -> str:
    return f"phase: '{phase}' but expected '{RUNNING_PHASE}'"


def worker_running(status_code: int, payload: Any) -> str | None:
    worker, problem = view(WorkerState, payload)
    if worker is None:
        return _invalid(status_code, problem)
    if worker.status.phase != RUNNING_PHASE:
        return _phase_detail(worker.status.phase)
    return None


def ddb_active(status_code: int, payload: Any) -> str | None:
    ddb, problem = view(DdbState, payload)
    if ddb is None:
        return _invalid(status_code, problem)
    if ddb.active_chains == 0 or ddb.active_connections == 0:
        return f"active_chains: {int(ddb.active_chains)} active_connections: {int(ddb.active_connections)}"
    return None


def first_worker_running(status_code: int, payload: Any) -> str | None:
    """Only the first entry is inspected; the primary prevalidator is listed first."""

    if not payload:
        return _invalid(status_code, "[0]: empty list")
    worker, problem = view(WorkerState, payload[0], at="[0]")
    if worker is None:
        return _invalid(status_code, problem)
    if worker.status.phase != RUNNING_PHASE:
        return _phase_detail(worker.status.phase)
    return None
