from __future__ import annotations

from .config import SmokeConfig
from .report import RunSummary
from .runner import CheckRunner


def run(config: SmokeConfig) -> RunSummary:
    """
    Run every registered check once against the node described by `config`.

    The returned summary carries only pass/fail counts.
    """

    return CheckRunner(config).run()
