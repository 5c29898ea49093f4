from __future__ import annotations

__all__ = [
    "__version__",
    "CHECKS",
    "CheckRunner",
    "ProbeError",
    "RunSummary",
    "SmokeConfig",
    "run",
]

__version__ = "0.1.0"

from .api import run  # noqa: E402
from .config import SmokeConfig  # noqa: E402
from .endpoints import CHECKS  # noqa: E402
from .errors import ProbeError  # noqa: E402
from .report import RunSummary  # noqa: E402
from .runner import CheckRunner  # noqa: E402
