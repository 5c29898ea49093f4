from __future__ import annotations

from typing import Literal

ProbeErrorKind = Literal["transport", "decode"]


class ProbeError(Exception):
    def __init__(self, kind: ProbeErrorKind, message: str, *, url: str | None = None) -> None:
        self.kind = kind
        self.message = message
        self.url = url

        super().__init__(str(self))

    def __str__(self) -> str:
        if self.kind == "transport":
            return f"transport error: {self.message}"
        return f"decode error: {self.message}"


class UsageError(ValueError):
    pass
