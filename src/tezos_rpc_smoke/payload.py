from __future__ import annotations

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Strict, StrictStr, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("Input should be a number, not a boolean")
    return value


# JSON numbers only: ints and floats, never strings or booleans.
Number = Annotated[float, Strict(), BeforeValidator(_reject_bool)]


class _NodeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class BlockRef(_NodeModel):
    level: Number


class CheckpointInfo(_NodeModel):
    block: BlockRef


class BandwidthStats(_NodeModel):
    total_sent: StrictStr
    total_recv: StrictStr


class WorkerStatus(_NodeModel):
    phase: StrictStr


class WorkerState(_NodeModel):
    status: WorkerStatus


class DdbState(_NodeModel):
    active_chains: Number
    active_connections: Number


def _describe(exc: ValidationError, at: str) -> str:
    err = exc.errors()[0]
    parts = [at] if at else []
    parts.extend(str(part) for part in err["loc"])
    location = ".".join(parts) or "<root>"
    return f"{location}: {err['msg']}"


def view(model: type[ModelT], payload: Any, *, at: str = "") -> tuple[ModelT | None, str | None]:
    """
    Read a decoded payload through a typed model.

    Returns `(instance, None)` on success, or `(None, "<field>: <problem>")` when a field
    is missing or has the wrong type. `at` prefixes the reported field path.
    """

    try:
        return model.model_validate(payload), None
    except ValidationError as exc:
        return None, _describe(exc, at)
