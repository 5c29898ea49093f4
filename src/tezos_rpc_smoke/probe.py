from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from jsonschema import Draft202012Validator

from .errors import ProbeError
from .http import HttpClient


class Shape(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"


_SHAPE_VALIDATORS = {
    shape: Draft202012Validator({"type": shape.value}) for shape in Shape
}


@dataclass(frozen=True)
class ProbeResult:
    url: str
    status_code: int
    payload: Any
    raw: str = ""
    error: ProbeError | None = None

    def is_empty(self) -> bool:
        return self.payload is None or len(self.payload) == 0


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not allowed")


def _finite_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"number {raw} is out of range")
    return value


def decode_payload(text: str, shape: Shape) -> Any:
    """
    Decode a JSON body and check it has the expected top-level shape.

    Raises `ProbeError` with kind `decode` on malformed JSON, non-finite numbers
    or a shape mismatch.
    """

    try:
        data = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        raise ProbeError("decode", f"invalid JSON: {exc}") from exc

    errors = list(_SHAPE_VALIDATORS[shape].iter_errors(data))
    if errors:
        raise ProbeError("decode", f"expected {shape.value}: {errors[0].message}")
    return data


class Prober:
    def __init__(self, client: HttpClient) -> None:
        self._client = client

    def probe(self, path: str, shape: Shape) -> ProbeResult:
        try:
            resp = self._client.get(path)
        except ProbeError as exc:
            return ProbeResult(url=exc.url or self._client.url_for(path), status_code=0, payload=None, error=exc)

        text = resp.text
        try:
            payload = decode_payload(text, shape)
        except ProbeError as exc:
            return ProbeResult(url=resp.url, status_code=resp.status_code, payload=None, raw=text, error=exc)
        return ProbeResult(url=resp.url, status_code=resp.status_code, payload=payload, raw=text)
