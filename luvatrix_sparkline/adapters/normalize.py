from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from luvatrix_sparkline.errors import InvalidInputError


def coerce_samples(values: Any) -> np.ndarray:
    """Return samples as a 1-D float64 array, rejecting empty or non-finite input."""
    arr = _coerce_1d_numeric(values)
    if arr.size == 0:
        raise InvalidInputError("samples must not be empty")
    bad = np.flatnonzero(~np.isfinite(arr))
    if bad.size:
        idx = int(bad[0])
        raise InvalidInputError(f"samples must be finite, got {arr[idx]!r} at index {idx}")
    return arr


def _coerce_1d_numeric(value: Any) -> np.ndarray:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise InvalidInputError("samples must be 1-D")
        return _coerce_ndarray(value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if not _is_flat(value):
            raise InvalidInputError("samples must be 1-D")
        return _coerce_ndarray(np.asarray(value, dtype=object))

    raise InvalidInputError(f"unsupported samples input type: {type(value)!r}")


def _is_flat(value: Sequence[Any]) -> bool:
    return not any(isinstance(v, (Sequence, np.ndarray)) and not isinstance(v, (str, bytes)) for v in value)


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None or isinstance(raw, (bool, str, bytes)):
            raise InvalidInputError(f"samples contain non-numeric value at index {i}: {raw!r}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"samples contain non-numeric value at index {i}: {raw!r}") from exc
    return out
