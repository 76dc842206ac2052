"""Finite-value guard for computed quantities.

Inputs are validated as finite, but products of large finite inputs can
still overflow to ``inf`` (or collapse to ``nan``).  Stages pass every
derived quantity through ``require_finite`` before it reaches a model.
"""

from __future__ import annotations

import math

from archgen.common.exceptions import DegenerateGeometry


def require_finite(value: float, quantity: str, element_id: str | None = None) -> float:
    if not math.isfinite(value):
        raise DegenerateGeometry(element_id, f"{quantity} is not finite ({value})")
    return value
