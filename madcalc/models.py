"""Data models for madcalc.

Evaluation is the tagged value-or-error record returned by try_evaluate() and
printed by ``madcalc eval --json``.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from madcalc.errors import ParseError


def _json_number(value: float) -> Union[float, str]:
    """JSON has no infinities or NaN, so those become strings."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value


@dataclass
class Evaluation:
    """Outcome of evaluating one expression.

    Exactly one of ``value`` and ``error`` is set.
    """

    expression: str
    value: Optional[float] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[str]:
        if self.error is None:
            return None
        return self.error.kind.value

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        d = {
            "expression": self.expression,
            "ok": self.ok,
            "value": _json_number(self.value) if self.value is not None else None,
            "error": None,
        }
        if self.error is not None:
            d["error"] = {
                "kind": self.kind,
                "message": str(self.error),
                "position": self.error.position,
            }
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
