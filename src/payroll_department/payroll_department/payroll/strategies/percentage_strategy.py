from __future__ import annotations

from ...core.constants import MAX_BONUS_PERCENT
from ...core.exceptions import InvalidRateError
from .base import BonusStrategy


class PercentageBonusStrategy(BonusStrategy):
    """Adds ``bonus_percent`` percent on top of base pay.

    The range check happens once, here; ``compute_pay`` has no failure path.
    """

    def __init__(self, bonus_percent: float):
        if not (bonus_percent >= 0):
            raise InvalidRateError("bonus percent must be >= 0")
        if not (bonus_percent <= MAX_BONUS_PERCENT):
            raise InvalidRateError("bonus percent cannot exceed 100%")
        self._bonus_percent = float(bonus_percent)

    @property
    def bonus_percent(self) -> float:
        return self._bonus_percent

    def compute_pay(self, base_pay: float) -> float:
        return base_pay * (1.0 + self._bonus_percent / 100.0)

    def __repr__(self) -> str:
        return f"PercentageBonusStrategy({self._bonus_percent!r})"
