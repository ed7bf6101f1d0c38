from __future__ import annotations

from .base import BonusStrategy


class NoBonusStrategy(BonusStrategy):
    """Final pay equals base pay."""

    def compute_pay(self, base_pay: float) -> float:
        return base_pay

    def __repr__(self) -> str:
        return "NoBonusStrategy()"
