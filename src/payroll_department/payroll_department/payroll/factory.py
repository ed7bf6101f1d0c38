from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import MAX_BONUS_PERCENT
from ..core.exceptions import InvalidRateError
from .strategies.base import BonusStrategy
from .strategies.no_bonus_strategy import NoBonusStrategy
from .strategies.percentage_strategy import PercentageBonusStrategy


@dataclass
class BonusStrategyFactory:
    """Factory Pattern: choose the bonus strategy from a single percent value."""

    def for_bonus_percent(self, bonus_percent: float) -> BonusStrategy:
        if bonus_percent == 0:
            return NoBonusStrategy()

        # Upper bound checked before delegating; the strategy re-checks [0, 100].
        if bonus_percent > MAX_BONUS_PERCENT:
            raise InvalidRateError("bonus percent cannot exceed 100%")
        return PercentageBonusStrategy(bonus_percent)
