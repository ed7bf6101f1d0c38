from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.constants import MAX_BASE_PAY
from ..core.exceptions import InvalidRateError
from .strategies.base import BonusStrategy


@dataclass(frozen=True)
class WorkType:
    """Domain entity: a named work type with its base pay and bonus strategy.

    ``final_pay`` is derived on every read, never stored.
    """

    name: str
    base_pay: float
    bonus_strategy: Optional[BonusStrategy]

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidRateError("work type name must not be empty")
        if not (self.base_pay > 0):
            raise InvalidRateError("base pay must be > 0")
        if not (self.base_pay <= MAX_BASE_PAY):
            raise InvalidRateError("base pay cannot exceed 1,000,000")
        if self.bonus_strategy is None:
            raise InvalidRateError("bonus strategy must not be null")

    @property
    def final_pay(self) -> float:
        return self.bonus_strategy.compute_pay(self.base_pay)


@dataclass(frozen=True)
class WorkTypeRow:
    """Read-model for listings (name, base pay, final pay)."""

    name: str
    base_pay: float
    final_pay: float

    def as_dict(self) -> dict:
        return {"name": self.name, "base_pay": self.base_pay, "final_pay": self.final_pay}


@dataclass(frozen=True)
class WorkTypeListing:
    rows: Sequence[WorkTypeRow]

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def __iter__(self):
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)
