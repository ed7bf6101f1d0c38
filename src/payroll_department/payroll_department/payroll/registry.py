from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import LONG_NAME_WARNING
from ..core.exceptions import DuplicateWorkTypeError, EmptyWorkListError
from .factory import BonusStrategyFactory
from .model import WorkType, WorkTypeListing, WorkTypeRow

logger = logging.getLogger(__name__)


class PayrollRegistry:
    """Ordered, in-memory collection of work types keyed by unique name.

    Entries are only ever appended. An ``add_work_type`` call either stores
    the new entry or raises and leaves the registry untouched.
    """

    def __init__(
        self,
        *,
        strategy_factory: Optional[BonusStrategyFactory] = None,
        long_name_warning: int = LONG_NAME_WARNING,
    ):
        self._work_types: list[WorkType] = []
        self._factory = strategy_factory or BonusStrategyFactory()
        self._long_name_warning = int(long_name_warning)

    def __len__(self) -> int:
        return len(self._work_types)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def get(self, name: str) -> Optional[WorkType]:
        for w in self._work_types:
            if w.name == name:
                return w
        return None

    def add_work_type(self, name: str, base_pay: float, bonus_percent: float = 0.0) -> WorkType:
        if len(name) > self._long_name_warning:
            logger.warning("Work type name is very long (%d characters): %.20s...", len(name), name)

        if name in self:
            raise DuplicateWorkTypeError(name)

        strategy = self._factory.for_bonus_percent(bonus_percent)
        work_type = WorkType(name=name, base_pay=base_pay, bonus_strategy=strategy)

        self._work_types.append(work_type)
        logger.debug("Added work type %r (base=%s, strategy=%r)", name, base_pay, strategy)
        return work_type

    def calculate_average_pay(self) -> float:
        if not self._work_types:
            raise EmptyWorkListError("cannot calculate average")

        total = 0.0
        for w in self._work_types:
            total += w.final_pay
        return total / float(len(self._work_types))

    def list_all(self) -> WorkTypeListing:
        rows = [WorkTypeRow(name=w.name, base_pay=w.base_pay, final_pay=w.final_pay) for w in self._work_types]
        return WorkTypeListing(rows=tuple(rows))
