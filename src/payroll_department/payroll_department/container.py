from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_AVERAGE_PRECISION, LONG_NAME_WARNING
from .payroll.factory import BonusStrategyFactory
from .payroll.registry import PayrollRegistry


@dataclass(frozen=True)
class Container:
    registry: PayrollRegistry
    average_precision: int = DEFAULT_AVERAGE_PRECISION


def build_container(*, settings: object = None) -> Container:
    """One registry per session: the console run or the web process."""
    long_name_warning = int(getattr(settings, "LONG_NAME_WARNING", LONG_NAME_WARNING))
    precision = int(getattr(settings, "AVERAGE_PRECISION", DEFAULT_AVERAGE_PRECISION))

    registry = PayrollRegistry(
        strategy_factory=BonusStrategyFactory(),
        long_name_warning=long_name_warning,
    )
    return Container(registry=registry, average_precision=precision)
