"""Example: drive the registry directly (no console menu, no Flask).

The presentation layers are thin; every rule lives in PayrollRegistry.
"""

import importlib

from config import get_settings_module

from src.payroll_department.payroll_department.container import build_container
from src.payroll_department.payroll_department.core.exceptions import PayrollError


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    registry = container.registry

    registry.add_work_type("Basic", 100.0)
    registry.add_work_type("Night shift", 200.0, 50.0)

    try:
        registry.add_work_type("Basic", 120.0)
    except PayrollError as e:
        print(e)

    for row in registry.list_all():
        print(row.as_dict())
    print(f"Average pay: {registry.calculate_average_pay():.{container.average_precision}f}")


if __name__ == "__main__":
    main()
