from __future__ import annotations

from typing import Callable, Optional

import click

from ..common.parsing import parse_base_pay, parse_bonus_percent, parse_menu_choice, require_non_empty
from ..core.constants import DEFAULT_AVERAGE_PRECISION
from ..core.exceptions import PayrollError, ValidationError
from ..payroll.registry import PayrollRegistry

MENU = (
    "\n===== PAYROLL DEPARTMENT MENU =====\n"
    "1. Add work type\n"
    "2. Show all work types\n"
    "3. Calculate average pay\n"
    "0. Exit\n"
    "==================================="
)

CHOICE_EXIT = 0
CHOICE_ADD = 1
CHOICE_LIST = 2
CHOICE_AVERAGE = 3


def click_reader(prompt: str) -> str:
    return click.prompt(prompt, default="", show_default=False, prompt_suffix="")


class ConsoleShell:
    """Text menu over a PayrollRegistry.

    Raw input is validated here and re-prompted; only well-formed values reach
    the registry. Registry errors are reported and the menu continues.
    """

    def __init__(
        self,
        registry: PayrollRegistry,
        *,
        reader: Optional[Callable[[str], str]] = None,
        writer: Optional[Callable[[str], None]] = None,
        precision: int = DEFAULT_AVERAGE_PRECISION,
    ):
        self._registry = registry
        self._read = reader or click_reader
        self._write = writer or click.echo
        self._precision = int(precision)

    def run(self) -> None:
        while True:
            self._write(MENU)
            try:
                choice = self._ask("Your choice: ", lambda s: parse_menu_choice(s, CHOICE_EXIT, CHOICE_AVERAGE))
                if choice != CHOICE_EXIT:
                    self.handle(choice)
                    continue
            except (EOFError, click.Abort):
                pass

            self._write("Exiting.")
            return

    def handle(self, choice: int) -> None:
        try:
            if choice == CHOICE_ADD:
                self._add_work_type()
            elif choice == CHOICE_LIST:
                self._print_all()
            elif choice == CHOICE_AVERAGE:
                self._print_average()
        except PayrollError as e:
            self._write(f"Payroll calculation error: {e}")
        except (EOFError, click.Abort):
            raise
        except Exception as e:
            self._write(f"Unexpected error: {e}")

    def _ask(self, prompt: str, parse: Callable[[str], object]):
        while True:
            raw = self._read(prompt)
            try:
                return parse(raw)
            except ValidationError as e:
                self._write(f"Error: {e}. Try again.")

    def _add_work_type(self) -> None:
        name = self._ask("Enter work type name: ", lambda s: require_non_empty(s, "Work type name"))
        base_pay = self._ask("Enter base pay: ", parse_base_pay)
        bonus_percent = self._ask("Enter bonus percent (0 if none): ", parse_bonus_percent)

        self._registry.add_work_type(name, base_pay, bonus_percent)
        self._write("Work type added successfully.")

    def _print_all(self) -> None:
        listing = self._registry.list_all()
        if listing.is_empty:
            self._write("The work type list is empty.")
            return

        self._write("Current work types:")
        for row in listing:
            self._write(
                f"  - {row.name}"
                f" | base pay: {self._fmt(row.base_pay)}"
                f" | with bonus: {self._fmt(row.final_pay)}"
            )

    def _print_average(self) -> None:
        avg = self._registry.calculate_average_pay()
        self._write(f"Average pay: {self._fmt(avg)}")

    def _fmt(self, value: float) -> str:
        return f"{value:.{self._precision}f}"
