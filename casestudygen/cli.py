"""Interactive menus for collecting options and generating case studies."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from casestudygen.models import Category, MissingOptionsError, Workshop
from casestudygen.render import format_list, format_table

CLEAR_SCREEN = "\x1b[2J\x1b[H"

_EDIT_NAMES = {
    Category.INDUSTRY: "industry",
    Category.MARKET: "Market",
    Category.COMPANY_SIZE: "Company Size",
    Category.BUSINESS_PROBLEM: "Business Problem",
}

_SUMMARY_NAMES = {
    Category.INDUSTRY: "Industries",
    Category.MARKET: "Markets",
    Category.COMPANY_SIZE: "Company Sizes",
    Category.BUSINESS_PROBLEM: "Business Problem",
}

_MENU_ENTRIES = (
    (1, Category.INDUSTRY, "Add Industry:"),
    (2, Category.MARKET, "Add Market:"),
    (3, Category.COMPANY_SIZE, "Add Company Size"),
    (4, Category.BUSINESS_PROBLEM, "Add Business Problem"),
)


def _bracketed(values: Iterable[str]) -> str:
    return "[" + " ".join(values) + "]"


class Console:
    """Text menus driving a Workshop over a pair of text streams."""

    def __init__(
        self,
        workshop: Workshop | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.workshop = workshop if workshop is not None else Workshop()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _say(self, *parts: object) -> None:
        self.stdout.write(" ".join(str(part) for part in parts) + "\n")

    def _clear(self) -> None:
        isatty = getattr(self.stdout, "isatty", None)
        if isatty is not None and isatty():
            self.stdout.write(CLEAR_SCREEN)

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _read_choice(self) -> int:
        try:
            return int(self._read_line().strip())
        except ValueError:
            return -1

    def _pause(self) -> None:
        self._say()
        self._say("Press Enter to continue...")
        try:
            self._read_line()
        except EOFError:
            pass
        self._clear()

    def run(self) -> None:
        """Show the title and the main menu until the user exits or input ends."""
        self._say("Case Study Generator")
        self._say()
        try:
            self.main_menu()
        except EOFError:
            pass

    def main_menu(self) -> None:
        """Offer parameter editing, generation and team listings."""
        self._clear()
        while True:
            self._say("Case Study Generator")
            self._say()
            self._say("Main Menu")
            self._say("Please choose one of the following options:")
            self._say("1. Select Parameters")
            self._say("2. Generate Case Study Template")
            self._say("3. View Teams (list)")
            self._say("4. View Teams (table)")
            self._say("0. Exit")

            choice = self._read_choice()
            if choice == 0:
                self._say("Goodbye...")
                self._clear()
                return
            if choice == 1:
                self._clear()
                self.parameter_menu()
            elif choice == 2:
                self._clear()
                self._generate()
                self._pause()
            elif choice == 3:
                self._clear()
                self.stdout.write(format_list(self.workshop.studies))
                self._pause()
            elif choice == 4:
                self._clear()
                self.stdout.write(format_table(self.workshop.studies))
                self._say()
                self._pause()
            elif choice == 9:
                self._clear()
                self.options_menu()
            else:
                self._say("Invalid choice! Please try again.")

    def _generate(self) -> None:
        try:
            study = self.workshop.generate()
        except MissingOptionsError as exc:
            self._say(str(exc))
            return
        self._say("Generating Case Study Parameters")
        self._say("Industry:", study.industry)
        self._say("Market:", study.market)
        self._say("Company Size:", study.company_size)
        self._say("Business Problem:", study.business_problem)

    def parameter_menu(self) -> None:
        """Let the user pick a category to add options to."""
        self._clear()
        entries = {number: category for number, category, _ in _MENU_ENTRIES}
        while True:
            self._say("Parameter Selection")
            self._say("Please choose one of the following options:")
            for number, category, label in _MENU_ENTRIES:
                self._say(f"{number}. {label}", _bracketed(self.workshop.options(category)))
            self._say("0. Return to previous Menu")

            choice = self._read_choice()
            category = entries.get(choice)
            if category is not None:
                self._clear()
                values = self.edit_options(category)
                self._say(f"{_SUMMARY_NAMES[category]}:", _bracketed(values))
                self._pause()
            else:
                self._say("Invalid choice! Please try again.")
            if choice == 0:
                self._clear()
                return

    def options_menu(self) -> None:
        """Configuration menu for the number of teams."""
        self._clear()
        self._say("Configuration Menu")
        self._say()
        while True:
            self._say("Configuration Menu")
            self._say("Please choose one of the following options:")
            self._say("1. Set number of Teams")
            self._say("Press Enter to Return to Previous Menu")

            choice = self._read_choice()
            if choice == 0:
                self._clear()
                self._say()
                self._clear()
                return
            if choice != 1:
                self._clear()
                return

            self._clear()
            self._say(
                "Runs per test determines number of times each model will be built. "
                "Times are then averaged and reported to application."
            )
            self._say("Current number of teams:", self.workshop.n_teams)
            self._say("Please enter new number and press enter.")
            try:
                teams = int(self._read_line().strip())
                if teams < 0:
                    raise ValueError(teams)
            except ValueError:
                self._say("Invalid input. Please try again.")
                continue
            self.workshop.n_teams = teams
            self._say("Current number of Teams:", teams)
            self._pause()

    def edit_options(self, category: Category) -> list[str]:
        """Read new options for category until 'q' and return the updated options.

        The options already present are added once more ahead of the new
        entries, so options entered earlier weigh more in later draws.
        """
        name = _EDIT_NAMES[category]
        current = self.workshop.options(category)
        entries: list[str] = []
        self._clear()
        while True:
            self._clear()
            self._say("Please enter options and press enter. Type q to exit.")
            self._say()
            self._say("Editing:", name)
            self._say("Current Options:", _bracketed(current + entries))
            self._say()
            self.stdout.write(f"New {name}: \n")
            try:
                text = self._read_line().strip()
            except EOFError:
                break
            if text == "q":
                break
            entries.append(text)
        self.workshop.add_options(category, current + entries)
        return self.workshop.options(category)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive case study generator."""
    Console().run()
    return 0