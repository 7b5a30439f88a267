"""Case study parameters and the workshop that draws them at random."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


@dataclass(frozen=True)
class CaseStudy:
    """One team's drawn case study parameters."""

    industry: str
    market: str
    company_size: str
    business_problem: str


class Category(Enum):
    """The kinds of parameter a case study is built from."""

    INDUSTRY = "Industry"
    MARKET = "Market"
    COMPANY_SIZE = "Company Size"
    BUSINESS_PROBLEM = "Business Problem"


class MissingOptionsError(Exception):
    """Raised when a case study is requested before every category has options."""

    def __init__(self, missing: Iterable[Category]):
        self.missing = tuple(missing)
        super().__init__("Please add items first")


def random_number(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a random integer N with low <= N <= high."""
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")
    source = rng if rng is not None else random
    return source.randint(low, high)


def pick(options: list[str], remove: bool = False, rng: random.Random | None = None) -> str:
    """Pick a random entry from options.

    When remove is true the entry is taken out of the list by moving the
    last entry into its place, so the list's order is not preserved.
    """
    if not options:
        raise IndexError("cannot pick from an empty list")
    index = random_number(0, len(options) - 1, rng)
    value = options[index]
    if remove:
        options[index] = options[-1]
        options.pop()
    return value


@dataclass
class Workshop:
    """Option pools for each category and the case studies drawn from them."""

    rng: random.Random = field(default_factory=random.Random)
    n_teams: int = 2
    studies: list[CaseStudy] = field(default_factory=list)
    _pools: dict[Category, list[str]] = field(
        default_factory=lambda: {category: [] for category in Category},
        init=False,
        repr=False,
    )

    def options(self, category: Category) -> list[str]:
        """Return a copy of the options currently available for category."""
        return list(self._pools[category])

    def add_options(self, category: Category, values: Iterable[str]) -> None:
        """Append values to the options of category."""
        self._pools[category].extend(values)

    def generate(self) -> CaseStudy:
        """Draw a new case study and record it.

        Industry and business problem are used up once drawn; market and
        company size may repeat between teams.
        """
        missing = [category for category in Category if not self._pools[category]]
        if missing:
            raise MissingOptionsError(missing)
        industry = pick(self._pools[Category.INDUSTRY], True, self.rng)
        business_problem = pick(self._pools[Category.BUSINESS_PROBLEM], True, self.rng)
        market = pick(self._pools[Category.MARKET], False, self.rng)
        company_size = pick(self._pools[Category.COMPANY_SIZE], False, self.rng)
        study = CaseStudy(
            industry=industry,
            market=market,
            company_size=company_size,
            business_problem=business_problem,
        )
        self.studies.append(study)
        return study