import random
from collections import Counter

import pytest

from casestudygen.models import (
    CaseStudy,
    Category,
    MissingOptionsError,
    Workshop,
    pick,
    random_number,
)


def _filled_workshop(seed=1):
    workshop = Workshop(rng=random.Random(seed))
    workshop.add_options(Category.INDUSTRY, ["Retail", "Energy", "Banking"])
    workshop.add_options(Category.MARKET, ["Europe", "Asia"])
    workshop.add_options(Category.COMPANY_SIZE, ["Small", "Large"])
    workshop.add_options(Category.BUSINESS_PROBLEM, ["Churn", "Fraud", "Pricing"])
    return workshop


def test_random_number_stays_in_range():
    rng = random.Random(42)
    values = {random_number(3, 7, rng) for _ in range(200)}
    assert values <= set(range(3, 8))
    assert len(values) > 1


def test_random_number_single_value_range():
    assert random_number(5, 5, random.Random(0)) == 5


def test_random_number_rejects_empty_range():
    with pytest.raises(ValueError):
        random_number(4, 3)


def test_pick_without_removal_keeps_list():
    options = ["a", "b", "c"]
    value = pick(options, False, random.Random(3))
    assert value in {"a", "b", "c"}
    assert options == ["a", "b", "c"]


def test_pick_with_removal_takes_value_out():
    original = ["a", "b", "c", "d"]
    options = list(original)
    value = pick(options, True, random.Random(7))
    assert value not in options
    assert len(options) == len(original) - 1
    assert Counter(options) + Counter([value]) == Counter(original)


def test_pick_from_empty_list_raises():
    with pytest.raises(IndexError):
        pick([], True)


def test_options_returns_copy():
    workshop = Workshop()
    workshop.add_options(Category.MARKET, ["Europe"])
    copy = workshop.options(Category.MARKET)
    copy.append("Mars")
    assert workshop.options(Category.MARKET) == ["Europe"]


def test_add_options_appends_in_order():
    workshop = Workshop()
    workshop.add_options(Category.INDUSTRY, ["Retail"])
    workshop.add_options(Category.INDUSTRY, ["Energy", "Banking"])
    assert workshop.options(Category.INDUSTRY) == ["Retail", "Energy", "Banking"]


def test_generate_requires_every_category():
    workshop = Workshop()
    workshop.add_options(Category.INDUSTRY, ["Retail"])
    with pytest.raises(MissingOptionsError) as info:
        workshop.generate()
    assert str(info.value) == "Please add items first"
    assert Category.INDUSTRY not in info.value.missing
    assert Category.MARKET in info.value.missing
    assert workshop.studies == []


def test_generate_consumes_industry_and_problem_only():
    workshop = _filled_workshop()
    study = workshop.generate()
    assert isinstance(study, CaseStudy)
    assert workshop.studies == [study]
    assert study.industry not in workshop.options(Category.INDUSTRY)
    assert study.business_problem not in workshop.options(Category.BUSINESS_PROBLEM)
    assert study.market in workshop.options(Category.MARKET)
    assert study.company_size in workshop.options(Category.COMPANY_SIZE)
    assert len(workshop.options(Category.MARKET)) == 2


def test_generate_until_exhausted():
    workshop = _filled_workshop(seed=9)
    studies = [workshop.generate() for _ in range(3)]
    assert sorted(s.industry for s in studies) == ["Banking", "Energy", "Retail"]
    assert sorted(s.business_problem for s in studies) == ["Churn", "Fraud", "Pricing"]
    with pytest.raises(MissingOptionsError):
        workshop.generate()
    assert len(workshop.studies) == 3


def test_default_team_count():
    assert Workshop().n_teams == 2