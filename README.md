# casestudygen

A small interactive console tool for running team case-study exercises.
You enter lists of industries, markets, company sizes and business
problems; the tool then draws a random combination for each team.

Each industry and business problem that is drawn is taken out of its
list, while markets and company sizes stay in their lists and may be
shared between teams.

## Installation

```
pip install .
```

## Usage

Start the program:

```
casestudygen
```

The main menu offers:

1. **Select Parameters** – add options to each category. Type one option
   per line and enter `q` to finish editing a category. When a category
   is edited again, the options it already holds are added to it once
   more along with the new ones, so they become more likely to be drawn.
2. **Generate Case Study Template** – draw a new set of parameters for
   the next team. Every category needs at least one option left;
   otherwise the program prints "Please add items first".
3. **View Teams (list)** – show every generated team, one block each.
4. **View Teams (table)** – show every generated team as a bordered table.
0. **Exit**

Entering `9` opens an unlisted configuration menu where the number of
teams can be set. The value is stored on the workshop (`n_teams`,
default 2) but does not change how case studies are generated.

The program ends on `0` or when its input runs out. The screen is cleared
between menus only when output goes to a terminal.

## Using it from Python

```python
from casestudygen.models import Category, Workshop
from casestudygen.render import format_list, format_table

workshop = Workshop()
workshop.add_options(Category.INDUSTRY, ["Retail", "Healthcare"])
workshop.add_options(Category.MARKET, ["Domestic"])
workshop.add_options(Category.COMPANY_SIZE, ["Small", "Large"])
workshop.add_options(Category.BUSINESS_PROBLEM, ["Churn", "Pricing"])

study = workshop.generate()
print(study.industry, study.market, study.company_size, study.business_problem)
print(format_table(workshop.studies))
print(format_list(workshop.studies))
```

- `Workshop(rng=...)` accepts a `random.Random` instance, which makes
  draws reproducible.
- `Workshop.options(category)` returns a copy of a category's options.
- `Workshop.generate()` returns the new `CaseStudy`, appends it to
  `Workshop.studies`, and raises `MissingOptionsError` (with the empty
  categories in its `missing` attribute) when a category has no options.
- `pick(options, remove, rng)` and `random_number(low, high, rng)` in
  `casestudygen.models` are the helpers behind the draws.
- `casestudygen.cli.Console(workshop, stdin, stdout)` runs the menus over
  any pair of text streams; `Console.run()` starts it.

## Limitations

Everything is kept in memory: options and generated teams are not saved
anywhere and are lost when the program exits. There is no way to remove
or edit an option once it has been entered.

## Running the tests

```
pip install .[test]
pytest
```