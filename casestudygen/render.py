"""Text renderings of generated case studies."""

from __future__ import annotations

import re
import textwrap
from typing import Iterable

from casestudygen.models import CaseStudy

HEADER = ("", "Industry", "Market", "Company Size", "Business Problem")
_WRAP_WIDTH = 30
_NUMBER = re.compile(r"^-?(?:\d{1,3}(?:,\d{3})*|\d+)(?:\.\d+)?$")


def format_list(studies: Iterable[CaseStudy]) -> str:
    """Render studies as a numbered list of teams."""
    blocks = []
    for number, study in enumerate(studies, start=1):
        blocks.append(
            "Teams\n"
            "\n"
            f"Team: {number}\n"
            f" Industry: {study.industry}\n"
            f" Market: {study.market}\n"
            f" Company Size: {study.company_size}\n"
            f" Business Problem: {study.business_problem}\n"
            "\n"
        )
    return "".join(blocks)


def _wrap(cell: str) -> list[str]:
    if len(cell) <= _WRAP_WIDTH:
        return [cell]
    longest = max((len(word) for word in cell.split()), default=0)
    lines = textwrap.wrap(cell, width=max(_WRAP_WIDTH, longest), break_long_words=False)
    return lines or [""]


def _center(text: str, width: int) -> str:
    gap = width - len(text)
    left = gap // 2
    return " " * left + text + " " * (gap - left)


def _align(text: str, width: int) -> str:
    if _NUMBER.match(text):
        return text.rjust(width)
    return text.ljust(width)


def format_table(studies: Iterable[CaseStudy]) -> str:
    """Render studies as a bordered table, one row per team."""
    rows = [
        [
            _wrap(cell)
            for cell in (
                f"Team {number}",
                study.industry,
                study.market,
                study.company_size,
                study.business_problem,
            )
        ]
        for number, study in enumerate(studies, start=1)
    ]
    titles = [title.upper() for title in HEADER]
    widths = [len(title) for title in titles]
    for row in rows:
        for column, lines in enumerate(row):
            widths[column] = max([widths[column], *(len(line) for line in lines)])

    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"
    output = [
        border,
        "| " + " | ".join(_center(t, w) for t, w in zip(titles, widths)) + " |",
        border,
    ]
    for row in rows:
        height = max(len(lines) for lines in row)
        for k in range(height):
            cells = [lines[k] if k < len(lines) else "" for lines in row]
            output.append(
                "| " + " | ".join(_align(c, w) for c, w in zip(cells, widths)) + " |"
            )
    if rows:
        output.append(border)
    return "\n".join(output) + "\n"