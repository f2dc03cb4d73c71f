# io/report.py
import sys
from collections.abc import Iterable
from typing import TextIO

BANNER = "==========================="
RULE = "---------------------------"


def money(amount: float) -> str:
    return f"${amount:.2f}"


def number(x: float) -> str:
    # shortest form, e.g. 5.0 -> "5", 4.8 -> "4.8"
    return f"{x:g}"


def write_lines(lines: Iterable[str], out: TextIO | None = None) -> None:
    out = out or sys.stdout
    for line in lines:
        out.write(line + "\n")
