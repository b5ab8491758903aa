# combi/parsing/arith.py
"""Arithmetic expressions by precedence climbing.

Each tier is ``next_tier (op next_tier)?`` folded with `map`; a missing
trailing term folds with the operation's identity. Tiers, tightest first:

    integer -> multiplication -> division -> addition -> subtraction

Only one trailing term is taken per tier, so ``2*3*4`` stops after ``2*3``.
``expression`` is the loosest tier.
"""

from __future__ import annotations
from typing import Callable, Optional

from .core import Parser
from .combinators import ap, curry, keep_right, lift, optional, where
from .chars import char, integer


def _div_trunc(x: int, y: int) -> int:
    # integer division rounding toward zero
    q = abs(x) // abs(y)
    return q if (x >= 0) == (y >= 0) else -q


def binary_tier(
    operand: Parser[int],
    op: str,
    fold: Callable[[int, Optional[int]], int],
) -> Parser[int]:
    """``operand (op operand)?`` with the pair folded through `fold`."""
    return ap(lift(curry(fold), operand), optional(keep_right(char(op), operand)))


multiplication: Parser[int] = binary_tier(
    integer, "*", lambda x, y: x * (1 if y is None else y)
)

# a zero divisor is a miss for the whole tier, not an exception
_divisor: Parser[Optional[int]] = where(
    optional(keep_right(char("/"), multiplication)), lambda y: y != 0
)
division: Parser[int] = ap(
    lift(curry(lambda x, y: x if y is None else _div_trunc(x, y)), multiplication),
    _divisor,
)

addition: Parser[int] = binary_tier(
    division, "+", lambda x, y: x + (0 if y is None else y)
)

subtraction: Parser[int] = binary_tier(
    addition, "-", lambda x, y: x - (0 if y is None else y)
)

expression: Parser[int] = subtraction

TIERS = {
    "multiplication": multiplication,
    "division": division,
    "addition": addition,
    "subtraction": subtraction,
}
