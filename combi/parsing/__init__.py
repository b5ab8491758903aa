# combi/parsing/__init__.py
"""Backtracking parser combinators.

This package provides:
- the `Parser` value type and `parse_all` (whole-input runner)
- combinators for sequence, alternation, repetition, mapping and optionality
- character primitives and a small arithmetic grammar built from them

Parsers are plain immutable values; a failed match is `None`, never an exception.
"""

from .core import Parser, ParseError, ParseResult, parse_all
from .combinators import (
    character, literal, succeed, fail,
    map_result, lift, followed, ap, keep_left, keep_right,
    or_else, choice, many, many1, optional, where, lazy, curry,
)
from .chars import char, one_of, string, digit, integer, whitespace
from . import arith
