# combi/parsing/chars.py
"""Character-level building blocks for text grammars."""

from __future__ import annotations
from typing import Iterable

from .core import Parser
from .combinators import character, literal, many, many1, map_result


def char(c: str) -> Parser[str]:
    return character(lambda x: x == c)


def one_of(chars: Iterable[str]) -> Parser[str]:
    allowed = frozenset(chars)
    return character(lambda x: x in allowed)


def string(text: str) -> Parser[str]:
    return literal(text)


# one ASCII digit: str.isdigit() also accepts superscripts, and token
# inputs may hold multi-character strings; int() rejects both.
digit: Parser[str] = character(lambda c: isinstance(c, str) and len(c) == 1 and "0" <= c <= "9")

# 하나 이상의 숫자 → int. 빈 입력/비숫자는 그냥 실패(None).
integer: Parser[int] = map_result(many1(digit), lambda ds: int("".join(ds)))

whitespace: Parser[list] = many(one_of(" \t\r\n"))
