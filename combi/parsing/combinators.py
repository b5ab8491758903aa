# combi/parsing/combinators.py
"""Parser combinators.

Every function here builds a new `Parser` out of existing ones. None of them
raise on a failed match: a miss is `None`, and it is what `or_else`, `many`
and `optional` use to decide what to do next.
"""

from __future__ import annotations
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from .core import Parser, ParseResult

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


# ---- primitives ----

def character(predicate: Callable[[Any], bool]) -> Parser[Any]:
    """Consume exactly one element satisfying `predicate`."""
    def _character(inp: Sequence[Any]) -> ParseResult[Any]:
        if len(inp) == 0:
            return None
        head = inp[0]
        if not predicate(head):
            return None
        return head, inp[1:]
    return Parser(_character)


def literal(text: Sequence[Any]) -> Parser[Sequence[Any]]:
    """Consume `text` as an exact prefix of the input."""
    n = len(text)

    def _literal(inp: Sequence[Any]) -> ParseResult[Sequence[Any]]:
        if inp[:n] == text:
            return text, inp[n:]
        return None
    return Parser(_literal)


def succeed(value: A) -> Parser[A]:
    """Always succeed with `value`, consuming nothing."""
    return Parser(lambda inp: (value, inp))


def fail() -> Parser[Any]:
    return Parser(lambda inp: None)


# ---- functor / sequence / alternation ----

def map_result(parser: Parser[A], transform: Callable[[A], B]) -> Parser[B]:
    def _map(inp: Sequence[Any]) -> ParseResult[B]:
        res = parser.parse(inp)
        if res is None:
            return None
        value, rest = res
        return transform(value), rest
    return Parser(_map)


def lift(transform: Callable[[A], B], parser: Parser[A]) -> Parser[B]:
    """`map_result` with the function first; reads well in front of `ap` chains."""
    return map_result(parser, transform)


def followed(first: Parser[A], second: Parser[B]) -> Parser[Tuple[A, B]]:
    """Run `first`, then `second` on what `first` left over."""
    def _followed(inp: Sequence[Any]) -> ParseResult[Tuple[A, B]]:
        res1 = first.parse(inp)
        if res1 is None:
            return None
        value1, rest1 = res1
        res2 = second.parse(rest1)
        if res2 is None:
            return None
        value2, rest2 = res2
        return (value1, value2), rest2
    return Parser(_followed)


def ap(pf: Parser[Callable[[A], B]], px: Parser[A]) -> Parser[B]:
    """Apply a parsed (curried) function to a parsed argument, left to right."""
    return map_result(followed(pf, px), lambda pair: pair[0](pair[1]))


def keep_right(first: Parser[Any], second: Parser[B]) -> Parser[B]:
    return map_result(followed(first, second), lambda pair: pair[1])


def keep_left(first: Parser[A], second: Parser[Any]) -> Parser[A]:
    return map_result(followed(first, second), lambda pair: pair[0])


def or_else(first: Parser[A], second: Parser[A]) -> Parser[A]:
    """First match wins; both branches see the same original input."""
    def _or_else(inp: Sequence[Any]) -> ParseResult[A]:
        res = first.parse(inp)
        if res is not None:
            return res
        return second.parse(inp)
    return Parser(_or_else)


def choice(*parsers: Parser[A]) -> Parser[A]:
    def _choice(inp: Sequence[Any]) -> ParseResult[A]:
        for p in parsers:
            res = p.parse(inp)
            if res is not None:
                return res
        return None
    return Parser(_choice)


# ---- repetition / optionality ----

def many(parser: Parser[A]) -> Parser[List[A]]:
    """Zero or more matches. Never fails.

    A match that consumes nothing ends the loop without being collected,
    otherwise the loop would never terminate.
    """
    def _many(inp: Sequence[Any]) -> ParseResult[List[A]]:
        out: List[A] = []
        cur = inp
        while True:
            res = parser.parse(cur)
            if res is None:
                break
            value, rest = res
            if len(rest) >= len(cur):
                break
            out.append(value)
            cur = rest
        return out, cur
    return Parser(_many)


def many1(parser: Parser[A]) -> Parser[List[A]]:
    return ap(lift(curry(lambda x, xs: [x] + xs), parser), many(parser))


def optional(parser: Parser[A]) -> Parser[Optional[A]]:
    def _optional(inp: Sequence[Any]) -> ParseResult[Optional[A]]:
        res = parser.parse(inp)
        if res is None:
            return None, inp
        return res
    return Parser(_optional)


# ---- guards / recursion ----

def where(parser: Parser[A], predicate: Callable[[A], bool]) -> Parser[A]:
    """Turn a successful result that fails `predicate` into a miss."""
    def _where(inp: Sequence[Any]) -> ParseResult[A]:
        res = parser.parse(inp)
        if res is None or not predicate(res[0]):
            return None
        return res
    return Parser(_where)


def lazy(thunk: Callable[[], Parser[A]]) -> Parser[A]:
    """Defer looking up a parser until it runs (for self-referencing rules)."""
    return Parser(lambda inp: thunk().parse(inp))


def curry(f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    return lambda a: lambda b: f(a, b)
