# combi/parsing/core.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, Tuple, TypeVar

# A parser is a pure function of its input:
#   input -> (value, remainder) | None
# - None is the only failure signal; combinators never raise on a miss.
# - remainder is always a suffix of the input that was given.
# - no cursor is shared, so every alternative restarts from the same input.

R = TypeVar("R")
T = TypeVar("T")

ParseResult = Optional[Tuple[R, Sequence[Any]]]


@dataclass(frozen=True)
class Parser(Generic[R]):
    """Deferred parse computation producing a value of type R."""
    fn: Callable[[Sequence[Any]], "ParseResult[R]"]

    def parse(self, inp: Sequence[Any]) -> "ParseResult[R]":
        return self.fn(inp)

    def run(self, inp: Sequence[Any]) -> "ParseResult[R]":
        return self.fn(inp)

    # ---- method forms of the core combinators ----
    def map(self, transform: Callable[[R], T]) -> "Parser[T]":
        from .combinators import map_result
        return map_result(self, transform)

    def followed(self, other: "Parser[T]") -> "Parser[Tuple[R, T]]":
        from .combinators import followed
        return followed(self, other)

    def or_else(self, other: "Parser[R]") -> "Parser[R]":
        from .combinators import or_else
        return or_else(self, other)

    def many(self) -> "Parser[list]":
        from .combinators import many
        return many(self)

    def many1(self) -> "Parser[list]":
        from .combinators import many1
        return many1(self)

    def optional(self) -> "Parser[Optional[R]]":
        from .combinators import optional
        return optional(self)

    def where(self, predicate: Callable[[R], bool]) -> "Parser[R]":
        from .combinators import where
        return where(self, predicate)


class ParseError(SyntaxError):
    """Raised by `parse_all` when the input is not fully consumed."""

    def __init__(self, msg: str, pos: int):
        super().__init__(msg)
        self.pos = pos


def _line_bounds(src: str, pos: int) -> Tuple[int, int]:
    start = src.rfind("\n", 0, pos)
    start = 0 if start < 0 else start + 1
    end = src.find("\n", pos)
    end = len(src) if end < 0 else end
    return start, end


def _caret_snippet(src: str, pos: int) -> str:
    start, end = _line_bounds(src, pos)
    line = src[start:end]
    col = (pos - start) + 1
    caret = " " * (col - 1) + "^"
    return f"{line}\n{caret}"


def parse_all(parser: Parser[R], inp: Sequence[Any]) -> R:
    """Run `parser` and require that it consumes the whole input.

    Returns the parsed value. Raises `ParseError`; its offset is where the
    unconsumed remainder starts when the parser matched a prefix, and 0 when
    the parser did not match at all (a miss carries no position).
    """
    res = parser.parse(inp)
    if res is None:
        pos = 0
    else:
        value, rest = res
        if len(rest) == 0:
            return value
        pos = len(inp) - len(rest)

    if isinstance(inp, str):
        if pos >= len(inp):
            raise ParseError(
                "Parse error at EOF: unexpected end of input\n" + _caret_snippet(inp, pos),
                pos,
            )
        line = inp.count("\n", 0, pos) + 1
        col = pos - _line_bounds(inp, pos)[0] + 1
        raise ParseError(
            f"Parse error at {line}:{col}: unexpected {inp[pos]!r}\n"
            + _caret_snippet(inp, pos),
            pos,
        )
    raise ParseError(f"Parse error at offset {pos}", pos)
