import pytest

from combi.parsing import (
    Parser, ParseError, parse_all,
    character, literal, succeed, fail,
    map_result, lift, followed, ap, keep_left, keep_right,
    or_else, choice, many, many1, optional, where, lazy, curry,
    char, digit, integer, one_of, string, whitespace,
)


one = char("1")
star = char("*")
plus = char("+")


def test_character_consumes_one_matching_element():
    assert one.parse("123") == ("1", "23")
    assert one.run("123") == ("1", "23")


def test_character_fails_on_empty_or_mismatch():
    assert one.parse("") is None
    assert one.parse("23") is None


def test_character_over_bytes_sees_ints():
    p = character(lambda b: b == ord("a"))
    assert p.parse(b"abc") == (ord("a"), b"bc")
    assert p.parse(b"xbc") is None


def test_character_over_token_tuple():
    p = character(lambda tok: tok == "NUM")
    assert p.parse(("NUM", "+", "NUM")) == ("NUM", ("+", "NUM"))


def test_map_transforms_value_and_keeps_remainder():
    p = map_result(digit, int)
    assert p.parse("7x") == (7, "x")
    assert digit.map(int).parse("7x") == (7, "x")
    assert p.parse("x") is None


def test_followed_yields_pair_and_second_remainder():
    p = followed(digit, star)
    assert p.parse("2*3") == (("2", "*"), "3")
    assert digit.followed(star).parse("2*3") == (("2", "*"), "3")


@pytest.mark.parametrize("s", ["", "2", "2+", "*3", "23"])
def test_followed_succeeds_iff_both_parts_succeed(s):
    p = followed(digit, star)
    first = digit.parse(s)
    expected = None
    if first is not None:
        second = star.parse(first[1])
        if second is not None:
            expected = ((first[0], second[0]), second[1])
    assert p.parse(s) == expected


def test_or_else_first_match_wins():
    assert or_else(star, plus).parse("+") == ("+", "")
    assert or_else(star, plus).parse("*") == ("*", "")
    assert star.or_else(plus).parse("-") is None


def test_or_else_retries_from_original_input():
    # first branch consumes "1" and then fails; second must see "12" again
    a = map_result(followed(char("1"), char("3")), lambda _: "a")
    b = map_result(followed(char("1"), char("2")), lambda _: "b")
    assert or_else(a, b).parse("12") == ("b", "")


def test_choice_tries_in_order():
    p = choice(char("a"), char("b"), char("c"))
    assert p.parse("cab") == ("c", "ab")
    assert p.parse("x") is None
    assert choice().parse("x") is None


def test_many_collects_in_order_and_never_fails():
    assert many(digit).parse("123abc") == (["1", "2", "3"], "abc")
    assert many(digit).parse("abc") == ([], "abc")
    assert many(digit).parse("") == ([], "")


@pytest.mark.parametrize("s", ["", "1", "12x", "abc", "999"])
def test_many_final_remainder_rejects_parser(s):
    _, rest = many(digit).parse(s)
    assert digit.parse(rest) is None


def test_many_stops_on_zero_width_match():
    assert many(succeed(1)).parse("abc") == ([], "abc")
    assert many(optional(digit)).parse("12a") == (["1", "2"], "a")


def test_many1_requires_one_match():
    assert many1(digit).parse("42!") == (["4", "2"], "!")
    assert digit.many1().parse("x") is None


def test_optional_wraps_or_consumes_nothing():
    assert optional(digit).parse("5a") == ("5", "a")
    assert digit.optional().parse("a") == (None, "a")


def test_ap_applies_curried_function_left_to_right():
    mul = lambda x: lambda op: lambda y: x * y
    p = ap(ap(lift(mul, integer), star), integer)
    assert p.parse("2*3") == (6, "")
    assert p.parse("2+3") is None


def test_keep_left_and_keep_right():
    assert keep_right(star, integer).parse("*12") == (12, "")
    assert keep_left(integer, star).parse("12*") == (12, "")


def test_literal_and_constants():
    assert literal("let").parse("let x") == ("let", " x")
    assert literal("let").parse("le") is None
    assert succeed(0).parse("abc") == (0, "abc")
    assert fail().parse("abc") is None


def test_where_turns_rejected_result_into_miss():
    even = where(integer, lambda n: n % 2 == 0)
    assert even.parse("42") == (42, "")
    assert even.parse("7") is None
    assert integer.where(lambda n: n > 10).parse("7") is None


def test_lazy_supports_recursive_grammar():
    # nested := '(' nested ')' | integer
    nested: Parser = or_else(
        keep_left(keep_right(char("("), lazy(lambda: nested)), char(")")),
        integer,
    )
    assert nested.parse("((7))") == (7, "")
    assert nested.parse("((7)") is None


def test_curry():
    assert curry(lambda a, b: a - b)(5)(3) == 2


def test_integer_rejects_non_digits():
    assert integer.parse("123abc") == (123, "abc")
    assert integer.parse("abc") is None
    assert integer.parse("") is None


def test_one_of():
    assert one_of("+-").parse("-1") == ("-", "1")


def test_parsers_are_reusable_values():
    p = many(digit)
    assert p.parse("12") == p.parse("12")
    assert p.parse("3") == (["3"], "")


def test_parse_all_requires_full_consumption():
    assert parse_all(integer, "123") == 123
    with pytest.raises(ParseError) as ei:
        parse_all(integer, "12x")
    assert ei.value.pos == 2
    assert "1:3" in str(ei.value)
    assert isinstance(ei.value, SyntaxError)


def test_parse_all_reports_eof_and_non_text_input():
    with pytest.raises(ParseError) as ei:
        parse_all(integer, "")
    assert "EOF" in str(ei.value)
    with pytest.raises(ParseError) as ei:
        parse_all(many(character(lambda t: t == "A")), ("A", "B"))
    assert ei.value.pos == 1


def test_integer_over_tokens_rejects_multi_character_strings():
    assert integer.parse(("1a", "+")) is None
    assert integer.parse(("12", "+")) is None
    assert digit.parse(("12",)) is None
    assert integer.parse(("1", "2", "+")) == (12, ("+",))


def test_string_and_whitespace():
    p = keep_right(whitespace, string("let"))
    assert p.parse("  \tlet x") == ("let", " x")
    assert p.parse("let") == ("let", "")
    assert string("let").parse("lex") is None
    assert whitespace.parse("abc") == ([], "abc")


def test_parse_all_reports_offset_zero_on_outright_miss():
    with pytest.raises(ParseError) as ei:
        parse_all(integer, "x12")
    assert ei.value.pos == 0
    assert "1:1" in str(ei.value)
