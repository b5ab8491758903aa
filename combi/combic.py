# combi/combic.py
"""combic – combi CLI

사용 예)
    $ python -m combi.combic calc "2*3+4*6/2-10"
    $ python -m combi.combic calc "2*3+4" --tier multiplication --partial -D
    $ python -m combi.combic complete ca --word cat --word car --word cart --word dog
    $ python -m combi.combic complete ca --words words.txt
    $ python -m combi.combic tree 5 3 8 1 4

기능
----
- calc     : 산술식을 파서 콤비네이터 문법으로 계산
- complete : 단어 목록으로 트라이를 만들고 접두사 자동완성
- tree     : 정수들을 영속 BST에 삽입하고 요약 출력

디버그 모드(-D/--debug)를 켜면 중간 단계를 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import sys
from typing import Optional

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_calc(args) -> int:
    from .parsing import parse_all
    from .parsing.arith import TIERS

    parser = TIERS[args.tier]
    if args.debug: _eprint(f"[DEBUG] tier={args.tier} input={args.expr!r}")

    if args.partial:
        res = parser.parse(args.expr)
        if res is None:
            _eprint("[PARSE ERROR] no match")
            return 2
        value, rest = res
        if args.debug: _eprint(f"[DEBUG] consumed={len(args.expr) - len(rest)} remainder={rest!r}")
        print(f"{value} remainder={rest!r}")
        return 0

    try:
        value = parse_all(parser, args.expr)
    except SyntaxError as e:
        _eprint("[PARSE ERROR]")
        _eprint(str(e))
        return 2
    print(value)
    return 0


def cmd_complete(args) -> int:
    from .trie import build_words, complete_word

    try:
        if args.words is not None:
            from .loader import load_words
            words = load_words(args.words)
        else:
            words = list(args.word)
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if args.debug: _eprint(f"[DEBUG] words loaded | count={len(words)}")
    t = build_words(words)
    hits = sorted(complete_word(args.prefix, t))
    if args.debug: _eprint(f"[DEBUG] prefix={args.prefix!r} completions={len(hits)}")
    for w in hits:
        print(w)
    return 0


def cmd_tree(args) -> int:
    from .tree import from_iterable, elements, count, height, is_valid_bst

    t = from_iterable(args.values)
    if args.debug: _eprint(f"[DEBUG] inserted={len(args.values)} nodes={count(t)}")
    print("elements: " + " ".join(str(x) for x in elements(t)))
    print(f"count={count(t)} height={height(t)} valid={is_valid_bst(t)}")
    return 0


# ------------------------------
# 엔트리포인트
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="combic", description="combi parser/trie/tree CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_calc = sub.add_parser("calc", help="산술식을 계산합니다")
    p_calc.add_argument("expr", help="산술식 (예: 2*3+4)")
    p_calc.add_argument("--tier", choices=["multiplication", "division", "addition", "subtraction"],
                        default="subtraction", help="사용할 우선순위 단계(기본: 전체 식)")
    p_calc.add_argument("--partial", action="store_true", help="남은 입력을 허용하고 함께 출력")
    p_calc.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_calc.set_defaults(func=cmd_calc)

    p_comp = sub.add_parser("complete", help="접두사로 단어를 자동완성합니다")
    p_comp.add_argument("prefix", help="접두사")
    src_group = p_comp.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--words", help="단어 목록 파일 경로(한 줄에 한 단어)")
    src_group.add_argument("--word", action="append", help="단어 직접 입력(반복 가능)")
    p_comp.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_comp.set_defaults(func=cmd_complete)

    p_tree = sub.add_parser("tree", help="정수를 BST에 삽입하고 요약을 출력합니다")
    p_tree.add_argument("values", nargs="+", type=int, help="삽입할 정수들(순서대로)")
    p_tree.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_tree.set_defaults(func=cmd_tree)

    args = ap.parse_args(argv)
    try:
        return int(args.func(args))
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

if __name__ == "__main__":
    sys.exit(main())
