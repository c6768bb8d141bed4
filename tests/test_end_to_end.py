"""
Literal in, term out, numeral back: the whole parse/print loop.
"""

from nat_numeral import App, Ref, bootstrap, parse_numeral, print_term, read_term
from nat_numeral.config import DATATYPES_PATH


def test_three_elaborates_to_three_successors() -> None:
    env = bootstrap(DATATYPES_PATH)
    s, o = Ref(env.codec.succ), Ref(env.codec.zero)
    expected = App(s, (App(s, (App(s, (o,)),)),))

    t = parse_numeral("3%nat", env.notations)
    assert t == expected
    assert env.codec.decode(t) == 3
    assert print_term(t, env.notations) == "3"


def test_one_prints_as_numeral() -> None:
    env = bootstrap(DATATYPES_PATH)
    t = read_term("S O", env.symbols, env.notations, env.open_paths)
    assert print_term(t, env.notations) == "1"
    assert print_term(t, env.notations, open_scopes=[]) == "1%nat"


def test_printing_covers_terms_not_built_by_the_notation() -> None:
    env = bootstrap(DATATYPES_PATH)
    t = read_term("f (S (S O)) (S z)", env.symbols, env.notations, env.open_paths)
    assert print_term(t, env.notations) == "f 2 (S z)"
