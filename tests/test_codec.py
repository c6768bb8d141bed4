"""
Core invariants for the nat numeral codec.

- encode/decode round-trip, including a chain deeper than the recursion limit
- zero and successor shapes
- negative rejection
- decode is total: wrong heads, wrong arity, free variables -> None
"""

import sys

import pytest

from nat_numeral import (
    App,
    Loc,
    NatCodec,
    NegativeNumeralError,
    Ref,
    ResolutionError,
    SymbolTable,
    Var,
)
from nat_numeral.config import DATATYPES_PATH
from nat_numeral.prelude import declare_nat

LOC = Loc(4, 9, "<test>")


# ---------------------------------------------------------------------------
# Round-trip
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("n", [0, 1, 2, 3, 7, 10, 42, 255])
def test_roundtrip_small(codec, n: int) -> None:
    assert codec.decode(codec.encode(LOC, n)) == n


def test_roundtrip_deeper_than_recursion_limit(codec) -> None:
    n = sys.getrecursionlimit() * 3
    t = codec.encode(LOC, n)
    assert t.depth() == n
    assert codec.decode(t) == n


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

def test_zero_is_bare_reference(codec) -> None:
    t = codec.encode(LOC, 0)
    assert isinstance(t, Ref)
    assert t.ref == codec.zero
    assert t.depth() == 0
    assert t.loc == LOC


@pytest.mark.parametrize("n", [1, 2, 5])
def test_successor_wraps_predecessor(codec, n: int) -> None:
    t = codec.encode(LOC, n)
    assert isinstance(t, App)
    assert isinstance(t.head, Ref) and t.head.ref == codec.succ
    assert len(t.args) == 1
    assert t.args[0] == codec.encode(Loc(0, 1), n - 1)


def test_every_node_carries_the_location(codec) -> None:
    t = codec.encode(LOC, 3)
    seen = 0
    stack = [t]
    while stack:
        node = stack.pop()
        assert node.loc is LOC
        seen += 1
        stack.extend(node.children())
    assert seen == t.count_nodes() == 7


def test_encode_is_deterministic(codec) -> None:
    assert codec.encode(LOC, 6) == codec.encode(LOC, 6)
    assert hash(codec.encode(LOC, 6)) == hash(codec.encode(Loc(), 6))


# ---------------------------------------------------------------------------
# Negative / ill-typed input
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("n", [-1, -2, -(2**80)])
def test_negative_rejected(codec, n: int) -> None:
    with pytest.raises(NegativeNumeralError) as ei:
        codec.encode(LOC, n)
    assert ei.value.loc is LOC
    assert "encode_nat" in ei.value.message
    assert "negative" in ei.value.message


@pytest.mark.parametrize("bad", [True, 1.0, "3", None])
def test_encode_rejects_non_int(codec, bad) -> None:
    with pytest.raises(TypeError):
        codec.encode(LOC, bad)


# ---------------------------------------------------------------------------
# decode is total
# ---------------------------------------------------------------------------

def test_decode_unrelated_reference(codec, env) -> None:
    other = env.symbols.declare(DATATYPES_PATH, "unrelated")
    assert codec.decode(Ref(other)) is None
    assert codec.decode(Ref(codec.nat)) is None


def test_decode_bare_successor_is_not_numeral(codec) -> None:
    assert codec.decode(Ref(codec.succ)) is None


def test_decode_successor_with_zero_args(codec) -> None:
    assert codec.decode(App(Ref(codec.succ), ())) is None


def test_decode_successor_with_two_args(codec) -> None:
    z = Ref(codec.zero)
    assert codec.decode(App(Ref(codec.succ), (z, z))) is None


def test_decode_malformed_deep_inside(codec) -> None:
    s = Ref(codec.succ)
    inner = App(s, (Ref(codec.zero), Ref(codec.zero)))
    assert codec.decode(App(s, (App(s, (inner,)),))) is None


def test_decode_open_term(codec) -> None:
    s = Ref(codec.succ)
    assert codec.decode(App(s, (Var("x"),))) is None


def test_decode_non_reference_head(codec) -> None:
    s = Ref(codec.succ)
    assert codec.decode(App(App(s, ()), (Ref(codec.zero),))) is None


@pytest.mark.parametrize("junk", [None, 3, "S O", (1, 2)])
def test_decode_non_term_input(codec, junk) -> None:
    assert codec.decode(junk) is None


def test_decode_against_foreign_nat(codec) -> None:
    # A second nat under another path has different handles.
    other = SymbolTable()
    declare_nat(other, ("Other",))
    foreign = NatCodec.load(other, ("Other",))
    assert foreign.decode(codec.encode(LOC, 2)) is None
    assert codec.is_numeral(codec.encode(LOC, 2))


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def test_load_binds_the_three_handles(env) -> None:
    c = NatCodec.load(env.symbols, DATATYPES_PATH)
    assert c.nat.qualname == "Coq.Init.Datatypes.nat"
    assert c.zero.index == 1
    assert c.succ.index == 2
    assert c.path == DATATYPES_PATH
    assert [r.ref for r in c.print_refs] == [c.succ, c.zero]


@pytest.mark.parametrize("missing", ["nat", "O", "S"])
def test_load_fails_on_any_missing_handle(missing: str) -> None:
    table = SymbolTable()
    for name in ("nat", "O", "S"):
        if name != missing:
            table.declare(DATATYPES_PATH, name)
    with pytest.raises(ResolutionError) as ei:
        NatCodec.load(table, DATATYPES_PATH)
    assert ei.value.name == missing
    assert ei.value.path == DATATYPES_PATH
