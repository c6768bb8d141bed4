"""
Symbol table contract: declare once, resolve by (path, name), fail loudly
when absent.
"""

import pytest

from nat_numeral import DuplicateSymbolError, RefKind, ResolutionError, SymbolTable
from nat_numeral import symbols as global_symbols


def test_declare_then_resolve() -> None:
    t = SymbolTable()
    ref = t.declare(("A", "B"), "c")
    assert t.resolve(("A", "B"), "c") == ref
    assert t.resolve("A.B", "c") == ref
    assert t.resolve(["A", "B"], "c") is ref
    assert ref.qualname == "A.B.c"
    assert ref.kind is RefKind.CONST


def test_resolve_missing_raises() -> None:
    t = SymbolTable()
    t.declare(("A",), "c")
    with pytest.raises(ResolutionError) as ei:
        t.resolve(("B",), "c")
    assert ei.value.path == ("B",)
    assert ei.value.name == "c"
    assert "B.c" in str(ei.value)


def test_resolution_is_late_bound() -> None:
    t = SymbolTable()
    with pytest.raises(ResolutionError):
        t.resolve("A", "x")
    ref = t.declare("A", "x")
    assert t.resolve("A", "x") == ref


def test_same_name_different_paths_are_different_entities() -> None:
    t = SymbolTable()
    a = t.declare(("Top",), "S")
    b = t.declare(("Coq", "Init", "Datatypes"), "S")
    assert a != b


def test_duplicate_declaration() -> None:
    t = SymbolTable()
    t.declare("A", "x")
    with pytest.raises(DuplicateSymbolError):
        t.declare("A", "x")


def test_declare_inductive_indices() -> None:
    t = SymbolTable()
    ind, ctors = t.declare_inductive("L", "list", ["nil", "cons"])
    assert ind.kind is RefKind.INDUCTIVE
    assert [(c.name, c.index, c.kind) for c in ctors] == [
        ("nil", 1, RefKind.CONSTRUCTOR),
        ("cons", 2, RefKind.CONSTRUCTOR),
    ]


def test_declare_inductive_is_all_or_nothing() -> None:
    t = SymbolTable()
    t.declare("L", "cons")
    with pytest.raises(DuplicateSymbolError):
        t.declare_inductive("L", "list", ["nil", "cons"])
    assert t.list_symbols() == ["L.cons"]


@pytest.mark.parametrize("bad", ["", "a.b", "a b"])
def test_invalid_names(bad) -> None:
    with pytest.raises(ValueError):
        SymbolTable().declare("A", bad)


@pytest.mark.parametrize("bad", ["A..B", ".A", ("A", "")])
def test_invalid_paths(bad) -> None:
    with pytest.raises(ValueError):
        SymbolTable().declare(bad, "x")


def test_resolve_qualified_and_root_path() -> None:
    t = SymbolTable()
    root = t.declare((), "S")
    deep = t.declare("Coq.Init.Datatypes", "S")
    assert t.resolve_qualified("S") == root
    assert t.resolve_qualified("Coq.Init.Datatypes.S") == deep


def test_listing_and_clear() -> None:
    t = SymbolTable()
    t.declare("B", "y")
    t.declare("A", "x")
    assert t.list_symbols() == ["A.x", "B.y"]
    assert len(t) == 2
    assert t.has_symbol("A", "x")
    t.clear()
    assert len(t) == 0
    assert not t.has_symbol("A", "x")


def test_global_table_helpers() -> None:
    global_symbols.clear_registry()
    try:
        ref = global_symbols.declare(("G",), "x")
        assert global_symbols.resolve(("G",), "x") == ref
        assert global_symbols.has_symbol(("G",), "x")
        assert global_symbols.list_symbols() == ["G.x"]
    finally:
        global_symbols.clear_registry()
    assert not global_symbols.has_symbol(("G",), "x")
