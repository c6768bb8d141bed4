"""
NAT-NUMERAL TERM CORE
=====================
The slice of a host expression language the numeral codec talks to.

    Ref(r)          bare reference to a global entity r (a GlobalRef)
    App(h, args)    head term applied to a tuple of argument terms
    Var(x)          a free / unresolved name (makes a term non-closed)

Every node carries a source location (Loc). Locations are metadata:
equality and hashing are structural and ignore them.

Successor chains get as deep as the numeral is large, so nothing in this
module recurses on the Python stack. Hashes are computed bottom-up at
construction; equality, depth and node counts walk an explicit stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from nat_numeral.symbols import GlobalRef


@dataclass(frozen=True, slots=True)
class Loc:
    """Half-open character span [start, end) in some source text."""

    start: int = 0
    end: int = 0
    source: Optional[str] = None

    def __str__(self) -> str:
        where = f"{self.source}:" if self.source else ""
        return f"{where}{self.start}-{self.end}"


GHOST = Loc()  # location for terms built by code rather than parsed


class Term:
    """Base class for term nodes. Immutable after construction."""

    __slots__ = ("loc", "_hash")

    loc: Loc
    _hash: int

    # ---------- structural identity ----------

    def children(self) -> Tuple["Term", ...]:
        return ()

    def _label(self) -> object:
        raise NotImplementedError

    def structurally_equal(self, other: object) -> bool:
        if not isinstance(other, Term):
            return False
        stack: List[Tuple[Term, Term]] = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b:
                continue
            if type(a) is not type(b) or a._hash != b._hash:
                return False
            if a._label() != b._label():
                return False
            ca, cb = a.children(), b.children()
            if len(ca) != len(cb):
                return False
            stack.extend(zip(ca, cb))
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.structurally_equal(other)

    def __hash__(self) -> int:
        return self._hash

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ---------- structural analysis ----------

    def depth(self) -> int:
        """Longest chain of App nodes from the root to a leaf."""
        return _fold(self, lambda leaf: 0, lambda node, kids: 1 + max(kids))

    def count_nodes(self) -> int:
        return _fold(self, lambda leaf: 1, lambda node, kids: 1 + sum(kids))

    def is_closed(self) -> bool:
        """True if no Var occurs anywhere in the term."""
        stack: List[Term] = [self]
        while stack:
            t = stack.pop()
            if isinstance(t, Var):
                return False
            stack.extend(t.children())
        return True


class Ref(Term):
    """Reference to a global entity."""

    __slots__ = ("ref",)

    def __init__(self, ref: "GlobalRef", loc: Loc = GHOST) -> None:
        object.__setattr__(self, "ref", ref)
        object.__setattr__(self, "loc", loc)
        object.__setattr__(self, "_hash", hash(("Ref", ref)))

    def _label(self) -> object:
        return self.ref

    def __repr__(self) -> str:
        return f"Ref({self.ref.qualname})"


class Var(Term):
    """Free variable."""

    __slots__ = ("name",)

    def __init__(self, name: str, loc: Loc = GHOST) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "loc", loc)
        object.__setattr__(self, "_hash", hash(("Var", name)))

    def _label(self) -> object:
        return self.name

    def __repr__(self) -> str:
        return f"Var({self.name!r})"


class App(Term):
    """Application node. args may have any arity, including zero."""

    __slots__ = ("head", "args")

    def __init__(self, head: Term, args: Tuple[Term, ...], loc: Loc = GHOST) -> None:
        args = tuple(args)
        for a in (head, *args):
            if not isinstance(a, Term):
                raise TypeError(f"App expects Term children, got {type(a).__name__}")
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "args", args)
        object.__setattr__(self, "loc", loc)
        object.__setattr__(
            self, "_hash", hash(("App", head._hash, tuple(a._hash for a in args)))
        )

    def children(self) -> Tuple[Term, ...]:
        return (self.head, *self.args)

    def _label(self) -> object:
        return len(self.args)

    def __repr__(self) -> str:
        return f"App({self.head!r}, {self.args!r})"


def _fold(
    term: Term,
    leaf: Callable[[Term], int],
    node: Callable[[Term, List[int]], int],
) -> int:
    """Post-order fold over a term without Python recursion."""
    results: Dict[int, int] = {}
    stack: List[Tuple[Term, bool]] = [(term, False)]
    while stack:
        t, expanded = stack.pop()
        kids = t.children()
        if not kids:
            results[id(t)] = leaf(t)
        elif expanded:
            results[id(t)] = node(t, [results[id(k)] for k in kids])
        else:
            stack.append((t, True))
            stack.extend((k, False) for k in kids)
    return results[id(term)]


# ---------- construction / destructuring primitives ----------


def mk_ref(ref: "GlobalRef", loc: Loc = GHOST) -> Ref:
    return Ref(ref, loc)


def mk_app(head: Term, arg: Term, loc: Loc = GHOST) -> App:
    """Single-argument application, the only shape the codec builds."""
    return App(head, (arg,), loc)


def as_ref(term: object) -> Optional["GlobalRef"]:
    """The GlobalRef if term is a bare reference, else None."""
    return term.ref if isinstance(term, Ref) else None


def as_app(term: object) -> Optional[Tuple[Term, Tuple[Term, ...]]]:
    """(head, args) if term is an application, else None."""
    if isinstance(term, App):
        return term.head, term.args
    return None


def head_ref(term: object) -> Optional["GlobalRef"]:
    """
    The global entity a term is "headed" by:
    Ref(r) -> r, App(Ref(r), ...) -> r, anything else -> None.
    """
    app = as_app(term)
    if app is not None:
        return as_ref(app[0])
    return as_ref(term)
