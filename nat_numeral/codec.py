# nat_numeral/codec.py
"""
Numeral codec for the unary natural-number type.

    encode(loc, n)  ->  S (S ( ... (S O)))       n applications of S
    decode(term)    ->  n, or None if term is not a closed numeral

The codec closes over three handles (nat, O, S) that NatCodec.load()
resolves from a symbol table. A NatCodec object only exists once all three
resolved, so encode/decode can never run against half-initialized state.

Both directions are loops, not recursion: the term for n is n deep.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .config import (
    NAT_TYPE_NAME,
    SUCC_NAME,
    ZERO_NAME,
    PathLike,
    resolution_path,
)
from .core.term import GHOST, Loc, Ref, Term, as_app, as_ref, mk_app, mk_ref
from .errors import NegativeNumeralError
from .symbols import GLOBAL_SYMBOLS, GlobalRef, SymbolTable

log = logging.getLogger(__name__)

ENCODE_OP = "encode_nat"


class _NotANumeral(Exception):
    """Raised inside decode() on the first non-matching node; never escapes."""


class NatCodec:
    """Encoder/decoder between int and O/S terms for one resolved nat."""

    def __init__(self, nat: GlobalRef, zero: GlobalRef, succ: GlobalRef) -> None:
        self._nat = nat
        self._zero = zero
        self._succ = succ

    @classmethod
    def load(
        cls,
        symbols: SymbolTable | None = None,
        path: PathLike | None = None,
    ) -> "NatCodec":
        """
        Resolve nat, O and S under *path* and build a codec.

        path defaults to config.resolution_path() (env-aware) and symbols
        to the process-wide table.

        Raises:
            ResolutionError: on the first of the three names that is absent.
        """
        table = GLOBAL_SYMBOLS if symbols is None else symbols
        p = resolution_path(path)
        nat = table.resolve(p, NAT_TYPE_NAME)
        zero = table.resolve(p, ZERO_NAME)
        succ = table.resolve(p, SUCC_NAME)
        log.debug("nat codec bound to %s, %s, %s", nat, zero, succ)
        return cls(nat, zero, succ)

    # ---------- handles ----------

    @property
    def nat(self) -> GlobalRef:
        return self._nat

    @property
    def zero(self) -> GlobalRef:
        return self._zero

    @property
    def succ(self) -> GlobalRef:
        return self._succ

    @property
    def path(self) -> Tuple[str, ...]:
        return self._nat.path

    @property
    def print_refs(self) -> Tuple[Ref, Ref]:
        """Reference terms (S, O) the printer dispatches on."""
        return (mk_ref(self._succ), mk_ref(self._zero))

    # ---------- int -> term ----------

    def encode(self, loc: Loc, n: int) -> Term:
        """Build S^n(O), every node tagged with *loc*."""
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"{ENCODE_OP} expects an int, got {type(n).__name__}")
        if n < 0:
            raise NegativeNumeralError(loc, f"{ENCODE_OP}: negative numbers not allowed")
        loc = GHOST if loc is None else loc
        term: Term = mk_ref(self._zero, loc)
        remaining = n
        while remaining:
            term = mk_app(mk_ref(self._succ, loc), term, loc)
            remaining -= 1
        return term

    # ---------- term -> int ----------

    def _count_successors(self, term: Term) -> int:
        n = 0
        cur = term
        while True:
            if as_ref(cur) == self._zero:
                return n
            app = as_app(cur)
            if app is None:
                raise _NotANumeral(cur)
            head, args = app
            if as_ref(head) != self._succ or len(args) != 1:
                raise _NotANumeral(cur)
            n += 1
            cur = args[0]

    def decode(self, term: Term) -> Optional[int]:
        """The value of a closed numeral term, or None for any other term."""
        try:
            return self._count_successors(term)
        except _NotANumeral:
            return None

    def is_numeral(self, term: Term) -> bool:
        return self.decode(term) is not None

    def __repr__(self) -> str:
        return f"NatCodec({self._nat.qualname})"
