# nat_numeral/notation.py
"""
Numeral-scope table: which parser/printer pair applies to a numeral.

A scope ("nat_scope") owns at most one NumeralInterpreter:

    encode            (loc, int) -> Term          used when parsing literals
    print_refs        reference terms the printer dispatches on
    decode            Term -> int | None          used when printing
    also_match_terms  try decode on *any* term headed by a print_ref,
                      not only on terms produced by this notation

Scopes may also have a delimiter key, so that "3%nat" selects nat_scope.

register_nat_notation() is the one-shot wiring of a NatCodec into a table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from .config import NAT_DELIMITER, NAT_SCOPE
from .core.term import Loc, Term, head_ref
from .errors import NotationConflictError, UnknownScopeError
from .symbols import GlobalRef

log = logging.getLogger(__name__)

Encoder = Callable[[Loc, int], Term]
Decoder = Callable[[Term], Optional[int]]
PrinterSpec = Tuple[Tuple[Term, ...], Decoder, bool]

CONFLICT_POLICIES = ("replace", "error")


@dataclass(frozen=True)
class NumeralInterpreter:
    """Everything the host needs to parse and print numerals of one scope."""

    scope: str
    diagnostic_path: Tuple[Tuple[str, ...], str]
    encode: Encoder
    print_refs: Tuple[Term, ...]
    decode: Decoder
    also_match_terms: bool

    def printable_heads(self) -> List[GlobalRef]:
        return [r for r in (head_ref(t) for t in self.print_refs) if r is not None]


class NotationTable:
    """Process-global table of numeral interpreters and scope delimiters."""

    def __init__(self, on_conflict: str = "replace") -> None:
        if on_conflict not in CONFLICT_POLICIES:
            raise ValueError(f"on_conflict must be one of {CONFLICT_POLICIES}, got {on_conflict!r}")
        self.on_conflict = on_conflict
        self._interpreters: Dict[str, NumeralInterpreter] = {}
        self._delimiters: Dict[str, str] = {}  # key -> scope

    # ---------------------------------------------------------------------
    # Registration
    # ---------------------------------------------------------------------

    def declare_numeral_interpreter(
        self,
        scope: str,
        diagnostic_path: Tuple[Tuple[str, ...], str],
        encode: Encoder,
        printer: PrinterSpec,
    ) -> NumeralInterpreter:
        print_refs, decode, also_match_terms = printer
        if not callable(encode) or not callable(decode):
            raise TypeError("encode and decode must be callable")
        existing = self._interpreters.get(scope)
        if existing is not None:
            if self.on_conflict == "error":
                raise NotationConflictError(scope)
            log.warning("replacing numeral interpreter for scope %s", scope)
        interp = NumeralInterpreter(
            scope=scope,
            diagnostic_path=(tuple(diagnostic_path[0]), diagnostic_path[1]),
            encode=encode,
            print_refs=tuple(print_refs),
            decode=decode,
            also_match_terms=bool(also_match_terms),
        )
        self._interpreters[scope] = interp
        log.debug("numeral interpreter registered for %s", scope)
        return interp

    def declare_delimiter(self, scope: str, key: str) -> None:
        if not key or not key.isidentifier():
            raise ValueError(f"invalid delimiter key: {key!r}")
        self._delimiters[key] = scope

    # ---------------------------------------------------------------------
    # Lookup
    # ---------------------------------------------------------------------

    def has_interpreter(self, scope: str) -> bool:
        return scope in self._interpreters

    def interpreter(self, scope: str) -> NumeralInterpreter:
        try:
            return self._interpreters[scope]
        except KeyError:
            raise UnknownScopeError(scope) from None

    def scope_of_delimiter(self, key: str) -> str:
        try:
            return self._delimiters[key]
        except KeyError:
            raise UnknownScopeError(key) from None

    def delimiter_of_scope(self, scope: str) -> Optional[str]:
        for key, s in self._delimiters.items():
            if s == scope:
                return key
        return None

    def scopes(self) -> List[str]:
        return sorted(self._interpreters)

    def interpret(self, scope: str, loc: Loc, n: int) -> Term:
        """Parse-time entry point: the term for numeral *n* in *scope*."""
        return self.interpreter(scope).encode(loc, n)

    def uninterpret(
        self,
        term: Term,
        scopes: Iterable[str] | None = None,
    ) -> Optional[Tuple[int, str]]:
        """
        Print-time entry point: (value, scope) of the first interpreter in
        *scopes* (all scopes by default) that recognises *term*, else None.
        """
        ref = head_ref(term)
        if ref is None:
            return None
        for scope in (self.scopes() if scopes is None else scopes):
            interp = self._interpreters.get(scope)
            if interp is None or not interp.also_match_terms:
                continue
            if ref not in interp.printable_heads():
                continue
            value = interp.decode(term)
            if value is not None:
                return value, scope
        return None

    def printable_heads(self, scopes: Iterable[str] | None = None) -> Set[GlobalRef]:
        """Head references any term-matching interpreter in *scopes* may print."""
        heads: Set[GlobalRef] = set()
        for scope in (self.scopes() if scopes is None else scopes):
            interp = self._interpreters.get(scope)
            if interp is not None and interp.also_match_terms:
                heads.update(interp.printable_heads())
        return heads

    def clear(self) -> None:
        self._interpreters.clear()
        self._delimiters.clear()


GLOBAL_NOTATIONS = NotationTable()


def clear_notations() -> None:
    """
    Remove all interpreters and delimiters from the process-wide table.

    Used by tests and callers that want a clean slate.
    """
    GLOBAL_NOTATIONS.clear()


def register_nat_notation(
    table: NotationTable,
    codec,
    scope: str = NAT_SCOPE,
    delimiter: str | None = NAT_DELIMITER,
) -> NumeralInterpreter:
    """
    Install *codec* (a NatCodec) as the numeral interpreter of *scope*.

    The interpreter is flagged to match arbitrary terms, so any closed
    S/O chain prints as a numeral however it was built.
    """
    interp = table.declare_numeral_interpreter(
        scope,
        (codec.path, "Datatypes"),
        codec.encode,
        (codec.print_refs, codec.decode, True),
    )
    if delimiter is not None:
        table.declare_delimiter(scope, delimiter)
    return interp
