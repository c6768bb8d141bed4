# nat_numeral/syntax.py
"""
Host-side surface syntax: numeral literals and a tiny term reader.

Numeral literals
----------------
    3           numeral in the default scope
    3%nat       numeral in the scope whose delimiter key is "nat"
    -3%nat      parsed with its sign; the scope's encoder rejects it

Only decimal digit strings are numerals. 0x10, 1_000 and 1.5 are syntax
errors, not numerals in another base.

Terms
-----
    S (S O)     application by juxtaposition, parentheses for grouping
    f x 2%nat   multi-argument application, App(f, (x, 2))

Identifiers are resolved against a list of open paths (first hit wins) or
directly when dotted (Coq.Init.Datatypes.S). An unknown lower-case name is
a free variable; an unknown capitalised name is a ResolutionError.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from .core.term import App, Loc, Ref, Term, Var
from .errors import NumeralSyntaxError, ResolutionError
from .notation import NotationTable
from .symbols import SymbolTable

_NUMERAL_RE = re.compile(
    r"(?P<sign>-)?(?P<digits>[0-9]+)(?:%(?P<key>[A-Za-z_][A-Za-z0-9_]*))?"
)

_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
  | (?P<lparen>\()
  | (?P<rparen>\))
  | (?P<numeral>-?[0-9][A-Za-z0-9_.%]*)
  | (?P<ident>[A-Za-z_][A-Za-z0-9_']*(?:\.[A-Za-z_][A-Za-z0-9_']*)*)
    """,
    re.VERBOSE,
)


def parse_numeral(
    text: str,
    notations: NotationTable,
    loc: Optional[Loc] = None,
    default_scope: Optional[str] = None,
) -> Term:
    """
    Turn a numeral literal into a term via its scope's interpreter.

    Raises:
        NumeralSyntaxError: text is not [-]digits[%key], or no scope applies.
        UnknownScopeError: the %key names no known scope.
        NegativeNumeralError: from the interpreter, for negative literals.
    """
    loc = Loc(0, len(text)) if loc is None else loc
    m = _NUMERAL_RE.fullmatch(text)
    if m is None:
        raise NumeralSyntaxError(text, loc, "not a decimal numeral")
    key = m.group("key")
    if key is not None:
        scope = notations.scope_of_delimiter(key)
    elif default_scope is not None:
        scope = default_scope
    else:
        raise NumeralSyntaxError(text, loc, "no numeral scope for literal")
    value = int(m.group("digits"))
    if m.group("sign"):
        value = -value
    return notations.interpret(scope, loc, value)


def _tokenize(text: str, source: Optional[str]) -> List[Tuple[str, str, Loc]]:
    tokens: List[Tuple[str, str, Loc]] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise NumeralSyntaxError(text, Loc(pos, pos + 1, source), f"unexpected character at {pos}")
        kind = m.lastgroup
        if kind != "ws":
            tokens.append((kind, m.group(), Loc(m.start(), m.end(), source)))
        pos = m.end()
    return tokens


class _Frame:
    """Atoms collected at one parenthesis level."""

    __slots__ = ("atoms", "start", "open_loc")

    def __init__(self, start: int, open_loc: Optional[Loc]) -> None:
        self.atoms: List[Term] = []
        self.start = start
        self.open_loc = open_loc


class TermReader:
    """
    Reader for the application syntax above.

    Parenthesis nesting is tracked on an explicit stack of frames, so input
    nested deeper than the interpreter's recursion limit still reads.
    """

    def __init__(
        self,
        symbols: SymbolTable,
        notations: NotationTable,
        open_paths: Sequence[Sequence[str]] = (),
        default_scope: Optional[str] = None,
        source: Optional[str] = None,
    ) -> None:
        self.symbols = symbols
        self.notations = notations
        self.open_paths = [tuple(p) for p in open_paths]
        self.default_scope = default_scope
        self.source = source

    def read(self, text: str) -> Term:
        tokens = _tokenize(text, self.source)
        if not tokens:
            raise NumeralSyntaxError(text, Loc(0, 0, self.source), "empty term")

        stack: List[_Frame] = [_Frame(tokens[0][2].start, None)]
        last_end = 0
        for kind, value, loc in tokens:
            top = stack[-1]
            if not top.atoms and top.open_loc is not None:
                top.start = loc.start
            if kind == "lparen":
                stack.append(_Frame(loc.end, loc))
            elif kind == "rparen":
                if len(stack) == 1 or not top.atoms:
                    raise NumeralSyntaxError(text, loc, f"unexpected {value!r}")
                stack.pop()
                stack[-1].atoms.append(self._close(top, last_end))
            elif kind == "numeral":
                top.atoms.append(parse_numeral(value, self.notations, loc, self.default_scope))
            elif kind == "ident":
                top.atoms.append(self._identifier(value, loc))
            else:
                raise NumeralSyntaxError(text, loc, f"unexpected {value!r}")
            last_end = loc.end

        if len(stack) > 1:
            raise NumeralSyntaxError(text, stack[-1].open_loc, "unbalanced parenthesis")
        return self._close(stack[0], last_end)

    def _close(self, frame: _Frame, end: int) -> Term:
        if len(frame.atoms) == 1:
            return frame.atoms[0]
        head, *args = frame.atoms
        return App(head, tuple(args), Loc(frame.start, end, self.source))

    def _identifier(self, name: str, loc: Loc) -> Term:
        if "." in name:
            return Ref(self.symbols.resolve_qualified(name), loc)
        for path in self.open_paths:
            ref = self.symbols.lookup(path, name)
            if ref is not None:
                return Ref(ref, loc)
        if name[0].islower() or name[0] == "_":
            return Var(name, loc)
        raise ResolutionError(self.open_paths[0] if self.open_paths else (), name)


def read_term(
    text: str,
    symbols: SymbolTable,
    notations: NotationTable,
    open_paths: Sequence[Sequence[str]] = (),
    default_scope: Optional[str] = None,
) -> Term:
    """Read *text* into a term. See TermReader."""
    return TermReader(symbols, notations, open_paths, default_scope).read(text)
