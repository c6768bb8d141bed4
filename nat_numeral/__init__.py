# nat_numeral/__init__.py
"""
nat_numeral public API surface.

Decimal numerals <-> unary O/S terms of a user-declared nat type, with the
constructors looked up by name in a live symbol table.

    - Terms: Term, Ref, App, Var, Loc
    - Symbols: SymbolTable, GlobalRef, RefKind, GLOBAL_SYMBOLS
    - Codec: NatCodec
    - Notation: NotationTable, NumeralInterpreter, GLOBAL_NOTATIONS, register_nat_notation
    - Prelude: declare_nat, install, bootstrap, Environment
    - Syntax / printing: parse_numeral, read_term, print_term
    - Errors: NatNumeralError and subclasses
"""

from __future__ import annotations

import logging

from .core.term import App, GHOST, Loc, Ref, Term, Var
from .errors import (
    DuplicateSymbolError,
    NatNumeralError,
    NegativeNumeralError,
    NotationConflictError,
    NumeralSyntaxError,
    ResolutionError,
    UnknownScopeError,
)
from .symbols import GLOBAL_SYMBOLS, GlobalRef, RefKind, SymbolTable
from .codec import NatCodec
from .notation import (
    GLOBAL_NOTATIONS,
    NotationTable,
    NumeralInterpreter,
    clear_notations,
    register_nat_notation,
)
from .prelude import Environment, bootstrap, declare_nat, install
from .syntax import parse_numeral, read_term
from .printer import print_term

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # terms
    "App",
    "GHOST",
    "Loc",
    "Ref",
    "Term",
    "Var",

    # errors
    "DuplicateSymbolError",
    "NatNumeralError",
    "NegativeNumeralError",
    "NotationConflictError",
    "NumeralSyntaxError",
    "ResolutionError",
    "UnknownScopeError",

    # symbols
    "GLOBAL_SYMBOLS",
    "GlobalRef",
    "RefKind",
    "SymbolTable",

    # codec
    "NatCodec",

    # notation
    "GLOBAL_NOTATIONS",
    "NotationTable",
    "NumeralInterpreter",
    "clear_notations",
    "register_nat_notation",

    # prelude
    "Environment",
    "bootstrap",
    "declare_nat",
    "install",

    # syntax / printing
    "parse_numeral",
    "read_term",
    "print_term",
]
