# nat_numeral/errors.py
"""
Error taxonomy for nat_numeral.

Everything raised on purpose by this package derives from NatNumeralError,
so hosts can catch the whole family with one clause.

    ResolutionError       a global name is not declared (fatal at load)
    NegativeNumeralError  encode() got n < 0 (scoped to one literal)
    NumeralSyntaxError    literal text is not a decimal numeral
    DuplicateSymbolError  a qualified name was declared twice
    NotationConflictError a scope already has an interpreter (strict policy)
    UnknownScopeError     no interpreter / delimiter for a scope

"Not a numeral" is NOT an error: decode() returns None.
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple


def _dotted(path: Sequence[str], name: str | None = None) -> str:
    parts = list(path)
    if name is not None:
        parts.append(name)
    return ".".join(parts)


class NatNumeralError(Exception):
    """Base class for nat_numeral errors."""
    pass


class ResolutionError(NatNumeralError):
    """A (path, name) pair does not denote a declared global entity."""

    def __init__(self, path: Sequence[str], name: str) -> None:
        self.path: Tuple[str, ...] = tuple(path)
        self.name = name
        super().__init__(f"unresolved global reference: {_dotted(self.path, name)}")


class DuplicateSymbolError(NatNumeralError):
    """A qualified name was declared twice in the same symbol table."""

    def __init__(self, path: Sequence[str], name: str) -> None:
        self.path: Tuple[str, ...] = tuple(path)
        self.name = name
        super().__init__(f"global reference already declared: {_dotted(self.path, name)}")


class NegativeNumeralError(NatNumeralError):
    """encode() was called with a negative value."""

    def __init__(self, loc: Any, message: str) -> None:
        self.loc = loc
        self.message = message
        super().__init__(f"{message} (at {loc})" if loc is not None else message)


class NumeralSyntaxError(NatNumeralError):
    """Literal text is not a well-formed decimal numeral / term."""

    def __init__(self, text: str, loc: Any, message: str) -> None:
        self.text = text
        self.loc = loc
        self.message = message
        super().__init__(f"{message}: {text!r}")


class NotationConflictError(NatNumeralError):
    """A numeral interpreter is already registered for the scope."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"numeral interpreter already declared for scope {scope!r}")


class UnknownScopeError(NatNumeralError):
    """No interpreter or delimiter is known for the requested scope/key."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"unknown numeral scope or delimiter: {scope!r}")
