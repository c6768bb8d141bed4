# nat_numeral/symbols.py
"""
In-memory global symbol table: the host's name -> entity registry.

The codec never hard-codes its constructors. It asks this table for them by
(logical path, short name) and gets back an opaque GlobalRef handle.

Design:

- A table is just a dict[(path, name), GlobalRef].
- Handles are frozen and hashable; the only operation the codec performs
  on them is equality. They are minted by declare(), never by hand.
- resolve() is late-bound: it answers with whatever is declared *now*, so
  the same codec can be pointed at a development root or at the permanent
  installed path without code changes (see nat_numeral.config).
- A process-wide default table (GLOBAL_SYMBOLS) plus module-level helpers:
    * declare(path, name, kind)
    * resolve(path, name)
    * has_symbol(path, name)
    * list_symbols()
    * clear_registry()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .config import PathLike, normalize_path
from .errors import DuplicateSymbolError, ResolutionError

log = logging.getLogger(__name__)


class RefKind(Enum):
    """What sort of global entity a handle denotes."""
    CONST = "const"
    INDUCTIVE = "inductive"
    CONSTRUCTOR = "constructor"


@dataclass(frozen=True, slots=True)
class GlobalRef:
    """
    Opaque handle to one declared global entity.

    For constructors, ``index`` is the 1-based constructor position inside
    its inductive type; otherwise it is None.
    """

    kind: RefKind
    path: Tuple[str, ...]
    name: str
    index: Optional[int] = None

    @property
    def qualname(self) -> str:
        return ".".join((*self.path, self.name))

    def __str__(self) -> str:
        return self.qualname


class SymbolTable:
    """Dict-backed registry of global entities keyed by (path, name)."""

    def __init__(self) -> None:
        self._entries: Dict[Tuple[Tuple[str, ...], str], GlobalRef] = {}

    # ---------------------------------------------------------------------
    # Declaration
    # ---------------------------------------------------------------------

    def declare(
        self,
        path: PathLike,
        name: str,
        kind: RefKind = RefKind.CONST,
        index: Optional[int] = None,
    ) -> GlobalRef:
        """
        Declare a new global entity and return its handle.

        Raises:
            DuplicateSymbolError: if path.name is already declared.
        """
        p = normalize_path(path)
        _check_name(name)
        key = (p, name)
        if key in self._entries:
            raise DuplicateSymbolError(p, name)
        ref = GlobalRef(kind=kind, path=p, name=name, index=index)
        self._entries[key] = ref
        log.debug("declared %s %s", kind.value, ref.qualname)
        return ref

    def declare_inductive(
        self,
        path: PathLike,
        name: str,
        constructors: Sequence[str],
    ) -> Tuple[GlobalRef, List[GlobalRef]]:
        """
        Declare an inductive type and its constructors side by side.

        Constructors are declared in order with 1-based indices. Nothing is
        declared if any of the names clashes.
        """
        p = normalize_path(path)
        names = [name, *constructors]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate names in inductive declaration: {names!r}")
        for n in names:
            _check_name(n)
            if (p, n) in self._entries:
                raise DuplicateSymbolError(p, n)
        ind = self.declare(p, name, RefKind.INDUCTIVE)
        ctors = [
            self.declare(p, c, RefKind.CONSTRUCTOR, index=i)
            for i, c in enumerate(constructors, start=1)
        ]
        return ind, ctors

    # ---------------------------------------------------------------------
    # Lookup
    # ---------------------------------------------------------------------

    def resolve(self, path: PathLike, name: str) -> GlobalRef:
        """
        Look up path.name.

        Raises:
            ResolutionError: if nothing is declared under that name.
        """
        p = normalize_path(path)
        ref = self._entries.get((p, name))
        if ref is None:
            log.debug("unresolved %s", ".".join((*p, name)))
            raise ResolutionError(p, name)
        return ref

    def resolve_qualified(self, qualname: str) -> GlobalRef:
        """Resolve a dotted name such as "Coq.Init.Datatypes.S"."""
        *path, name = qualname.split(".")
        return self.resolve(path, name)

    def lookup(self, path: PathLike, name: str) -> Optional[GlobalRef]:
        """Like resolve() but returns None instead of raising."""
        return self._entries.get((normalize_path(path), name))

    def has_symbol(self, path: PathLike, name: str) -> bool:
        return self.lookup(path, name) is not None

    def list_symbols(self) -> List[str]:
        """All declared qualified names, sorted for stability."""
        return sorted(ref.qualname for ref in self._entries.values())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[GlobalRef]:
        return iter(list(self._entries.values()))


def _check_name(name: str) -> None:
    if not isinstance(name, str):
        raise TypeError(f"name must be str, got {type(name).__name__}")
    if not name or "." in name or any(ch.isspace() for ch in name):
        raise ValueError(f"invalid short name: {name!r}")


# ---------------------------------------------------------------------------
# Process-wide default table
# ---------------------------------------------------------------------------

GLOBAL_SYMBOLS = SymbolTable()


def declare(
    path: PathLike,
    name: str,
    kind: RefKind = RefKind.CONST,
    index: Optional[int] = None,
) -> GlobalRef:
    return GLOBAL_SYMBOLS.declare(path, name, kind, index)


def resolve(path: PathLike, name: str) -> GlobalRef:
    return GLOBAL_SYMBOLS.resolve(path, name)


def has_symbol(path: PathLike, name: str) -> bool:
    return GLOBAL_SYMBOLS.has_symbol(path, name)


def list_symbols() -> List[str]:
    return GLOBAL_SYMBOLS.list_symbols()


def clear_registry() -> None:
    """
    Remove all globally declared symbols.

    Used by tests and callers that want a clean slate.
    """
    GLOBAL_SYMBOLS.clear()
