# nat_numeral/prelude.py
"""
The nat data type and the load-time wiring of its numeral notation.

Load order mirrors a proof-assistant prelude:

    1. declare_nat()   Inductive nat := O | S (n : nat)   under some path
    2. install()       resolve nat/O/S under the configured path,
                       build the codec, register it for nat_scope

install() resolves everything before touching the notation table, so a
missing name raises ResolutionError and leaves the table as it was.

The path used in step 2 comes from nat_numeral.config, so while the
module that defines nat is being written it can live under DEV_PATH and
later move to DATATYPES_PATH with no change here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .codec import NatCodec
from .config import (
    NAT_SCOPE,
    NAT_TYPE_NAME,
    SUCC_NAME,
    ZERO_NAME,
    PathLike,
    resolution_path,
)
from .notation import GLOBAL_NOTATIONS, NotationTable, NumeralInterpreter, register_nat_notation
from .symbols import GlobalRef, SymbolTable

log = logging.getLogger(__name__)


def declare_nat(symbols: SymbolTable, path: PathLike) -> Tuple[GlobalRef, GlobalRef, GlobalRef]:
    """Declare nat with constructors O (index 1) and S (index 2). Returns (nat, O, S)."""
    nat, (zero, succ) = symbols.declare_inductive(path, NAT_TYPE_NAME, [ZERO_NAME, SUCC_NAME])
    return nat, zero, succ


def install(
    symbols: SymbolTable | None = None,
    notations: NotationTable | None = None,
    path: PathLike | None = None,
    scope: str = NAT_SCOPE,
) -> Tuple[NatCodec, NumeralInterpreter]:
    """
    Resolve the codec's handles and register it. Raises ResolutionError.

    Tables default to the process-wide GLOBAL_SYMBOLS / GLOBAL_NOTATIONS.
    """
    notations = GLOBAL_NOTATIONS if notations is None else notations
    codec = NatCodec.load(symbols, path)
    interp = register_nat_notation(notations, codec, scope=scope)
    log.debug("installed %s numerals from %s", scope, ".".join(codec.path) or "<root>")
    return codec, interp


@dataclass
class Environment:
    """A self-contained host: symbols, notations and the nat codec bound in them."""

    symbols: SymbolTable
    notations: NotationTable
    codec: NatCodec
    open_paths: List[Tuple[str, ...]] = field(default_factory=list)
    open_scopes: List[str] = field(default_factory=lambda: [NAT_SCOPE])

    @property
    def default_scope(self) -> str | None:
        return self.open_scopes[0] if self.open_scopes else None


def bootstrap(
    path: PathLike | None = None,
    symbols: SymbolTable | None = None,
    notations: NotationTable | None = None,
) -> Environment:
    """
    Build a fresh environment with nat declared and its numerals installed.

    path defaults to config.resolution_path(); fresh tables are created
    unless given.
    """
    p = resolution_path(path)
    symbols = SymbolTable() if symbols is None else symbols
    notations = NotationTable() if notations is None else notations
    declare_nat(symbols, p)
    codec, _interp = install(symbols, notations, p)
    return Environment(symbols=symbols, notations=notations, codec=codec, open_paths=[p])
