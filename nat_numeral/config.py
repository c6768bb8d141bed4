# nat_numeral/config.py
"""
Where the nat type and its constructors are looked up.

The same codec source resolves its dependencies either under their
permanent installed namespace (DATATYPES_PATH) or under a temporary root
(DEV_PATH) used while the module defining nat is still being written.

Switches (read at call time, not import time, so tests can monkeypatch):

    NAT_NUMERAL_PATH=Some.Dotted.Path   explicit path, wins over everything
    NAT_NUMERAL_DEV=1                   use DEV_PATH
"""

from __future__ import annotations

import os
from typing import Sequence, Tuple, Union

DATATYPES_PATH: Tuple[str, ...] = ("Coq", "Init", "Datatypes")
DEV_PATH: Tuple[str, ...] = ("Top",)

# Short names of the entities the codec needs.
NAT_TYPE_NAME = "nat"
ZERO_NAME = "O"
SUCC_NAME = "S"

NAT_SCOPE = "nat_scope"
NAT_DELIMITER = "nat"

ENV_PATH = "NAT_NUMERAL_PATH"
ENV_DEV = "NAT_NUMERAL_DEV"

PathLike = Union[str, Sequence[str]]


def normalize_path(path: PathLike) -> Tuple[str, ...]:
    """
    Turn "A.B.C" or ["A", "B", "C"] into ("A", "B", "C").

    Empty segments are rejected; the empty string is the empty path.
    """
    if isinstance(path, str):
        if path == "":
            return ()
        segments = tuple(path.split("."))
    else:
        segments = tuple(path)
    for seg in segments:
        if not isinstance(seg, str):
            raise TypeError(f"path segment must be str, got {type(seg).__name__}")
        if not seg or seg != seg.strip() or "." in seg:
            raise ValueError(f"invalid path segment: {seg!r}")
    return segments


def dev_mode_enabled() -> bool:
    return os.environ.get(ENV_DEV, "0") == "1"


def resolution_path(override: PathLike | None = None) -> Tuple[str, ...]:
    """
    Effective logical path for nat, O and S.

    Priority:
      1) explicit override argument
      2) NAT_NUMERAL_PATH
      3) NAT_NUMERAL_DEV=1 -> DEV_PATH
      4) DATATYPES_PATH
    """
    if override is not None:
        return normalize_path(override)
    env_path = os.environ.get(ENV_PATH)
    if env_path:
        return normalize_path(env_path)
    if dev_mode_enabled():
        return DEV_PATH
    return DATATYPES_PATH
