from .term import (
    GHOST,
    App,
    Loc,
    Ref,
    Term,
    Var,
    as_app,
    as_ref,
    head_ref,
    mk_app,
    mk_ref,
)

__all__ = [
    "GHOST",
    "App",
    "Loc",
    "Ref",
    "Term",
    "Var",
    "as_app",
    "as_ref",
    "head_ref",
    "mk_app",
    "mk_ref",
]
