# nat_numeral/printer.py
"""
Pretty-printer for terms, numeral-aware.

Usage:

    from nat_numeral import bootstrap, print_term

    env = bootstrap()
    t = env.codec.encode(None, 3)
    print(print_term(t, env.notations))            # 3
    print(print_term(t, env.notations, open_scopes=[]))   # 3%nat

Conventions
-----------
* A subterm some registered interpreter decodes is printed as a decimal
  numeral: bare if its scope is open, else suffixed with the scope's
  delimiter key (``3%nat``), or the scope name if it has no key.
* References print by short name, variables by name.
* Applications print by juxtaposition, ``S x`` / ``f (S x) 2``;
  compound arguments and compound heads are parenthesised.
* Past ``max_depth`` nested applications a subterm prints as ``…``;
  past ``max_width`` arguments the rest collapse into one ``…``.
* An application to zero arguments prints as its head.

Rendering runs on an explicit stack, so successor chains of any depth
print. Inside a run of one unary numeral head (S (S (S x))) the
numeral check is made once, at the top of the run: if S^k x is not a
numeral, neither is any S^j x below it.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .core.term import App, Ref, Term, Var, as_ref
from .notation import NotationTable

_VISIT = "visit"
_BUILD = "build"


def format_numeral(value: int, scope: str, notations: NotationTable, open_scopes: Iterable[str]) -> str:
    if scope in open_scopes:
        return str(value)
    key = notations.delimiter_of_scope(scope)
    return f"{value}%{key if key is not None else scope}"


def print_term(
    term: Term,
    notations: NotationTable,
    *,
    scopes: Optional[Iterable[str]] = None,
    open_scopes: Optional[Iterable[str]] = None,
    max_depth: Optional[int] = None,
    max_width: Optional[int] = None,
) -> str:
    """Render *term*; see the module docstring for conventions.

    Parameters
    ----------
    scopes:
        Scopes whose interpreters may print numerals, in priority order.
        Defaults to every scope in *notations*.
    open_scopes:
        Scopes printed without a delimiter. Defaults to *scopes*.
    """
    scope_list = notations.scopes() if scopes is None else list(scopes)
    open_list = scope_list if open_scopes is None else list(open_scopes)
    heads = notations.printable_heads(scope_list)

    def numeral(node: Term) -> Optional[str]:
        hit = notations.uninterpret(node, scope_list)
        if hit is None:
            return None
        value, scope = hit
        return format_numeral(value, scope, notations, open_list)

    def same_unary_head(node: App, arg: Term) -> bool:
        r = as_ref(node.head)
        return (
            r is not None
            and r in heads
            and len(node.args) == 1
            and isinstance(arg, App)
            and len(arg.args) == 1
            and as_ref(arg.head) == r
        )

    # (text, atomic); non-atomic text needs parens as an argument.
    results: List[Tuple[str, bool]] = []
    work: List[tuple] = [(_VISIT, term, 0, False)]
    while work:
        task = work.pop()

        if task[0] == _BUILD:
            _, count, truncated = task
            parts = results[-count:]
            del results[-count:]
            texts = [s if atomic else f"({s})" for s, atomic in parts]
            if truncated:
                texts.append("…")
            results.append((" ".join(texts), False))
            continue

        _, node, depth, known_plain = task
        if max_depth is not None and depth > max_depth:
            results.append(("…", True))
            continue

        if not known_plain:
            n = numeral(node)
            if n is not None:
                results.append((n, True))
                continue

        if isinstance(node, Ref):
            results.append((node.ref.name, True))
        elif isinstance(node, Var):
            results.append((node.name, True))
        elif isinstance(node, App):
            if not node.args:
                # h applied to nothing prints as h itself
                work.append((_VISIT, node.head, depth, False))
                continue
            args = node.args
            truncated = max_width is not None and len(args) > max_width
            if truncated:
                args = args[:max_width]
            work.append((_BUILD, 1 + len(args), truncated))
            for arg in reversed(args):
                work.append((_VISIT, arg, depth + 1, same_unary_head(node, arg)))
            work.append((_VISIT, node.head, depth, False))
        else:
            results.append((repr(node), True))

    return results[-1][0]
