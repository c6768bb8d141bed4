from __future__ import annotations

"""
nat-numeral CLI

Parse a numeral literal into its O/S term, or read a term and print it
back through the numeral notation. Builds a fresh environment per run
(nat declared under the configured path) and emits JSON.

    python3 -m nat_numeral.numeral_cli parse 3%nat --pretty
    python3 -m nat_numeral.numeral_cli print "S (S O)"
    python3 -m nat_numeral.numeral_cli --dev print "Top.S Top.O"

Contract: emits JSON with schema tag + schema_doc.
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from nat_numeral.config import DEV_PATH, resolution_path
from nat_numeral.errors import NatNumeralError
from nat_numeral.prelude import bootstrap
from nat_numeral.printer import print_term
from nat_numeral.syntax import parse_numeral, read_term

SCHEMA_TAG = "nat-numeral-run.v1"
SCHEMA_DOC = "docs/nat_numeral_run_schema.md"

# Structural rendering is skipped above this depth; the value is enough.
MAX_RENDER_DEPTH = 64

log = logging.getLogger(__name__)


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="nat-numeral",
        description="Parse decimal numerals into unary nat terms and print them back, as JSON.",
    )
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc path and exit.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--dev", action="store_true", help=f"Declare nat under the development root {'.'.join(DEV_PATH)}.")
    ap.add_argument("--path", default=None, help="Dotted path to declare/resolve nat under (overrides --dev and env).")
    ap.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    ap.add_argument("command", nargs="?", choices=["parse", "print"], help="parse a literal, or print a term")
    ap.add_argument("text", nargs="?", help='Numeral literal (e.g. "3%%nat") or term (e.g. "S (S O)").')
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_DOC}")
        return 0

    if args.command is None or args.text is None:
        ap.error("command and text are required unless --schema is used")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        if args.path is not None:
            path = resolution_path(args.path)
        elif args.dev:
            path = DEV_PATH
        else:
            path = resolution_path()
    except (TypeError, ValueError) as e:
        ap.error(f"invalid resolution path: {e}")

    env = bootstrap(path)

    ok = True
    error: Optional[str] = None
    term = None
    try:
        if args.command == "parse":
            term = parse_numeral(args.text, env.notations, default_scope=env.default_scope)
        else:
            term = read_term(
                args.text,
                env.symbols,
                env.notations,
                env.open_paths,
                env.default_scope,
            )
    except NatNumeralError as e:
        log.debug("elaboration failed: %s", e)
        ok = False
        error = f"{type(e).__name__}: {e}"

    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "command": args.command,
        "input": args.text,
        "ok": ok,
        "error": error,
        "path": ".".join(path),
        "value": None,
        "printed": None,
        "structure": None,
        "depth": None,
    }

    if term is not None:
        depth = term.depth()
        payload["value"] = env.codec.decode(term)
        payload["printed"] = print_term(term, env.notations, open_scopes=env.open_scopes)
        payload["depth"] = depth
        if depth <= MAX_RENDER_DEPTH:
            payload["structure"] = print_term(term, env.notations, scopes=[])

    _emit(payload, pretty=bool(args.pretty))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
