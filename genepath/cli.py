"""Command-line entry point for the gene mutation optimizer.

Subcommands:

* ``path START TARGET``  shortest mutation path, or suggestions for unknown genes
* ``history``            show previously recorded optimizations
* ``export``             write the mutation graph as DOT or JSON
* ``menu``               interactive numbered menu
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

from . import export
from .config import GRAPH_STRATEGIES, Settings, build_settings
from .errors import InputAbsentError
from .explain import render_history, render_result
from .history import MutationHistory
from .session import MutationSession

EXIT_INPUT_ABSENT = 2

MENU = """
==============================
Gene Mutation Optimizer
==============================
1. Optimize Gene Mutation
2. View Mutation History
3. Exit
=============================="""


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides: Dict[str, object] = {}
    if args.dictionary:
        overrides["DICTIONARY"] = args.dictionary
    if args.history_file:
        overrides["HISTORY"] = args.history_file
    if args.alphabet:
        overrides["ALPHABET"] = args.alphabet
    if args.strategy:
        overrides["GRAPH_STRATEGY"] = args.strategy
    if args.weight is not None:
        overrides["EDIT_WEIGHT"] = args.weight
    return build_settings(overrides)


def cmd_path(args: argparse.Namespace, out: TextIO) -> int:
    settings = args.settings
    session = MutationSession.from_settings(settings, with_history=not args.no_history)
    result = session.query(args.start, args.target)
    print(render_result(result), file=out)
    return 0


def cmd_history(args: argparse.Namespace, out: TextIO) -> int:
    settings = args.settings
    history = MutationHistory(settings.history_path)
    print(render_history(history.load()), file=out)
    return 0


def cmd_export(args: argparse.Namespace, out: TextIO) -> int:
    settings = args.settings
    session = MutationSession.from_settings(settings, with_history=False)
    if args.out:
        path = export.write(session.graph, args.out, fmt=args.format)
        print(f"Saved {path}: {json.dumps(export.summary(session.graph), sort_keys=True)}", file=out)
    elif args.format == "dot":
        out.write(export.to_dot(session.graph))
    else:
        print(export.to_json(session.graph), file=out)
    return 0


def run_menu(
    session: MutationSession,
    input_fn: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    """Loop over the numbered menu until the user exits or input ends."""
    out = out or sys.stdout
    while True:
        print(MENU, file=out)
        try:
            choice = input_fn("Choose an option: ").strip()
            if choice == "1":
                start = input_fn("Enter Start Gene: ")
                target = input_fn("Enter Target Gene: ")
                print(render_result(session.query(start, target)), file=out)
            elif choice == "2":
                entries = session.history.entries if session.history is not None else []
                print(render_history(entries), file=out)
            elif choice == "3":
                print("Goodbye!", file=out)
                return 0
            else:
                print("Invalid option!", file=out)
        except EOFError:
            print("Goodbye!", file=out)
            return 0


def cmd_menu(args: argparse.Namespace, out: TextIO) -> int:
    settings = args.settings
    session = MutationSession.from_settings(settings, with_history=True)
    return run_menu(session, out=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="genepath", description="Find shortest gene mutation paths")
    parser.add_argument("--dictionary", help="Gene dictionary file, one gene per line")
    parser.add_argument("--history-file", help="Mutation history file")
    parser.add_argument("--alphabet", help="Allowed gene symbols, e.g. ACGT")
    parser.add_argument("--strategy", choices=GRAPH_STRATEGIES, help="Graph construction strategy")
    parser.add_argument("--weight", type=int, help="Flat cost per mutation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    path_parser = sub.add_parser("path", help="Find the shortest mutation path")
    path_parser.add_argument("start")
    path_parser.add_argument("target")
    path_parser.add_argument("--no-history", action="store_true", help="Do not record the result")
    path_parser.set_defaults(func=cmd_path)

    history_parser = sub.add_parser("history", help="Show recorded optimizations")
    history_parser.set_defaults(func=cmd_history)

    export_parser = sub.add_parser("export", help="Export the mutation graph")
    export_parser.add_argument("--format", choices=export.EXPORT_FORMATS, default="dot")
    export_parser.add_argument("--out", help="Output file; stdout when omitted")
    export_parser.set_defaults(func=cmd_export)

    menu_parser = sub.add_parser("menu", help="Interactive menu")
    menu_parser.set_defaults(func=cmd_menu)
    return parser


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.settings = _settings_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    try:
        return args.func(args, out)
    except InputAbsentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ABSENT


if __name__ == "__main__":
    sys.exit(main())
