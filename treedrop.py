#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import pathlib
import argparse

# Put this folder on sys.path so `core` / `ui` import when run from anywhere.
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent))

from ui.constants import DEFAULT_DIVISIONS, EXPAND_DELAY_MS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TreeDrop drag-and-drop tree demo")
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    parser.add_argument(
        "--divisions",
        type=int, choices=(2, 3), default=DEFAULT_DIVISIONS,
        help="Drop bands per row: 3 = above/inside/below, 2 = above/below."
    )
    parser.add_argument(
        "--expand-delay",
        type=int, default=EXPAND_DELAY_MS, metavar="MS",
        help="Hover time before a collapsed row opens during a drag (0 disables)."
    )
    parser.add_argument(
        "--collapse-on-drag",
        action="store_true",
        help="Collapse the dragged row's children while it is being dragged."
    )
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="Show the tree without allowing drags."
    )
    parser.add_argument(
        "--seed",
        type=int, default=None,
        help="Seed for the sample tree."
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write the log here on exit."
    )
    return parser


def run(argv=None):
    args = build_parser().parse_args(argv)

    from app import main
    from ui.drag_config import DragConfig

    return main(
        verbosity=args.verbosity,
        stdexp=args.stdexp,
        config=DragConfig.from_args(args),
        seed=args.seed,
        log_file=args.log_file,
    )


if __name__ == "__main__":
    sys.exit(run())
