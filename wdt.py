#!/usr/bin/env python3
"""
wdt.py

Prints the working directory tree: the entries below a location, one per
line, indented by nesting level, down to --depth levels or to every leaf.

Usage:
    python wdt.py                  # children of the current directory
    python wdt.py src -d 3         # three levels below src/
    python wdt.py ~/Projects -l -a # everything, dotfiles included
"""

import argparse
import os
import sys

from config import COLOR, DEPTH, SHOW_HIDDEN
from control import color_modes
from utilities.logging import setup_logging
from utilities.tree import TraversalError, TraversalRequest, visit

logger = setup_logging(__name__)


def _depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth {value!r}") from None
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must be >= 0, got {depth}")
    return depth


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wdt",
        description="Print the directory tree below a location.",
    )
    parser.add_argument(
        "location",
        nargs="?",
        default=".",
        help="Location to start the directory tree traversal (default: current directory)",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=_depth,
        default=DEPTH,
        help=f"Depth to traverse the directory tree (default: {DEPTH})",
    )
    parser.add_argument(
        "-l",
        "--leaf",
        action="store_true",
        help="Traverse the tree to all leaf nodes; overrides --depth",
    )
    hidden = parser.add_mutually_exclusive_group()
    hidden.add_argument(
        "-a",
        "--all",
        dest="show_hidden",
        action="store_true",
        help="Show entries whose name starts with '.'",
    )
    hidden.add_argument(
        "--hide-hidden",
        dest="show_hidden",
        action="store_false",
        help="Hide entries whose name starts with '.'",
    )
    parser.set_defaults(show_hidden=SHOW_HIDDEN)
    parser.add_argument(
        "--color",
        choices=color_modes,
        default=COLOR,
        help=f"Color the connectors (default: {COLOR})",
    )
    return parser


def use_color(mode: str, stream) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def request_from_args(args: argparse.Namespace) -> TraversalRequest:
    hide_dotfiles = not args.show_hidden
    if args.leaf:
        return TraversalRequest.to_leaves(args.location, hide_dotfiles=hide_dotfiles)
    return TraversalRequest.bounded(args.location, args.depth, hide_dotfiles=hide_dotfiles)


def _redirect_stdout_to_devnull() -> None:
    # the reader went away; later flushes at exit must not hit the closed pipe
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    request = request_from_args(args)
    logger.debug(f"walking {request}")

    try:
        visit(request, out=sys.stdout, color=use_color(args.color, sys.stdout))
        sys.stdout.flush()
    except TraversalError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        _redirect_stdout_to_devnull()
        return 141
    return 0


if __name__ == "__main__":
    sys.exit(main())
