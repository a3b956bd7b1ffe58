from __future__ import annotations

import argparse

from lanedodge.ui.cli import commands
from lanedodge.backends.registry import available_backends


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LANEDODGE")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common_parent = argparse.ArgumentParser(add_help=False)
    common_parent.add_argument("--width", type=int, default=None)
    common_parent.add_argument("--height", type=int, default=None)
    common_parent.add_argument("--seed", type=int, default=None)

    sub = subparsers.add_parser("play", parents=[common_parent], help="Open the game window")
    sub.add_argument("--container", default=None, help="Window/container id")
    sub.add_argument("--tick-ms", type=float, default=None, help="Tick period in milliseconds")
    sub.set_defaults(func=commands.cmd_play)

    sub = subparsers.add_parser("simulate", parents=[common_parent], help="Run headless autopilot games")
    sub.add_argument("--sims", type=int, default=None)
    sub.add_argument("--max-ticks", type=int, default=None)
    sub.add_argument("--save", action="store_true", help="Write a JSON summary to the results dir")
    sub.set_defaults(func=commands.cmd_simulate)

    sub = subparsers.add_parser("report", parents=[common_parent], help="Print the saved simulation summary")
    sub.set_defaults(func=commands.cmd_report)

    sub = subparsers.add_parser("doctor", parents=[common_parent], help="Check environment/dependencies")
    sub.add_argument("--backend", choices=available_backends(), default=None)
    sub.set_defaults(func=commands.cmd_doctor)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
