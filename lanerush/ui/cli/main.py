from __future__ import annotations

import argparse

from lanerush.simulation.autopilot import available_autopilots
from lanerush.ui.cli import commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LANE RUSH")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common_parent = argparse.ArgumentParser(add_help=False)
    common_parent.add_argument("--lanes", type=int, default=None)
    common_parent.add_argument("--seed", type=int, default=None)

    sub = subparsers.add_parser("play", parents=[common_parent], help="Open the game window")
    sub.add_argument("--width", type=int, default=None)
    sub.add_argument("--height", type=int, default=None)
    sub.set_defaults(func=commands.cmd_play)

    sub = subparsers.add_parser("simulate", parents=[common_parent], help="Run headless autopilot games")
    sub.add_argument("--autopilot", choices=available_autopilots(), default="dodge")
    sub.add_argument("--runs", type=int, default=None)
    sub.add_argument("--workers", type=int, default=None)
    sub.set_defaults(func=commands.cmd_simulate)

    sub = subparsers.add_parser("doctor", parents=[common_parent], help="Check environment/dependencies")
    sub.set_defaults(func=commands.cmd_doctor)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
