import os
import sys
import asyncio
import argparse

from .utils import forward_logs, listen_to_logs
from .session import SessionManager
from .confirm import maybe_confirm
from .multi_select import MultiSelectOption, maybe_multi_select
from .selection import EXIT_CODE_CANCELLED


def parse_yes_no(value):
    value = value.lower()
    if value in ("y", "yes", "true", "1"):
        return True
    elif value in ("n", "no", "false", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected yes or no, not {value!r}")


def make_parser():
    parser = argparse.ArgumentParser(
        prog="pyprompt", description="Interactive prompts for shell scripts."
    )
    parser.add_argument("--version", action="store_true", help="show the version")
    parser.add_argument(
        "--listen", action="store_true", help="print the logs of other pyprompt processes"
    )
    commands = parser.add_subparsers(dest="command")

    p = commands.add_parser("confirm", help="ask a yes/no question (exit code 0 or 1)")
    p.add_argument("message")
    p.add_argument("--default", type=parse_yes_no, default=None)
    p.add_argument("--no-clear", action="store_true")

    p = commands.add_parser("select", help="select options, print their indices")
    p.add_argument("message")
    p.add_argument("options", nargs="+")
    p.add_argument(
        "--selected", type=int, action="append", default=[], metavar="INDEX",
        help="index of an option that is selected initially",
    )
    p.add_argument("--no-clear", action="store_true")

    return parser


def cli(argv=None, manager=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        print("pyprompt", __version__)
        return
    elif args.listen:
        listen_to_logs()
        return
    elif args.command is None:
        parser.print_help()
        return

    if os.environ.get("PYPROMPT_LOG"):
        forward_logs()

    # Draw on stderr, so that stdout only contains the answer
    if manager is None:
        manager = SessionManager(stdout=sys.__stderr__)

    if args.command == "confirm":
        result = asyncio.run(
            maybe_confirm(
                args.message, default=args.default, no_clear=args.no_clear, manager=manager
            )
        )
        if result is None:
            sys.exit(EXIT_CODE_CANCELLED)
        sys.exit(0 if result else 1)

    elif args.command == "select":
        options = [
            MultiSelectOption(text, i in args.selected)
            for i, text in enumerate(args.options)
        ]
        result = asyncio.run(
            maybe_multi_select(
                args.message, options, no_clear=args.no_clear, manager=manager
            )
        )
        if result is None:
            sys.exit(EXIT_CODE_CANCELLED)
        for index in result:
            print(index)
