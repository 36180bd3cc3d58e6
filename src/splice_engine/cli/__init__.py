"""Command-line driver for the splice engine.

Usage:
    splice between <file> <marker> (--content TEXT | --content-file F) [--after ANCHOR] [--dry-run]
    splice after <file> <anchor> <marker> (--content TEXT | --content-file F) [--dry-run]
    splice state <file> <marker>
    splice plan apply [<plan.yaml>] [--dry-run]
    splice plan validate [<plan.yaml>]
    splice demo [<file>]
"""

import argparse
import sys

from splice_engine import __version__
from splice_engine.cli.plan import cmd_plan_apply, cmd_plan_validate
from splice_engine.cli.splice import cmd_after, cmd_between, cmd_demo, cmd_state
from splice_engine.logconfig import configure_logging


def _add_content_args(p: argparse.ArgumentParser) -> None:
    content = p.add_mutually_exclusive_group(required=True)
    content.add_argument("--content", default=None, help="Text to splice in")
    content.add_argument(
        "--content-file", default=None,
        help="Read the text to splice in from a file",
    )
    default = p.add_mutually_exclusive_group()
    default.add_argument(
        "--default", default=None,
        help="Template written when the file does not exist yet",
    )
    default.add_argument(
        "--default-file", default=None,
        help="Read the default template from a file",
    )
    p.add_argument(
        "--dry-run", action="store_true",
        help="Print the result without writing",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splice",
        description="Splice marker-delimited blocks into generated source files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level", default=None,
        help="Logging level (default: $SPLICE_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    # between
    btw = sub.add_parser("between", help="Replace the block between a marker pair")
    btw.add_argument("file", help="Target file")
    btw.add_argument("marker", help="Marker pattern expected exactly twice")
    btw.add_argument(
        "--after", default=None,
        help="Anchor pattern to insert after when the marker pair is missing",
    )
    _add_content_args(btw)

    # after
    aft = sub.add_parser("after", help="Insert a marker-wrapped block after an anchor")
    aft.add_argument("file", help="Target file")
    aft.add_argument("anchor", help="Anchor pattern expected exactly once")
    aft.add_argument("marker", help="Marker to wrap the inserted block with")
    _add_content_args(aft)

    # state
    st = sub.add_parser("state", help="Show whether a marker pair exists")
    st.add_argument("file", help="Target file")
    st.add_argument("marker", help="Marker pattern")

    # plan
    pl = sub.add_parser("plan", help="YAML splice plan operations")
    pl_sub = pl.add_subparsers(dest="subcommand")
    pl_apply = pl_sub.add_parser("apply", help="Apply every splice in a plan")
    pl_apply.add_argument(
        "plan", nargs="?", default=None,
        help="Path to plan YAML (default: $SPLICE_PLAN or ./splice.yaml)",
    )
    pl_apply.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    pl_val = pl_sub.add_parser("validate", help="Validate a plan without applying it")
    pl_val.add_argument(
        "plan", nargs="?", default=None,
        help="Path to plan YAML (default: $SPLICE_PLAN or ./splice.yaml)",
    )

    # demo
    demo = sub.add_parser("demo", help="Create and splice a small demo script")
    demo.add_argument("file", nargs="?", default=None, help="Demo file (default: test-file.ts)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.log_level)

    dispatch = {
        ("between", ""): cmd_between,
        ("after", ""): cmd_after,
        ("state", ""): cmd_state,
        ("demo", ""): cmd_demo,
        ("plan", "apply"): cmd_plan_apply,
        ("plan", "validate"): cmd_plan_validate,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
