"""Command-line entrypoint: prompt for typed values and print what was read."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from interviewer.core.ask import Interviewer
from interviewer.core.askable import default_registry
from interviewer.core.errors import InterviewError
from interviewer.core.logging_config import level_for, setup_logging
from interviewer.core.quoting import set_consumable_quotes
from interviewer.core.separator import Separator, SeparatorKind

__all__ = ["main"]

POLICIES = ("strict", "until", "opt", "lazy")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prompt for typed input and print the parsed result.")
    parser.add_argument("--prompt", default="> ", help="Prompt shown to the user")
    parser.add_argument("--type", dest="target", default="str", help="Target type name (see --list-types)")
    parser.add_argument("--many", action="store_true", help="Read several values from one line")
    parser.add_argument(
        "--separator",
        default=SeparatorKind.WHITESPACE.value,
        choices=[kind.value for kind in SeparatorKind],
        help="How a line is split into values (with --many)",
    )
    parser.add_argument("--seq", default=",", help="Literal separator for the sequence strategies")
    parser.add_argument("--policy", default="strict", choices=POLICIES, help="Failure handling")
    parser.add_argument("--quotes", action="store_true", help="Keep quoted whitespace inside one value")
    parser.add_argument("--list-types", action="store_true", help="List the available types and exit")
    parser.add_argument("--verbose", action="store_true", help="Log retries and discarded input")
    args = parser.parse_args(argv)
    if args.policy == "lazy" and not args.many:
        parser.error("--policy lazy requires --many")
    return args


def _acquire(interviewer: Interviewer, args: argparse.Namespace) -> Any:
    if not args.many:
        single = {
            "strict": interviewer.ask,
            "until": interviewer.ask_until,
            "opt": interviewer.ask_opt,
        }[args.policy]
        return single(args.prompt, args.target)

    separator = Separator.parse(args.separator, args.seq)
    many = {
        "strict": interviewer.ask_many,
        "until": interviewer.ask_many_until,
        "opt": interviewer.ask_many_opt,
        "lazy": interviewer.ask_many_opt_lazy,
    }[args.policy]
    return many(args.prompt, args.target, separator)


def _main(argv: list[str]) -> None:
    args = _parse_args(argv)
    setup_logging(level_for(args.verbose))

    registry = default_registry()
    if args.list_types:
        for name in registry.list_names():
            print(name)
        return

    # Resolve up front so an unknown type fails before prompting
    registry.resolve(args.target)
    set_consumable_quotes(args.quotes)

    interviewer = Interviewer(registry=registry)
    print(repr(_acquire(interviewer, args)))


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, run one acquisition, and manage exit codes."""

    argv = sys.argv[1:] if argv is None else argv

    try:
        _main(argv)
    except InterviewError as exc:
        sys.stderr.write(f"{exc}\n")
        raise SystemExit(2) from exc
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        raise SystemExit(3) from exc
    except SystemExit:
        raise
    except Exception as exc:  # noqa: BLE001
        sys.stderr.write(f"{exc}\n")
        raise SystemExit(5) from exc


if __name__ == "__main__":
    main()
