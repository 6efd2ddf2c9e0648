"""Command-line interface entry point for tagtally."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from tagtally import __version__, pipelines
from tagtally.errors import TagTallyError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagtally", description="Tagtally command-line interface"
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    subparsers = parser.add_subparsers(dest="command")

    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "--config-path", dest="config_path", help="Override path to config file"
    )
    shared.add_argument(
        "--content-dir",
        dest="content_dir",
        help="Root directory holding one subdirectory per content type",
    )
    shared.add_argument(
        "--verbose",
        dest="verbose",
        action="store_true",
        default=None,
        help="Enable debug logging",
    )

    count = subparsers.add_parser(
        "count", parents=[shared], help="Count tags of a content type"
    )
    count.add_argument("content_type", help="Content type, e.g. blog")
    count.add_argument(
        "--json", dest="json", action="store_true", default=None, help="Print JSON"
    )

    subparsers.add_parser("types", parents=[shared], help="List content types")

    return parser


def _normalize_cli_options(namespace: argparse.Namespace) -> dict[str, Any]:
    cli_options = {
        key: value
        for key, value in vars(namespace).items()
        if key not in {"command", "version"}
    }
    return {key: value for key, value in cli_options.items() if value is not None}


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.version:
        print(__version__)
        raise SystemExit(0)
    if args.command is None:
        parser.print_help()
        return

    handlers: dict[str, Any] = {
        "count": pipelines.run_count,
        "types": pipelines.run_types,
    }

    try:
        handlers[args.command](_normalize_cli_options(args))
    except TagTallyError as exc:
        print(f"tagtally: error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"tagtally: hint: {exc.hint}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover
    main()
