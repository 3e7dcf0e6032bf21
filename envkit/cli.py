"""Command-line front end: ``envkit <command> NAME``.

Prints typed environment values so shell scripts can share the
same parsing rules as Python code.

Exit codes: 0 on success, 1 when the variable is not set, 2 when
the value cannot be parsed (argparse also uses 2 for usage errors).
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from envkit.errors import EnvNotSetError, EnvParseError
from envkit.logger import get_logger, setup_logging
from envkit.runtime_env import (
    get_bool,
    get_list,
    get_memory_size,
    get_or_default,
    get_parsed,
    get_parsed_or_default,
    get_required,
)

EXIT_OK = 0
EXIT_NOT_SET = 1
EXIT_PARSE_ERROR = 2

LOG_LEVEL_ENV = "ENVKIT_LOG_LEVEL"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envkit",
        description="Read and convert environment variables",
    )
    parser.add_argument(
        "--log-level",
        choices=_LEVELS,
        type=str.upper,
        help=f"Log level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_get = sub.add_parser("get", help="Print the raw value")
    p_get.add_argument("name")
    p_get.add_argument("--default", help="Value to print when unset")

    for command, number_type in (("int", int), ("float", float)):
        p_num = sub.add_parser(command, help=f"Print the value as {command}")
        p_num.add_argument("name")
        p_num.add_argument(
            "--default",
            type=number_type,
            help="Value to print when unset or invalid",
        )

    p_bool = sub.add_parser("bool", help="Print true or false")
    p_bool.add_argument("name")

    p_list = sub.add_parser("list", help="Print one item per line")
    p_list.add_argument("name")
    p_list.add_argument("--sep", default=",", help="Item separator (default: ',')")

    p_size = sub.add_parser("size", help="Print a memory size in bytes")
    p_size.add_argument("name")

    return parser


def _resolve_level(cli_level: Optional[str]) -> int:
    text = cli_level or get_or_default(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(text)
    return level if isinstance(level, int) else logging.WARNING


def _run(args: argparse.Namespace) -> list[str]:
    name = args.name
    command = args.command

    if command == "get":
        if args.default is not None:
            return [get_or_default(name, args.default)]
        return [get_required(name)]

    if command in ("int", "float"):
        parser = int if command == "int" else float
        if args.default is not None:
            return [str(get_parsed_or_default(name, parser, args.default))]
        return [str(get_parsed(name, parser))]

    if command == "bool":
        return ["true" if get_bool(name) else "false"]

    if command == "list":
        return get_list(name, args.sep)

    if command == "size":
        return [str(get_memory_size(name))]

    raise ValueError(f"unknown command: {command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "list" and not args.sep:
        parser.error("--sep must not be empty")

    setup_logging(level=_resolve_level(args.log_level))
    log = get_logger("envkit.cli")

    try:
        lines = _run(args)
    except EnvNotSetError as e:
        log.error(e.message)
        return EXIT_NOT_SET
    except EnvParseError as e:
        log.error(e.message)
        return EXIT_PARSE_ERROR

    log.debug("%s %s -> %d line(s)", args.command, args.name, len(lines))
    for line in lines:
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
