"""CLI entry point for the Open-Meteo command-line client."""

import logging
import os
import sys
from datetime import date

from openmeteo.commands.builders import build_request
from openmeteo.commands.config_cmd import run_config
from openmeteo.commands.parsers import build_parser, subparser
from openmeteo.config.defaults import PROG
from openmeteo.config.loader import config_path, load_file_config, resolve_app_config
from openmeteo.config.schema import OutputFormat
from openmeteo.endpoints.registry import ENDPOINTS
from openmeteo.errors import OpenMeteoError, UsageError
from openmeteo.models.common import Category
from openmeteo.pipeline.command_pipeline import CommandPipeline
from openmeteo.reporting.param_help import render_param_help

logger = logging.getLogger(PROG)

_FORMAT_FLAGS = {f"--{fmt.value}": fmt for fmt in OutputFormat}
_TOPICS = {c.flag: c for c in Category}


class _CliFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.ERROR:
            return f"{PROG}: error: {message}"
        if record.levelno >= logging.WARNING:
            return f"{PROG}: warning: {message}"
        return f"{PROG}: {message}"


def setup_logging(verbose: bool = False) -> logging.Handler:
    """Install one stderr handler on the package logger, replacing any earlier one."""
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, _CliFormatter):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_CliFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    setup_logging()
    parser = build_parser()
    try:
        topic = _help_topic(argv)
        if topic is not None:
            return _cmd_param_help(parser, *topic)
        try:
            args = parser.parse_args(argv)
        except SystemExit as e:  # --help and --version
            return e.code or 0

        if args.command is None:
            parser.print_help()
            return 1
        if args.command == "config":
            return _cmd_config(args)
        return _cmd_data(args)
    except OpenMeteoError as e:
        return _report(e)


def _report(error: OpenMeteoError) -> int:
    for message in error.messages():
        print(f"{PROG}: error: {message}", file=sys.stderr)
    if isinstance(error, UsageError):
        target = f"{error.command} --help" if error.command else "--help"
        print(f"Run '{PROG} {target}' for usage.", file=sys.stderr)
    return error.exit_code


def _help_topic(argv: list[str]) -> tuple[str, list[str]] | None:
    """``<command> help [topic] [format]`` is answered before argparse runs."""
    for i, token in enumerate(argv):
        if token in ENDPOINTS:
            if argv[i + 1:i + 2] == ["help"]:
                return token, argv[:i] + argv[i + 2:]
            return None
        if not token.startswith("-") and argv[i - 1:i] != ["--api-key"]:
            return None
    return None


def _cmd_param_help(parser, command: str, rest: list[str]) -> int:
    fmt = OutputFormat.HUMAN
    category = None
    for token in rest:
        if token in _FORMAT_FLAGS:
            fmt = _FORMAT_FLAGS[token]
        elif token in _TOPICS:
            category = _TOPICS[token]
        else:
            raise UsageError(f"unknown help topic: {token}", command=command)
    if category is None:
        subparser(parser, command).print_help()
        return 0
    print(render_param_help(ENDPOINTS[command], category, fmt))
    return 0


def _cmd_config(args) -> int:
    return run_config(
        args.action, args.key, args.output_format or OutputFormat.HUMAN, config_path()
    )


def _cmd_data(args) -> int:
    file_config = load_file_config(config_path())
    config = resolve_app_config(
        file_config,
        api_key=args.api_key,
        output_format=args.output_format,
        verbose=args.verbose,
        env=os.environ,
        stdout_isatty=sys.stdout.isatty(),
    )
    setup_logging(config.verbose)
    request = build_request(args, config, date.today())
    return CommandPipeline(config).run(request, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
