"""Entry point for the slackit command.

This module provides the main entry point for slackit.
It handles:
- Command line parsing and option validation
- Logging setup with secret sanitization
- Request resolution and a single dispatch
- Reporting failures with their full cause chain
"""

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from slackit._version import __version__
from slackit.adapters.slack import SlackDispatcher
from slackit.config.resolver import TOKEN_ENV_VAR, resolve_request
from slackit.config.schema import CliOptions, SlackitSettings
from slackit.errors import ErrorKind, SlackitError, render_error_report
from slackit.interfaces.dispatcher import MessageDispatcher
from slackit.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    Returns:
        Configured parser
    """
    parser = argparse.ArgumentParser(
        prog="slackit",
        description="Send a message to a Slack channel or user. "
        "Standard input is read to end-of-stream and appended to the message.",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-t",
        "--token",
        help=f"API token (default: ${TOKEN_ENV_VAR})",
    )

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "-c",
        "--channel",
        help="Channel to send to, without the leading #",
    )
    target.add_argument(
        "-u",
        "--user",
        help="User to send to, without the leading @",
    )

    parser.add_argument(
        "-m",
        "--message",
        help="Text of the message to send; stdin is appended",
    )

    parser.add_argument(
        "-n",
        "--name",
        help="Name to send as (default: the bot's name)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging and error backtraces",
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        default=None,
        help="Log output format (default: console)",
    )

    return parser


def parse_args(
    argv: Sequence[str] | None = None,
) -> tuple[argparse.Namespace, CliOptions]:
    """Parse and validate command line arguments.

    Args:
        argv: Arguments to parse (defaults to ``sys.argv[1:]``)

    Returns:
        Raw namespace and the validated options bag

    Raises:
        SystemExit: On usage errors, ``--help`` or ``--version``
    """
    parser = build_parser()

    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help(sys.stderr)
        raise SystemExit(EXIT_USAGE)

    args = parser.parse_args(argv)

    try:
        options = CliOptions(
            token=args.token,
            channel=args.channel,
            user=args.user,
            message=args.message,
            name=args.name,
        )
    except ValidationError as e:
        parser.error(e.errors()[0]["msg"])

    return args, options


def report_error(exc: BaseException, backtrace: bool = False) -> None:
    """Write the ``error:``/``caused by:`` report for *exc* to stderr.

    If stderr itself is unwritable (e.g. a closed pipe) the report is
    dropped; the caller still exits non-zero.
    """
    try:
        for line in render_error_report(exc, backtrace=backtrace):
            print(line, file=sys.stderr)
    except OSError as e:
        log.debug("error_report_failed", kind=str(ErrorKind.IO), error=str(e))


def run(
    options: CliOptions,
    dispatcher: MessageDispatcher,
    backtrace: bool = False,
) -> int:
    """Resolve the request and dispatch it once.

    Args:
        options: Validated command line options
        dispatcher: Backend that posts the message
        backtrace: Include a backtrace in error reports

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        request = resolve_request(options)
        dispatcher.dispatch(request)
        return EXIT_SUCCESS

    except SlackitError as e:
        log.debug("run_failed", kind=str(e.kind), error=str(e))
        report_error(e, backtrace)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        log.info("keyboard_interrupt_received")
        return EXIT_INTERRUPTED
    except Exception as e:
        log.debug("unexpected_error", error_type=type(e).__name__)
        report_error(e, backtrace)
        return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args, options = parse_args(argv)

    try:
        settings = SlackitSettings()
    except ValidationError as e:
        report_error(e)
        return EXIT_FAILURE

    configure_logging(
        level="DEBUG" if args.debug else settings.log_level,
        log_format=args.log_format or settings.log_format,
    )

    return run(
        options,
        SlackDispatcher(),
        backtrace=args.debug or settings.backtrace,
    )


if __name__ == "__main__":
    sys.exit(main())
