#!/usr/bin/env python3
"""
clustercheck CLI — answer one load-balancer health check on stdout.

Credentials: -u/-p when both are given, otherwise the [client] section of the
INI file given by -i (default /etc/mysql/debian.cnf). Flags override the
CLUSTERCHECK_* environment variables.

Usage:
  clustercheck -u clustercheck -p secret
  clustercheck -i /etc/mysql/debian.cnf --host 127.0.0.1 --port 3306
  python -m clustercheck.cli
"""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, NoReturn, Sequence

from clustercheck import __version__
from clustercheck.check_logging import get_logger
from clustercheck.config.settings import ClusterCheckSettings, get_settings
from clustercheck.core.exceptions import ConfigError
from clustercheck.responder.http_response import write_response
from clustercheck.runner import EXIT_CONFIG_ERROR, config_error_verdict, run_check

logger = get_logger(__name__)


class CheckArgumentParser(argparse.ArgumentParser):
    """Bad flags become ConfigError so the caller still answers with a 503."""

    def error(self, message: str) -> NoReturn:
        raise ConfigError(f"invalid arguments: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = CheckArgumentParser(
        prog="clustercheck",
        description="Report Galera node health to a load balancer as an HTTP 200/503 response.",
    )
    parser.add_argument("-u", "--user", help="MySQL user (used together with --password)")
    parser.add_argument("-p", "--password", help="MySQL password (used together with --user)")
    parser.add_argument("-i", "--ini-file", help="Option file with a [client] user/password section")
    parser.add_argument("--ini-section", help="Section of the option file to read (default: client)")
    parser.add_argument("-H", "--host", dest="mysql_host", help="MySQL host (default: localhost)")
    parser.add_argument("-P", "--port", dest="mysql_port", type=int, help="MySQL port (default: 3306)")
    parser.add_argument("--mysql-bin", help="Path of the mysql client binary")
    parser.add_argument(
        "--timeout",
        dest="query_timeout_sec",
        type=float,
        help="Per-query timeout in seconds",
    )
    parser.add_argument(
        "--delay",
        dest="response_delay_sec",
        type=float,
        help="Pause after writing the response, in seconds (default: 0.1)",
    )
    parser.add_argument(
        "--process-name",
        dest="process_names",
        action="append",
        help="Database server process name to look for; repeatable (default: mysqld, mariadbd)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace) -> ClusterCheckSettings:
    """Environment settings with CLI flags applied on top. Raises ConfigError."""
    return get_settings().with_overrides(
        user=args.user,
        password=args.password,
        ini_file=args.ini_file,
        ini_section=args.ini_section,
        mysql_host=args.mysql_host,
        mysql_port=args.mysql_port,
        mysql_bin=args.mysql_bin,
        query_timeout_sec=args.query_timeout_sec,
        response_delay_sec=args.response_delay_sec,
        process_names=tuple(args.process_names) if args.process_names else None,
    )


def main(argv: Sequence[str] | None = None, stream: BinaryIO | None = None) -> int:
    out = stream if stream is not None else sys.stdout.buffer
    try:
        args = build_parser().parse_args(argv)
        settings = resolve_settings(args)
    except ConfigError as e:
        logger.error("cli_config_error", error=str(e))
        write_response(config_error_verdict(e), out)
        return EXIT_CONFIG_ERROR
    return run_check(settings, out)


if __name__ == "__main__":
    raise SystemExit(main())
