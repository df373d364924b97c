# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""wsmanprobe CLI."""

from __future__ import annotations

import argparse
import os
import ssl

from ..config import HttpSettings, load_http_settings
from ..http import create_default_http_client
from ..log import level_for_verbosity, setup_logging
from ..models import ProbeTarget, Scheme
from ..runtime import WsmanProbe
from .console import TerminalConsole


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 < parsed < 65536:
        raise argparse.ArgumentTypeError(f"port out of range: {parsed}")
    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError("timeout must be positive")
    return parsed


def _existing_file(value: str) -> str:
    if not os.path.isfile(value):
        raise argparse.ArgumentTypeError(f"no such file: {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wsmanprobe",
        description="Check that hosts expose a reachable WS-Management (WinRM) endpoint",
    )
    parser.add_argument("hosts", nargs="+", metavar="HOST", help="Target host name or address")
    parser.add_argument(
        "-p",
        "--port",
        type=_positive_int,
        help="WSMAN port (default: 5985 for http, 5986 for https)",
    )
    parser.add_argument(
        "-t",
        "--transport",
        choices=[scheme.value for scheme in Scheme],
        default=Scheme.HTTP.value,
        help="Transport scheme (default: http)",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="count",
        default=0,
        dest="verbosity",
        help="Print the structured Identify result instead of a summary; repeat for debug logging",
    )
    parser.add_argument(
        "--no-ssl-peer-verification",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--ca-trust-file", type=_existing_file, metavar="PATH", help="CA bundle used to verify the endpoint certificate")
    parser.add_argument("--timeout", type=_positive_float, help="Request timeout in seconds")
    return parser


def apply_overrides(settings: HttpSettings, args: argparse.Namespace) -> HttpSettings:
    if args.no_ssl_peer_verification:
        settings.verify_ssl = False
    if args.ca_trust_file:
        settings.ca_trust_file = args.ca_trust_file
    if args.timeout is not None:
        settings.timeout = args.timeout
    return settings


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level_for_verbosity(args.verbosity))

    settings = apply_overrides(load_http_settings(), args)
    targets = [ProbeTarget.for_host(host, scheme=args.transport, port=args.port) for host in args.hosts]

    console = TerminalConsole(json_lines=len(targets) > 1)
    try:
        http_client = create_default_http_client(settings)
    except (OSError, ssl.SSLError) as exc:
        console.error(f"Unable to load CA trust file {settings.ca_trust_file!r}: {exc}")
        return 1

    with WsmanProbe(http_client=http_client, settings=settings) as probe:
        return probe.run(targets, verbosity=args.verbosity, console=console)


if __name__ == "__main__":
    raise SystemExit(main())
