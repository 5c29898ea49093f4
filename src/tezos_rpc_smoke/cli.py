from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from . import __version__
from .api import run
from .config import SmokeConfig
from .errors import UsageError
from .logging_config import setup_logging

PROG = "tezos-rpc-smoke"
USAGE = f"USAGE: {PROG} <base-url> <sys-chain> [auth-token]"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Smoke-test the read-only RPC endpoints of a running Tezos node.",
    )
    parser.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    parser.add_argument("base_url", metavar="base-url", help="Node RPC base URL, e.g. http://localhost:8732")
    parser.add_argument("chain", metavar="sys-chain", help="Chain identifier used in chain-scoped paths, e.g. main")
    parser.add_argument("auth_token", metavar="auth-token", nargs="?", help="Sent as the `auth` query parameter")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds (env: TEZOS_SMOKE_TIMEOUT)")
    parser.add_argument("--log-level", help="Logging level (env: TEZOS_SMOKE_LOG_LEVEL)")
    return parser


def _usage_error(message: str) -> int:
    sys.stdout.write(USAGE + "\n")
    sys.stdout.write(f"{message}\n")
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        return _usage_error(str(exc))

    try:
        config = SmokeConfig.from_env(
            base_url=args.base_url,
            chain=args.chain,
            auth_token=args.auth_token,
            timeout_s=args.timeout,
            log_level=args.log_level,
        )
    except UsageError as exc:
        return _usage_error(str(exc))

    setup_logging(config.log_level)
    summary = run(config)

    message = summary.failure_message()
    if message is not None:
        sys.stderr.write(f"Error: {message}\n")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
