from __future__ import annotations

import argparse
import logging
import os
import shlex
import subprocess
import sys
from typing import List, Optional

from adapters.base import AdapterError, UnsupportedConsole
from adapters.consoles import for_uri
from config.adapter import AdapterConfig
from config.settings import AdapterOptions, load_adapter_options

logger = logging.getLogger(__name__)


class _Mapper:
    """Stand-in mapper for `check`; adapters only store it."""


def _options(args: argparse.Namespace) -> AdapterOptions:
    options = load_adapter_options(args.env_file)
    updates = {}
    if getattr(args, "uri", None):
        updates["uri"] = args.uri
    if getattr(args, "type", None):
        updates["type"] = args.type
    return options.model_copy(update=updates)


def run_console(args: argparse.Namespace) -> int:
    options = _options(args)
    if not options.uri:
        print("No connection uri: pass --uri or set MODEL_ADAPTER_URI / DATABASE_URL.", file=sys.stderr)
        return 2
    try:
        console_command = for_uri(options.uri).command()
    except UnsupportedConsole as exc:
        print(str(exc), file=sys.stderr)
        return 2

    print(console_command.command)
    if not args.exec:
        return 0
    env = dict(os.environ)
    env.update(console_command.env)
    logger.info("launching %s", console_command.command.split(" ", 1)[0])
    return subprocess.call(shlex.split(console_command.command), env=env)


def run_check(args: argparse.Namespace) -> int:
    config = AdapterConfig.from_options(_options(args))
    try:
        adapter = config.build(_Mapper())
    except AdapterError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    print(f"{config.type}: {type(adapter).__name__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="model-adapters", description="Resolve adapter configs and open database consoles.")
    parser.add_argument("--env-file", default=".env", help="Dotenv file loaded before reading MODEL_ADAPTER_* variables.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    console = sub.add_parser("console", help="Print (or run) the interactive client command for a uri.")
    console.add_argument("--uri", default=None, help="Connection uri; defaults to MODEL_ADAPTER_URI.")
    console.add_argument("--exec", action="store_true", help="Launch the client with the credential in its environment.")
    console.set_defaults(handler=run_console)

    check = sub.add_parser("check", help="Build the configured adapter and report its class.")
    check.add_argument("--uri", default=None)
    check.add_argument("--type", default=None, help="Adapter type; defaults to MODEL_ADAPTER_TYPE.")
    check.set_defaults(handler=run_check)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
