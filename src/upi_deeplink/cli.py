"""
Command-line interface for exercising the deeplink payment API.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, Sequence, Tuple

import requests

from .api import create_client
from .core.client import DeeplinkClient
from .core.config import load_client_config
from .core.errors import ConfigError, DeeplinkError


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _json_argument(value: str) -> Any:
    """Parse inline JSON, or read it from a file when prefixed with ``@``."""
    if value.startswith("@"):
        try:
            value = Path(value[1:]).read_text(encoding="utf-8")
        except OSError as exc:
            raise argparse.ArgumentTypeError(f"Cannot read {value[1:]}: {exc}") from exc
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"Invalid JSON: {exc}") from exc


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upi-deeplink",
        description="Call the UPI deeplink payment API",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing DEEPLINK_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create-link", help="Create a payment link")
    create.add_argument(
        "payload",
        type=_json_argument,
        help="Payment link body as JSON, or @path to a JSON file",
    )

    status = commands.add_parser("status", help="Check the status of a payment link")
    status.add_argument("bill_id", help="Platform bill id returned on creation")

    mock = commands.add_parser(
        "mock-payment", help="Simulate a payment (sandbox only)"
    )
    mock.add_argument("amount", type=int, help="Amount to pay, in paise")
    mock.add_argument("upi_id", help="Payer UPI id")
    mock.add_argument("bill_id", help="Platform bill id to pay")

    refund = commands.add_parser("batch-refund", help="Initiate a batch of refunds")
    refund.add_argument(
        "refunds",
        type=_json_argument,
        help="JSON list of refunds, or @path to a JSON file",
    )

    refund_status = commands.add_parser(
        "refund-status", help="Look up refunds by identifier"
    )
    refund_status.add_argument("identifier_type", help="Identifier kind, e.g. batch")
    refund_status.add_argument("identifier_value", help="Identifier value")

    return parser


def _dispatch(client: DeeplinkClient, args: argparse.Namespace) -> Any:
    if args.command == "create-link":
        return client.create_payment_link(args.payload)
    if args.command == "status":
        return client.check_payment_status(args.bill_id)
    if args.command == "mock-payment":
        return client.trigger_mock_payment(args.amount, args.upi_id, args.bill_id)
    if args.command == "batch-refund":
        if not isinstance(args.refunds, list):
            raise ValueError("Refunds must be a JSON list")
        return client.initiate_batch_refund(args.refunds)
    if args.command == "refund-status":
        return client.get_refund_status_by_identifier(
            args.identifier_type, args.identifier_value
        )
    raise ValueError(f"Unknown command '{args.command}'")


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    logging.info("Using %s mode with %s auth", config.mode, config.auth_type)

    with create_client(config=config, session=requests.Session()) as client:
        try:
            result = _dispatch(client, args)
        except (DeeplinkError, ValueError) as exc:
            logging.error("%s failed: %s", args.command, exc)
            return 1

    print(json.dumps(result, indent=2))
    return 0


def main() -> None:
    sys.exit(run_cli())
