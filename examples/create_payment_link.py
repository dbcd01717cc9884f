"""
Minimal script that uses the public API to create a payment link and, in
sandbox, pay it.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from upi_deeplink import ConfigError, DeeplinkError, create_client


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a UPI payment link using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing DEEPLINK_* settings",
    )
    parser.add_argument("--amount", type=int, default=100, help="Amount in paise")
    parser.add_argument("--payee-vpa", help="UPI id that receives the payment")
    parser.add_argument(
        "--mock-upi-id",
        help="Pay the new link from this UPI id (sandbox only)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        client = create_client(env_file=args.env_file)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    payload = {
        "amount": {"currencyCode": "INR", "value": args.amount},
        "amountExactness": "EXACT",
    }
    if args.payee_vpa:
        payload["payeeVPA"] = args.payee_vpa

    with client:
        try:
            link = client.create_payment_link(payload)
        except DeeplinkError as exc:
            logging.error("Could not create payment link: %s", exc)
            return 1
        print(json.dumps(link, indent=2))

        if args.mock_upi_id:
            bill_id = link.get("data", {}).get("platformBillID")
            try:
                result = client.trigger_mock_payment(args.amount, args.mock_upi_id, bill_id)
            except DeeplinkError as exc:
                logging.error("Mock payment failed: %s", exc)
                return 1
            print(json.dumps(result, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
