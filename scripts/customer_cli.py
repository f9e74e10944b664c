#!/usr/bin/env python3
"""Manage vaulted customers from the command line.

Credentials come from the environment (GATEWAY_MERCHANT_ID, GATEWAY_PUBLIC_KEY,
GATEWAY_PRIVATE_KEY, GATEWAY_ENVIRONMENT). Results are printed as JSON.

Examples:
    customer_cli.py find 8d7b1c
    customer_cli.py create --field first_name=Jen --field company=Braintree
    customer_cli.py update 8d7b1c --field company="New Co"
    customer_cli.py search --field email=jen@example.com
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gateway_sdk.config import GatewayConfig
from gateway_sdk.http import HTTPClient
from gateway_sdk.logging import get_logger, setup_logging
from gateway_sdk.models.result import Err, Result
from gateway_sdk.resources.customer import CustomerResource
from gateway_sdk.serialization import serialize_value

logger = get_logger(__name__)


def parse_fields(pairs: list[str] | None) -> dict[str, str]:
    """Turn ``key=value`` arguments into a params mapping."""
    params: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        params[key.strip()] = value
    return params


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage vaulted gateway customers")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format (default: standard)",
    )
    parser.add_argument(
        "--environment",
        type=str,
        default=None,
        help="Override GATEWAY_ENVIRONMENT (production, sandbox, qa, development)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    find_cmd = commands.add_parser("find", help="Look up a customer by id")
    find_cmd.add_argument("customer_id")

    delete_cmd = commands.add_parser("delete", help="Delete a customer by id")
    delete_cmd.add_argument("customer_id")

    create_cmd = commands.add_parser("create", help="Create a customer")
    create_cmd.add_argument("--field", action="append", metavar="KEY=VALUE")

    update_cmd = commands.add_parser("update", help="Update a customer's attributes")
    update_cmd.add_argument("customer_id")
    update_cmd.add_argument("--field", action="append", metavar="KEY=VALUE")

    search_cmd = commands.add_parser("search", help="Search customers by exact field match")
    search_cmd.add_argument("--field", action="append", metavar="KEY=VALUE", required=True)

    return parser


def run(args: argparse.Namespace, resource: CustomerResource) -> Result:
    """Dispatch the parsed command to the resource."""
    if args.command == "find":
        return resource.find(args.customer_id)
    if args.command == "delete":
        return resource.delete(args.customer_id)
    if args.command == "create":
        return resource.create(parse_fields(args.field))
    if args.command == "update":
        return resource.update(args.customer_id, parse_fields(args.field))
    criteria = {key: {"is": value} for key, value in parse_fields(args.field).items()}
    return resource.search(criteria)


def main(argv: list[str] | None = None, resource: CustomerResource | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = GatewayConfig.from_env()
    if args.environment:
        config = config.merge(environment=args.environment)
    setup_logging(level=args.log_level or config.log_level, format_type=args.log_format)

    try:
        if resource is None:
            with HTTPClient(config) as client:
                result = run(args, CustomerResource(client))
        else:
            result = run(args, resource)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    if isinstance(result, Err):
        logger.error("%s failed: %s", args.command, result.error.kind.value)
        print(json.dumps(serialize_value(result.error), indent=2), file=sys.stderr)
        return 1

    if result.value is None:
        print(json.dumps({"ok": True}))
    else:
        print(json.dumps(serialize_value(result.value), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
