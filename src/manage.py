"""Braintree extension management CLI.

Prints the commercetools custom type drafts the extension relies on, so a
post-deploy job can create them on the project.

Usage:
    python src/manage.py print-types                   # All type drafts
    python src/manage.py print-types --type customer   # A single draft
"""

import argparse
import json
import sys

from shared.custom_types import ALL_TYPES, CUSTOMER_TYPE, PAYMENT_INTERACTION_TYPE, PAYMENT_TYPE, TRANSACTION_TYPE

_TYPES_BY_NAME = {
    "payment": PAYMENT_TYPE,
    "transaction": TRANSACTION_TYPE,
    "customer": CUSTOMER_TYPE,
    "interaction": PAYMENT_INTERACTION_TYPE,
}


def type_drafts(names=None) -> list[dict]:
    """Return the type drafts for the given names (default: all)."""
    types = [_TYPES_BY_NAME[name] for name in names] if names else list(ALL_TYPES)
    return [custom_type.to_draft() for custom_type in types]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Braintree extension management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    print_parser = subparsers.add_parser("print-types", help="Print custom type drafts as JSON")
    print_parser.add_argument(
        "--type",
        choices=sorted(_TYPES_BY_NAME),
        nargs="*",
        help="Specific type(s) to print (default: all)",
    )

    args = parser.parse_args(argv)

    if args.command == "print-types":
        json.dump(type_drafts(args.type), sys.stdout, indent=2)
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
