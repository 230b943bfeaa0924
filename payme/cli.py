#!/usr/bin/env python
"""
PayMe Link Toolkit - Command Line Interface

Usage:
    python -m payme.cli parse <url> [options]
    python -m payme.cli build --iban <iban> --amount <amount> [options]
    python -m payme.cli bysquare <url> [options]

Examples:
    python -m payme.cli parse "https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=10&CC=EUR"
    python -m payme.cli build --iban SK3112000000198742637541 --amount 25.5 --vs 123
    python -m payme.cli bysquare "https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=10&CC=EUR"
"""
import argparse
import json
import logging
import sys
from typing import Optional

from payme import __version__
from payme.config import PayMeConfig
from payme.core.errors import PaymentLinkError, QRPayloadError
from payme.core.payment_link import PaymentLink

logger = logging.getLogger(__name__)


FIELD_LABELS = {
    "V": "Version",
    "IBAN": "IBAN",
    "AM": "Amount",
    "CC": "Currency",
    "DT": "Due date",
    "PI": "Payment identifier",
    "MSG": "Message",
    "CN": "Creditor name",
}


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="payme",
        description="PayMe Link Toolkit - Validate, build and convert PayMe payment links",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  python -m payme.cli parse "https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=10&CC=EUR"
  python -m payme.cli build --iban SK3112000000198742637541 --amount 10 --message "Dinner"
  python -m payme.cli bysquare "https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=10&CC=EUR"
"""
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Validate a PayMe link and show its fields",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parse_parser.add_argument(
        "url",
        help="PayMe link to validate"
    )
    _add_output_argument(parse_parser)

    # Build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Build a canonical PayMe link from field values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    build_parser.add_argument("--iban", required=True, help="IBAN of the creditor")
    build_parser.add_argument("--amount", required=True, help="Amount, 0 to 9999999")
    build_parser.add_argument("--currency", default="EUR", help="Currency code (default: EUR)")
    build_parser.add_argument("--due-date", help="Due date, YYYYMMDD or YYYY-MM-DD")
    build_parser.add_argument(
        "--payment-identifier",
        help="Payment identifier in the form /VS<vs>/SS<ss>/KS<ks>"
    )
    build_parser.add_argument("--vs", default="", help="Variable symbol (up to 10 characters)")
    build_parser.add_argument("--ss", default="", help="Specific symbol (up to 10 characters)")
    build_parser.add_argument("--ks", default="", help="Constant symbol (up to 4 characters)")
    build_parser.add_argument("--message", help="Message for the beneficiary (up to 140 characters)")
    build_parser.add_argument("--creditor-name", help="Creditor name (up to 70 characters)")
    _add_output_argument(build_parser)

    # PAY by square subcommand
    bysquare_parser = subparsers.add_parser(
        "bysquare",
        help="Print the PAY by square QR payload for a PayMe link",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    bysquare_parser.add_argument(
        "url",
        help="PayMe link to convert"
    )
    _add_output_argument(bysquare_parser)

    return parser


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o", "--output",
        choices=["text", "json"],
        default="text",
        help="Output format: 'text' for human-readable, 'json' for machine-readable (default: text)"
    )


def print_error(error: Exception, output: str) -> None:
    if output == "json" and isinstance(error, PaymentLinkError):
        print(json.dumps(error.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(f"Error: {error}", file=sys.stderr)


def print_link_text(link: PaymentLink, config: PayMeConfig) -> None:
    """Format and print a payment link in human-readable form."""
    print(f"\nLink: {link.to_url(config.base_url)}")
    print("\nFields:")
    for key, value in link.to_dict().items():
        print(f"  {FIELD_LABELS[key]}: {value}")

    variable_symbol, specific_symbol, constant_symbol = link.payment_symbols()
    if any((variable_symbol, specific_symbol, constant_symbol)):
        print("\nSymbols:")
        print(f"  Variable: {variable_symbol}")
        print(f"  Specific: {specific_symbol}")
        print(f"  Constant: {constant_symbol}")


def print_link(link: PaymentLink, config: PayMeConfig, output: str) -> None:
    if output == "json":
        result = {"link": link.to_url(config.base_url), "params": link.to_dict()}
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print_link_text(link, config)


def build_payment_identifier(args: argparse.Namespace) -> Optional[str]:
    """Use --payment-identifier as given, or assemble it from --vs/--ss/--ks."""
    if args.payment_identifier:
        return args.payment_identifier
    if args.vs or args.ss or args.ks:
        return f"/VS{args.vs}/SS{args.ss}/KS{args.ks}"
    return None


def run_parse(args: argparse.Namespace, config: PayMeConfig) -> int:
    """Run the parse command."""
    try:
        link = PaymentLink.from_url(args.url)
    except PaymentLinkError as e:
        print_error(e, args.output)
        return 1

    print_link(link, config, args.output)
    return 0


def run_build(args: argparse.Namespace, config: PayMeConfig) -> int:
    """Run the build command."""
    try:
        link = PaymentLink.from_params({
            "V": "1",
            "IBAN": args.iban,
            "AM": args.amount,
            "CC": args.currency,
            "DT": args.due_date,
            "PI": build_payment_identifier(args),
            "MSG": args.message,
            "CN": args.creditor_name,
        })
    except PaymentLinkError as e:
        print_error(e, args.output)
        return 1

    if args.output == "json":
        print_link(link, config, args.output)
    else:
        print(link.to_url(config.base_url))
    return 0


def run_bysquare(args: argparse.Namespace, config: PayMeConfig) -> int:
    """Run the bysquare command."""
    try:
        link = PaymentLink.from_url(args.url)
    except PaymentLinkError as e:
        print_error(e, args.output)
        return 1

    try:
        payload = link.get_pay_by_square()
    except QRPayloadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.output == "json":
        result = {
            "link": link.to_url(config.base_url),
            "payment": link.to_bysquare_payment().to_dict(),
            "payload": payload,
        }
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(payload)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point. Returns exit code."""
    config = PayMeConfig.from_env()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.WARNING))

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running {args.command} with {config!r}")

    if args.command == "parse":
        return run_parse(args, config)
    elif args.command == "build":
        return run_build(args, config)
    elif args.command == "bysquare":
        return run_bysquare(args, config)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
