import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from src.audit.logger import configure_logging
from src.config import get_settings
from src.payment.exceptions import PaymentError, UnsupportedProviderError
from src.payment.results import PaymentResult
from src.payment.selector import available_providers, build_factory
from src.payment.service import PaymentService

DEMO_PAYMENTS = [
    ("Stripe", Decimal("150.00"), "1234567890123456"),
    ("MercadoPago", Decimal("200.00"), "5234567890123456"),
]


def run_payment(provider: str, amount: Decimal, card_number: str) -> PaymentResult:
    """
    Select the gateway by name and run a single payment through it.

    Raises:
        UnsupportedProviderError: if the gateway name is unknown
    """
    factory = build_factory(provider)
    return PaymentService(factory).process_payment(amount, card_number)


def describe(result: PaymentResult) -> str:
    if result.is_approved:
        line = f"[{result.provider}] approved: {result.transaction_id}"
        if result.log_error:
            line += f" (not logged: {result.log_error})"
        return line
    return f"[{result.provider}] {result.status.value}: {result.reason}"


def _parse_amount(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run payments through a selectable gateway")
    parser.add_argument("--provider", help=f"gateway name ({', '.join(available_providers())})")
    parser.add_argument("--amount", type=_parse_amount, help="amount to charge (default: 100.00)")
    parser.add_argument("--card", help="card number; omit together with --provider/--amount to replay the demo")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_serialize)

    if args.provider is not None:
        try:
            build_factory(args.provider)
        except UnsupportedProviderError as e:
            print(str(e), file=sys.stderr)
            return 2

    if args.card:
        amount = args.amount if args.amount is not None else Decimal("100.00")
        payments = [(args.provider or settings.default_provider, amount, args.card)]
    elif args.provider is not None or args.amount is not None:
        parser.error("--card is required with --provider or --amount")
    else:
        payments = DEMO_PAYMENTS

    print("=== Payment System ===\n")
    for provider, amount, card_number in payments:
        try:
            result = run_payment(provider, amount, card_number)
        except PaymentError as e:
            print(str(e), file=sys.stderr)
            return 2
        print(describe(result))
        print()
    return 0


if __name__ == '__main__':
    sys.exit(main())
