"""
CLI client: rings up a tab and prints the receipt.

Each `--drink` is `name[:modifier[:modifier...]]`; modifiers are applied
left to right, so `spirit:double` is a double spirit and `wine:bottle` a
bottle of wine. Without any `--drink` the two example tabs are printed.

Usage:
    # Price a tab against the system clock:
    python -m pub_drinks.client --drink beer --drink spirit:double --drink wine:bottle

    # Same tab on a Friday evening, as JSON:
    python -m pub_drinks.client --drink beer --drink beer --drink beer --at 2019-02-22T19 --json

    # The built-in examples:
    python -m pub_drinks.client
"""

import argparse
import logging
from collections.abc import Sequence
from datetime import datetime

from pydantic import ValidationError

from pub_drinks.domain.clock import FixedTimeSource, SystemTimeSource, TimeSource
from pub_drinks.domain.drinks import DrinkVariant, ModifierKind
from pub_drinks.domain.models import DrinkOrder
from pub_drinks.transaction import Transaction

# Friday 22/02/2019 @ 19:00, inside the TGIF window.
EXAMPLE_FRIDAY_EVENING = FixedTimeSource(2019, 2, 22, 19)

EXAMPLE_SEPARATOR = "--------\n"


def parse_moment(value: str) -> datetime:
    """argparse type for `--at`: ISO date with at least an hour, e.g. 2019-02-22T19."""
    try:
        if len(value) == len("YYYY-MM-DDTHH"):
            return datetime.strptime(value, "%Y-%m-%dT%H")
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid moment {value!r}: {exc}") from exc


def parse_order(value: str) -> DrinkOrder:
    """argparse type for `--drink`."""
    try:
        return DrinkOrder.parse(value)
    except ValidationError as exc:
        messages = "; ".join(error["msg"] for error in exc.errors())
        raise argparse.ArgumentTypeError(f"invalid drink {value!r}: {messages}") from exc


def example_transactions() -> list[Transaction]:
    plain = Transaction()
    plain.add_drink(DrinkVariant.BEER)
    plain.add_drink(DrinkVariant.SPIRIT_OR_LIQUEUR, [ModifierKind.DOUBLE])
    plain.add_drink(DrinkVariant.WINE, [ModifierKind.BOTTLE])

    friday = Transaction(time_source=EXAMPLE_FRIDAY_EVENING)
    friday.add_drink(DrinkVariant.BEER)
    friday.add_drink(DrinkVariant.BEER)
    friday.add_drink(DrinkVariant.SPIRIT_OR_LIQUEUR, [ModifierKind.DOUBLE])
    friday.add_drink(DrinkVariant.WINE, [ModifierKind.BOTTLE])
    return [plain, friday]


def build_transaction(orders: Sequence[DrinkOrder], moment: datetime | None) -> Transaction:
    time_source: TimeSource = FixedTimeSource.at(moment) if moment else SystemTimeSource()
    transaction = Transaction(time_source=time_source)
    for order in orders:
        transaction.add_order(order)
    return transaction


def run_client(args: argparse.Namespace) -> None:
    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logger = logging.getLogger(__name__)

    if args.drink:
        transactions = [build_transaction(args.drink, args.at)]
    else:
        logger.info("No drinks given, printing the example tabs")
        transactions = example_transactions()

    outputs = []
    for transaction in transactions:
        summary = transaction.finalize()
        outputs.append(summary.model_dump_json(indent=2) if args.json else summary.description)
    print(f"\n{EXAMPLE_SEPARATOR}\n".join(outputs))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Price a tab of pub drinks")
    parser.add_argument(
        "--drink",
        action="append",
        type=parse_order,
        default=[],
        help="Drink with optional extras, e.g. beer, spirit:double, wine:bottle (repeatable)",
    )
    parser.add_argument("--at", type=parse_moment, default=None, help="Price as if at this moment, e.g. 2019-02-22T19")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    run_client(build_parser().parse_args(argv))


if __name__ == "__main__":
    main()
