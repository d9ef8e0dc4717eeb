"""Build a small sample order book and print it."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from orderbook.book import OrderBook
from orderbook.updates import BookTickerUpdate, DepthUpdate

_DEPTH_JSON = """
{
    "lastUpdateId": 160,
    "bids": [
        ["25.00", "5"],
        ["24.50", "2"]
    ],
    "asks": [
        ["25.50", "3"],
        ["26.00", "7"]
    ]
}"""

_TICKER_JSON = """
{
    "u":400900217,
    "s":"BNBUSDT",
    "b":"24.60",
    "B":"4",
    "a":"25.40",
    "A":"6"
}"""


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Apply sample updates to a BNBUSDT book and print the result."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    book = OrderBook("BNBUSDT")
    try:
        depth = DepthUpdate.from_json(_DEPTH_JSON)
        ticker = BookTickerUpdate.from_json(_TICKER_JSON)
        book.update_depth(depth)
        book.update_book_ticker(ticker)

        print("=== Order Book ===")
        print(book, end="")

        best = book.best_bid_ask()
        if best is not None:
            bid, ask = best
            print(f"\nBest Bid: {bid.price:g} Qty: {bid.qty:g}")
            print(f"Best Ask: {ask.price:g} Qty: {ask.qty:g}")
        else:
            print("\nOrder book is empty or invalid.")
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())