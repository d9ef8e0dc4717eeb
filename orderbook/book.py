"""A two-sided limit order book fed by ticker and depth updates."""

from __future__ import annotations

import operator
from itertools import islice, takewhile, zip_longest
from typing import NamedTuple, Optional

from sortedcontainers import SortedDict

from orderbook.updates import BookTickerUpdate, DepthUpdate

_DISPLAY_ROWS = 20


class Level(NamedTuple):
    """A price level and the quantity resting at it."""

    price: float
    qty: float


def _apply(side: SortedDict, price: float, qty: float) -> None:
    if price > 0 and qty > 0:
        side[price] = qty
    else:
        side.pop(price, None)


class OrderBook:
    """Order book for one symbol.

    Levels with a non-positive price or quantity are removed, and after every
    update levels that cross the opposite best price are pruned.
    """

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        self._bids: SortedDict = SortedDict(operator.neg)  # highest price first
        self._asks: SortedDict = SortedDict()  # lowest price first

    def update_book_ticker(self, data: BookTickerUpdate) -> None:
        """Set the best bid and ask levels from a ticker message."""
        if data.symbol != self.symbol:
            raise ValueError("Symbol mismatch in UpdateBookTicker")
        _apply(self._bids, data.best_bid_price, data.best_bid_qty)
        _apply(self._asks, data.best_ask_price, data.best_ask_qty)
        self.prune_mid_book()

    def update_depth(self, data: DepthUpdate) -> None:
        """Merge the levels of a depth message into the book."""
        for price, qty in data.bids:
            _apply(self._bids, price, qty)
        for price, qty in data.asks:
            _apply(self._asks, price, qty)
        self.prune_mid_book()

    def best_bid_ask(self) -> Optional[tuple[Level, Level]]:
        """Return the best bid and best ask, or None if either side is empty."""
        if not self._bids or not self._asks:
            return None
        return Level(*self._bids.peekitem(0)), Level(*self._asks.peekitem(0))

    def prune_mid_book(self) -> None:
        """Drop bids at or above the best ask and asks at or below the best bid."""
        if not self._bids or not self._asks:
            return
        best_bid = self._bids.peekitem(0)[0]
        best_ask = self._asks.peekitem(0)[0]
        for price in list(takewhile(lambda p: p >= best_ask, self._bids)):
            del self._bids[price]
        for price in list(takewhile(lambda p: p <= best_bid, self._asks)):
            del self._asks[price]

    def __str__(self) -> str:
        rows = zip_longest(
            islice(self._bids.items(), _DISPLAY_ROWS),
            islice(self._asks.items(), _DISPLAY_ROWS),
        )
        lines = []
        for index in range(1, _DISPLAY_ROWS + 1):
            bid, ask = next(rows, (None, None))
            bid_text = (
                f"[ {bid[1]:.5f} ] {bid[0]:.3f}" if bid else "[ ------- ] ---------"
            )
            ask_text = (
                f"{ask[0]:.3f} [ {ask[1]:.5f} ]" if ask else "--------- [ ------- ]"
            )
            lines.append(f"[{index:2d}] {bid_text} | {ask_text}\n")
        return "".join(lines)