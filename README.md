# orderbook

Keeps a local order book for one symbol. The book is built from two kinds of Binance stream message:

- **Depth updates** carry the fields `lastUpdateId`, `bids` and `asks`. They are merged into the book incrementally.
- **Book-ticker updates** carry the fields `u`, `s`, `b`, `B`, `a` and `A`. Each one sets a best bid level and a best ask level.

## Installation

```
pip install .
```

## Usage

```python
from orderbook.book import OrderBook
from orderbook.updates import BookTickerUpdate, DepthUpdate

book = OrderBook("BNBUSDT")

depth = DepthUpdate.from_json(
    '{"lastUpdateId": 160,'
    ' "bids": [["25.00", "5"], ["24.50", "2"]],'
    ' "asks": [["25.50", "3"], ["26.00", "7"]]}'
)
book.update_depth(depth)

ticker = BookTickerUpdate.from_json(
    '{"u": 400900217, "s": "BNBUSDT",'
    ' "b": "24.60", "B": "4", "a": "25.40", "A": "6"}'
)
book.update_book_ticker(ticker)

best = book.best_bid_ask()
if best is not None:
    bid, ask = best
    print(bid.price, bid.qty, ask.price, ask.qty)

print(book)
```

### Messages (`orderbook.updates`)

`BookTickerUpdate` is a frozen dataclass with these fields:

- `update_id`
- `symbol`
- `best_bid_price` and `best_bid_qty`
- `best_ask_price` and `best_ask_qty`

`DepthUpdate` is a frozen dataclass with these fields:

- `last_update_id`
- `bids` and `asks`, which are lists of `(price, qty)` tuples.

Both classes have a `from_json(json_str)` class method, and both raise `ValueError` for a malformed message. A message is malformed if any of these holds:

- it is not valid JSON;
- a key is missing;
- a value has the wrong type;
- the update id is outside the unsigned 64-bit range;
- a price or quantity string does not begin with a number.

In a depth message, a level entry that is not a two-element array is skipped.

### The book (`orderbook.book`)

`OrderBook(symbol)` keeps bids from the highest price down and asks from the lowest price up. It follows these rules:

- A level whose price or quantity is zero or less is removed. Any other level is set, which overwrites the quantity already at that price.
- `update_book_ticker(data)` raises `ValueError` when `data.symbol` does not match the book's `symbol`.
- `update_depth(data)` does no symbol check.
- After every update, `prune_mid_book()` runs. It drops bids at or above the best ask and asks at or below the best bid. You can also call it directly.
- `best_bid_ask()` returns a pair of `Level` named tuples, each with `price` and `qty`. It returns `None` when either side is empty.
- `str(book)` gives 20 rows of the form `[ 1] [ qty ] bid | ask [ qty ]`. Prices are shown to 3 decimals and quantities to 5 decimals. Dashes fill the rows that have no level.

## Demo

```
orderbook-demo
```

The demo builds a `BNBUSDT` book and applies one sample depth update and one sample ticker update to it. It then prints the book, followed by its best bid and best ask.

## What it does not do

The package does not connect to any exchange or stream. You feed it messages yourself.

It also does not check update ids for gaps or ordering. `update_id` and `last_update_id` are parsed but not used by the book.

## Tests

```
pip install .[test]
pytest
```