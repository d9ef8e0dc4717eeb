"""Market data messages for book ticker and partial depth streams."""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass, field
from typing import Any

_UINT64_LIMIT = 2**64

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


def _parse_decimal(text: Any) -> float:
    """Read the leading number of a string, ignoring whatever trails it."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    stripped = text.lstrip(" \t\n\v\f\r")
    match = _FLOAT_PREFIX.match(stripped)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    literal = match.group()
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def _parse_update_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"update id must be a number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"update id is not finite: {value!r}")
    result = int(value)
    if not 0 <= result < _UINT64_LIMIT:
        raise ValueError(f"update id out of range: {value!r}")
    return result


def _load_object(json_str: str) -> dict[str, Any]:
    document = json.loads(json_str)
    if not isinstance(document, dict):
        raise TypeError(f"expected a JSON object, got {type(document).__name__}")
    return document


def _field(document: dict[str, Any], key: str) -> Any:
    try:
        return document[key]
    except KeyError:
        raise KeyError(f"missing key {key!r}") from None


def _parse_levels(entries: Any) -> list[tuple[float, float]]:
    if not isinstance(entries, list):
        raise TypeError(f"price levels must be an array, got {type(entries).__name__}")
    levels = []
    for entry in entries:
        if isinstance(entry, dict) and len(entry) == 2:
            raise TypeError("price level must be an array, got an object")
        if not isinstance(entry, list) or len(entry) != 2:
            continue
        price, qty = entry
        levels.append((_parse_decimal(price), _parse_decimal(qty)))
    return levels


@dataclass(frozen=True)
class BookTickerUpdate:
    """Best bid and ask for one symbol."""

    update_id: int
    symbol: str
    best_bid_price: float
    best_bid_qty: float
    best_ask_price: float
    best_ask_qty: float

    @classmethod
    def from_json(cls, json_str: str) -> BookTickerUpdate:
        """Parse a book ticker message; raise ValueError if it is malformed."""
        try:
            document = _load_object(json_str)
            symbol = _field(document, "s")
            if not isinstance(symbol, str):
                raise TypeError("symbol must be a string")
            return cls(
                update_id=_parse_update_id(_field(document, "u")),
                symbol=symbol,
                best_bid_price=_parse_decimal(_field(document, "b")),
                best_bid_qty=_parse_decimal(_field(document, "B")),
                best_ask_price=_parse_decimal(_field(document, "a")),
                best_ask_qty=_parse_decimal(_field(document, "A")),
            )
        except (ValueError, TypeError, KeyError) as exc:
            raise ValueError(f"Failed to parse BookTickerUpdate JSON: {exc}") from exc


@dataclass(frozen=True)
class DepthUpdate:
    """Incremental price levels on both sides of the book."""

    last_update_id: int
    bids: list[tuple[float, float]] = field(default_factory=list)
    asks: list[tuple[float, float]] = field(default_factory=list)

    @classmethod
    def from_json(cls, json_str: str) -> DepthUpdate:
        """Parse a partial depth message; raise ValueError if it is malformed.

        Entries that are not two-element arrays are skipped.
        """
        try:
            document = _load_object(json_str)
            return cls(
                last_update_id=_parse_update_id(_field(document, "lastUpdateId")),
                bids=_parse_levels(_field(document, "bids")),
                asks=_parse_levels(_field(document, "asks")),
            )
        except (ValueError, TypeError, KeyError) as exc:
            raise ValueError(f"Invalid DepthUpdate JSON: {exc}") from exc