"""Local order book built from Binance depth and book-ticker stream updates."""

__version__ = "1.0.0"
__all__ = ["book", "updates", "demo"]