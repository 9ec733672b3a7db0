"""
Historic rate (candle) model.

Unlike the rest of the API, candle values are native JSON numbers. The
fields are strict so that a string in any of them is rejected.
"""

from src.gdax.model.types import Count, NumberFloat, PositionalRecord


class Candle(PositionalRecord):
    """
    One OHLCV bucket.

    Wire form: ``[time, low, high, open, close, volume]``.
    """

    time: Count  # bucket start, Unix epoch seconds
    low: NumberFloat
    high: NumberFloat
    open: NumberFloat
    close: NumberFloat
    volume: NumberFloat
