#!/usr/bin/env python3
"""Print a market snapshot for one product from the GDAX public API."""

import logging
import sys

from rich.console import Console
from rich.table import Table

from src.gdax import GdaxError, PublicClient
from src.gdax.config import config


def main(product: str) -> int:
    """Fetch ticker, best book and recent trades, then render them."""
    logging.basicConfig(level=config.log_level)
    console = Console()

    with PublicClient(config) as client:
        try:
            tick = client.get_product_ticker(product)
            book = client.get_best_order(product)
            trades = client.get_trades(product)
        except GdaxError as e:
            console.print(f"[red]{type(e).__name__}:[/red] {e}")
            return 1

    summary = Table(title=f"{product} ticker")
    summary.add_column("Field")
    summary.add_column("Value", justify="right")
    summary.add_row("Last price", f"{tick.price:.2f}")
    summary.add_row("Last size", f"{tick.size:.8f}")
    summary.add_row("Bid / Ask", f"{tick.bid:.2f} / {tick.ask:.2f}")
    summary.add_row("Spread", f"{tick.spread:.2f}")
    summary.add_row("24h volume", f"{tick.volume:.2f}")
    summary.add_row("Book sequence", str(book.sequence))
    summary.add_row("Time", tick.time.isoformat())
    console.print(summary)

    recent = Table(title="Recent trades")
    recent.add_column("Time")
    recent.add_column("Side")
    recent.add_column("Price", justify="right")
    recent.add_column("Size", justify="right")
    for trade in trades[:10]:
        style = "green" if trade.is_buy else "red"
        recent.add_row(
            trade.time.strftime("%H:%M:%S"),
            f"[{style}]{str(trade.side)}[/{style}]",
            f"{trade.price:.2f}",
            f"{trade.size:.8f}",
        )
    console.print(recent)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else "ETH-USD"))
