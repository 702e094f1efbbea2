from typing import List, Sequence

import pandas as pd

WIDTH = 10


def row(*cells) -> List[str]:
    values = [str(cell) for cell in cells]
    return values + [""] * (WIDTH - len(values))


def trade(symbol: str, timestamp: str, quantity, price) -> List[str]:
    return row("Trades", "Data", "Order", "Stocks", "USD", "U1234567", symbol, timestamp, quantity, price)


def subtotal(symbol: str) -> List[str]:
    return row("Trades", "SubTotal", "", "Stocks", "USD", "U1234567", symbol, "", "", "")


def report(trade_rows: Sequence[List[str]]) -> pd.DataFrame:
    rows = [
        row("Statement", "Header", "Field Name", "Field Value"),
        row("Statement", "Data", "Period", "January 1, 2033 - March 1, 2033"),
        *trade_rows,
        row("Open Positions", "Header", "DataDiscriminator"),
    ]
    return pd.DataFrame(rows)


def fb_report() -> pd.DataFrame:
    return report(
        [
            trade("FB", "2033-01-01,00:00:00", 50, 130),
            trade("FB", "2033-02-01,00:00:00", 100, 200),
            subtotal("FB"),
        ]
    )
