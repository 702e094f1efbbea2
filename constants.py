"""Shared configuration values for the TradeReturns pipeline."""

SECTION_LABEL = "Trades"
HEADER_DISCRIMINATOR = "Header"

# Fallback positions when the section carries no header row.
DEFAULT_CATEGORY_COL = 0
DEFAULT_SYMBOL_COL = 6
DEFAULT_TIMESTAMP_COL = 7
DEFAULT_QUANTITY_COL = 8
DEFAULT_PRICE_COL = 9

HEADER_ALIASES = {
    "symbol": ("Symbol",),
    "timestamp": ("Date/Time", "DateTime", "Date"),
    "quantity": ("Quantity", "Qty"),
    "price": ("T. Price", "Trade Price", "Price"),
}

TIMESTAMP_FORMAT = "%Y-%m-%d, %H:%M:%S"
DAYS_PER_YEAR = 365

WORKING_SHEET = "Trades Returns"
SUMMARY_SHEET = "Summary"
HIDDEN_WORKING_COLUMNS = ["category", "source_row", "as_of", "current_price"]

PRICE_LOOKUP_RETRIES = 3
PRICE_LOOKUP_BACKOFF_SECONDS = 1.0
PRICE_FALLBACK_HISTORY_DAYS = 5

REPORT_MAX_COLUMNS = 100
