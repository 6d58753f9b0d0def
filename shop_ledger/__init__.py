"""shop_ledger: inventory, sales, credit and profit bookkeeping for a small shop."""

__version__ = "0.1.0"
