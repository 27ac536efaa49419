"""Console driver for the expense ledger."""
