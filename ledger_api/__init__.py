"""REST driver for the expense ledger."""
