"""Commands: use cases that change ledger state."""
