"""Ledger bounded context: accounts, transactions and budgets."""
