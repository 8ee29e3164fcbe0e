"""budgetbook - personal finance ledger with atomic transaction posting."""
