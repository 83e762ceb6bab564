"""Domain modules: users, wallets, cards and the transaction engine."""
