"""Pure arithmetic expressions of zipette."""
