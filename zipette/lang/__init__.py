"""Statements, scanning, parsing and running of zipette programs."""
