"""Command-line interface for cborredux."""
