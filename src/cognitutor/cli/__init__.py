"""Command-line interface for cognitutor."""
