"""Command-line interface for nodeprune."""
