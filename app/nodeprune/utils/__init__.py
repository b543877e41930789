"""Utility modules for nodeprune."""
