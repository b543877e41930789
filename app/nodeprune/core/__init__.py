"""Core infrastructure: XDG paths, theming, and logging setup."""
