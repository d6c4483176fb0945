"""Command-line entry points for webshot."""
