"""Command-line interface for errshape."""
