"""Command-line interface for Storyboard Studio."""
