"""Command-line interface for ggit."""
