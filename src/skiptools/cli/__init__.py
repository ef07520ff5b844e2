"""Command-line interface for skiptools."""
