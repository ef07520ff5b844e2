"""Core library modules for skiptools."""
