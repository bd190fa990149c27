"""Command handlers for a small shell: files, processes, environment, expressions and more."""

__version__ = "1.0.0"