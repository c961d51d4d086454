"""Command line interface for FuzzyVis."""

from fuzzyvis.cli.app import app

__all__ = ["app"]
