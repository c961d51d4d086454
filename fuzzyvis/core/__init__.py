"""Core utilities shared across FuzzyVis."""

from fuzzyvis.core.type_registry import Registry

__all__ = ["Registry"]
