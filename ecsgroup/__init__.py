"""Compact read-only groups of entities: listed entries followed by a contiguous run."""

__version__ = "0.1.0"
__all__ = ["entity_group"]