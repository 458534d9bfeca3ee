"""Deduplicator/merger: one schema entry per name, by origin precedence."""

from .lib import deduplicate, merge_events, merge_properties, select_winners

__all__ = ["select_winners", "merge_properties", "merge_events", "deduplicate"]
