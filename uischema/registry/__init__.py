"""Component registry: thread-safe schema store with fingerprint caching."""

from .lib import ComponentRegistry, RegistryEntry, RegistryStats, fingerprint

__all__ = [
    "RegistryEntry",
    "RegistryStats",
    "ComponentRegistry",
    "fingerprint",
]
