"""In-memory component registry backed by the schema analyzer.

The registry owns the name -> schema map and decides when to analyze:
a SHA-256 fingerprint of each registration's input lets an unchanged
component skip re-analysis. Analysis itself runs outside the lock, since
the analyzer holds no mutable state.
"""

import hashlib
import json
import logging
import threading
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from uischema.analyzer import SchemaAnalyzer, SourceUnit
from uischema.runtime import descriptor_fields
from uischema.schema import ComponentSchema, Platform

__all__ = [
    "RegistryEntry",
    "RegistryStats",
    "ComponentRegistry",
    "fingerprint",
]

logger = logging.getLogger(__name__)


def fingerprint(
    name: str,
    source_text: str | None = None,
    runtime_ref: Any = None,
    markers: tuple[str, ...] = (),
) -> str | None:
    """SHA-256 hex digest identifying one registration input.

    Runtime references are reduced to their declaration fields (see
    descriptor_fields) and serialized as sorted JSON, with repr() for
    values JSON cannot represent.

    Args:
        name: Component name.
        source_text: Component source code.
        runtime_ref: Runtime component descriptor.
        markers: Extra runtime fields that affect the result, such as
            platform detection markers.

    Returns:
        Hex digest, or None when the runtime reference cannot be serialized
        (mixed key types, self references). Such inputs are never cached.
    """
    if source_text is not None:
        payload = f"source\0{name}\0{source_text}"
    else:
        snapshot: dict[str, Any] = {}
        if runtime_ref is not None and not isinstance(runtime_ref, Mapping):
            kind = type(runtime_ref)
            snapshot["ref"] = f"{kind.__module__}.{kind.__qualname__}@{id(runtime_ref)}"
        if runtime_ref is not None:
            snapshot["fields"] = descriptor_fields(runtime_ref, markers)
        try:
            payload = f"runtime\0{name}\0" + json.dumps(
                snapshot, sort_keys=True, default=repr
            )
        except (TypeError, ValueError) as e:
            logger.debug("Runtime reference of %s is not fingerprintable: %s", name, e)
            return None
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class RegistryEntry:
    """A registered component and the input its schema came from."""

    name: str
    schema: ComponentSchema
    fingerprint: str | None
    registered_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class RegistryStats:
    """Registry counters.

    Attributes:
        total_components: Number of registered components.
        degraded_components: Components stored with the fallback schema.
        platforms: Component count per platform value.
        analyses: Analyzer runs since creation or the last clear().
        cache_hits: Registrations answered from the fingerprint cache.
        last_update: Time of the latest change, None when never changed.
    """

    total_components: int = 0
    degraded_components: int = 0
    platforms: dict[str, int] = field(default_factory=dict)
    analyses: int = 0
    cache_hits: int = 0
    last_update: datetime | None = None


class ComponentRegistry:
    """Thread-safe name -> schema store.

    Args:
        analyzer: Analyzer used for registrations. Defaults to a new
            SchemaAnalyzer configured from the environment.

    Example:
        >>> registry = ComponentRegistry()
        >>> schema = registry.register("Tag", "export const Tag = ({ text }) => <b>{text}</b>;")
        >>> registry.get_schema("Tag") == schema
        True
    """

    def __init__(self, analyzer: SchemaAnalyzer | None = None):
        self._analyzer = analyzer or SchemaAnalyzer()
        self._entries: dict[str, RegistryEntry] = {}
        self._lock = threading.RLock()
        self._analyses = 0
        self._cache_hits = 0
        self._last_update: datetime | None = None
        self._markers = tuple(
            marker
            for rule in self._analyzer.detector.runtime_rules
            for marker in rule.markers
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def register(
        self,
        name: str,
        source_text: str | None = None,
        runtime_ref: Any = None,
    ) -> ComponentSchema:
        """Analyze and store a component, replacing any earlier entry.

        An unchanged input (same fingerprint) returns the stored schema
        without re-analysis. Inputs without a fingerprint are always
        analyzed. Degraded schemas are stored too.

        Args:
            name: Component name, the registry key.
            source_text: Component source code.
            runtime_ref: Runtime component descriptor.

        Returns:
            The stored schema.
        """
        digest = fingerprint(name, source_text, runtime_ref, self._markers)
        with self._lock:
            existing = self._entries.get(name)
            if (
                digest is not None
                and existing is not None
                and existing.fingerprint == digest
            ):
                self._cache_hits += 1
                logger.debug("Registry cache hit for %s", name)
                return existing.schema

        schema = self._analyzer.analyze(
            SourceUnit(name=name, source_text=source_text, runtime_ref=runtime_ref)
        )
        if schema.degraded:
            logger.warning(
                "Registered '%s' with a degraded fallback schema",
                name,
                extra={"component": name, "stage": "register"},
            )

        now = datetime.now(timezone.utc)
        with self._lock:
            self._analyses += 1
            previous = self._entries.get(name)
            self._entries[name] = RegistryEntry(
                name=name,
                schema=schema,
                fingerprint=digest,
                registered_at=previous.registered_at if previous else now,
                updated_at=now,
            )
            self._last_update = now
        logger.info("Registered %s (%s)", name, schema.platform)
        return schema

    def update(
        self,
        name: str,
        source_text: str | None = None,
        runtime_ref: Any = None,
    ) -> ComponentSchema | None:
        """Re-register a known component.

        Returns:
            The new schema, or None if the name is not registered.
        """
        if name not in self:
            logger.debug("Update skipped for unknown component %s", name)
            return None
        return self.register(name, source_text=source_text, runtime_ref=runtime_ref)

    def remove(self, name: str) -> bool:
        """Remove a component. Returns True if it was registered."""
        with self._lock:
            removed = self._entries.pop(name, None) is not None
            if removed:
                self._last_update = datetime.now(timezone.utc)
        return removed

    def clear(self) -> None:
        """Remove every component and reset counters."""
        with self._lock:
            self._entries.clear()
            self._analyses = 0
            self._cache_hits = 0
            self._last_update = datetime.now(timezone.utc)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_entry(self, name: str) -> RegistryEntry | None:
        with self._lock:
            return self._entries.get(name)

    def get_schema(self, name: str) -> ComponentSchema | None:
        """Stored schema for a name, None if unknown."""
        entry = self.get_entry(name)
        return entry.schema if entry else None

    def export_schema(self, name: str) -> dict[str, Any] | None:
        """Wire dict of a stored schema, None if unknown."""
        schema = self.get_schema(name)
        return schema.to_wire() if schema else None

    def export_all(self) -> list[dict[str, Any]]:
        """Wire dicts of every stored schema in registration order."""
        with self._lock:
            schemas = [entry.schema for entry in self._entries.values()]
        return [schema.to_wire() for schema in schemas]

    def list_names(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def schemas_by_platform(self, platform: Platform | str) -> list[ComponentSchema]:
        """Stored schemas whose platform matches."""
        wanted = Platform(platform)
        with self._lock:
            return [
                entry.schema
                for entry in self._entries.values()
                if entry.schema.platform == wanted
            ]

    def stats(self) -> RegistryStats:
        """Snapshot of the registry counters."""
        with self._lock:
            schemas = [entry.schema for entry in self._entries.values()]
            return RegistryStats(
                total_components=len(schemas),
                degraded_components=sum(1 for s in schemas if s.degraded),
                platforms=dict(Counter(str(s.platform) for s in schemas)),
                analyses=self._analyses,
                cache_hits=self._cache_hits,
                last_update=self._last_update,
            )
