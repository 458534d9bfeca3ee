"""Candidate collection from runtime component descriptors.

A runtime reference is either a mapping or an object. Declaration fields
are read by key or attribute:

- ``propTypes`` / ``defaultProps`` (React)
- ``props`` as a list of names, a mapping of type markers, or a mapping of
  ``{type, required, default}`` options (Vue, Svelte and generic descriptors)
- ``inputs`` / ``outputs`` (Angular)
- ``emits`` as a list or a mapping of parameter lists (Vue)

A plain callable with none of these fields is described by its signature.
"""

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from uischema.events import canonical_event_name, is_event_name
from uischema.schema import CanonicalType, EventCandidate, Origin, PropertyCandidate
from uischema.typemap import map_runtime_type

__all__ = [
    "RuntimeFindings",
    "DECLARATION_FIELDS",
    "declared_event_name",
    "descriptor_fields",
    "inspect_runtime",
]

logger = logging.getLogger(__name__)

DECLARATION_FIELDS = (
    "propTypes",
    "defaultProps",
    "props",
    "inputs",
    "outputs",
    "emits",
)

_MISSING = object()


@dataclass(frozen=True)
class RuntimeFindings:
    """Candidates read from a runtime descriptor."""

    properties: tuple[PropertyCandidate, ...] = field(default_factory=tuple)
    events: tuple[EventCandidate, ...] = field(default_factory=tuple)
    has_children: bool = False


def _field(ref: Any, key: str, default: Any = None) -> Any:
    if isinstance(ref, Mapping):
        return ref.get(key, default)
    return getattr(ref, key, default)


def _has_field(ref: Any, key: str) -> bool:
    return _field(ref, key, _MISSING) is not _MISSING


def descriptor_fields(ref: Any, extra: tuple[str, ...] = ()) -> dict[str, Any]:
    """The declaration fields present on a runtime reference.

    Mappings are returned as a plain dict. For objects only the fields the
    inspector reads (plus ``extra``, such as detection markers) are taken,
    so the snapshot changes whenever a declaration on the object changes.
    """
    if isinstance(ref, Mapping):
        return dict(ref)
    keys = dict.fromkeys((*DECLARATION_FIELDS, "slots", *extra))
    return {key: _field(ref, key) for key in keys if _has_field(ref, key)}


def _wire_value(value: Any, active: frozenset[int] = frozenset()) -> Any:
    """JSON-representable copy of a default value.

    Containers are copied element by element; anything else that JSON
    cannot hold, including a container that contains itself, becomes str().
    """
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple, Mapping)):
        if id(value) in active:
            return str(value)
        inner = active | {id(value)}
        if isinstance(value, Mapping):
            return {str(k): _wire_value(v, inner) for k, v in value.items()}
        return [_wire_value(item, inner) for item in value]
    return str(value)


def _default_entry(value: Any) -> dict[str, Any]:
    """Wire-safe default value, omitted for factories."""
    if callable(value):
        return {}
    return {"default": _wire_value(value)}


def declared_event_name(name: str) -> str:
    """Turn a declared emit/output name into the canonical ``onName`` form.

    Example:
        >>> declared_event_name("update:modelValue")
        'onUpdate:modelValue'
    """
    canonical = canonical_event_name(name)
    if is_event_name(canonical):
        return canonical
    return "on" + canonical[:1].upper() + canonical[1:]


class _Collector:
    """Ordered, name-keyed accumulation of runtime prop declarations."""

    def __init__(self):
        self._props: dict[str, dict[str, Any]] = {}
        self._events: list[EventCandidate] = []

    def prop(self, name: Any, **values: Any) -> None:
        key = str(name)
        if key not in self._props:
            self._props[key] = {"position": len(self._props) + len(self._events)}
        self._props[key].update(values)

    def event(self, name: Any, hints: tuple[str, ...] = ()) -> None:
        self._events.append(
            EventCandidate(
                name=declared_event_name(str(name)),
                origin=Origin.RUNTIME,
                parameter_hints=hints,
                position=len(self._props) + len(self._events),
            )
        )

    def names(self) -> set[str]:
        return set(self._props)

    def findings(self, has_children: bool) -> RuntimeFindings:
        properties = tuple(
            PropertyCandidate(
                name=name,
                origin=Origin.RUNTIME,
                required=values.get("required", False),
                default_value=values.get("default"),
                canonical=values.get("canonical", CanonicalType.TEXT),
                position=values["position"],
            )
            for name, values in self._props.items()
        )
        return RuntimeFindings(
            properties=properties, events=tuple(self._events), has_children=has_children
        )


def _read_marker(collector: _Collector, name: str, marker: Any) -> None:
    """Record one ``name: marker`` declaration of any supported shape."""
    if isinstance(marker, Mapping):
        collector.prop(
            name,
            canonical=map_runtime_type(marker.get("type")),
            required=bool(marker.get("required", marker.get("isRequired", False))),
            **(_default_entry(marker["default"]) if "default" in marker else {}),
        )
    else:
        collector.prop(
            name,
            canonical=map_runtime_type(marker),
            required=bool(getattr(marker, "isRequired", False)),
        )


def _read_names_or_markers(collector: _Collector, value: Any) -> None:
    if isinstance(value, Mapping):
        for name, marker in value.items():
            _read_marker(collector, name, marker)
    elif isinstance(value, (list, tuple)):
        for name in value:
            collector.prop(name)


def _read_signature(collector: _Collector, ref: Any) -> None:
    """Describe a plain callable by its keyword-capable parameters."""
    try:
        signature = inspect.signature(ref)
    except (TypeError, ValueError):
        return
    for parameter in signature.parameters.values():
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            continue
        if parameter.kind is parameter.POSITIONAL_ONLY:
            continue
        has_default = parameter.default is not parameter.empty
        annotation = parameter.annotation
        collector.prop(
            parameter.name,
            canonical=map_runtime_type(None if annotation is parameter.empty else annotation),
            required=not has_default,
            **(_default_entry(parameter.default) if has_default else {}),
        )


def inspect_runtime(ref: Any) -> RuntimeFindings:
    """Collect prop and event candidates from a runtime reference.

    Args:
        ref: Mapping or object describing a component.

    Returns:
        RuntimeFindings. Event-shaped props are left in ``properties``;
        the event classifier moves them.
    """
    collector = _Collector()

    prop_types = _field(ref, "propTypes")
    if isinstance(prop_types, Mapping):
        for name, marker in prop_types.items():
            _read_marker(collector, name, marker)

    default_props = _field(ref, "defaultProps")
    if isinstance(default_props, Mapping):
        for name, value in default_props.items():
            if name in collector.names():
                collector.prop(name, **_default_entry(value))
            else:
                collector.prop(
                    name, canonical=map_runtime_type(type(value)), **_default_entry(value)
                )

    _read_names_or_markers(collector, _field(ref, "props"))
    _read_names_or_markers(collector, _field(ref, "inputs"))

    outputs = _field(ref, "outputs")
    if isinstance(outputs, (list, tuple)):
        for name in outputs:
            collector.event(name)

    emits = _field(ref, "emits")
    if isinstance(emits, Mapping):
        for name, params in emits.items():
            hints = tuple(str(p) for p in params) if isinstance(params, (list, tuple)) else ()
            collector.event(name, hints)
    elif isinstance(emits, (list, tuple)):
        for name in emits:
            collector.event(name)

    declared = any(_has_field(ref, key) for key in DECLARATION_FIELDS)
    if not declared and callable(ref) and not isinstance(ref, type):
        _read_signature(collector, ref)

    has_children = "children" in collector.names() or _has_field(ref, "slots")
    findings = collector.findings(has_children)
    logger.debug(
        "Runtime descriptor declared %d props and %d events",
        len(findings.properties),
        len(findings.events),
    )
    return findings
