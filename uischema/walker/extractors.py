"""Per-node-kind extractor strategies used by the syntax walker.

Each extractor receives one tree-sitter node plus its NodeContext and
returns the candidates found there. Extractors never mutate shared state;
the walker collects what they return, so a failing extractor leaves no
partial candidates behind.
"""

import json
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from tree_sitter import Node

from uischema.events import is_event_name
from uischema.parsing import ParsedSource
from uischema.runtime import declared_event_name
from uischema.schema import EventCandidate, Origin, PropertyCandidate
from uischema.typemap import map_runtime_type

__all__ = [
    "Candidate",
    "NodeContext",
    "Extractor",
    "FUNCTION_KINDS",
    "DEFAULT_EXTRACTORS",
    "SCRIPT_EXTRACTORS",
    "EMIT_CALLS",
    "extract_interface",
    "extract_type_alias",
    "extract_destructured_params",
    "extract_markup_events",
    "element_has_children",
    "extract_macro_call",
    "extract_exported_binding",
]

Candidate = PropertyCandidate | EventCandidate

FUNCTION_KINDS = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "arrow_function",
        "function_expression",
        "function",
    }
)

_MEMBER_KINDS = frozenset({"property_signature", "method_signature"})

# Calls that fire a component event by name: Svelte dispatchers, Vue emit
EMIT_CALLS = frozenset({"dispatch", "emit", "$emit"})


@dataclass(frozen=True)
class NodeContext:
    """What an extractor may know about the node it is handling.

    Attributes:
        parsed: Parsed source, for slicing node text.
        inside_function: True when the node sits inside a function body.
    """

    parsed: ParsedSource
    inside_function: bool = False

    def text(self, node: Node | None) -> str:
        return self.parsed.text(node)


Extractor = Callable[[Node, NodeContext], list[Candidate]]


# =============================================================================
# Text helpers
# =============================================================================


def _clean_comment(raw: str) -> str | None:
    """Strip comment delimiters and join the remaining lines."""
    text = raw.strip()
    if text.startswith("//"):
        text = text[2:]
    else:
        text = text.removeprefix("/**").removeprefix("/*").removesuffix("*/")
    lines = [line.strip().lstrip("*").strip() for line in text.splitlines()]
    cleaned = " ".join(line for line in lines if line)
    return cleaned or None


def _member_name(ctx: NodeContext, node: Node | None) -> str:
    """Name of a property/method signature, unquoting string keys."""
    text = ctx.text(node).strip()
    if node is not None and node.type == "string" and len(text) >= 2:
        return text[1:-1]
    return text


def _annotation_text(ctx: NodeContext, node: Node | None) -> str:
    """Type text of a type_annotation node, without the leading colon."""
    return ctx.text(node).lstrip(":").strip()


def _is_optional(node: Node) -> bool:
    return any(child.type == "?" for child in node.children)


def _parameter_texts(ctx: NodeContext, params: Node | None) -> tuple[str, ...]:
    if params is None:
        return ()
    if params.type != "formal_parameters":
        # Arrow function with a bare identifier parameter
        return (ctx.text(params),)
    return tuple(
        ctx.text(child) for child in params.named_children if child.type != "comment"
    )


def _literal_value(ctx: NodeContext, node: Node | None) -> Any:
    """Python value of a literal default, or its source text otherwise."""
    if node is None:
        return None
    text = ctx.text(node).strip()
    if node.type == "string":
        return text[1:-1]
    if node.type in ("true", "false"):
        return node.type == "true"
    if node.type in ("null", "undefined"):
        return None
    if node.type == "number":
        try:
            return json.loads(text)
        except ValueError:
            return text
    return text


# =============================================================================
# Declarations: interfaces and object type aliases
# =============================================================================


def _members_with_comments(
    ctx: NodeContext, body: Node
) -> Iterator[tuple[Node, str | None]]:
    """Yield each member signature with the comment directly above it.

    A comment on the same line as the previous member is a trailing
    comment for that member and is not carried forward.
    """
    pending: Node | None = None
    last_member_row = -1
    for child in body.children:
        if child.type == "comment":
            if child.start_point[0] != last_member_row:
                pending = child
            continue
        if child.type in _MEMBER_KINDS:
            description = _clean_comment(ctx.text(pending)) if pending else None
            yield child, description
            pending = None
            last_member_row = child.end_point[0]


def _extract_members(ctx: NodeContext, body: Node | None, origin: Origin) -> list[Candidate]:
    if body is None:
        return []
    found: list[Candidate] = []
    for member, description in _members_with_comments(ctx, body):
        name = _member_name(ctx, member.child_by_field_name("name"))
        if not name:
            continue
        if member.type == "property_signature":
            found.append(
                PropertyCandidate(
                    name=name,
                    origin=origin,
                    raw_type=_annotation_text(ctx, member.child_by_field_name("type")),
                    required=not _is_optional(member),
                    description=description,
                    position=member.start_byte,
                )
            )
            continue

        params = member.child_by_field_name("parameters")
        if is_event_name(name):
            found.append(
                EventCandidate(
                    name=name,
                    origin=origin,
                    parameter_hints=_parameter_texts(ctx, params),
                    description=description,
                    position=member.start_byte,
                )
            )
        else:
            # Render props and other callbacks declared with method syntax
            return_type = _annotation_text(ctx, member.child_by_field_name("return_type"))
            found.append(
                PropertyCandidate(
                    name=name,
                    origin=origin,
                    raw_type=f"{ctx.text(params)} => {return_type or 'void'}",
                    required=not _is_optional(member),
                    description=description,
                    position=member.start_byte,
                )
            )
    return found


def extract_interface(node: Node, ctx: NodeContext) -> list[Candidate]:
    """Props and events declared by an ``interface`` body."""
    return _extract_members(ctx, node.child_by_field_name("body"), Origin.INTERFACE)


def extract_type_alias(node: Node, ctx: NodeContext) -> list[Candidate]:
    """Props and events declared by ``type X = { ... }``."""
    value = node.child_by_field_name("value")
    if value is None or value.type != "object_type":
        return []
    return _extract_members(ctx, value, Origin.TYPE_ALIAS)


# =============================================================================
# Usage: destructured component parameters
# =============================================================================


def _first_parameter(node: Node) -> Node | None:
    params = node.child_by_field_name("parameters")
    if params is None:
        return None
    for child in params.named_children:
        if child.type != "comment":
            return child
    return None


def _binding(
    name: str,
    element: Node,
    required: bool = True,
    default: Any = None,
) -> PropertyCandidate:
    return PropertyCandidate(
        name=name,
        origin=Origin.DESTRUCTURE,
        required=required,
        default_value=default,
        position=element.start_byte,
    )


def _pattern_bindings(ctx: NodeContext, pattern: Node) -> list[PropertyCandidate]:
    """One candidate per name bound by an object destructuring pattern."""
    found: list[PropertyCandidate] = []
    for element in pattern.named_children:
        kind = element.type
        if kind == "shorthand_property_identifier_pattern":
            found.append(_binding(ctx.text(element), element))
        elif kind == "object_assignment_pattern":
            name = ctx.text(element.child_by_field_name("left"))
            default = _literal_value(ctx, element.child_by_field_name("right"))
            found.append(_binding(name, element, default=default))
        elif kind == "pair_pattern":
            name = _member_name(ctx, element.child_by_field_name("key"))
            value = element.child_by_field_name("value")
            default = None
            if value is not None and value.type in (
                "assignment_pattern",
                "object_assignment_pattern",
            ):
                default = _literal_value(ctx, value.child_by_field_name("right"))
            found.append(_binding(name, element, default=default))
        elif kind == "rest_pattern":
            names = [c for c in element.named_children if c.type == "identifier"]
            if names:
                found.append(_binding(ctx.text(names[0]), element, required=False))
    return [candidate for candidate in found if candidate.name.strip()]


def extract_destructured_params(node: Node, ctx: NodeContext) -> list[Candidate]:
    """Props bound by a component function's destructured first parameter.

    Functions nested inside another function body (callbacks, helpers) are
    not component signatures and yield nothing. An inline object type on
    the parameter is treated as an interface declaration.
    """
    if ctx.inside_function:
        return []
    param = _first_parameter(node)
    if param is None or param.type not in ("required_parameter", "optional_parameter"):
        return []
    pattern = param.child_by_field_name("pattern")
    if pattern is None or pattern.type != "object_pattern":
        return []

    found: list[Candidate] = list(_pattern_bindings(ctx, pattern))
    annotation = param.child_by_field_name("type")
    if annotation is not None:
        inline = [c for c in annotation.named_children if c.type == "object_type"]
        if inline:
            found.extend(_extract_members(ctx, inline[0], Origin.INTERFACE))
    return found


# =============================================================================
# Markup: JSX event attributes and children
# =============================================================================


def _attribute_name(ctx: NodeContext, attribute: Node) -> str:
    for child in attribute.children:
        if child.type in ("property_identifier", "jsx_namespace_name", "identifier"):
            return ctx.text(child).strip()
    return ""


def _handler_hints(ctx: NodeContext, attribute: Node) -> tuple[str, ...]:
    """Parameters of an inline arrow handler such as ``onPress={(e) => ...}``."""
    for child in attribute.named_children:
        if child.type != "jsx_expression":
            continue
        for expression in child.named_children:
            if expression.type in ("arrow_function", "function_expression", "function"):
                params = expression.child_by_field_name("parameters")
                if params is None:
                    params = expression.child_by_field_name("parameter")
                return _parameter_texts(ctx, params)
    return ()


def extract_markup_events(node: Node, ctx: NodeContext) -> list[Candidate]:
    """Event-shaped attributes on a JSX element; other attributes are ignored."""
    tag = node.child_by_field_name("open_tag") if node.type == "jsx_element" else node
    if tag is None:
        return []
    found: list[Candidate] = []
    for attribute in tag.named_children:
        if attribute.type != "jsx_attribute":
            continue
        name = _attribute_name(ctx, attribute)
        if name and is_event_name(name):
            found.append(
                EventCandidate(
                    name=name,
                    origin=Origin.MARKUP_ATTRIBUTE,
                    parameter_hints=_handler_hints(ctx, attribute),
                    position=attribute.start_byte,
                )
            )
    return found


def element_has_children(node: Node, ctx: NodeContext) -> bool:
    """True if a jsx_element holds at least one non-whitespace child."""
    if node.type != "jsx_element":
        return False
    for child in node.children:
        if child.type in ("jsx_opening_element", "jsx_closing_element"):
            continue
        if child.type == "jsx_text" and not ctx.text(child).strip():
            continue
        if child.is_named:
            return True
    return False


DEFAULT_EXTRACTORS: Mapping[str, Extractor] = MappingProxyType(
    {
        "interface_declaration": extract_interface,
        "type_alias_declaration": extract_type_alias,
        **{kind: extract_destructured_params for kind in sorted(FUNCTION_KINDS)},
        "jsx_element": extract_markup_events,
        "jsx_self_closing_element": extract_markup_events,
    }
)


# =============================================================================
# Single-file component scripts: Vue macros and Svelte exports
# =============================================================================


def _unquoted(ctx: NodeContext, node: Node | None) -> str:
    text = ctx.text(node).strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        return text[1:-1]
    return text


def _arguments(node: Node) -> list[Node]:
    args = node.child_by_field_name("arguments")
    if args is None:
        return []
    return [child for child in args.named_children if child.type != "comment"]


def _type_argument(node: Node) -> Node | None:
    """The object type passed as ``call<{ ... }>()``, if any."""
    type_args = node.child_by_field_name("type_arguments")
    if type_args is None:
        return None
    for child in type_args.named_children:
        if child.type == "object_type":
            return child
    return None


def _pairs(ctx: NodeContext, node: Node) -> Iterator[tuple[str, Node | None, Node]]:
    """(key, value, element) for each entry of an object literal."""
    for child in node.named_children:
        if child.type == "pair":
            key = child.child_by_field_name("key")
            yield _unquoted(ctx, key), child.child_by_field_name("value"), child
        elif child.type == "shorthand_property_identifier":
            yield ctx.text(child).strip(), None, child


def _runtime_props(ctx: NodeContext, node: Node) -> list[Candidate]:
    """Props declared as ``{ label: String, size: { type: Number, default: 2 } }``
    or ``['label', 'size']``."""
    found: list[Candidate] = []
    if node.type == "array":
        for element in node.named_children:
            if element.type == "string" and _unquoted(ctx, element):
                found.append(
                    PropertyCandidate(
                        name=_unquoted(ctx, element),
                        origin=Origin.RUNTIME,
                        position=element.start_byte,
                    )
                )
        return found
    if node.type != "object":
        return found

    for name, value, element in _pairs(ctx, node):
        if not name:
            continue
        marker: Node | None = value
        required = False
        default: Any = None
        if value is not None and value.type == "object":
            marker = None
            for option, option_value, _ in _pairs(ctx, value):
                if option == "type":
                    marker = option_value
                elif option == "required":
                    required = _literal_value(ctx, option_value) is True
                elif option == "default" and option_value is not None:
                    if option_value.type not in FUNCTION_KINDS:
                        default = _literal_value(ctx, option_value)
        found.append(
            PropertyCandidate(
                name=name,
                origin=Origin.RUNTIME,
                raw_type=ctx.text(marker).strip(),
                required=required,
                default_value=default,
                canonical=map_runtime_type(ctx.text(marker).strip() or None),
                position=element.start_byte,
            )
        )
    return found


def _declared_emit(name: str, hints: tuple[str, ...], node: Node) -> EventCandidate:
    return EventCandidate(
        name=declared_event_name(name),
        origin=Origin.RUNTIME,
        parameter_hints=hints,
        position=node.start_byte,
    )


def _runtime_emits(ctx: NodeContext, node: Node) -> list[Candidate]:
    """Events declared as ``['change']`` or ``{ change: (id) => true }``."""
    found: list[Candidate] = []
    if node.type == "array":
        for element in node.named_children:
            if element.type == "string" and _unquoted(ctx, element):
                found.append(_declared_emit(_unquoted(ctx, element), (), element))
    elif node.type == "object":
        for name, value, element in _pairs(ctx, node):
            if not name:
                continue
            hints: tuple[str, ...] = ()
            if value is not None and value.type in FUNCTION_KINDS:
                params = value.child_by_field_name("parameters")
                if params is None:
                    params = value.child_by_field_name("parameter")
                hints = _parameter_texts(ctx, params)
            found.append(_declared_emit(name, hints, element))
    return found


def _typed_emits(ctx: NodeContext, body: Node) -> list[Candidate]:
    """Events declared as ``defineEmits<{ (e: 'change', id: number): void }>()``
    or ``defineEmits<{ change: [id: number] }>()``."""
    found: list[Candidate] = []
    for member in body.named_children:
        if member.type == "call_signature":
            params = member.child_by_field_name("parameters")
            named = [c for c in params.named_children if c.type != "comment"] if params else []
            if not named:
                continue
            name = _annotation_text(ctx, named[0].child_by_field_name("type")).strip("'\"`")
            if name:
                hints = tuple(ctx.text(param) for param in named[1:])
                found.append(_declared_emit(name, hints, member))
        elif member.type == "property_signature":
            name = _member_name(ctx, member.child_by_field_name("name"))
            if not name:
                continue
            annotation = member.child_by_field_name("type")
            tuples = [c for c in annotation.named_children if c.type == "tuple_type"] if annotation else []
            hints = tuple(ctx.text(c) for c in tuples[0].named_children) if tuples else ()
            found.append(_declared_emit(name, hints, member))
    return found


def _component_options(ctx: NodeContext, node: Node) -> list[Candidate]:
    """``props`` and ``emits`` entries of a component options object."""
    found: list[Candidate] = []
    for key, value, _ in _pairs(ctx, node):
        if value is None:
            continue
        if key == "props":
            found.extend(_runtime_props(ctx, value))
        elif key == "emits":
            found.extend(_runtime_emits(ctx, value))
    return found


def _callee_name(ctx: NodeContext, node: Node) -> str:
    function = node.child_by_field_name("function")
    if function is None:
        return ""
    if function.type == "member_expression":
        function = function.child_by_field_name("property")
    return ctx.text(function).strip()


def extract_macro_call(node: Node, ctx: NodeContext) -> list[Candidate]:
    """Props and events declared through component script calls.

    Handles ``defineProps``, ``defineEmits``, ``defineComponent``, the
    Svelte ``$props()`` rune and ``dispatch('name')`` / ``emit('name')``.
    """
    callee = _callee_name(ctx, node)
    args = _arguments(node)

    if callee == "defineProps":
        declared = _type_argument(node)
        if declared is not None:
            return _extract_members(ctx, declared, Origin.INTERFACE)
        return _runtime_props(ctx, args[0]) if args else []

    if callee == "defineEmits":
        declared = _type_argument(node)
        if declared is not None:
            return _typed_emits(ctx, declared)
        return _runtime_emits(ctx, args[0]) if args else []

    if callee == "defineComponent":
        if args and args[0].type == "object":
            return _component_options(ctx, args[0])
        return []

    if callee == "$props":
        declarator = node.parent
        if declarator is None or declarator.type != "variable_declarator":
            return []
        pattern = declarator.child_by_field_name("name")
        if pattern is None or pattern.type != "object_pattern":
            return []
        return list(_pattern_bindings(ctx, pattern))

    if callee in EMIT_CALLS and args and args[0].type == "string":
        name = _unquoted(ctx, args[0])
        if not name:
            return []
        return [
            EventCandidate(
                name=declared_event_name(name),
                origin=Origin.DISPATCH,
                position=node.start_byte,
            )
        ]
    return []


def extract_exported_binding(node: Node, ctx: NodeContext) -> list[Candidate]:
    """Props declared by ``export let name = default`` or ``export default { props }``."""
    value = node.child_by_field_name("value")
    if value is not None:
        return _component_options(ctx, value) if value.type == "object" else []

    declaration = node.child_by_field_name("declaration")
    if declaration is None:
        return []
    if declaration.type == "lexical_declaration":
        if ctx.text(declaration.child_by_field_name("kind")).strip() != "let":
            return []
    elif declaration.type != "variable_declaration":
        return []

    found: list[Candidate] = []
    for declarator in declaration.named_children:
        if declarator.type != "variable_declarator":
            continue
        name = declarator.child_by_field_name("name")
        if name is None or name.type != "identifier":
            continue
        initial = declarator.child_by_field_name("value")
        found.append(
            PropertyCandidate(
                name=ctx.text(name).strip(),
                origin=Origin.EXPORTED_BINDING,
                raw_type=_annotation_text(ctx, declarator.child_by_field_name("type")),
                required=initial is None,
                default_value=_literal_value(ctx, initial),
                position=declarator.start_byte,
            )
        )
    return found


SCRIPT_EXTRACTORS: Mapping[str, Extractor] = MappingProxyType(
    {
        "call_expression": extract_macro_call,
        "export_statement": extract_exported_binding,
    }
)
