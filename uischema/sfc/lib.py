"""Single-file component (Vue ``.vue``, Svelte ``.svelte``) splitting.

A single-file component is markup with embedded ``<script>`` blocks. Only
the script bodies are syntax; the markup around them is scanned with
regular expressions for template event bindings (``@click``,
``v-on:submit.prevent``, ``on:change|preventDefault``) and ``<slot>``
elements.
"""

import re
from dataclasses import dataclass

from uischema.schema import EventCandidate, Origin

__all__ = [
    "SingleFileComponent",
    "is_single_file_component",
    "split_component",
    "template_events",
]

SCRIPT_BLOCK = re.compile(
    r"<script\b(?P<attrs>[^>]*)>(?P<body>.*?)</script\s*>", re.DOTALL | re.IGNORECASE
)
STYLE_BLOCK = re.compile(r"<style\b[^>]*>.*?</style\s*>", re.DOTALL | re.IGNORECASE)
COMMENT_BLOCK = re.compile(r"<!--.*?-->", re.DOTALL)
TEMPLATE_BLOCK = re.compile(r"<template[\s>]", re.IGNORECASE)
SLOT_ELEMENT = re.compile(r"<slot[\s/>]", re.IGNORECASE)

# Opening tag with quoted attribute values kept intact
TAG = re.compile(r"""<[A-Za-z][\w.:-]*(?P<attrs>(?:[^<>"']|"[^"]*"|'[^']*')*)/?>""")
ATTRIBUTE = re.compile(
    r"""(?P<name>[^\s"'=/>]+)(?:\s*=\s*(?:"[^"]*"|'[^']*'|\{[^}]*\}|[^\s>]+))?"""
)
EVENT_PREFIXES = ("@", "v-on:", "on:")
LANG_ATTRIBUTE = re.compile(r"""\blang\s*=\s*["']?(?P<lang>\w+)""")


@dataclass(frozen=True)
class SingleFileComponent:
    """A single-file component split into script and markup.

    Attributes:
        script: Bodies of every ``<script>`` block, joined by newlines.
        markup: Everything outside script, style and comment blocks.
        script_lang: ``lang`` attribute of the first script block, if any.
    """

    script: str
    markup: str
    script_lang: str | None = None

    @property
    def has_slot(self) -> bool:
        """True if the markup renders a ``<slot>``."""
        return bool(SLOT_ELEMENT.search(self.markup))


def is_single_file_component(text: str) -> bool:
    """True if the text holds a ``<script>`` or ``<template>`` block."""
    return bool(SCRIPT_BLOCK.search(text) or TEMPLATE_BLOCK.search(text))


def split_component(text: str) -> SingleFileComponent:
    """Split single-file component text into script and markup.

    Example:
        >>> sfc = split_component('<script>export let a;</script><b on:click>x</b>')
        >>> sfc.script, sfc.markup
        ('export let a;', '<b on:click>x</b>')
    """
    blocks = list(SCRIPT_BLOCK.finditer(text))
    script = "\n".join(block.group("body") for block in blocks)
    lang = None
    if blocks:
        match = LANG_ATTRIBUTE.search(blocks[0].group("attrs"))
        lang = match.group("lang").lower() if match else None

    markup = SCRIPT_BLOCK.sub("", text)
    markup = STYLE_BLOCK.sub("", markup)
    markup = COMMENT_BLOCK.sub("", markup)
    return SingleFileComponent(script=script, markup=markup.strip(), script_lang=lang)


def template_events(markup: str, offset: int = 0) -> list[EventCandidate]:
    """Event bindings written as attributes in template markup.

    Names are returned as written; the event classifier canonicalizes them.

    Args:
        markup: Template markup.
        offset: Added to every position, so template events sort after
            candidates from the script.

    Returns:
        EventCandidates with origin MARKUP_ATTRIBUTE in document order.
    """
    found: list[EventCandidate] = []
    for tag in TAG.finditer(markup):
        attrs_start = tag.start("attrs")
        for attribute in ATTRIBUTE.finditer(tag.group("attrs")):
            if not attribute.group("name").startswith(EVENT_PREFIXES):
                continue
            found.append(
                EventCandidate(
                    name=attribute.group("name"),
                    origin=Origin.MARKUP_ATTRIBUTE,
                    position=offset + attrs_start + attribute.start("name"),
                )
            )
    return found
