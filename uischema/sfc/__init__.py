"""Single-file component splitting for Vue and Svelte sources.

Example:
    >>> from uischema.sfc import split_component, template_events
    >>> sfc = split_component('<template><b @click="go">x</b></template>')
    >>> [e.name for e in template_events(sfc.markup)]
    ['@click']
"""

from .lib import (
    SingleFileComponent,
    is_single_file_component,
    split_component,
    template_events,
)

__all__ = [
    "SingleFileComponent",
    "is_single_file_component",
    "split_component",
    "template_events",
]
