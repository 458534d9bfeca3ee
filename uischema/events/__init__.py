"""Event classifier: naming-convention split of props and events.

Example:
    >>> from uischema.events import canonical_event_name, is_event_name
    >>> canonical_event_name("(valueChange)")
    'onValueChange'
    >>> is_event_name("onClick"), is_event_name("online")
    (True, False)
"""

from .lib import (
    canonical_event_name,
    is_event_candidate,
    is_event_name,
    parameter_hints_from_type,
    partition,
)

__all__ = [
    "canonical_event_name",
    "is_event_name",
    "is_event_candidate",
    "parameter_hints_from_type",
    "partition",
]
