"""Type mapper: raw annotation text to canonical prop types.

Example:
    >>> from uischema.typemap import map_type
    >>> map_type("React.ReactNode")
    <CanonicalType.ELEMENT: 'element'>
"""

from .lib import TYPE_RULES, map_runtime_type, map_type

__all__ = ["TYPE_RULES", "map_type", "map_runtime_type"]
