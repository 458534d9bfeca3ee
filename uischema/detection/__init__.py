"""Platform detector: ordered first-match rules over text or runtime shape.

Example:
    >>> from uischema.detection import detect_platform
    >>> detect_platform("const [open, setOpen] = useState(false)")
    <Platform.REACT: 'react'>
"""

from .lib import (
    DEFAULT_RUNTIME_RULES,
    DEFAULT_SOURCE_RULES,
    DetectionRule,
    PlatformDetector,
    RuntimeRule,
    detect_platform,
    detect_runtime_platform,
)

__all__ = [
    "DetectionRule",
    "RuntimeRule",
    "DEFAULT_SOURCE_RULES",
    "DEFAULT_RUNTIME_RULES",
    "PlatformDetector",
    "detect_platform",
    "detect_runtime_platform",
]
