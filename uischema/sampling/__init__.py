"""Sample props generator for analyzed component schemas."""

from .lib import default_sample_props, generate_sample_props, sample_value

__all__ = ["generate_sample_props", "default_sample_props", "sample_value"]
