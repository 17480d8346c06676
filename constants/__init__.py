"""
Constants Package

Lookup tables and whitelists shared by the services. Never mutated at runtime.
"""

from .units import (
    METRIC,
    IMPERIAL,
    VOLUME,
    MASS,
    UNIT_MAPPINGS,
    COMPOUND_UNITS,
    UNIT_CONVERSIONS,
    BASE_UNITS,
    REPRESENTATIVE_UNITS,
    COMMON_FRACTIONS,
    FRACTION_TOLERANCE,
    UNICODE_FRACTIONS,
)

from .validation import (
    MEASUREMENT_SYSTEMS,
    DEFAULT_GROCERY_CATEGORY,
    MAX_LENGTHS,
)
