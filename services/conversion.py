"""
Unit Conversion Service

Functions for classifying units and converting quantities between the
metric and imperial measurement systems.
"""

import logging
from collections import namedtuple

from constants import (
    METRIC, IMPERIAL, UNIT_MAPPINGS, UNIT_CONVERSIONS, BASE_UNITS, REPRESENTATIVE_UNITS,
    MEASUREMENT_SYSTEMS,
)

logger = logging.getLogger(__name__)

ConversionEntry = namedtuple('ConversionEntry', ['unit', 'system', 'family', 'factor', 'base_unit'])


def standardize_unit(unit):
    """Map a unit spelling like 'Cups', 'tablespoons' or 'lbs' to its standard form."""
    if not unit:
        return None
    key = ' '.join(unit.lower().split()).rstrip('.')
    if key in UNIT_MAPPINGS:
        return UNIT_MAPPINGS[key]
    # Plural spellings not listed explicitly ("pts", "qts", "kgs")
    if key.endswith('s') and key[:-1] in UNIT_MAPPINGS:
        return UNIT_MAPPINGS[key[:-1]]
    return None


def classify_unit(unit):
    """
    Look up the conversion entry for a unit.

    Returns:
        ConversionEntry(unit, system, family, factor, base_unit) where
        factor converts one of unit into base_unit (ML or G), or None if
        the unit is not a recognized volume or mass unit
    """
    standard = standardize_unit(unit)
    if standard is None:
        return None
    system, family, factor = UNIT_CONVERSIONS[standard]
    return ConversionEntry(standard, system, family, factor, BASE_UNITS[family])


def other_system(system):
    """Return the measurement system that is not `system`."""
    return IMPERIAL if system == METRIC else METRIC


def convert_unit(quantity, from_unit, to_unit):
    """
    Convert quantity from one unit to another of the same family.

    Returns:
        (new_quantity, to_unit) or None if either unit is unknown or the
        units measure different things (volume vs mass)
    """
    source = classify_unit(from_unit)
    target = classify_unit(to_unit)
    if source is None or target is None:
        return None

    # Only convert between units sharing a base (volume or mass)
    if source.base_unit != target.base_unit:
        return None

    # Convert: from_unit -> base -> to_unit
    base_qty = quantity * source.factor
    return base_qty / target.factor, target.unit


def convert_measurement(quantity, unit, target_system):
    """
    Convert a quantity into the representative unit of target_system.

    Volume lands in ML (metric) or CUP (imperial), mass in G (metric) or
    OZ (imperial).

    Args:
        quantity: Number to convert, or None
        unit: Unit as written in the recipe ('cups', 'Tbsp', 'g', ...)
        target_system: METRIC or IMPERIAL

    Returns:
        (converted_quantity, unit) or None when there is nothing to do:
        no quantity, an unrecognized unit, or a unit already in target_system

    Raises:
        ValueError: If target_system is not a known measurement system
    """
    if target_system not in MEASUREMENT_SYSTEMS:
        raise ValueError(f"Unknown measurement system: {target_system!r}")

    if quantity is None:
        return None

    entry = classify_unit(unit)
    if entry is None:
        logger.debug("Unit %r is not convertible", unit)
        return None

    if entry.system == target_system:
        return None

    to_unit = REPRESENTATIVE_UNITS[(entry.family, target_system)]
    return convert_unit(quantity, entry.unit, to_unit)
