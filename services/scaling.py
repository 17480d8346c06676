"""
Scaling Service

Functions for scaling ingredient lines and whole recipes by a serving ratio,
optionally converting them to another measurement system.
"""

import logging
import math

from constants import METRIC
from .conversion import convert_measurement
from .parsing import parse_ingredient, format_quantity

logger = logging.getLogger(__name__)


class InvalidScaleFactor(ValueError):
    """Raised when servings or a scale factor are not positive numbers."""
    pass


def _is_positive_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and value > 0
    except OverflowError:
        # ints too large for a float
        return False


def compute_scale_factor(desired_servings, original_servings):
    """
    Compute the scale factor desired_servings / original_servings.

    Zero, negative and non-numeric servings are rejected rather than
    clamped, so no ingredient is ever scaled to zero or below. So is a
    ratio that underflows to zero or overflows to infinity.

    Raises:
        InvalidScaleFactor: If either value or their ratio is not a
            positive finite number
    """
    for name, value in (('desired_servings', desired_servings),
                        ('original_servings', original_servings)):
        if not _is_positive_number(value):
            raise InvalidScaleFactor(f"{name} must be a positive number, got {value!r}")

    factor = desired_servings / original_servings
    if not _is_positive_number(factor):
        raise InvalidScaleFactor(
            f"scale factor {desired_servings!r} / {original_servings!r} is out of range"
        )
    return factor


def _assemble(quantity, unit, item):
    """Build '<quantity>[ <unit>][ <item>]' with single spaces."""
    parts = [format_quantity(quantity)]
    if unit:
        parts.append(unit)
    if item:
        parts.append(item)
    return ' '.join(parts)


def scale_ingredient(text, factor):
    """
    Scale an ingredient line like '2 cups flour' by factor.

    Lines without a leading quantity are returned unchanged.

    Args:
        text: Ingredient line
        factor: Scale factor, must be > 0. Validate it at the boundary
            with compute_scale_factor(); this function only asserts it.

    Returns:
        The re-rendered line, e.g. scale_ingredient('2 cups flour', 1.5)
        gives '3 cups flour'
    """
    assert factor > 0, f"scale factor must be positive, got {factor!r}"

    parsed = parse_ingredient(text)
    if parsed.quantity is None:
        return text

    scaled = parsed.quantity * factor
    if not math.isfinite(scaled):
        logger.warning("Scaling %r by %r overflows, leaving it unchanged", text, factor)
        return text

    return _assemble(scaled, parsed.unit, parsed.item)


def scale_and_convert(text, factor=1.0, target_system=METRIC):
    """
    Scale an ingredient line, then convert it to target_system.

    Scaling happens first, on the unit as written; the scaled line is then
    re-parsed and converted. Anything that cannot be converted (no
    quantity, unknown unit, unit already in target_system) comes back
    scaled but otherwise untouched.
    """
    scaled = scale_ingredient(text, factor)
    parsed = parse_ingredient(scaled)

    converted = convert_measurement(parsed.quantity, parsed.unit, target_system)
    if converted is None:
        return scaled

    quantity, unit = converted
    if not math.isfinite(quantity):
        return scaled
    return _assemble(quantity, unit, parsed.item)


def scale_ingredients(ingredients, factor, target_system=None):
    """
    Scale every ingredient line of a recipe, keeping order and count.

    If target_system is None the lines are scaled but keep their units.
    """
    if target_system is None:
        return [scale_ingredient(ingredient, factor) for ingredient in ingredients]
    return [scale_and_convert(ingredient, factor, target_system) for ingredient in ingredients]


def scale_recipe(recipe, desired_servings, original_servings=None, target_system=None):
    """
    Scale a recipe dict to a new number of servings.

    Ingredients go through scale_ingredients(). Prep and cook times scale
    with the square root of the factor, calories linearly. Missing fields stay
    missing. The input dict is not modified.

    Args:
        recipe: Dict with 'ingredients' and optionally 'servings',
            'prep_time', 'cook_time' and 'estimated_calories'
        desired_servings: Number of servings wanted
        original_servings: Servings the recipe was written for
            (default: recipe['servings'])
        target_system: METRIC, IMPERIAL or None to keep units

    Returns:
        New recipe dict

    Raises:
        InvalidScaleFactor: If either servings value is not positive
    """
    if original_servings is None:
        original_servings = recipe.get('servings')
    factor = compute_scale_factor(desired_servings, original_servings)

    scaled = dict(recipe)
    scaled['ingredients'] = scale_ingredients(recipe.get('ingredients') or [], factor, target_system)
    scaled['servings'] = desired_servings

    for key in ('prep_time', 'cook_time'):
        if recipe.get(key):
            scaled[key] = round(recipe[key] * math.sqrt(factor))

    if recipe.get('estimated_calories'):
        scaled['estimated_calories'] = round(recipe['estimated_calories'] * factor)

    logger.debug("Scaled recipe %r by %.3f", recipe.get('title'), factor)
    return scaled
