"""
Services Package

Ingredient quantity parsing, formatting, scaling and unit conversion.
"""

from .parsing import (
    ParsedIngredient,
    parse_quantity,
    parse_ingredient,
    format_quantity,
)

from .conversion import (
    ConversionEntry,
    standardize_unit,
    classify_unit,
    other_system,
    convert_unit,
    convert_measurement,
)

from .scaling import (
    InvalidScaleFactor,
    compute_scale_factor,
    scale_ingredient,
    scale_and_convert,
    scale_ingredients,
    scale_recipe,
)

from .shopping import (
    GroceryItem,
    normalize_grocery_item,
    grocery_list_title,
    build_grocery_items,
)

__all__ = [
    # Parsing
    'ParsedIngredient',
    'parse_quantity',
    'parse_ingredient',
    'format_quantity',
    # Conversion
    'ConversionEntry',
    'standardize_unit',
    'classify_unit',
    'other_system',
    'convert_unit',
    'convert_measurement',
    # Scaling
    'InvalidScaleFactor',
    'compute_scale_factor',
    'scale_ingredient',
    'scale_and_convert',
    'scale_ingredients',
    'scale_recipe',
    # Grocery lists
    'GroceryItem',
    'normalize_grocery_item',
    'grocery_list_title',
    'build_grocery_items',
]
