"""
Validation Constants

Contains whitelist values and limits for validating API input.
"""

from .units import METRIC, IMPERIAL

# Valid measurement systems (whitelist)
MEASUREMENT_SYSTEMS = {METRIC, IMPERIAL}

# Category given to grocery items when no categorizer is supplied
DEFAULT_GROCERY_CATEGORY = 'Other'

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_text': 500,
    'recipe_title': 200,
}
