"""
Unit Constants and Conversion Tables

Contains the unit vocabulary, conversion factors, and fraction glyphs
used for ingredient parsing, scaling and metric/imperial conversion.
"""

# Measurement systems
METRIC = 'metric'
IMPERIAL = 'imperial'

# Unit families
VOLUME = 'volume'
MASS = 'mass'

# Unit mappings for ingredient parsing (lowercase input -> standard unit)
UNIT_MAPPINGS = {
    'teaspoon': 'tsp', 'teaspoons': 'tsp', 'tsp': 'tsp', 'tsps': 'tsp', 'ts': 'tsp',
    'tablespoon': 'tbsp', 'tablespoons': 'tbsp', 'tbsp': 'tbsp', 'tbsps': 'tbsp',
    'tbs': 'tbsp', 'tb': 'tbsp',
    'fl oz': 'fl oz', 'fluid ounce': 'fl oz', 'fluid ounces': 'fl oz',
    'cup': 'cup', 'cups': 'cup', 'c': 'cup',
    'pint': 'pint', 'pints': 'pint', 'pt': 'pint',
    'quart': 'quart', 'quarts': 'quart', 'qt': 'quart',
    'gallon': 'gallon', 'gallons': 'gallon', 'gal': 'gallon',
    'milliliter': 'ml', 'milliliters': 'ml', 'millilitre': 'ml', 'millilitres': 'ml', 'ml': 'ml',
    'liter': 'l', 'liters': 'l', 'litre': 'l', 'litres': 'l', 'l': 'l',
    'ounce': 'oz', 'ounces': 'oz', 'oz': 'oz',
    'pound': 'lb', 'pounds': 'lb', 'lb': 'lb', 'lbs': 'lb',
    'gram': 'g', 'grams': 'g', 'g': 'g',
    'kilogram': 'kg', 'kilograms': 'kg', 'kg': 'kg',
}

# Two-word units the parser reads as a single token (first word -> second words)
COMPOUND_UNITS = {
    'fl': {'oz'},
    'fluid': {'ounce', 'ounces'},
}

# Conversion entries (standard unit -> (system, family, factor to base unit))
# Base unit is ML for volume and G for mass
UNIT_CONVERSIONS = {
    # Volume
    'tsp': (IMPERIAL, VOLUME, 4.92892),
    'tbsp': (IMPERIAL, VOLUME, 14.7868),
    'fl oz': (IMPERIAL, VOLUME, 29.5735),
    'cup': (IMPERIAL, VOLUME, 236.588),
    'pint': (IMPERIAL, VOLUME, 473.176),
    'quart': (IMPERIAL, VOLUME, 946.353),
    'gallon': (IMPERIAL, VOLUME, 3785.41),
    'ml': (METRIC, VOLUME, 1),
    'l': (METRIC, VOLUME, 1000),
    # Mass
    'oz': (IMPERIAL, MASS, 28.3495),
    'lb': (IMPERIAL, MASS, 453.592),
    'g': (METRIC, MASS, 1),
    'kg': (METRIC, MASS, 1000),
}

# Base unit per family
BASE_UNITS = {VOLUME: 'ml', MASS: 'g'}

# Unit a converted quantity is expressed in ((family, system) -> unit)
REPRESENTATIVE_UNITS = {
    (VOLUME, METRIC): 'ml',
    (VOLUME, IMPERIAL): 'cup',
    (MASS, METRIC): 'g',
    (MASS, IMPERIAL): 'oz',
}

# Common fractions for display, checked in this order
COMMON_FRACTIONS = (
    (1/8, '\u215b'),  # ⅛
    (1/4, '\u00bc'),  # ¼
    (1/3, '\u2153'),  # ⅓
    (1/2, '\u00bd'),  # ½
    (2/3, '\u2154'),  # ⅔
    (3/4, '\u00be'),  # ¾
)

# How close a value must be to a common fraction to display as its glyph
FRACTION_TOLERANCE = 0.05

# Unicode fraction characters mapping
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,    # ½
    '\u2153': 1/3,    # ⅓
    '\u2154': 2/3,    # ⅔
    '\u00bc': 0.25,   # ¼
    '\u00be': 0.75,   # ¾
    '\u2155': 0.2,    # ⅕
    '\u2156': 0.4,    # ⅖
    '\u2157': 0.6,    # ⅗
    '\u2158': 0.8,    # ⅘
    '\u2159': 1/6,    # ⅙
    '\u215a': 5/6,    # ⅚
    '\u215b': 0.125,  # ⅛
    '\u215c': 0.375,  # ⅜
    '\u215d': 0.625,  # ⅝
    '\u215e': 0.875,  # ⅞
}
