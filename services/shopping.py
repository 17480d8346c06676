"""
Grocery List Service

Functions for turning recipe ingredients into grocery list items.
"""

from collections import namedtuple

from constants import METRIC, DEFAULT_GROCERY_CATEGORY
from .scaling import scale_and_convert

GroceryItem = namedtuple('GroceryItem', ['name', 'checked', 'category'])


def normalize_grocery_item(item):
    """
    Resolve a stored grocery item into a GroceryItem.

    Lists saved by older clients hold plain strings; newer ones hold
    {name, checked, category} records. Both are accepted; a missing
    category becomes DEFAULT_GROCERY_CATEGORY.

    Raises:
        ValueError: If a record has no usable name
        TypeError: If item is neither a string nor a dict
    """
    if isinstance(item, GroceryItem):
        return item

    if isinstance(item, str):
        return GroceryItem(item, False, DEFAULT_GROCERY_CATEGORY)

    if isinstance(item, dict):
        name = item.get('name')
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Grocery item has no name: {item!r}")
        return GroceryItem(name, bool(item.get('checked', False)),
                           item.get('category') or DEFAULT_GROCERY_CATEGORY)

    raise TypeError(f"Unsupported grocery item type: {type(item).__name__}")


def grocery_list_title(recipe_title):
    """Title for a grocery list created from a recipe."""
    return f"Ingredients for {recipe_title}"


def build_grocery_items(ingredients, factor=1.0, target_system=METRIC, categorize=None):
    """
    Build grocery list items from recipe ingredient lines.

    Each line is scaled and converted once, then categorized from the
    original (unscaled) line.

    Args:
        ingredients: Ingredient lines in recipe order
        factor: Scale factor (> 0)
        target_system: METRIC or IMPERIAL
        categorize: Optional callable taking an ingredient line and
            returning a category name or None

    Returns:
        List of {'name', 'checked', 'category'} dicts in recipe order
    """
    items = []
    for ingredient in ingredients:
        name = scale_and_convert(ingredient, factor, target_system)
        category = categorize(ingredient) if categorize else None
        items.append(GroceryItem(name, False, category or DEFAULT_GROCERY_CATEGORY)._asdict())
    return items
