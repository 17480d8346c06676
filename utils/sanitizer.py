"""
Input Sanitization Module

Cleans ingredient lines and titles arriving through the API before they
reach the parser. Output is returned as JSON, so text is not HTML-escaped.
"""

import re

from constants import MAX_LENGTHS


def clean_text(text, max_length=10000):
    """
    Clean a single line of user text.

    Args:
        text: The text to clean (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Cleaned string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters and null bytes
    text = re.sub(r'[\x00-\x1f\x7f-\x9f]', ' ', text)

    # Collapse whitespace, including non-breaking and zero-width spaces
    text = re.sub(r'[\s\u00a0\u2000-\u200b]+', ' ', text).strip()

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def clean_ingredient_text(text, max_length=None):
    """
    Clean an ingredient line from a client or an imported recipe.

    Args:
        text: Single ingredient line
        max_length: Maximum length (default MAX_LENGTHS['ingredient_text'])

    Returns:
        Cleaned ingredient text
    """
    if max_length is None:
        max_length = MAX_LENGTHS['ingredient_text']
    return clean_text(text, max_length)


def clean_title(title, default='Recipe'):
    """Clean a recipe title, falling back to default if nothing is left."""
    title = clean_text(title, MAX_LENGTHS['recipe_title'])
    return title or default
