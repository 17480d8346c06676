"""
Parsing Service

Functions for parsing ingredient text into (quantity, unit, item) and
formatting quantities back into display strings.

The parser is a small hand-written scanner rather than a regex so that every
edge case (zero denominators, missing units, glyph fractions) is explicit.
"""

import logging
import math
from collections import namedtuple

from constants import COMPOUND_UNITS, UNICODE_FRACTIONS, COMMON_FRACTIONS, FRACTION_TOLERANCE

logger = logging.getLogger(__name__)

ParsedIngredient = namedtuple('ParsedIngredient', ['quantity', 'unit', 'item'])


def _is_digit(ch):
    # str.isdigit() also accepts superscripts, which int() rejects
    return '0' <= ch <= '9'


def _read_while(text, pos, predicate):
    """Return (token, end) for the run of characters at pos matching predicate."""
    end = pos
    while end < len(text) and predicate(text[end]):
        end += 1
    return text[pos:end], end


def _skip_spaces(text, pos):
    return _read_while(text, pos, str.isspace)[1]


def _read_fraction(text, pos):
    """
    Read a simple fraction ("1/2") or a fraction glyph ("½") at pos.

    Returns:
        (value, end) on success, (None, pos) if there is no fraction here

    Raises:
        ZeroDivisionError: for "n/0"; callers treat that as no quantity
    """
    if pos < len(text) and text[pos] in UNICODE_FRACTIONS:
        return UNICODE_FRACTIONS[text[pos]], pos + 1

    num, end = _read_while(text, pos, _is_digit)
    if not num or end >= len(text) or text[end] != '/':
        return None, pos
    denom, denom_end = _read_while(text, end + 1, _is_digit)
    if not denom:
        return None, pos
    return int(num) / int(denom), denom_end


def _scan_quantity(text, pos):
    value, end = _read_fraction(text, pos)
    if value is not None:
        return value, end

    whole, end = _read_while(text, pos, _is_digit)
    if not whole:
        return None, pos

    # Decimal: "2.5"
    if end < len(text) and text[end] == '.':
        decimals, dec_end = _read_while(text, end + 1, _is_digit)
        if decimals:
            return float(f"{whole}.{decimals}"), dec_end

    # Glyph straight after the digits: "1½"
    if end < len(text) and text[end] in UNICODE_FRACTIONS:
        return int(whole) + UNICODE_FRACTIONS[text[end]], end + 1

    # Mixed number: "1 1/2" or "1 ½"
    frac_pos = _skip_spaces(text, end)
    if frac_pos > end:
        fraction, frac_end = _read_fraction(text, frac_pos)
        if fraction is not None:
            return int(whole) + fraction, frac_end

    return float(whole), end


def _read_quantity(text, pos=0):
    """
    Scan a leading quantity starting at pos.

    Recognized forms, tried in order:
    - whole number plus fraction: "1 1/2", "1 ½", "1½"
    - simple fraction: "3/4", "½"
    - decimal or integer: "2.5", "2"

    Returns:
        (value, end) where value is None when no quantity was found.
        A zero denominator, or a number too large for a float, counts as
        no quantity.
    """
    try:
        value, end = _scan_quantity(text, pos)
    except ZeroDivisionError:
        logger.debug("Zero denominator in %r, treating as no quantity", text)
        return None, pos
    except (OverflowError, ValueError):
        # int() refuses very long digit runs; int/float mixing overflows
        logger.debug("Number too large in %r, treating as no quantity", text[:40])
        return None, pos

    if value is not None and not math.isfinite(value):
        logger.debug("Non-finite number in %r, treating as no quantity", text[:40])
        return None, pos
    return value, end


def parse_quantity(text):
    """
    Parse a standalone quantity string like '1 1/2', '3/4', '2.5' or '½'.

    Returns:
        float value, or None if the whole string is not a quantity
    """
    if not text:
        return None
    text = text.strip()
    value, end = _read_quantity(text)
    if value is None or end != len(text):
        return None
    return value


def parse_ingredient(text):
    """
    Parse ingredient text like '1 1/2 cups flour' into (quantity, unit, item).

    Never fails: text without a leading quantity comes back as
    ParsedIngredient(None, '', text). A unit is only read once a quantity
    has been found, so 'pinch salt' keeps 'pinch' in the item.
    """
    text = (text or '').strip()

    quantity, end = _read_quantity(text)
    if quantity is None:
        return ParsedIngredient(None, '', text)

    # Unit is the next run of letters, lower-cased but not validated here
    word, word_end = _read_while(text, _skip_spaces(text, end), str.isalpha)
    unit = word.lower()

    # Two-word units: "fl oz", "fluid ounces"
    if unit in COMPOUND_UNITS:
        second, second_end = _read_while(text, _skip_spaces(text, word_end), str.isalpha)
        if second.lower() in COMPOUND_UNITS[unit]:
            unit = f"{unit} {second.lower()}"
            word_end = second_end

    item = text[word_end:].strip()
    return ParsedIngredient(quantity, unit, item)


def format_quantity(value):
    """
    Convert a number to a display string, preferring culinary fractions.

    Rounds to 2 decimals first to absorb float noise, then returns the first
    common fraction glyph within tolerance, else a whole number, else up to
    2 decimals with trailing zeros stripped. Never raises for real numbers.
    """
    rounded = round(float(value), 2)

    for fraction, glyph in COMMON_FRACTIONS:
        if abs(rounded - fraction) < FRACTION_TOLERANCE:
            return glyph

    if rounded.is_integer():
        return str(int(rounded))

    return f"{rounded:.2f}".rstrip('0').rstrip('.')
