"""
Tests for ingredient parsing and quantity formatting.
"""

import math

import pytest

from services.parsing import ParsedIngredient, parse_ingredient, parse_quantity, format_quantity


# ============================================
# parse_ingredient
# ============================================

def test_parse_mixed_number():
    assert parse_ingredient('1 1/2 cups flour') == ParsedIngredient(1.5, 'cups', 'flour')


def test_parse_simple_fraction():
    assert parse_ingredient('3/4 cup sugar') == (0.75, 'cup', 'sugar')


def test_parse_decimal_and_integer():
    assert parse_ingredient('2.5 kg potatoes') == (2.5, 'kg', 'potatoes')
    assert parse_ingredient('2 cups flour') == (2, 'cups', 'flour')


def test_parse_unit_attached_to_number():
    assert parse_ingredient('250g butter') == (250, 'g', 'butter')


def test_parse_unit_is_lowercased_item_is_not():
    assert parse_ingredient('2 CUPS Flour') == (2, 'cups', 'Flour')


def test_parse_keeps_trailing_descriptors_in_item():
    parsed = parse_ingredient('1 cup onion, diced')
    assert parsed.unit == 'cup'
    assert parsed.item == 'onion, diced'


def test_parse_unrecognized_unit_is_kept():
    assert parse_ingredient('2 large eggs') == (2, 'large', 'eggs')
    assert parse_ingredient('3 eggs') == (3, 'eggs', '')


def test_parse_no_unit_when_next_token_is_not_letters():
    assert parse_ingredient('3 (14 oz) cans tomatoes') == (3, '', '(14 oz) cans tomatoes')
    assert parse_ingredient('2 14 oz cans beans') == (2, '', '14 oz cans beans')


def test_parse_without_quantity():
    assert parse_ingredient('salt') == ParsedIngredient(None, '', 'salt')
    assert parse_ingredient('  salt to taste  ') == (None, '', 'salt to taste')


def test_parse_unit_word_without_quantity_stays_in_item():
    assert parse_ingredient('pinch salt') == (None, '', 'pinch salt')


def test_parse_zero_denominator_means_no_quantity():
    assert parse_ingredient('1/0 cup milk') == (None, '', '1/0 cup milk')
    assert parse_ingredient('1 3/0 cups milk') == (None, '', '1 3/0 cups milk')


def test_parse_empty_and_none():
    assert parse_ingredient('') == (None, '', '')
    assert parse_ingredient(None) == (None, '', '')


def test_parse_fraction_glyphs():
    assert parse_ingredient('½ cup milk') == (0.5, 'cup', 'milk')
    assert parse_ingredient('1½ cups milk') == (1.5, 'cups', 'milk')
    assert parse_ingredient('1 ½ cups milk') == (1.5, 'cups', 'milk')
    assert parse_ingredient('⅓ cup oil').quantity == pytest.approx(1 / 3)


def test_parse_compound_units():
    assert parse_ingredient('2 fl oz cream') == (2, 'fl oz', 'cream')
    assert parse_ingredient('2 Fluid Ounces cream') == (2, 'fluid ounces', 'cream')


def test_parse_fl_alone_is_just_a_word():
    assert parse_ingredient('2 fl cream') == (2, 'fl', 'cream')


def test_parse_never_raises():
    for text in ['/', '1/', '1 /2', '.5 cup', '1..2', '½½', '12345678901234567890 g', '² cups']:
        parsed = parse_ingredient(text)
        assert isinstance(parsed, ParsedIngredient)


@pytest.mark.parametrize('number', [
    '1' * 400 + '/3',        # integer division too large for a float
    '1' * 400 + ' 1/2',      # int + fraction overflows
    '1' * 400 + '½',         # int + glyph overflows
    '9' * 400,               # float() gives inf
    '9' * 400 + '.5',        # decimal gives inf
    '1' * 5000,              # past the int digit limit
    '1' * 5000 + ' 1/2',
])
def test_parse_treats_huge_numbers_as_no_quantity(number):
    text = f"{number} cups flour"
    assert parse_ingredient(text) == (None, '', text)
    assert parse_quantity(number) is None

# ============================================
# parse_quantity
# ============================================

def test_parse_quantity_forms():
    assert parse_quantity('1 1/2') == 1.5
    assert parse_quantity('3/4') == 0.75
    assert parse_quantity('2.5') == 2.5
    assert parse_quantity('2') == 2
    assert parse_quantity('½') == 0.5


def test_parse_quantity_rejects_non_quantities():
    assert parse_quantity('') is None
    assert parse_quantity(None) is None
    assert parse_quantity('abc') is None
    assert parse_quantity('2 cups') is None
    assert parse_quantity('1/0') is None


# ============================================
# format_quantity
# ============================================

def test_format_common_fractions():
    assert format_quantity(0.5) == '½'
    assert format_quantity(0.125) == '⅛'
    assert format_quantity(0.25) == '¼'
    assert format_quantity(1 / 3) == '⅓'
    assert format_quantity(2 / 3) == '⅔'
    assert format_quantity(0.75) == '¾'


def test_format_near_fraction_uses_glyph():
    assert format_quantity(0.3) == '⅓'
    assert format_quantity(0.66) == '⅔'


def test_format_first_matching_fraction_wins():
    # 0.29 is within tolerance of both 1/4 and 1/3
    assert format_quantity(0.29) == '¼'


def test_format_whole_numbers():
    assert format_quantity(2.0) == '2'
    assert format_quantity(2) == '2'
    assert format_quantity(2.999) == '3'
    assert format_quantity(0) == '0'


def test_format_decimals():
    assert format_quantity(2.33) == '2.33'
    assert format_quantity(2.5) == '2.5'
    assert format_quantity(1.10) == '1.1'
    assert format_quantity(0.9) == '0.9'
    assert format_quantity(236.588) == '236.59'


def test_format_never_raises():
    assert format_quantity(math.inf) == 'inf'
    assert format_quantity(math.nan) == 'nan'
    assert format_quantity(-0.001) == '0'


def test_format_round_trip_is_stable():
    for q in [0.1, 0.125, 0.25, 0.3, 1 / 3, 0.5, 0.6, 2 / 3, 0.75, 0.9,
              1, 1.5, 2.33, 2.5, 10, 14.1096, 236.588]:
        shown = format_quantity(q)
        recovered = parse_quantity(shown)
        assert recovered is not None, shown
        assert abs(recovered - q) < 0.05, shown
        assert format_quantity(recovered) == shown
