import logging
import math

from flask import Flask, jsonify, request

from config import get_config
from constants import MEASUREMENT_SYSTEMS
from services import (
    InvalidScaleFactor,
    build_grocery_items,
    compute_scale_factor,
    convert_measurement,
    convert_unit,
    format_quantity,
    grocery_list_title,
    normalize_grocery_item,
    parse_ingredient,
    parse_quantity,
    scale_ingredients,
    scale_recipe,
)
from utils.sanitizer import clean_ingredient_text, clean_title

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)


class RequestValidationError(Exception):
    """Raised when an API request is missing fields or has invalid values."""
    pass


def safe_float(value, default=None, min_val=None, max_val=None):
    """Safely parse a finite float value with optional bounds."""
    if value is None or value == '' or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (ValueError, TypeError, OverflowError):
        return default
    if not math.isfinite(result):
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


# ============================================
# REQUEST HELPERS
# ============================================

def get_json_body():
    """Return the request's JSON object body."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise RequestValidationError('Request body must be a JSON object')
    return data


def get_measurement_system(value, default=True):
    """
    Validate a measurement system name against the whitelist.

    Falls back to DEFAULT_MEASUREMENT_SYSTEM when value is empty and
    default is True; returns None when value is empty and default is False.
    """
    if not value:
        return app.config['DEFAULT_MEASUREMENT_SYSTEM'] if default else None
    system = str(value).strip().lower()
    if system not in MEASUREMENT_SYSTEMS:
        raise RequestValidationError(
            f"Unknown measurement system '{value}', expected one of: {', '.join(sorted(MEASUREMENT_SYSTEMS))}"
        )
    return system


def get_ingredient_lines(value):
    """Validate and clean a list of ingredient lines."""
    if not isinstance(value, list):
        raise RequestValidationError('ingredients must be a list of strings')
    if len(value) > app.config['MAX_INGREDIENTS']:
        raise RequestValidationError(f"Too many ingredients (max {app.config['MAX_INGREDIENTS']})")
    if not all(isinstance(line, str) for line in value):
        raise RequestValidationError('ingredients must be a list of strings')
    return [clean_ingredient_text(line) for line in value]


def get_scale_factor(data):
    """Compute the scale factor from desired_servings and original_servings."""
    desired = safe_float(data.get('desired_servings'))
    original = safe_float(data.get('original_servings'))
    return compute_scale_factor(desired, original)


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(InvalidScaleFactor)
@app.errorhandler(RequestValidationError)
def handle_bad_request(error):
    logger.info("Rejected %s %s: %s", request.method, request.path, error)
    return jsonify({'error': str(error)}), 400


# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    return jsonify({
        'status': 'ok',
        'measurement_systems': sorted(MEASUREMENT_SYSTEMS),
        'default_measurement_system': app.config['DEFAULT_MEASUREMENT_SYSTEM'],
    })


# ============================================
# ROUTES - INGREDIENTS
# ============================================

@app.route('/api/ingredients/parse', methods=['POST'])
def ingredient_parse():
    data = get_json_body()
    text = data.get('ingredient')
    if not isinstance(text, str):
        raise RequestValidationError('ingredient must be a string')

    parsed = parse_ingredient(clean_ingredient_text(text))
    return jsonify({
        'quantity': parsed.quantity,
        'unit': parsed.unit,
        'item': parsed.item,
        'display_quantity': format_quantity(parsed.quantity) if parsed.quantity is not None else None,
    })


@app.route('/api/ingredients/scale', methods=['POST'])
def ingredients_scale():
    data = get_json_body()
    ingredients = get_ingredient_lines(data.get('ingredients'))
    factor = get_scale_factor(data)
    system = get_measurement_system(data.get('system'), default=False)

    return jsonify({
        'ingredients': scale_ingredients(ingredients, factor, system),
        'scale_factor': factor,
        'system': system,
    })


@app.route('/api/convert')
def convert():
    quantity = parse_quantity(request.args.get('quantity', ''))
    if quantity is None:
        raise RequestValidationError('quantity must be a number or fraction')
    unit = request.args.get('unit', '')
    to_unit = request.args.get('to')

    if to_unit:
        result = convert_unit(quantity, unit, to_unit)
    else:
        result = convert_measurement(quantity, unit, get_measurement_system(request.args.get('system')))

    if result is None:
        return jsonify({'converted': False, 'quantity': quantity, 'unit': unit})

    new_qty, new_unit = result
    return jsonify({
        'converted': True,
        'quantity': new_qty,
        'unit': new_unit,
        'display': f"{format_quantity(new_qty)} {new_unit}",
    })


# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/api/recipes/scale', methods=['POST'])
def recipe_scale():
    data = get_json_body()
    recipe = data.get('recipe')
    if not isinstance(recipe, dict):
        raise RequestValidationError('recipe must be a JSON object')

    recipe = dict(recipe)
    recipe['ingredients'] = get_ingredient_lines(recipe.get('ingredients', []))
    for key in ('prep_time', 'cook_time', 'estimated_calories'):
        if recipe.get(key) is not None:
            value = safe_float(recipe[key], min_val=0)
            if value is None:
                raise RequestValidationError(f"{key} must be a finite number")
            recipe[key] = value
    original = safe_float(data.get('original_servings', recipe.get('servings')))
    system = get_measurement_system(data.get('system'), default=False)

    scaled = scale_recipe(recipe, safe_float(data.get('desired_servings')), original, system)
    return jsonify(scaled)


# ============================================
# ROUTES - GROCERY LISTS
# ============================================

@app.route('/api/grocery-list', methods=['POST'])
def grocery_list_build():
    data = get_json_body()
    ingredients = get_ingredient_lines(data.get('ingredients'))
    factor = get_scale_factor(data)
    system = get_measurement_system(data.get('system'))

    existing = data.get('items') or []
    if not isinstance(existing, list):
        raise RequestValidationError('items must be a list')
    try:
        items = [normalize_grocery_item(item)._asdict() for item in existing]
    except (TypeError, ValueError) as e:
        raise RequestValidationError(str(e))

    items.extend(build_grocery_items(ingredients, factor, system))
    logger.info("Built grocery list with %d new items", len(ingredients))

    return jsonify({
        'title': grocery_list_title(clean_title(data.get('title'))),
        'items': items,
    })


if __name__ == '__main__':
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
