# Utility modules for the recipe quantity API
from .sanitizer import clean_text, clean_ingredient_text, clean_title
