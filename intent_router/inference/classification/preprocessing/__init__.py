from .entity_extractor import (
    ENTITY_CATEGORIES,
    EntityExtractor,
    extract_conditions,
    extract_ingredients,
    extract_keywords,
    extract_patterns,
    extract_products,
    extract_symptoms,
)
from .text_cleaner import TextCleaner, normalize

__all__ = [
    "ENTITY_CATEGORIES",
    "EntityExtractor",
    "TextCleaner",
    "extract_conditions",
    "extract_ingredients",
    "extract_keywords",
    "extract_patterns",
    "extract_products",
    "extract_symptoms",
    "normalize",
]
