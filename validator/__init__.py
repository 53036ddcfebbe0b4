"""
validator — walidacja rozmiaru formuł układu.

Interfejs publiczny:
    validate_formula_size(formula)   — porównanie wymiarów z sumami spanów
    validate_formula(text, parse)    — parsowanie + walidacja rozmiaru
    SizeErrors                       — typ wyniku (klucz → komunikat)

Typowe użycie:
    from dialects import get_service
    from validator import validate_formula

    errors = validate_formula(text, get_service("BO").parse_formula)
    if errors:
        for key, message in errors.items():
            print(key, message)
"""

from .size import SizeErrors, validate_formula, validate_formula_size

__all__ = [
    "SizeErrors",
    "validate_formula",
    "validate_formula_size",
]
