"""
dialects — dialekty formuł układu (BO, IT).

Publiczne API:
  get_service(type)              → CodLayoutFormulaService
  split_dialect_prefix(text)     → (typ, tekst) dla "$IT 250 × 160 = ..."
  DIALECT_TYPES                  → ("BO", "IT")

Typowe użycie:
    from dialects import get_service

    service = get_service("IT")
    parsed = service.parse_formula("250 × 160 = 30 [170] 50 × 15 [60] 85")
    if parsed.error:
        print(parsed.error.message, parsed.error.index)
    else:
        print(service.build_formula(parsed.result))
"""

from .base import CodLayoutFormulaService
from .bo import BoLayoutFormulaService
from .bo_builder import build_bo_formula
from .bo_parser import parse_bo_formula
from .it import ItLayoutFormulaService
from .it_builder import build_it_formula
from .it_labels import ItLabel, ItRole, is_it_label
from .it_parser import parse_it_formula
from .registry import DIALECT_TYPES, get_service, split_dialect_prefix

__all__ = [
    "CodLayoutFormulaService",
    "BoLayoutFormulaService",
    "ItLayoutFormulaService",
    "DIALECT_TYPES",
    "get_service",
    "split_dialect_prefix",
    "parse_bo_formula",
    "build_bo_formula",
    "parse_it_formula",
    "build_it_formula",
    "ItLabel",
    "ItRole",
    "is_it_label",
]
