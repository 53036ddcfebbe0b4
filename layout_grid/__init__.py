"""
layout_grid — siatka obszarów formuły układu (wspólna dla dialektów).

Publiczne API:
  get_areas(spans)                 → list[CodArea]
  filter_areas(name, areas)        → list[CodArea]
  map_area_colors(areas, colors)   → dict["@y_x", kolor]
"""

from .areas import filter_areas, get_areas, map_area_colors

__all__ = [
    "get_areas",
    "filter_areas",
    "map_area_colors",
]
