"""Testy siatki obszarów: get_areas, filter_areas, map_area_colors."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from data_model import TEXT_TYPE, CodSpan
from dialects import parse_bo_formula, parse_it_formula
from layout_grid import filter_areas, get_areas, map_area_colors


@pytest.fixture
def bo_areas():
    formula = parse_bo_formula("20 x 12 = 4 // 10 // 6 x 2 // 7 // 3")
    return get_areas(formula.spans)


@pytest.fixture
def it_areas():
    formula = parse_it_formula("250 × 160 = 30 [170] 50 × 15 [60] 85")
    return get_areas(formula.spans)


def _names(areas) -> list[str]:
    return [a.name for a in areas]


class TestGetAreas:

    def test_grid_size_and_order(self, bo_areas):
        assert len(bo_areas) == 9
        assert [(a.y, a.x) for a in bo_areas[:4]] == [(1, 1), (1, 2), (1, 3), (2, 1)]
        assert bo_areas[-1].name == "@3_3"

    def test_type_indexes(self, bo_areas):
        center = bo_areas[4]
        assert center.name == "@2_2"
        assert center.row_indexes == ["$text"]
        assert center.col_indexes == ["$text"]
        assert bo_areas[0].row_indexes == []

    def test_label_comes_before_type(self, it_areas):
        center = it_areas[4]
        assert center.name == "@2_2"
        assert center.row_indexes == ["area-height", "$text"]
        assert center.col_indexes == ["col-1-width", "$text"]
        assert it_areas[0].row_indexes == ["margin-top"]
        assert it_areas[0].col_indexes == ["margin-left"]

    def test_index_lists_are_not_shared(self, bo_areas):
        bo_areas[0].row_indexes.append("x")
        bo_areas[0].col_indexes.append("y")
        assert bo_areas[1].row_indexes == []
        assert bo_areas[3].col_indexes == []

    def test_empty(self):
        assert get_areas([]) == []


class TestFilterAreas:

    def test_empty_name_returns_copy(self, bo_areas):
        result = filter_areas("", bo_areas)
        assert result == bo_areas
        assert result is not bo_areas

    def test_cell(self, bo_areas):
        assert _names(filter_areas("@1_1", bo_areas)) == ["@1_1"]
        assert _names(filter_areas("@3_2", bo_areas)) == ["@3_2"]
        assert filter_areas("@9_9", bo_areas) == []

    @pytest.mark.parametrize("name", ["@a_1", "@1", "@1_1_1", "@_1", "@"])
    def test_malformed_cell(self, bo_areas, name):
        assert filter_areas(name, bo_areas) == []

    def test_column(self, bo_areas):
        assert _names(filter_areas("_$text", bo_areas)) == ["@1_2", "@2_2", "@3_2"]

    def test_row(self, bo_areas):
        assert _names(filter_areas("$text_", bo_areas)) == ["@2_1", "@2_2", "@2_3"]

    def test_intersection(self, bo_areas, it_areas):
        assert _names(filter_areas("$text_$text", bo_areas)) == ["@2_2"]
        assert _names(filter_areas("margin-top_col-1-width", it_areas)) == ["@1_2"]

    def test_name_without_underscore(self, it_areas):
        assert filter_areas("margin-top", it_areas) == []

    def test_unknown_label(self, it_areas):
        assert filter_areas("_initials", it_areas) == []


class TestMapAreaColors:

    def test_expands_names(self, bo_areas):
        colors = map_area_colors(bo_areas, {"_$text": "red"})
        assert colors == {"@1_2": "red", "@2_2": "red", "@3_2": "red"}

    def test_later_key_wins(self, bo_areas):
        colors = map_area_colors(bo_areas, {"_$text": "red", "@2_2": "blue"})
        assert colors == {"@1_2": "red", "@2_2": "blue", "@3_2": "red"}

        colors = map_area_colors(bo_areas, {"@2_2": "blue", "_$text": "red"})
        assert colors["@2_2"] == "red"

    def test_no_colors(self, bo_areas):
        assert map_area_colors(bo_areas, {}) == {}
        assert map_area_colors(bo_areas, None) == {}

    def test_unmatched_names(self, bo_areas):
        assert map_area_colors(bo_areas, {"@9_9": "red", "nothing": "blue"}) == {}


class TestServiceGrid:

    def test_service_delegates(self, it):
        formula = it.parse_formula("250 × 160 = 30 [170] 50 × 15 [60] 85").result
        areas = it.get_areas(formula.spans)
        assert len(areas) == 9
        assert _names(it.filter_areas("area-height_", areas)) == ["@2_1", "@2_2", "@2_3"]
        assert it.map_area_colors(areas, {"@1_1": "red"}) == {"@1_1": "red"}


_grid_span = st.builds(
    CodSpan,
    value=st.integers(min_value=0, max_value=99),
    label=st.none() | st.sampled_from(["initials", "margin-top", "col-1-width"]),
    type=st.sampled_from([None, TEXT_TYPE]),
    is_horizontal=st.booleans(),
)


class TestGridProperties:

    @given(st.lists(_grid_span, max_size=12))
    def test_one_area_per_span_pair(self, spans):
        v = [s for s in spans if not s.is_horizontal]
        h = [s for s in spans if s.is_horizontal]
        areas = get_areas(spans)

        assert len(areas) == len(v) * len(h)
        cells = [(a.y, a.x) for a in areas]
        assert len(set(cells)) == len(cells)
        assert cells == sorted(cells)
        for a in areas:
            assert 1 <= a.y <= len(v)
            assert 1 <= a.x <= len(h)
            assert a.name == f"@{a.y}_{a.x}"

    @given(st.lists(_grid_span, max_size=12))
    def test_indexes_follow_spans(self, spans):
        v = [s for s in spans if not s.is_horizontal]
        h = [s for s in spans if s.is_horizontal]
        for a in get_areas(spans):
            row, col = v[a.y - 1], h[a.x - 1]
            assert (row.label in a.row_indexes) == bool(row.label)
            assert (f"${TEXT_TYPE}" in a.col_indexes) == (col.type == TEXT_TYPE)
            assert filter_areas(a.name, [a]) == [a]
