"""Testy budowania formuł IT i słownika etykiet IT."""

from __future__ import annotations

import pytest

from data_model import CodFormula, CodSpan, CodValue
from dialects import ItLabel, ItRole, build_it_formula, parse_it_formula


def _span(label: str, value: int, horizontal: bool) -> CodSpan:
    return CodSpan(
        value,
        label=label,
        type=ItLabel.parse(label).type,
        is_horizontal=horizontal,
    )


def _formula(v: list[tuple], h: list[tuple], height=250, width=160) -> CodFormula:
    return CodFormula(
        type="IT",
        height=CodValue(height),
        width=CodValue(width),
        spans=[_span(l, n, False) for l, n in v] + [_span(l, n, True) for l, n in h],
    )


def _triples(formula) -> list[tuple]:
    return [(s.value, s.type, s.label, s.is_horizontal) for s in formula.spans]


_SIMPLE_V = [("margin-top", 30), ("area-height", 170), ("margin-bottom", 50)]


class TestItLabel:

    @pytest.mark.parametrize("text, role, column", [
        ("margin-top", ItRole.MARGIN_TOP, None),
        ("area-height", ItRole.AREA_HEIGHT, None),
        ("col-1-width", ItRole.WIDTH, 1),
        ("col-12-left-e", ItRole.LEFT_E, 12),
        ("col-3-gap", ItRole.GAP, 3),
    ])
    def test_parse(self, text, role, column):
        label = ItLabel.parse(text)
        assert label == ItLabel(role, column)
        assert str(label) == text

    @pytest.mark.parametrize("text", [
        None, "", "initials", "col-0-width", "col-01-width", "col-1-height", "width", "col--1-gap",
    ])
    def test_parse_rejects(self, text):
        assert ItLabel.parse(text) is None

    def test_column_required_for_column_roles(self):
        with pytest.raises(ValueError):
            ItLabel(ItRole.WIDTH)
        with pytest.raises(ValueError):
            ItLabel(ItRole.MARGIN_TOP, 1)

    def test_types(self):
        assert ItLabel(ItRole.AREA_HEIGHT).type == "text"
        assert ItLabel(ItRole.RIGHT_W, 2).type == "text"
        assert ItLabel(ItRole.HEAD_E).type is None
        assert ItLabel(ItRole.GAP, 1).type is None


class TestBuildIt:

    def test_none(self):
        assert build_it_formula(None) is None

    def test_simple(self):
        formula = _formula(
            _SIMPLE_V,
            [("margin-left", 15), ("col-1-width", 60), ("margin-right", 85)],
        )
        assert build_it_formula(formula) == "250 × 160 = 30 [170] 50 × 15 [60] 85"

    def test_head_and_foot(self):
        formula = _formula(
            [
                ("margin-top", 30), ("head-e", 5), ("area-height", 170),
                ("foot-w", 5), ("margin-bottom", 40),
            ],
            [
                ("margin-left", 15), ("col-1-left-w", 3), ("col-1-width", 50),
                ("col-1-right-w", 5), ("margin-right", 15),
            ],
        )
        assert build_it_formula(formula) == "250 × 160 = 30 / 5 [170 / 5] 40 × 15 [3 / 50 / 5] 15"

    def test_all_height_zones(self):
        formula = _formula(
            [
                ("margin-top", 20), ("head-e", 5), ("head-w", 10), ("area-height", 160),
                ("foot-w", 10), ("foot-e", 5), ("margin-bottom", 40),
            ],
            [("margin-left", 15), ("col-1-width", 60), ("margin-right", 85)],
        )
        assert build_it_formula(formula).startswith("250 × 160 = 20 / 5 [10 / 160 / 10] 5 / 40 × ")

    def test_gaps_and_empty_margins(self):
        formula = _formula(
            _SIMPLE_V,
            [
                ("margin-left", 15),
                ("col-1-left-e", 5), ("col-1-width", 50), ("col-1-gap", 10),
                ("col-2-width", 50), ("col-2-right-e", 5),
                ("margin-right", 25),
            ],
        )
        assert build_it_formula(formula).endswith("× 15 [5* / 50 (10) 50 / 5*] 25")

    def test_last_empty_right_margin_moves_out(self):
        formula = _formula(
            _SIMPLE_V,
            [
                ("margin-left", 15), ("col-1-left-w", 3), ("col-1-width", 50),
                ("col-1-right-e", 5), ("margin-right", 15),
            ],
        )
        assert build_it_formula(formula).endswith("× 15 [3 / 50] 5 / 15")

    def test_unlabelled_spans_are_skipped(self):
        formula = _formula(
            _SIMPLE_V,
            [("margin-left", 15), ("col-1-width", 60), ("margin-right", 85)],
        )
        formula.spans.append(CodSpan(99, label="initials", is_horizontal=True))
        formula.spans.append(CodSpan(42))
        assert "99" not in build_it_formula(formula)
        assert "42" not in build_it_formula(formula)

    @pytest.mark.parametrize("text", [
        "250 × 160 = 30 [170] 50 × 15 [60] 85",
        "250 × 160 = 30 / 5 [170 / 5] 40 × 15 [3 / 50 / 5] 15",
        "250 × 160 = 20 / 5 [10 / 160 / 10] 5 / 40 × 15 [60 (10) 60] 15",
        "250 × 160 = 30 [10 / 170] 40 × 15 / 5 [50] 5 / 15",
        "250 × 160 = 30 [170] 10 / 40 × 15 [3 / 50] 5 / 15",
        "250 × 160 = 30 [170] 50 × 15 [5* / 50 (10) 50 / 5*] 25",
        "250 × 160 = 30 [170] 50 × 15 [5 / 50 (10) 50 / 5] 25",
        "250 × 160 = 30 [170] 50 × 10 [40 (5) 3 / 40 / 3* (5) 40] 20",
        "250 × 160 = 30 [170] 50 × 15 [60 (10)] 15",
    ])
    def test_roundtrip(self, text):
        first = parse_it_formula(text)
        second = parse_it_formula(build_it_formula(first))
        assert second.height.value == first.height.value
        assert second.width.value == first.width.value
        assert _triples(second) == _triples(first)

    def test_service_build(self, it):
        formula = it.parse_formula("250 × 160 = 30 [170] 50 × 15 [60] 85").result
        rebuilt = it.parse_formula(it.build_formula(formula)).result
        assert _triples(rebuilt) == _triples(formula)
