"""Testy parsera dialektu BO."""

from __future__ import annotations

import pytest

from data_model import TEXT_TYPE, LayoutUnit, ParseErrorCode, ParsingError
from dialects import parse_bo_formula


def _spans(formula, horizontal: bool) -> list[tuple]:
    return [
        (s.value, s.type, s.label)
        for s in formula.spans
        if s.is_horizontal == horizontal
    ]


def _error(text: str) -> ParsingError:
    with pytest.raises(ParsingError) as exc:
        parse_bo_formula(text)
    return exc.value


class TestBoParse:

    def test_basic_formula(self):
        formula = parse_bo_formula("20 x 10 = 4 // 10 // 6 x 2 // 7 // 3")

        assert formula.type == "BO"
        assert formula.unit is LayoutUnit.MM
        assert formula.height.value == 20
        assert formula.height.is_original is True
        assert formula.width.value == 10
        assert formula.width.is_original is True
        assert len(formula.spans) == 6
        assert _spans(formula, False) == [(4, None, None), (10, TEXT_TYPE, None), (6, None, None)]
        assert _spans(formula, True) == [(2, None, None), (7, TEXT_TYPE, None), (3, None, None)]

    def test_vertical_spans_come_first(self):
        formula = parse_bo_formula("20 x 10 = 4 // 10 // 6 x 2 // 7 // 3")
        assert [s.is_horizontal for s in formula.spans] == [False] * 3 + [True] * 3

    @pytest.mark.parametrize("unit", ["mm", "cm", "in"])
    def test_unit(self, unit):
        formula = parse_bo_formula(f"{unit} 20 x 10 = 4 / 16 x 10")
        assert formula.unit == unit
        assert _spans(formula, False) == [(4, None, None), (16, None, None)]
        assert _spans(formula, True) == [(10, None, None)]

    def test_times_sign_separator(self):
        formula = parse_bo_formula("20 × 10 = 4 // 10 // 6 × 2 // 7 // 3")
        assert (formula.height.value, formula.width.value) == (20, 10)
        assert len(formula.h_spans) == 3

    def test_not_original_value(self):
        formula = parse_bo_formula("(20) x 10 = (4) / 16 x 10")
        assert formula.height.value == 20
        assert formula.height.is_original is False
        assert formula.v_spans[0].is_original is False
        assert formula.v_spans[1].is_original is True

    def test_original_value(self):
        formula = parse_bo_formula("(20) [22] x 10 = 4 / 16 [18] x 10")
        assert formula.height.value == 20
        assert formula.height.original_value == 22
        assert formula.height.is_original is None
        assert formula.v_spans[1].value == 16
        assert formula.v_spans[1].original_value == 18
        assert formula.v_spans[1].is_original is None

    def test_span_labels(self):
        formula = parse_bo_formula("20 x 10 = 4 // 10:initials // 6 x 2:left / 8")
        assert _spans(formula, False)[1] == (10, TEXT_TYPE, "initials")
        assert _spans(formula, True)[0] == (2, None, "left")

    def test_size_labels_are_ignored(self):
        formula = parse_bo_formula("20:h x 10:w = 20 x 10")
        assert formula.height.label is None
        assert formula.width.label is None

    def test_decimals(self):
        formula = parse_bo_formula("20.5 x 10 = 20.5 x 4.25 / 5.75")
        assert formula.height.value == 20.5
        assert _spans(formula, True) == [(4.25, None, None), (5.75, None, None)]

    def test_dash_is_zero(self):
        formula = parse_bo_formula("20 x 10 = - // 20 // - x 10")
        assert _spans(formula, False) == [(0, None, None), (20, TEXT_TYPE, None), (0, None, None)]

    def test_leading_text_divider(self):
        formula = parse_bo_formula("20 x 10 = | 20 x 10")
        assert _spans(formula, False) == [(20, TEXT_TYPE, None)]
        assert _spans(formula, True) == [(10, None, None)]

    def test_text_run(self):
        formula = parse_bo_formula("20 x 12 = 20 x 2 // 7 | 8 // 3")
        assert _spans(formula, True) == [
            (2, None, None),
            (7, TEXT_TYPE, None),
            (8, TEXT_TYPE, None),
            (3, None, None),
        ]

    def test_trailing_divider_is_ignored(self):
        formula = parse_bo_formula("20 x 10 = 4 / 16 / x 10 /")
        assert _spans(formula, False) == [(4, None, None), (16, None, None)]
        assert _spans(formula, True) == [(10, None, None)]

    def test_declared_size_is_kept(self):
        formula = parse_bo_formula("30 x 10 = 5 // 15 x 4 // 6")
        assert formula.height.value == 30
        assert sum(s.value for s in formula.v_spans) == 20


class TestBoParseErrors:

    def test_odd_delimiters(self):
        e = _error("20 x 10 = 5 // 10 / 15")
        assert e.message == "Odd number of '//' in formula"
        assert e.code == ParseErrorCode.MALFORMED_DELIMITERS

    def test_missing_equals(self):
        text = "20 x 10 4 // 10 // 6"
        e = _error(text)
        assert e.message == "Invalid formula (expecting =)"
        assert e.code == ParseErrorCode.MISSING_SEPARATOR
        assert (e.index, e.length) == (0, len(text))

    def test_invalid_size(self):
        e = _error("20 10 = 4 x 2")
        assert e.message == "Invalid size format"
        assert e.code == ParseErrorCode.INVALID_SIZE_FORMAT
        assert (e.index, e.length) == (0, 6)

    def test_missing_x_in_details(self):
        e = _error("20 x 10 = 4 / 16")
        assert e.message == "Invalid formula (expecting x or ×)"
        assert e.code == ParseErrorCode.MISSING_SEPARATOR
        assert (e.index, e.length) == (9, 7)

    def test_invalid_dimension(self):
        e = _error("20 x 10 = 4 / abc x 10")
        assert e.message == "Invalid dimension: abc"
        assert e.code == ParseErrorCode.INVALID_DIMENSION
        assert (e.index, e.length) == (14, 3)

    def test_invalid_size_dimension(self):
        e = _error("2o x 10 = 20 x 10")
        assert e.message == "Invalid dimension: 2o"
        assert (e.index, e.length) == (0, 2)

    def test_unclosed_original_value(self):
        e = _error("20 x 10 = 4 [5 / 16 x 10")
        assert e.message == "Invalid dimension: 4 [5"
        assert e.code == ParseErrorCode.INVALID_DIMENSION

    def test_empty_span_between_dividers(self):
        e = _error("20 x 10 = 4 / / 16 x 10")
        assert e.code == ParseErrorCode.INVALID_DIMENSION

    def test_missing_horizontal_spans(self):
        text = "20 x 10 = 4 / 16 x "
        e = _error(text)
        assert e.message == "Invalid formula (expecting horizontal spans)"
        assert e.code == ParseErrorCode.MISSING_SPANS
        assert e.index == len(text)

    def test_error_input_is_user_text(self):
        text = "20 x 10 = - / abc x 10"
        e = _error(text)
        assert e.input == text
        assert text[e.index:e.index + e.length] == "abc"


class TestBoService:

    def test_empty_input(self, bo):
        for text in (None, "", "   "):
            parsed = bo.parse_formula(text)
            assert parsed.result is None
            assert parsed.error is None

    def test_error_is_returned_not_raised(self, bo):
        parsed = bo.parse_formula("20 x 10 = 5 // 10 / 15")
        assert parsed.result is None
        assert parsed.error.message == "Odd number of '//' in formula"
        assert not parsed.is_valid

    def test_result(self, bo):
        parsed = bo.parse_formula("mm 20 x 10 = 4 // 10 // 6 x 2 // 7 // 3")
        assert parsed.error is None
        assert parsed.result.type == "BO"
