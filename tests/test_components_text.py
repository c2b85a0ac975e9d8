from __future__ import annotations

import math

from pdflayout.components import (
    ReportLabMeasurer,
    StyledRun,
    TextStyle,
    pt_to_mm,
    runs_width,
    string_width,
    to_layout_units,
)


class TestLayoutUnits:
    def test_scale_by_thousand(self):
        assert to_layout_units(12.5) == 12500

    def test_truncates_toward_zero(self):
        assert to_layout_units(1.0009) == 1000
        assert to_layout_units(0.0) == 0


class TestReportLabMeasurer:
    def test_helvetica_glyph_width_in_mm(self):
        # Helvetica: 'a' = 556/1000 em，10pt -> 5.56pt
        w = ReportLabMeasurer().char_width(TextStyle("Helvetica", 10), "a")
        assert math.isclose(w, pt_to_mm(5.56), rel_tol=1e-9)

    def test_deterministic_and_non_negative(self):
        m = ReportLabMeasurer()
        style = TextStyle("Times-Roman", 11)
        first = [m.char_width(style, ch) for ch in "Quick -"]
        second = [m.char_width(style, ch) for ch in "Quick -"]
        assert first == second
        assert all(w >= 0 for w in first)

    def test_string_width_sums_characters(self):
        m = ReportLabMeasurer()
        style = TextStyle("Courier", 12)
        # Courier 等宽：每字符 600/1000 em
        assert math.isclose(string_width(m, style, "abcd"), 4 * pt_to_mm(7.2), rel_tol=1e-9)

    def test_runs_width_respects_each_style(self):
        m = ReportLabMeasurer()
        runs = [StyledRun("ab", TextStyle("Courier", 10)), StyledRun("ab", TextStyle("Courier", 20))]
        assert math.isclose(runs_width(m, runs), pt_to_mm(2 * 6.0 + 2 * 12.0), rel_tol=1e-9)
