from __future__ import annotations

import pytest

from pdflayout.components import Alignment, Area, Position, Size, StyledRun, TextStyle, pt_to_mm
from pdflayout.processors import Paragraph

STYLE = TextStyle("Helvetica", 10)


def _text(spans):
    return "".join(s.text for s in spans)


class TestParagraph:
    def test_lines_follow_area_width(self, context):
        para = Paragraph.from_runs([StyledRun("The quick brown fox", STYLE)], context)
        assert [_text(spans) for spans in para.lines(9.5)] == ["The quick", "brown fox"]

    def test_render_draws_each_line_below_the_previous(self, context, renderer):
        para = Paragraph.from_runs([StyledRun("The quick brown fox", STYLE)], context)
        area = Area(renderer, origin=Position(10, 20), size=Size(9.5, 100))
        result = para.render(area)

        assert [_text(spans) for spans, _ in renderer.spans] == ["The quick", "brown fox"]
        font_mm = pt_to_mm(10)
        first, second = (pos for _, pos in renderer.spans)
        assert first.x == pytest.approx(10)
        assert first.y == pytest.approx(20 + font_mm * 0.8)
        assert second.y - first.y == pytest.approx(font_mm * 1.2)
        assert result.size.height == pytest.approx(2 * font_mm * 1.2)
        assert result.size.width == pytest.approx(9.5)
        assert result.has_more is False

    def test_right_alignment_and_fixed_line_height(self, context, renderer):
        para = (
            Paragraph.from_runs([StyledRun("ab cdef", STYLE)], context)
            .with_alignment(Alignment.RIGHT)
            .with_line_height(5)
        )
        area = Area(renderer, size=Size(6, 50))
        result = para.render(area)
        # 两行："ab"（2 mm）与 "cdef"（4 mm），右对齐到 6 mm
        xs = [pos.x for _, pos in renderer.spans]
        assert xs == pytest.approx([4, 2])
        assert result.size.height == pytest.approx(10)

    def test_invalid_line_height(self, context):
        with pytest.raises(ValueError, match="4002"):
            Paragraph.from_runs([StyledRun("x", STYLE)], context).with_line_height(0)

    def test_trailing_space_does_not_add_a_line(self, context, renderer):
        para = Paragraph.from_runs([StyledRun("The quick ", STYLE)], context)
        result = para.render(Area(renderer, size=Size(9.5, 100)))
        assert [_text(spans) for spans, _ in renderer.spans] == ["The quick"]
        assert result.size.height == pytest.approx(pt_to_mm(10) * 1.2)
