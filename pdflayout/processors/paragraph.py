"""
文件路径：pdflayout/processors/paragraph.py

说明：段落元素，按区域宽度自动换行并逐行绘制。

- 行高默认取行内最大字号 * STYLE_LINE_HEIGHT_RATIO，可用 with_line_height 覆盖（mm）；
- 每行按对齐方式计算水平偏移，基线位于行顶下方 最大字号 * STYLE_ASCENT_RATIO 处；
- 不做分页：段落总是一次绘制完成（has_more 恒为 False）。
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from ..components import (
    Alignment,
    Area,
    ErrorHandler,
    Position,
    RenderResult,
    Size,
    StyledRun,
    alignment_offset,
    get_logger,
    pt_to_mm,
    runs_width,
)
from ..variables import (
    ERR_DATA_INVALID,
    STYLE_ASCENT_RATIO,
    STYLE_LINE_HEIGHT_RATIO,
)
from .layout import LayoutContext, wrap_text_lines


logger = get_logger(__name__)


@dataclass(frozen=True)
class Paragraph:
    """由若干 StyledRun 组成的段落。"""

    runs: Tuple[StyledRun, ...]
    alignment: Alignment = Alignment.LEFT
    line_height: Optional[float] = None
    context: LayoutContext = field(default_factory=LayoutContext)

    @classmethod
    def from_runs(cls, runs: Iterable[StyledRun], context: Optional[LayoutContext] = None) -> "Paragraph":
        if context is None:
            return cls(runs=tuple(runs))
        return cls(runs=tuple(runs), context=context)

    def with_alignment(self, alignment: Alignment) -> "Paragraph":
        return replace(self, alignment=alignment)

    def with_line_height(self, line_height: float) -> "Paragraph":
        if line_height <= 0:
            raise ValueError(ErrorHandler.format_error(ERR_DATA_INVALID, f"行高必须为正数：{line_height}"))
        return replace(self, line_height=float(line_height))

    def _max_font_mm(self, spans: Sequence[StyledRun]) -> float:
        sizes = [span.style.font_size for span in spans]
        return pt_to_mm(max(sizes)) if sizes else 0.0

    def lines(self, width: float) -> List[List[StyledRun]]:
        """按宽度（mm）断行后的每行文本片段。"""
        return wrap_text_lines(self.context, self.runs, width)

    def render(self, area: Area) -> RenderResult:
        """在区域内逐行绘制，返回占用尺寸（区域宽度 x 累计行高）。"""
        top = 0.0
        lines = self.lines(area.width)
        for spans in lines:
            font_mm = self._max_font_mm(spans)
            height = self.line_height if self.line_height is not None else font_mm * STYLE_LINE_HEIGHT_RATIO
            width = runs_width(self.context.measurer, spans)
            x = alignment_offset(self.alignment, width, area.width).x
            area.print_spans(spans, Position(x, top + font_mm * STYLE_ASCENT_RATIO))
            top += height
        logger.debug("段落绘制完成：%s 行，高度 %.2f mm", len(lines), top)
        return RenderResult(size=Size(area.width, top))


__all__ = ["Paragraph"]
