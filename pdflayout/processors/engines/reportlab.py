"""
文件路径：pdflayout/processors/engines/reportlab.py

说明：ReportLab 矢量渲染器，把区域绘制调用写入 PDF 画布。

坐标换算：调用方使用页面左上原点、y 向下、单位 mm；ReportLab 为左下原点、单位 pt。
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from PIL import Image as PILImage
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ...components import (
    FileHandler,
    Position,
    Rotation,
    Scale,
    Size,
    StyledRun,
    get_logger,
    mm_to_pt,
    pixels_to_mm,
)
from ...variables import CONST_IMAGE_DPI_DEFAULT


logger = get_logger(__name__)

# A4（mm）
PAGE_SIZE_A4 = Size(210.0, 297.0)


class ReportLabRenderer:
    """ReportLab 画布渲染器。

    用法示例：
        renderer = ReportLabRenderer(Path("output/demo.pdf"))
        area = Area(renderer, origin=Position(20, 20), size=Size(170, 257))
        Paragraph.from_runs([StyledRun("Hello world")]).render(area)
        renderer.save()
    """

    def __init__(self, output_path: Union[str, Path], page_size: Size = PAGE_SIZE_A4) -> None:
        self.output_path = Path(output_path)
        self.page_size = page_size
        FileHandler.ensure_parent_writable(self.output_path)
        self._canvas = canvas.Canvas(
            str(self.output_path),
            pagesize=(mm_to_pt(page_size.width), mm_to_pt(page_size.height)),
        )

    def _to_pdf(self, position: Position) -> Tuple[float, float]:
        """页面坐标（左上原点，mm）-> ReportLab 坐标（左下原点，pt）。"""
        return mm_to_pt(position.x), mm_to_pt(self.page_size.height - position.y)

    def draw_image(
        self,
        content: PILImage.Image,
        position: Position,
        scale: Scale,
        rotation: Rotation,
        dpi: Optional[float] = None,
    ) -> None:
        """以 position 为图片左下角，按 rotation 旋转后绘制。"""
        use_dpi = dpi if dpi is not None else CONST_IMAGE_DPI_DEFAULT
        px_w, px_h = content.size
        w_pt = mm_to_pt(pixels_to_mm(px_w, use_dpi, scale.x))
        h_pt = mm_to_pt(pixels_to_mm(px_h, use_dpi, scale.y))
        x, y = self._to_pdf(position)

        c = self._canvas
        c.saveState()
        c.translate(x, y)
        if rotation.degrees:
            c.rotate(rotation.degrees)
        c.drawImage(ImageReader(content), 0, 0, width=w_pt, height=h_pt, mask="auto")
        c.restoreState()

    def draw_spans(self, spans: Sequence[StyledRun], position: Position) -> None:
        """以 position 为基线起点，按片段样式依次输出文本。"""
        x, y = self._to_pdf(position)
        text = self._canvas.beginText(x, y)
        for span in spans:
            text.setFont(span.style.font_name, span.style.font_size)
            text.setFillColorRGB(*(v / 255.0 for v in span.style.color_rgb))
            text.textOut(span.text)
        self._canvas.drawText(text)

    def show_page(self) -> None:
        """结束当前页并开始新的一页。"""
        self._canvas.showPage()

    def save(self) -> Path:
        self._canvas.save()
        try:
            size_kb = self.output_path.stat().st_size / 1024.0
            logger.info("ReportLab 输出完成：%s (%.1f KB)", self.output_path, size_kb)
        except OSError as exc:
            logger.warning("无法读取输出文件大小：%s", exc)
        return self.output_path


__all__ = ["PAGE_SIZE_A4", "ReportLabRenderer"]
