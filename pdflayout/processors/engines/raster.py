"""
文件路径：pdflayout/processors/engines/raster.py

说明：Pillow 光栅渲染器；可导出 PNG，或由 PyMuPDF 贴入单页 PDF。
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import fitz  # PyMuPDF
from PIL import Image as PILImage
from PIL import ImageDraw, ImageFont

from ...components import (
    FileHandler,
    Position,
    Rotation,
    Scale,
    Size,
    StyledRun,
    TextStyle,
    bounding_box_offset_and_size,
    get_logger,
    mm_to_pt,
    pixels_to_mm,
    pt_to_mm,
)
from ...variables import CONST_IMAGE_DPI_DEFAULT, CONST_MM_PER_INCH, CONST_RASTER_DPI_DEFAULT
from .reportlab import PAGE_SIZE_A4


logger = get_logger(__name__)


class RasterRenderer:
    """在 Pillow RGB 画布上绘制的渲染器。

    参数：
        page_size: 页面尺寸（mm）。
        dpi: 画布分辨率。
        font_files: 字体名 -> TTF/OTF 路径；未登记的字体使用 Pillow 默认字体。
    """

    def __init__(
        self,
        page_size: Size = PAGE_SIZE_A4,
        dpi: float = CONST_RASTER_DPI_DEFAULT,
        font_files: Optional[Dict[str, Path]] = None,
    ) -> None:
        self.page_size = page_size
        self.dpi = float(dpi)
        self.font_files = dict(font_files or {})
        self.page = PILImage.new("RGB", (self._px(page_size.width), self._px(page_size.height)), "white")
        self._draw = ImageDraw.Draw(self.page)

    def _px(self, length_mm: float) -> int:
        return int(round(length_mm / CONST_MM_PER_INCH * self.dpi))

    def _font(self, style: TextStyle):
        size_px = max(1, self._px(pt_to_mm(style.font_size)))
        font_file = self.font_files.get(style.font_name)
        if font_file is not None:
            try:
                return ImageFont.truetype(str(font_file), size_px)
            except OSError as exc:
                logger.warning("加载字体失败，使用默认字体：%s -> %s（%s）", style.font_name, font_file, exc)
        return ImageFont.load_default(size=size_px)

    def draw_image(
        self,
        content: PILImage.Image,
        position: Position,
        scale: Scale,
        rotation: Rotation,
        dpi: Optional[float] = None,
    ) -> None:
        """position 为图片左下角；旋转后按包围盒左上角贴图。"""
        use_dpi = dpi if dpi is not None else CONST_IMAGE_DPI_DEFAULT
        px_w, px_h = content.size
        size = Size(pixels_to_mm(px_w, use_dpi, scale.x), pixels_to_mm(px_h, use_dpi, scale.y))
        offset, _ = bounding_box_offset_and_size(rotation, size)

        img = content.convert("RGBA").resize((max(1, self._px(size.width)), max(1, self._px(size.height))))
        if rotation.degrees:
            # Pillow 的正角度为逆时针，与包围盒偏移的约定一致
            img = img.rotate(rotation.degrees, resample=PILImage.BICUBIC, expand=True)

        top_left = position - offset
        self.page.paste(img, (self._px(top_left.x), self._px(top_left.y)), img)

    def draw_spans(self, spans: Sequence[StyledRun], position: Position) -> None:
        """以 position 为基线起点逐段绘制文本。"""
        x = float(self._px(position.x))
        y = self._px(position.y)
        for span in spans:
            font = self._font(span.style)
            self._draw.text((x, y), span.text, font=font, fill=tuple(span.style.color_rgb), anchor="ls")
            x += self._draw.textlength(span.text, font=font)

    def save(self, output_path: Union[str, Path]) -> Path:
        """按后缀导出：.pdf 由 PyMuPDF 嵌入单页 PDF，其余交给 Pillow。"""
        out = Path(output_path)
        FileHandler.ensure_parent_writable(out)
        if out.suffix.lower() == ".pdf":
            buf = BytesIO()
            self.page.save(buf, format="PNG")
            doc = fitz.open()
            try:
                page = doc.new_page(width=mm_to_pt(self.page_size.width), height=mm_to_pt(self.page_size.height))
                page.insert_image(page.rect, stream=buf.getvalue(), keep_proportion=False)
                doc.save(str(out), deflate=True, garbage=4)
            finally:
                doc.close()
        else:
            self.page.save(out)
        try:
            size_kb = out.stat().st_size / 1024.0
            logger.info("Raster 输出完成：%s (%.1f KB)", out, size_kb)
        except OSError as exc:
            logger.warning("无法读取输出文件大小：%s", exc)
        return out


__all__ = ["RasterRenderer"]
