"""
文件路径：pdflayout/components/fonts.py

说明：基于 ReportLab 字体度量的字符宽度来源，以及 TTF/OTF 字体注册。

- 度量使用 `pdfmetrics.stringWidth`（单位 pt），换算为 mm 后返回；
- 内置标准字体（Helvetica/Times-Roman/Courier 等）无需注册即可度量；
- 自定义字体需先调用 `register_ttf_font` 注册到 ReportLab 全局字体表。
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .coords import pt_to_mm
from .logging import get_logger
from .text import TextStyle


logger = get_logger(__name__)


@lru_cache(maxsize=4096)
def _glyph_width_pt(char: str, font_name: str, font_size: float) -> float:
    return pdfmetrics.stringWidth(char, font_name, font_size)


class ReportLabMeasurer:
    """以 ReportLab 字体表为度量源的 TextMeasurer 实现。

    只读使用 ReportLab 全局字体表，可在多个排版过程间共享。
    """

    def char_width(self, style: TextStyle, char: str) -> float:
        return pt_to_mm(_glyph_width_pt(char, style.font_name, float(style.font_size)))


def register_ttf_font(path: Path, face_name: Optional[str] = None) -> Optional[str]:
    """注册 TTF/OTF 字体到 ReportLab，返回可在 TextStyle 中使用的字体名。

    参数：
        path: 字体文件路径（仅接受 .ttf/.otf）。
        face_name: 注册名；默认使用文件名 stem。
    返回：
        注册成功返回字体名；文件类型不符或注册失败返回 None。
    """
    p = Path(path)
    if p.suffix.lower() not in {".ttf", ".otf"}:
        logger.info("忽略非 TTF/OTF 字体：%s", p)
        return None
    name = face_name or p.stem
    try:
        pdfmetrics.registerFont(TTFont(name, str(p)))
    except Exception as exc:  # noqa: BLE001
        logger.warning("注册字体失败：%s -> %s，原因：%s", name, p, exc)
        return None
    _glyph_width_pt.cache_clear()
    logger.info("已注册字体：%s -> %s", name, p)
    return name


__all__ = ["ReportLabMeasurer", "register_ttf_font"]
