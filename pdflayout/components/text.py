"""
文件路径：pdflayout/components/text.py

说明：带样式文本的数据类型与文本宽度度量约定。

- 度量器（TextMeasurer）返回单个字符在给定样式下的渲染宽度（mm），要求确定且非负；
- 断行代价计算使用整数排版单位：长度(mm) * 1000 后向零截断，避免浮点累加误差。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Tuple

from ..variables import (
    CONST_LAYOUT_UNIT_SCALE,
    STYLE_FONT_NAME,
    STYLE_FONT_SIZE_DEFAULT,
    STYLE_TEXT_COLOR_RGB,
)


@dataclass(frozen=True)
class TextStyle:
    """文本样式：字体名、字号（pt）与颜色。

    对断行算法而言样式是不透明的句柄，仅由度量器与渲染器解读。
    """

    font_name: str = STYLE_FONT_NAME
    font_size: float = STYLE_FONT_SIZE_DEFAULT
    color_rgb: Tuple[int, int, int] = STYLE_TEXT_COLOR_RGB


@dataclass(frozen=True)
class StyledRun:
    """不可变的 (文本, 样式) 对；多个 run 按顺序组成一段文本。"""

    text: str
    style: TextStyle = TextStyle()


class TextMeasurer(Protocol):
    """字体度量源：给出字符在某样式下的宽度（mm）。"""

    def char_width(self, style: TextStyle, char: str) -> float:
        ...


def string_width(measurer: TextMeasurer, style: TextStyle, text: str) -> float:
    """逐字符累加文本宽度（mm），不考虑字距调整。"""
    return sum(measurer.char_width(style, ch) for ch in text)


def runs_width(measurer: TextMeasurer, runs: Iterable[StyledRun]) -> float:
    """多个 run 的总宽度（mm）。"""
    return sum(string_width(measurer, run.style, run.text) for run in runs)


def to_layout_units(length: float) -> int:
    """长度(mm) -> 整数排版单位（* 1000，向零截断）。"""
    return int(length * CONST_LAYOUT_UNIT_SCALE)


__all__ = [
    "TextStyle",
    "StyledRun",
    "TextMeasurer",
    "string_width",
    "runs_width",
    "to_layout_units",
]
