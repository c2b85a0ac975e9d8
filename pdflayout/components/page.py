"""
文件路径：pdflayout/components/page.py

说明：元素渲染时的可用区域（Area）、渲染结果（RenderResult）与渲染器接口。

Area 只负责把区域内坐标平移为页面坐标（均为左上原点、y 向下、单位 mm），
具体的 PDF/位图编码由渲染器实现（见 processors/engines）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence

from .coords import Position, Rotation, Scale, Size
from .text import StyledRun


class Renderer(Protocol):
    """外部绘制接口：每次调用完成一次绘制，坐标为页面坐标（左上原点，mm）。"""

    def draw_image(
        self,
        content: Any,
        position: Position,
        scale: Scale,
        rotation: Rotation,
        dpi: Optional[float] = None,
    ) -> None:
        ...

    def draw_spans(self, spans: Sequence[StyledRun], position: Position) -> None:
        ...


@dataclass(frozen=True)
class RenderResult:
    """渲染结果：元素占用的尺寸，以及是否还有未渲染的剩余内容。"""

    size: Size = field(default_factory=Size)
    has_more: bool = False


@dataclass(frozen=True)
class Area:
    """页面上的一块可用区域。

    属性：
        renderer: 实际执行绘制的渲染器。
        origin: 区域左上角在页面上的位置（mm）。
        size: 区域宽高（mm）。
    """

    renderer: Renderer
    origin: Position = field(default_factory=Position)
    size: Size = field(default_factory=Size)

    @property
    def width(self) -> float:
        return self.size.width

    def to_page(self, position: Position) -> Position:
        """区域内坐标 -> 页面坐标。"""
        return self.origin + position

    def add_image(
        self,
        content: Any,
        position: Position,
        scale: Scale,
        rotation: Rotation,
        dpi: Optional[float] = None,
    ) -> None:
        self.renderer.draw_image(content, self.to_page(position), scale, rotation, dpi)

    def print_spans(self, spans: Sequence[StyledRun], position: Position) -> None:
        """在区域内绘制一行带样式文本，position 为该行基线的起点。"""
        self.renderer.draw_spans(spans, self.to_page(position))

    def add_offset(self, offset: Position) -> "Area":
        """返回向右下平移并相应缩小后的子区域。"""
        return Area(
            renderer=self.renderer,
            origin=self.origin + offset,
            size=Size(
                max(0.0, self.size.width - offset.x),
                max(0.0, self.size.height - offset.y),
            ),
        )


__all__ = ["Renderer", "RenderResult", "Area"]
