"""
文件路径：pdflayout/components/coords.py

说明：坐标与几何相关的值类型及计算函数。

坐标约定：
- 长度单位为毫米（mm）。
- 区域内坐标以区域左上角为原点，x 向右、y 向下（即排版流方向）；
  由渲染器负责换算为 PDF 左下原点的页面坐标。
- 旋转角度为正时，内容在页面上按 ReportLab / Pillow 的正方向旋转（逆时针）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from ..variables import (
    CONST_MM_PER_INCH,
    CONST_PT_PER_INCH,
    CONST_ROTATION_MIN,
    CONST_ROTATION_MAX,
    ERR_DATA_INVALID,
    ERR_DPI_INVALID,
    ERR_ROTATION_OUT_OF_RANGE,
)
from .logging import ErrorHandler


# =============================
# 值类型
# =============================
@dataclass(frozen=True)
class Position:
    """二维位置（mm），支持与另一个 Position 相加实现平移。"""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Size:
    """宽高（mm），始终非负。"""

    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                ErrorHandler.format_error(ERR_DATA_INVALID, f"尺寸不能为负：({self.width}, {self.height})")
            )

    def as_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class Scale:
    """x / y 方向独立的缩放倍数，默认 1:1。"""

    x: float = 1.0
    y: float = 1.0


@dataclass(frozen=True)
class Rotation:
    """旋转角度（度），构造时校验必须位于 [-180, 180] 闭区间。

    超出范围的角度直接拒绝，不做归一化。
    """

    degrees: float = 0.0

    def __post_init__(self) -> None:
        d = float(self.degrees)
        if math.isnan(d) or d < CONST_ROTATION_MIN or d > CONST_ROTATION_MAX:
            raise ValueError(
                ErrorHandler.format_error(
                    ERR_ROTATION_OUT_OF_RANGE,
                    f"旋转角度必须位于 [{CONST_ROTATION_MIN:g}, {CONST_ROTATION_MAX:g}]：{self.degrees}",
                )
            )

    @property
    def radians(self) -> float:
        return math.radians(self.degrees)


class Alignment(Enum):
    """未指定绝对位置时的水平对齐方式。"""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


PositionLike = Union[Position, Tuple[float, float]]
ScaleLike = Union[Scale, Tuple[float, float], float]
RotationLike = Union[Rotation, float, int]


def as_position(value: PositionLike) -> Position:
    if isinstance(value, Position):
        return value
    x, y = value
    return Position(float(x), float(y))


def as_scale(value: ScaleLike) -> Scale:
    if isinstance(value, Scale):
        return value
    if isinstance(value, (int, float)):
        return Scale(float(value), float(value))
    x, y = value
    return Scale(float(x), float(y))


def as_rotation(value: RotationLike) -> Rotation:
    if isinstance(value, Rotation):
        return value
    return Rotation(float(value))


# =============================
# 单位换算
# =============================
def mm_to_pt(value: float) -> float:
    """毫米 -> 磅（1 in = 25.4 mm = 72 pt）。"""
    return value * CONST_PT_PER_INCH / CONST_MM_PER_INCH


def pt_to_mm(value: float) -> float:
    """磅 -> 毫米。"""
    return value * CONST_MM_PER_INCH / CONST_PT_PER_INCH


def pixels_to_mm(pixels: float, dpi: float, scale: float = 1.0) -> float:
    """按 `25.4 * (scale * pixels) / dpi` 将像素换算为毫米。

    异常：
        ValueError: dpi 非正。
    """
    if dpi <= 0:
        raise ValueError(ErrorHandler.format_error(ERR_DPI_INVALID, f"DPI 必须为正数：{dpi}"))
    return CONST_MM_PER_INCH * ((scale * pixels) / dpi)


# =============================
# 旋转包围盒
# =============================
class RotationQuadrant(Enum):
    """旋转角度所在区间，每个区间的包围盒原点偏移角点不同。"""

    NONE = "d == 0"
    FIRST = "0 < d <= 90"
    SECOND = "90 < d <= 180"
    FOURTH = "-90 < d < 0"
    THIRD = "-180 <= d <= -90"


def rotation_quadrant(rotation: Rotation) -> RotationQuadrant:
    """按半开区间判定角度所属象限；边界 0 / 90 / 180 / -90 的归属见 RotationQuadrant。"""
    d = rotation.degrees
    if d == 0:
        return RotationQuadrant.NONE
    if 0 < d <= 90:
        return RotationQuadrant.FIRST
    if 90 < d <= 180:
        return RotationQuadrant.SECOND
    if -90 < d < 0:
        return RotationQuadrant.FOURTH
    return RotationQuadrant.THIRD


def bounding_box_offset_and_size(rotation: Rotation, size: Size) -> Tuple[Position, Size]:
    """计算矩形绕左下角旋转后的轴对齐包围盒尺寸，以及矩形左下角在包围盒中的偏移。

    参数：
        rotation: 旋转角度。
        size: 原矩形宽高。
    返回：
        (offset, bounding_size)。offset 自包围盒左上角量起，x 向右、y 向下。
    """
    w, h = size.width, size.height
    quadrant = rotation_quadrant(rotation)

    if quadrant is RotationQuadrant.NONE:
        return Position(0.0, h), Size(w, h)

    if quadrant is RotationQuadrant.FIRST:
        theta = rotation.radians
        ct, st = math.cos(theta), math.sin(theta)
        alpha = math.radians(180.0 - (rotation.degrees + 90.0))
        bb_w, bb_h = h * st + w * ct, w * st + h * ct
        return Position(h * math.cos(alpha), bb_h), Size(bb_w, bb_h)

    if quadrant is RotationQuadrant.SECOND:
        alpha = math.radians(rotation.degrees - 90.0)
        ca, sa = math.cos(alpha), math.sin(alpha)
        bb_w, bb_h = w * sa + h * ca, w * ca + h * sa
        return Position(bb_w, w * ca), Size(bb_w, bb_h)

    if quadrant is RotationQuadrant.FOURTH:
        theta = abs(rotation.radians)
        ct, st = math.cos(theta), math.sin(theta)
        bb_w, bb_h = h * st + w * ct, h * ct + w * st
        return Position(0.0, h * ct), Size(bb_w, bb_h)

    # THIRD：-180 <= d <= -90
    alpha = math.radians(180.0 + rotation.degrees)
    ca, sa = math.cos(alpha), math.sin(alpha)
    bb_w, bb_h = h * sa + w * ca, h * ca + w * sa
    return Position(w * ca, 0.0), Size(bb_w, bb_h)


def alignment_offset(alignment: Alignment, width: float, max_width: float) -> Position:
    """按对齐方式计算元素在可用宽度内的水平偏移。"""
    if alignment is Alignment.CENTER:
        horizontal = (max_width - width) / 2.0
    elif alignment is Alignment.RIGHT:
        horizontal = max_width - width
    else:
        horizontal = 0.0
    return Position(horizontal, 0.0)


__all__ = [
    "Position",
    "Size",
    "Scale",
    "Rotation",
    "Alignment",
    "RotationQuadrant",
    "as_position",
    "as_scale",
    "as_rotation",
    "mm_to_pt",
    "pt_to_mm",
    "pixels_to_mm",
    "rotation_quadrant",
    "bounding_box_offset_and_size",
    "alignment_offset",
]
