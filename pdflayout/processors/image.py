"""
文件路径：pdflayout/processors/image.py

说明：图片元素的尺寸计算与放置。

放置流程：
1) 按像素、DPI 与缩放计算图片尺寸（mm）；
2) 计算旋转后的包围盒尺寸与原点偏移；
3) 指定绝对位置时直接使用；否则按对齐方式在可用宽度内计算水平偏移，并把包围盒尺寸作为占用尺寸上报；
4) 最终绘制位置 = 绝对/对齐位置 + 包围盒偏移，向区域发出一次绘制调用。

图片要么完整放下、要么不放，不支持拆分为多块渲染（has_more 恒为 False）。
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from PIL import Image as PILImage

from ..components import (
    Alignment,
    Area,
    ErrorHandler,
    Position,
    RenderResult,
    Rotation,
    Scale,
    Size,
    alignment_offset,
    as_position,
    as_rotation,
    as_scale,
    bounding_box_offset_and_size,
    get_logger,
    load_image_from_path,
    load_image_from_stream,
    pixels_to_mm,
)
from ..components.coords import PositionLike, RotationLike, ScaleLike
from ..variables import CONST_IMAGE_DPI_DEFAULT, ERR_DPI_INVALID


logger = get_logger(__name__)


@dataclass(frozen=True)
class Image:
    """可嵌入页面的图片元素。

    所有 with_* 方法都返回新的 Image，原对象保持不变，便于链式配置：

        image = (
            Image.from_path("photo.png")
            .with_alignment(Alignment.CENTER)
            .with_scale((0.5, 2))
            .with_rotation(30)
        )

    属性：
        data: 已解码的 Pillow 图片。
        alignment: 未指定绝对位置时使用的水平对齐方式。
        position: 区域内的绝对位置；为 None 时按 alignment 放置。
        scale: 缩放，默认 1:1。
        rotation: 绕左下角的旋转角度，正角度为逆时针（与 ReportLab、Pillow 一致）。
        dpi: DPI 覆盖值；为 None 时按 300 DPI 计算尺寸。
    """

    data: PILImage.Image
    alignment: Alignment = Alignment.LEFT
    position: Optional[Position] = None
    scale: Scale = field(default_factory=Scale)
    rotation: Rotation = field(default_factory=Rotation)
    dpi: Optional[float] = None

    # -----------------------------
    # 构造
    # -----------------------------
    @classmethod
    def from_pil_image(cls, data: PILImage.Image) -> "Image":
        return cls(data=data)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Image":
        """从文件路径加载图片；失败时抛出 ImageOpenError / ImageFormatError / ImageDecodeError。"""
        return cls(data=load_image_from_path(path))

    @classmethod
    def from_stream(cls, stream: BinaryIO, name: str = "<stream>") -> "Image":
        """从二进制流加载图片；失败时抛出 ImageOpenError / ImageFormatError / ImageDecodeError。"""
        return cls(data=load_image_from_stream(stream, name))

    # -----------------------------
    # 链式配置
    # -----------------------------
    def with_position(self, position: PositionLike) -> "Image":
        return replace(self, position=as_position(position))

    def with_scale(self, scale: ScaleLike) -> "Image":
        return replace(self, scale=as_scale(scale))

    def with_alignment(self, alignment: Alignment) -> "Image":
        return replace(self, alignment=alignment)

    def with_rotation(self, rotation: RotationLike) -> "Image":
        """设置旋转角度（度，[-180, 180]），超出范围抛出 ValueError。"""
        return replace(self, rotation=as_rotation(rotation))

    def with_dpi(self, dpi: float) -> "Image":
        if dpi <= 0:
            raise ValueError(ErrorHandler.format_error(ERR_DPI_INVALID, f"DPI 必须为正数：{dpi}"))
        return replace(self, dpi=float(dpi))

    # -----------------------------
    # 尺寸与放置
    # -----------------------------
    def size(self) -> Size:
        """按 DPI、像素数与缩放估算图片尺寸（mm）。"""
        dpi = self.dpi if self.dpi is not None else CONST_IMAGE_DPI_DEFAULT
        px_width, px_height = self.data.size
        return Size(
            pixels_to_mm(px_width, dpi, self.scale.x),
            pixels_to_mm(px_height, dpi, self.scale.y),
        )

    def placement(self, available_width: float) -> Tuple[Position, RenderResult]:
        """计算区域内的最终绘制位置与渲染结果，不产生绘制副作用。"""
        true_size = self.size()
        bb_origin, bb_size = bounding_box_offset_and_size(self.rotation, true_size)

        if self.position is not None:
            position = self.position
            result = RenderResult()
        else:
            position = alignment_offset(self.alignment, bb_size.width, available_width)
            result = RenderResult(size=bb_size)

        # 旋转后原点角不再位于 (0, 0)，用包围盒偏移修正
        return position + bb_origin, result

    def render(self, area: Area) -> RenderResult:
        """在区域内绘制图片，恰好发出一次绘制调用。"""
        position, result = self.placement(area.width)
        logger.debug(
            "放置图片：size=%s rotation=%s position=%s bbox=%s",
            self.data.size,
            self.rotation.degrees,
            position,
            result.size,
        )
        area.add_image(self.data, position, self.scale, self.rotation, self.dpi)
        return result


__all__ = ["Image"]
