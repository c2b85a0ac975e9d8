"""
文件路径：pdflayout/components/__init__.py

说明：
- 通用组件包入口，聚合导出各子模块的对外 API；
- 业务模块与测试统一使用 `from pdflayout.components import ...` 导入。
"""

from __future__ import annotations

# 聚合导出：子模块
from .logging import ErrorHandler, configure_logging, default_log_file, get_logger, reset_logging
from .coords import (
    Alignment,
    Position,
    Rotation,
    RotationQuadrant,
    Scale,
    Size,
    alignment_offset,
    as_position,
    as_rotation,
    as_scale,
    bounding_box_offset_and_size,
    mm_to_pt,
    pixels_to_mm,
    pt_to_mm,
    rotation_quadrant,
)
from .text import StyledRun, TextMeasurer, TextStyle, runs_width, string_width, to_layout_units
from .fonts import ReportLabMeasurer, register_ttf_font
from .io import (
    FileHandler,
    ImageDecodeError,
    ImageFormatError,
    ImageLoadError,
    ImageOpenError,
    load_image_from_path,
    load_image_from_stream,
)
from .page import Area, Renderer, RenderResult


# =============================
# 导出声明
# =============================
__all__ = [
    # 日志与错误
    "get_logger",
    "configure_logging",
    "reset_logging",
    "default_log_file",
    "ErrorHandler",
    # 坐标与几何
    "Position",
    "Size",
    "Scale",
    "Rotation",
    "RotationQuadrant",
    "Alignment",
    "as_position",
    "as_scale",
    "as_rotation",
    "mm_to_pt",
    "pt_to_mm",
    "pixels_to_mm",
    "rotation_quadrant",
    "bounding_box_offset_and_size",
    "alignment_offset",
    # 文本与度量
    "TextStyle",
    "StyledRun",
    "TextMeasurer",
    "string_width",
    "runs_width",
    "to_layout_units",
    "ReportLabMeasurer",
    "register_ttf_font",
    # 文件与图片解码
    "FileHandler",
    "ImageLoadError",
    "ImageOpenError",
    "ImageFormatError",
    "ImageDecodeError",
    "load_image_from_path",
    "load_image_from_stream",
    # 区域与渲染
    "Area",
    "Renderer",
    "RenderResult",
]
