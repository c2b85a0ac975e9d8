"""
文件路径：pdflayout/__init__.py

pdflayout：文档文本排版与元素放置引擎。

- 文本：StyledRun -> prepare（分片）-> wrap（断行）-> finalize（行还原）；
- 图片：尺寸 + 缩放 + 旋转 -> 包围盒 -> 对齐 -> 绘制位置；
- 渲染：通过 Area 把绘制调用交给 ReportLab / Pillow 渲染器。
"""

from .components import (
    Alignment,
    Area,
    ImageDecodeError,
    ImageFormatError,
    ImageLoadError,
    ImageOpenError,
    Position,
    ReportLabMeasurer,
    RenderResult,
    Rotation,
    Scale,
    Size,
    StyledRun,
    TextStyle,
    bounding_box_offset_and_size,
    configure_logging,
)
from .processors import (
    Fragment,
    Image,
    LayoutContext,
    Paragraph,
    PyphenSplitter,
    finalize,
    prepare,
    wrap,
    wrap_text_lines,
)

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "Area",
    "ImageLoadError",
    "ImageOpenError",
    "ImageFormatError",
    "ImageDecodeError",
    "Position",
    "ReportLabMeasurer",
    "RenderResult",
    "Rotation",
    "Scale",
    "Size",
    "StyledRun",
    "TextStyle",
    "bounding_box_offset_and_size",
    "configure_logging",
    "Fragment",
    "Image",
    "LayoutContext",
    "Paragraph",
    "PyphenSplitter",
    "finalize",
    "prepare",
    "wrap",
    "wrap_text_lines",
]
