"""
文件路径：pdflayout/processors/engines/__init__.py

说明：渲染器实现：`reportlab.py`（矢量 PDF）、`raster.py`（Pillow 位图，可经 PyMuPDF 导出 PDF）。
"""

from .reportlab import PAGE_SIZE_A4, ReportLabRenderer
from .raster import RasterRenderer

__all__ = ["PAGE_SIZE_A4", "ReportLabRenderer", "RasterRenderer"]
