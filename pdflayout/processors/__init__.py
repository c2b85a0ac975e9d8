"""
文件路径：pdflayout/processors/__init__.py

说明：
- hyphenation.py（单词连字拆分）
- linebreak.py（通用代价断行算法）
- layout.py（分片/断行/行还原）
- image.py / paragraph.py（可渲染元素）
- engines/{reportlab.py, raster.py}（渲染器）
"""

from .hyphenation import PyphenSplitter, Splitter, split_word
from .linebreak import WrapItem, line_width, wrap_optimal_fit
from .layout import Fragment, LayoutContext, finalize, prepare, wrap, wrap_text_lines
from .image import Image
from .paragraph import Paragraph

__all__ = [
    "Splitter",
    "PyphenSplitter",
    "split_word",
    "WrapItem",
    "line_width",
    "wrap_optimal_fit",
    "LayoutContext",
    "Fragment",
    "prepare",
    "wrap",
    "finalize",
    "wrap_text_lines",
    "Image",
    "Paragraph",
]
