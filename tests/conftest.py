from __future__ import annotations

"""
pytest 全局配置：将项目根目录加入 sys.path，确保 `from pdflayout...` 可被导入；
并提供确定性的度量器、连字拆分器与记录型渲染器。
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from pdflayout.components import TextStyle  # noqa: E402
from pdflayout.processors import LayoutContext  # noqa: E402


class FixedWidthMeasurer:
    """每个字符固定宽度（mm），可按字符单独覆盖。"""

    def __init__(self, unit: float = 1.0, overrides: Optional[Dict[str, float]] = None) -> None:
        self.unit = unit
        self.overrides = dict(overrides or {})

    def char_width(self, style: TextStyle, char: str) -> float:
        return self.overrides.get(char, self.unit)


class DictSplitter:
    """按预置词表拆分，未登记的单词不拆分。"""

    def __init__(self, table: Dict[str, List[str]]) -> None:
        self.table = table

    def split(self, word: str) -> List[str]:
        return list(self.table.get(word, [word]))


class RecordingRenderer:
    """记录所有绘制调用，不产生输出。"""

    def __init__(self) -> None:
        self.images: list = []
        self.spans: list = []

    def draw_image(self, content, position, scale, rotation, dpi=None) -> None:
        self.images.append((content, position, scale, rotation, dpi))

    def draw_spans(self, spans, position) -> None:
        self.spans.append((list(spans), position))


@pytest.fixture
def measurer() -> FixedWidthMeasurer:
    return FixedWidthMeasurer()


@pytest.fixture
def context(measurer) -> LayoutContext:
    return LayoutContext(measurer=measurer)


@pytest.fixture
def hyphen_context(measurer) -> LayoutContext:
    splitter = DictSplitter(
        {
            "hyphenation": ["hy", "phen", "ation"],
            "typesetting": ["type", "set", "ting"],
        }
    )
    return LayoutContext(measurer=measurer, splitter=splitter)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
