"""
文件路径：pdflayout/processors/layout.py

说明：带样式文本的分片（prepare）、断行（wrap）与行还原（finalize）。

数据流：StyledRun 序列 -> prepare -> Fragment 序列 -> wrap -> 行 -> finalize -> 每行的 StyledRun 序列。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from ..components import (
    ErrorHandler,
    ReportLabMeasurer,
    StyledRun,
    TextMeasurer,
    TextStyle,
    get_logger,
    runs_width,
    to_layout_units,
)
from ..variables import CONST_HYPHEN_CHAR, CONST_WHITESPACE_CHAR, ERR_DATA_INVALID
from .hyphenation import Splitter, split_word
from .linebreak import line_width, wrap_optimal_fit


logger = get_logger(__name__)


@dataclass(frozen=True)
class LayoutContext:
    """排版上下文：字体度量源（必需）与连字拆分策略（可选）。

    两者均按只读服务使用，可在多次排版间共享。
    """

    measurer: TextMeasurer = field(default_factory=ReportLabMeasurer)
    splitter: Optional[Splitter] = None


@dataclass(frozen=True)
class Fragment:
    """不可再分的排版单元：其中的文本永远不会被断到两行。

    属性：
        runs: 一个或多个 (文本, 样式) 片段。
        add_whitespace: 非行尾时其后跟一个空格。
        add_hyphen: 作为行尾时其后插入连字符。
    """

    runs: Tuple[StyledRun, ...]
    add_whitespace: bool = False
    add_hyphen: bool = False
    measurer: Optional[TextMeasurer] = field(default=None, repr=False, compare=False)

    @property
    def style(self) -> TextStyle:
        # 分隔符按最后一个片段的样式度量
        return self.runs[-1].style if self.runs else TextStyle()

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)

    def _measurer(self) -> TextMeasurer:
        return self.measurer if self.measurer is not None else ReportLabMeasurer()

    def _char_width(self, char: str) -> int:
        return to_layout_units(self._measurer().char_width(self.style, char))

    def width(self) -> int:
        return to_layout_units(runs_width(self._measurer(), self.runs))

    def whitespace_width(self) -> int:
        return self._char_width(CONST_WHITESPACE_CHAR) if self.add_whitespace else 0

    def penalty_width(self) -> int:
        return self._char_width(CONST_HYPHEN_CHAR) if self.add_hyphen else 0


def prepare(context: LayoutContext, runs: Iterable[StyledRun]) -> List[Fragment]:
    """把有序的 StyledRun 切分为 Fragment 序列。

    - 仅以空格切词（制表符/换行由上游归一化处理）；
    - 每个单词经 Splitter 拆为若干段，每段一个 Fragment；
    - 单词最后一段且不是 run 的最后一个词时 add_whitespace=True；
    - 除单词最后一段外 add_hyphen=True；
    - 两个标志都为 False 的 Fragment 不能作为行尾，与其后继合并。
    - 末尾没有文本也没有标志的 Fragment（输入以空格结尾）直接丢弃。
    """
    fragments: List[Fragment] = []
    for run in runs:
        words = run.text.split(CONST_WHITESPACE_CHAR)
        for w_idx, word in enumerate(words):
            is_last_word = w_idx + 1 == len(words)
            segments = split_word(context.splitter, word)
            for s_idx, segment in enumerate(segments):
                is_last_segment = s_idx + 1 == len(segments)
                fragments.append(
                    Fragment(
                        runs=(StyledRun(segment, run.style),),
                        add_whitespace=not is_last_word and is_last_segment,
                        add_hyphen=not is_last_segment,
                        measurer=context.measurer,
                    )
                )

    merged: List[Fragment] = []
    for fragment in fragments:
        if merged and not merged[-1].add_whitespace and not merged[-1].add_hyphen:
            last = merged[-1]
            merged[-1] = replace(
                last,
                runs=last.runs + fragment.runs,
                add_whitespace=fragment.add_whitespace,
                add_hyphen=fragment.add_hyphen,
            )
        else:
            merged.append(fragment)

    # 以空格结尾的输入会留下空的收尾 Fragment，不单独成行
    if len(merged) > 1 and not merged[-1].text and not (merged[-1].add_whitespace or merged[-1].add_hyphen):
        merged.pop()

    logger.debug("分片完成：%s 个原始片段 -> %s 个 Fragment", len(fragments), len(merged))
    return merged


def wrap(fragments: Sequence[Fragment], width: float) -> List[Sequence[Fragment]]:
    """按目标宽度（mm）断行。

    异常：
        ValueError: width 为负数或 NaN。
    """
    if math.isnan(width) or width < 0:
        raise ValueError(ErrorHandler.format_error(ERR_DATA_INVALID, f"行宽必须为非负数：{width}"))
    target = to_layout_units(width)
    lines = wrap_optimal_fit(fragments, target)
    for line in lines:
        if len(line) == 1 and line_width(line) > target:
            logger.warning("片段宽度超过行宽，独占一行：%r（%s > %s）", line[0].text, line_width(line), target)
    logger.debug("断行完成：%s 个 Fragment -> %s 行（行宽 %.2f mm）", len(fragments), len(lines), width)
    return lines


def finalize(line: Sequence[Fragment]) -> List[StyledRun]:
    """把一行 Fragment 还原为带样式的文本片段，插入行内空格与行尾连字符。"""
    spans: List[StyledRun] = []
    for idx, fragment in enumerate(line):
        spans.extend(fragment.runs)

        if idx + 1 == len(line):
            suffix = CONST_HYPHEN_CHAR if fragment.add_hyphen else None
        elif fragment.add_whitespace:
            suffix = CONST_WHITESPACE_CHAR
        else:
            suffix = None

        if suffix is not None and spans:
            last = spans[-1]
            spans[-1] = StyledRun(last.text + suffix, last.style)
    return spans


def wrap_text_lines(
    context: LayoutContext,
    runs: Iterable[StyledRun],
    max_width: float,
) -> List[List[StyledRun]]:
    """prepare + wrap + finalize 的便捷组合，返回每行的 StyledRun 列表。"""
    return [finalize(line) for line in wrap(prepare(context, runs), max_width)]


__all__ = [
    "LayoutContext",
    "Fragment",
    "prepare",
    "wrap",
    "finalize",
    "wrap_text_lines",
]
