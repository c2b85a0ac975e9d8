"""
文件路径：pdflayout/processors/linebreak.py

说明：基于代价的通用断行算法（optimal fit），与具体内容类型无关。

任何实现 WrapItem 接口的条目序列都可断行：
- width()：条目自身宽度；
- whitespace_width()：条目后的空白（glue），仅当条目不在行尾时计入；
- penalty_width()：条目后的连字符（penalty），仅当条目在行尾时计入。
宽度均为整数排版单位。
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, TypeVar

from ..variables import (
    CONST_LINE_PENALTY,
    CONST_HYPHEN_PENALTY,
    CONST_OVERFLOW_PENALTY,
)


class WrapItem(Protocol):
    def width(self) -> int:
        ...

    def whitespace_width(self) -> int:
        ...

    def penalty_width(self) -> int:
        ...


T = TypeVar("T", bound=WrapItem)


def line_width(items: Sequence[WrapItem]) -> int:
    """一行的占用宽度：条目宽度 + 行内空白 + 行尾连字符（不含行尾空白）。"""
    if not items:
        return 0
    total = sum(it.width() for it in items)
    total += sum(it.whitespace_width() for it in items[:-1])
    return total + items[-1].penalty_width()


def wrap_optimal_fit(
    items: Sequence[T],
    target_width: int,
    *,
    line_penalty: int = CONST_LINE_PENALTY,
    hyphen_penalty: int = CONST_HYPHEN_PENALTY,
    overflow_penalty: int = CONST_OVERFLOW_PENALTY,
) -> List[Sequence[T]]:
    """将条目序列划分为若干行，使总代价最小。

    约束：
    - 多于一个条目的行，占用宽度（含行尾连字符）不得超过 target_width；
    - 单个条目自身超宽时独占一行（强制放置），不会导致无解；
    - 条目顺序与内容保持不变，每个条目恰好出现在一行中。

    代价：非末行为 (target_width - 行宽)^2，末行不计空隙；每行另加 line_penalty，
    以连字符结尾加 hyphen_penalty，强制超宽行加 overflow_penalty。

    返回：
        按顺序排列的行切片列表。
    """
    n = len(items)
    if n == 0:
        return []

    widths = [it.width() for it in items]
    glues = [it.whitespace_width() for it in items]
    penalties = [it.penalty_width() for it in items]

    # best[j]：前 j 个条目排版的最小代价；starts[j]：对应最后一行的起始下标
    best: List[Optional[int]] = [0] + [None] * n
    starts: List[int] = [0] * (n + 1)

    for j in range(1, n + 1):
        last = j - 1
        is_final = j == n
        content = 0
        for i in range(last, -1, -1):
            content += widths[i] + (glues[i] if i < last else 0)
            total = content + penalties[last]
            single = i == last
            if total > target_width and not single:
                # 再向前扩展只会更宽
                break

            if total > target_width:
                cost = overflow_penalty
            elif is_final:
                cost = 0
            else:
                gap = target_width - total
                cost = gap * gap
            cost += line_penalty
            if penalties[last] > 0 and not is_final:
                cost += hyphen_penalty

            prev = best[i]
            if prev is None:
                continue
            candidate = prev + cost
            current = best[j]
            if current is None or candidate < current:
                best[j] = candidate
                starts[j] = i

    lines: List[Sequence[T]] = []
    j = n
    while j > 0:
        i = starts[j]
        lines.append(items[i:j])
        j = i
    lines.reverse()
    return lines


__all__ = ["WrapItem", "line_width", "wrap_optimal_fit"]
