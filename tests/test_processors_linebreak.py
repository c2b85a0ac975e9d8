from __future__ import annotations

from dataclasses import dataclass

from pdflayout.processors import line_width, wrap_optimal_fit


@dataclass(frozen=True)
class Box:
    """非文本条目：验证断行算法只依赖 WrapItem 接口。"""

    name: str
    w: int
    glue: int = 1000
    penalty: int = 0

    def width(self) -> int:
        return self.w

    def whitespace_width(self) -> int:
        return self.glue

    def penalty_width(self) -> int:
        return self.penalty


def _names(lines):
    return [[b.name for b in line] for line in lines]


def test_line_width_excludes_trailing_glue_includes_penalty():
    line = [Box("a", 2000), Box("b", 3000, penalty=500)]
    assert line_width(line) == 2000 + 1000 + 3000 + 500
    assert line_width([]) == 0


def test_equal_boxes_pair_up():
    boxes = [Box(str(i), 3000) for i in range(4)]
    assert _names(wrap_optimal_fit(boxes, 7000)) == [["0", "1"], ["2", "3"]]


def test_prefers_balanced_lines_over_greedy():
    # 贪心会得到 [aaa bb][cc][ddddd]，代价 0 + 4000^2；最优为 [aaa][bb cc][ddddd]，代价 3000^2 + 1000^2
    boxes = [Box("aaa", 3000), Box("bb", 2000), Box("cc", 2000), Box("ddddd", 5000)]
    assert _names(wrap_optimal_fit(boxes, 6000)) == [["aaa"], ["bb", "cc"], ["ddddd"]]


def test_oversized_box_is_forced_alone():
    boxes = [Box("s1", 2000), Box("big", 10000), Box("s2", 2000)]
    assert _names(wrap_optimal_fit(boxes, 5000)) == [["s1"], ["big"], ["s2"]]


def test_penalty_counts_toward_feasibility():
    # a + glue + b = 6000 可放下，但 b 以连字符结尾时为 6500 > 6000
    boxes = [Box("a", 2000), Box("b", 3000, penalty=500), Box("c", 1000)]
    lines = wrap_optimal_fit(boxes, 6000)
    for line in lines:
        if len(line) > 1:
            assert line_width(line) <= 6000
    assert [b for line in lines for b in line] == boxes


def test_empty_input():
    assert wrap_optimal_fit([], 1000) == []


def test_zero_width_puts_each_box_alone():
    boxes = [Box(str(i), 1000) for i in range(3)]
    assert _names(wrap_optimal_fit(boxes, 0)) == [["0"], ["1"], ["2"]]
