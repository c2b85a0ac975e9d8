"""
文件路径：pdflayout/processors/hyphenation.py

说明：单词连字拆分（Splitter）。

- Splitter 为可注入的可选策略：未配置时单词不拆分；
- 拆分结果按顺序拼接必须等于原单词，除最后一段外每段末尾都是可断行的连字点。
"""

from __future__ import annotations

from typing import List, Optional, Protocol

import pyphen

from ..components import get_logger
from ..variables import CONST_HYPHEN_LANG_DEFAULT


logger = get_logger(__name__)


class Splitter(Protocol):
    """连字拆分策略。"""

    def split(self, word: str) -> List[str]:
        ...


class PyphenSplitter:
    """基于 pyphen（Hunspell 连字词典）的拆分策略。

    参数：
        lang: pyphen 语言代码，如 "en_US"、"de_DE"、"ru_RU"。
        left / right: 连字点距词首 / 词尾的最少字符数。
    异常：
        KeyError: pyphen 中不存在该语言的词典。
    """

    def __init__(self, lang: str = CONST_HYPHEN_LANG_DEFAULT, left: int = 2, right: int = 2) -> None:
        self.lang = lang
        self._dic = pyphen.Pyphen(lang=lang, left=left, right=right)
        logger.info("已加载连字词典：%s", lang)

    def split(self, word: str) -> List[str]:
        if not word:
            return [word]
        segments: List[str] = []
        start = 0
        for pos in self._dic.positions(word):
            segments.append(word[start:pos])
            start = int(pos)
        segments.append(word[start:])
        return segments


def split_word(splitter: Optional[Splitter], word: str) -> List[str]:
    """拆分单词；splitter 为 None 时原样返回 [word]。"""
    if splitter is None:
        return [word]
    segments = splitter.split(word)
    return segments if segments else [word]


__all__ = ["Splitter", "PyphenSplitter", "split_word"]
