"""
棋盘单词枚举

深度优先遍历棋盘路径，借助词典前缀索引剪枝，列出棋盘上所有合法单词。
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

from src.game.board import Board, Cell
from src.game.lexicon import Lexicon, default_lexicon, is_word

logger = logging.getLogger(__name__)


def valid_words(board: Board, max_length: int, lexicon: Optional[Lexicon] = None) -> List[str]:
    """
    棋盘上所有合法单词（排序、去重）。

    Args:
        board: 棋盘
        max_length: 单词最大长度（字母数）
        lexicon: 词典，默认使用内置词表
    """
    if lexicon is None:
        lexicon = default_lexicon()
    found: Set[str] = set()

    def walk(cell: Cell, prefix: str, used: Set[Cell]) -> None:
        prefix = prefix + board.face(cell)
        if len(prefix) > max_length:
            return
        if is_word(prefix) and lexicon.is_english_word(prefix):
            found.add(prefix)
        if not lexicon.has_prefix(prefix):
            return
        used.add(cell)
        for nxt in board.neighbors(cell):
            if nxt not in used:
                walk(nxt, prefix, used)
        used.discard(cell)

    for cell in board.cells():
        walk(cell, "", set())

    logger.debug("Board supports %d words (max length %d)", len(found), max_length)
    return sorted(found)
