"""
棋盘模块

字母方阵、掷骰生成与单词路径合法性判断。
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from src.shared.constants import BOARD_SIZE, BOGGLE_DICE, QU_FACE
from src.shared.exceptions import InvalidBoardError

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


def _face(letter: str) -> str:
    letter = letter.strip().lower()
    return QU_FACE if letter == "q" else letter


@dataclass(frozen=True)
class Board:
    """
    字母方阵（不可变）。

    每个格子是一个小写“面”：通常为单个字母，Q 面读作 "qu"。
    """

    faces: Tuple[Tuple[str, ...], ...]

    def __post_init__(self):
        size = len(self.faces)
        if size == 0:
            raise InvalidBoardError("Board must have at least one row")
        for row in self.faces:
            if len(row) != size:
                raise InvalidBoardError(f"Board must be square, got a row of {len(row)} in a {size}x{size} grid")
            for face in row:
                if not face or not face.isalpha():
                    raise InvalidBoardError(f"Invalid board face {face!r}")

    @classmethod
    def from_rows(cls, rows: Iterable[Union[str, Sequence[str]]]) -> "Board":
        """
        由行构造棋盘。

        Args:
            rows: 每行为字符串（一个字符一个格子）或面序列；单独的 "q" 会变成 "qu"
        """
        faces = []
        for row in rows:
            faces.append(tuple(_face(c) for c in row))
        return cls(tuple(faces))

    @classmethod
    def roll(cls, size: int = BOARD_SIZE, rng: Optional[random.Random] = None) -> "Board":
        """掷骰生成随机棋盘：打乱骰子顺序，每颗骰子随机取一面"""
        if size < 1:
            raise InvalidBoardError(f"Board size must be positive, got {size}")
        rng = rng or random.Random()
        count = size * size
        # 非 4x4 时循环复用骰子
        dice = [BOGGLE_DICE[i % len(BOGGLE_DICE)] for i in range(count)]
        rng.shuffle(dice)
        letters = [rng.choice(die) for die in dice]
        board = cls.from_rows(letters[r * size:(r + 1) * size] for r in range(size))
        logger.debug("Rolled %dx%d board:\n%s", size, size, board)
        return board

    @property
    def size(self) -> int:
        return len(self.faces)

    def face(self, cell: Cell) -> str:
        row, col = cell
        return self.faces[row][col]

    def cells(self) -> Iterator[Cell]:
        for row in range(self.size):
            for col in range(self.size):
                yield (row, col)

    def neighbors(self, cell: Cell) -> List[Cell]:
        """8 方向相邻格子"""
        row, col = cell
        result = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                r, c = row + dr, col + dc
                if 0 <= r < self.size and 0 <= c < self.size:
                    result.append((r, c))
        return result

    def rows(self) -> List[str]:
        return [" ".join(f.capitalize().ljust(2) for f in row).rstrip() for row in self.faces]

    def __str__(self) -> str:
        return "\n".join(self.rows())


def _spell_from(board: Board, word: str, cell: Cell, used: frozenset) -> bool:
    face = board.face(cell)
    if not word.startswith(face):
        return False
    rest = word[len(face):]
    if not rest:
        return True
    used = used | {cell}
    return any(
        _spell_from(board, rest, nxt, used)
        for nxt in board.neighbors(cell)
        if nxt not in used
    )


def legal_word_in_board(word: str, board: Board) -> bool:
    """单词能否沿互不重复、8 方向相邻的格子路径拼出"""
    word = word.lower()
    if not word:
        return False
    return any(_spell_from(board, word, cell, frozenset()) for cell in board.cells())
