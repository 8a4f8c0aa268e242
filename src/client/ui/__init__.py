"""
用户界面模块

提供基础 UI 组件以支撑 Word Grid 的 Pygame 表现层：
- 棋盘渲染 BoardRenderer：字母方阵
- 记分板 ScoreboardRenderer：当前玩家/剩余时间/分数与单词数
- 文本面板 TextPanel：回合报告等多行文本
- 按钮 Button 与单词输入框 TextInput

该模块与 Pygame 紧耦合用于渲染，但不持有对局状态；
对局状态由 `src.game.state` 提供，界面层只读取。
"""

from __future__ import annotations

import textwrap
from typing import Iterable, List, Optional, Sequence

import pygame

from src.game.board import Board
from src.game.state import Game, get_players_left
from src.shared.constants import BLACK, TILE_BORDER, TILE_COLOR

from .button import Button
from .text_input import TextInput


class BoardRenderer:
	"""棋盘渲染器：按格子绘制字母方阵"""

	def __init__(self, tile_size: int = 80, gap: int = 8, font: Optional[pygame.font.Font] = None):
		self.tile_size = tile_size
		self.gap = gap
		self._font = font or pygame.font.Font(None, int(tile_size * 0.6))

	def extent(self, board: Board) -> int:
		# // 棋盘边长（像素）
		return board.size * self.tile_size + (board.size - 1) * self.gap

	def tile_rect(self, origin: Sequence[int], row: int, col: int) -> pygame.Rect:
		step = self.tile_size + self.gap
		return pygame.Rect(origin[0] + col * step, origin[1] + row * step, self.tile_size, self.tile_size)

	def render(self, surface: pygame.Surface, board: Board, origin: Sequence[int]) -> None:
		for row, col in board.cells():
			rect = self.tile_rect(origin, row, col)
			pygame.draw.rect(surface, TILE_COLOR, rect, border_radius=10)
			pygame.draw.rect(surface, TILE_BORDER, rect, 3, border_radius=10)
			# // Q 面显示为 Qu
			label = board.face((row, col)).capitalize()
			surf = self._font.render(label, True, BLACK)
			surface.blit(surf, surf.get_rect(center=rect.center))


class ScoreboardRenderer:
	"""记分板：当前玩家、剩余时间、每位玩家的分数与已找到单词数"""

	def __init__(self, title_font: Optional[pygame.font.Font] = None, item_font: Optional[pygame.font.Font] = None):
		self._title_font = title_font or pygame.font.Font(None, 32)
		self._item_font = item_font or pygame.font.Font(None, 26)

	def lines(self, game: Game, current: Optional[str]) -> List[str]:
		waiting = set(get_players_left(game))
		result = []
		for p in game.players:
			marker = ">" if p.name == current else (" " if p.name in waiting else "-")
			result.append(f"{marker} {p.name}: {p.points} pts, {len(p.words)} words")
		return result

	def render(self, surface: pygame.Surface, game: Game, current: Optional[str], time_left: int, rect: pygame.Rect) -> None:
		title = f"Turn: {current}  Time: {time_left}s" if current else "Round over"
		surf_title = self._title_font.render(title, True, (10, 10, 10))
		surface.blit(surf_title, (rect.left + 6, rect.top + 6))

		y = rect.top + 6 + self._title_font.get_linesize() + 8
		for line in self.lines(game, current):
			surf_line = self._item_font.render(line, True, (40, 40, 40))
			surface.blit(surf_line, (rect.left + 6, y))
			y += self._item_font.get_linesize() + 3


class TextPanel:
	"""多行文本面板：支持滚动，渲染从 offset 开始能放下的若干行"""

	def __init__(self, font: Optional[pygame.font.Font] = None, wrap: int = 110):
		self._font = font or pygame.font.Font(None, 22)
		self._wrap = wrap
		self._lines: List[str] = []
		self.offset = 0

	def set_lines(self, lines: Iterable[str]) -> None:
		# // 按换行拆分并折行，空行保留为段落间隔
		self._lines = []
		for line in lines:
			for part in line.split("\n"):
				self._lines.extend(textwrap.wrap(part, self._wrap) or [""])
		self.offset = 0

	@property
	def lines(self) -> List[str]:
		return list(self._lines)

	def page_size(self, rect: pygame.Rect) -> int:
		return max(1, rect.height // (self._font.get_linesize() + 2))

	def scroll(self, delta: int, rect: pygame.Rect) -> None:
		# // 限制在 [0, 总行数 - 一页行数] 之间
		last = max(0, len(self._lines) - self.page_size(rect))
		self.offset = min(last, max(0, self.offset + delta))

	def visible_lines(self, rect: pygame.Rect) -> List[str]:
		return self._lines[self.offset:self.offset + self.page_size(rect)]

	def render(self, surface: pygame.Surface, rect: pygame.Rect, fg=(20, 20, 20)) -> None:
		x, y = rect.left + 6, rect.top + 6
		line_h = self._font.get_linesize() + 2
		for text in self.visible_lines(rect):
			surf = self._font.render(text, True, fg)
			surface.blit(surf, (x, y))
			y += line_h


__all__ = [
	"BoardRenderer",
	"ScoreboardRenderer",
	"TextPanel",
	"Button",
	"TextInput",
]
