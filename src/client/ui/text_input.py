import pygame
from typing import Callable, Optional, Tuple

from src.shared.constants import MAX_WORD_LENGTH


class TextInput:
    """
    单词输入框。

    功能特性：
    - 点击激活；Enter 提交内容；Esc 取消激活；Backspace 删除字符
    - 只接受字母，长度上限为 MAX_WORD_LENGTH 加上 Q 面额外的 u
    - 占位符提示（输入框为空时显示）
    - `on_submit` 回调在提交时触发
    """

    def __init__(
        self,
        rect: pygame.Rect,
        font_size: int = 32,
        text_color: Tuple[int, int, int] = (0, 0, 0),
        bg_color: Tuple[int, int, int] = (250, 250, 250),
        placeholder: str = "Type a word and press Enter...",
        max_length: int = MAX_WORD_LENGTH + 1,
    ) -> None:
        self.rect = rect
        self.text = ""
        self.placeholder = placeholder
        self.text_color = text_color
        self.bg_color = bg_color
        self.max_length = max_length
        self.active = False
        self.font = pygame.font.Font(None, font_size)
        # 提交回调：参数为提交的单词
        self.on_submit: Optional[Callable[[str], None]] = None

    def focus(self) -> None:
        self.active = True
        try:
            pygame.key.start_text_input()
        except pygame.error:
            pass

    def handle_event(self, event: pygame.event.Event) -> None:
        """处理键盘和鼠标事件"""
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.active = self.rect.collidepoint(event.pos)
        elif event.type == pygame.KEYDOWN and self.active:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                word = self.text.strip()
                self.text = ""
                if self.on_submit and word:
                    self.on_submit(word)
            elif event.key == pygame.K_ESCAPE:
                self.active = False
                self.text = ""
            elif event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            # 字符输入通过 TEXTINPUT 事件处理，避免重复输入
        elif event.type == pygame.TEXTINPUT and self.active:
            letters = "".join(ch for ch in event.text if ch.isalpha())
            remaining = self.max_length - len(self.text)
            if remaining > 0:
                self.text += letters[:remaining]

    def draw(self, screen: pygame.Surface) -> None:
        shadow = self.rect.move(3, 3)
        pygame.draw.rect(screen, (200, 200, 200), shadow, border_radius=6)
        pygame.draw.rect(screen, self.bg_color, self.rect, border_radius=6)
        # 激活时蓝色高亮
        border_color = (80, 120, 200) if self.active else (180, 180, 180)
        pygame.draw.rect(screen, border_color, self.rect, 2, border_radius=6)

        txt = self.text if (self.text or self.active) else self.placeholder
        color = self.text_color if (self.text or self.active) else (130, 130, 130)
        surf = self.font.render(txt, True, color)
        screen.blit(surf, (self.rect.x + 8, self.rect.y + (self.rect.height - surf.get_height()) // 2))
