from typing import Callable, Optional, Tuple

import pygame


class Button:
    """
    A clickable button used for Pass / Next round.

    Supports separate background (`bg_color`) and foreground/text (`fg_color`),
    a hover color, and a disabled state that ignores clicks and greys out.
    """

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        bg_color: Tuple[int, int, int] = (50, 90, 200),
        fg_color: Tuple[int, int, int] = (255, 255, 255),
        hover_bg_color: Optional[Tuple[int, int, int]] = None,
        font_size: int = 24,
        on_click: Optional[Callable[[], None]] = None,
    ):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.bg_color = bg_color
        self.hover_bg_color = hover_bg_color
        self.fg_color = fg_color
        self.font = pygame.font.Font(None, font_size)
        # 按钮状态
        self.pressed = False
        self.hovered = False
        self.enabled = True
        self.on_click = on_click
        self._render_text()

    def _render_text(self) -> None:
        color = self.fg_color if self.enabled else (210, 210, 210)
        self.text_surface = self.font.render(self.text, True, color)
        self.text_rect = self.text_surface.get_rect(center=self.rect.center)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle mouse events; returns True when the click callback fired.

        - MOUSEMOTION: update hovered state
        - MOUSEBUTTONDOWN (left): pressed when inside
        - MOUSEBUTTONUP (left): click if released inside after a press
        """
        if not self.enabled:
            return False
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.pressed:
                self.pressed = False
                if self.rect.collidepoint(event.pos) and self.on_click:
                    self.on_click()
                    return True
        return False

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the button with a drop shadow; pressed buttons sink by two pixels."""
        current_bg = self.bg_color
        if not self.enabled:
            current_bg = (160, 160, 160)
        elif self.hovered and self.hover_bg_color:
            current_bg = self.hover_bg_color

        offset = 2 if self.pressed else 4
        shadow_rect = self.rect.move(offset, offset)
        pygame.draw.rect(screen, (150, 150, 150), shadow_rect, border_radius=8)
        pygame.draw.rect(screen, current_bg, self.rect, border_radius=8)
        pygame.draw.rect(screen, (100, 100, 100), self.rect, 2, border_radius=8)

        text_pos = self.text_rect.move(2, 2) if self.pressed else self.text_rect
        screen.blit(self.text_surface, text_pos)

    def update_text(self, new_text: str) -> None:
        self.text = new_text
        self._render_text()

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled
        if not enabled:
            self.pressed = False
            self.hovered = False
        self._render_text()
