"""
客户端主程序入口

Pygame 同屏轮流模式：显示棋盘，当前玩家限时输入单词，超时或点击 Pass 结束回合；
所有玩家结束后结算并显示回合报告，点击 Next round 开始下一回合。
"""

import argparse
import logging
import random
import sys
import time
from typing import Callable, List, Optional

import pygame

from src.client.report import round_report
from src.client.ui import BoardRenderer, Button, ScoreboardRenderer, TextInput, TextPanel
from src.game.board import Board
from src.game.lexicon import Lexicon, load_lexicon
from src.game.state import (
    Game,
    add_word,
    expire_turn,
    get_players_left,
    get_words_of_player,
    init_game,
    next_round,
    no_turns_left,
    update_final_scores,
)
from src.shared.config import Settings, load_settings
from src.shared.constants import (
    BACKGROUND,
    BLUE,
    FPS,
    GREEN,
    MAX_PLAYERS,
    MIN_PLAYERS,
    RED,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from src.shared.exceptions import BoggleError

logger = logging.getLogger(__name__)

BOARD_ORIGIN = (40, 40)
SIDEBAR_LEFT = 460
REPORT_RECT = pygame.Rect(40, 200, WINDOW_WIDTH - 80, WINDOW_HEIGHT - 220)
SCROLL_KEYS = {pygame.K_UP: -1, pygame.K_DOWN: 1, pygame.K_PAGEUP: -10, pygame.K_PAGEDOWN: 10}


class BoggleApp:
    """
    同屏轮流的游戏会话。

    持有当前 Game 值，每次动作后替换为引擎返回的新值；
    不依赖窗口，便于在无显示环境下驱动与测试。
    """

    def __init__(
        self,
        player_names: List[str],
        lexicon: Lexicon,
        board_size: int = 4,
        turn_time: int = 60,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.board_size = board_size
        self.turn_time = turn_time
        self.rng = rng or random.Random()
        self.clock = clock
        self.round_number = 1
        self.game: Game = init_game(Board.roll(board_size, self.rng), player_names, lexicon)
        self.current: Optional[str] = None
        self.turn_started = 0.0
        self.feedback = ""
        self.feedback_ok = True
        self.report: List[str] = []

        self.board_renderer = BoardRenderer()
        self.scoreboard = ScoreboardRenderer()
        self.report_panel = TextPanel()
        self.feedback_font = pygame.font.Font(None, 28)
        self.word_input = TextInput(pygame.Rect(SIDEBAR_LEFT, 420, 360, 48))
        self.word_input.on_submit = self.submit_word
        self.pass_button = Button(SIDEBAR_LEFT + 380, 420, 140, 48, "Pass", bg_color=RED, on_click=self.pass_turn)
        self.next_button = Button(SIDEBAR_LEFT + 380, 480, 140, 48, "Next round", bg_color=GREEN, on_click=self.start_next_round)
        self.next_button.set_enabled(False)
        self._begin_turn()

    # 回合流程
    @property
    def round_over(self) -> bool:
        return self.current is None

    def time_left(self) -> int:
        if self.round_over:
            return 0
        return max(0, int(self.turn_time - (self.clock() - self.turn_started)))

    def _begin_turn(self) -> None:
        left = get_players_left(self.game)
        self.current = left[0] if left else None
        self.turn_started = self.clock()
        self.word_input.text = ""
        if self.current:
            logger.info("Turn for %s", self.current)
            self.word_input.focus()

    def submit_word(self, word: str) -> None:
        if self.round_over:
            return
        before = get_words_of_player(self.game, self.current)
        self.game = add_word(self.game, self.current, word)
        self.feedback_ok = get_words_of_player(self.game, self.current) != before
        self.feedback = f"+ {word.lower()}" if self.feedback_ok else f"{word.lower()} doesn't count"

    def pass_turn(self) -> None:
        if self.round_over:
            return
        self.game = expire_turn(self.game, self.current)
        self.feedback = ""
        if no_turns_left(self.game.players):
            self._finish_round()
        else:
            self._begin_turn()

    def _finish_round(self) -> None:
        self.game = update_final_scores(self.game)
        self.current = None
        self.report = round_report(self.game)
        self.report_panel.set_lines(self.report)
        self.next_button.set_enabled(True)
        logger.info("Round %d finished", self.round_number)

    def start_next_round(self) -> None:
        if not self.round_over:
            return
        self.round_number += 1
        self.game = next_round(self.game, Board.roll(self.board_size, self.rng))
        self.report = []
        self.report_panel.set_lines([])
        self.next_button.set_enabled(False)
        self._begin_turn()

    def tick(self) -> None:
        """每帧调用：当前玩家超时则结束其回合"""
        if not self.round_over and self.time_left() <= 0:
            logger.info("Time's up for %s", self.current)
            self.pass_turn()

    # 事件与渲染
    def handle_event(self, event: pygame.event.Event) -> None:
        if not self.round_over:
            self.word_input.handle_event(event)
            self.pass_button.handle_event(event)
        else:
            self.next_button.handle_event(event)
            # 报告较长时用滚轮或方向键/翻页键滚动
            if event.type == pygame.MOUSEWHEEL:
                self.report_panel.scroll(-3 * event.y, REPORT_RECT)
            elif event.type == pygame.KEYDOWN and event.key in SCROLL_KEYS:
                self.report_panel.scroll(SCROLL_KEYS[event.key], REPORT_RECT)

    def draw(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND)
        if self.round_over:
            self.scoreboard.render(screen, self.game, None, 0, pygame.Rect(40, 20, 400, 200))
            self.report_panel.render(screen, REPORT_RECT)
            self.next_button.draw(screen)
            return
        self.board_renderer.render(screen, self.game.board, BOARD_ORIGIN)
        self.scoreboard.render(screen, self.game, self.current, self.time_left(), pygame.Rect(SIDEBAR_LEFT, 40, 520, 360))
        self.word_input.draw(screen)
        self.pass_button.draw(screen)
        if self.feedback:
            color = BLUE if self.feedback_ok else RED
            surf = self.feedback_font.render(self.feedback, True, color)
            screen.blit(surf, (SIDEBAR_LEFT, 480))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boggle-gui", description="Play Word Grid in a Pygame window (hot seat).")
    parser.add_argument("players", nargs="+", help="player names, in turn order")
    parser.add_argument("--turn-time", type=int, default=None, help="seconds per turn")
    parser.add_argument("--size", type=int, default=None, help="board size (NxN)")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the dice")
    parser.add_argument("--dictionary", default=None, help="path to a word list, one word per line")
    return parser


def create_app(args: argparse.Namespace, settings: Settings) -> BoggleApp:
    if not MIN_PLAYERS <= len(args.players) <= MAX_PLAYERS:
        raise BoggleError(f"Between {MIN_PLAYERS} and {MAX_PLAYERS} players are required")
    seed = args.seed if args.seed is not None else settings.seed
    return BoggleApp(
        args.players,
        load_lexicon(args.dictionary or settings.dictionary),
        board_size=args.size or settings.board_size,
        turn_time=args.turn_time or settings.turn_time,
        rng=random.Random(seed),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """启动客户端主函数"""
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        app = create_app(args, settings)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    app.handle_event(event)
            app.tick()
            app.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)
    except BoggleError as e:
        logger.error(f"Game error: {e}")
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
