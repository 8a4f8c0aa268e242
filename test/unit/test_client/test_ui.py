"""
Pygame client tests (run headless with the SDL dummy driver).
"""

import random

import pygame
import pytest

from src.client.main import BoggleApp, build_parser, create_app
from src.client.ui import BoardRenderer, Button, ScoreboardRenderer, TextInput, TextPanel
from src.game.state import get_score_of_player, get_words_of_player, init_game
from src.shared.config import Settings
from src.shared.exceptions import BoggleError


@pytest.fixture(autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def app(sample_board, small_lexicon):
    clock = FakeClock()
    application = BoggleApp(["A", "B"], small_lexicon, turn_time=30, rng=random.Random(0), clock=clock)
    # 固定棋盘便于断言
    application.game = init_game(sample_board, ["A", "B"], small_lexicon)
    application._begin_turn()
    return application


def test_text_input_filters_and_submits():
    field = TextInput(pygame.Rect(0, 0, 200, 40))
    submitted = []
    field.on_submit = submitted.append
    field.focus()
    field.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="c4a t"))
    assert field.text == "cat"
    field.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE, mod=0))
    field.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="r"))
    field.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN, mod=0))
    assert submitted == ["car"]
    assert field.text == ""


def test_text_input_length_limit_and_inactive():
    field = TextInput(pygame.Rect(0, 0, 200, 40), max_length=4)
    field.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="abc"))
    assert field.text == ""
    field.focus()
    field.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="abcdefg"))
    assert field.text == "abcd"


def test_button_click_and_disabled():
    clicks = []
    button = Button(10, 10, 100, 40, "Pass", on_click=lambda: clicks.append(1))
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(20, 20), button=1)
    up = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(20, 20), button=1)
    button.handle_event(down)
    assert button.handle_event(up) is True
    assert clicks == [1]
    button.set_enabled(False)
    button.handle_event(down)
    assert button.handle_event(up) is False
    assert clicks == [1]


def test_renderers_draw_on_surface(two_player_game):
    surface = pygame.Surface((800, 600))
    renderer = BoardRenderer(tile_size=50, gap=5)
    assert renderer.extent(two_player_game.board) == 4 * 50 + 3 * 5
    assert renderer.tile_rect((10, 10), 1, 2) == pygame.Rect(120, 65, 50, 50)
    renderer.render(surface, two_player_game.board, (10, 10))
    ScoreboardRenderer().render(surface, two_player_game, "A", 12, pygame.Rect(300, 10, 400, 200))
    assert ScoreboardRenderer().lines(two_player_game, "A") == [
        "> A: 0 pts, 0 words",
        "  B: 0 pts, 0 words",
    ]


def test_text_panel_wraps_lines():
    panel = TextPanel(wrap=10)
    panel.set_lines(["one two three four", "", "a\nb"])
    assert panel.lines == ["one two", "three four", "", "a", "b"]
    panel.render(pygame.Surface((300, 100)), pygame.Rect(0, 0, 300, 100))


def test_app_plays_a_round(app):
    assert app.current == "A"
    app.submit_word("cat")
    assert app.feedback == "+ cat" and app.feedback_ok
    app.submit_word("cat")
    assert not app.feedback_ok
    app.submit_word("car")
    app.pass_turn()
    assert app.current == "B"
    app.submit_word("CAR")
    app.submit_word("care")
    app.pass_turn()
    assert app.round_over
    assert get_score_of_player(app.game, "A") == 3
    assert get_score_of_player(app.game, "B") == 4
    assert "B is currently winning the game!" in app.report
    assert app.next_button.enabled
    app.draw(pygame.Surface((1024, 720)))


def test_app_turn_times_out(app):
    app.clock.now = 10.0
    app.tick()
    assert app.current == "A"
    assert app.time_left() == 20
    app.clock.now = 31.0
    app.tick()
    assert app.current == "B"
    app.clock.now = 62.0
    app.tick()
    assert app.round_over
    assert app.time_left() == 0


def test_app_next_round(app):
    app.submit_word("care")
    app.pass_turn()
    app.pass_turn()
    app.start_next_round()
    assert app.round_number == 2
    assert app.current == "A"
    assert get_words_of_player(app.game, "A") == ()
    assert get_score_of_player(app.game, "A") == 4
    assert not app.next_button.enabled
    app.draw(pygame.Surface((1024, 720)))


def test_create_app_validates_players(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("cat\n", encoding="utf-8")
    args = build_parser().parse_args(["A", "B", "--seed", "1", "--dictionary", str(words), "--size", "3"])
    application = create_app(args, Settings())
    assert application.game.board.size == 3
    with pytest.raises(BoggleError):
        create_app(build_parser().parse_args([str(i) for i in range(9)]), Settings())


def test_text_panel_scrolls_within_bounds():
    panel = TextPanel()
    rect = pygame.Rect(0, 0, 300, 100)
    page = panel.page_size(rect)
    panel.set_lines([f"line {i}" for i in range(page + 5)])
    assert panel.visible_lines(rect)[0] == "line 0"
    panel.scroll(3, rect)
    assert panel.visible_lines(rect)[0] == "line 3"
    panel.scroll(100, rect)
    assert panel.offset == 5
    assert panel.visible_lines(rect)[-1] == f"line {page + 4}"
    panel.scroll(-100, rect)
    assert panel.offset == 0
    panel.set_lines(["short"])
    panel.scroll(10, rect)
    assert panel.offset == 0


def test_app_scrolls_report_after_round(app):
    app.pass_turn()
    app.pass_turn()
    assert app.round_over
    app.report_panel.set_lines([f"line {i}" for i in range(200)])
    app.handle_event(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=-1))
    assert app.report_panel.offset == 3
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_PAGEDOWN, mod=0))
    assert app.report_panel.offset == 13
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP, mod=0))
    assert app.report_panel.offset == 12
    app.draw(pygame.Surface((1024, 720)))
