"""
Pytest configuration and shared fixtures for Word Grid.
"""

import os
import sys

import pytest

# Pygame 测试在无显示环境下运行
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add the project root to path so `import src` works without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.game.board import Board  # noqa: E402
from src.game.lexicon import Lexicon  # noqa: E402
from src.game.state import init_game  # noqa: E402


@pytest.fixture
def small_lexicon():
    """Dictionary with three words: cat, car, care."""
    return Lexicon(["cat", "car", "care"])


@pytest.fixture
def sample_board():
    """4x4 board where cat, car and care can all be spelled from the top-left c."""
    return Board.from_rows(["catx", "zrej", "vwky", "fghm"])


@pytest.fixture
def two_player_game(sample_board, small_lexicon):
    return init_game(sample_board, ["A", "B"], small_lexicon)
