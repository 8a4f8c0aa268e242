"""
Word Grid - 多人找词游戏（Boggle 玩法）

A multiplayer Boggle-style word-finding game built with Python and Pygame.
"""

__version__ = "0.1.0"
__author__ = "Word Grid Team"
__license__ = "MIT"

# 导出主要组件
from . import client, game, shared

__all__ = ["client", "game", "shared", "__version__"]
