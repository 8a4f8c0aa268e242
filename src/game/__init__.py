"""
游戏逻辑模块

实现游戏核心逻辑，包括回合资格、单词校验、分数计算、段位评定。

模块组成：
- board: 字母方阵与路径合法性
- lexicon: 词典、结构校验与计分
- allwords: 棋盘单词枚举
- state: 不可变的对局状态引擎
"""

from .board import Board, legal_word_in_board
from .lexicon import Lexicon, default_lexicon, is_english_word, is_word, player_score
from .allwords import valid_words
from .state import (
    Game,
    Player,
    Ranking,
    RankTier,
    add_word,
    expire_turn,
    get_player,
    get_player_names,
    get_players_left,
    get_score_of_player,
    get_turn_of_player,
    get_words_of_player,
    give_ranking,
    init_game,
    max_score,
    next_round,
    no_turns_left,
    rankings,
    set_score_of_player,
    update_final_scores,
    who_won,
)

__all__ = [
    "Board",
    "legal_word_in_board",
    "Lexicon",
    "default_lexicon",
    "is_english_word",
    "is_word",
    "player_score",
    "valid_words",
    "Game",
    "Player",
    "Ranking",
    "RankTier",
    "add_word",
    "expire_turn",
    "get_player",
    "get_player_names",
    "get_players_left",
    "get_score_of_player",
    "get_turn_of_player",
    "get_words_of_player",
    "give_ranking",
    "init_game",
    "max_score",
    "next_round",
    "no_turns_left",
    "rankings",
    "set_score_of_player",
    "update_final_scores",
    "who_won",
]
