"""
对局状态引擎

维护玩家名单与回合状态：回合资格、提交单词校验、计分与段位。

所有操作都返回新的 Game 值，不会修改传入的对局；调用方需保留返回值。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from src.game.allwords import valid_words
from src.game.board import Board, legal_word_in_board
from src.game.lexicon import Lexicon, default_lexicon, is_word, player_score
from src.shared.constants import (
    MAX_WORD_LENGTH,
    RANK_GOLD,
    RANK_PLATINUM,
    RANK_SILVER,
    RANK_ZERO_SCORE,
)
from src.shared.exceptions import (
    AmbiguousPlayerError,
    DuplicatePlayerError,
    EmptyRosterError,
    PlayerNotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Player:
    """玩家：名字、已找到的单词（排序去重）、累计分数、是否仍有回合资格"""

    name: str
    words: Tuple[str, ...] = ()
    points: int = 0
    has_turn: bool = True


@dataclass(frozen=True)
class Game:
    """一回合的对局状态（不可变）"""

    players: Tuple[Player, ...]
    board: Board
    possible_words: Tuple[str, ...]
    lexicon: Lexicon = field(default_factory=default_lexicon, compare=False, repr=False)


class RankTier(str, Enum):
    PLATINUM = "platinum"
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"


@dataclass(frozen=True)
class Ranking:
    name: str
    tier: RankTier


# ============ 初始化 ============

def _check_unique(player_names: Sequence[str]) -> None:
    seen = set()
    duplicates = []
    for name in player_names:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        raise DuplicatePlayerError(duplicates)


def init_game(board: Board, player_names: Iterable[str], lexicon: Optional[Lexicon] = None) -> Game:
    """
    创建新对局。

    每个玩家初始为 0 分、无单词、拥有回合资格；possible_words 由棋盘枚举一次得出。

    Raises:
        DuplicatePlayerError: 玩家名重复
    """
    names = list(player_names)
    _check_unique(names)
    if lexicon is None:
        lexicon = default_lexicon()
    game = Game(
        players=tuple(Player(name) for name in names),
        board=board,
        possible_words=tuple(valid_words(board, MAX_WORD_LENGTH, lexicon)),
        lexicon=lexicon,
    )
    logger.info("New game for %s (%d possible words)", ", ".join(names) or "nobody", len(game.possible_words))
    return game


def next_round(game: Game, board: Board) -> Game:
    """在新棋盘上开始下一回合：保留名单顺序与累计分数，清空单词并恢复所有回合资格"""
    players = tuple(replace(p, words=(), has_turn=True) for p in game.players)
    new_game = Game(
        players=players,
        board=board,
        possible_words=tuple(valid_words(board, MAX_WORD_LENGTH, game.lexicon)),
        lexicon=game.lexicon,
    )
    logger.info("Next round started (%d possible words)", len(new_game.possible_words))
    return new_game


# ============ 查询 ============

def get_player(game: Game, player_name: str) -> Player:
    """
    按名字查找唯一玩家。

    Raises:
        PlayerNotFoundError: 没有该玩家
        AmbiguousPlayerError: 同名玩家不止一个（名单不变量被破坏）
    """
    matches = [p for p in game.players if p.name == player_name]
    if not matches:
        raise PlayerNotFoundError(player_name)
    if len(matches) > 1:
        raise AmbiguousPlayerError(player_name, len(matches))
    return matches[0]


def get_player_names(game: Game) -> List[str]:
    return [p.name for p in game.players]


def get_words_of_player(game: Game, player_name: str) -> Tuple[str, ...]:
    return get_player(game, player_name).words


def get_score_of_player(game: Game, player_name: str) -> int:
    return get_player(game, player_name).points


def get_turn_of_player(game: Game, player_name: str) -> bool:
    return get_player(game, player_name).has_turn


def get_players_left(game: Game) -> List[str]:
    """仍有回合资格的玩家名（名单顺序）"""
    return [p.name for p in game.players if p.has_turn]


def no_turns_left(players: Iterable[Player]) -> bool:
    return not any(p.has_turn for p in players)


# ============ 状态变换 ============

def _replace_player(game: Game, player_name: str, **changes) -> Game:
    get_player(game, player_name)
    players = tuple(replace(p, **changes) if p.name == player_name else p for p in game.players)
    return replace(game, players=players)


def expire_turn(game: Game, player_name: str) -> Game:
    """结束玩家的回合（超时或主动跳过）"""
    logger.debug("Turn expired for %s", player_name)
    return _replace_player(game, player_name, has_turn=False)


def set_score_of_player(game: Game, player_name: str, score: int) -> Game:
    return _replace_player(game, player_name, points=score)


def _rejection(game: Game, player: Player, word: str) -> Optional[str]:
    # 依次短路校验
    if word in player.words:
        return "already found"
    if not legal_word_in_board(word, game.board):
        return "not on the board"
    if not is_word(word):
        return "malformed"
    if not game.lexicon.is_english_word(word):
        return "not an English word"
    return None


def add_word(game: Game, player_name: str, word: str) -> Game:
    """
    提交单词。

    单词先转小写；重复、棋盘上拼不出、结构不合法或不在词典中时静默拒绝，
    原样返回传入的对局。接受后单词并入玩家词集（排序去重），
    并将该玩家的 has_turn 置为 True。

    调用方如需知道是否被接受，应比较提交前后的词集。
    """
    word = word.lower()
    player = get_player(game, player_name)
    reason = _rejection(game, player, word)
    if reason:
        logger.debug("Rejected %r from %s: %s", word, player_name, reason)
        return game
    words = tuple(sorted(set(player.words) | {word}))
    logger.debug("Accepted %r from %s", word, player_name)
    return _replace_player(game, player_name, words=words, has_turn=True)


# ============ 计分 ============

def _other_player_words(players: Iterable[Player], player_name: str) -> set:
    words = set()
    for p in players:
        if p.name != player_name:
            words.update(p.words)
    return words


def update_final_scores(game: Game) -> Game:
    """
    结算本回合：每位玩家累加独有单词的分值。

    与其他玩家重复的单词对任何人都不计分。每位玩家恰好结算一次，名单顺序不变。
    """
    players = game.players
    for player in players:
        gained = player_score(player.words, _other_player_words(players, player.name))
        total = get_score_of_player(game, player.name) + gained
        game = set_score_of_player(game, player.name, total)
        logger.debug("%s scored %d this round, total %d", player.name, gained, total)
    return game


def max_score(game: Game) -> int:
    """棋盘理论最高分：独占全部可能单词时的得分"""
    return player_score(game.possible_words, [])


def who_won(players: Sequence[Player]) -> Player:
    """
    分数最高的玩家；并列时取名单中靠前者。

    Raises:
        EmptyRosterError: 玩家列表为空
    """
    if not players:
        raise EmptyRosterError()
    best = players[-1]
    for player in reversed(players[:-1]):
        if not best.points > player.points:
            best = player
    return best


def give_ranking(player_name: str, score: int, max_score: int) -> Ranking:
    """
    按 max_score // score 划分段位（0 分固定记为 10）：
    不超过 2 为白金，不超过 3 为黄金，不超过 6 为白银，其余为青铜。
    """
    rank = RANK_ZERO_SCORE if score == 0 else max_score // score
    if rank <= RANK_PLATINUM:
        tier = RankTier.PLATINUM
    elif rank <= RANK_GOLD:
        tier = RankTier.GOLD
    elif rank <= RANK_SILVER:
        tier = RankTier.SILVER
    else:
        tier = RankTier.BRONZE
    return Ranking(player_name, tier)


def rankings(game: Game) -> List[Ranking]:
    top = max_score(game)
    return [give_ranking(p.name, p.points, top) for p in game.players]
