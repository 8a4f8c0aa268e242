"""
回合报告

把对局状态整理成可读文本行：找到的单词、累计分数、当前领先者、段位与全部可能单词。
函数只返回文本行，由 emit 或 UI 决定如何输出。
"""

from __future__ import annotations

from typing import Iterable, List

from src.game.state import (
    Game,
    RankTier,
    get_player_names,
    get_score_of_player,
    get_words_of_player,
    max_score,
    rankings,
    who_won,
)
from src.shared.exceptions import EmptyRosterError

TIER_MESSAGES = {
    RankTier.PLATINUM: "achieved platinum rank. They got at least 50% of all words!",
    RankTier.GOLD: "achieved gold rank. They got at least 33% of all words!",
    RankTier.SILVER: "achieved silver rank. They got at least 17% of all words!",
    RankTier.BRONZE: "achieved bronze rank. They got less than 17% of all words!",
}

VOCABULARY_BLURB = (
    "How strong is your vocabulary? Keep in mind that we reference a very\n"
    "large dictionary so some words may be abbreviations you might not recognize."
)


def words_summary(game: Game) -> List[str]:
    return [
        f"In this round {name} found the words: {', '.join(get_words_of_player(game, name))}"
        for name in get_player_names(game)
    ]


def scores_summary(game: Game) -> List[str]:
    return [
        f"After this round {name}'s total score is {get_score_of_player(game, name)}"
        for name in get_player_names(game)
    ]


def who_won_summary(game: Game) -> List[str]:
    """
    领先者播报。

    沿名单比较相邻两人的分数：相等则继续向后，遇到第一对不等即播报领先者；
    一直走到最后一人仍未遇到不等（含只有一名玩家）则判为平局。
    """
    players = list(game.players)
    if not players:
        raise EmptyRosterError()
    while len(players) > 1:
        if players[0].points != players[1].points:
            return [f"{who_won(game.players).name} is currently winning the game!"]
        players = players[1:]
    return ["The game is a draw!"]


def rankings_summary(game: Game) -> List[str]:
    lines = [f"In this round {r.name} {TIER_MESSAGES[r.tier]}" for r in rankings(game)]
    lines.append(f"The maximum possible score this round was {max_score(game)}")
    return lines


def all_words_summary(game: Game) -> List[str]:
    return [VOCABULARY_BLURB, "These are some possible words on this board:", " ".join(game.possible_words)]


def round_report(game: Game) -> List[str]:
    """结算后的完整回合报告"""
    lines: List[str] = []
    for section in (words_summary, scores_summary, who_won_summary, rankings_summary, all_words_summary):
        lines.extend(section(game))
        lines.append("")
    return lines


def emit(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)
