"""
控制台入口

在终端里轮流进行多人回合：每位玩家在限时内输入单词，空行或 :pass 结束回合。
"""

import argparse
import logging
import random
import sys
import time
from typing import Callable, List, Optional

from src.client.report import emit, round_report
from src.game.board import Board
from src.game.lexicon import load_lexicon
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
from src.shared.constants import CMD_PASS, MAX_PLAYERS, MIN_PLAYERS
from src.shared.exceptions import BoggleError

logger = logging.getLogger(__name__)


def play_turn(
    game: Game,
    player_name: str,
    input_fn: Callable[[str], str] = input,
    clock: Callable[[], float] = time.monotonic,
    turn_seconds: float = 60,
    output: Callable[[str], None] = print,
) -> Game:
    """一位玩家的回合：限时输入单词，结束后回合资格失效"""
    output(f"\n{player_name}, it's your turn! You have {int(turn_seconds)} seconds.")
    output(str(game.board))
    deadline = clock() + turn_seconds
    while True:
        try:
            raw = input_fn("> ")
        except EOFError:
            break
        if clock() > deadline:
            output("Time's up!")
            break
        word = raw.strip()
        if not word or word.lower() == CMD_PASS:
            break
        before = get_words_of_player(game, player_name)
        game = add_word(game, player_name, word)
        if get_words_of_player(game, player_name) != before:
            output(f"  + {word.lower()}")
        else:
            output(f"  x {word.lower()} doesn't count")
    return expire_turn(game, player_name)


def play_round(
    game: Game,
    input_fn: Callable[[str], str] = input,
    clock: Callable[[], float] = time.monotonic,
    turn_seconds: float = 60,
    output: Callable[[str], None] = print,
) -> Game:
    """轮流进行，直到所有玩家都没有回合资格，然后结算"""
    while not no_turns_left(game.players):
        player_name = get_players_left(game)[0]
        game = play_turn(game, player_name, input_fn, clock, turn_seconds, output)
    return update_final_scores(game)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boggle-console", description="Play a round of Word Grid in the terminal.")
    parser.add_argument("players", nargs="+", help="player names, in turn order")
    parser.add_argument("--rounds", type=int, default=None, help="number of rounds to play")
    parser.add_argument("--turn-time", type=int, default=None, help="seconds per turn")
    parser.add_argument("--size", type=int, default=None, help="board size (NxN)")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the dice")
    parser.add_argument("--dictionary", default=None, help="path to a word list, one word per line")
    return parser


def run(args: argparse.Namespace, settings: Settings, input_fn: Callable[[str], str] = input) -> Game:
    if not MIN_PLAYERS <= len(args.players) <= MAX_PLAYERS:
        raise BoggleError(f"Between {MIN_PLAYERS} and {MAX_PLAYERS} players are required")
    seed = args.seed if args.seed is not None else settings.seed
    rng = random.Random(seed)
    size = args.size or settings.board_size
    rounds = args.rounds or settings.rounds
    turn_time = args.turn_time or settings.turn_time
    lexicon = load_lexicon(args.dictionary or settings.dictionary)

    game = init_game(Board.roll(size, rng), args.players, lexicon)
    for number in range(1, rounds + 1):
        if number > 1:
            game = next_round(game, Board.roll(size, rng))
        emit([f"\n===== Round {number} of {rounds} ====="])
        game = play_round(game, input_fn=input_fn, turn_seconds=turn_time)
        emit(round_report(game))
    return game


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)
    try:
        run(args, settings)
    except KeyboardInterrupt:
        logger.info("Game interrupted")
        return 130
    except BoggleError as e:
        logger.error(f"Game error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
