"""
Tests for shared constants, configuration and exceptions.
"""

import logging

from src.shared import constants
from src.shared.config import Settings, load_settings
from src.shared.exceptions import (
    AmbiguousPlayerError,
    BoggleError,
    DuplicatePlayerError,
    EmptyRosterError,
    GameInvariantError,
    PlayerNotFoundError,
)


def test_constants_values():
    assert constants.MAX_WORD_LENGTH == 8
    assert constants.MIN_WORD_LENGTH == 3
    assert len(constants.BOGGLE_DICE) == constants.BOARD_SIZE ** 2
    assert all(len(die) == 6 for die in constants.BOGGLE_DICE)
    assert constants.RANK_PLATINUM < constants.RANK_GOLD < constants.RANK_SILVER < constants.RANK_ZERO_SCORE


def test_load_settings_defaults():
    assert load_settings({}) == Settings()


def test_load_settings_overrides():
    settings = load_settings(
        {
            "BOGGLE_BOARD_SIZE": "5",
            "BOGGLE_TURN_TIME": "30",
            "BOGGLE_ROUNDS": "3",
            "BOGGLE_DICTIONARY": "/tmp/words.txt",
            "BOGGLE_SEED": "7",
            "BOGGLE_LOG_LEVEL": "debug",
        }
    )
    assert settings == Settings(
        board_size=5, turn_time=30, rounds=3, dictionary="/tmp/words.txt", seed=7, log_level="DEBUG"
    )


def test_load_settings_bad_integers_fall_back(caplog):
    with caplog.at_level(logging.WARNING):
        settings = load_settings({"BOGGLE_TURN_TIME": "soon", "BOGGLE_ROUNDS": "0"})
    assert settings.turn_time == constants.TURN_TIME
    assert settings.rounds == constants.ROUNDS
    assert "BOGGLE_TURN_TIME" in caplog.text


def test_exception_hierarchy():
    assert issubclass(PlayerNotFoundError, GameInvariantError)
    assert issubclass(AmbiguousPlayerError, GameInvariantError)
    assert issubclass(EmptyRosterError, GameInvariantError)
    assert issubclass(DuplicatePlayerError, BoggleError)
    assert not issubclass(DuplicatePlayerError, GameInvariantError)
    assert "Zed" in str(PlayerNotFoundError("Zed"))
    assert DuplicatePlayerError(["A"]).duplicates == ("A",)
