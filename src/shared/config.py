"""
运行配置

在 constants 默认值之上叠加环境变量覆盖，供控制台与 Pygame 入口共用。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from src.shared.constants import (
    BOARD_SIZE,
    ENV_BOARD_SIZE,
    ENV_DICTIONARY,
    ENV_LOG_LEVEL,
    ENV_ROUNDS,
    ENV_SEED,
    ENV_TURN_TIME,
    ROUNDS,
    TURN_TIME,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """环境变量覆盖后的运行配置"""

    board_size: int = BOARD_SIZE
    turn_time: int = TURN_TIME
    rounds: int = ROUNDS
    dictionary: Optional[str] = None
    seed: Optional[int] = None
    log_level: str = "INFO"


def _int_from_env(environ: Mapping[str, str], key: str, default: Optional[int], minimum: int = 1) -> Optional[int]:
    raw = environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %s", key, raw, default)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%r: must be >= %d, using %s", key, raw, minimum, default)
        return default
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """读取环境变量生成 Settings；格式错误的整数回退到默认值"""
    if environ is None:
        environ = os.environ
    return Settings(
        board_size=_int_from_env(environ, ENV_BOARD_SIZE, BOARD_SIZE, minimum=2),
        turn_time=_int_from_env(environ, ENV_TURN_TIME, TURN_TIME),
        rounds=_int_from_env(environ, ENV_ROUNDS, ROUNDS),
        dictionary=environ.get(ENV_DICTIONARY) or None,
        seed=_int_from_env(environ, ENV_SEED, None, minimum=0),
        log_level=(environ.get(ENV_LOG_LEVEL) or "INFO").upper(),
    )
