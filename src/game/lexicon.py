"""
词典模块

单词结构校验、英文词典查询与计分。

计分规则：玩家独有的单词按字母数计分；被其他玩家也找到的单词不计分。
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Union

from src.shared.constants import ENV_DICTIONARY, MIN_WORD_LENGTH
from src.shared.exceptions import LexiconError

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).parent.parent / "shared" / "data" / "words.txt"


def is_word(word: str) -> bool:
    """结构校验：仅含 ASCII 字母且长度不少于 MIN_WORD_LENGTH"""
    return len(word) >= MIN_WORD_LENGTH and word.isascii() and word.isalpha()


def word_value(word: str) -> int:
    """单词分值：每个字母 1 分"""
    return len(word)


def player_score(player_words: Iterable[str], other_players_words: Iterable[str]) -> int:
    """
    计算玩家本回合得分。

    Args:
        player_words: 玩家找到的单词
        other_players_words: 其他所有玩家找到的单词（并集）

    Returns:
        玩家独有单词的分值之和；与他人重复的单词得 0 分
    """
    others = set(other_players_words)
    return sum(word_value(w) for w in set(player_words) if w not in others)


class Lexicon:
    """不可变英文词典，附带前缀索引用于棋盘枚举剪枝"""

    def __init__(self, words: Iterable[str]):
        cleaned = {w.strip().lower() for w in words}
        cleaned.discard("")
        self._words = frozenset(cleaned)
        prefixes = set()
        for w in self._words:
            for i in range(1, len(w)):
                prefixes.add(w[:i])
        self._prefixes = frozenset(prefixes)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Lexicon":
        """每行一个单词的词表文件"""
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as fh:
                lexicon = cls(line for line in fh if not line.startswith("#"))
        except (OSError, UnicodeDecodeError) as e:
            raise LexiconError(f"Cannot read dictionary {path}: {e}") from e
        if not lexicon:
            raise LexiconError(f"Dictionary {path} contains no words")
        logger.info("Loaded %d words from %s", len(lexicon), path)
        return lexicon

    @property
    def words(self) -> frozenset:
        return self._words

    def is_english_word(self, word: str) -> bool:
        return word.lower() in self._words

    def has_prefix(self, prefix: str) -> bool:
        """prefix 是否为某个更长单词的真前缀"""
        return prefix.lower() in self._prefixes

    def __contains__(self, word: str) -> bool:
        return self.is_english_word(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"Lexicon({len(self._words)} words)"


@lru_cache(maxsize=None)
def _cached_lexicon(path: str) -> Lexicon:
    return Lexicon.from_file(path)


def load_lexicon(path: Optional[str] = None) -> Lexicon:
    """按路径加载并缓存词典；path 为空时依次使用 BOGGLE_DICTIONARY 与内置词表"""
    # 缓存键为解析后的真实路径，环境变量变化后重新加载
    return _cached_lexicon(path or os.environ.get(ENV_DICTIONARY) or str(DEFAULT_WORDS_PATH))


def default_lexicon() -> Lexicon:
    return load_lexicon()


def is_english_word(word: str, lexicon: Optional[Lexicon] = None) -> bool:
    if lexicon is None:
        lexicon = default_lexicon()
    return lexicon.is_english_word(word)
