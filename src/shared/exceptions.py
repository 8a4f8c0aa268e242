"""
自定义异常类别

集中管理游戏引擎抛出的异常，前端入口统一捕获 BoggleError。

注意：提交无效单词不是异常，add_word 直接返回原对局。
"""


class BoggleError(Exception):
    """所有游戏异常的基类"""
    pass


# ============ 不变量破坏（程序错误，不应重试） ============

class GameInvariantError(BoggleError):
    """对局不变量被破坏"""
    pass


class PlayerNotFoundError(GameInvariantError):
    """玩家不存在"""
    def __init__(self, player_name):
        self.player_name = player_name
        super().__init__(f"No player with the name {player_name!r}")


class AmbiguousPlayerError(GameInvariantError):
    """同名玩家不止一个"""
    def __init__(self, player_name, count):
        self.player_name = player_name
        self.count = count
        super().__init__(f"More than one player with the name {player_name!r} ({count} found)")


class EmptyRosterError(GameInvariantError):
    """玩家列表为空，无法判定胜者"""
    def __init__(self):
        super().__init__("Cannot determine a winner from an empty player list")


# ============ 配置错误 ============

class DuplicatePlayerError(BoggleError):
    """初始化时玩家名重复"""
    def __init__(self, duplicates):
        self.duplicates = tuple(duplicates)
        super().__init__(f"Duplicate player names: {', '.join(self.duplicates)}")


class InvalidBoardError(BoggleError):
    """棋盘不是非空方阵"""
    pass


class LexiconError(BoggleError):
    """词典文件缺失或为空"""
    pass
