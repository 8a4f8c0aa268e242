"""
常量定义

定义游戏中使用的各种常量。
"""

# 棋盘配置
BOARD_SIZE = 4
MAX_WORD_LENGTH = 8
MIN_WORD_LENGTH = 3
QU_FACE = "qu"

# 经典 Boggle 骰子（16 颗，每颗 6 面）
BOGGLE_DICE = [
    "aaeegn",
    "abbjoo",
    "achops",
    "affkps",
    "aoottw",
    "cimotu",
    "deilrx",
    "delrvy",
    "distty",
    "eeghnw",
    "eeinsu",
    "ehrtvw",
    "eiosst",
    "elrtty",
    "himnqu",
    "hlnnrz",
]

# 游戏配置
MAX_PLAYERS = 8
MIN_PLAYERS = 1
TURN_TIME = 60  # 秒
ROUNDS = 1

# 段位阈值：max_score // score 不超过该值即达到对应段位
RANK_PLATINUM = 2
RANK_GOLD = 3
RANK_SILVER = 6
RANK_ZERO_SCORE = 10

# 控制台命令
CMD_PASS = ":pass"

# 环境变量
ENV_BOARD_SIZE = "BOGGLE_BOARD_SIZE"
ENV_TURN_TIME = "BOGGLE_TURN_TIME"
ENV_ROUNDS = "BOGGLE_ROUNDS"
ENV_DICTIONARY = "BOGGLE_DICTIONARY"
ENV_SEED = "BOGGLE_SEED"
ENV_LOG_LEVEL = "BOGGLE_LOG_LEVEL"

# 窗口配置
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Word Grid - Boggle"
FPS = 60

# 颜色定义 (RGB)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (200, 40, 40)
GREEN = (40, 160, 70)
BLUE = (50, 90, 200)
GRAY = (128, 128, 128)
LIGHT_GRAY = (200, 200, 200)
TILE_COLOR = (245, 236, 210)
TILE_BORDER = (120, 100, 70)
BACKGROUND = (232, 238, 246)

# 段位颜色
TIER_COLORS = {
    "platinum": (120, 150, 170),
    "gold": (212, 175, 55),
    "silver": (150, 150, 150),
    "bronze": (176, 110, 60),
}
