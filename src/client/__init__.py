"""
客户端模块

负责回合报告、控制台与 Pygame 界面等表现层功能。

模块组成：
- report: 回合报告文本（找到的单词、分数、领先者、段位、全部可能单词）
- console: 终端轮流对局入口
- ui: Pygame UI 组件（棋盘、记分板、文本面板、按钮、输入框）

入口提示：
- 运行 src/client/console.py 在终端中游戏
- 运行 src/client/main.py 启动 Pygame 同屏客户端
"""

from . import report

__all__ = ["report"]
