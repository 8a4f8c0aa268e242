"""
共享模块

存放引擎与前端共用的代码，如常量、配置、异常定义。

组件说明：
- constants: 棋盘/回合/计分常量、窗口参数与颜色
- config: 环境变量覆盖（Settings / load_settings）
- exceptions: BoggleError 异常层级

提示：
- 词典数据位于 data/words.txt，可通过 BOGGLE_DICTIONARY 指向其他词表
"""

from . import config, constants, exceptions

__all__ = ["config", "constants", "exceptions"]
