import logging
import sys

from app.core.config import settings

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"


class Logx(logging.LoggerAdapter):
    """
    项目统一使用的 logger：
    - 各模块直接 `from app.core.logx import logger`
    - logger.is_debug(True) 可在调试某个模块时临时打开 DEBUG 输出
    """

    def __init__(self, name: str, level: str):
        base = logging.getLogger(name)
        if not base.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            base.addHandler(handler)
            base.propagate = False
        self._default_level = logging.getLevelName(level.upper())
        base.setLevel(self._default_level)
        super().__init__(base, {})

    def is_debug(self, flag: bool = True) -> None:
        """打开 / 关闭 DEBUG 级别输出，关闭时恢复配置中的级别"""
        self.logger.setLevel(logging.DEBUG if flag else self._default_level)


logger = Logx("social", "DEBUG" if settings.DEBUG else settings.LOG_LEVEL)
