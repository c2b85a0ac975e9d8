"""
文件路径：pdflayout/components/logging.py

说明：日志与错误信息格式化工具。各模块统一通过 `get_logger(__name__)` 获取 logger。

- 导入时只给包级 logger（"pdflayout"）挂 NullHandler，不写文件、不改动根 logger；
- 需要落盘或控制台输出时由调用方显式调用 `configure_logging`。
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from ..variables import (
    PATH_LOG_DIR_ENV,
    PATH_LOGS_DIRNAME,
    PATH_LOG_FILENAME,
    CONST_ENCODING,
    CONST_LOGGER_NAME,
    CONST_LOG_FORMAT,
    CONST_LOG_DATEFMT,
)


# =============================
# 日志工具
# =============================
logging.getLogger(CONST_LOGGER_NAME).addHandler(logging.NullHandler())

_CONFIGURED_HANDLERS: List[logging.Handler] = []


def get_logger(name: str) -> logging.Logger:
    """获取 logger（一般传入 __name__，即 pdflayout.* 子 logger）。"""
    return logging.getLogger(name)


def default_log_file() -> Path:
    """默认日志文件：$PDFLAYOUT_LOG_DIR/pdflayout.log，未设置时为 ./logs/pdflayout.log。"""
    env_dir = os.environ.get(PATH_LOG_DIR_ENV)
    log_dir = Path(env_dir) if env_dir else Path.cwd() / PATH_LOGS_DIRNAME
    return log_dir / PATH_LOG_FILENAME


def configure_logging(
    log_file: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
    console: bool = True,
) -> Path:
    """为包级 logger 配置文件与控制台双输出；重复调用会替换上一次的配置。

    参数：
        log_file: 日志文件路径；默认见 default_log_file。
        level: 包级 logger 的日志级别。
        console: 是否同时输出到 stderr。
    返回：
        实际写入的日志文件路径。
    """
    reset_logging()
    path = Path(log_file) if log_file is not None else default_log_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(CONST_LOG_FORMAT, datefmt=CONST_LOG_DATEFMT)
    handlers: List[logging.Handler] = [logging.FileHandler(path, encoding=CONST_ENCODING)]
    if console:
        handlers.append(logging.StreamHandler())

    package_logger = logging.getLogger(CONST_LOGGER_NAME)
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        _CONFIGURED_HANDLERS.append(handler)
    package_logger.setLevel(level)
    return path


def reset_logging() -> None:
    """移除并关闭 configure_logging 挂上的处理器。"""
    package_logger = logging.getLogger(CONST_LOGGER_NAME)
    while _CONFIGURED_HANDLERS:
        handler = _CONFIGURED_HANDLERS.pop()
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


# =============================
# 错误处理
# =============================
class ErrorHandler:
    """错误处理相关工具。"""

    @staticmethod
    def format_error(err_code: int, message: str) -> str:
        """生成统一错误信息字符串。"""
        return f"[{err_code}] {message}"


__all__ = ["get_logger", "configure_logging", "reset_logging", "default_log_file", "ErrorHandler"]
