"""日志配置模块：统一控制台与文件日志格式，并为每条日志附带请求 ID。"""

import json
import logging
import logging.config
import sys
from contextvars import ContextVar
from datetime import datetime
from typing import Optional

from .config import get_settings

APP_LOGGER_NAME = "app"


class _TZFormatter(logging.Formatter):
    """时间戳按配置时区渲染，未指定 datefmt 时输出带毫秒的 ISO 格式。"""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: D401
        stamp = datetime.fromtimestamp(record.created, get_settings().timezone_info)
        return stamp.strftime(datefmt) if datefmt else stamp.isoformat(sep=" ", timespec="milliseconds")


class ColorFormatter(_TZFormatter):
    """终端输出时只给级别名称上色，消息正文保持原样便于复制。"""

    RESET = "\033[0m"
    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[41m",
    }

    def __init__(self, fmt: str, datefmt: Optional[str] = None, use_colors: Optional[bool] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_colors = sys.stderr.isatty() if use_colors is None else use_colors

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelname) if self.use_colors else None
        if not color:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class JsonFormatter(_TZFormatter):
    """每条日志输出为一行 JSON，便于日志平台采集。"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", None),
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    """Injects request_id from contextvars into every LogRecord."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.request_id = _request_id_ctx.get() or "-"
        return True


def setup_logging() -> None:
    """初始化日志系统：控制台彩色输出 + 按天滚动的文件日志，均附带请求 ID。"""
    settings = get_settings()
    settings.log_directory.mkdir(parents=True, exist_ok=True)

    json_enabled = settings.log_json
    text_format = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
    handlers = ["default", "file"]

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "()": "app.packages.school.core.logger.ColorFormatter",
                "format": text_format,
            },
            "plain": {
                "()": "app.packages.school.core.logger._TZFormatter",
                "format": text_format,
            },
            "json": {
                "()": "app.packages.school.core.logger.JsonFormatter",
            },
        },
        "filters": {
            "request_id": {
                "()": "app.packages.school.core.logger.RequestIdFilter",
            }
        },
        "handlers": {
            "default": {
                "level": settings.log_level,
                "class": "logging.StreamHandler",
                "formatter": "json" if json_enabled else "standard",
                "filters": ["request_id"],
            },
            "file": {
                "level": settings.log_level,
                "class": "logging.handlers.TimedRotatingFileHandler",
                "formatter": "json" if json_enabled else "plain",
                "filename": str(settings.log_file_path),
                "when": "midnight",
                "backupCount": 14,
                "encoding": "utf-8",
                "delay": True,
                "filters": ["request_id"],
            },
        },
        "loggers": {
            name: {"handlers": handlers, "level": settings.log_level, "propagate": False}
            for name in ("uvicorn", "uvicorn.error", "uvicorn.access", APP_LOGGER_NAME)
        },
        "root": {
            "handlers": handlers,
            "level": settings.log_level,
        },
    }
    logging.config.dictConfig(logging_config)


logger = logging.getLogger(APP_LOGGER_NAME)


def get_logger(name: str) -> logging.Logger:
    """返回挂在 ``app`` 之下的子 logger，例如 ``app.attachments``。"""
    return logger.getChild(name)


def set_request_id(request_id: Optional[str]):
    return _request_id_ctx.set(request_id)


def reset_request_id(token) -> None:
    _request_id_ctx.reset(token)


