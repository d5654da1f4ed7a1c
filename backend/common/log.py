# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : log.py
@Date    : 2026/10/12 09:52
"""
import inspect
import logging
import sys

from loguru import logger

from backend.core import path_conf
from backend.core.conf import settings


class InterceptHandler(logging.Handler):
    """
    将标准库 logging 的日志转发到 loguru

    参考: https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging() -> None:
    """接管 uvicorn / sqlalchemy 等标准库日志"""
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(settings.LOG_STD_LEVEL)

    for name in logging.root.manager.loggerDict.keys():
        logging.getLogger(name).handlers = []
        # uvicorn 访问日志由 AccessMiddleware 输出
        logging.getLogger(name).propagate = 'uvicorn.access' not in name

    logger.remove()
    logger.configure(handlers=[{'sink': sys.stdout, 'level': settings.LOG_STD_LEVEL, 'format': settings.LOG_STD_FORMAT}])


def set_custom_logfile() -> None:
    """访问日志与错误日志分文件存储"""
    path_conf.LOG_DIR.mkdir(parents=True, exist_ok=True)

    log_config = {
        'format': settings.LOG_FILE_FORMAT,
        'enqueue': True,
        'rotation': '00:00',
        'retention': '7 days',
        'compression': 'tar.gz',
    }

    logger.add(
        str(path_conf.LOG_DIR / settings.LOG_ACCESS_FILENAME),
        level=settings.LOG_ACCESS_FILE_LEVEL,
        filter=lambda record: record['level'].no <= 25,
        backtrace=False,
        diagnose=False,
        **log_config,
    )
    logger.add(
        str(path_conf.LOG_DIR / settings.LOG_ERROR_FILENAME),
        level=settings.LOG_ERROR_FILE_LEVEL,
        filter=lambda record: record['level'].no >= 30,
        backtrace=True,
        diagnose=True,
        **log_config,
    )


log = logger
